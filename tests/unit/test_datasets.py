"""Unit tests for the sample dataset definitions."""

import pytest
import pandas as pd
from datetime import date, datetime
from decimal import Decimal
from demohub.datasets import DATASETS, get_dataset, list_datasets
from demohub.datasets.sales_db import VALID_SALES_STAGES


class TestRegistry:
    """Test dataset lookup."""

    def test_list_datasets(self):
        """Test every demo database is registered."""
        assert list_datasets() == ["iot_db", "medtech_db", "sales_db"]

    def test_get_dataset_case_insensitive(self):
        """Test names are case-insensitive."""
        assert get_dataset("SALES_DB") is DATASETS["sales_db"]

    def test_unknown_dataset(self):
        """Test unknown names raise."""
        with pytest.raises(ValueError, match="Unknown dataset"):
            get_dataset("orders_db")


class TestSalesDataset:
    """Test the sales_db model and seed rows."""

    def test_tables_in_dependency_order(self, sales_dataset):
        """Test parents come before children."""
        names = sales_dataset.table_names
        assert set(names) == {"customer", "buyer", "client", "opportunities"}
        assert names.index("customer") < names.index("buyer") < names.index("client")
        assert names.index("buyer") < names.index("opportunities")

    def test_ten_rows_per_table(self, sales_dataset):
        """Test seed row counts."""
        for name in sales_dataset.table_names:
            assert len(sales_dataset.rows(name)) == 10

    def test_null_and_empty_string_preserved(self, sales_dataset):
        """Test NULL and '' stay distinct."""
        rows = {row["customerid"]: row for row in sales_dataset.rows("customer")}
        assert rows[6]["firstname"] is None
        assert rows[7]["homelocation"] is None
        assert rows[8]["zipcode"] == ""

    def test_values_typed(self, sales_dataset):
        """Test dates, timestamps and amounts are converted."""
        client = sales_dataset.rows("client")[0]
        assert client["contractstartdate"] == date(2024, 1, 15)
        assert client["contractvalue"] == Decimal("50000")
        assert client["loaddate"] == datetime(2024, 1, 15, 10, 30)

    def test_seeded_defects(self, sales_dataset):
        """Test the seeded defects are present."""
        opportunities = {row["opportunityid"]: row for row in sales_dataset.rows("opportunities")}
        assert opportunities[1006]["salesstage"] not in VALID_SALES_STAGES
        assert opportunities[1010]["amount"] < 0
        assert opportunities[1007]["expectedclosedate"] is None
        clients = {row["clientid"]: row for row in sales_dataset.rows("client")}
        assert clients[205]["contractvalue"] is None
        assert clients[206]["buyerid"] is None

    def test_comments(self, sales_dataset):
        """Test table and column comments are declared."""
        customer = sales_dataset.table("Customer")
        assert customer.comment.startswith("Core customer entity")
        assert customer.c.email.comment == "Primary contact method and unique identifier"

    def test_unknown_table(self, sales_dataset):
        """Test unknown table names raise."""
        with pytest.raises(ValueError, match="Unknown table"):
            sales_dataset.table("orders")

    def test_frame_dtypes(self, sales_dataset):
        """Test the seed frame uses pandas dtypes."""
        df = sales_dataset.frame("opportunities")
        assert len(df) == 10
        assert pd.api.types.is_datetime64_any_dtype(df["expectedclosedate"])
        assert pd.api.types.is_float_dtype(df["amount"])
        assert df["amount"].isna().sum() == 1


class TestMedtechDataset:
    """Test the medtech_db model and seed rows."""

    def test_row_counts(self, medtech_dataset):
        """Test devices and complaints seed rows."""
        assert len(medtech_dataset.rows("devices")) == 54
        assert len(medtech_dataset.rows("customer_complaints")) == 54

    def test_generated_keys(self, medtech_dataset):
        """Test auto-increment keys are numbered like the database does."""
        rows = medtech_dataset.rows("devices", generate_keys=True)
        assert [row["deviceid"] for row in rows] == list(range(1, 55))
        assert "deviceid" not in medtech_dataset.rows("devices")[0]

    def test_complaints_reference_devices(self, medtech_dataset):
        """Test complaint device ids exist."""
        device_ids = {row["deviceid"] for row in medtech_dataset.rows("devices", generate_keys=True)}
        complaint_ids = {row["deviceid"] for row in medtech_dataset.rows("customer_complaints")}
        assert complaint_ids <= device_ids


class TestIotDataset:
    """Test the iot_db model."""

    def test_no_seed_rows(self, iot_dataset):
        """Test sensor data comes from the stage."""
        assert iot_dataset.rows("sensor_data") == []
        assert iot_dataset.stage_paths == {"sensor_data": "iot/sensor_data/"}

    def test_sensor_columns(self, iot_dataset):
        """Test declared sensor columns."""
        columns = [col.name for col in iot_dataset.table("sensor_data").columns]
        assert columns[:3] == ["unit_number", "time_in_cycles", "setting_1"]
        assert "t50" in columns and "w32" in columns
        assert columns[-1] == "created_at"


class TestRenderDdl:
    """Test DDL rendering."""

    def test_postgresql(self, sales_dataset):
        """Test CREATE TABLE statements for every table."""
        ddl = sales_dataset.render_ddl()
        assert ddl.count("CREATE TABLE") == 4
        assert ddl.index("CREATE TABLE customer") < ddl.index("CREATE TABLE opportunities")
        assert "REFERENCES customer (customerid)" in ddl

    def test_sqlite(self, medtech_dataset):
        """Test SQLite dialect."""
        ddl = medtech_dataset.render_ddl("sqlite")
        assert "CREATE TABLE devices" in ddl
        assert "CREATE TABLE customer_complaints" in ddl

    def test_unsupported_dialect(self, sales_dataset):
        """Test unknown dialects raise."""
        with pytest.raises(ValueError, match="Unsupported dialect"):
            sales_dataset.render_ddl("oracle")
