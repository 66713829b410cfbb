"""
Integration tests for dataset installation.

Datasets are installed into a file-backed SQLite database and read back
through the same connector the CLI uses.
"""

import pytest
from unittest.mock import patch
from demohub.analytics import iot, sales
from demohub.datasets.loader import DatasetLoader


@pytest.fixture
def loader(connector):
    return DatasetLoader(connector)


class TestInstall:
    """Test installing datasets."""

    def test_install_sales(self, loader, sales_dataset):
        """Test every sales table is created and seeded."""
        stats = loader.install(sales_dataset)

        assert stats == {"customer": 10, "buyer": 10, "client": 10, "opportunities": 10}
        assert loader.validate(sales_dataset) == stats
        assert loader.missing_tables(sales_dataset) == []

    def test_install_is_repeatable(self, loader, sales_dataset):
        """Test re-installing replaces the tables."""
        loader.install(sales_dataset)
        loader.install(sales_dataset)
        assert loader.validate(sales_dataset)["customer"] == 10

    def test_seed_values_survive(self, loader, connector, sales_dataset):
        """Test NULL and empty string survive the round trip."""
        loader.install(sales_dataset)

        rows = connector.execute_query(
            "SELECT customerid, firstname, zipcode FROM customer WHERE customerid IN (6, 8) ORDER BY customerid"
        )

        assert rows == [
            {"customerid": 6, "firstname": None, "zipcode": "87654"},
            {"customerid": 8, "firstname": "Henry", "zipcode": ""},
        ]

    def test_install_medtech_generates_keys(self, loader, connector, medtech_dataset):
        """Test auto-increment keys are assigned by the database."""
        stats = loader.install(medtech_dataset)

        assert stats == {"devices": 54, "customer_complaints": 54}
        rows = connector.execute_query("SELECT MIN(deviceid) AS lo, MAX(deviceid) AS hi FROM devices")
        assert rows == [{"lo": 1, "hi": 54}]

    def test_install_iot_from_stage(self, loader, connector, iot_dataset, stage_dir):
        """Test sensor data is loaded from staged CSV files."""
        stats = loader.install(iot_dataset, stage_dir=stage_dir)

        assert stats == {"sensor_data": 6}
        df = connector.read_table("sensor_data")
        assert df["created_at"].notna().all()
        assert iot.time_since_maintenance(df, 2) == 3

    def test_failed_install_rolls_back(self, loader, connector, sales_dataset):
        """Test a failure rolls back every insert and is re-raised."""
        original = connector.insert_rows

        def fail_on_buyer(table, rows, conn=None):
            if table.name == "buyer":
                raise RuntimeError("insert failed")
            return original(table, rows, conn=conn)

        with patch.object(connector, "insert_rows", side_effect=fail_on_buyer):
            with pytest.raises(RuntimeError, match="insert failed"):
                loader.install(sales_dataset)

        assert connector.execute_query("SELECT COUNT(*) AS n FROM customer") == [{"n": 0}]


class TestReset:
    """Test resetting datasets."""

    def test_truncate_keeps_tables(self, loader, sales_dataset):
        """Test rows are deleted but tables kept."""
        loader.install(sales_dataset)

        loader.truncate(sales_dataset)

        assert set(loader.validate(sales_dataset).values()) == {0}

    def test_reset_drops_tables(self, loader, sales_dataset):
        """Test every table is dropped."""
        loader.install(sales_dataset)

        loader.reset(sales_dataset)

        assert sorted(loader.missing_tables(sales_dataset)) == ["buyer", "client", "customer", "opportunities"]


class TestPipelineMaintenance:
    """Test the pipeline maintenance operations against installed data."""

    def test_update_opportunity_stage(self, loader, connector, sales_dataset):
        """Test the invalid stage can be corrected."""
        loader.install(sales_dataset)

        assert sales.update_opportunity_stage(connector, 1006, "Proposal") == "Success"

        rows = connector.execute_query("SELECT salesstage FROM opportunities WHERE opportunityid = 1006")
        assert rows == [{"salesstage": "Proposal"}]

    def test_update_rejects_invalid_stage(self, loader, connector, sales_dataset):
        """Test invalid stages are rejected before touching the table."""
        loader.install(sales_dataset)

        with pytest.raises(ValueError, match="Invalid sales stage"):
            sales.update_opportunity_stage(connector, 1003, "Won")

        rows = connector.execute_query("SELECT salesstage FROM opportunities WHERE opportunityid = 1003")
        assert rows == [{"salesstage": "Qualification"}]

    def test_assign_buyer_to_customer(self, loader, connector, sales_dataset):
        """Test the buyer missing its customer link is linked."""
        loader.install(sales_dataset)

        assert sales.assign_buyer_to_customer(connector, 3, 103) == "Success"

        rows = connector.execute_query("SELECT customerid FROM buyer WHERE buyerid = 103")
        assert rows == [{"customerid": 3}]

    def test_analytics_over_installed_tables(self, loader, connector, sales_dataset):
        """Test views computed from tables read back from the database."""
        loader.install(sales_dataset)
        customers = connector.read_table("customer")
        opportunities = connector.read_table("opportunities")

        assert sales.categorize_customer(customers, opportunities, 7) == "High Value"
        assert sales.pipeline_analysis(opportunities)["salesstage"].iloc[0] == "Closed Lost"
