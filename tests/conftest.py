"""Pytest configuration and fixtures."""

import pytest
import pandas as pd

from demohub.datasets import get_dataset
from demohub.warehouse.connector import WarehouseConnector


@pytest.fixture
def sqlite_url(tmp_path):
    """URL of a file-backed SQLite database in the test directory."""
    return f"sqlite:///{tmp_path / 'warehouse.db'}"


@pytest.fixture
def connector(sqlite_url):
    """Warehouse connector over a fresh SQLite database."""
    connector = WarehouseConnector(connection_string=sqlite_url)
    yield connector
    connector.close()


@pytest.fixture
def sales_dataset():
    return get_dataset("sales_db")


@pytest.fixture
def medtech_dataset():
    return get_dataset("medtech_db")


@pytest.fixture
def iot_dataset():
    return get_dataset("iot_db")


@pytest.fixture
def customers(sales_dataset):
    """Seeded sales_db customer table."""
    return sales_dataset.frame("customer")


@pytest.fixture
def opportunities(sales_dataset):
    """Seeded sales_db opportunities table."""
    return sales_dataset.frame("opportunities")


@pytest.fixture
def sample_sensor_data():
    """Three cycles of readings for two units."""
    data = {
        'unit_number': [1, 1, 1, 2, 2, 2],
        'time_in_cycles': [1, 2, 3, 1, 2, 3],
        'setting_1': [-0.0007, 0.0019, -0.0043, 0.0023, -0.0027, 0.0003],
        'setting_2': [-0.0004, -0.0003, 0.0003, 0.0002, 0.0003, 0.0001],
        'tra': [100.0] * 6,
        't2': [518.67] * 6,
        't24': [641.82, 642.15, 642.35, 642.02, 641.71, 642.46],
        't30': [1589.70, 1591.82, 1587.99, 1582.79, 1582.85, 1584.47],
        't50': [1400.60, 1403.14, 1404.20, 1401.87, 1406.22, 1398.37],
        'p2': [14.62] * 6,
        'p15': [21.61] * 6,
        'p30': [554.36, 553.75, 554.26, 554.45, 554.00, 553.94],
        'nf': [2388.06, 2388.04, 2388.08, 2388.11, 2388.06, 2388.02],
        'nc': [9046.19, 9044.07, 9052.94, 9055.15, 9049.48, 9059.13],
        'epr': [1.3] * 6,
        'ps30': [47.47, 47.49, 47.27, 47.13, 47.28, 47.16],
        'phi': [521.66, 522.28, 522.42, 522.86, 522.19, 521.68],
        'nrf': [2388.02, 2388.07, 2388.03, 2388.08, 2388.04, 2388.03],
        'nrc': [8138.62, 8131.49, 8133.23, 8133.83, 8133.80, 8132.85],
        'bpr': [8.4195, 8.4318, 8.4178, 8.3682, 8.4294, 8.4108],
        'farb': [0.03] * 6,
        'htbleed': [392, 392, 390, 392, 393, 391],
        'nf_dmd': [2388] * 6,
        'pcnfr_dmd': [100.0] * 6,
        'w31': [39.06, 39.00, 38.95, 38.88, 38.90, 38.98],
        'w32': [23.4190, 23.4236, 23.3442, 23.3739, 23.4044, 23.3669],
    }
    return pd.DataFrame(data)


@pytest.fixture
def stage_dir(tmp_path, sample_sensor_data):
    """Local stage directory holding the sensor data as CSV."""
    path = tmp_path / "stage" / "iot" / "sensor_data"
    path.mkdir(parents=True)
    # staged files carry upper case headers
    frame = sample_sensor_data.rename(columns=lambda col: col.upper())
    frame.to_csv(path / "train_FD001.csv", index=False)
    return tmp_path / "stage"


@pytest.fixture
def mock_aws_credentials(monkeypatch):
    """Mock AWS credentials for testing."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')
