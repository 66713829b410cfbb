"""Unit tests for IoT equipment analytics."""

import pytest
import pandas as pd
from demohub.analytics.iot import (
    latest_readings,
    performance_metrics,
    time_since_maintenance,
    sensor_average,
    LATEST_READING_COLUMNS,
)


class TestLatestReadings:
    """Test latest_readings."""

    def test_one_row_per_unit(self, sample_sensor_data):
        """Test the highest cycle of each unit is returned."""
        df = latest_readings(sample_sensor_data.assign(created_at=pd.Timestamp("2024-06-01")))

        assert list(df.columns) == LATEST_READING_COLUMNS
        assert df["unit_number"].tolist() == [1, 2]
        assert df["time_in_cycles"].tolist() == [3, 3]
        assert df["t50"].tolist() == [1404.20, 1398.37]

    def test_unordered_input(self, sample_sensor_data):
        """Test input order does not matter."""
        shuffled = sample_sensor_data.iloc[::-1].assign(created_at=None)
        df = latest_readings(shuffled)
        assert df["time_in_cycles"].tolist() == [3, 3]

    def test_empty(self):
        """Test no readings."""
        assert latest_readings(pd.DataFrame(columns=LATEST_READING_COLUMNS)).empty


class TestPerformanceMetrics:
    """Test performance_metrics."""

    def test_per_unit_summary(self, sample_sensor_data):
        """Test averages, maxima and counts per unit."""
        df = performance_metrics(sample_sensor_data).set_index("unit_number")

        assert df.loc[1, "total_readings"] == 3
        assert df.loc[1, "max_temperature"] == 1404.20
        assert df.loc[2, "max_pressure"] == 554.45
        assert df.loc[1, "avg_fan_speed"] == pytest.approx((2388.06 + 2388.04 + 2388.08) / 3)
        assert df.loc[2, "avg_core_speed"] == pytest.approx((9055.15 + 9049.48 + 9059.13) / 3)


class TestUnitFunctions:
    """Test per unit functions."""

    def test_time_since_maintenance(self, sample_sensor_data):
        """Test maximum cycle of a unit."""
        assert time_since_maintenance(sample_sensor_data, 1) == 3

    def test_time_since_maintenance_unknown_unit(self, sample_sensor_data):
        """Test unknown units give None."""
        assert time_since_maintenance(sample_sensor_data, 42) is None

    def test_sensor_average_recent_cycles(self, sample_sensor_data):
        """Test only the last cycles_back cycles are averaged."""
        result = sensor_average(sample_sensor_data, 1, 1)

        assert result["avg_temp"] == pytest.approx((1403.14 + 1404.20) / 2)
        assert result["avg_pressure"] == pytest.approx((553.75 + 554.26) / 2)
        assert result["avg_fan_speed"] == pytest.approx((2388.04 + 2388.08) / 2)

    def test_sensor_average_all_cycles(self, sample_sensor_data):
        """Test a large window covers every cycle."""
        result = sensor_average(sample_sensor_data, 2, 100)
        assert result["avg_temp"] == pytest.approx((1401.87 + 1406.22 + 1398.37) / 3)

    def test_sensor_average_unknown_unit(self, sample_sensor_data):
        """Test unknown units give empty averages."""
        assert sensor_average(sample_sensor_data, 42, 10) == {
            "avg_temp": None, "avg_pressure": None, "avg_fan_speed": None,
        }
