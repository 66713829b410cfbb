"""Equipment monitoring queries over the iot_db sensor readings."""

from typing import Dict, Optional

import pandas as pd

LATEST_READING_COLUMNS = [
    "unit_number", "time_in_cycles",
    "t2", "t24", "t30", "t50",
    "p2", "p15", "p30",
    "nf", "nc",
    "created_at",
]


def _unit_readings(sensor_data: pd.DataFrame, unit_id: int) -> pd.DataFrame:
    return sensor_data[sensor_data["unit_number"] == unit_id]


def latest_readings(sensor_data: pd.DataFrame) -> pd.DataFrame:
    """Most recent reading (highest cycle) of every unit."""
    if sensor_data.empty:
        return pd.DataFrame(columns=LATEST_READING_COLUMNS)
    latest = sensor_data.sort_values(
        ["unit_number", "time_in_cycles"], ascending=[True, False]
    ).drop_duplicates("unit_number", keep="first")
    return latest[LATEST_READING_COLUMNS].reset_index(drop=True)


def performance_metrics(sensor_data: pd.DataFrame) -> pd.DataFrame:
    """
    Speed, temperature and pressure summary per unit.

    Returns:
        DataFrame with unit_number, avg_fan_speed, avg_core_speed,
        max_temperature, max_pressure, total_readings.
    """
    return (
        sensor_data.groupby("unit_number", as_index=False)
        .agg(
            avg_fan_speed=("nf", "mean"),
            avg_core_speed=("nc", "mean"),
            max_temperature=("t50", "max"),
            max_pressure=("p30", "max"),
            total_readings=("unit_number", "size"),
        )
    )


def time_since_maintenance(sensor_data: pd.DataFrame, unit_id: int) -> Optional[int]:
    """Cycles run by a unit, or None when it has no readings."""
    cycles = _unit_readings(sensor_data, unit_id)["time_in_cycles"]
    return None if cycles.empty else int(cycles.max())


def sensor_average(sensor_data: pd.DataFrame, unit_id: int, cycles_back: int) -> Dict[str, Optional[float]]:
    """
    Average temperature, pressure and fan speed over a unit's recent cycles.

    Args:
        sensor_data: Sensor readings
        unit_id: Equipment unit
        cycles_back: Number of cycles before the latest one to include

    Returns:
        Dictionary with avg_temp (T50), avg_pressure (P30) and avg_fan_speed (Nf).
    """
    readings = _unit_readings(sensor_data, unit_id)
    if not readings.empty:
        readings = readings[readings["time_in_cycles"] >= readings["time_in_cycles"].max() - cycles_back]

    def mean(column: str) -> Optional[float]:
        value = readings[column].mean()
        return None if pd.isna(value) else float(value)

    return {
        "avg_temp": mean("t50"),
        "avg_pressure": mean("p30"),
        "avg_fan_speed": mean("nf"),
    }
