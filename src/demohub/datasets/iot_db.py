"""
IoT sensor data model for predictive maintenance demos.

Turbofan engine telemetry: one row per unit and operating cycle with
operational settings and sensor readings. The table has no seed rows; it
is loaded from the CSV files staged under ``iot/sensor_data/``.
"""

from sqlalchemy import Column, DateTime, Float, Integer, MetaData, Table, func

from .base import SampleDataset

SENSOR_DATA_STAGE = "iot/sensor_data/"

metadata = MetaData()

sensor_data = Table(
    "sensor_data",
    metadata,
    # Equipment identification
    Column("unit_number", Integer, nullable=False, comment="Unique identifier for the equipment unit"),
    Column("time_in_cycles", Integer, nullable=False, comment="Operating time of the unit in cycles"),
    # Operational settings
    Column("setting_1", Float, comment="Operating setting 1 (e.g., temperature)"),
    Column("setting_2", Float, comment="Operating setting 2 (e.g., pressure)"),
    Column("tra", Float, comment="Sensor reading: Total runs to alarm"),
    # Temperature
    Column("t2", Float, comment="Sensor reading: Temperature at sensor 2"),
    Column("t24", Float, comment="Sensor reading: Temperature at sensor 24"),
    Column("t30", Float, comment="Sensor reading: Temperature at sensor 30"),
    Column("t50", Float, comment="Sensor reading: Temperature at sensor 50"),
    # Pressure
    Column("p2", Float, comment="Sensor reading: Pressure at sensor 2"),
    Column("p15", Float, comment="Sensor reading: Pressure at sensor 15"),
    Column("p30", Float, comment="Sensor reading: Pressure at sensor 30"),
    # Speed and efficiency
    Column("nf", Float, comment="Sensor reading: Fan speed"),
    Column("nc", Float, comment="Sensor reading: Core speed"),
    Column("epr", Float, comment="Sensor reading: Engine pressure ratio"),
    Column("ps30", Float, comment="Sensor reading: Static pressure at stage 30"),
    Column("phi", Float, comment="Sensor reading: Physical fan speed"),
    Column("nrf", Float, comment="Sensor reading: Fan efficiency"),
    Column("nrc", Float, comment="Sensor reading: Core efficiency"),
    # Performance ratios
    Column("bpr", Float, comment="Sensor reading: Bypass ratio"),
    Column("farb", Float, comment="Sensor reading: Burner fuel-air ratio"),
    Column("htbleed", Float, comment="Sensor reading: High-pressure turbine bleed"),
    # Demand
    Column("nf_dmd", Float, comment="Sensor reading: Demanded fan speed"),
    Column("pcnfr_dmd", Float, comment="Sensor reading: Demanded corrected fan speed"),
    # Coolant
    Column("w31", Float, comment="Sensor reading: HPT coolant bleed"),
    Column("w32", Float, comment="Sensor reading: LPT coolant bleed"),
    Column("created_at", DateTime(timezone=True), server_default=func.current_timestamp()),
    comment="Turbofan engine sensor readings per unit and operating cycle.",
)

dataset = SampleDataset(
    name="iot_db",
    description="Turbofan sensor telemetry for predictive maintenance, loaded from the public stage",
    metadata=metadata,
    stage_paths={"sensor_data": SENSOR_DATA_STAGE},
    known_issues={
        "sensor_data": [
            "Constant-valued sensors that carry no signal",
            "Units with different numbers of recorded cycles",
        ],
    },
)
