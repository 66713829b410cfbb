"""
Data quality monitoring for the sample datasets.

Metric attachments name a table, a metric and the argument columns, in the
same spirit as attaching a data metric function to a table. The monitor
evaluates them against the current table contents and can persist the
measurements to a results table for the monitoring reports.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd
from pydantic import BaseModel, Field, field_validator

from ..config import config
from ..datasets.base import SampleDataset
from ..utils.logger import get_logger
from ..warehouse.connector import WarehouseConnector
from .metrics import evaluate_metric, get_metric

logger = get_logger(__name__)


class MetricAttachment(BaseModel):
    """A metric attached to table column(s)."""

    table: str
    metric: str
    columns: List[str]
    threshold: Optional[float] = Field(
        default=None, description="Largest acceptable value; None only records the measurement"
    )

    @field_validator("metric")
    @classmethod
    def metric_must_exist(cls, value: str) -> str:
        get_metric(value)
        return value.lower()


class MetricResult(BaseModel):
    """One measurement, shaped like a row of the monitoring results table."""

    measurement_time: datetime
    table_database: str
    table_name: str
    metric_name: str
    argument_names: str
    value: Optional[float] = None
    passed: Optional[bool] = None
    error_message: Optional[str] = None


DEFAULT_ATTACHMENTS: Dict[str, List[MetricAttachment]] = {
    "sales_db": [
        MetricAttachment(table="customer", metric="duplicate_count", columns=["email"], threshold=0),
        MetricAttachment(table="customer", metric="null_count", columns=["email"], threshold=0),
        MetricAttachment(table="customer", metric="unique_count", columns=["email"]),
        MetricAttachment(table="customer", metric="freshness", columns=["loaddate"]),
        MetricAttachment(table="customer", metric="null_count", columns=["firstname"], threshold=0),
        MetricAttachment(table="customer", metric="null_count", columns=["homelocation"], threshold=0),
        MetricAttachment(table="customer", metric="invalid_email_count", columns=["email"], threshold=0),
        MetricAttachment(
            table="customer", metric="composite_duplicate_count",
            columns=["firstname", "lastname"], threshold=0,
        ),
        MetricAttachment(table="customer", metric="data_freshness_hour", columns=["loaddate"]),
        MetricAttachment(table="opportunities", metric="null_count", columns=["customerid"], threshold=0),
        MetricAttachment(table="opportunities", metric="null_count", columns=["expectedclosedate"], threshold=0),
        MetricAttachment(table="opportunities", metric="null_count", columns=["amount"], threshold=0),
        MetricAttachment(table="opportunities", metric="invalid_stage_count", columns=["salesstage"], threshold=0),
        MetricAttachment(table="opportunities", metric="duplicate_count", columns=["opportunityid"], threshold=0),
    ],
    "medtech_db": [
        MetricAttachment(table="devices", metric="duplicate_count", columns=["serialnumber"], threshold=0),
        MetricAttachment(table="devices", metric="unique_count", columns=["devicetype"]),
        MetricAttachment(table="customer_complaints", metric="null_count", columns=["deviceid"], threshold=0),
        MetricAttachment(
            table="customer_complaints", metric="composite_duplicate_count",
            columns=["deviceid", "customername"], threshold=0,
        ),
    ],
    "iot_db": [
        MetricAttachment(table="sensor_data", metric="null_count", columns=["unit_number"], threshold=0),
        MetricAttachment(
            table="sensor_data", metric="composite_duplicate_count",
            columns=["unit_number", "time_in_cycles"], threshold=0,
        ),
        MetricAttachment(table="sensor_data", metric="freshness", columns=["created_at"]),
    ],
}


def load_attachments(path: Union[str, Path]) -> List[MetricAttachment]:
    """
    Load metric attachments from a JSON file.

    The file holds a list of objects with ``table``, ``metric``, ``columns``
    and an optional ``threshold``.
    """
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of attachments in {path}")
    attachments = [MetricAttachment(**item) for item in data]
    logger.info(f"Loaded {len(attachments)} metric attachments from {path}")
    return attachments


class DataQualityMonitor:
    """Evaluate metric attachments against warehouse tables."""

    def __init__(
        self,
        connector: Optional[WarehouseConnector] = None,
        timezone: Optional[str] = None
    ):
        """
        Args:
            connector: Warehouse connector (creates new if None)
            timezone: Session timezone for freshness metrics. If None, uses config.
        """
        self.connector = connector or WarehouseConnector()
        self.timezone = timezone or config.quality.timezone

    def evaluate(
        self,
        attachment: MetricAttachment,
        frame: pd.DataFrame,
        database: str,
        measured_at: Optional[pd.Timestamp] = None
    ) -> MetricResult:
        """
        Evaluate one attachment on an in-memory table frame.

        Failures are captured on the result instead of raised, so one broken
        attachment does not abort a run.
        """
        measured_at = measured_at if measured_at is not None else pd.Timestamp.now(tz=self.timezone)
        result = MetricResult(
            measurement_time=_wall_time(measured_at),
            table_database=database.upper(),
            table_name=attachment.table.upper(),
            metric_name=attachment.metric.upper(),
            argument_names=", ".join(col.upper() for col in attachment.columns),
        )
        try:
            value = evaluate_metric(
                attachment.metric, frame, attachment.columns, now=measured_at, tz=self.timezone
            )
        except Exception as e:
            logger.error(f"Metric {attachment.metric} on {attachment.table} failed: {e}")
            result.error_message = str(e)
            result.passed = False
            return result

        result.value = None if value is None else float(value)
        if attachment.threshold is not None:
            result.passed = value is not None and value <= attachment.threshold
        return result

    def run(
        self,
        dataset: SampleDataset,
        attachments: Optional[List[MetricAttachment]] = None,
        now: Optional[pd.Timestamp] = None
    ) -> List[MetricResult]:
        """
        Evaluate attachments for a dataset against the warehouse tables.

        Args:
            dataset: Dataset whose tables are measured
            attachments: Attachments to evaluate. If None, uses the defaults.
            now: Measurement time. If None, uses the current time.

        Returns:
            One result per attachment.
        """
        attachments = attachments if attachments is not None else DEFAULT_ATTACHMENTS.get(dataset.name, [])
        measured_at = pd.Timestamp(now) if now is not None else pd.Timestamp.now(tz=self.timezone)
        if measured_at.tzinfo is None:
            measured_at = measured_at.tz_localize(self.timezone)

        logger.info(f"Evaluating {len(attachments)} metrics on {dataset.name}")

        frames: Dict[str, pd.DataFrame] = {}
        results = []
        for attachment in attachments:
            key = attachment.table.lower()
            if key not in frames:
                try:
                    frames[key] = self.connector.read_table(dataset.table(attachment.table).name)
                except Exception as e:
                    logger.error(f"Could not read {attachment.table}: {e}")
                    frames[key] = None
            frame = frames[key]
            if frame is None:
                results.append(MetricResult(
                    measurement_time=_wall_time(measured_at),
                    table_database=dataset.name.upper(),
                    table_name=attachment.table.upper(),
                    metric_name=attachment.metric.upper(),
                    argument_names=", ".join(col.upper() for col in attachment.columns),
                    passed=False,
                    error_message=f"Table {attachment.table} could not be read",
                ))
                continue
            results.append(self.evaluate(attachment, frame, dataset.name, measured_at))

        failed = sum(1 for r in results if r.passed is False)
        logger.info(f"Measured {len(results)} metrics on {dataset.name}: {failed} failing")
        return results

    def persist(self, results: List[MetricResult], table_name: Optional[str] = None) -> None:
        """Append results to the monitoring results table."""
        table_name = table_name or config.quality.results_table
        if not results:
            logger.info("No results to persist")
            return
        df = results_frame(results)
        self.connector.write_dataframe(df, table_name, if_exists="append")

    def load_results(self, table_name: Optional[str] = None) -> pd.DataFrame:
        """Read every persisted measurement."""
        table_name = table_name or config.quality.results_table
        df = self.connector.read_table(table_name)
        df["measurement_time"] = pd.to_datetime(df["measurement_time"])
        return df


def _wall_time(stamp: pd.Timestamp) -> datetime:
    """Naive session-local time of a measurement."""
    stamp = pd.Timestamp(stamp)
    return (stamp.tz_localize(None) if stamp.tzinfo else stamp).to_pydatetime()


def results_frame(results: List[MetricResult]) -> pd.DataFrame:
    """Results as a DataFrame with the monitoring table columns."""
    return pd.DataFrame(
        [r.model_dump() for r in results],
        columns=list(MetricResult.model_fields),
    )
