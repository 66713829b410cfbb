"""Monitoring reports over persisted data quality measurements."""

from typing import Optional

import pandas as pd


def _filter(results: pd.DataFrame, database: Optional[str] = None, table: Optional[str] = None) -> pd.DataFrame:
    df = results
    if database:
        df = df[df["table_database"].str.upper() == database.upper()]
    if table:
        df = df[df["table_name"].str.upper() == table.upper()]
    return df


def latest_results(results: pd.DataFrame, database: Optional[str] = None) -> pd.DataFrame:
    """All measurements, optionally for one database, most recent first."""
    return _filter(results, database).sort_values("measurement_time", ascending=False).reset_index(drop=True)


def issue_summary(results: pd.DataFrame, database: Optional[str] = None) -> pd.DataFrame:
    """
    Measurements and failures per table and metric.

    Returns:
        DataFrame with table_name, metric_name, num_issues, num_failures.
    """
    df = _filter(results, database)
    if df.empty:
        return pd.DataFrame(columns=["table_name", "metric_name", "num_issues", "num_failures"])
    failed = df["passed"].map(lambda value: value is False or value == 0)
    summary = (
        df.assign(failed=failed.astype(int))
        .groupby(["table_name", "metric_name"], as_index=False)
        .agg(num_issues=("metric_name", "size"), num_failures=("failed", "sum"))
    )
    return summary.sort_values(["table_name", "metric_name"]).reset_index(drop=True)


def metric_detail(
    results: pd.DataFrame,
    database: str,
    table: str,
    metric: str
) -> pd.DataFrame:
    """Every measurement of one metric on one table."""
    df = _filter(results, database, table)
    df = df[df["metric_name"].str.upper() == metric.upper()]
    return latest_results(df)


def daily_trends(results: pd.DataFrame, database: Optional[str] = None) -> pd.DataFrame:
    """
    Sum of measured values per day, table and metric.

    Returns:
        DataFrame with execution_date, table_name, metric_name, measure_counts.
    """
    df = _filter(results, database)
    if df.empty:
        return pd.DataFrame(columns=["execution_date", "table_name", "metric_name", "measure_counts"])
    df = df.assign(execution_date=pd.to_datetime(df["measurement_time"]).dt.date)
    trends = (
        df.groupby(["execution_date", "table_name", "metric_name"], as_index=False)
        .agg(measure_counts=("value", "sum"))
    )
    return trends.sort_values("execution_date").reset_index(drop=True)
