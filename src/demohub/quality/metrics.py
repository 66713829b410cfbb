"""
Data metric functions.

Portable equivalents of the warehouse's system metric functions
(NULL_COUNT, UNIQUE_COUNT, DUPLICATE_COUNT, FRESHNESS) and of the custom
metrics defined in the data quality demo. Each metric takes the argument
column(s) as pandas objects and returns a number, or None where the
warehouse metric would return NULL.
"""

import re
from datetime import datetime
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple, Union

import pandas as pd

from ..config import config
from ..datasets.sales_db import VALID_SALES_STAGES

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

Timestamp = Union[datetime, pd.Timestamp, str]


def _as_series(values) -> pd.Series:
    return values if isinstance(values, pd.Series) else pd.Series(list(values), dtype=object)


def _localize(values: pd.Series, tz: str) -> pd.Series:
    stamps = pd.to_datetime(values, errors="coerce")
    if stamps.dt.tz is None:
        return stamps.dt.tz_localize(tz, ambiguous="NaT", nonexistent="shift_forward")
    return stamps.dt.tz_convert(tz)


def _now(now: Optional[Timestamp], tz: str) -> pd.Timestamp:
    if now is None:
        return pd.Timestamp.now(tz=tz)
    now = pd.Timestamp(now)
    return now.tz_localize(tz) if now.tzinfo is None else now.tz_convert(tz)


def null_count(values) -> int:
    """Number of NULL values."""
    return int(_as_series(values).isna().sum())


def unique_count(values) -> int:
    """Number of distinct non-NULL values."""
    return int(_as_series(values).dropna().nunique())


def duplicate_count(values) -> int:
    """Number of non-NULL values that repeat an earlier value."""
    present = _as_series(values).dropna()
    return int(present.duplicated().sum())


def freshness(values, now: Optional[Timestamp] = None, tz: Optional[str] = None) -> Optional[int]:
    """
    Seconds elapsed between the most recent timestamp and ``now``.

    Naive timestamps are read in the session timezone.
    """
    tz = tz or config.quality.timezone
    latest = _localize(_as_series(values), tz).max()
    if pd.isna(latest):
        return None
    return int((_now(now, tz) - latest).total_seconds())


def data_freshness_hour(values, now: Optional[Timestamp] = None, tz: Optional[str] = None) -> Optional[int]:
    """
    Minutes elapsed since the most recent timestamp, despite the name.

    Counts minute boundaries crossed, like ``TIMEDIFF(minute, ...)``: both
    ends are floored to the minute before subtracting.
    """
    tz = tz or config.quality.timezone
    latest = _localize(_as_series(values), tz).max()
    if pd.isna(latest):
        return None
    elapsed = _now(now, tz).floor("min") - latest.floor("min")
    return int(elapsed.total_seconds() // 60)


def invalid_email_count(values) -> int:
    """Number of non-NULL values that are not a well-formed email address."""
    present = _as_series(values).dropna().astype(str)
    return int(sum(1 for value in present if not EMAIL_PATTERN.fullmatch(value)))


def invalid_stage_count(values, valid_stages: Iterable[str] = VALID_SALES_STAGES) -> Optional[int]:
    """
    Number of rows whose sales stage is not a valid stage.

    NULL stages count as invalid. Returns None for an empty column.
    """
    series = _as_series(values)
    if series.empty:
        return None
    valid = set(valid_stages)
    return int(sum(1 for value in series if pd.isna(value) or value not in valid))


def composite_duplicate_count(frame: pd.DataFrame, columns: Optional[Sequence[str]] = None) -> int:
    """Number of value combinations, NULLs included, occurring more than once."""
    columns = list(columns or frame.columns)
    if frame.empty:
        return 0
    sizes = frame.groupby(columns, dropna=False).size()
    return int((sizes > 1).sum())


# name -> (function, number of argument columns, takes timestamps)
METRICS: Dict[str, Tuple[Callable, int, bool]] = {
    "null_count": (null_count, 1, False),
    "unique_count": (unique_count, 1, False),
    "duplicate_count": (duplicate_count, 1, False),
    "freshness": (freshness, 1, True),
    "data_freshness_hour": (data_freshness_hour, 1, True),
    "invalid_email_count": (invalid_email_count, 1, False),
    "invalid_stage_count": (invalid_stage_count, 1, False),
    "composite_duplicate_count": (composite_duplicate_count, 2, False),
}


def get_metric(name: str) -> Tuple[Callable, int, bool]:
    """Look up a metric by case-insensitive name."""
    try:
        return METRICS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown metric '{name}', expected one of {sorted(METRICS)}") from None


def evaluate_metric(
    name: str,
    frame: pd.DataFrame,
    columns: Sequence[str],
    now: Optional[Timestamp] = None,
    tz: Optional[str] = None
) -> Optional[int]:
    """
    Evaluate a metric on the given columns of a table frame.

    Args:
        name: Metric name
        frame: Table contents
        columns: Argument column names (case-insensitive)
        now: Measurement time for time based metrics
        tz: Session timezone for time based metrics

    Returns:
        Metric value.
    """
    func, arity, timed = get_metric(name)
    if len(columns) != arity:
        raise ValueError(f"Metric {name} takes {arity} column(s), got {len(columns)}")

    by_lower = {str(col).lower(): col for col in frame.columns}
    missing = [col for col in columns if col.lower() not in by_lower]
    if missing:
        raise ValueError(f"Columns not found for metric {name}: {missing}")
    resolved = [by_lower[col.lower()] for col in columns]

    if arity > 1:
        return func(frame[resolved], resolved)
    if timed:
        return func(frame[resolved[0]], now=now, tz=tz)
    return func(frame[resolved[0]])
