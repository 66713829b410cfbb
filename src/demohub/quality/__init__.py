"""
Data quality metrics and monitoring

- metrics: portable data metric functions
- checker: metric attachments, evaluation and persistence
- reports: monitoring summaries over persisted results
"""

from .checker import (
    DEFAULT_ATTACHMENTS,
    DataQualityMonitor,
    MetricAttachment,
    MetricResult,
    load_attachments,
    results_frame,
)
from .metrics import METRICS, evaluate_metric, get_metric

__all__ = [
    "DEFAULT_ATTACHMENTS",
    "DataQualityMonitor",
    "MetricAttachment",
    "MetricResult",
    "load_attachments",
    "results_frame",
    "METRICS",
    "evaluate_metric",
    "get_metric",
]
