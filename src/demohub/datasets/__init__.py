"""
Sample datasets

Demo databases shared across the catalog:
- sales_db: customer lifecycle and sales pipeline with seeded defects
- medtech_db: medical device lifecycle and complaints
- iot_db: turbofan sensor telemetry loaded from the public stage
"""

from typing import List

from .base import SampleDataset
from . import iot_db, medtech_db, sales_db

DATASETS = {
    sales_db.dataset.name: sales_db.dataset,
    iot_db.dataset.name: iot_db.dataset,
    medtech_db.dataset.name: medtech_db.dataset,
}


def get_dataset(name: str) -> SampleDataset:
    """Look up a dataset by name."""
    try:
        return DATASETS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown dataset '{name}', expected one of {list_datasets()}") from None


def list_datasets() -> List[str]:
    return sorted(DATASETS)


__all__ = [
    "SampleDataset",
    "DATASETS",
    "get_dataset",
    "list_datasets",
]
