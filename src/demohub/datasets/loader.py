"""Install, validate and reset the sample datasets in a warehouse."""

from pathlib import Path
from typing import Dict, List, Optional, Union

from sqlalchemy import func, select

from ..utils.logger import get_logger
from ..warehouse.connector import WarehouseConnector
from .base import SampleDataset
from .stage import (
    fetch_staged_files,
    frame_to_records,
    local_staged_files,
    match_columns,
    read_staged_csv,
)

logger = get_logger(__name__)


class DatasetLoader:
    """Load a sample dataset into the target warehouse."""

    def __init__(self, connector: Optional[WarehouseConnector] = None):
        """
        Initialize dataset loader.

        Args:
            connector: Warehouse connector (creates new if None)
        """
        self.connector = connector or WarehouseConnector()
        self.stats: Dict[str, int] = {}

    def install(
        self,
        dataset: SampleDataset,
        drop_existing: bool = True,
        stage_dir: Optional[Union[str, Path]] = None
    ) -> Dict[str, int]:
        """
        Create the dataset tables and load their rows.

        Seeded tables get their seed rows; staged tables are loaded from the
        files under their stage path (``stage_dir`` when given, otherwise the
        public stage). Everything runs in a single transaction.

        Args:
            dataset: Dataset to install
            drop_existing: Drop existing tables first (CREATE OR REPLACE)
            stage_dir: Local directory holding staged files

        Returns:
            Rows inserted per table.
        """
        logger.info(f"Installing dataset {dataset.name} ({len(dataset.tables)} tables)")
        self.stats = {}

        # Read staged files before touching the database
        staged = {}
        for table_name, prefix in dataset.stage_paths.items():
            paths = (
                local_staged_files(stage_dir, prefix)
                if stage_dir is not None
                else fetch_staged_files(prefix)
            )
            df = match_columns(read_staged_csv(paths), dataset.table(table_name))
            staged[table_name] = frame_to_records(df)

        engine = self.connector.engine
        with engine.connect() as conn:
            trans = conn.begin()
            try:
                if drop_existing:
                    dataset.metadata.drop_all(conn)
                dataset.metadata.create_all(conn)

                for table in dataset.tables:
                    rows = staged.get(table.name) or dataset.rows(table.name)
                    self.stats[table.name] = self.connector.insert_rows(table, rows, conn=conn)

                trans.commit()
                logger.info("Transaction committed successfully!")
            except Exception as e:
                logger.error(f"Error during install of {dataset.name}: {e}")
                logger.info("Rolling back transaction...")
                trans.rollback()
                raise

        counts = self.validate(dataset)
        for table_name, inserted in self.stats.items():
            if counts[table_name] != inserted:
                logger.warning(
                    f"{table_name}: inserted {inserted} rows but table holds {counts[table_name]}"
                )
        return dict(self.stats)

    def validate(self, dataset: SampleDataset) -> Dict[str, int]:
        """
        Count rows in every dataset table.

        Returns:
            Dictionary with table counts
        """
        logger.info(f"Validating {dataset.name}...")
        counts = {}
        with self.connector.engine.connect() as conn:
            for table in dataset.tables:
                counts[table.name] = conn.execute(select(func.count()).select_from(table)).scalar_one()
                logger.info(f"  {table.name}: {counts[table.name]:,} records")
        return counts

    def missing_tables(self, dataset: SampleDataset) -> List[str]:
        return [name for name in dataset.table_names if not self.connector.table_exists(name)]

    def truncate(self, dataset: SampleDataset) -> None:
        """Delete all rows but keep the tables (children first)."""
        with self.connector.engine.begin() as conn:
            for table in reversed(dataset.tables):
                conn.execute(table.delete())
                logger.info(f"Cleared {table.name}")

    def reset(self, dataset: SampleDataset) -> None:
        """Drop every dataset table."""
        with self.connector.engine.begin() as conn:
            dataset.metadata.drop_all(conn)
        logger.info(f"Dropped tables of {dataset.name}: {', '.join(reversed(dataset.table_names))}")

    def print_summary(self, dataset: SampleDataset) -> None:
        """Print summary of the last install."""
        print("\n" + "=" * 80)
        print(f"DATASET LOAD SUMMARY: {dataset.name}")
        print("=" * 80)
        for table_name, inserted in self.stats.items():
            print(f"{table_name:<24}{inserted:>8,} records inserted")
        for table_name, issues in dataset.known_issues.items():
            print(f"{table_name:<24}known issues: {', '.join(issues)}")
        print("=" * 80 + "\n")
