"""Sample dataset definition shared by every demo database."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd
from sqlalchemy import Date, DateTime, Integer, MetaData, Numeric, Table
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateTable

SeedRows = Tuple[Sequence[str], List[Tuple[Any, ...]]]

_DIALECTS = {
    "postgresql": postgresql.dialect,
    "sqlite": sqlite.dialect,
}


def _coerce_value(column, value: Any) -> Any:
    """Convert a literal seed value to the python type of its column."""
    if value is None:
        return None
    if isinstance(column.type, DateTime) and isinstance(value, str):
        return datetime.fromisoformat(value)
    if isinstance(column.type, Date) and isinstance(value, str):
        return date.fromisoformat(value)
    if isinstance(column.type, Numeric) and not isinstance(column.type, Integer):
        return Decimal(str(value))
    return value


class SampleDataset:
    """
    A demo database: table definitions, seed rows and the defects seeded in them.

    Tables are declared on a SQLAlchemy ``MetaData`` so they can be created on
    any backend. Seed rows keep ``None`` (NULL) distinct from ``""`` (empty
    string) because several demo defects depend on that difference.
    """

    def __init__(
        self,
        name: str,
        description: str,
        metadata: MetaData,
        seed_rows: Optional[Dict[str, SeedRows]] = None,
        known_issues: Optional[Dict[str, List[str]]] = None,
        stage_paths: Optional[Dict[str, str]] = None,
    ):
        """
        Args:
            name: Database name (e.g. 'sales_db')
            description: One line summary shown by the CLI
            metadata: MetaData holding the dataset tables
            seed_rows: table name -> (column names, row tuples)
            known_issues: table name -> seeded data quality defects
            stage_paths: table name -> stage prefix the table is loaded from
        """
        self.name = name
        self.description = description
        self.metadata = metadata
        self.seed_rows = seed_rows or {}
        self.known_issues = known_issues or {}
        self.stage_paths = stage_paths or {}

    def __repr__(self) -> str:
        return f"SampleDataset(name={self.name!r}, tables={self.table_names})"

    @property
    def tables(self) -> List[Table]:
        """Tables in dependency order (parents first)."""
        return list(self.metadata.sorted_tables)

    @property
    def table_names(self) -> List[str]:
        return [table.name for table in self.tables]

    def table(self, name: str) -> Table:
        """Look up a table by case-insensitive name."""
        for table in self.tables:
            if table.name.lower() == name.lower():
                return table
        raise ValueError(f"Unknown table '{name}' in dataset {self.name}")

    def rows(self, table_name: str, generate_keys: bool = False) -> List[Dict[str, Any]]:
        """
        Seed rows for a table as typed dictionaries.

        Args:
            table_name: Table name
            generate_keys: Number auto-increment primary keys 1..N the way the
                database would when they are absent from the seed rows

        Returns:
            List of row dictionaries.
        """
        table = self.table(table_name)
        if table.name not in self.seed_rows:
            return []

        columns, values = self.seed_rows[table.name]
        rows = []
        for row in values:
            rows.append({
                col: _coerce_value(table.c[col], value)
                for col, value in zip(columns, row)
            })

        if generate_keys:
            key = self._generated_key(table, columns)
            if key is not None:
                for number, row in enumerate(rows, start=1):
                    row[key] = number
        return rows

    def frame(self, table_name: str) -> pd.DataFrame:
        """
        Seed rows for a table as a DataFrame with pandas dtypes.

        Date and timestamp columns become datetime64, numeric columns float.
        """
        table = self.table(table_name)
        df = pd.DataFrame(
            self.rows(table.name, generate_keys=True),
            columns=[col.name for col in table.columns],
        )
        for col in table.columns:
            if isinstance(col.type, (Date, DateTime)):
                df[col.name] = pd.to_datetime(df[col.name])
            elif isinstance(col.type, Numeric) and not isinstance(col.type, Integer):
                df[col.name] = pd.to_numeric(df[col.name], errors="coerce")
        return df

    def render_ddl(self, dialect: str = "postgresql") -> str:
        """
        CREATE TABLE statements for the dataset compiled for a SQL dialect.

        Args:
            dialect: 'postgresql' or 'sqlite'

        Returns:
            Script text, one statement per table.
        """
        if dialect not in _DIALECTS:
            raise ValueError(f"Unsupported dialect '{dialect}', expected one of {sorted(_DIALECTS)}")
        compiled_dialect = _DIALECTS[dialect]()
        statements = [
            str(CreateTable(table).compile(dialect=compiled_dialect)).strip() + ";"
            for table in self.tables
        ]
        return f"-- {self.name}: {self.description}\n\n" + "\n\n".join(statements) + "\n"

    @staticmethod
    def _generated_key(table: Table, seeded_columns: Sequence[str]) -> Optional[str]:
        pk = list(table.primary_key.columns)
        if len(pk) == 1 and pk[0].name not in seeded_columns and isinstance(pk[0].type, Integer):
            return pk[0].name
        return None
