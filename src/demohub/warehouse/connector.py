"""Warehouse access for the sample datasets, through SQLAlchemy."""

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

import pandas as pd
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Connection, CursorResult, Engine, make_url
from sqlalchemy.sql.schema import Table

from ..config import config
from ..utils.logger import get_logger
from .scripts import BACKSLASH_ESCAPE_DIALECTS, read_script, split_sql_statements

logger = get_logger(__name__)

TABLE_INFO_COLUMNS = ["column_name", "data_type", "is_nullable", "column_default", "comment"]


def _rows(result: CursorResult) -> List[Dict[str, Any]]:
    if not result.returns_rows:
        return []
    columns = list(result.keys())
    return [dict(zip(columns, row)) for row in result.fetchall()]


@contextmanager
def _logged(action: str) -> Iterator[None]:
    try:
        yield
    except Exception as e:
        logger.error(f"{action} failed: {e}")
        raise


class WarehouseConnector:
    """
    Target database for dataset installs, quality checks and analyses.

    Any SQLAlchemy URL works. PostgreSQL (psycopg2) is the default target and
    SQLite files are used for local runs and tests. The engine is created on
    first use.
    """

    def __init__(self, connection_string: Optional[str] = None, echo: Optional[bool] = None):
        """
        Args:
            connection_string: SQLAlchemy URL. If None, uses config.
            echo: Log every emitted SQL statement. If None, uses config.
        """
        self.connection_string = connection_string or config.warehouse.connection_string
        self.echo = config.warehouse.echo if echo is None else echo
        self._engine: Optional[Engine] = None
        logger.info("WarehouseConnector initialized")

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            logger.info(f"Creating engine for {self.engine_url}")
            self._engine = create_engine(self.connection_string, echo=self.echo)
        return self._engine

    @property
    def engine_url(self) -> str:
        """Connection URL with the password masked."""
        return make_url(self.connection_string).render_as_string(hide_password=True)

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    def test_connection(self) -> bool:
        """True if the warehouse answers ``SELECT 1``."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1")).scalar()
        except Exception as e:
            logger.error(f"Cannot reach {self.engine_url}: {e}")
            return False
        logger.info(f"Connected to {self.dialect_name} warehouse")
        return True

    def execute_query(self, query: str, params: Optional[Dict] = None) -> List[Dict[str, Any]]:
        """
        Run a query with bound parameters.

        Returns:
            Result rows as dictionaries keyed by column label.
        """
        with _logged("Query"), self.engine.connect() as conn:
            rows = _rows(conn.execute(text(query), params or {}))
        logger.info(f"Query returned {len(rows)} rows")
        return rows

    def execute_statement(self, statement: str, params: Optional[Dict] = None) -> int:
        """
        Run and commit a DML or DDL statement.

        Returns:
            Affected row count, -1 where the driver does not report one.
        """
        with _logged("Statement"), self.engine.begin() as conn:
            rowcount = conn.execute(text(statement), params or {}).rowcount
        logger.info(f"Statement affected {rowcount} rows")
        return rowcount

    def read_sql(self, query: str, params: Optional[Dict] = None) -> pd.DataFrame:
        with _logged("Query"), self.engine.connect() as conn:
            df = pd.read_sql(text(query), conn, params=params or {})
        logger.info(f"Query returned {len(df)} rows")
        return df

    def read_table(self, table_name: str) -> pd.DataFrame:
        """
        Every row of a table as a DataFrame.

        Raises:
            ValueError: If the table does not exist
        """
        if not self.table_exists(table_name):
            raise ValueError(f"Table not found: {table_name}")
        with _logged(f"Reading {table_name}"), self.engine.connect() as conn:
            df = pd.read_sql_table(table_name, conn)
        logger.info(f"Read {len(df)} rows from {table_name}")
        return df

    def write_dataframe(
        self,
        df: pd.DataFrame,
        table_name: str,
        if_exists: str = "append",
        index: bool = False
    ) -> None:
        """
        Store a DataFrame with ``DataFrame.to_sql``.

        The table is created from the frame's dtypes when missing.
        """
        with _logged(f"Writing {table_name}"):
            df.to_sql(table_name, self.engine, if_exists=if_exists, index=index)
        logger.info(f"Wrote {len(df)} rows to {table_name}")

    def insert_rows(
        self,
        table: Table,
        rows: Iterable[Dict[str, Any]],
        conn: Optional[Connection] = None
    ) -> int:
        """
        Insert row dictionaries into a declared table.

        Args:
            table: Target table
            rows: Rows keyed by column name
            conn: Connection of an enclosing transaction. Without one the
                insert commits on its own.

        Returns:
            Number of rows inserted.
        """
        rows = list(rows)
        if not rows:
            return 0
        with _logged(f"Insert into {table.name}"):
            if conn is None:
                with self.engine.begin() as conn:
                    conn.execute(table.insert(), rows)
            else:
                conn.execute(table.insert(), rows)
        logger.info(f"Inserted {len(rows)} rows into {table.name}")
        return len(rows)

    def table_exists(self, table_name: str) -> bool:
        return inspect(self.engine).has_table(table_name)

    def get_table_info(self, table_name: str) -> pd.DataFrame:
        """
        Column metadata reported by the database inspector.

        Returns:
            One row per column with the ``TABLE_INFO_COLUMNS`` fields.
        """
        if not self.table_exists(table_name):
            raise ValueError(f"Table not found: {table_name}")
        return pd.DataFrame(
            [
                [col["name"], str(col["type"]), col.get("nullable", True), col.get("default"), col.get("comment")]
                for col in inspect(self.engine).get_columns(table_name)
            ],
            columns=TABLE_INFO_COLUMNS,
        )

    def run_script(self, source: Union[str, Path], stop_on_error: bool = True) -> List[Dict[str, Any]]:
        """
        Execute a SQL script one statement at a time, committing each.

        Args:
            source: Path to a script file, or the script text
            stop_on_error: Raise on the first failing statement. Otherwise
                the failure is recorded and the next statement runs.

        Returns:
            Per statement: its text, ``status`` ("ok" or "error"), result
            ``rows`` and, for failures, the ``error`` message.
        """
        statements = split_sql_statements(
            read_script(source), backslash_escapes=self.dialect_name in BACKSLASH_ESCAPE_DIALECTS
        )
        total = len(statements)
        logger.info(f"Running script with {total} statements")

        outcomes = []
        with self.engine.connect() as conn:
            for number, statement in enumerate(statements, start=1):
                label = f"[{number}/{total}] {' '.join(statement.split())[:60]}"
                try:
                    rows = _rows(conn.execute(text(statement)))
                    conn.commit()
                except Exception as e:
                    conn.rollback()
                    logger.error(f"{label} failed: {e}")
                    if stop_on_error:
                        raise
                    outcomes.append({"statement": statement, "status": "error", "error": str(e), "rows": []})
                    continue
                logger.info(label)
                outcomes.append({"statement": statement, "status": "ok", "rows": rows})
        return outcomes

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.info("Warehouse connections closed")
