"""
Warehouse access

- WarehouseConnector: SQLAlchemy-backed connection manager
- split_sql_statements: multi-statement script splitting
"""

from .connector import WarehouseConnector
from .scripts import split_sql_statements, read_script

__all__ = [
    "WarehouseConnector",
    "split_sql_statements",
    "read_script",
]
