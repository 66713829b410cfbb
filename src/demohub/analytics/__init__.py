"""
Portable versions of the demo views, functions and analysis queries

- sales: customer value, pipeline and data quality views over sales_db
- iot: equipment monitoring over iot_db sensor readings
- medtech: device complaint, warranty and compliance analysis
"""

from . import iot, medtech, sales

__all__ = ["iot", "medtech", "sales"]
