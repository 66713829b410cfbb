"""
DemoHub Catalog

Tooling around the DemoHub tutorial catalog:
- Scaffolding the numbered course directory tree
- Installing the sample datasets (sales, IoT, medtech) into a warehouse
- Measuring the seeded data quality defects with portable metric functions
- Reproducing the demo views and functions as pandas analytics
"""

__version__ = "0.1.0"
__author__ = "DemoHub Labs"
