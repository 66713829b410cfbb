"""Catalog directory scaffolding"""

from .catalog import (
    CATALOG_DIRECTORIES,
    PLACEHOLDER_FILES,
    CatalogTree,
    add_gitkeep,
    create_catalog_tree,
)

__all__ = [
    "CATALOG_DIRECTORIES",
    "PLACEHOLDER_FILES",
    "CatalogTree",
    "add_gitkeep",
    "create_catalog_tree",
]
