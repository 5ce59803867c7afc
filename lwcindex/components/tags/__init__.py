"""
Tags package.
"""

from .standard_catalog_comp import (
    DEFAULT_CATALOG_PATH,
    StandardCatalog,
    load_standard_catalog,
    parse_standard_catalog,
)
from .tag_registry_comp import TagRegistry

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "StandardCatalog",
    "TagRegistry",
    "load_standard_catalog",
    "parse_standard_catalog",
]
