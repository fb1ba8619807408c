"""Station catalog loading."""

from .loader import (
    default_catalog_path,
    load_catalog,
    read_catalog,
    sample_catalog,
)
from .parser import CatalogError, parse_catalog, parse_station

__all__ = [
    "default_catalog_path",
    "load_catalog",
    "read_catalog",
    "sample_catalog",
    "CatalogError",
    "parse_catalog",
    "parse_station",
]
