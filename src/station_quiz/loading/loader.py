"""
Module: loading.loader

Purpose:
    Load the station catalog once at startup.
    Reads the bundled stations.json (or a user-supplied file), validates it
    and returns the stations sorted by name.

Key Functions:
    - load_catalog(): Load and sort the catalog, empty on any failure
    - read_catalog(): Load and sort the catalog, raising on failure
    - default_catalog_path(): Location of the bundled dataset
    - sample_catalog(): Three-station catalog for --demo

Dependencies:
    - json (std)
    - pathlib (std)
    - loading.parser: Record parsing and validation

Used By:
    - station_quiz.gui.app: Startup
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from station_quiz.core.models import Station

from .parser import CatalogError, parse_catalog

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "stations.json"


def default_catalog_path() -> Path:
    """Path of the dataset shipped inside the package."""
    return Path(__file__).resolve().parent.parent / "data" / CATALOG_FILENAME


def sort_by_name(stations: tuple[Station, ...]) -> tuple[Station, ...]:
    return tuple(sorted(stations, key=lambda s: s.name))


def read_catalog(path: Optional[Path] = None) -> tuple[Station, ...]:
    """
    Read, validate and sort a catalog file.

    Args:
        path: Catalog JSON file; the bundled dataset if None

    Returns:
        Stations sorted by name

    Raises:
        CatalogError: If the file cannot be read or is malformed
    """
    path = path or default_catalog_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CatalogError(f"Catalog {path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog {path} is not valid JSON: {e}") from e

    return sort_by_name(parse_catalog(data))


def load_catalog(path: Optional[Path] = None) -> tuple[Station, ...]:
    """
    Load the catalog, recovering from any failure with an empty result.

    The quiz engine treats an empty (or single-station) catalog as
    insufficient data, so callers do not need a separate error path.

    Example:
        >>> stations = load_catalog()
        >>> [s.name for s in stations] == sorted(s.name for s in stations)
        True
    """
    try:
        stations = read_catalog(path)
    except CatalogError as e:
        logger.error(f"Failed to load station catalog: {e}")
        return ()

    if not stations:
        logger.warning(f"Station catalog is empty: {path or default_catalog_path()}")
    else:
        logger.info(f"Loaded {len(stations)} stations")
    return stations


def sample_catalog() -> tuple[Station, ...]:
    """Small fixed catalog used by the --demo launch option."""
    return sort_by_name((
        Station("新宿", "新宿区", ("JR山手線", "JR中央線")),
        Station("渋谷", "渋谷区", ("JR山手線", "JR埼京線")),
        Station("池袋", "豊島区", ("JR山手線", "JR埼京線")),
    ))
