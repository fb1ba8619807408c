"""
Module: loading.parser

Purpose:
    Parse and validate the station catalog JSON document.
    Turns raw decoded JSON into Station objects.

Key Functions:
    - parse_catalog(): Parse a decoded {"stations": [...]} document
    - parse_station(): Parse a single station record

Key Classes:
    - CatalogError: Exception for malformed catalog data

Dependencies:
    - station_quiz.core.models: Station

Used By:
    - loading.loader: Catalog loading
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from station_quiz.core.models import Station

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "ward", "lines")


class CatalogError(Exception):
    """Catalog document is malformed."""
    pass


def parse_station(record: Any, index: int = 0) -> Station:
    """
    Parse one station record. Unknown keys are ignored.

    Args:
        record: Decoded JSON object like {"name": ..., "ward": ..., "lines": [...]}
        index: Position in the document, for error messages

    Raises:
        CatalogError: If the record is missing fields or has wrong types
    """
    if not isinstance(record, dict):
        raise CatalogError(f"Station #{index} is not an object: {record!r}")

    missing = [key for key in REQUIRED_FIELDS if key not in record]
    if missing:
        raise CatalogError(f"Station #{index} missing fields: {missing}")

    name, ward, lines = record["name"], record["ward"], record["lines"]
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"Station #{index} has invalid name: {name!r}")
    if not isinstance(ward, str):
        raise CatalogError(f"Station {name!r} has invalid ward: {ward!r}")
    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        raise CatalogError(f"Station {name!r} has invalid lines: {lines!r}")

    return Station.from_dict(record)


def parse_catalog(data: Dict[str, Any]) -> tuple[Station, ...]:
    """
    Parse a decoded catalog document.

    Args:
        data: Decoded JSON, expected shape {"stations": [record, ...]}

    Returns:
        Stations in document order (sorting is the loader's job)

    Raises:
        CatalogError: If the document is malformed or names repeat
    """
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog root must be an object, got {type(data).__name__}")

    records = data.get("stations")
    if not isinstance(records, list):
        raise CatalogError("Catalog is missing the 'stations' array")

    stations: List[Station] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        station = parse_station(record, index)
        if station.name in seen:
            raise CatalogError(f"Duplicate station name: {station.name!r}")
        seen.add(station.name)
        stations.append(station)

    return tuple(stations)
