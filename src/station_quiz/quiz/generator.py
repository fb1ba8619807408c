"""
Module: quiz.generator

Purpose:
    Produce new quiz questions from the station catalog.
    Pure functions: the only side effect is consuming randomness from
    the injected random generator.

Key Functions:
    - generate_question(): Main entry point for question generation
    - make_rng(): Build a seeded random generator
    - distinct_station_count(): Count stations by unique name

Key Classes:
    - InsufficientDataError: Catalog too small to form a question

Algorithm:
    Fixed origin: keep the current origin, pick the destination uniformly
    from the catalog minus the origin.
    Free: sample two distinct stations without replacement; the first is
    the origin, the second the destination.

Dependencies:
    - random (std)
    - station_quiz.core.models: Station, QuizState

Used By:
    - quiz.session: Session controller
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol, Sequence

from station_quiz.core.models import QuizState, Station

logger = logging.getLogger(__name__)


class InsufficientDataError(Exception):
    """Catalog has fewer than 2 distinct stations."""
    pass


class RandomSource(Protocol):
    """The subset of random.Random the generator relies on."""

    def choice(self, seq: Sequence[Station]) -> Station: ...

    def sample(self, population: Sequence[Station], k: int) -> list[Station]: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Build a random generator, seeded for reproducible question sequences.

    Args:
        seed: Seed value, or None for an OS-seeded generator
    """
    return random.Random(seed)


def distinct_station_count(catalog: Sequence[Station]) -> int:
    return len({station.name for station in catalog})


def _unique(catalog: Sequence[Station]) -> list[Station]:
    """Drop repeated names, keeping first occurrence and catalog order."""
    seen: set[str] = set()
    unique: list[Station] = []
    for station in catalog:
        if station.name not in seen:
            seen.add(station.name)
            unique.append(station)
    return unique


def generate_question(
    catalog: Sequence[Station],
    current_origin: Optional[Station],
    fixed_origin: bool,
    rng: RandomSource,
) -> QuizState:
    """
    Generate a new question.

    Args:
        catalog: Stations to draw from (sorted by name by the loader)
        current_origin: Origin of the displayed question; required when
            fixed_origin is True, ignored otherwise
        fixed_origin: Keep current_origin and only redraw the destination
        rng: Random source (random.Random or a test stub)

    Returns:
        QuizState with both hint flags collapsed

    Raises:
        InsufficientDataError: If catalog has fewer than 2 distinct stations
        ValueError: If fixed_origin is True and current_origin is None

    Invariants:
        - result.origin != result.destination
        - fixed_origin implies result.origin == current_origin

    Example:
        >>> q = generate_question(catalog, None, False, make_rng(7))
        >>> q.origin != q.destination
        True
    """
    stations = _unique(catalog)
    if len(stations) < 2:
        raise InsufficientDataError(
            f"Need at least 2 distinct stations to make a question, got {len(stations)}"
        )

    if fixed_origin:
        if current_origin is None:
            raise ValueError("current_origin is required in fixed-origin mode")
        candidates = [s for s in stations if s != current_origin]
        destination = rng.choice(candidates)
        logger.debug(f"Fixed origin {current_origin.name}: drew {destination.name}")
        return QuizState(origin=current_origin, destination=destination)

    origin, destination = rng.sample(stations, 2)
    logger.debug(f"Free draw: {origin.name} -> {destination.name}")
    return QuizState(origin=origin, destination=destination)
