"""Route request handed to the map launcher."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteRequest:
    """
    Directions request between two stations (immutable).

    Attributes:
        origin: Plain origin station name (no "駅" suffix)
        destination: Plain destination station name
    """

    origin: str
    destination: str
