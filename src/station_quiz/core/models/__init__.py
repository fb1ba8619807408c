"""
Core Models Package

Immutable data models shared by the loader, the quiz engine and the GUI.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. The catalog can be shared read-only between sessions
2. History entries cannot be mutated behind the tracker's back
3. Stations can be used as dict keys or in sets (hashed by name)
"""

from .route import RouteRequest
from .stations import Station, station_names
from .quiz_state import QuizState

__all__ = [
    "RouteRequest",
    "Station",
    "station_names",
    "QuizState",
]
