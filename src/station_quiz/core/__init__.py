"""
Tokyo Station Quiz Core Package

Shared data models used by every other subpackage. These models are the
single source of truth for what a station and a quiz question look like.
"""

from .models import RouteRequest, Station, QuizState

__all__ = [
    "RouteRequest",
    "Station",
    "QuizState",
]
