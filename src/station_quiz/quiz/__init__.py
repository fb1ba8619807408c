"""
Module: quiz

Purpose:
    The quiz engine: random question generation, the navigable question
    history and the session controller that ties them together.

Key Functions:
    - generate_question(): Draw a new (origin, destination) pair
    - make_rng(): Seeded random generator

Key Classes:
    - History: Bounded, navigable question log
    - QuizSession: Session controller used by the GUI
    - SessionConfig: Per-session generation policy

Dependencies:
    - random (std)
    - station_quiz.core.models: Station, QuizState, RouteRequest

Used By:
    - station_quiz.gui.main_window: GUI integration
"""

from .config import SessionConfig
from .generator import (
    InsufficientDataError,
    distinct_station_count,
    generate_question,
    make_rng,
)
from .history import History, HistoryNotInitializedError, MAX_HISTORY
from .session import InvalidOperationError, QuizSession

__all__ = [
    # Config
    "SessionConfig",
    # Generation
    "generate_question",
    "make_rng",
    "distinct_station_count",
    "InsufficientDataError",
    # History
    "History",
    "HistoryNotInitializedError",
    "MAX_HISTORY",
    # Session
    "QuizSession",
    "InvalidOperationError",
]
