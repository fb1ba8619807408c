"""
Module: quiz.session

Purpose:
    Orchestrate user intents into calls on the question generator and
    the history tracker, and expose the question to display.
    Start → Advance/Back → Toggle mode → Pick origin → Open route

Key Classes:
    - QuizSession: Session controller
    - InvalidOperationError: Intent not allowed in the current mode

Dependencies:
    - quiz.generator: Question generation
    - quiz.history: History tracking
    - quiz.config: Session policy

Used By:
    - station_quiz.gui.main_window: GUI integration
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence

from station_quiz.core.models import QuizState, RouteRequest, Station

from .config import SessionConfig
from .generator import (
    InsufficientDataError,
    RandomSource,
    distinct_station_count,
    generate_question,
)
from .history import History, MAX_HISTORY

logger = logging.getLogger(__name__)

StateListener = Callable[[QuizState], None]


class InvalidOperationError(Exception):
    """Intent is not valid in the session's current mode."""
    pass


class QuizSession:
    """
    One user's quiz session.

    Owns exactly one History and one SessionConfig; the catalog is shared
    read-only. Every operation completes synchronously.

    Args:
        catalog: Stations sorted by name
        rng: Random source; a fresh unseeded random.Random if None
        max_history: Bound on retained questions

    Raises:
        InsufficientDataError: If catalog has fewer than 2 distinct stations

    Example:
        >>> session = QuizSession(catalog, rng=random.Random(1))
        >>> first = session.current_question()
        >>> session.advance()
        >>> session.go_back() == first
        True
    """

    def __init__(
        self,
        catalog: Sequence[Station],
        rng: Optional[RandomSource] = None,
        max_history: int = MAX_HISTORY,
    ) -> None:
        self._catalog: tuple[Station, ...] = tuple(catalog)
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._config = SessionConfig()
        self._history = History(max_history=max_history)
        self._listeners: List[StateListener] = []

        count = distinct_station_count(self._catalog)
        if count < 2:
            raise InsufficientDataError(
                f"Need at least 2 distinct stations to start a quiz, got {count}"
            )

        # First screen: first station of the sorted catalog against a random destination
        first = generate_question(self._catalog, self._catalog[0], True, self._rng)
        self._history.initialize(first)
        logger.info(
            f"Quiz session started with {count} stations: "
            f"{first.origin.name} -> {first.destination.name}"
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def catalog(self) -> tuple[Station, ...]:
        return self._catalog

    @property
    def fixed_origin(self) -> bool:
        return self._config.fixed_origin

    @property
    def can_go_back(self) -> bool:
        return self._history.can_go_back

    @property
    def history_length(self) -> int:
        return len(self._history)

    @property
    def history_cursor(self) -> int:
        return self._history.cursor

    def current_question(self) -> QuizState:
        return self._history.current()

    def add_listener(self, listener: StateListener) -> None:
        """Register a callback run with the current question after each change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        self._listeners.remove(listener)

    # ─────────────────────────────────────────────────────────────────────────
    # Intents
    # ─────────────────────────────────────────────────────────────────────────

    def advance(self) -> QuizState:
        """Generate the next question under the current policy and append it."""
        state = self._generate(self.current_question().origin)
        self._history.append(state)
        return self._notify()

    def go_back(self) -> QuizState:
        """Show the previous question; no-op on the first one."""
        self._history.go_back()
        return self._notify()

    def toggle_fixed_origin(self, enabled: bool) -> QuizState:
        """
        Switch generation policy and start a new history sequence.

        Enabling keeps the displayed origin and redraws the destination;
        disabling draws a fresh free pair. Setting the current value again
        changes nothing.
        """
        if enabled == self._config.fixed_origin:
            return self.current_question()

        self._config.fixed_origin = enabled
        state = self._generate(self.current_question().origin)
        self._history.reset(state)
        logger.info(f"Fixed origin {'enabled' if enabled else 'disabled'}; history reset")
        return self._notify()

    def select_origin(self, station: Station) -> QuizState:
        """
        Pin a new origin, redraw the destination and reset history.

        Raises:
            InvalidOperationError: If fixed-origin mode is off
            ValueError: If station is not in the catalog
        """
        if not self._config.fixed_origin:
            raise InvalidOperationError("select_origin requires fixed-origin mode")
        if station not in self._catalog:
            raise ValueError(f"Station not in catalog: {station.name!r}")

        state = self._generate(station)
        self._history.reset(state)
        logger.info(f"Origin pinned to {station.name}; history reset")
        return self._notify()

    def set_origin_hint_expanded(self, expanded: bool) -> QuizState:
        self._history.update_current_hint_flags(origin_expanded=expanded)
        return self._notify()

    def set_destination_hint_expanded(self, expanded: bool) -> QuizState:
        self._history.update_current_hint_flags(destination_expanded=expanded)
        return self._notify()

    def open_route(self) -> RouteRequest:
        """Directions request for the displayed question, for the map launcher."""
        return self.current_question().route

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _generate(self, origin: Station) -> QuizState:
        return generate_question(
            self._catalog,
            origin if self._config.fixed_origin else None,
            self._config.fixed_origin,
            self._rng,
        )

    def _notify(self) -> QuizState:
        state = self.current_question()
        for listener in list(self._listeners):
            listener(state)
        return state
