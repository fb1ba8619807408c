"""
Module: quiz.history

Purpose:
    Bounded, navigable log of quiz questions with a cursor.
    Owns the append / go back / truncate-on-branch protocol.

Key Classes:
    - History: The history tracker
    - HistoryNotInitializedError: Read before the first initialize()

State Machine:
    Uninitialized --initialize--> Initialized
    Initialized --append | go_back | update_current_hint_flags | reset--> Initialized

Dependencies:
    - station_quiz.core.models: QuizState

Used By:
    - quiz.session: Session controller
"""

from __future__ import annotations

import logging
from typing import List, Optional

from station_quiz.core.models import QuizState

logger = logging.getLogger(__name__)

MAX_HISTORY = 100


class HistoryNotInitializedError(Exception):
    """History was used before initialize() was called."""
    pass


class History:
    """
    Ordered log of QuizState entries plus a cursor into it.

    Attributes:
        max_history: Maximum number of retained entries

    Invariants:
        - Once initialized, entries is never empty
        - 0 <= cursor < len(entries)
        - len(entries) <= max_history
        - After append(s), entries[cursor] is s and cursor is the last index

    Example:
        >>> history = History()
        >>> history.initialize(s0)
        >>> history.append(s1)
        >>> history.go_back() is s0
        True
        >>> history.append(s2)   # s1 is discarded
        >>> history.entries == (s0, s2)
        True
    """

    def __init__(self, max_history: int = MAX_HISTORY) -> None:
        if max_history < 1:
            raise ValueError(f"max_history must be at least 1: {max_history}")
        self.max_history = max_history
        self._entries: List[QuizState] = []
        self._cursor: int = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"History(len={len(self._entries)}, cursor={self._cursor})"

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_initialized(self) -> bool:
        return bool(self._entries)

    @property
    def entries(self) -> tuple[QuizState, ...]:
        """Snapshot of all entries, oldest first."""
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_go_back(self) -> bool:
        return self._cursor > 0

    def current(self) -> QuizState:
        """
        Get the displayed entry.

        Raises:
            HistoryNotInitializedError: If initialize() was never called
        """
        self._require_initialized()
        return self._entries[self._cursor]

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def initialize(self, initial_state: QuizState) -> None:
        """Start a new sequence containing only initial_state."""
        self._entries = [initial_state]
        self._cursor = 0
        logger.debug("History initialized")

    reset = initialize

    def append(self, new_state: QuizState) -> None:
        """
        Add a question after the cursor and move the cursor onto it.

        Entries after the cursor are discarded first, so navigating back and
        then generating a question overwrites the old forward history. If the
        log would exceed max_history, the oldest entry is dropped.
        """
        self._require_initialized()

        last_index = len(self._entries) - 1
        if self._cursor < last_index:
            dropped = last_index - self._cursor
            del self._entries[self._cursor + 1:]
            logger.debug(f"Branching at {self._cursor}: discarded {dropped} forward entries")

        self._entries.append(new_state)

        if len(self._entries) > self.max_history:
            del self._entries[0]

        self._cursor = len(self._entries) - 1
        logger.debug(f"Appended entry, cursor={self._cursor}, len={len(self._entries)}")

    def go_back(self) -> QuizState:
        """
        Move the cursor one entry back.

        At the first entry this is a no-op and the current state is returned
        unchanged.
        """
        self._require_initialized()
        if self._cursor > 0:
            self._cursor -= 1
            logger.debug(f"Went back, cursor={self._cursor}")
        return self._entries[self._cursor]

    def update_current_hint_flags(
        self,
        origin_expanded: Optional[bool] = None,
        destination_expanded: Optional[bool] = None,
    ) -> QuizState:
        """
        Replace the current entry with a copy carrying new hint flags.

        Does not create a history entry; hint toggles are not navigable.
        A None argument leaves that flag as it is.

        Returns:
            The updated current entry
        """
        self._require_initialized()
        updated = self._entries[self._cursor].with_hints(
            origin_expanded=origin_expanded,
            destination_expanded=destination_expanded,
        )
        self._entries[self._cursor] = updated
        return updated

    def _require_initialized(self) -> None:
        if not self._entries:
            raise HistoryNotInitializedError("History has not been initialized")
