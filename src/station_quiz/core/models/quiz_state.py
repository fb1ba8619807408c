"""
Module: quiz_state

Purpose:
    Provides the QuizState dataclass - one entry of the question history.
    A question is an (origin, destination) pair plus the visibility of the
    hint card for each station.

Key Functions:
    - QuizState.with_hints(): Copy with updated hint flags
    - QuizState.route: The RouteRequest for this question

Dependencies:
    - dataclasses (std)
    - .stations.Station
    - .route.RouteRequest

Used By:
    - quiz.generator
    - quiz.history
    - quiz.session
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .route import RouteRequest
from .stations import Station


@dataclass(frozen=True)
class QuizState:
    """
    One quiz question (immutable).

    Attributes:
        origin: Departure station
        destination: Arrival station
        origin_hint_expanded: Whether the origin hint card is open
        destination_hint_expanded: Whether the destination hint card is open

    Invariants:
        - origin != destination (compared by name)
    """

    origin: Station
    destination: Station
    origin_hint_expanded: bool = False
    destination_hint_expanded: bool = False

    def __post_init__(self) -> None:
        if self.origin == self.destination:
            raise ValueError(
                f"origin and destination must differ: {self.origin.name!r}"
            )

    def with_hints(
        self,
        origin_expanded: Optional[bool] = None,
        destination_expanded: Optional[bool] = None,
    ) -> "QuizState":
        """
        Return a copy with the given hint flags; None keeps the current value.

        Example:
            >>> state.with_hints(origin_expanded=True).origin_hint_expanded
            True
        """
        return replace(
            self,
            origin_hint_expanded=(
                self.origin_hint_expanded if origin_expanded is None else origin_expanded
            ),
            destination_hint_expanded=(
                self.destination_hint_expanded
                if destination_expanded is None
                else destination_expanded
            ),
        )

    @property
    def route(self) -> RouteRequest:
        return RouteRequest(origin=self.origin.name, destination=self.destination.name)
