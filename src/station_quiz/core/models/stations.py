"""
Module: stations

Purpose:
    Provides the Station dataclass - one entry of the station catalog.
    Immutable once loaded; equality and hashing are by name only.

Key Functions:
    - Station.ward_hint / Station.lines_hint: Hint card text
    - Station.to_dict() / Station.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.quiz_state.QuizState
    - loading.loader
    - quiz.generator
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable


@dataclass(frozen=True)
class Station:
    """
    A train station in the catalog (immutable).

    Attributes:
        name: Station name like "新宿" (unique within a catalog)
        ward: Ward the station is in, like "新宿区"
        lines: Lines serving the station, in display order

    Invariants:
        - name is non-empty
        - Two stations are equal iff their names are equal

    Example:
        >>> s = Station("新宿", "新宿区", ("JR山手線", "JR中央線"))
        >>> s.lines_hint
        '路線: JR山手線, JR中央線'
    """

    name: str
    ward: str = field(compare=False)
    lines: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        """Validate station on construction."""
        if not self.name or not self.name.strip():
            raise ValueError(f"Station name must be non-empty: {self.name!r}")
        # Accept any iterable of line names but always store a tuple
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def ward_hint(self) -> str:
        return f"区: {self.ward}"

    @property
    def lines_hint(self) -> str:
        return f"路線: {', '.join(self.lines)}"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "ward": self.ward, "lines": list(self.lines)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Station":
        """Build a Station from a record, ignoring unknown keys."""
        return cls(
            name=data["name"],
            ward=data["ward"],
            lines=tuple(data.get("lines", ())),
        )


def station_names(stations: Iterable[Station]) -> list[str]:
    return [s.name for s in stations]
