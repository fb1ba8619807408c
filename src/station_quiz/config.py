"""
Module: config

Purpose:
    Application configuration assembled from command-line arguments.
    Immutable configuration with validation on construction. Nothing here
    is persisted between runs.

Key Classes:
    - AppConfig: Startup configuration for the quiz app

Key Functions:
    - build_arg_parser(): argparse parser for the launcher

Dependencies:
    - argparse (std)
    - dataclasses (std)

Used By:
    - station_quiz.gui.app: Entry point
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from station_quiz.maps.launcher import DEFAULT_STATION_SUFFIX
from station_quiz.quiz.history import MAX_HISTORY


@dataclass(frozen=True)
class AppConfig:
    """
    Startup configuration (immutable).

    Attributes:
        stations_path: Catalog JSON to load; bundled dataset if None
        seed: Random seed for reproducible question sequences
        max_history: Number of questions kept for "back" navigation
        station_suffix: Qualifier appended to names in map URLs
        dark_mode: Start with the dark theme
        demo: Play on the built-in three-station catalog instead of a file
        verbose: Log at DEBUG instead of INFO

    Invariants:
        - max_history >= 1

    Example:
        >>> AppConfig.from_args(["--seed", "7"]).seed
        7
    """

    stations_path: Optional[Path] = None
    seed: Optional[int] = None
    max_history: int = MAX_HISTORY
    station_suffix: str = DEFAULT_STATION_SUFFIX
    dark_mode: bool = False
    demo: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_history < 1:
            raise ValueError(f"max_history must be positive: {self.max_history}")

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> "AppConfig":
        args = build_arg_parser().parse_args(argv)
        return cls(
            stations_path=Path(args.stations) if args.stations else None,
            seed=args.seed,
            max_history=args.max_history,
            dark_mode=args.dark,
            demo=args.demo,
            verbose=args.verbose,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="station-quiz",
        description="Tokyo station route quiz",
    )
    parser.add_argument("--stations", help="Path to a stations.json catalog")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--max-history",
        type=int,
        default=MAX_HISTORY,
        help=f"Questions kept for back navigation (default {MAX_HISTORY})",
    )
    parser.add_argument("--dark", action="store_true", help="Use the dark theme")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use a small built-in catalog (ignores --stations)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser
