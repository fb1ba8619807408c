"""
Module: quiz.config

Purpose:
    Per-session generation policy. Unlike the frozen app configuration,
    this is mutable: the user flips it with the fixed-origin toggle.

Key Classes:
    - SessionConfig: Generation policy for one quiz session

Used By:
    - quiz.session: Session controller
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SessionConfig:
    """
    Generation policy for one session (never persisted).

    Attributes:
        fixed_origin: Keep the origin station across questions
    """

    fixed_origin: bool = False
