"""Top-level package for the Tokyo Station Quiz.

Provides subpackages:
- station_quiz.core – immutable data models (Station, QuizState, RouteRequest)
- station_quiz.loading – station catalog loading and validation
- station_quiz.quiz – question generation, history tracking, session control
- station_quiz.maps – map deep-link construction and launching
- station_quiz.gui – PySide6 app
"""
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "station-quiz"


def _get_version() -> str:
    """Installed distribution version; 0.0.0 when run from an uninstalled checkout."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
