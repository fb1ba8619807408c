"""
Entry point for the PySide6 quiz app.
"""
import logging
import sys
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


def run(argv: Optional[Sequence[str]] = None):
    """
    Main entry point for the GUI application.

    Args:
        argv: Command-line arguments without the program name; sys.argv[1:] if None
    """
    from PySide6.QtWidgets import QApplication
    from station_quiz.config import AppConfig
    from station_quiz.logging_utils import configure_logging
    from station_quiz.loading import load_catalog, sample_catalog
    from station_quiz.maps.launcher import MapLauncher
    from station_quiz.quiz import make_rng
    from station_quiz.gui.main_window import QuizWindow, WINDOW_TITLE
    from station_quiz.gui.styles.theme import apply_theme

    config = AppConfig.from_args(sys.argv[1:] if argv is None else argv)
    configure_logging(config.verbose)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(WINDOW_TITLE)
    app.setApplicationDisplayName(WINDOW_TITLE)
    apply_theme(app, config.dark_mode)

    if config.demo:
        catalog = sample_catalog()
        logger.info(f"Demo mode: {len(catalog)} built-in stations")
    else:
        catalog = load_catalog(config.stations_path)
    if config.seed is not None:
        logger.info(f"Using random seed {config.seed}")

    window = QuizWindow(
        catalog,
        rng=make_rng(config.seed),
        launcher=MapLauncher(station_suffix=config.station_suffix),
        max_history=config.max_history,
    )
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
