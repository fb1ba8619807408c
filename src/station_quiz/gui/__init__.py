"""PySide6 presentation layer for the quiz."""
