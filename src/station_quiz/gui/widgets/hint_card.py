"""
Expandable hint card showing a station's ward and lines.
"""
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from station_quiz.core.models import Station
from station_quiz.gui.styles.theme import get_styles
from station_quiz.gui.utils.icons import MaterialIcons


class HintCard(QFrame):
    """
    Clickable card; the body with ward and lines is visible only when expanded.

    The card does not own its expanded state: clicks emit expandedChanged and
    the window pushes the session's flag back through set_expanded().
    """

    expandedChanged = Signal(bool)

    def __init__(self, title: str = "ヒント", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("hintCard")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet(get_styles().HINT_CARD)

        self._expanded = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(6)

        header = QHBoxLayout()
        self.title_label = QLabel(title)
        self.chevron_label = QLabel()
        header.addWidget(self.title_label)
        header.addStretch()
        header.addWidget(self.chevron_label)
        layout.addLayout(header)

        self.body = QWidget()
        body_layout = QVBoxLayout(self.body)
        body_layout.setContentsMargins(0, 4, 0, 0)
        self.ward_label = QLabel()
        self.lines_label = QLabel()
        self.lines_label.setWordWrap(True)
        body_layout.addWidget(self.ward_label)
        body_layout.addWidget(self.lines_label)
        layout.addWidget(self.body)

        self._refresh_chevron()
        self.body.setVisible(False)

    def is_expanded(self) -> bool:
        return self._expanded

    def set_station(self, station: Station) -> None:
        self.ward_label.setText(station.ward_hint)
        self.lines_label.setText(station.lines_hint)

    def set_expanded(self, expanded: bool) -> None:
        """Show or hide the body without emitting expandedChanged."""
        self._expanded = expanded
        self.body.setVisible(expanded)
        self._refresh_chevron()

    def _refresh_chevron(self) -> None:
        self.chevron_label.setPixmap(MaterialIcons.chevron(self._expanded).pixmap(18, 18))

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.expandedChanged.emit(not self._expanded)
        super().mouseReleaseEvent(event)
