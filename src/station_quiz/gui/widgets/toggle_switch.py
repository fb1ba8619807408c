"""
Sliding on/off switch used for the fixed-origin setting.
"""
from PySide6.QtCore import Property, QEasingCurve, QPropertyAnimation, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QWidget

from station_quiz.gui.styles.theme import get_colors

TRACK_SIZE = (44, 24)
THUMB_MARGIN = 2
SLIDE_MS = 180


def _blend(start: QColor, end: QColor, t: float) -> QColor:
    """Linear mix of two colors, t in [0, 1]."""
    return QColor(
        round(start.red() + (end.red() - start.red()) * t),
        round(start.green() + (end.green() - start.green()) * t),
        round(start.blue() + (end.blue() - start.blue()) * t),
    )


class ToggleSwitch(QWidget):
    """
    Two-state switch. Emits toggled(bool) whenever the state changes,
    from a click, the space key or setChecked().
    """

    toggled = Signal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._checked = False
        self._offset = 0.0  # thumb travel: 0.0 off, 1.0 on

        self.setFixedSize(*TRACK_SIZE)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._slide = QPropertyAnimation(self, b"offset", self)
        self._slide.setDuration(SLIDE_MS)
        self._slide.setEasingCurve(QEasingCurve.Type.OutCubic)

        self.update_theme()

    def _get_offset(self) -> float:
        return self._offset

    def _set_offset(self, value: float) -> None:
        self._offset = value
        self.update()

    offset = Property(float, _get_offset, _set_offset)

    def isChecked(self) -> bool:
        return self._checked

    def setChecked(self, checked: bool) -> None:
        if checked == self._checked:
            return
        self._checked = checked
        self._slide.stop()
        self._slide.setStartValue(self._offset)
        self._slide.setEndValue(1.0 if checked else 0.0)
        self._slide.start()
        self.toggled.emit(checked)

    def update_theme(self) -> None:
        """Re-read the palette after a light/dark switch."""
        C = get_colors()
        self._off_color = QColor(C.BORDER)
        self._on_color = QColor(C.TOGGLE_BG)
        self._disabled_color = QColor(C.DISABLED_BG)
        self._thumb_color = QColor(C.SURFACE)
        self.update()

    # ─────────────────────────────────────────────────────────────────────────
    # Input
    # ─────────────────────────────────────────────────────────────────────────

    def mouseReleaseEvent(self, event):
        inside = self.rect().contains(event.position().toPoint())
        if self.isEnabled() and event.button() == Qt.MouseButton.LeftButton and inside:
            self.setChecked(not self._checked)
            return
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event):
        if self.isEnabled() and event.key() == Qt.Key.Key_Space:
            self.setChecked(not self._checked)
            return
        super().keyPressEvent(event)

    # ─────────────────────────────────────────────────────────────────────────
    # Painting
    # ─────────────────────────────────────────────────────────────────────────

    def _track_color(self) -> QColor:
        if not self.isEnabled():
            return self._disabled_color
        return _blend(self._off_color, self._on_color, self._offset)

    def _thumb_rect(self) -> QRectF:
        diameter = self.height() - 2 * THUMB_MARGIN
        travel = self.width() - diameter - 2 * THUMB_MARGIN
        return QRectF(THUMB_MARGIN + travel * self._offset, THUMB_MARGIN, diameter, diameter)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        radius = self.height() / 2

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._track_color())
        painter.drawRoundedRect(QRectF(self.rect()), radius, radius)

        painter.setPen(QPen(QColor(0, 0, 0, 24), 1))
        painter.setBrush(self._thumb_color)
        painter.drawEllipse(self._thumb_rect())
