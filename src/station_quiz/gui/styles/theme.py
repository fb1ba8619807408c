"""
Theme definitions for the Tokyo Station Quiz GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY = "#2E7D32"          # Yamanote green
    PRIMARY_HOVER = "#1B5E20"
    PRIMARY_PRESSED = "#1B5E20"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders & Dividers
    BORDER = "#e0e0e0"
    BORDER_FOCUS = "#43A047"

    # Status
    ERROR = "#d32f2f"
    INFO = "#1976d2"

    # Selection
    SELECTION_BG = "#E8F5E9"
    SELECTION_TEXT = "#1f1f1f"

    # Toggles
    TOGGLE_BG = "#2E7D32"


class ColorsDark:
    """Dark theme color palette."""

    PRIMARY = "#66BB6A"
    PRIMARY_HOVER = "#81C784"
    PRIMARY_PRESSED = "#4CAF50"

    BACKGROUND = "#1e1e1e"
    SURFACE = "#252526"
    HOVER = "#21262D"
    DISABLED_BG = "#3D444D"

    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8B949E"
    TEXT_DISABLED = "#9CA3AF"
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER = "#30363D"
    BORDER_FOCUS = "#66BB6A"

    ERROR = "#F85149"
    INFO = "#58A6FF"

    SELECTION_BG = "#2E7D32"
    SELECTION_TEXT = "#FFFFFF"

    TOGGLE_BG = "#66BB6A"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'Hiragino Sans', 'Yu Gothic UI', 'Noto Sans CJK JP', 'Segoe UI', sans-serif"

    # Sizes
    TITLE = "20pt"
    STATION = "40pt"
    CAPTION = "18pt"
    BODY = "14pt"
    SMALL = "12pt"

    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


def _styles_for(C) -> type:
    """Build the QSS fragments for one palette."""

    class _Styles:
        BUTTON_PRIMARY = f"""
            QPushButton {{
                background-color: {C.PRIMARY};
                color: {C.TEXT_ON_PRIMARY};
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: {Fonts.WEIGHT_MEDIUM};
                border: none;
                qproperty-iconSize: 20px 20px;
            }}
            QPushButton:hover {{
                background-color: {C.PRIMARY_HOVER};
            }}
            QPushButton:pressed {{
                background-color: {C.PRIMARY_PRESSED};
            }}
            QPushButton:disabled {{
                background-color: {C.DISABLED_BG};
                color: {C.TEXT_DISABLED};
            }}
        """

        BUTTON_SECONDARY = f"""
            QPushButton {{
                background-color: {C.SURFACE};
                color: {C.TEXT_PRIMARY};
                border: 1px solid {C.BORDER};
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: {Fonts.WEIGHT_MEDIUM};
                qproperty-iconSize: 20px 20px;
            }}
            QPushButton:hover {{
                background-color: {C.HOVER};
                border-color: {C.BORDER_FOCUS};
            }}
            QPushButton:disabled {{
                background-color: {C.DISABLED_BG};
                color: {C.TEXT_DISABLED};
                border-color: {C.DISABLED_BG};
            }}
        """

        COMBOBOX = f"""
            QComboBox {{
                border: 1px solid {C.BORDER};
                border-radius: 6px;
                padding: 8px 12px;
                background: {C.SURFACE};
                color: {C.TEXT_PRIMARY};
                min-height: 20px;
            }}
            QComboBox:focus {{
                border: 1px solid {C.BORDER_FOCUS};
            }}
            QComboBox:disabled {{
                background: {C.BACKGROUND};
                color: {C.TEXT_DISABLED};
            }}
            QComboBox QAbstractItemView {{
                border: 1px solid {C.BORDER};
                selection-background-color: {C.SELECTION_BG};
                selection-color: {C.SELECTION_TEXT};
                outline: none;
            }}
        """

        HINT_CARD = f"""
            QFrame#hintCard {{
                background-color: {C.SURFACE};
                border: 1px solid {C.BORDER};
                border-radius: 8px;
            }}
            QFrame#hintCard:hover {{
                border-color: {C.BORDER_FOCUS};
            }}
        """

    return _Styles


Styles = _styles_for(Colors)
StylesDark = _styles_for(ColorsDark)


def _global_stylesheet(C) -> str:
    return f"""
    * {{
        font-family: {Fonts.UI_FONT};
        font-size: {Fonts.BODY};
        color: {C.TEXT_PRIMARY};
    }}

    QMainWindow, QWidget {{
        background-color: {C.BACKGROUND};
    }}

    QLabel {{
        background-color: transparent;
        color: {C.TEXT_PRIMARY};
    }}

    QStatusBar {{
        background-color: {C.SURFACE};
        color: {C.TEXT_SECONDARY};
    }}

    #mainHeader {{
        background-color: {C.SURFACE};
        border-bottom: 1px solid {C.BORDER};
    }}
    #mainTitle {{
        font-size: {Fonts.TITLE};
        font-weight: {Fonts.WEIGHT_BOLD};
    }}
    #stationCaption {{
        font-size: {Fonts.CAPTION};
        color: {C.TEXT_SECONDARY};
    }}
    #stationName {{
        font-size: {Fonts.STATION};
        font-weight: {Fonts.WEIGHT_BOLD};
    }}
    #emptyStateMessage {{
        color: {C.ERROR};
    }}
"""


# Global application stylesheets; set explicitly so the OS palette is not inherited.
GLOBAL_STYLESHEET = _global_stylesheet(Colors)
GLOBAL_STYLESHEET_DARK = _global_stylesheet(ColorsDark)


def apply_theme(app, is_dark: bool = False) -> None:
    """
    Apply the appropriate stylesheet (light or dark) to the QApplication.
    """
    set_dark_mode(is_dark)
    app.setStyleSheet(GLOBAL_STYLESHEET_DARK if is_dark else GLOBAL_STYLESHEET)


# Module-level dark mode state (set explicitly when theme changes)
_is_dark_mode = False


def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state."""
    global _is_dark_mode
    _is_dark_mode = is_dark


def is_dark_mode() -> bool:
    return _is_dark_mode


def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors


def get_styles():
    """Get the appropriate styles based on current theme."""
    return StylesDark if _is_dark_mode else Styles


def apply_shadow(widget, blur_radius=20, x_offset=2, y_offset=4, color=None):
    """Apply a soft shadow to a widget."""
    from PySide6.QtWidgets import QGraphicsDropShadowEffect
    from PySide6.QtGui import QColor

    if color is None:
        color = QColor(0, 0, 0, 45)

    shadow = QGraphicsDropShadowEffect(widget)
    shadow.setBlurRadius(blur_radius)
    shadow.setXOffset(x_offset)
    shadow.setYOffset(y_offset)
    shadow.setColor(color)
    widget.setGraphicsEffect(shadow)
