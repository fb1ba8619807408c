"""Unit tests for theme switching and icon lookup."""

import pytest
from PySide6.QtWidgets import QPushButton

from station_quiz.gui.styles.theme import (
    GLOBAL_STYLESHEET,
    GLOBAL_STYLESHEET_DARK,
    Colors,
    ColorsDark,
    Styles,
    StylesDark,
    apply_theme,
    get_colors,
    get_styles,
    set_dark_mode,
)
from station_quiz.gui.utils.icons import MaterialIcons


@pytest.fixture(autouse=True)
def reset_theme():
    yield
    set_dark_mode(False)


class TestThemeState:

    def test_light_by_default(self):
        assert get_colors() is Colors
        assert get_styles() is Styles

    def test_dark_mode_switches_palette(self):
        set_dark_mode(True)
        assert get_colors() is ColorsDark
        assert get_styles() is StylesDark

    def test_apply_theme_sets_stylesheet(self, qapp):
        apply_theme(qapp, True)
        assert qapp.styleSheet() == GLOBAL_STYLESHEET_DARK
        apply_theme(qapp, False)
        assert qapp.styleSheet() == GLOBAL_STYLESHEET

    def test_styles_use_palette_colors(self):
        assert Colors.PRIMARY in Styles.BUTTON_PRIMARY
        assert ColorsDark.PRIMARY in StylesDark.BUTTON_PRIMARY

    def test_station_selectors_present(self):
        for selector in ("#mainHeader", "#stationName", "#emptyStateMessage"):
            assert selector in GLOBAL_STYLESHEET


class TestMaterialIcons:

    @pytest.mark.parametrize("factory", [
        MaterialIcons.back,
        MaterialIcons.next,
        MaterialIcons.map,
        MaterialIcons.train,
        MaterialIcons.alert,
    ])
    def test_icons_render(self, qapp, factory):
        assert not factory().isNull()

    def test_chevron_both_states(self, qapp):
        assert not MaterialIcons.chevron(True).isNull()
        assert not MaterialIcons.chevron(False).isNull()

    def test_icon_on_button(self, qtbot):
        button = QPushButton("次の問題へ")
        qtbot.addWidget(button)
        button.setIcon(MaterialIcons.next())
        assert not button.icon().isNull()
