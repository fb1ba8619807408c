"""
Main Window for the Tokyo Station Quiz GUI.

The window holds no quiz state of its own: every user action is forwarded
to the QuizSession and the widgets are re-rendered from the session's
current question.
"""
import logging
import queue
from typing import Optional, Sequence

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication, QComboBox, QHBoxLayout, QLabel, QMainWindow, QMessageBox,
    QPushButton, QStackedWidget, QStatusBar, QVBoxLayout, QWidget,
)

from station_quiz import __version__
from station_quiz.core.models import QuizState, Station, station_names
from station_quiz.logging_utils import attach_queue_handler, detach_queue_handler
from station_quiz.maps.launcher import MapLauncher
from station_quiz.quiz import InsufficientDataError, MAX_HISTORY, QuizSession
from station_quiz.quiz.generator import RandomSource
from station_quiz.gui.styles.theme import (
    apply_shadow, apply_theme, get_styles, is_dark_mode, set_dark_mode,
)
from station_quiz.gui.utils.icons import MaterialIcons
from station_quiz.gui.widgets.hint_card import HintCard
from station_quiz.gui.widgets.toggle_switch import ToggleSwitch

logger = logging.getLogger(__name__)

WINDOW_TITLE = "東京路線クイズ"
EMPTY_STATE_TEXT = "駅データを読み込めませんでした。\n出題には2駅以上が必要です。"

QUIZ_PAGE = 0
EMPTY_PAGE = 1


class QuizWindow(QMainWindow):
    def __init__(
        self,
        catalog: Sequence[Station],
        rng: Optional[RandomSource] = None,
        launcher: Optional[MapLauncher] = None,
        max_history: int = MAX_HISTORY,
    ):
        super().__init__()

        self.launcher = launcher or MapLauncher()
        self.session: Optional[QuizSession] = None
        try:
            self.session = QuizSession(catalog, rng=rng, max_history=max_history)
        except InsufficientDataError as e:
            logger.error(f"Cannot start quiz: {e}")

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(520, 760)
        self.setMinimumSize(420, 640)

        # --- Menu Bar ---
        file_menu = self.menuBar().addMenu("ファイル")
        exit_action = QAction("終了", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        view_menu = self.menuBar().addMenu("表示")
        self.dark_mode_action = QAction("ダークモード", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.setChecked(is_dark_mode())
        self.dark_mode_action.triggered.connect(self._toggle_theme)
        view_menu.addAction(self.dark_mode_action)

        help_menu = self.menuBar().addMenu("ヘルプ")
        about_action = QAction("このアプリについて", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # Central Widget
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- Header ---
        header = QWidget()
        header.setObjectName("mainHeader")
        header.setFixedHeight(64)
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(20, 10, 20, 10)
        self.logo_label = QLabel()
        self.logo_label.setPixmap(MaterialIcons.train().pixmap(32, 32))
        header_layout.addWidget(self.logo_label)
        self.title_label = QLabel(WINDOW_TITLE)
        self.title_label.setObjectName("mainTitle")
        header_layout.addWidget(self.title_label)
        header_layout.addStretch()
        main_layout.addWidget(header)

        self.stack = QStackedWidget()
        self.stack.addWidget(self._build_quiz_page())
        self.stack.addWidget(self._build_empty_page())
        main_layout.addWidget(self.stack)

        # --- Status Bar ---
        self.status_bar = QStatusBar()
        self.position_label = QLabel()
        self.status_bar.addPermanentWidget(self.position_label)
        self.setStatusBar(self.status_bar)

        # Surface package log messages in the status bar
        self.log_queue: queue.Queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(200)

        # Keyboard navigation
        QShortcut(QKeySequence("Alt+Right"), self).activated.connect(self._on_next_clicked)
        QShortcut(QKeySequence("Alt+Left"), self).activated.connect(self._on_back_clicked)

        self._apply_widget_styles()

        if self.session is None:
            self.stack.setCurrentIndex(EMPTY_PAGE)
            self.status_bar.showMessage("駅データがありません")
        else:
            self.stack.setCurrentIndex(QUIZ_PAGE)
            self.session.add_listener(self._render)
            self._render(self.session.current_question())

    # ─────────────────────────────────────────────────────────────────────────
    # Layout
    # ─────────────────────────────────────────────────────────────────────────

    def _build_quiz_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        # Fixed-origin switch
        fixed_row = QHBoxLayout()
        fixed_row.addWidget(QLabel("出発駅を固定する"))
        fixed_row.addStretch()
        self.fixed_toggle = ToggleSwitch()
        self.fixed_toggle.toggled.connect(self._on_fixed_toggled)
        fixed_row.addWidget(self.fixed_toggle)
        layout.addLayout(fixed_row)

        # Origin picker, only usable in fixed-origin mode
        self.origin_picker = QComboBox()
        self.origin_picker.setToolTip("出発駅")
        if self.session is not None:
            self.origin_picker.addItems(station_names(self.session.catalog))
        self.origin_picker.setEnabled(False)
        self.origin_picker.activated.connect(self._on_origin_picked)
        layout.addWidget(self.origin_picker)

        layout.addSpacing(16)

        origin_caption = QLabel("出発駅")
        origin_caption.setObjectName("stationCaption")
        layout.addWidget(origin_caption)
        self.origin_label = QLabel()
        self.origin_label.setObjectName("stationName")
        layout.addWidget(self.origin_label)
        self.origin_hint = HintCard()
        self.origin_hint.expandedChanged.connect(self._on_origin_hint_changed)
        layout.addWidget(self.origin_hint)

        layout.addSpacing(16)

        destination_caption = QLabel("到着駅")
        destination_caption.setObjectName("stationCaption")
        layout.addWidget(destination_caption)
        self.destination_label = QLabel()
        self.destination_label.setObjectName("stationName")
        layout.addWidget(self.destination_label)
        self.destination_hint = HintCard()
        self.destination_hint.expandedChanged.connect(self._on_destination_hint_changed)
        layout.addWidget(self.destination_hint)

        layout.addStretch()

        # Action buttons
        buttons = QHBoxLayout()
        buttons.setSpacing(12)
        self.back_button = QPushButton("前の問題へ")
        self.back_button.clicked.connect(self._on_back_clicked)
        buttons.addWidget(self.back_button)

        self.route_button = QPushButton("Googleマップで確認")
        self.route_button.clicked.connect(self._on_route_clicked)
        buttons.addWidget(self.route_button)

        self.next_button = QPushButton("次の問題へ")
        self.next_button.clicked.connect(self._on_next_clicked)
        apply_shadow(self.next_button, blur_radius=12, y_offset=2)
        buttons.addWidget(self.next_button)
        layout.addLayout(buttons)

        return page

    def _build_empty_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch()
        self.empty_icon = QLabel()
        self.empty_icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_icon.setPixmap(MaterialIcons.alert().pixmap(48, 48))
        layout.addWidget(self.empty_icon)
        self.empty_label = QLabel(EMPTY_STATE_TEXT)
        self.empty_label.setObjectName("emptyStateMessage")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label)
        layout.addStretch()
        return page

    def _apply_widget_styles(self) -> None:
        styles = get_styles()
        self.back_button.setStyleSheet(styles.BUTTON_SECONDARY)
        self.route_button.setStyleSheet(styles.BUTTON_SECONDARY)
        self.next_button.setStyleSheet(styles.BUTTON_PRIMARY)
        self.origin_picker.setStyleSheet(styles.COMBOBOX)
        self.back_button.setIcon(MaterialIcons.back())
        self.route_button.setIcon(MaterialIcons.map())
        self.next_button.setIcon(MaterialIcons.next())
        self.logo_label.setPixmap(MaterialIcons.train().pixmap(32, 32))
        self.empty_icon.setPixmap(MaterialIcons.alert().pixmap(48, 48))
        for card in (self.origin_hint, self.destination_hint):
            card.setStyleSheet(styles.HINT_CARD)
            card.set_expanded(card.is_expanded())
        self.fixed_toggle.update_theme()

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def _render(self, state: QuizState) -> None:
        """Re-render every widget from the session's current question."""
        session = self.session
        self.origin_label.setText(state.origin.name)
        self.destination_label.setText(state.destination.name)

        self.origin_hint.set_station(state.origin)
        self.origin_hint.set_expanded(state.origin_hint_expanded)
        self.destination_hint.set_station(state.destination)
        self.destination_hint.set_expanded(state.destination_hint_expanded)

        self.fixed_toggle.blockSignals(True)
        self.fixed_toggle.setChecked(session.fixed_origin)
        self.fixed_toggle.blockSignals(False)

        self.origin_picker.setEnabled(session.fixed_origin)
        self.origin_picker.setCurrentIndex(self.origin_picker.findText(state.origin.name))

        self.back_button.setEnabled(session.can_go_back)
        self.position_label.setText(
            f"問題 {session.history_cursor + 1} / {session.history_length}"
        )

    # ─────────────────────────────────────────────────────────────────────────
    # User intents
    # ─────────────────────────────────────────────────────────────────────────

    def _on_fixed_toggled(self, enabled: bool) -> None:
        if self.session is not None:
            self.session.toggle_fixed_origin(enabled)

    def _on_origin_picked(self, index: int) -> None:
        if self.session is None or not self.session.fixed_origin or index < 0:
            return
        self.session.select_origin(self.session.catalog[index])

    def _on_next_clicked(self) -> None:
        if self.session is not None:
            self.session.advance()

    def _on_back_clicked(self) -> None:
        if self.session is not None and self.session.can_go_back:
            self.session.go_back()

    def _on_origin_hint_changed(self, expanded: bool) -> None:
        if self.session is not None:
            self.session.set_origin_hint_expanded(expanded)

    def _on_destination_hint_changed(self, expanded: bool) -> None:
        if self.session is not None:
            self.session.set_destination_hint_expanded(expanded)

    def _on_route_clicked(self) -> None:
        if self.session is None:
            return
        if not self.launcher.launch(self.session.open_route()):
            QMessageBox.warning(self, "Googleマップ", "ブラウザを開けませんでした。")

    # ─────────────────────────────────────────────────────────────────────────
    # Misc
    # ─────────────────────────────────────────────────────────────────────────

    def _toggle_theme(self, checked: bool) -> None:
        set_dark_mode(checked)
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, checked)
        self._apply_widget_styles()

    def _drain_log_queue(self) -> None:
        while True:
            try:
                message, _level = self.log_queue.get_nowait()
            except queue.Empty:
                break
            self.status_bar.showMessage(message, 4000)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            WINDOW_TITLE,
            f"<h3>{WINDOW_TITLE}</h3>"
            f"<p>Version: {__version__}</p>"
            "<p>ランダムに選ばれた2駅の経路を考えるクイズです。</p>",
        )

    def closeEvent(self, event):
        self.log_timer.stop()
        detach_queue_handler(self._log_handler)
        super().closeEvent(event)
