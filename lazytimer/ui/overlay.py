from __future__ import annotations

"""Полноэкранный оверлей поверх всех окон; не перехватывает ввод мыши."""

from PyQt6.QtCore import QTimer, Qt
from PyQt6.QtGui import QFont, QGuiApplication
from PyQt6.QtWidgets import QGridLayout, QLabel, QVBoxLayout, QWidget

from lazytimer.core.completion import CompletionDispatcher
from lazytimer.core.settings import TimerPosition
from lazytimer.core.timer import TimerEngine, TimerMode
from lazytimer.ui.widgets import BackgroundWidget, session_line


HINT_TEXT = "Menu bar to control"
HOTKEY_HINT_TEXT = "Menu bar to control • Ctrl+Shift+W for the window"

_CELLS = {
    TimerPosition.CENTER: (1, 1, Qt.AlignmentFlag.AlignCenter),
    TimerPosition.TOP_LEFT: (0, 0, Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft),
    TimerPosition.TOP_RIGHT: (0, 2, Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignRight),
    TimerPosition.BOTTOM_LEFT: (2, 0, Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignLeft),
    TimerPosition.BOTTOM_RIGHT: (2, 2, Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignRight),
}


class OverlayPanel(BackgroundWidget):
    def __init__(
        self,
        engine: TimerEngine,
        dispatcher: CompletionDispatcher,
        global_hotkeys: bool = False,
    ) -> None:
        super().__init__(engine.app_state)
        self.engine = engine
        self.dispatcher = dispatcher

        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
            | Qt.WindowType.Tool
            | Qt.WindowType.WindowTransparentForInput
        )
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)

        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            self.setGeometry(screen.geometry())

        self.timer_box = QWidget()
        box_layout = QVBoxLayout(self.timer_box)
        self.time_label = QLabel()
        self.time_label.setObjectName("OverlayTimerLabel")
        self.session_label = QLabel()
        self.session_label.setObjectName("SessionLine")
        self.subtitle_label = QLabel()
        self.subtitle_label.setWordWrap(True)
        for label in (self.time_label, self.session_label, self.subtitle_label):
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            box_layout.addWidget(label)

        self.hint_label = QLabel(HOTKEY_HINT_TEXT if global_hotkeys else HINT_TEXT)
        self.hint_label.setObjectName("MutedText")
        self.hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.message_layer = QLabel(self)
        self.message_layer.setObjectName("CompletionMessage")
        self.message_layer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_layer.setWordWrap(True)
        self.message_layer.setStyleSheet("background: rgba(0, 0, 0, 178);")

        self.grid = QGridLayout(self)
        self.grid.setContentsMargins(60, 60, 60, 20)
        for index in range(3):
            self.grid.setRowStretch(index, 1)
            self.grid.setColumnStretch(index, 1)
        self.grid.addWidget(self.hint_label, 3, 0, 1, 3)
        self._placed: TimerPosition | None = None

        self.engine.state_changed.connect(self.refresh)
        self.clock_timer = QTimer(self)
        self.clock_timer.setInterval(1000)
        self.clock_timer.timeout.connect(self._refresh_clock)
        self.clock_timer.start()
        self.dispatcher.message_changed.connect(self._on_message_changed)
        self.refresh()
        self._on_message_changed(self.dispatcher.is_showing_message, self.dispatcher.message_text)

    def _refresh_clock(self) -> None:
        if self.engine.mode == TimerMode.CLOCK:
            self.refresh()

    def refresh(self) -> None:
        settings = self.engine.app_state.settings
        self.setWindowOpacity(settings.overlay_opacity)
        self._place(settings.overlay_position)

        centered = settings.overlay_position == TimerPosition.CENTER
        font = self.time_label.font()
        font.setPointSize(200 if centered else 80)
        self.time_label.setFont(font)
        self.time_label.setText(self.engine.formatted_time)

        is_pomodoro = self.engine.mode == TimerMode.POMODORO
        self.session_label.setVisible(is_pomodoro)
        self.session_label.setText(session_line(self.engine))

        self.subtitle_label.setVisible(bool(settings.subtitle_text))
        self.subtitle_label.setText(settings.subtitle_text)
        subtitle_font = QFont() if settings.subtitle_font_name == "System" else QFont(settings.subtitle_font_name)
        subtitle_font.setPointSizeF(settings.subtitle_font_size)
        subtitle_font.setBold(settings.subtitle_bold)
        subtitle_font.setItalic(settings.subtitle_italic)
        self.subtitle_label.setFont(subtitle_font)

    def _on_settings_changed(self, key: str, value: object) -> None:
        super()._on_settings_changed(key, value)
        self.refresh()

    def _place(self, position: TimerPosition) -> None:
        if position == self._placed:
            return
        row, column, alignment = _CELLS[position]
        self.grid.removeWidget(self.timer_box)
        self.grid.addWidget(self.timer_box, row, column, alignment)
        self._placed = position

    def _on_message_changed(self, visible: bool, text: str) -> None:
        self.message_layer.setText(f"⏰\n{text}")
        self.message_layer.setGeometry(self.rect())
        self.message_layer.setVisible(visible)
        self.message_layer.raise_()

    def resizeEvent(self, event) -> None:  # noqa: N802
        super().resizeEvent(event)
        self.message_layer.setGeometry(self.rect())
