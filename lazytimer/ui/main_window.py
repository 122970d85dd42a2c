from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QTimer, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpinBox,
    QStackedLayout,
    QVBoxLayout,
    QWidget,
)

from lazytimer.core.completion import CompletionDispatcher
from lazytimer.core.timer import (
    QUICK_FOCUS_MINUTES,
    SessionType,
    TimerEngine,
    TimerMode,
    format_clock,
    format_date,
)
from lazytimer.ui.widgets import BackgroundWidget, ClickableLabel, TimerControls, session_line


WINDOW_TITLE = "LazyTimer"


class EditTimeDialog(QDialog):
    def __init__(self, remaining_seconds: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Set Timer")

        self.minutes = QSpinBox()
        self.minutes.setRange(0, 999)
        self.minutes.setValue(remaining_seconds // 60)
        self.seconds = QSpinBox()
        self.seconds.setRange(0, 59)
        self.seconds.setValue(remaining_seconds % 60)

        fields = QHBoxLayout()
        fields.addWidget(self.minutes)
        fields.addWidget(QLabel(":"))
        fields.addWidget(self.seconds)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addLayout(fields)
        layout.addWidget(buttons)


class PomodoroView(QWidget):
    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.engine = engine

        sessions = QHBoxLayout()
        sessions.addStretch()
        self.session_buttons: dict[SessionType, QPushButton] = {}
        for session in SessionType:
            button = QPushButton(session.value)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked, s=session: self.engine.switch_session(s))
            sessions.addWidget(button)
            self.session_buttons[session] = button
        sessions.addStretch()

        self.time_label = ClickableLabel()
        self.time_label.setObjectName("TimerLabel")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.time_label.setToolTip("Double-click to set the time")
        self.time_label.double_clicked.connect(self._edit_time)

        self.session_label = ClickableLabel()
        self.session_label.setObjectName("SessionLine")
        self.session_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.session_label.setToolTip("Double-click to rename this session")
        self.session_label.double_clicked.connect(self._edit_label)

        layout = QVBoxLayout(self)
        layout.addLayout(sessions)
        layout.addStretch()
        layout.addWidget(self.time_label)
        layout.addWidget(self.session_label)
        layout.addStretch()

        self.engine.state_changed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        self.time_label.setText(self.engine.formatted_time)
        self.session_label.setText(session_line(self.engine))
        for session, button in self.session_buttons.items():
            button.setChecked(session == self.engine.current_session)
            button.setEnabled(not self.engine.is_running)

    def _edit_time(self) -> None:
        if self.engine.is_running:
            return
        dialog = EditTimeDialog(self.engine.pomodoro_remaining_seconds, self)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            self.engine.set_remaining(dialog.minutes.value(), dialog.seconds.value())

    def _edit_label(self) -> None:
        text, accepted = QInputDialog.getText(self, "Edit Session Label", "Label:", text=self.engine.session_label)
        if accepted:
            self.engine.set_session_label(text)


class StopwatchView(QWidget):
    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.engine = engine

        self.time_label = QLabel()
        self.time_label.setObjectName("TimerLabel")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        caption = QLabel("Stopwatch")
        caption.setObjectName("MutedText")
        caption.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout = QVBoxLayout(self)
        layout.addStretch()
        layout.addWidget(self.time_label)
        layout.addWidget(caption)
        layout.addStretch()

        self.engine.state_changed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        self.time_label.setText(self.engine.formatted_time)


class ClockView(QWidget):
    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.engine = engine

        self.time_label = QLabel()
        self.time_label.setObjectName("TimerLabel")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.date_label = QLabel()
        self.date_label.setObjectName("DateLabel")
        self.date_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        quick_title = QLabel("Quick Focus")
        quick_title.setObjectName("MutedText")
        quick_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        quick = QHBoxLayout()
        quick.addStretch()
        for minutes in QUICK_FOCUS_MINUTES:
            button = QPushButton(f"{minutes}m")
            button.clicked.connect(lambda _checked, m=minutes: self.engine.quick_focus(m))
            quick.addWidget(button)
        quick.addStretch()

        layout = QVBoxLayout(self)
        layout.addStretch()
        layout.addWidget(self.time_label)
        layout.addWidget(self.date_label)
        layout.addStretch()
        layout.addWidget(quick_title)
        layout.addLayout(quick)

        self.clock_timer = QTimer(self)
        self.clock_timer.setInterval(1000)
        self.clock_timer.timeout.connect(self.refresh)
        self.clock_timer.start()
        self.refresh()

    def refresh(self) -> None:
        if not self.isVisible():
            return
        self.time_label.setText(format_clock())
        self.date_label.setText(format_date())

    def showEvent(self, event) -> None:  # noqa: N802
        super().showEvent(event)
        self.refresh()


class CompletionBanner(QLabel):
    """Dismissable in-window copy of the completion message."""

    def __init__(self, dispatcher: CompletionDispatcher, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.dispatcher = dispatcher
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWordWrap(True)
        self.setStyleSheet("background: rgba(0, 0, 0, 170); border-radius: 12px; padding: 12px; font-size: 18px;")
        self.setToolTip("Click to dismiss")
        self.dispatcher.message_changed.connect(self._on_message_changed)
        self.hide()

    def _on_message_changed(self, visible: bool, text: str) -> None:
        self.setText(f"⏰ {text}")
        self.setVisible(visible)

    def mousePressEvent(self, event) -> None:  # noqa: N802
        self.dispatcher.dismiss_message()
        event.accept()


class MainWindow(QMainWindow):
    def __init__(
        self,
        engine: TimerEngine,
        dispatcher: CompletionDispatcher,
        open_settings: Callable[..., None],
        hide_on_close: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(444, 666)

        self.engine = engine
        self.app_state = engine.app_state
        self.dispatcher = dispatcher
        self._open_settings = open_settings
        self.hide_on_close = hide_on_close

        self._build_ui()
        self._connect_signals()
        self.refresh()

    def _build_ui(self) -> None:
        central = BackgroundWidget(self.app_state, self)
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(24, 24, 24, 24)

        top_bar = QHBoxLayout()
        self.mode_buttons: dict[TimerMode, QPushButton] = {}
        for mode in TimerMode:
            button = QPushButton(mode.value)
            button.setCheckable(True)
            top_bar.addWidget(button)
            self.mode_buttons[mode] = button
        top_bar.addStretch()
        self.settings_btn = QPushButton("⚙")
        self.settings_btn.setObjectName("RoundButton")
        self.settings_btn.setToolTip("Settings")
        top_bar.addWidget(self.settings_btn)
        root_layout.addLayout(top_bar)

        self.views = QStackedLayout()
        self.pomodoro_view = PomodoroView(self.engine)
        self.stopwatch_view = StopwatchView(self.engine)
        self.clock_view = ClockView(self.engine)
        self.view_index = {
            TimerMode.POMODORO: self.views.addWidget(self.pomodoro_view),
            TimerMode.STOPWATCH: self.views.addWidget(self.stopwatch_view),
            TimerMode.CLOCK: self.views.addWidget(self.clock_view),
        }
        root_layout.addLayout(self.views, 1)

        self.banner = CompletionBanner(self.dispatcher)
        root_layout.addWidget(self.banner)

        self.controls = TimerControls(self.engine)
        root_layout.addWidget(self.controls)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self._space_toggle)
        self.addAction(space_action)

    def _connect_signals(self) -> None:
        for mode, button in self.mode_buttons.items():
            button.clicked.connect(lambda _checked, m=mode: self.engine.set_mode(m))
        self.settings_btn.clicked.connect(self._open_settings)
        self.engine.state_changed.connect(self.refresh)

    def _space_toggle(self) -> None:
        if self.engine.mode != TimerMode.CLOCK:
            self.engine.toggle()

    def refresh(self) -> None:
        mode = self.engine.mode
        for candidate, button in self.mode_buttons.items():
            button.setChecked(candidate == mode)
        self.views.setCurrentIndex(self.view_index[mode])

    def closeEvent(self, event) -> None:  # noqa: N802
        # The app keeps running in the menu bar; closing only hides the window.
        if self.hide_on_close:
            self.hide()
            event.ignore()
            return
        event.accept()
