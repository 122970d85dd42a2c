from __future__ import annotations

from PyQt6.QtCore import QPoint, QTimer, Qt
from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QLabel, QVBoxLayout

from lazytimer.core.timer import TimerEngine, TimerMode
from lazytimer.ui.widgets import BackgroundWidget, TimerControls


PANEL_WIDTH = 180
PANEL_HEIGHT = 120
SCREEN_MARGIN = (200, 150)


class FloatingPanel(BackgroundWidget):
    """Small always-on-top timer that can be dragged anywhere on screen."""

    def __init__(self, engine: TimerEngine) -> None:
        super().__init__(engine.app_state, radius=16.0)
        self.engine = engine
        self._drag_offset: QPoint | None = None

        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
            | Qt.WindowType.Tool
        )
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setFixedSize(PANEL_WIDTH, PANEL_HEIGHT)

        self.time_label = QLabel()
        self.time_label.setObjectName("FloatingTimerLabel")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.controls = TimerControls(engine)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)
        layout.addWidget(self.time_label)
        layout.addWidget(self.controls)

        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            geometry = screen.availableGeometry()
            self.move(geometry.right() - SCREEN_MARGIN[0], geometry.top() + SCREEN_MARGIN[1] - PANEL_HEIGHT)

        self.engine.state_changed.connect(self.refresh)
        self.clock_timer = QTimer(self)
        self.clock_timer.setInterval(1000)
        self.clock_timer.timeout.connect(self._refresh_clock)
        self.clock_timer.start()
        self.refresh()

    def _refresh_clock(self) -> None:
        if self.engine.mode == TimerMode.CLOCK:
            self.refresh()

    def refresh(self) -> None:
        self.time_label.setText(self.engine.formatted_time)

    def mousePressEvent(self, event) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_offset = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
            event.accept()

    def mouseMoveEvent(self, event) -> None:  # noqa: N802
        if self._drag_offset is not None and event.buttons() & Qt.MouseButton.LeftButton:
            self.move(event.globalPosition().toPoint() - self._drag_offset)
            event.accept()

    def mouseReleaseEvent(self, event) -> None:  # noqa: N802
        self._drag_offset = None
