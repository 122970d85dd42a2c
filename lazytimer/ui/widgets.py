from __future__ import annotations

from PyQt6.QtCore import QRectF, pyqtSignal
from PyQt6.QtGui import QPainter, QPainterPath
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from lazytimer.backgrounds import BaseBackground, renderer_for
from lazytimer.core.app_state import AppState
from lazytimer.core.gradients import background_for
from lazytimer.core.timer import TimerEngine, TimerMode


class BackgroundWidget(QWidget):
    """Paints the selected gradient preset behind its children."""

    def __init__(self, app_state: AppState, parent: QWidget | None = None, radius: float = 0.0) -> None:
        super().__init__(parent)
        self.app_state = app_state
        self._radius = radius
        self._renderer: BaseBackground = self._build_renderer()
        self.app_state.settings_changed.connect(self._on_settings_changed)

    def _build_renderer(self) -> BaseBackground:
        settings = self.app_state.settings
        return renderer_for(background_for(self.app_state.selected_gradient, settings.custom_image_path))

    def _on_settings_changed(self, key: str, _value: object) -> None:
        if key in {"selected_gradient_index", "custom_image_path"}:
            self._renderer = self._build_renderer()
            self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = QRectF(self.rect())
        if self._radius > 0:
            path = QPainterPath()
            path.addRoundedRect(rect, self._radius, self._radius)
            painter.setClipPath(path)
        self._renderer.render(painter, rect)
        painter.end()


class TimerControls(QWidget):
    """Play/pause and reset buttons bound to the engine."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.engine = engine

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        layout.addStretch()

        self.play_btn = QPushButton()
        self.play_btn.setObjectName("RoundButton")
        self.play_btn.clicked.connect(self.engine.toggle)
        self.reset_btn = QPushButton("↺")
        self.reset_btn.setObjectName("RoundButton")
        self.reset_btn.setToolTip("Reset")
        self.reset_btn.clicked.connect(self.engine.reset)

        layout.addWidget(self.play_btn)
        layout.addWidget(self.reset_btn)
        layout.addStretch()

        self.engine.state_changed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        running = self.engine.is_running
        self.play_btn.setText("❚❚" if running else "▶")
        self.play_btn.setToolTip("Pause" if running else "Start")
        self.play_btn.setStyleSheet("background: #e0463c;" if running else "background: #2f6fed;")
        self.setVisible(self.engine.mode != TimerMode.CLOCK)


def session_line(engine: TimerEngine) -> str:
    return f"Session {engine.session_count + 1} • {engine.session_label}"


class ClickableLabel(QLabel):
    double_clicked = pyqtSignal()

    def mouseDoubleClickEvent(self, event) -> None:  # noqa: N802
        self.double_clicked.emit()
        event.accept()
