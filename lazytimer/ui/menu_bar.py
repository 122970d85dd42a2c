from __future__ import annotations

"""Сводка в системном трее: время, управление таймером и режимы показа."""

from typing import Callable

from PyQt6.QtCore import QTimer, Qt
from PyQt6.QtGui import QAction, QActionGroup, QColor, QIcon, QPainter, QPixmap
from PyQt6.QtWidgets import QApplication, QMenu, QSystemTrayIcon

from lazytimer.core.completion import CompletionDispatcher
from lazytimer.core.display import DisplayMode, DisplayModeCoordinator
from lazytimer.core.timer import TimerEngine, TimerMode


DISPLAY_MODE_TITLES = {
    DisplayMode.WINDOW: "Standard Window",
    DisplayMode.FLOATING: "Floating Timer",
    DisplayMode.OVERLAY: "Full Overlay",
}


def _tray_icon(running: bool) -> QIcon:
    pixmap = QPixmap(64, 64)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setBrush(QColor("#e0463c") if running else QColor("#2f6fed"))
    painter.setPen(Qt.PenStyle.NoPen)
    painter.drawEllipse(4, 4, 56, 56)
    painter.end()
    return QIcon(pixmap)


class MenuBarSummary(QSystemTrayIcon):
    def __init__(
        self,
        engine: TimerEngine,
        dispatcher: CompletionDispatcher,
        coordinator: DisplayModeCoordinator,
        open_settings: Callable[..., None],
    ) -> None:
        super().__init__()
        self.engine = engine
        self.dispatcher = dispatcher
        self.coordinator = coordinator
        self._idle_icon = _tray_icon(False)
        self._running_icon = _tray_icon(True)

        self.menu = QMenu()
        self.time_action = self.menu.addAction("")
        self.time_action.setEnabled(False)
        self.menu.addSeparator()
        self.toggle_action = self.menu.addAction("Start")
        self.toggle_action.triggered.connect(self.engine.toggle)
        self.reset_action = self.menu.addAction("Reset")
        self.reset_action.triggered.connect(self.engine.reset)
        self.dismiss_action = self.menu.addAction("Dismiss Message")
        self.dismiss_action.triggered.connect(self.dispatcher.dismiss_message)

        self.menu.addSeparator()
        self.mode_group = QActionGroup(self.menu)
        self.mode_actions: dict[TimerMode, QAction] = {}
        for mode in TimerMode:
            action = self.menu.addAction(mode.value)
            action.setCheckable(True)
            action.triggered.connect(lambda _checked, m=mode: self.engine.set_mode(m))
            self.mode_group.addAction(action)
            self.mode_actions[mode] = action

        self.menu.addSeparator()
        self.display_group = QActionGroup(self.menu)
        self.display_actions: dict[DisplayMode, QAction] = {}
        for mode, title in DISPLAY_MODE_TITLES.items():
            action = self.menu.addAction(title)
            action.setCheckable(True)
            action.triggered.connect(lambda _checked, m=mode: self.coordinator.switch_to(m))
            self.display_group.addAction(action)
            self.display_actions[mode] = action

        self.menu.addSeparator()
        self.menu.addAction("Settings…").triggered.connect(open_settings)
        self.menu.addAction("Quit LazyTimer").triggered.connect(QApplication.quit)
        self.setContextMenu(self.menu)

        self.engine.state_changed.connect(self.refresh)
        self.dispatcher.message_changed.connect(lambda *_args: self.refresh())
        self.coordinator.mode_changed.connect(lambda *_args: self.refresh())

        self.clock_timer = QTimer(self)
        self.clock_timer.setInterval(1000)
        self.clock_timer.timeout.connect(self.refresh)
        self.clock_timer.start()
        self.refresh()

    def refresh(self) -> None:
        running = self.engine.is_running
        formatted = self.engine.formatted_time
        self.setIcon(self._running_icon if running else self._idle_icon)
        self.setToolTip(formatted if running else "Timer")
        self.time_action.setText(f"{self.engine.mode.value}  {formatted}")
        self.toggle_action.setText("Pause" if running else "Start")
        self.toggle_action.setEnabled(self.engine.mode != TimerMode.CLOCK)
        self.dismiss_action.setVisible(self.dispatcher.is_showing_message)
        self.mode_actions[self.engine.mode].setChecked(True)
        self.display_actions[self.coordinator.active_mode].setChecked(True)
