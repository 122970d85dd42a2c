from __future__ import annotations

"""Горячие клавиши переключения режимов показа: глобальные и внутри приложения."""

import logging
from typing import Any

import keyboard
from PyQt6.QtCore import QObject, Qt, pyqtSignal
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QWidget

from lazytimer.core.display import DisplayMode, DisplayModeCoordinator


logger = logging.getLogger(__name__)

DISPLAY_SHORTCUTS = {
    DisplayMode.OVERLAY: ("Show Overlay", "Ctrl+Shift+O"),
    DisplayMode.FLOATING: ("Show Floating Timer", "Ctrl+Shift+F"),
    DisplayMode.WINDOW: ("Show Standard Window", "Ctrl+Shift+W"),
}


class GlobalHotkeys(QObject):
    """System-wide display-mode hotkeys registered through `keyboard`.

    `keyboard` calls back on its listener thread; `triggered` is connected
    queued so `switch_to` always runs on the GUI thread.
    """

    triggered = pyqtSignal(object)

    def __init__(self, coordinator: DisplayModeCoordinator, backend: Any = keyboard) -> None:
        super().__init__()
        self._backend = backend
        self._handles: list[Any] = []
        self.triggered.connect(coordinator.switch_to, Qt.ConnectionType.QueuedConnection)

    @property
    def active(self) -> bool:
        return bool(self._handles)

    def register(self) -> bool:
        """Binds every hotkey; on any failure binds none and returns False."""
        for mode, (_title, keys) in DISPLAY_SHORTCUTS.items():
            try:
                handle = self._backend.add_hotkey(keys.lower(), self.triggered.emit, args=(mode,))
            except Exception as error:  # noqa: BLE001
                logger.warning("Global hotkey %s unavailable: %s", keys, error)
                self.unregister()
                return False
            self._handles.append(handle)
        logger.info("Global display hotkeys registered")
        return True

    def unregister(self) -> None:
        handles, self._handles = self._handles, []
        for handle in handles:
            try:
                self._backend.remove_hotkey(handle)
            except (KeyError, ValueError) as error:
                logger.debug("Hotkey already removed: %s", error)


def install_display_shortcuts(widget: QWidget, coordinator: DisplayModeCoordinator) -> list[QAction]:
    """Binds the display-mode shortcuts while one of the app windows is active."""
    actions = []
    for mode, (title, keys) in DISPLAY_SHORTCUTS.items():
        action = QAction(title, widget)
        action.setShortcut(QKeySequence(keys))
        action.setShortcutContext(Qt.ShortcutContext.ApplicationShortcut)
        action.triggered.connect(lambda _checked=False, m=mode: coordinator.switch_to(m))
        widget.addAction(action)
        actions.append(action)
    return actions
