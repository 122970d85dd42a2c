from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, pyqtSignal


logger = logging.getLogger(__name__)


class DisplayMode(str, Enum):
    WINDOW = "window"
    OVERLAY = "overlay"
    FLOATING = "floating"


class Window(Protocol):
    def show(self) -> None: ...

    def hide(self) -> None: ...

    def raise_(self) -> None: ...

    def activateWindow(self) -> None: ...  # noqa: N802

    def isVisible(self) -> bool: ...  # noqa: N802


class Panel(Protocol):
    def show(self) -> None: ...

    def close(self) -> bool: ...

    def deleteLater(self) -> None: ...  # noqa: N802

    def isVisible(self) -> bool: ...  # noqa: N802


class SurfaceHost(Protocol):
    @property
    def is_visible(self) -> bool: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...


class WindowHost:
    """Main window surface: `show()` always leaves the window visible and in front."""

    def __init__(self, window: Window) -> None:
        self._window = window

    @property
    def is_visible(self) -> bool:
        return self._window.isVisible()

    def show(self) -> None:
        self._window.show()
        self._window.raise_()
        self._window.activateWindow()

    def hide(self) -> None:
        self._window.hide()


class PanelHost:
    """Lazily creates at most one panel; showing a live panel hides it instead."""

    def __init__(self, factory: Callable[[], Panel]) -> None:
        self._factory = factory
        self._panel: Panel | None = None

    @property
    def panel(self) -> Panel | None:
        return self._panel

    @property
    def is_visible(self) -> bool:
        return self._panel is not None and self._panel.isVisible()

    def show(self) -> None:
        if self._panel is not None:
            if self._panel.isVisible():
                self.hide()
                return
            # Closed from outside (window manager, close button).
            panel, self._panel = self._panel, None
            panel.deleteLater()
        self._panel = self._factory()
        self._panel.show()

    def hide(self) -> None:
        if self._panel is None:
            return
        panel, self._panel = self._panel, None
        panel.close()
        panel.deleteLater()


class DisplayModeCoordinator(QObject):
    """Keeps exactly one of window / overlay / floating presented."""

    mode_changed = pyqtSignal(object)

    def __init__(self, window: SurfaceHost, overlay: SurfaceHost, floating: SurfaceHost) -> None:
        super().__init__()
        self._hosts: dict[DisplayMode, SurfaceHost] = {
            DisplayMode.WINDOW: window,
            DisplayMode.OVERLAY: overlay,
            DisplayMode.FLOATING: floating,
        }
        self._active_mode = DisplayMode.WINDOW

    @property
    def active_mode(self) -> DisplayMode:
        return self._active_mode

    def host(self, mode: DisplayMode) -> SurfaceHost:
        return self._hosts[mode]

    def switch_to(self, mode: DisplayMode) -> None:
        previous = self._active_mode
        self._hosts[previous].hide()
        self._active_mode = mode
        self._hosts[mode].show()
        logger.info("Display mode %s -> %s", previous.value, mode.value)
        self.mode_changed.emit(mode)
