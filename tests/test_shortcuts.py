import threading

import pytest
from PyQt6.QtCore import QCoreApplication

from fakes import FakePanel, FakeWindow
from lazytimer.core.display import DisplayMode, DisplayModeCoordinator, PanelHost, WindowHost
from lazytimer.ui.shortcuts import GlobalHotkeys


class RecordingHotkeyBackend:
    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.bound: dict[str, tuple] = {}
        self.removed: list[str] = []

    def add_hotkey(self, keys, callback, args=()):
        if keys == self.fail_on:
            raise ImportError("You must be root to use this library on linux.")
        self.bound[keys] = (callback, args)
        return keys

    def remove_hotkey(self, handle) -> None:
        self.removed.append(handle)
        del self.bound[handle]

    def press(self, keys: str) -> None:
        callback, args = self.bound[keys]
        callback(*args)


@pytest.fixture(scope="module")
def qt_app():
    return QCoreApplication.instance() or QCoreApplication([])


def _coordinator():
    window = FakeWindow(visible=True)
    return DisplayModeCoordinator(
        window=WindowHost(window),
        overlay=PanelHost(FakePanel),
        floating=PanelHost(FakePanel),
    )


def test_hotkeys_switch_display_mode_on_the_gui_thread(qt_app) -> None:
    coordinator = _coordinator()
    backend = RecordingHotkeyBackend()
    hotkeys = GlobalHotkeys(coordinator, backend=backend)

    assert hotkeys.register() is True
    assert hotkeys.active is True
    assert sorted(backend.bound) == ["ctrl+shift+f", "ctrl+shift+o", "ctrl+shift+w"]

    listener = threading.Thread(target=backend.press, args=("ctrl+shift+o",))
    listener.start()
    listener.join()
    assert coordinator.active_mode == DisplayMode.WINDOW

    qt_app.processEvents()
    assert coordinator.active_mode == DisplayMode.OVERLAY

    backend.press("ctrl+shift+w")
    qt_app.processEvents()
    assert coordinator.active_mode == DisplayMode.WINDOW


def test_partial_registration_is_rolled_back() -> None:
    backend = RecordingHotkeyBackend(fail_on="ctrl+shift+f")
    hotkeys = GlobalHotkeys(_coordinator(), backend=backend)

    assert hotkeys.register() is False
    assert hotkeys.active is False
    assert backend.bound == {}
    assert backend.removed == ["ctrl+shift+o"]


def test_unregister_releases_every_hotkey() -> None:
    backend = RecordingHotkeyBackend()
    hotkeys = GlobalHotkeys(_coordinator(), backend=backend)
    hotkeys.register()

    hotkeys.unregister()
    hotkeys.unregister()

    assert backend.bound == {}
    assert hotkeys.active is False
