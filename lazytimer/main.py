from __future__ import annotations

"""Точка входа приложения LazyTimer.

Модуль настраивает логирование, создает Qt-приложение, единственные экземпляры
состояния, движка таймера и координатора режимов показа и передает их всем
поверхностям отображения.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QSystemTrayIcon

from lazytimer.core.app_state import AppState
from lazytimer.core.completion import CompletionDispatcher
from lazytimer.core.display import DisplayModeCoordinator, PanelHost, WindowHost
from lazytimer.core.scheduler import QtScheduler
from lazytimer.core.services import ProcessSpeechService, QtAlertService, QtSoundPlayer
from lazytimer.core.settings import log_level_from_env
from lazytimer.core.timer import TimerEngine
from lazytimer.ui.floating import FloatingPanel
from lazytimer.ui.main_window import MainWindow
from lazytimer.ui.menu_bar import MenuBarSummary
from lazytimer.ui.overlay import OverlayPanel
from lazytimer.ui.settings_dialog import SettingsDialog
from lazytimer.ui.shortcuts import GlobalHotkeys, install_display_shortcuts
from lazytimer.ui.styles import apply_theme


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure root logging once for the application process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    return logging.getLogger("lazytimer")


class SettingsLauncher:
    """Opens the single settings dialog, reusing it once created."""

    def __init__(self, engine: TimerEngine) -> None:
        self._engine = engine
        self._dialog: SettingsDialog | None = None

    def __call__(self, *_args) -> None:
        if self._dialog is None:
            self._dialog = SettingsDialog(self._engine)
        self._dialog.show()
        self._dialog.raise_()
        self._dialog.activateWindow()


def main() -> int:
    """Создает зависимости приложения и запускает главный UI-цикл."""
    logger = setup_logging(log_level_from_env())
    app = QApplication(sys.argv)
    app.setApplicationName("LazyTimer")
    app.setQuitOnLastWindowClosed(False)
    apply_theme(app)

    scheduler = QtScheduler(app)
    alert = QtAlertService()
    dispatcher = CompletionDispatcher(
        scheduler=scheduler,
        alert=alert,
        speech=ProcessSpeechService(),
        player=QtSoundPlayer(on_error=alert.beep),
    )
    app_state = AppState()
    engine = TimerEngine(app_state, scheduler, dispatcher)
    open_settings = SettingsLauncher(engine)

    tray_available = QSystemTrayIcon.isSystemTrayAvailable()
    window = MainWindow(
        engine=engine,
        dispatcher=dispatcher,
        open_settings=open_settings,
        hide_on_close=tray_available,
    )

    def build_overlay() -> OverlayPanel:
        return OverlayPanel(engine, dispatcher, global_hotkeys=hotkeys.active)

    def build_floating() -> FloatingPanel:
        panel = FloatingPanel(engine)
        if not hotkeys.active:
            install_display_shortcuts(panel, coordinator)
        return panel

    coordinator = DisplayModeCoordinator(
        window=WindowHost(window),
        overlay=PanelHost(build_overlay),
        floating=PanelHost(build_floating),
    )
    hotkeys = GlobalHotkeys(coordinator)
    if hotkeys.register():
        app.aboutToQuit.connect(hotkeys.unregister)
    else:
        # In-app fallback: only fires while a LazyTimer window is active.
        install_display_shortcuts(window, coordinator)

    tray = MenuBarSummary(engine, dispatcher, coordinator, open_settings)
    if tray_available:
        tray.show()
    else:
        logger.warning("System tray unavailable; closing the window quits the app")
        app.setQuitOnLastWindowClosed(True)

    window.show()
    logger.info("LazyTimer started")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
