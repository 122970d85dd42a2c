from __future__ import annotations

import dataclasses
import logging
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from lazytimer.core.gradients import GRADIENT_PRESETS, GradientPreset, resolve_gradient
from lazytimer.core.settings import SettingsError, TimerSettings


logger = logging.getLogger(__name__)


class AppState(QObject):
    """In-memory settings store shared by the engine and every surface."""

    state_changed = pyqtSignal()
    settings_changed = pyqtSignal(str, object)
    gradient_changed = pyqtSignal(object)

    def __init__(self, settings: TimerSettings | None = None) -> None:
        super().__init__()
        self.settings: TimerSettings = settings or TimerSettings()

    @property
    def selected_gradient(self) -> GradientPreset:
        return resolve_gradient(self.settings.selected_gradient_index)

    @property
    def gradient_presets(self) -> tuple[GradientPreset, ...]:
        return GRADIENT_PRESETS

    def save_setting(self, key: str, value: Any) -> None:
        if key not in {f.name for f in dataclasses.fields(TimerSettings)}:
            raise SettingsError(f"Unknown setting: {key}")
        if getattr(self.settings, key) == value:
            return
        # Rejected edits leave the previous settings in place.
        self.settings = dataclasses.replace(self.settings, **{key: value})
        logger.debug("Setting %s = %r", key, value)
        self.settings_changed.emit(key, value)
        if key == "selected_gradient_index":
            self.gradient_changed.emit(self.selected_gradient)
        self.state_changed.emit()

    def select_gradient(self, index: int) -> None:
        self.save_setting("selected_gradient_index", index)
