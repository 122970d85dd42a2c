from __future__ import annotations

"""Настройки таймера: хранятся только в памяти на время работы процесса."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from lazytimer.core.completion import CompletionAction, CompletionConfig
from lazytimer.core.gradients import DEFAULT_PRESET_INDEX


LOG_LEVEL_ENV = "LAZYTIMER_LOG_LEVEL"

WORK_MINUTES_RANGE = (1, 60)
SHORT_BREAK_MINUTES_RANGE = (1, 30)
LONG_BREAK_MINUTES_RANGE = (1, 60)
OPACITY_RANGE = (0.1, 1.0)
SUBTITLE_FONT_SIZE_RANGE = (12.0, 72.0)
SUBTITLE_FONTS = ("System", "Helvetica Neue", "Avenir", "Georgia", "Menlo", "Courier New")


class SettingsError(ValueError):
    """Raised when a settings edit carries an out-of-range value."""


class TimerPosition(str, Enum):
    CENTER = "Center"
    TOP_LEFT = "Top Left"
    TOP_RIGHT = "Top Right"
    BOTTOM_LEFT = "Bottom Left"
    BOTTOM_RIGHT = "Bottom Right"


@dataclass(frozen=True)
class TimerSettings:
    work_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15

    overlay_opacity: float = 0.85
    overlay_position: TimerPosition = TimerPosition.CENTER

    subtitle_text: str = ""
    subtitle_font_size: float = 24.0
    subtitle_bold: bool = False
    subtitle_italic: bool = False
    subtitle_font_name: str = "System"

    work_label: str = "🎯 Focus Time"
    short_break_label: str = "☕ Short Break"
    long_break_label: str = "🌴 Long Break"

    completion_action: CompletionAction = CompletionAction.BEEP
    completion_text: str = "Time is up! Take a break."
    completion_sound_path: str = ""

    custom_image_path: str = ""
    selected_gradient_index: int = DEFAULT_PRESET_INDEX

    def __post_init__(self) -> None:
        _check_range("work_minutes", self.work_minutes, WORK_MINUTES_RANGE)
        _check_range("short_break_minutes", self.short_break_minutes, SHORT_BREAK_MINUTES_RANGE)
        _check_range("long_break_minutes", self.long_break_minutes, LONG_BREAK_MINUTES_RANGE)
        _check_range("overlay_opacity", self.overlay_opacity, OPACITY_RANGE)
        _check_range("subtitle_font_size", self.subtitle_font_size, SUBTITLE_FONT_SIZE_RANGE)
        if not isinstance(self.overlay_position, TimerPosition):
            raise SettingsError(f"overlay_position must be a TimerPosition, got: {self.overlay_position!r}")
        if not isinstance(self.completion_action, CompletionAction):
            raise SettingsError(f"completion_action must be a CompletionAction, got: {self.completion_action!r}")

    @property
    def completion_config(self) -> CompletionConfig:
        return CompletionConfig(
            action=self.completion_action,
            text=self.completion_text,
            sound_path=self.completion_sound_path,
        )


def _check_range(name: str, value: float, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"{name} must be a number, got: {value!r}")
    if not low <= value <= high:
        raise SettingsError(f"{name} must be in [{low}, {high}], got: {value}")


def log_level_from_env(environ: Mapping[str, str] | None = None) -> int:
    env = environ if environ is not None else os.environ
    raw = env.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO
