from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from lazytimer.core.app_state import AppState
from lazytimer.core.completion import CompletionDispatcher
from lazytimer.core.scheduler import Scheduler, TimerHandle


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000
LONG_BREAK_EVERY = 4
QUICK_FOCUS_MINUTES = (5, 15, 25)


class TimerMode(str, Enum):
    POMODORO = "Pomodoro"
    STOPWATCH = "Stopwatch"
    CLOCK = "Clock"


class SessionType(str, Enum):
    WORK = "Work"
    SHORT_BREAK = "Short Break"
    LONG_BREAK = "Long Break"


@dataclass(frozen=True)
class TimerSnapshot:
    mode: TimerMode
    session: SessionType
    session_count: int
    remaining_seconds: int
    elapsed_seconds: int
    is_running: bool
    progress: float
    formatted_time: str
    session_label: str


def format_seconds(total_seconds: int) -> str:
    hours, rest = divmod(max(0, total_seconds), 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def format_clock(now: datetime | None = None) -> str:
    return (now or datetime.now()).strftime("%H:%M:%S")


def format_date(now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"{now:%A}, {now:%B} {now.day}, {now:%Y}"


class TimerEngine(QObject):
    """Pomodoro/stopwatch engine driven by a one-second tick.

    All mutation happens on the UI thread through the public operations;
    views observe `state_changed` and read `snapshot()`.
    """

    state_changed = pyqtSignal()
    session_completed = pyqtSignal(object)

    def __init__(self, app_state: AppState, scheduler: Scheduler, dispatcher: CompletionDispatcher) -> None:
        super().__init__()
        self._app_state = app_state
        self._scheduler = scheduler
        self._dispatcher = dispatcher
        self._tick_handle: TimerHandle | None = None

        self._mode = TimerMode.POMODORO
        self._current_session = SessionType.WORK
        self._session_count = 0
        self._pomodoro_remaining = self._duration_for(SessionType.WORK)
        self._stopwatch_elapsed = 0
        self._is_running = False

        self._app_state.settings_changed.connect(self._on_settings_changed)

    @property
    def app_state(self) -> AppState:
        return self._app_state

    @property
    def mode(self) -> TimerMode:
        return self._mode

    @property
    def current_session(self) -> SessionType:
        return self._current_session

    @property
    def session_count(self) -> int:
        return self._session_count

    @property
    def pomodoro_remaining_seconds(self) -> int:
        return self._pomodoro_remaining

    @property
    def stopwatch_elapsed_seconds(self) -> int:
        return self._stopwatch_elapsed

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def has_pending_tick(self) -> bool:
        return self._tick_handle is not None and self._tick_handle.active

    @property
    def formatted_time(self) -> str:
        if self._mode == TimerMode.POMODORO:
            return format_seconds(self._pomodoro_remaining)
        if self._mode == TimerMode.STOPWATCH:
            return format_seconds(self._stopwatch_elapsed)
        return format_clock()

    @property
    def session_label(self) -> str:
        settings = self._app_state.settings
        if self._current_session == SessionType.WORK:
            return settings.work_label
        if self._current_session == SessionType.SHORT_BREAK:
            return settings.short_break_label
        return settings.long_break_label

    @property
    def progress(self) -> float:
        total = self._duration_for(self._current_session)
        if total <= 0:
            return 0.0
        return max(0.0, min(1.0, 1.0 - self._pomodoro_remaining / total))

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            mode=self._mode,
            session=self._current_session,
            session_count=self._session_count,
            remaining_seconds=self._pomodoro_remaining,
            elapsed_seconds=self._stopwatch_elapsed,
            is_running=self._is_running,
            progress=self.progress,
            formatted_time=self.formatted_time,
            session_label=self.session_label,
        )

    def toggle(self) -> None:
        self._is_running = not self._is_running
        if self._is_running:
            self._start_ticking()
        else:
            self._stop_ticking()
        logger.debug("Timer %s (%s)", "started" if self._is_running else "paused", self._mode.value)
        self.state_changed.emit()

    def tick(self) -> None:
        if self._mode == TimerMode.POMODORO:
            if self._pomodoro_remaining > 0:
                self._pomodoro_remaining -= 1
            else:
                self._handle_session_complete()
        elif self._mode == TimerMode.STOPWATCH:
            self._stopwatch_elapsed += 1
        self.state_changed.emit()

    def reset(self) -> None:
        self._is_running = False
        self._stop_ticking()
        self._dispatcher.dismiss_message()
        if self._mode == TimerMode.POMODORO:
            self._pomodoro_remaining = self._duration_for(self._current_session)
        elif self._mode == TimerMode.STOPWATCH:
            self._stopwatch_elapsed = 0
        self.state_changed.emit()

    def switch_session(self, session: SessionType) -> None:
        self._current_session = session
        self._pomodoro_remaining = self._duration_for(session)
        self.state_changed.emit()

    def set_mode(self, mode: TimerMode) -> None:
        if mode == self._mode:
            return
        self._mode = mode
        logger.debug("Mode set to %s", mode.value)
        self.state_changed.emit()

    def set_remaining(self, minutes: int, seconds: int) -> None:
        self._pomodoro_remaining = max(0, minutes) * 60 + max(0, seconds)
        self.state_changed.emit()

    def set_session_label(self, text: str) -> None:
        key = {
            SessionType.WORK: "work_label",
            SessionType.SHORT_BREAK: "short_break_label",
            SessionType.LONG_BREAK: "long_break_label",
        }[self._current_session]
        self._app_state.save_setting(key, text)

    def quick_focus(self, minutes: int) -> None:
        self._mode = TimerMode.POMODORO
        self._current_session = SessionType.WORK
        self._pomodoro_remaining = max(0, minutes) * 60
        self.state_changed.emit()

    def test_completion_action(self) -> None:
        self._dispatcher.execute(self._app_state.settings.completion_config)

    def _handle_session_complete(self) -> None:
        self._is_running = False
        self._stop_ticking()

        finished = self._current_session
        self._dispatcher.execute(self._app_state.settings.completion_config)

        if finished == SessionType.WORK:
            self._session_count += 1
            if self._session_count % LONG_BREAK_EVERY == 0:
                self.switch_session(SessionType.LONG_BREAK)
            else:
                self.switch_session(SessionType.SHORT_BREAK)
        else:
            self.switch_session(SessionType.WORK)

        logger.info(
            "%s session complete (completed work sessions: %d), next: %s",
            finished.value,
            self._session_count,
            self._current_session.value,
        )
        self.session_completed.emit(finished)

    def _start_ticking(self) -> None:
        self._stop_ticking()
        self._tick_handle = self._scheduler.call_every(TICK_INTERVAL_MS, self.tick)

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _duration_for(self, session: SessionType) -> int:
        settings = self._app_state.settings
        if session == SessionType.WORK:
            return settings.work_minutes * 60
        if session == SessionType.SHORT_BREAK:
            return settings.short_break_minutes * 60
        return settings.long_break_minutes * 60

    def _on_settings_changed(self, key: str, _value: object) -> None:
        duration_keys = {
            SessionType.WORK: "work_minutes",
            SessionType.SHORT_BREAK: "short_break_minutes",
            SessionType.LONG_BREAK: "long_break_minutes",
        }
        if key == duration_keys[self._current_session] and not self._is_running:
            self._pomodoro_remaining = self._duration_for(self._current_session)
            self.state_changed.emit()
        elif key.endswith("_label"):
            self.state_changed.emit()
