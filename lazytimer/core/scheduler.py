from __future__ import annotations

"""Источник тиков: периодические и отложенные вызовы в цикле событий Qt."""

from abc import ABC, abstractmethod
from typing import Callable

from PyQt6.QtCore import QObject, QTimer


class TimerHandle(ABC):
    @property
    @abstractmethod
    def active(self) -> bool:
        """True while the callback is still scheduled."""

    @abstractmethod
    def cancel(self) -> None:
        """Unschedule the callback. Safe to call more than once."""


class Scheduler(ABC):
    """Schedules callbacks on the single UI thread."""

    @abstractmethod
    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Invoke `callback` every `interval_ms` until cancelled."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Invoke `callback` once after `delay_ms` unless cancelled."""


class _QtTimerHandle(TimerHandle):
    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtScheduler(Scheduler):
    """`QTimer`-backed scheduler; all callbacks run on the GUI thread."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        timer = QTimer(self._parent)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return _QtTimerHandle(timer)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        handle = _QtTimerHandle(timer)

        def fire() -> None:
            handle.cancel()
            callback()

        timer.timeout.connect(fire)
        timer.start()
        return handle
