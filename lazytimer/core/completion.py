from __future__ import annotations

"""Действие по завершении сессии: сигнал, речь, сообщение или звуковой файл."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from lazytimer.core.scheduler import Scheduler, TimerHandle


logger = logging.getLogger(__name__)

MESSAGE_TIMEOUT_MS = 5000


class CompletionAction(str, Enum):
    BEEP = "System Beep"
    SPEAK_TEXT = "Speak Text"
    SHOW_MESSAGE = "Show Message Overlay"
    PLAY_SOUND = "Play Sound File"


@dataclass(frozen=True)
class CompletionConfig:
    action: CompletionAction = CompletionAction.BEEP
    text: str = ""
    sound_path: str = ""


class AlertService(ABC):
    @abstractmethod
    def beep(self) -> None:
        """Play the system alert sound."""


class SpeechService(ABC):
    @abstractmethod
    def speak(self, text: str) -> None:
        """Speak `text` without waiting for it to finish."""


class SoundPlayer(ABC):
    @abstractmethod
    def play(self, path: str) -> bool:
        """Start playing the audio file at `path`; False if it cannot be started."""


class CompletionDispatcher(QObject):
    """Runs exactly one configured side effect per completion event.

    Owns the completion-message state because it auto-clears after
    `MESSAGE_TIMEOUT_MS` unless dismissed earlier.
    """

    message_changed = pyqtSignal(bool, str)

    def __init__(
        self,
        scheduler: Scheduler,
        alert: AlertService,
        speech: SpeechService,
        player: SoundPlayer,
        message_timeout_ms: int = MESSAGE_TIMEOUT_MS,
    ) -> None:
        super().__init__()
        self._scheduler = scheduler
        self._alert = alert
        self._speech = speech
        self._player = player
        self._message_timeout_ms = message_timeout_ms
        self._dismiss_handle: TimerHandle | None = None
        self._is_showing_message = False
        self._message_text = ""

    @property
    def is_showing_message(self) -> bool:
        return self._is_showing_message

    @property
    def message_text(self) -> str:
        return self._message_text

    def execute(self, config: CompletionConfig) -> None:
        logger.info("Completion action: %s", config.action.value)
        if config.action == CompletionAction.BEEP:
            self._beep()
        elif config.action == CompletionAction.SPEAK_TEXT:
            self._speak(config.text)
        elif config.action == CompletionAction.SHOW_MESSAGE:
            self.show_message(config.text)
        elif config.action == CompletionAction.PLAY_SOUND:
            self._play_sound(config.sound_path)

    def show_message(self, text: str) -> None:
        self._cancel_pending_dismiss()
        self._message_text = text
        self._is_showing_message = True
        self._dismiss_handle = self._scheduler.call_later(self._message_timeout_ms, self._auto_dismiss)
        self.message_changed.emit(True, text)

    def dismiss_message(self) -> None:
        self._cancel_pending_dismiss()
        if not self._is_showing_message:
            return
        self._is_showing_message = False
        self.message_changed.emit(False, self._message_text)

    def _auto_dismiss(self) -> None:
        self._dismiss_handle = None
        if self._is_showing_message:
            self._is_showing_message = False
            self.message_changed.emit(False, self._message_text)

    def _cancel_pending_dismiss(self) -> None:
        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
            self._dismiss_handle = None

    def _beep(self) -> None:
        try:
            self._alert.beep()
        except Exception as error:  # noqa: BLE001
            logger.warning("System beep failed: %s", error)

    def _speak(self, text: str) -> None:
        try:
            self._speech.speak(text)
        except Exception as error:  # noqa: BLE001
            logger.warning("Speech launch failed: %s", error)

    def _play_sound(self, path: str) -> None:
        if not path.strip():
            logger.debug("No completion sound configured, beeping instead")
            self._beep()
            return
        try:
            started = self._player.play(path)
        except Exception as error:  # noqa: BLE001
            logger.warning("Sound playback failed for %s: %s", path, error)
            started = False
        if not started:
            self._beep()
