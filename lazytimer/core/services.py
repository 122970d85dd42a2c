from __future__ import annotations

"""Внешние исполнители действий завершения: системный сигнал, речь, аудиофайлы."""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable

from PyQt6.QtCore import QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer
from PyQt6.QtWidgets import QApplication

from lazytimer.core.completion import AlertService, SoundPlayer, SpeechService


logger = logging.getLogger(__name__)

SPEECH_PROGRAMS = ("say", "spd-say", "espeak")


class QtAlertService(AlertService):
    def beep(self) -> None:
        QApplication.beep()


class ProcessSpeechService(SpeechService):
    """Launches the platform speech command detached; never waits on it."""

    def __init__(self, programs: tuple[str, ...] = SPEECH_PROGRAMS) -> None:
        self._program = next((p for p in (shutil.which(name) for name in programs) if p), None)

    @property
    def available(self) -> bool:
        return self._program is not None

    def speak(self, text: str) -> None:
        if self._program is None:
            logger.warning("No speech program found (tried %s)", ", ".join(SPEECH_PROGRAMS))
            return
        try:
            subprocess.Popen(
                [self._program, text],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as error:
            logger.warning("Could not launch %s: %s", self._program, error)


class QtSoundPlayer(SoundPlayer):
    """Plays audio files through `QMediaPlayer`.

    Playback errors arrive asynchronously; they are reported to `on_error`
    so the caller can fall back to the system beep.
    """

    def __init__(self, on_error: Callable[[], None] | None = None) -> None:
        self._on_error = on_error
        self._output = QAudioOutput()
        self._player = QMediaPlayer()
        self._player.setAudioOutput(self._output)
        self._player.errorOccurred.connect(self._handle_error)

    def play(self, path: str) -> bool:
        file_path = Path(path).expanduser()
        if not file_path.is_file():
            logger.warning("Completion sound not found: %s", file_path)
            return False
        self._player.stop()
        self._player.setSource(QUrl.fromLocalFile(str(file_path)))
        self._player.play()
        return True

    def _handle_error(self, _error: QMediaPlayer.Error, message: str) -> None:
        logger.warning("Completion sound playback failed: %s", message)
        if self._on_error is not None:
            self._on_error()
