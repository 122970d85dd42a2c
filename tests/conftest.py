from __future__ import annotations

from dataclasses import dataclass

import pytest

from fakes import FakeScheduler, RecordingAlert, RecordingPlayer, RecordingSpeech
from lazytimer.core.app_state import AppState
from lazytimer.core.completion import CompletionDispatcher
from lazytimer.core.timer import TimerEngine


@dataclass
class Rig:
    scheduler: FakeScheduler
    alert: RecordingAlert
    speech: RecordingSpeech
    player: RecordingPlayer
    dispatcher: CompletionDispatcher
    app_state: AppState
    engine: TimerEngine


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def rig(scheduler: FakeScheduler) -> Rig:
    alert = RecordingAlert()
    speech = RecordingSpeech()
    player = RecordingPlayer()
    dispatcher = CompletionDispatcher(scheduler=scheduler, alert=alert, speech=speech, player=player)
    app_state = AppState()
    engine = TimerEngine(app_state, scheduler, dispatcher)
    return Rig(scheduler, alert, speech, player, dispatcher, app_state, engine)
