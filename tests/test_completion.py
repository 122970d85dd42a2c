from fakes import RecordingAlert, RecordingPlayer, RecordingSpeech
from lazytimer.core.completion import CompletionAction, CompletionConfig, CompletionDispatcher


def _dispatcher(scheduler, speech=None, player=None):
    alert = RecordingAlert()
    dispatcher = CompletionDispatcher(
        scheduler=scheduler,
        alert=alert,
        speech=speech or RecordingSpeech(),
        player=player or RecordingPlayer(),
    )
    return dispatcher, alert


def test_beep_runs_exactly_one_branch(scheduler) -> None:
    speech = RecordingSpeech()
    player = RecordingPlayer()
    dispatcher, alert = _dispatcher(scheduler, speech, player)

    dispatcher.execute(CompletionConfig(action=CompletionAction.BEEP, text="hi", sound_path="/tmp/a.wav"))

    assert alert.beeps == 1
    assert speech.spoken == []
    assert player.played == []
    assert dispatcher.is_showing_message is False


def test_speak_text_uses_configured_message(scheduler) -> None:
    speech = RecordingSpeech()
    dispatcher, alert = _dispatcher(scheduler, speech=speech)

    dispatcher.execute(CompletionConfig(action=CompletionAction.SPEAK_TEXT, text="Time is up!"))

    assert speech.spoken == ["Time is up!"]
    assert alert.beeps == 0


def test_speech_failure_is_absorbed(scheduler) -> None:
    dispatcher, alert = _dispatcher(scheduler, speech=RecordingSpeech(error=OSError("no say")))

    dispatcher.execute(CompletionConfig(action=CompletionAction.SPEAK_TEXT, text="x"))

    assert alert.beeps == 0


def test_show_message_auto_clears_after_five_seconds(scheduler) -> None:
    dispatcher, _alert = _dispatcher(scheduler)
    events = []
    dispatcher.message_changed.connect(lambda visible, text: events.append((visible, text)))

    dispatcher.execute(CompletionConfig(action=CompletionAction.SHOW_MESSAGE, text="Done"))
    assert dispatcher.is_showing_message is True
    assert dispatcher.message_text == "Done"

    scheduler.advance(4.999)
    assert dispatcher.is_showing_message is True

    scheduler.advance(0.001)
    assert dispatcher.is_showing_message is False
    assert events == [(True, "Done"), (False, "Done")]


def test_dismiss_clears_immediately_and_cancels_pending_callback(scheduler) -> None:
    dispatcher, _alert = _dispatcher(scheduler)
    events = []
    dispatcher.message_changed.connect(lambda visible, text: events.append(visible))

    dispatcher.show_message("Done")
    dispatcher.dismiss_message()

    assert dispatcher.is_showing_message is False
    assert scheduler.active_handles == []
    scheduler.advance(10)
    assert events == [True, False]


def test_dismiss_without_message_is_noop(scheduler) -> None:
    dispatcher, _alert = _dispatcher(scheduler)
    events = []
    dispatcher.message_changed.connect(lambda visible, text: events.append(visible))

    dispatcher.dismiss_message()

    assert events == []


def test_second_message_restarts_the_window(scheduler) -> None:
    dispatcher, _alert = _dispatcher(scheduler)

    dispatcher.show_message("first")
    scheduler.advance(3)
    dispatcher.show_message("second")
    assert len(scheduler.active_handles) == 1

    scheduler.advance(3)
    assert dispatcher.is_showing_message is True
    assert dispatcher.message_text == "second"

    scheduler.advance(2)
    assert dispatcher.is_showing_message is False


def test_play_sound_success_does_not_beep(scheduler) -> None:
    player = RecordingPlayer(result=True)
    dispatcher, alert = _dispatcher(scheduler, player=player)

    dispatcher.execute(CompletionConfig(action=CompletionAction.PLAY_SOUND, sound_path="/sounds/bell.wav"))

    assert player.played == ["/sounds/bell.wav"]
    assert alert.beeps == 0


def test_play_sound_falls_back_to_beep(scheduler) -> None:
    missing_path, missing_path_alert = _dispatcher(scheduler, player=RecordingPlayer())
    missing_path.execute(CompletionConfig(action=CompletionAction.PLAY_SOUND, sound_path="  "))
    assert missing_path_alert.beeps == 1

    refused, refused_alert = _dispatcher(scheduler, player=RecordingPlayer(result=False))
    refused.execute(CompletionConfig(action=CompletionAction.PLAY_SOUND, sound_path="/nope.wav"))
    assert refused_alert.beeps == 1

    broken, broken_alert = _dispatcher(scheduler, player=RecordingPlayer(error=RuntimeError("device busy")))
    broken.execute(CompletionConfig(action=CompletionAction.PLAY_SOUND, sound_path="/bell.wav"))
    assert broken_alert.beeps == 1


def test_engine_test_trigger_uses_current_settings(rig) -> None:
    rig.app_state.save_setting("completion_action", CompletionAction.SPEAK_TEXT)
    rig.app_state.save_setting("completion_text", "Stretch!")

    rig.engine.test_completion_action()

    assert rig.speech.spoken == ["Stretch!"]
    assert rig.engine.session_count == 0
