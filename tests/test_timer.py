from datetime import datetime

from lazytimer.core.completion import CompletionAction
from lazytimer.core.timer import SessionType, TimerMode, format_clock, format_date, format_seconds


def test_initial_state_is_paused_pomodoro_work(rig) -> None:
    engine = rig.engine

    assert engine.mode == TimerMode.POMODORO
    assert engine.current_session == SessionType.WORK
    assert engine.session_count == 0
    assert engine.pomodoro_remaining_seconds == 25 * 60
    assert engine.stopwatch_elapsed_seconds == 0
    assert engine.is_running is False
    assert engine.formatted_time == "25:00"


def test_toggle_keeps_a_single_tick_subscription(rig) -> None:
    engine, scheduler = rig.engine, rig.scheduler

    engine.toggle()
    assert engine.is_running is True
    assert len(scheduler.active_handles) == 1

    engine.toggle()
    assert engine.is_running is False
    assert scheduler.active_handles == []

    engine.toggle()
    engine.toggle()
    engine.toggle()
    assert len(scheduler.active_handles) == 1
    assert engine.has_pending_tick is True


def test_pomodoro_decrements_once_per_second(rig) -> None:
    engine = rig.engine
    engine.toggle()

    rig.scheduler.advance(10)

    assert engine.pomodoro_remaining_seconds == 1490
    assert engine.formatted_time == "24:50"


def test_paused_engine_ignores_elapsed_time(rig) -> None:
    engine = rig.engine
    engine.toggle()
    rig.scheduler.advance(3)
    engine.toggle()

    rig.scheduler.advance(60)

    assert engine.pomodoro_remaining_seconds == 1497


def test_work_session_reaches_zero_then_completes_once(rig) -> None:
    engine = rig.engine
    completed = []
    engine.session_completed.connect(completed.append)
    engine.toggle()

    rig.scheduler.advance(1500)
    assert engine.pomodoro_remaining_seconds == 0
    assert engine.formatted_time == "00:00"
    assert completed == []

    rig.scheduler.advance(1)
    assert completed == [SessionType.WORK]
    assert rig.alert.beeps == 1
    assert engine.session_count == 1
    assert engine.current_session == SessionType.SHORT_BREAK
    assert engine.pomodoro_remaining_seconds == 5 * 60
    assert engine.is_running is False
    assert rig.scheduler.active_handles == []

    rig.scheduler.advance(600)
    assert completed == [SessionType.WORK]
    assert rig.alert.beeps == 1


def _complete_current_session(engine) -> None:
    engine.set_remaining(0, 0)
    engine.tick()


def test_every_fourth_work_session_leads_to_long_break(rig) -> None:
    engine = rig.engine
    sequence = []

    for _ in range(8):
        _complete_current_session(engine)
        sequence.append(engine.current_session)

    assert sequence == [
        SessionType.SHORT_BREAK,
        SessionType.WORK,
        SessionType.SHORT_BREAK,
        SessionType.WORK,
        SessionType.SHORT_BREAK,
        SessionType.WORK,
        SessionType.LONG_BREAK,
        SessionType.WORK,
    ]
    assert engine.session_count == 4
    assert engine.pomodoro_remaining_seconds == 25 * 60


def test_break_completion_does_not_count_a_session(rig) -> None:
    engine = rig.engine
    engine.switch_session(SessionType.LONG_BREAK)

    _complete_current_session(engine)

    assert engine.current_session == SessionType.WORK
    assert engine.session_count == 0


def test_stopwatch_counts_up(rig) -> None:
    engine = rig.engine
    engine.set_mode(TimerMode.STOPWATCH)
    engine.toggle()

    rig.scheduler.advance(90)

    assert engine.stopwatch_elapsed_seconds == 90
    assert engine.formatted_time == "01:30"


def test_clock_tick_does_not_mutate_counters(rig) -> None:
    engine = rig.engine
    engine.set_mode(TimerMode.CLOCK)
    engine.toggle()

    rig.scheduler.advance(5)

    assert engine.pomodoro_remaining_seconds == 25 * 60
    assert engine.stopwatch_elapsed_seconds == 0


def test_set_mode_preserves_both_counters(rig) -> None:
    engine = rig.engine
    engine.toggle()
    rig.scheduler.advance(20)
    engine.set_mode(TimerMode.STOPWATCH)
    rig.scheduler.advance(7)
    engine.set_mode(TimerMode.POMODORO)

    assert engine.pomodoro_remaining_seconds == 1480
    assert engine.stopwatch_elapsed_seconds == 7


def test_reset_is_idempotent(rig) -> None:
    engine = rig.engine
    engine.toggle()
    rig.scheduler.advance(42)

    engine.reset()
    once = engine.snapshot()
    engine.reset()
    twice = engine.snapshot()

    assert once == twice
    assert once.remaining_seconds == 25 * 60
    assert once.is_running is False
    assert rig.scheduler.active_handles == []


def test_reset_stopwatch_and_clock(rig) -> None:
    engine = rig.engine
    engine.set_mode(TimerMode.STOPWATCH)
    engine.toggle()
    rig.scheduler.advance(12)
    engine.reset()
    assert engine.stopwatch_elapsed_seconds == 0

    engine.set_mode(TimerMode.CLOCK)
    engine.reset()
    assert engine.pomodoro_remaining_seconds == 25 * 60
    assert engine.is_running is False


def test_reset_clears_completion_message(rig) -> None:
    rig.app_state.save_setting("completion_action", CompletionAction.SHOW_MESSAGE)
    _complete_current_session(rig.engine)
    assert rig.dispatcher.is_showing_message is True

    rig.engine.reset()

    assert rig.dispatcher.is_showing_message is False
    assert rig.scheduler.active_handles == []


def test_switch_session_recomputes_without_touching_running(rig) -> None:
    engine = rig.engine
    engine.toggle()

    engine.switch_session(SessionType.LONG_BREAK)

    assert engine.pomodoro_remaining_seconds == 15 * 60
    assert engine.is_running is True
    assert len(rig.scheduler.active_handles) == 1


def test_duration_edit_rederives_paused_countdown(rig) -> None:
    engine = rig.engine
    rig.app_state.save_setting("work_minutes", 50)
    assert engine.pomodoro_remaining_seconds == 50 * 60

    engine.toggle()
    rig.scheduler.advance(5)
    rig.app_state.save_setting("work_minutes", 30)
    assert engine.pomodoro_remaining_seconds == 50 * 60 - 5

    rig.app_state.save_setting("short_break_minutes", 10)
    engine.switch_session(SessionType.SHORT_BREAK)
    assert engine.pomodoro_remaining_seconds == 10 * 60


def test_quick_focus_and_labels(rig) -> None:
    engine = rig.engine
    engine.set_mode(TimerMode.CLOCK)
    engine.switch_session(SessionType.SHORT_BREAK)

    engine.quick_focus(15)

    assert engine.mode == TimerMode.POMODORO
    assert engine.current_session == SessionType.WORK
    assert engine.formatted_time == "15:00"
    assert engine.session_label == "🎯 Focus Time"

    engine.set_session_label("Deep work")
    assert engine.session_label == "Deep work"
    assert rig.app_state.settings.work_label == "Deep work"


def test_progress_tracks_elapsed_fraction(rig) -> None:
    engine = rig.engine
    assert engine.progress == 0.0
    engine.set_remaining(12, 30)
    assert engine.progress == 0.5


def test_state_changed_fires_on_every_tick(rig) -> None:
    events = []
    rig.engine.state_changed.connect(lambda: events.append(1))
    rig.engine.toggle()
    rig.scheduler.advance(3)

    assert len(events) == 4


def test_formatting_helpers() -> None:
    assert format_seconds(0) == "00:00"
    assert format_seconds(90) == "01:30"
    assert format_seconds(3599) == "59:59"
    assert format_seconds(3661) == "1:01:01"
    moment = datetime(2026, 10, 19, 7, 5, 9)
    assert format_clock(moment) == "07:05:09"
    assert format_date(moment) == "Monday, October 19, 2026"
