import logging

import pytest

from lazytimer.core.app_state import AppState
from lazytimer.core.completion import CompletionAction
from lazytimer.core.gradients import (
    DEFAULT_PRESET_INDEX,
    GRADIENT_PRESETS,
    ImageBackground,
    LinearBackground,
    MeshBackground,
    NoBackground,
    GradientPreset,
    background_for,
    parse_hex,
    resolve_gradient,
)
from lazytimer.core.settings import SettingsError, TimerPosition, TimerSettings, log_level_from_env


def test_defaults_match_a_fresh_process() -> None:
    settings = TimerSettings()

    assert (settings.work_minutes, settings.short_break_minutes, settings.long_break_minutes) == (25, 5, 15)
    assert settings.overlay_position == TimerPosition.CENTER
    assert settings.completion_action == CompletionAction.BEEP
    assert settings.completion_config.text == "Time is up! Take a break."
    assert settings.selected_gradient_index == DEFAULT_PRESET_INDEX


def test_save_setting_emits_and_replaces() -> None:
    state = AppState()
    changes = []
    state.settings_changed.connect(lambda key, value: changes.append((key, value)))

    state.save_setting("overlay_opacity", 0.5)
    state.save_setting("overlay_opacity", 0.5)

    assert state.settings.overlay_opacity == 0.5
    assert changes == [("overlay_opacity", 0.5)]


def test_invalid_edit_is_rejected_and_previous_settings_kept() -> None:
    state = AppState()

    with pytest.raises(SettingsError):
        state.save_setting("work_minutes", 0)
    with pytest.raises(SettingsError):
        state.save_setting("overlay_opacity", 1.5)
    with pytest.raises(SettingsError):
        state.save_setting("no_such_setting", 1)

    assert state.settings == TimerSettings()


@pytest.mark.parametrize("index", [-1, len(GRADIENT_PRESETS), 999])
def test_out_of_range_gradient_index_resolves_to_default(index: int) -> None:
    state = AppState()
    gradients = []
    state.gradient_changed.connect(gradients.append)

    state.select_gradient(index)

    assert state.selected_gradient == GRADIENT_PRESETS[DEFAULT_PRESET_INDEX]
    assert state.selected_gradient.name == "Ocean Depth"
    assert gradients == [GRADIENT_PRESETS[DEFAULT_PRESET_INDEX]]


def test_valid_gradient_index_is_used() -> None:
    assert resolve_gradient(0).name == "None (Transparent)"
    assert resolve_gradient(14).name == "Ember"


def test_parse_hex_forms() -> None:
    assert parse_hex("#fff") == (255, 255, 255, 255)
    assert parse_hex("#0077b6") == (0, 119, 182, 255)
    assert parse_hex("#80ff0000") == (255, 0, 0, 128)
    assert parse_hex("#12345") == (0, 0, 0, 255)
    assert parse_hex("not a color") == (0, 0, 0, 255)


def test_background_variants() -> None:
    assert background_for(GRADIENT_PRESETS[0]) == NoBackground()
    assert background_for(GRADIENT_PRESETS[1], "/pics/sky.png") == ImageBackground(path="/pics/sky.png")

    mesh = background_for(resolve_gradient(DEFAULT_PRESET_INDEX))
    assert isinstance(mesh, MeshBackground)
    assert len(mesh.colors) == 9

    linear = GradientPreset(name="Duo", colors=((0, 0, 0, 255), (255, 255, 255, 255)), angle=135.0, kind="linear")
    assert background_for(linear) == LinearBackground(colors=linear.colors, angle=135.0)


def test_log_level_from_env() -> None:
    assert log_level_from_env({}) == logging.INFO
    assert log_level_from_env({"LAZYTIMER_LOG_LEVEL": "debug"}) == logging.DEBUG
    assert log_level_from_env({"LAZYTIMER_LOG_LEVEL": "chatty"}) == logging.INFO
