"""Tests for Settings and SettingsController."""

from __future__ import annotations

import pytest

from neontris.loop import GameLoop
from neontris.settings import (
    DROP_INTERVAL_KEY_STEP,
    DROP_INTERVAL_RANGE,
    SPEED_DEBOUNCE,
    Settings,
    SettingsController,
)


@pytest.fixture
def controller(game) -> SettingsController:
    loop = GameLoop(game)
    loop.start(0)
    return SettingsController(Settings(), game, loop)


def test_glow_is_off_in_performance_mode():
    assert Settings().glow_enabled
    assert not Settings(neon_glow=False).glow_enabled
    assert not Settings(performance_mode=True, neon_glow=True).glow_enabled


def test_from_config_reads_and_clamps():
    settings = Settings.from_config({"performance_mode": True, "neon_glow": False, "drop_interval": 5})
    assert settings.performance_mode
    assert not settings.neon_glow
    assert settings.drop_interval == DROP_INTERVAL_RANGE[0]

    assert Settings.from_config({}) == Settings()


def test_performance_mode_switches_loop_throttle(controller):
    controller.set_performance_mode(True)
    assert controller.loop.performance_mode
    assert controller.loop.target_fps == 30
    controller.toggle_performance_mode()
    assert not controller.loop.performance_mode
    assert controller.loop.target_fps == 60


def test_toggle_glow(controller):
    controller.toggle_neon_glow()
    assert not controller.settings.neon_glow
    controller.set_neon_glow(True)
    assert controller.settings.glow_enabled


def test_drop_interval_change_is_debounced(controller, game):
    scheduler = game.scheduler
    assert controller.set_drop_interval(500)
    assert game.drop_interval == 1000

    scheduler.advance_to(SPEED_DEBOUNCE - 1)
    assert game.drop_interval == 1000
    scheduler.advance_to(SPEED_DEBOUNCE)
    assert game.drop_interval == 500


def test_burst_of_changes_applies_only_the_last(controller, game):
    scheduler = game.scheduler
    controller.set_drop_interval(500)
    scheduler.advance_to(50)
    controller.set_drop_interval(700)

    scheduler.advance_to(100)
    assert game.drop_interval == 1000
    scheduler.advance_to(50 + SPEED_DEBOUNCE)
    assert game.drop_interval == 700


def test_drop_interval_ignored_in_performance_mode(controller, game):
    controller.set_performance_mode(True)
    assert not controller.set_drop_interval(300)
    game.scheduler.advance_to(1000)
    assert game.drop_interval == 1000
    assert controller.settings.drop_interval == 1000


def test_adjust_drop_interval_clamps(controller, game):
    assert controller.adjust_drop_interval(-DROP_INTERVAL_KEY_STEP)
    assert controller.settings.drop_interval == 1000 - DROP_INTERVAL_KEY_STEP

    controller.set_drop_interval(DROP_INTERVAL_RANGE[1] + 500)
    assert controller.settings.drop_interval == DROP_INTERVAL_RANGE[1]
    game.scheduler.advance_to(SPEED_DEBOUNCE)
    assert game.drop_interval == DROP_INTERVAL_RANGE[1]


def test_speed_change_after_level_up_keeps_the_ramp(controller, game):
    game.scores.lines, game.scores.level = 49, 4
    game.scores.drop_interval = 760
    game.scores.update(1)
    assert game.drop_interval == 700

    assert controller.adjust_drop_interval(-DROP_INTERVAL_KEY_STEP)
    game.scheduler.advance_to(SPEED_DEBOUNCE)
    assert game.drop_interval == 650
