"""
Settings surface: performance mode, neon glow and drop speed.

Settings hold what the player chose; SettingsController applies those
choices to the running game and loop. Drop speed changes arrive in bursts
(a slider being dragged, a key held down) so they are debounced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from neontris.game.scoring import DEFAULT_DROP_INTERVAL
from neontris.game.tetris import TetrisGame
from neontris.loop import GameLoop
from neontris.scheduler import Debouncer

SPEED_DEBOUNCE = 80  # ms

DROP_INTERVAL_RANGE = (100, 2000)  # ms, settings slider bounds
DROP_INTERVAL_KEY_STEP = 50


@dataclass
class Settings:
    """Player-facing options.

    Attributes:
        performance_mode: Throttle rendering and disable glow.
        neon_glow: Draw the glow halo around cells.
        drop_interval: ms between automatic drops at level 0.
    """

    performance_mode: bool = False
    neon_glow: bool = True
    drop_interval: int = DEFAULT_DROP_INTERVAL

    @property
    def glow_enabled(self) -> bool:
        """Glow is only drawn outside performance mode."""
        return self.neon_glow and not self.performance_mode

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Settings:
        """Build settings from a config dict (see config/settings.yaml)."""
        return cls(
            performance_mode=bool(config.get("performance_mode", False)),
            neon_glow=bool(config.get("neon_glow", True)),
            drop_interval=clamp_drop_interval(
                int(config.get("drop_interval", DEFAULT_DROP_INTERVAL))
            ),
        )


def clamp_drop_interval(interval: int) -> int:
    low, high = DROP_INTERVAL_RANGE
    return max(low, min(high, interval))


class SettingsController:
    """Applies setting changes to a game session and its loop."""

    def __init__(self, settings: Settings, game: TetrisGame, loop: GameLoop) -> None:
        self.settings = settings
        self.game = game
        self.loop = loop
        self._speed_debounce = Debouncer(game.scheduler, SPEED_DEBOUNCE)
        self.loop.performance_mode = settings.performance_mode
        self.game.set_drop_interval(settings.drop_interval)

    def set_performance_mode(self, enabled: bool) -> None:
        self.settings.performance_mode = enabled
        self.loop.performance_mode = enabled

    def toggle_performance_mode(self) -> None:
        self.set_performance_mode(not self.settings.performance_mode)

    def set_neon_glow(self, enabled: bool) -> None:
        self.settings.neon_glow = enabled

    def toggle_neon_glow(self) -> None:
        self.set_neon_glow(not self.settings.neon_glow)

    def set_drop_interval(self, interval: int) -> bool:
        """Request a new drop interval.

        The game picks it up SPEED_DEBOUNCE ms after the last request in a
        burst. Requests are ignored in performance mode.

        Returns:
            True if the request was accepted.
        """
        if self.settings.performance_mode:
            return False
        interval = clamp_drop_interval(interval)
        self.settings.drop_interval = interval
        self._speed_debounce.trigger(lambda: self.game.set_drop_interval(interval))
        return True

    def adjust_drop_interval(self, step: int) -> bool:
        """Nudge the drop interval by `step` ms (keyboard surface)."""
        return self.set_drop_interval(self.settings.drop_interval + step)
