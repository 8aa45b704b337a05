"""
Per-frame driver for a TetrisGame.

The host (pygame's event loop in play.py) calls GameLoop.tick() once per
frame with a millisecond timestamp. A tick runs due deferred actions,
advances automatic descent and decides whether this frame should be drawn.
The loop itself never sleeps.
"""

from __future__ import annotations

from typing import Callable

from neontris.game.tetris import TetrisGame

NORMAL_FPS = 60
PERFORMANCE_FPS = 30


class GameLoop:
    """Drop accumulator plus an optional render throttle.

    In normal mode every tick renders. In performance mode a tick renders
    only if at least min_frame_time ms have passed since the last render.

    Attributes:
        game: The session being driven.
        render: Called on ticks that should draw, if given.
        last_time: Timestamp of the previous tick (None before the first).
        last_render_time: Timestamp of the last tick that rendered.
    """

    def __init__(
        self,
        game: TetrisGame,
        render: Callable[[], None] | None = None,
        performance_mode: bool = False,
    ) -> None:
        self.game = game
        self.render = render
        self.last_time: float | None = None
        self.last_render_time: float = 0.0
        self.performance_mode = performance_mode

    @property
    def performance_mode(self) -> bool:
        return self._performance_mode

    @performance_mode.setter
    def performance_mode(self, enabled: bool) -> None:
        self._performance_mode = enabled
        self.target_fps = PERFORMANCE_FPS if enabled else NORMAL_FPS

    @property
    def min_frame_time(self) -> float:
        """Minimum ms between renders while in performance mode."""
        return 1000 / self.target_fps

    def start(self, now: float) -> None:
        """Anchor the loop's clocks at `now` before the first tick."""
        self.last_time = now
        self.last_render_time = now
        self.game.scheduler.advance_to(now)

    def tick(self, now: float) -> bool:
        """Advance the simulation to `now`.

        Args:
            now: Monotonic timestamp in ms.

        Returns:
            True if this tick rendered (or should have, with no render
            callable).
        """
        if self.last_time is None:
            self.last_time = now
        delta = now - self.last_time
        self.last_time = now

        self.game.scheduler.advance_to(now)

        if self.game.is_running:
            self.game.drop_counter += delta
            if self.game.drop_counter > self.game.drop_interval:
                self.game.soft_drop()

        if not self._should_render(now):
            return False
        if self.render is not None:
            self.render()
        return True

    def _should_render(self, now: float) -> bool:
        if not self.performance_mode:
            return True
        if now - self.last_render_time >= self.min_frame_time:
            self.last_render_time = now
            return True
        return False
