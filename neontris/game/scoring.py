"""
Score, line count, level and drop speed.

Scoring follows the NES table: the base award for a clear is multiplied by
(level + 1). Every 10 lines advance a level and each level gained makes the
automatic drop faster, down to a fixed floor.
"""

from __future__ import annotations

from dataclasses import dataclass

# NES-style scoring table: index = lines cleared (1-4)
SCORE_TABLE: dict[int, int] = {
    1: 40,
    2: 100,
    3: 300,
    4: 1200,
}

LINES_PER_LEVEL = 10

DEFAULT_DROP_INTERVAL = 1000  # ms between automatic drops at level 0
DROP_INTERVAL_STEP = 60       # ms faster per level gained
MIN_DROP_INTERVAL = 120       # ms, fastest automatic drop


@dataclass
class ScoreState:
    """Cumulative score and the drop speed derived from it.

    Attributes:
        score: Points accumulated this session.
        lines: Lines cleared this session.
        level: lines // LINES_PER_LEVEL.
        drop_interval: Current ms between automatic drops.
        base_drop_interval: Drop interval at level 0; restored on reset.
    """

    score: int = 0
    lines: int = 0
    level: int = 0
    drop_interval: int = DEFAULT_DROP_INTERVAL
    base_drop_interval: int = DEFAULT_DROP_INTERVAL

    def points_for(self, cleared: int) -> int:
        """Points a clear of `cleared` lines is worth at the current level."""
        return SCORE_TABLE.get(cleared, 0) * (self.level + 1)

    def update(self, cleared: int) -> int:
        """Record a clear of `cleared` lines.

        Adds the award, bumps the line count and recomputes the level. Each
        level gained lowers the drop interval by DROP_INTERVAL_STEP, never
        below MIN_DROP_INTERVAL.

        Returns:
            Points earned by this clear.
        """
        points = self.points_for(cleared)
        self.score += points
        self.lines += cleared
        new_level = self.lines // LINES_PER_LEVEL
        if new_level > self.level:
            gained = new_level - self.level
            self.level = new_level
            self.drop_interval = max(
                MIN_DROP_INTERVAL,
                self.drop_interval - DROP_INTERVAL_STEP * gained,
            )
        return points

    def set_base_interval(self, interval: int) -> None:
        """Change the level-0 drop interval, keeping the speed-up of every level gained."""
        self.base_drop_interval = interval
        self.drop_interval = max(
            MIN_DROP_INTERVAL,
            interval - DROP_INTERVAL_STEP * self.level,
        )

    def reset(self) -> None:
        """Zero score, lines and level and restore the base drop interval."""
        self.score = 0
        self.lines = 0
        self.level = 0
        self.drop_interval = self.base_drop_interval
