"""
Game orchestrator: actions, locking, status and game-over recovery.

TetrisGame owns one session: the Board, the falling ActivePiece, the next
piece preview slot, the ScoreState and an explicit GameStatus. Every
command is a no-op unless the game is RUNNING. A failed spawn moves the
game to GAME_OVER and schedules a delayed reset that clears the board and
score and starts over.
"""

from __future__ import annotations

import enum
import logging
import random
from typing import Any, Callable

from neontris.game.board import Board
from neontris.game.piece import CLOCKWISE, COUNTER_CLOCKWISE, ActivePiece
from neontris.game.pieces import random_piece_type
from neontris.game.scoring import DEFAULT_DROP_INTERVAL, ScoreState
from neontris.scheduler import DeferredAction, Scheduler

logger = logging.getLogger(__name__)

GAME_OVER_DELAY = 800  # ms before the board is cleared after a game over


class Action(enum.IntEnum):
    """Discrete commands delivered by keyboard or touch buttons."""
    LEFT = 0
    RIGHT = 1
    SOFT_DROP = 2
    HARD_DROP = 3
    ROTATE_CW = 4
    ROTATE_CCW = 5
    TOGGLE_PAUSE = 6


class GameStatus(enum.Enum):
    """Session status.

    RUNNING -> PAUSED      toggle_pause()
    PAUSED  -> RUNNING     toggle_pause()
    RUNNING -> GAME_OVER   spawn position already occupied
    GAME_OVER -> RUNNING   delayed reset fires
    """
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


_TRANSITIONS: dict[GameStatus, set[GameStatus]] = {
    GameStatus.RUNNING: {GameStatus.PAUSED, GameStatus.GAME_OVER},
    GameStatus.PAUSED: {GameStatus.RUNNING},
    GameStatus.GAME_OVER: {GameStatus.RUNNING},
}


class TetrisGame:
    """One game session.

    Attributes:
        board: The playing field.
        piece: The falling piece, or None before the first spawn.
        next_piece: Type letter of the piece that spawns next.
        scores: Score, lines, level and drop interval.
        status: Current GameStatus.
        drop_counter: ms accumulated toward the next automatic drop.
        lines_cleared_last: Rows cleared by the most recent lock.
        scheduler: Clock for the delayed game-over reset.
        game_over_delay: ms between game over and the automatic reset.
    """

    def __init__(
        self,
        board_width: int = 12,
        board_height: int = 20,
        drop_interval: int = DEFAULT_DROP_INTERVAL,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
        score_sink: Callable[[str], None] | None = None,
        game_over_delay: float = GAME_OVER_DELAY,
    ) -> None:
        """Initialize a session. Call reset() to spawn the first piece.

        Args:
            board_width: Board width in columns.
            board_height: Board height in rows.
            drop_interval: ms between automatic drops at level 0.
            scheduler: Clock for deferred actions (a private one if omitted).
            rng: Random generator for piece selection.
            score_sink: Receives the score as text after every change.
            game_over_delay: ms before a finished game is reset.
        """
        self.board = Board(board_width, board_height)
        self.piece: ActivePiece | None = None
        self.next_piece: str | None = None
        self.scores = ScoreState(drop_interval=drop_interval, base_drop_interval=drop_interval)
        self.status = GameStatus.RUNNING
        self.drop_counter: float = 0
        self.lines_cleared_last: int = 0
        self.scheduler = scheduler or Scheduler()
        self.game_over_delay = game_over_delay

        self._rng = rng or random.Random()
        self._score_sink = score_sink
        self._pending_reset: DeferredAction | None = None

    # ── Derived state ────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        """True while the game accepts commands."""
        return self.status is GameStatus.RUNNING

    @property
    def score(self) -> int:
        """Points earned this game."""
        return self.scores.score

    @property
    def level(self) -> int:
        """Current level (one per 10 lines)."""
        return self.scores.level

    @property
    def lines(self) -> int:
        """Rows cleared this game."""
        return self.scores.lines

    @property
    def drop_interval(self) -> int:
        """ms between automatic drops at the current level."""
        return self.scores.drop_interval

    def get_state(self) -> dict[str, Any]:
        """Return a snapshot of the observable game state.

        Returns:
            Dict with keys: board_grid, piece_name, piece_matrix, piece_x,
            piece_y, next_piece, score, level, lines, status.
        """
        piece = self.piece
        return {
            "board_grid": self.board.get_grid(),
            "piece_name": piece.name if piece else None,
            "piece_matrix": piece.matrix.copy() if piece else None,
            "piece_x": piece.x if piece else 0,
            "piece_y": piece.y if piece else 0,
            "next_piece": self.next_piece,
            "score": self.score,
            "level": self.level,
            "lines": self.lines,
            "status": self.status,
        }

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Start a fresh game: empty board, zero score, new piece."""
        if self._pending_reset is not None:
            self._pending_reset.cancel()
            self._pending_reset = None
        self.board.reset()
        self.scores.reset()
        self.drop_counter = 0
        self.lines_cleared_last = 0
        self.piece = None
        self.next_piece = random_piece_type(self._rng)
        self.status = GameStatus.RUNNING
        self._publish_score()
        self.spawn_piece()

    def spawn_piece(self) -> bool:
        """Promote the next piece to the active piece.

        The new piece is centered at the top of the board and a new next
        piece is drawn. If the spawn position is already occupied the game
        is over: the piece is not merged and a delayed reset is scheduled.

        Returns:
            True if the piece spawned cleanly, False on game over, an
            unknown piece type, or when the game is not running.
        """
        if not self.is_running:
            return False
        name =self.next_piece or random_piece_type(self._rng)
        piece = ActivePiece.spawn(name, self.board.width)
        if piece is None:
            logger.error("Cannot spawn unknown piece type %r", name)
            return False

        self.piece = piece
        self.next_piece = random_piece_type(self._rng)

        if self.board.collides(piece.matrix, piece.x, piece.y):
            self._game_over()
            return False
        return True

    def toggle_pause(self) -> None:
        """Pause a running game or resume a paused one."""
        if self.status is GameStatus.RUNNING:
            self._set_status(GameStatus.PAUSED)
        elif self.status is GameStatus.PAUSED:
            self._set_status(GameStatus.RUNNING)

    def set_drop_interval(self, interval: int) -> None:
        """Set the automatic drop interval chosen in the settings."""
        self.scores.set_base_interval(interval)

    # ── Player commands ──────────────────────────────────────────────────

    def handle(self, action: Action) -> None:
        """Dispatch one input command."""
        if action == Action.LEFT:
            self.move(-1)
        elif action == Action.RIGHT:
            self.move(1)
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.ROTATE_CW:
            self.rotate(CLOCKWISE)
        elif action == Action.ROTATE_CCW:
            self.rotate(COUNTER_CLOCKWISE)
        elif action == Action.TOGGLE_PAUSE:
            self.toggle_pause()

    def move(self, direction: int) -> bool:
        """Shift the piece one column left (-1) or right (+1).

        Returns:
            True if the piece moved.
        """
        if not self.is_running or self.piece is None:
            return False
        return self.piece.try_move(self.board, direction, 0)

    def rotate(self, direction: int) -> bool:
        """Rotate the piece, with wall kicks.

        Returns:
            True if the piece rotated.
        """
        if not self.is_running or self.piece is None:
            return False
        return self.piece.rotate(self.board, direction)

    def soft_drop(self) -> bool:
        """Move the piece down one row, locking it if it cannot move.

        Always resets the automatic drop counter.

        Returns:
            True if the piece moved down, False if it locked (or the game
            is not running).
        """
        if not self.is_running or self.piece is None:
            return False
        moved = self.piece.try_move(self.board, 0, 1)
        if not moved:
            self._lock_piece()
        self.drop_counter = 0
        return moved

    def hard_drop(self) -> int:
        """Drop the piece straight to its resting row and lock it.

        Returns:
            Number of rows the piece fell.
        """
        if not self.is_running or self.piece is None:
            return 0
        rows = 0
        # Any cell at or below the bottom edge collides, so this stops
        # within board.height steps.
        while self.piece.try_move(self.board, 0, 1):
            rows += 1
        self._lock_piece()
        self.drop_counter = 0
        return rows

    # ── Internals ────────────────────────────────────────────────────────

    def _lock_piece(self) -> int:
        """Merge the piece into the board, clear rows, score, spawn next.

        Returns:
            Number of rows cleared.
        """
        piece = self.piece
        self.board.merge(piece.matrix, piece.x, piece.y)
        lines = self.board.sweep()
        self.lines_cleared_last = lines
        if lines > 0:
            level_before = self.scores.level
            points = self.scores.update(lines)
            logger.debug("Cleared %d line(s) for %d points", lines, points)
            if self.scores.level > level_before:
                logger.info(
                    "Level %d reached, drop interval %d ms",
                    self.scores.level,
                    self.scores.drop_interval,
                )
            self._publish_score()
        self.spawn_piece()
        return lines

    def _game_over(self) -> None:
        if self._pending_reset is not None:
            return
        logger.info(
            "Game over: score %d, lines %d, level %d",
            self.score,
            self.lines,
            self.level,
        )
        self._set_status(GameStatus.GAME_OVER)
        self._pending_reset = self.scheduler.call_later(
            self.game_over_delay, self._recover
        )

    def _recover(self) -> None:
        self._pending_reset = None
        logger.info("Restarting after game over")
        self.reset()

    def _set_status(self, status: GameStatus) -> None:
        if status not in _TRANSITIONS[self.status]:
            logger.error("Ignoring invalid status change %s -> %s", self.status.name, status.name)
            return
        logger.debug("Status %s -> %s", self.status.name, status.name)
        self.status = status

    def _publish_score(self) -> None:
        if self._score_sink is not None:
            self._score_sink(str(self.score))
