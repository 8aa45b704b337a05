"""Game logic: piece catalog, board, active piece, scoring and session."""

from neontris.game.pieces import PIECE_TYPES, PIECE_NAMES, create_piece, random_piece_type
from neontris.game.board import Board
from neontris.game.piece import ActivePiece, CLOCKWISE, COUNTER_CLOCKWISE
from neontris.game.scoring import ScoreState, SCORE_TABLE
from neontris.game.tetris import TetrisGame, Action, GameStatus

__all__ = [
    "PIECE_TYPES",
    "PIECE_NAMES",
    "create_piece",
    "random_piece_type",
    "Board",
    "ActivePiece",
    "CLOCKWISE",
    "COUNTER_CLOCKWISE",
    "ScoreState",
    "SCORE_TABLE",
    "TetrisGame",
    "Action",
    "GameStatus",
]
