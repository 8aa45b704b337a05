"""Shared fixtures for the game tests."""

from __future__ import annotations

import random

import pytest

from neontris.game.board import Board
from neontris.game.tetris import TetrisGame


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def game() -> TetrisGame:
    g = TetrisGame(rng=random.Random(1234))
    g.reset()
    return g


def spawn(game: TetrisGame, name: str) -> bool:
    """Make `name` the active piece, the way a lock would."""
    game.next_piece = name
    return game.spawn_piece()
