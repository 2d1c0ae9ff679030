from __future__ import annotations

import random

import pytest

from tetris_engine.game import GameConfig, Piece, PieceKind, TetrisEngine


@pytest.fixture
def engine() -> TetrisEngine:
    return TetrisEngine(GameConfig(height=20, width=10), rng=random.Random(1234))


@pytest.fixture
def put_piece(engine):
    """Replace the active piece with a known one."""

    def _put(kind: PieceKind, x: int = 3, y: int = 0, rotation: int = 0, color: int = 3) -> Piece:
        piece = Piece(kind=kind, color=color, x=x, y=y, rotation=rotation)
        engine.piece = piece
        return piece

    return _put
