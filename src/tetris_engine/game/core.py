from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from .grid import GameGrid
from .pieces import BOX_SIZE, Piece, PieceKind
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class GameState(IntEnum):
    START = 0
    PLAYING = 1  # reserved, never entered
    GAMEOVER = 2


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    spawn_x: int = 3
    spawn_y: int = 0
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.spawn_x < 0 or self.spawn_y < 0:
            raise ValueError(f"spawn position must be non-negative, got ({self.spawn_x}, {self.spawn_y})")
        if self.width < self.spawn_x + BOX_SIZE or self.height < self.spawn_y + BOX_SIZE:
            raise ValueError(
                f"board {self.height}x{self.width} cannot hold a piece spawned at "
                f"({self.spawn_x}, {self.spawn_y})"
            )


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Read-only copy of the engine state."""

    grid: np.ndarray
    piece_cells: Tuple[Tuple[int, int], ...]
    piece_color: int
    piece_kind: PieceKind
    piece_rotation: int
    piece_x: int
    piece_y: int
    score: int
    lines_cleared_total: int
    state: GameState

    def board_with_piece(self) -> np.ndarray:
        board = self.grid.copy()
        h, w = board.shape
        for x, y in self.piece_cells:
            if 0 <= y < h and 0 <= x < w:
                board[y, x] = self.piece_color
        return board


class TetrisEngine:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng if rng is not None else random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.lines_cleared_total = 0
        self.state = GameState.START
        self.piece: Piece = self._new_piece()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def reset(self) -> None:
        # The RNG is caller-owned and is not reseeded here.
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.state = GameState.START
        self._spawn_piece()
        logger.info("Game reset")

    def _new_piece(self) -> Piece:
        return Piece.random(self.rng, self.config.spawn_x, self.config.spawn_y)

    def _spawn_piece(self) -> None:
        self.piece = self._new_piece()

    def intersects(self) -> bool:
        return self.grid.intersects(self.piece.cells())

    def _accepts_commands(self) -> bool:
        return self.state == GameState.START

    def move_horizontal(self, dx: int) -> None:
        if not self._accepts_commands():
            return
        old_x = self.piece.x
        self.piece.x += dx
        if self.intersects():
            self.piece.x = old_x

    def rotate(self) -> None:
        if not self._accepts_commands():
            return
        old_rotation = self.piece.rotation
        self.piece.rotation = self.piece.rotated().rotation
        if self.intersects():
            self.piece.rotation = old_rotation

    def step(self) -> None:
        """Advance gravity by one row, freezing the piece if it has landed."""
        if not self._accepts_commands():
            return
        self.piece.y += 1
        if self.intersects():
            self.piece.y -= 1
            self.freeze()

    def hard_drop(self) -> None:
        if not self._accepts_commands():
            return
        while not self.intersects():
            self.piece.y += 1
        self.piece.y -= 1
        self.freeze()

    def freeze(self) -> None:
        """Write the piece into the board, clear lines and spawn the next piece.

        The game ends when the freshly spawned piece already overlaps the board.
        """
        self.grid.place(self.piece.cells(), self.piece.color)
        lines = self.break_lines()
        logger.debug("Piece %s frozen at (%d, %d); %d line(s) cleared, score %d",
                     self.piece.kind.name, self.piece.x, self.piece.y, lines, self.score)
        self._spawn_piece()
        if self.intersects():
            self.state = GameState.GAMEOVER
            logger.info("Game over with score %d after %d line(s)", self.score, self.lines_cleared_total)

    def break_lines(self) -> int:
        lines = self.grid.break_lines()
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines)
        return lines

    def apply(self, action: Action) -> None:
        if action == Action.LEFT:
            self.move_horizontal(-1)
        elif action == Action.RIGHT:
            self.move_horizontal(1)
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.step()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.NONE:
            pass

    def snapshot(self) -> GameSnapshot:
        grid = self.grid.clone_state()
        grid.setflags(write=False)
        piece = self.piece
        return GameSnapshot(
            grid=grid,
            piece_cells=tuple(piece.cells()),
            piece_color=piece.color,
            piece_kind=piece.kind,
            piece_rotation=piece.rotation,
            piece_x=piece.x,
            piece_y=piece.y,
            score=self.score,
            lines_cleared_total=self.lines_cleared_total,
            state=self.state,
        )
