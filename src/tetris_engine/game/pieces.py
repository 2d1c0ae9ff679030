from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Tuple


class PieceKind(IntEnum):
    I = 0
    Z = 1
    S = 2
    J = 3
    L = 4
    T = 5
    O = 6


# Each rotation state lists the occupied cells of a 4x4 box, index = row * 4 + col.
FIGURES: Tuple[Tuple[Tuple[int, ...], ...], ...] = (
    ((1, 5, 9, 13), (4, 5, 6, 7)),  # I
    ((4, 5, 9, 10), (2, 6, 5, 9)),  # Z
    ((6, 7, 9, 10), (1, 5, 6, 10)),  # S
    ((1, 2, 5, 9), (0, 4, 5, 6), (1, 5, 9, 8), (4, 5, 6, 10)),  # J
    ((1, 2, 6, 10), (5, 6, 7, 9), (2, 6, 10, 11), (3, 5, 6, 7)),  # L
    ((1, 4, 5, 6), (1, 4, 5, 9), (4, 5, 6, 9), (1, 5, 6, 9)),  # T
    ((1, 2, 5, 6),),  # O
)

BOX_SIZE = 4
NUM_COLORS = 7


def rotation_count(kind: PieceKind) -> int:
    return len(FIGURES[kind])


@dataclass
class Piece:
    """Falling piece: a shape-table entry placed at (x, y) on the board.

    ``x``/``y`` locate the top-left corner of the 4x4 bounding box. ``color`` is
    drawn independently of ``kind``.
    """

    kind: PieceKind
    color: int
    x: int = 0
    y: int = 0
    rotation: int = 0

    @classmethod
    def random(cls, rng: random.Random, x: int, y: int) -> "Piece":
        kind = PieceKind(rng.randrange(len(FIGURES)))
        color = rng.randint(1, NUM_COLORS)
        return cls(kind=kind, color=color, x=x, y=y)

    def image(self) -> Tuple[int, ...]:
        return FIGURES[self.kind][self.rotation]

    def rotated(self, delta: int = 1) -> "Piece":
        return replace(self, rotation=(self.rotation + delta) % rotation_count(self.kind))

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (x, y) board coordinates of the occupied cells."""
        cells: List[Tuple[int, int]] = []
        image = self.image()
        for row in range(BOX_SIZE):
            for col in range(BOX_SIZE):
                if row * BOX_SIZE + col in image:
                    cells.append((self.x + col, self.y + row))
        return cells
