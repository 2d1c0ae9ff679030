from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]


class GameGrid:
    """Settled cells of the board.

    The grid uses 0 for empty cells and a color index 1..7 for filled ones.
    Row 0 is the top. Rows above the top (negative y) are treated as empty
    and never collide.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_occupied(self, x: int, y: int) -> bool:
        if y < 0 or y >= self.height or x < 0 or x >= self.width:
            return False
        return self.grid[y, x] != 0

    def intersects(self, cells: Iterable[Coordinate]) -> bool:
        for x, y in cells:
            if y > self.height - 1 or x > self.width - 1 or x < 0:
                return True
            if self.is_occupied(x, y):
                return True
        return False

    def place(self, cells: Iterable[Coordinate], color: int) -> None:
        for x, y in cells:
            if 0 <= y < self.height and 0 <= x < self.width:
                self.grid[y, x] = color

    def break_lines(self) -> int:
        """Remove full rows and return how many were removed.

        Row 0 is never checked, and after rows shift down it keeps its old
        contents instead of being cleared.
        """
        lines = 0
        for row in range(1, self.height):
            if np.all(self.grid[row] != 0):
                lines += 1
                self.grid[1 : row + 1] = self.grid[0:row].copy()
        return lines

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
