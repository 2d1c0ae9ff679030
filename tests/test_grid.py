from __future__ import annotations

import numpy as np

from tetris_engine.game import GameGrid


def test_walls_and_floor_collide():
    grid = GameGrid(10, 20)
    assert grid.intersects([(-1, 5)])
    assert grid.intersects([(10, 5)])
    assert grid.intersects([(3, 20)])
    assert not grid.intersects([(0, 0), (9, 19)])


def test_rows_above_top_never_collide():
    grid = GameGrid(10, 20)
    # A negative row must not wrap around to the bottom row.
    grid.grid[19, 4] = 5
    assert not grid.intersects([(4, -1)])
    assert grid.intersects([(4, 19)])


def test_place_skips_rows_outside_the_grid():
    grid = GameGrid(10, 20)
    grid.place([(4, -1), (4, 0)], 6)
    assert grid.grid[0, 4] == 6
    assert int(np.count_nonzero(grid.grid)) == 1


def test_full_row_is_removed_and_rows_above_shift_down():
    grid = GameGrid(4, 6)
    grid.grid[5, :] = 1
    grid.grid[4, :] = [2, 0, 2, 0]
    assert grid.break_lines() == 1
    assert grid.grid[5].tolist() == [2, 0, 2, 0]
    assert grid.grid[4].tolist() == [0, 0, 0, 0]


def test_consecutive_full_rows_clear_in_one_pass():
    grid = GameGrid(4, 6)
    grid.grid[3, :] = [0, 7, 0, 7]
    grid.grid[4, :] = 1
    grid.grid[5, :] = 2
    assert grid.break_lines() == 2
    assert grid.grid[5].tolist() == [0, 7, 0, 7]
    assert int(np.count_nonzero(grid.grid[:5])) == 0


def test_top_row_is_never_checked_for_full():
    # Known asymmetry: row 0 is a buffer row and is skipped by the scan.
    grid = GameGrid(4, 6)
    grid.grid[0, :] = 3
    assert grid.break_lines() == 0
    assert grid.grid[0].tolist() == [3, 3, 3, 3]


def test_top_row_is_copied_not_cleared_after_shift():
    # Known asymmetry: row 0 keeps its contents after the shift chain.
    grid = GameGrid(4, 6)
    grid.grid[0, :] = [0, 0, 0, 4]
    grid.grid[5, :] = 1
    assert grid.break_lines() == 1
    assert grid.grid[0].tolist() == [0, 0, 0, 4]
    assert grid.grid[1].tolist() == [0, 0, 0, 4]


def test_clone_state_is_independent():
    grid = GameGrid(4, 6)
    state = grid.clone_state()
    state[0, 0] = 1
    assert grid.grid[0, 0] == 0
