"""
Tests for board validity, locking and line clearing.
"""

import numpy as np
import pytest

from falling_block_rl.game import GRID_HEIGHT, GRID_WIDTH, GameGrid, Piece, ShapeKind


def make_piece(cells, color=1):
    return Piece(ShapeKind.O, tuple(cells), color)


@pytest.fixture
def grid():
    return GameGrid()


class TestValidity:
    """Bounds and occupancy checks."""

    def test_dimensions(self, grid):
        assert grid.grid.shape == (GRID_HEIGHT, GRID_WIDTH) == (20, 10)
        assert grid.grid.dtype == np.int8
        assert not grid.grid.any()

    @pytest.mark.parametrize("index", range(7))
    def test_spawned_pieces_valid_on_empty_board(self, grid, index):
        assert grid.is_valid(Piece.spawn(index, 1))

    def test_corners_valid(self, grid):
        assert grid.is_valid(make_piece([(0, 0), (9, 0), (0, 19), (9, 19)]))

    @pytest.mark.parametrize("cell", [(-1, 5), (10, 5), (3, 20), (-1, -3), (10, -1)])
    def test_single_cell_out_of_bounds_invalid(self, grid, cell):
        cells = [(4, 5), (5, 5), (4, 6), cell]
        assert not grid.is_valid(make_piece(cells))

    def test_above_board_is_allowed(self, grid):
        assert grid.is_valid(make_piece([(4, -3), (4, -2), (4, -1), (4, 0)]))

    def test_occupied_cell_invalid(self, grid):
        grid.grid[10, 4] = 3
        assert not grid.is_valid(make_piece([(4, 9), (4, 10), (5, 9), (5, 10)]))
        assert grid.is_valid(make_piece([(5, 9), (5, 10), (6, 9), (6, 10)]))

    def test_check_has_no_side_effects(self, grid):
        grid.grid[19, :] = 2
        before = grid.clone_state()
        grid.is_valid(make_piece([(0, 19), (1, 19), (2, 19), (3, 19)]))
        np.testing.assert_array_equal(grid.grid, before)


class TestLock:
    """Merging a piece into the board."""

    def test_lock_writes_exact_color(self, grid):
        piece = Piece.spawn(6, 4).moved(4, 17)
        grid.lock(piece)
        for x, y in piece.blocks:
            assert grid.grid[y, x] == 4
        assert np.count_nonzero(grid.grid) == 4

    def test_lock_drops_cells_above_board(self, grid):
        piece = Piece.spawn(0, 5).moved(3, -2)
        grid.lock(piece)
        assert grid.grid[0, 4] == 5
        assert grid.grid[1, 4] == 5
        assert np.count_nonzero(grid.grid) == 2

    def test_lock_keeps_other_colors(self, grid):
        grid.grid[19, 0] = 7
        grid.lock(make_piece([(1, 19), (2, 19), (3, 19), (4, 19)], color=2))
        assert grid.grid[19, 0] == 7
        assert list(grid.grid[19, 1:5]) == [2, 2, 2, 2]


class TestClearLines:
    """Row removal and compaction."""

    def test_single_full_bottom_row(self, grid):
        grid.grid[19, :] = 3
        grid.clear_lines()
        assert not grid.grid.any()

    def test_preserves_order_between_full_rows(self, grid):
        pattern = np.array([1, 0, 2, 0, 3, 0, 4, 0, 5, 0], dtype=np.int8)
        grid.grid[17, :] = 6
        grid.grid[18] = pattern
        grid.grid[19, :] = 6
        grid.clear_lines()
        np.testing.assert_array_equal(grid.grid[19], pattern)
        assert not grid.grid[:19].any()

    def test_rows_above_shift_down(self, grid):
        grid.grid[15, 2] = 1
        grid.grid[16, 3] = 2
        grid.grid[18, :] = 4
        grid.grid[19, 5] = 7
        grid.clear_lines()
        assert grid.grid[16, 2] == 1
        assert grid.grid[17, 3] == 2
        assert grid.grid[19, 5] == 7
        assert np.count_nonzero(grid.grid) == 3

    def test_no_full_rows_is_noop(self, grid):
        grid.grid[19, :9] = 1
        grid.grid[12, 4] = 5
        before = grid.clone_state()
        grid.clear_lines()
        np.testing.assert_array_equal(grid.grid, before)

    def test_whole_board_full(self, grid):
        grid.grid[:, :] = 2
        grid.clear_lines()
        assert not grid.grid.any()

    def test_top_row_full(self, grid):
        grid.grid[0, :] = 1
        grid.grid[19, 0] = 3
        grid.clear_lines()
        assert not grid.grid[0].any()
        assert grid.grid[19, 0] == 3
        assert np.count_nonzero(grid.grid) == 1

    def test_read_only_view(self, grid):
        view = grid.read_only_view()
        with pytest.raises(ValueError):
            view[0, 0] = 1
        grid.grid[0, 0] = 4
        assert view[0, 0] == 4
