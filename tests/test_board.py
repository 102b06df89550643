# -*-  coding: utf-8 -*-
"""
Set of test for the board functions: line merging, moves, tile spawning and end detection.
"""
from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from power2048.core.gameboard import (
    apply_move,
    fill_cells,
    has_any_move,
    has_won,
    merge_line,
    new_board,
    spawn_tile,
)
from power2048.core.gamemove import Direction


class TestMergeLine(TestCase):
    """Test sliding and merging a single line to the left."""

    def test_merge_leading_pair(self):
        """The leading pair merges and the rest slides."""
        merge = merge_line([2, 2, 4], base=2)

        np.testing.assert_array_equal(merge.result, np.array([4, 4, 0]))
        self.assertEqual(merge.gained, 4)
        self.assertEqual(merge.merged_indices, {0})

    def test_merge_no_cascade(self):
        """Four equal tiles make two merges, never one bigger tile."""
        merge = merge_line([2, 2, 2, 2], base=2)

        np.testing.assert_array_equal(merge.result, np.array([4, 4, 0, 0]))
        self.assertEqual(merge.gained, 8)
        self.assertEqual(merge.merged_indices, {0, 1})

    def test_merge_uses_base(self):
        """Merged value is the tile value times the base."""
        merge = merge_line([3, 3, 3, 0], base=3)

        np.testing.assert_array_equal(merge.result, np.array([9, 3, 0, 0]))
        self.assertEqual(merge.gained, 9)
        self.assertEqual(merge.merged_indices, {0})

    def test_merge_skips_empty_cells(self):
        """Zeros between tiles do not prevent a merge."""
        merge = merge_line([4, 0, 4, 4], base=2)

        np.testing.assert_array_equal(merge.result, np.array([8, 4, 0, 0]))
        self.assertEqual(merge.gained, 8)
        self.assertEqual(merge.merged_indices, {0})

    def test_merge_second_pair(self):
        """Merge index is the position in the new line."""
        merge = merge_line([5, 25, 25, 0], base=5)

        np.testing.assert_array_equal(merge.result, np.array([5, 125, 0, 0]))
        self.assertEqual(merge.gained, 125)
        self.assertEqual(merge.merged_indices, {1})

    def test_merge_empty_line(self):
        """Empty line stays empty with zero gain."""
        merge = merge_line(np.zeros(4, dtype=np.int64), base=2)

        np.testing.assert_array_equal(merge.result, np.zeros(4))
        self.assertEqual(merge.gained, 0)
        self.assertEqual(merge.merged_indices, frozenset())

    def test_merge_keeps_length(self):
        """Result has the length of the input."""
        self.assertEqual(len(merge_line([16, 0, 0, 16, 0, 8], base=4).result), 6)


class TestApplyMove(TestCase):
    """Test moves on a whole board."""

    def test_slide_is_reversible(self):
        """A slide without merge is undone by the opposite slide."""
        board = new_board()
        board[0] = [0, 2, 0, 4]

        left = apply_move(board, Direction.LEFT, base=2)
        np.testing.assert_array_equal(left.board[0], np.array([2, 4, 0, 0]))
        self.assertTrue(left.moved)

        right = apply_move(left.board, Direction.RIGHT, base=2)
        np.testing.assert_array_equal(right.board[0], np.array([0, 0, 2, 4]))
        self.assertTrue(right.moved)
        self.assertEqual(right.gained, 0)

    def test_right_mirrors_merge_cells(self):
        """Merges of a right move are reported in board coordinates."""
        board = new_board()
        board[0] = [2, 2, 0, 0]

        move = apply_move(board, Direction.RIGHT, base=2)

        np.testing.assert_array_equal(move.board[0], np.array([0, 0, 0, 4]))
        self.assertEqual(move.merged_cells, {(0, 3)})
        self.assertEqual(move.gained, 4)

    def test_down_mirrors_merge_cells(self):
        """Merges of a down move land at the bottom of the column."""
        board = new_board()
        board[:, 1] = [2, 0, 2, 0]

        move = apply_move(board, Direction.DOWN, base=2)

        np.testing.assert_array_equal(move.board[:, 1], np.array([0, 0, 0, 4]))
        self.assertEqual(move.merged_cells, {(3, 1)})

    def test_up_merges_columns(self):
        """Up move works on columns."""
        board = new_board()
        board[:, 0] = [0, 3, 0, 3]
        board[:, 2] = [9, 0, 0, 3]

        move = apply_move(board, Direction.UP, base=3)

        np.testing.assert_array_equal(move.board[:, 0], np.array([9, 0, 0, 0]))
        np.testing.assert_array_equal(move.board[:, 2], np.array([9, 3, 0, 0]))
        self.assertEqual(move.merged_cells, {(0, 0)})
        self.assertEqual(move.gained, 9)

    def test_score_sums_over_lines(self):
        """Gain is the sum of every merge of the move."""
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])

        move = apply_move(board, Direction.LEFT, base=2)

        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        np.testing.assert_array_equal(move.board, expected)
        self.assertEqual(move.gained, 28)
        self.assertEqual(move.merged_cells, {(0, 0), (0, 1), (1, 0), (2, 0), (3, 0), (3, 1)})

    def test_no_op_move(self):
        """A move that changes nothing reports nothing."""
        board = np.array([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]])

        move = apply_move(board, Direction.LEFT, base=2)

        self.assertFalse(move.moved)
        self.assertEqual(move.gained, 0)
        self.assertEqual(move.merged_cells, frozenset())
        np.testing.assert_array_equal(move.board, board)

    def test_input_not_modified(self):
        """The given board is left untouched."""
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        original = board.copy()

        apply_move(board, Direction.LEFT, base=2)

        np.testing.assert_array_equal(board, original)


class TestSpawnTile(TestCase):
    """Test tile spawning."""

    def test_spawn_base_value(self):
        """New tile holds the base and lands on an empty cell."""
        board = new_board()
        cell = spawn_tile(board, base=5, rng=default_rng(0))

        self.assertIsNotNone(cell)
        self.assertEqual(board[cell], 5)
        self.assertEqual(np.count_nonzero(board), 1)

    def test_spawn_full_board(self):
        """Spawning on a full board changes nothing."""
        board = np.full((4, 4), 2)
        original = board.copy()

        self.assertIsNone(spawn_tile(board, base=2))
        np.testing.assert_array_equal(board, original)

    def test_spawn_only_empty_cells(self):
        """Every empty cell can be chosen, and only empty cells."""
        board = np.full((4, 4), 4)
        board[1, 2] = 0
        board[3, 0] = 0
        rng = default_rng(123)

        seen = set()
        for _ in range(200):
            attempt = board.copy()
            seen.add(spawn_tile(attempt, base=2, rng=rng))

        self.assertEqual(seen, {(1, 2), (3, 0)})

    def test_fill_cells(self):
        """Several tiles land on distinct cells."""
        board = new_board()
        cells = fill_cells(board, number_tile=2, base=3, rng=default_rng(1))

        self.assertEqual(len(set(cells)), 2)
        self.assertEqual(np.count_nonzero(board), 2)
        self.assertTrue(np.all(board[board != 0] == 3))

    def test_fill_cells_more_than_available(self):
        """Requesting more tiles than empty cells fills what is available."""
        board = np.full((4, 4), 2)
        board[2, 2] = 0

        cells = fill_cells(board, number_tile=3, base=2)

        self.assertEqual(cells, [(2, 2)])
        self.assertTrue(board.all())


class TestEndDetection(TestCase):
    """Test win and blocked board detection."""

    def test_full_board_with_pair(self):
        """Full board with two equal neighbours still has a move."""
        board = np.array([[2, 4, 8, 16], [4, 8, 16, 2], [8, 16, 2, 4], [16, 4, 2, 8]])

        self.assertTrue(has_any_move(board))

    def test_checkerboard_is_blocked(self):
        """Alternating distinct values leave no move."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])

        self.assertFalse(has_any_move(board))

    def test_wraparound_is_not_adjacent(self):
        """Equal values at both ends of a row do not count."""
        board = np.array([[2, 4, 8, 2], [16, 32, 64, 128], [256, 512, 1024, 4], [8, 16, 32, 64]])

        self.assertFalse(has_any_move(board))

    def test_empty_cell_allows_move(self):
        """Any empty cell means a move is possible."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 0, 4], [4, 2, 4, 2]])

        self.assertTrue(has_any_move(board))

    def test_has_won(self):
        """Win when any tile reaches or exceeds the target."""
        board = new_board()
        board[2, 1] = 2187
        self.assertFalse(has_won(board, 6561))

        board[0, 0] = 6561
        self.assertTrue(has_won(board, 6561))

        board[0, 0] = 19683
        self.assertTrue(has_won(board, 6561))


if __name__ == "__main__":
    main()
