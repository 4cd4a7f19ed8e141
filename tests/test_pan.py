import unittest

from wavecollapse.core.cell import Cell
from wavecollapse.core.constants import PanDirection
from wavecollapse.core.exceptions import ConfigurationError
from wavecollapse.engine.board import Board
from wavecollapse.engine.pan import pan_board


ROWS = 3
COLS = 4


def numbered_board() -> Board:
    return Board(Cell.collapsed(i, ROWS * COLS) for i in range(ROWS * COLS))


def rows_of(board: Board):
    values = board.values()
    return [values[r * COLS:(r + 1) * COLS] for r in range(ROWS)]


class PanTests(unittest.TestCase):
    def test_pan_right_reads_from_the_right(self) -> None:
        board = numbered_board()
        pan_board(board, PanDirection.RIGHT, 1, COLS)
        self.assertEqual(
            rows_of(board),
            [[1, 2, 3, None], [5, 6, 7, None], [9, 10, 11, None]],
        )

    def test_pan_left_reads_from_the_left(self) -> None:
        board = numbered_board()
        pan_board(board, PanDirection.LEFT, 2, COLS)
        self.assertEqual(
            rows_of(board),
            [[None, None, 0, 1], [None, None, 4, 5], [None, None, 8, 9]],
        )

    def test_pan_down_opens_rows_at_the_bottom(self) -> None:
        board = numbered_board()
        pan_board(board, PanDirection.DOWN, 1, COLS)
        self.assertEqual(
            rows_of(board),
            [[4, 5, 6, 7], [8, 9, 10, 11], [None] * 4],
        )

    def test_pan_up_opens_rows_at_the_top(self) -> None:
        board = numbered_board()
        pan_board(board, PanDirection.UP, 2, COLS)
        self.assertEqual(rows_of(board), [[None] * 4, [None] * 4, [0, 1, 2, 3]])

    def test_right_then_left_round_trip(self) -> None:
        original = numbered_board()
        board = numbered_board()
        distance = 1
        pan_board(board, PanDirection.RIGHT, distance, COLS)
        pan_board(board, PanDirection.LEFT, distance, COLS)
        for index in range(len(board)):
            if index % COLS >= distance:
                self.assertEqual(board[index], original[index])
            else:
                self.assertTrue(board[index].is_unknown())

    def test_reset_cells_are_fresh_unknowns(self) -> None:
        board = numbered_board()
        pan_board(board, PanDirection.LEFT, COLS, COLS)
        self.assertEqual(board.unknown(), list(range(len(board))))
        self.assertEqual(board[0], Cell.unknown(ROWS * COLS))

    def test_zero_distance_keeps_the_board(self) -> None:
        board = numbered_board()
        pan_board(board, PanDirection.UP, 0, COLS)
        self.assertEqual(board, numbered_board())

    def test_invalid_arguments(self) -> None:
        board = numbered_board()
        with self.assertRaises(ConfigurationError):
            pan_board(board, PanDirection.LEFT, -1, COLS)
        with self.assertRaises(ConfigurationError):
            pan_board(board, PanDirection.LEFT, 1, 5)
        with self.assertRaises(ValueError):
            pan_board(board, "DIAGONAL", 1, COLS)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
