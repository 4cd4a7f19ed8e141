import unittest

from wavecollapse.core.cell import Cell
from wavecollapse.core.exceptions import ConfigurationError
from wavecollapse.engine.board import Board, History, pinned_board


class BoardTests(unittest.TestCase):
    def test_blank_board_is_all_unknown(self) -> None:
        board = Board.blank(6, 3)
        self.assertEqual(len(board), 6)
        self.assertEqual(board.states, 3)
        self.assertEqual(board.unknown(), list(range(6)))
        self.assertEqual(board.values(), [None] * 6)

    def test_queries_by_variant(self) -> None:
        board = Board([Cell.unknown(3), Cell.reduced(1, 3), Cell.collapsed(2, 3)])
        self.assertEqual(board.settled(), [1, 2])
        self.assertEqual(board.pending(), [1])
        self.assertEqual(board.unknown(), [0])
        self.assertFalse(board.is_collapsed())
        self.assertEqual(board.values(), [None, 1, 2])

    def test_snapshot_is_unaffected_by_later_changes(self) -> None:
        board = Board.blank(3, 2)
        snapshot = board.snapshot()
        board[1] = Cell.reduced(0, 2)
        self.assertTrue(snapshot[1].is_unknown())
        self.assertIs(snapshot[0], board[0])

        board.restore(snapshot)
        self.assertEqual(board.unknown(), [0, 1, 2])

    def test_restore_rejects_other_sizes(self) -> None:
        board = Board.blank(3, 2)
        with self.assertRaises(ConfigurationError):
            board.restore(Board.blank(4, 2).snapshot())

    def test_mixed_widths_are_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            Board([Cell.unknown(3), Cell.unknown(4)])
        with self.assertRaises(ConfigurationError):
            Board([])

    def test_pinned_board(self) -> None:
        board = pinned_board([None, 2, None], 3)
        self.assertEqual(board.pending(), [1])
        self.assertEqual(board, Board([Cell.unknown(3), Cell.reduced(2, 3), Cell.unknown(3)]))


class HistoryTests(unittest.TestCase):
    def test_lifo_order_and_peak(self) -> None:
        history = History()
        first = Board.blank(2, 2).snapshot()
        second = pinned_board([0, None], 2).snapshot()
        history.push(first)
        history.push(second)
        self.assertEqual(len(history), 2)
        self.assertIs(history.pop(), second)
        self.assertIs(history.pop(), first)
        self.assertIsNone(history.pop())
        self.assertEqual(history.peak, 2)
        self.assertFalse(history)

    def test_clear(self) -> None:
        history = History()
        history.push(Board.blank(2, 2).snapshot())
        history.clear()
        self.assertEqual(len(history), 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
