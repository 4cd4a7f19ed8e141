import unittest

from wavecollapse.core.cell import Cell
from wavecollapse.core.exceptions import ConfigurationError, InvalidInputError, InvalidSizeError
from wavecollapse.puzzles.sudoku import SudokuRules


HARD_GIVENS = "6.....5.9.7..4..6.4........51.4...37....63.........9....29.8...........2.9.7.13.."
SMALL_GIVENS = "1.34..1..1.34..."


class SudokuRulesTests(unittest.TestCase):
    def test_peers_cover_row_column_and_box(self) -> None:
        rules = SudokuRules()
        peers = rules.neighbors(0)
        self.assertEqual(len(peers), 20)
        self.assertEqual(len(set(peers)), 20)
        self.assertNotIn(0, peers)
        self.assertIn(80 - 8, peers)
        self.assertIn(20, peers)
        self.assertNotIn(30, peers)
        self.assertEqual(len(SudokuRules(box=2).neighbors(5)), 7)

    def test_reducer_forbids_peer_values(self) -> None:
        rules = SudokuRules(box=2)
        forbidden = rules.reducer([(1, Cell.collapsed(0, 4)), (2, Cell.reduced(3, 4))], 0)
        self.assertEqual(list(forbidden), [0, 3])

    def test_parse_givens(self) -> None:
        rules = SudokuRules()
        cells = rules.parse(HARD_GIVENS)
        self.assertEqual(len(cells), 81)
        self.assertEqual(cells[0], Cell.reduced(5, 9))
        self.assertTrue(cells[1].is_unknown())
        self.assertEqual(rules.to_string(cells), HARD_GIVENS)

    def test_parse_errors(self) -> None:
        rules = SudokuRules()
        with self.assertRaises(InvalidSizeError):
            rules.parse(HARD_GIVENS[:-1])
        with self.assertRaises(InvalidInputError) as ctx:
            rules.parse("x" + HARD_GIVENS[1:])
        self.assertEqual(ctx.exception.position, 0)
        with self.assertRaises(InvalidInputError):
            SudokuRules(box=2).parse("5" + SMALL_GIVENS[1:])

    def test_box_size_bounds(self) -> None:
        with self.assertRaises(ConfigurationError):
            SudokuRules(box=1)

    def test_validate_reports_duplicates(self) -> None:
        rules = SudokuRules(box=2)
        cells = [Cell.collapsed(0, 4) for _ in range(16)]
        result = rules.validate(cells)
        self.assertFalse(result.ok)
        self.assertIn("Row 0", result.messages)
        self.assertIn("Col 3", result.messages)
        self.assertIn("Box 2", result.messages)

    def test_validate_reports_unknown_cells(self) -> None:
        rules = SudokuRules(box=2)
        result = rules.validate(rules.parse(SMALL_GIVENS))
        self.assertFalse(result.ok)
        self.assertIn("Cell 1", result.messages)


class SudokuSolveTests(unittest.TestCase):
    def assert_solution(self, rules: SudokuRules, givens: str, seed: int) -> None:
        solver = rules.build_solver(givens, seed=seed)
        result = solver.solve()
        self.assertTrue(result.solved)
        board = solver.state()
        validation = rules.validate(board)
        self.assertTrue(validation.ok, validation.messages)
        solved = rules.to_string(board)
        for given, value in zip(givens, solved):
            if given != ".":
                self.assertEqual(given, value)

    def test_small_board(self) -> None:
        self.assert_solution(SudokuRules(box=2), SMALL_GIVENS, seed=1)

    def test_hard_board(self) -> None:
        self.assert_solution(SudokuRules(), HARD_GIVENS, seed=7)

    def test_contradictory_givens(self) -> None:
        rules = SudokuRules(box=2)
        result = rules.build_solver("123....4" + "." * 8, seed=0).solve()
        self.assertFalse(result.solved)

    def test_format_board(self) -> None:
        rules = SudokuRules(box=2)
        text = rules.format_board(rules.parse(SMALL_GIVENS))
        self.assertEqual(text.splitlines()[0], "1 . 3 4")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
