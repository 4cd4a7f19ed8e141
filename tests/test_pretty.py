import io
import unittest

from wavecollapse.core.cell import Cell
from wavecollapse.engine.solver import SolveResult
from wavecollapse.utils.pretty import format_board, format_rows, print_solve_stats


class PrettyTests(unittest.TestCase):
    def test_board_has_headers_and_entropy_for_unknown_cells(self) -> None:
        lines = format_board([Cell.reduced(1, 3), Cell.unknown(3)], 2).splitlines()
        self.assertEqual(lines[0], "      0   1")
        self.assertEqual(lines[1], "    -------")
        self.assertEqual(lines[2], " 0 |   1 (3)")

    def test_format_rows(self) -> None:
        cells = [Cell.collapsed(i, 4) for i in range(4)]
        self.assertEqual(format_rows(cells, 2, separator=""), "01\n23")

    def test_solve_stats(self) -> None:
        out = io.StringIO()
        result = SolveResult(solved=True, values=[0, 1, 1], observations=2, seed=9)
        print_solve_stats(result, stream=out)
        text = out.getvalue()
        self.assertIn("Status:        solved", text)
        self.assertIn("Distribution:  0:1 1:2", text)
        self.assertIn("Seed: 9", text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
