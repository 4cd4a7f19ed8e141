"""CLI entrypoint for the wave function collapse examples."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from wavecollapse.core.exceptions import ParseError
from wavecollapse.engine.solver import SolveResult
from wavecollapse.puzzles.pipes import PipeGrid
from wavecollapse.puzzles.sudoku import SudokuRules
from wavecollapse.utils.logger import configure_logging, resolve_level
from wavecollapse.utils.pretty import format_board, print_solve_stats


DEFAULT_GIVENS = "6.....5.9.7..4..6.4........51.4...37....63.........9....29.8...........2.9.7.13.."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fill grids under adjacency constraints with wave function collapse",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument("--stats", action="store_true", help="Print solve counters")
    parser.add_argument(
        "--grid",
        action="store_true",
        help="Print the board with row and column headers",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    commands = parser.add_subparsers(dest="command", required=True)

    sudoku = commands.add_parser("sudoku", help="Solve a sudoku")
    sudoku.add_argument(
        "givens",
        nargs="?",
        default=DEFAULT_GIVENS,
        help="Cells row by row, '.' for empty",
    )
    sudoku.add_argument("--box", type=int, default=3, help="Box size (3 for 9x9)")

    pipes = commands.add_parser("pipes", help="Generate a pipe maze")
    pipes.add_argument("--rows", type=int, default=16, help="Board height in cells")
    pipes.add_argument("--cols", type=int, default=69, help="Board width in cells")
    pipes.add_argument(
        "--input",
        type=Path,
        metavar="FILE",
        help="Starting board, one row per line, '.' for unknown",
    )
    pipes.add_argument("--stream", type=int, default=0, help="Scroll down this many times")
    pipes.add_argument("--step", type=int, default=8, help="Rows added per scroll")
    return parser


def write_output(path: Path, command: str, result: SolveResult, rendered: str) -> None:
    payload: Dict[str, Any] = {
        "command": command,
        "solved": result.solved,
        "board": rendered,
        "values": result.values,
        "observations": result.observations,
        "backtracks": result.backtracks,
        "seed": result.seed,
        "messages": result.messages,
    }
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def run_sudoku(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    rules = SudokuRules(box=args.box)
    try:
        solver = rules.build_solver(args.givens, seed=args.seed)
    except ParseError as exc:
        parser.error(str(exc))
    result = solver.solve()
    board = solver.state()
    if args.grid:
        rendered = format_board(board, rules.side, rules.render)
    else:
        rendered = rules.format_board(board)
    return report(args, result, rendered, rules.validate(board).messages)


def run_pipes(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    grid = PipeGrid(rows=args.rows, cols=args.cols)
    initial = None
    if args.input:
        try:
            initial = grid.parse(args.input.read_text(encoding="utf-8"))
        except ParseError as exc:
            parser.error(str(exc))
    solver = grid.build_solver(initial=initial, seed=args.seed)
    result = solver.solve()
    board = solver.state()
    if args.grid:
        rendered = format_board(board, grid.cols, grid.render)
    else:
        rendered = grid.format_board(board)
    status = report(args, result, rendered, grid.validate(board).messages)
    if status or not args.stream:
        return status
    for rows in grid.stream(solver, args.step, args.stream):
        print(rows)
    return 0


def report(
    args: argparse.Namespace,
    result: SolveResult,
    rendered: str,
    problems: list,
) -> int:
    print(rendered)
    if args.stats:
        print_solve_stats(result)
    if args.output:
        write_output(args.output, args.command, result, rendered)
    if not result.solved:
        print("No solution found", file=sys.stderr)
        return 1
    if problems:
        print("Invalid board: " + ", ".join(problems), file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(resolve_level(args.log_level))
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "sudoku":
        return run_sudoku(args, parser)
    return run_pipes(args, parser)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
