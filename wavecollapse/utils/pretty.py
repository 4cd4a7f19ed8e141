"""Pretty-print helpers for boards and solve results."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Callable, Optional, Sequence

if TYPE_CHECKING:
    from ..core.cell import Cell
    from ..engine.solver import SolveResult


Renderer = Callable[["Cell"], str]


def cell_symbol(cell: Cell) -> str:
    if cell.value is None:
        return f"({cell.entropy()})"
    return str(cell.value)


def format_rows(
    cells: Sequence[Cell],
    row_len: int,
    render: Optional[Renderer] = None,
    separator: str = " ",
) -> str:
    render = render or cell_symbol
    lines = []
    for start in range(0, len(cells), row_len):
        lines.append(separator.join(render(cell) for cell in cells[start:start + row_len]))
    return "\n".join(lines)


def format_board(cells: Sequence[Cell], row_len: int, render: Optional[Renderer] = None) -> str:
    """Render a board with column and row headers."""

    render = render or cell_symbol
    symbols = [render(cell) for cell in cells]
    width = max(2, max(len(symbol) for symbol in symbols))
    header_cells = [f"{c:>{width}}" for c in range(row_len)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * ((width + 1) * row_len - 1))
    for r, start in enumerate(range(0, len(symbols), row_len)):
        row_render = " ".join(f"{symbol:>{width}}" for symbol in symbols[start:start + row_len])
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_solve_stats(result: SolveResult, *, stream=None) -> None:
    """Print counters and the value distribution of a solve."""

    stream = stream or sys.stdout
    print(file=stream)
    print("--- Solve ---", file=stream)
    print(f"  Status:        {'solved' if result.solved else 'unsatisfiable'}", file=stream)
    print(f"  Cells:         {len(result.values)}", file=stream)
    print(f"  Observations:  {result.observations}", file=stream)
    print(f"  Backtracks:    {result.backtracks}", file=stream)
    print(f"  Max depth:     {result.max_depth}", file=stream)

    counts = Counter(value for value in result.values if value is not None)
    if counts:
        dist_parts = [f"{v}:{c}" for v, c in sorted(counts.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    if result.messages:
        print(file=stream)
        for msg in result.messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
