"""Box-drawing pipe mazes: every shared edge must be open on both sides or neither."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, Optional, Sequence, Tuple

from ..core.candidates import CandidateSet
from ..core.cell import Cell, WeightFn
from ..core.constants import ORTHOGONAL_STEPS, Bounds, PanDirection
from ..core.exceptions import ConfigurationError, InvalidInputError, InvalidSizeError
from ..engine.solver import Solver, SolverConfig
from ..engine.validator import ValidationResult
from ..utils.pretty import format_rows


LEFT, RIGHT, UP, DOWN = "left", "right", "up", "down"
OPPOSITE = {LEFT: RIGHT, RIGHT: LEFT, UP: DOWN, DOWN: UP}
SIDE_OF_STEP = dict(zip(ORTHOGONAL_STEPS, (LEFT, RIGHT, UP, DOWN)))

# State index -> (glyph, open sides).
TILES: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("┐", frozenset({LEFT, DOWN})),
    ("└", frozenset({UP, RIGHT})),
    ("┴", frozenset({LEFT, RIGHT, UP})),
    ("┬", frozenset({LEFT, RIGHT, DOWN})),
    ("├", frozenset({UP, DOWN, RIGHT})),
    ("─", frozenset({LEFT, RIGHT})),
    ("┼", frozenset({LEFT, RIGHT, UP, DOWN})),
    ("│", frozenset({UP, DOWN})),
    ("┤", frozenset({UP, DOWN, LEFT})),
    ("┘", frozenset({LEFT, UP})),
    ("┌", frozenset({RIGHT, DOWN})),
    (" ", frozenset()),
)
STATES = len(TILES)
GLYPHS = "".join(glyph for glyph, _ in TILES)
UNKNOWN = "."


def _mismatch_table() -> Dict[Tuple[str, bool], CandidateSet]:
    # (side, neighbor_is_open) -> tiles whose side disagrees with the neighbor
    table = {}
    for side in OPPOSITE:
        for neighbor_open in (True, False):
            table[(side, neighbor_open)] = CandidateSet.of(
                (state for state, (_, sides) in enumerate(TILES) if (side in sides) != neighbor_open),
                STATES,
            )
    return table


MISMATCH = _mismatch_table()


def is_open(state: int, side: str) -> bool:
    return side in TILES[state][1]


@dataclass(frozen=True)
class PipeGrid:
    """A ``rows x cols`` board of pipe tiles with open outer edges."""

    rows: int
    cols: int
    bounds: Bounds = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError(f"Invalid pipe grid size {self.rows}x{self.cols}")
        object.__setattr__(self, "bounds", Bounds(rows=self.rows, cols=self.cols))

    @property
    def size(self) -> int:
        return self.bounds.size

    def side_towards(self, index: int, other: int) -> str:
        row, col = self.bounds.position(index)
        other_row, other_col = self.bounds.position(other)
        step = (other_row - row, other_col - col)
        if step not in SIDE_OF_STEP:
            raise ValueError(f"Cells {index} and {other} are not orthogonal neighbors")
        return SIDE_OF_STEP[step]

    # ------------------------------------------------------------------
    # Solver collaborators
    # ------------------------------------------------------------------
    def neighbors(self, index: int) -> List[int]:
        row, col = self.bounds.position(index)
        return [
            self.bounds.index(row + dr, col + dc)
            for dr, dc in ORTHOGONAL_STEPS
            if self.bounds.contains(row + dr, col + dc)
        ]

    def reducer(self, neighbors: List[Tuple[int, Cell]], index: int) -> CandidateSet:
        forbidden = CandidateSet.empty(STATES)
        for j, cell in neighbors:
            side = self.side_towards(index, j)
            forbidden = forbidden | MISMATCH[(side, is_open(cell.value, OPPOSITE[side]))]
        return forbidden

    # ------------------------------------------------------------------
    # Text I/O
    # ------------------------------------------------------------------
    def parse(self, text: str) -> List[Cell]:
        raw = [char for char in text if char not in "\r\n"]
        if len(raw) != self.size:
            raise InvalidSizeError(len(raw), self.size)
        cells: List[Cell] = []
        for position, char in enumerate(raw):
            if char == UNKNOWN:
                cells.append(Cell.unknown(STATES))
            elif char in GLYPHS:
                cells.append(Cell.reduced(GLYPHS.index(char), STATES))
            else:
                raise InvalidInputError(position, char)
        return cells

    @staticmethod
    def render(cell: Cell) -> str:
        if cell.value is None:
            return UNKNOWN
        return GLYPHS[cell.value]

    def format_board(self, cells: Sequence[Cell], last_rows: Optional[int] = None) -> str:
        if last_rows is not None:
            cells = cells[(self.rows - last_rows) * self.cols:]
        return format_rows(cells, self.cols, self.render, separator="")

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------
    def validate(self, cells: Sequence[Cell]) -> ValidationResult:
        """Every cell collapsed and every shared edge matched."""

        messages = []
        for index, cell in enumerate(cells):
            if cell.value is None:
                messages.append(f"Cell {index} is unknown")
                continue
            row, col = self.bounds.position(index)
            for side, (dr, dc) in ((RIGHT, (0, 1)), (DOWN, (1, 0))):
                if not self.bounds.contains(row + dr, col + dc):
                    continue
                other = cells[self.bounds.index(row + dr, col + dc)]
                if other.value is None:
                    continue
                if is_open(cell.value, side) != is_open(other.value, OPPOSITE[side]):
                    messages.append(f"Edge mismatch between ({row},{col}) and ({row + dr},{col + dc})")
        return ValidationResult(ok=not messages, messages=messages)

    def build_solver(
        self,
        initial: Optional[Sequence[Cell]] = None,
        seed: Optional[int] = None,
        weight: Optional[WeightFn] = None,
    ) -> Solver:
        return Solver(
            SolverConfig(
                states=STATES,
                size=self.size,
                neighbors=self.neighbors,
                reducer=self.reducer,
                weight=weight,
                seed=seed,
                initial=initial,
                row_len=self.cols,
            )
        )

    def stream(self, solver: Solver, step: int, count: int) -> Iterator[str]:
        """Scroll the maze ``count`` times, yielding each batch of fresh rows."""

        if not 0 < step <= self.rows:
            raise ConfigurationError(f"Scroll step must be within 1..{self.rows}, got {step}")
        for _ in range(count):
            solver.pan(PanDirection.DOWN, step)
            result = solver.solve()
            if not result.solved:
                return
            yield self.format_board(solver.state(), last_rows=step)
