"""Sudoku expressed as neighbor and reducer functions for the solver.

A givens string lists the cells row by row: ``.`` is an empty cell and a
symbol (``1``-``9`` for the classic 9x9 board) is a given. State ``k`` stands
for the ``k``-th symbol.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..core.candidates import CandidateSet
from ..core.cell import Cell
from ..core.exceptions import ConfigurationError, InvalidInputError, InvalidSizeError
from ..engine.solver import Solver, SolverConfig
from ..engine.validator import ValidationResult
from ..utils.pretty import format_rows


SYMBOLS = "123456789ABCDEFG"
EMPTY = "."


@dataclass(frozen=True)
class SudokuRules:
    """Topology and constraint of a ``box**2 x box**2`` sudoku."""

    box: int = 3
    _peers: Tuple[Tuple[int, ...], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 2 <= self.box <= 4:
            raise ConfigurationError(f"Box size must be within 2..4, got {self.box}")
        object.__setattr__(self, "_peers", tuple(self._build_peers(i) for i in range(self.size)))

    @property
    def side(self) -> int:
        return self.box * self.box

    @property
    def size(self) -> int:
        return self.side * self.side

    @property
    def states(self) -> int:
        return self.side

    def _build_peers(self, index: int) -> Tuple[int, ...]:
        row, col = divmod(index, self.side)
        top = row // self.box * self.box
        left = col // self.box * self.box
        peers: List[int] = []
        for r in range(top, top + self.box):
            for c in range(left, left + self.box):
                peers.append(r * self.side + c)
        peers.extend(row * self.side + c for c in range(self.side))
        peers.extend(r * self.side + col for r in range(self.side))
        seen = set()
        ordered = []
        for peer in peers:
            if peer != index and peer not in seen:
                seen.add(peer)
                ordered.append(peer)
        return tuple(ordered)

    # ------------------------------------------------------------------
    # Solver collaborators
    # ------------------------------------------------------------------
    def neighbors(self, index: int) -> Tuple[int, ...]:
        return self._peers[index]

    def reducer(self, neighbors: List[Tuple[int, Cell]], index: int) -> CandidateSet:
        # A settled peer's domain is exactly the state it rules out.
        bits = 0
        for _, cell in neighbors:
            bits |= cell.domain.bits
        return CandidateSet(bits, self.states)

    # ------------------------------------------------------------------
    # Text I/O
    # ------------------------------------------------------------------
    def parse(self, givens: str) -> List[Cell]:
        if len(givens) != self.size:
            raise InvalidSizeError(len(givens), self.size)
        symbols = SYMBOLS[: self.side]
        cells: List[Cell] = []
        for position, char in enumerate(givens):
            if char == EMPTY:
                cells.append(Cell.unknown(self.states))
            elif char in symbols:
                cells.append(Cell.reduced(symbols.index(char), self.states))
            else:
                raise InvalidInputError(position, char)
        return cells

    def render(self, cell: Cell) -> str:
        if cell.value is None:
            return EMPTY
        return SYMBOLS[cell.value]

    def format_board(self, cells: Sequence[Cell]) -> str:
        return format_rows(cells, self.side, self.render)

    def to_string(self, cells: Sequence[Cell]) -> str:
        return "".join(self.render(cell) for cell in cells)

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------
    def validate(self, cells: Sequence[Cell]) -> ValidationResult:
        """Report every row, column and box that is incomplete or repeats a symbol."""

        errors = set()
        for index, cell in enumerate(cells):
            if cell.value is None:
                errors.add(f"Cell {index}")
        for n in range(self.side):
            if not self._is_group_valid(cells, [n * self.side + c for c in range(self.side)]):
                errors.add(f"Row {n}")
            if not self._is_group_valid(cells, [r * self.side + n for r in range(self.side)]):
                errors.add(f"Col {n}")
            top = n // self.box * self.box
            left = n % self.box * self.box
            members = [
                r * self.side + c
                for r in range(top, top + self.box)
                for c in range(left, left + self.box)
            ]
            if not self._is_group_valid(cells, members):
                errors.add(f"Box {n}")
        if errors:
            return ValidationResult(ok=False, messages=sorted(errors))
        return ValidationResult(ok=True, messages=[])

    def _is_group_valid(self, cells: Sequence[Cell], members: Sequence[int]) -> bool:
        values = [cells[m].value for m in members]
        return None not in values and len(set(values)) == self.side

    def build_solver(self, givens: str, seed: Optional[int] = None) -> Solver:
        return Solver(
            SolverConfig(
                states=self.states,
                size=self.size,
                neighbors=self.neighbors,
                reducer=self.reducer,
                seed=seed,
                initial=self.parse(givens),
                row_len=self.side,
            )
        )
