"""Board representation and the snapshot history used for backtracking."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.cell import Cell
from ..core.exceptions import ConfigurationError


# A snapshot is a tuple of immutable cells; it shares every cell with the
# board it was taken from.
BoardSnapshot = Tuple[Cell, ...]


class Board:
    """Fixed-length ordered sequence of cells.

    The mapping between indices and coordinates belongs to the caller; the
    board only knows how many cells it has and how wide their domains are.
    """

    def __init__(self, cells: Iterable[Cell]) -> None:
        self._cells: List[Cell] = list(cells)
        if not self._cells:
            raise ConfigurationError("A board needs at least one cell")
        self.states = self._cells[0].states
        for index, cell in enumerate(self._cells):
            if cell.states != self.states:
                raise ConfigurationError(
                    f"Cell {index} has {cell.states} states, expected {self.states}"
                )

    @classmethod
    def blank(cls, size: int, states: int) -> "Board":
        return cls(Cell.unknown(states) for _ in range(size))

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __setitem__(self, index: int, cell: Cell) -> None:
        self._cells[index] = cell

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Board):
            return self._cells == other._cells
        return NotImplemented

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def snapshot(self) -> BoardSnapshot:
        return tuple(self._cells)

    def restore(self, snapshot: BoardSnapshot) -> None:
        if len(snapshot) != len(self._cells):
            raise ConfigurationError(
                f"Snapshot has {len(snapshot)} cells, board has {len(self._cells)}"
            )
        self._cells = list(snapshot)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def settled(self) -> List[int]:
        """Indices whose cell is pinned, whether reduced or collapsed."""

        return [i for i, cell in enumerate(self._cells) if not cell.is_unknown()]

    def pending(self) -> List[int]:
        """Indices pinned but not yet propagated to their neighbors."""

        return [i for i, cell in enumerate(self._cells) if cell.is_reduced()]

    def unknown(self) -> List[int]:
        return [i for i, cell in enumerate(self._cells) if cell.is_unknown()]

    def is_collapsed(self) -> bool:
        return all(cell.is_collapsed() for cell in self._cells)

    def values(self) -> List[Optional[int]]:
        return [cell.value for cell in self._cells]


class History:
    """LIFO stack of board snapshots, one per open choice point."""

    def __init__(self) -> None:
        self._stack: List[BoardSnapshot] = []
        self.peak = 0

    def push(self, snapshot: BoardSnapshot) -> None:
        self._stack.append(snapshot)
        self.peak = max(self.peak, len(self._stack))

    def pop(self) -> Optional[BoardSnapshot]:
        if not self._stack:
            return None
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)


def pinned_board(values: Sequence[Optional[int]], states: int) -> Board:
    """Build a board from per-cell values, ``None`` meaning unknown."""

    return Board(
        Cell.unknown(states) if value is None else Cell.reduced(value, states)
        for value in values
    )
