"""Deterministic rule validation for solved boards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.cell import Cell
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .solver import NeighborFn, ReducerFn


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class BoardValidator:
    """Checks a board against the same functions the solver used."""

    def __init__(self, neighbors: NeighborFn, reducer: ReducerFn) -> None:
        self.neighbors = neighbors
        self.reducer = reducer

    def validate(self, board: Sequence[Cell]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_collapsed(board)
            self._check_consistent(board)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_collapsed(self, board: Sequence[Cell]) -> None:
        for index, cell in enumerate(board):
            if cell.value is None:
                raise ValidationError(f"Cell {index} is still unknown")

    def _check_consistent(self, board: Sequence[Cell]) -> None:
        for index, cell in enumerate(board):
            neighbors = [(j, board[j]) for j in self.neighbors(index)]
            forbidden = self.reducer(neighbors, index)
            if cell.value in forbidden:
                raise ValidationError(
                    f"Cell {index} holds state {cell.value} which its neighbors forbid"
                )
