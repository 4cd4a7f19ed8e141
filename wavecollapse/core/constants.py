"""Shared constants and enumerations for the solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# Fixed bit width of a candidate set.
MAX_STATES: int = 64


class PanDirection(str, Enum):
    """Directions a board window can be panned in."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UP = "UP"
    DOWN = "DOWN"


# (row, col) steps in the order left, right, up, down.
ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper for row-major boards."""

    rows: int
    cols: int

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def position(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.cols)
