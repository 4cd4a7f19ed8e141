"""In-place shifting of a row-major board, for sliding-window generation."""

from __future__ import annotations

from typing import Callable, Iterable

from ..core.cell import Cell
from ..core.constants import PanDirection
from ..core.exceptions import ConfigurationError
from .board import Board


def _shift(
    board: Board,
    order: Iterable[int],
    in_bounds: Callable[[int], bool],
    source: Callable[[int], int],
) -> None:
    for i in order:
        board[i] = board[source(i)] if in_bounds(i) else Cell.unknown(board.states)


def pan_board(board: Board, direction: PanDirection, distance: int, row_len: int) -> None:
    """Shift the board ``distance`` cells in ``direction``.

    Every destination reads from the cell ``distance`` away in the pan
    direction, so panning ``DOWN`` moves the content up and opens fresh rows at
    the bottom. Destinations whose source lies outside the grid become unknown.
    Iteration order follows the read direction so that no source is overwritten
    before it has been copied.
    """

    direction = PanDirection(direction)
    size = len(board)
    if row_len <= 0 or size % row_len:
        raise ConfigurationError(f"Row length {row_len} does not divide a board of {size}")
    if distance < 0:
        raise ConfigurationError(f"Pan distance must be non-negative, got {distance}")
    if distance == 0:
        return

    rows = size // row_len
    step = distance * row_len
    forward = range(size)
    backward = range(size - 1, -1, -1)

    if direction == PanDirection.LEFT:
        _shift(board, backward, lambda i: i % row_len >= distance, lambda i: i - distance)
    elif direction == PanDirection.RIGHT:
        _shift(board, forward, lambda i: i % row_len + distance < row_len, lambda i: i + distance)
    elif direction == PanDirection.UP:
        _shift(board, backward, lambda i: i // row_len >= distance, lambda i: i - step)
    else:
        _shift(board, forward, lambda i: i // row_len + distance < rows, lambda i: i + step)
