"""Constraint propagation, minimum-entropy search and backtracking.

The solver alternates two phases until every cell is collapsed:

  1. Propagate: apply the reducer to every unknown cell that has settled
     neighbors, round after round, until nothing new is pinned.
  2. Observe: pick the unknown cell with the fewest candidates and commit it
     to a random (weighted) state, remembering the alternative branch.

A contradiction restores the most recent alternative. Running out of
alternatives means the board has no solution.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..core.candidates import CandidateSet
from ..core.cell import Cell, WeightFn, uniform_weight
from ..core.constants import MAX_STATES, PanDirection
from ..core.exceptions import ConfigurationError, NoCandidateError, UnsatisfiableError
from ..utils.logger import get_logger
from .board import Board, History
from .pan import pan_board


LOGGER = get_logger(__name__)

NeighborFn = Callable[[int], Sequence[int]]
# Receives every settled neighbor of a cell in a single call, together with
# the index of the cell being reduced. Must not depend on neighbor order.
ReducerFn = Callable[[List[Tuple[int, Cell]], int], CandidateSet]


@dataclass
class SolverConfig:
    """Everything needed to build a :class:`Solver`.

    ``neighbors`` and ``reducer`` must be pure: backtracking replays them on
    restored boards and expects the same answers.
    """

    states: int
    size: int
    neighbors: NeighborFn
    reducer: ReducerFn
    weight: Optional[WeightFn] = None
    seed: Optional[int] = None
    initial: Optional[Sequence[Cell]] = None
    row_len: Optional[int] = None

    def validate(self) -> None:
        if not 1 <= self.states <= MAX_STATES:
            raise ConfigurationError(
                f"State count must be within 1..{MAX_STATES}, got {self.states}"
            )
        if self.size < 1:
            raise ConfigurationError(f"Board size must be positive, got {self.size}")
        if not callable(self.neighbors) or not callable(self.reducer):
            raise ConfigurationError("Neighbor and reducer functions must be callable")
        if self.weight is not None and not callable(self.weight):
            raise ConfigurationError("Weight function must be callable")
        if self.initial is not None and len(self.initial) != self.size:
            raise ConfigurationError(
                f"Initial board has {len(self.initial)} cells, expected {self.size}"
            )
        if self.row_len is not None and (self.row_len <= 0 or self.size % self.row_len):
            raise ConfigurationError(
                f"Row length {self.row_len} does not divide a board of {self.size}"
            )

    def to_board(self) -> Board:
        if self.initial is None:
            return Board.blank(self.size, self.states)
        board = Board(self.initial)
        if board.states != self.states:
            raise ConfigurationError(
                f"Initial board has {board.states} states, expected {self.states}"
            )
        return board


@dataclass
class SolveResult:
    solved: bool
    values: List[Optional[int]]
    observations: int = 0
    backtracks: int = 0
    max_depth: int = 0
    seed: Optional[int] = None
    messages: List[str] = field(default_factory=list)


class Solver:
    """Fills a board with states so that the reducer never objects."""

    def __init__(self, config: SolverConfig) -> None:
        config.validate()
        self.config = config
        self.board = config.to_board()
        self.history = History()
        self.neighbors = config.neighbors
        self.reducer = config.reducer
        self.weight = config.weight or uniform_weight
        self.rng = random.Random(config.seed)
        self.row_len = config.row_len
        self.observations = 0
        self.backtracks = 0

    def state(self) -> Board:
        return self.board

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def solve(self) -> SolveResult:
        self.observations = 0
        self.backtracks = 0
        self.history.peak = len(self.history)
        LOGGER.info(
            "Solving %s cells over %s states (%s already pinned)",
            len(self.board),
            self.board.states,
            len(self.board.settled()),
        )
        conflicts = self.conflicting_givens()
        if conflicts:
            message = f"Pinned cells {conflicts} break the constraints of their neighbors"
            LOGGER.warning("No solution found: %s", message)
            return self._result(solved=False, messages=[message])
        try:
            self.propagate(self.board.settled())
            index = self.lowest_entropy()
            while index is not None:
                self.propagate(self.observe(index))
                index = self.lowest_entropy()
        except UnsatisfiableError as exc:
            LOGGER.warning("No solution found: %s", exc)
            return self._result(solved=False, messages=[str(exc)])
        LOGGER.info(
            "Solved after %s observations and %s backtracks",
            self.observations,
            self.backtracks,
        )
        return self._result(solved=True)

    def _result(self, solved: bool, messages: Optional[List[str]] = None) -> SolveResult:
        return SolveResult(
            solved=solved,
            values=self.board.values(),
            observations=self.observations,
            backtracks=self.backtracks,
            max_depth=self.history.peak,
            seed=self.config.seed,
            messages=messages or [],
        )

    def conflicting_givens(self) -> List[int]:
        """Pinned cells whose own value is forbidden by their pinned neighbors.

        Propagation only narrows unknown cells, so a clash between two pinned
        cells would otherwise go unnoticed.
        """

        conflicts = []
        for i in self.board.settled():
            settled = [
                (j, self.board[j])
                for j in self.neighbors(i)
                if not self.board[j].is_unknown()
            ]
            if settled and self.board[i].value in self.reducer(settled, i):
                conflicts.append(i)
        return conflicts

    # ------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------
    def propagate(self, worklist: Iterable[int]) -> None:
        """Tighten domains until no cell can be reduced any further.

        ``worklist`` holds the indices pinned since the last round; they are
        collapsed once every unknown cell has had a look at them.
        """

        updates = list(worklist)
        while updates:
            pinned: List[int] = []
            contradiction: Optional[int] = None
            for i in range(len(self.board)):
                cell = self.board[i]
                if not cell.is_unknown():
                    continue
                settled = [
                    (j, self.board[j])
                    for j in self.neighbors(i)
                    if not self.board[j].is_unknown()
                ]
                if not settled:
                    continue
                forbidden = self.reducer(settled, i)
                if forbidden.is_empty():
                    continue
                reduced = cell.reduce(forbidden)
                if reduced is None:
                    contradiction = i
                    break
                self.board[i] = reduced
                if reduced.is_reduced():
                    pinned.append(i)

            if contradiction is not None:
                LOGGER.debug("Cell %s ran out of candidates", contradiction)
                updates = self.backtrack()
                continue

            for i in updates:
                self.board[i] = self.board[i].collapse()
            updates = pinned

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def lowest_entropy(self) -> Optional[int]:
        """Randomly pick one of the unknown cells with the fewest candidates."""

        entropies = [
            (cell.entropy(), i) for i, cell in enumerate(self.board) if cell.is_unknown()
        ]
        if not entropies:
            return None
        lowest = min(entropy for entropy, _ in entropies)
        return self.rng.choice([i for entropy, i in entropies if entropy == lowest])

    def observe(self, index: int) -> List[int]:
        """Commit cell ``index`` to a random state and return it as the worklist.

        The board pushed onto the history is the current one with the chosen
        state removed from the cell, so backtracking tries the other branch of
        this choice instead of repeating it.
        """

        cell = self.board[index]
        try:
            chosen = cell.observe(self.weight, self.rng)
        except NoCandidateError as exc:
            LOGGER.debug("Cell %s cannot be observed: %s", index, exc)
            return self.backtrack()

        # An unknown cell holds at least two candidates, so one always remains.
        alternative = cell.reduce(chosen.domain)
        snapshot = self.board.snapshot()
        self.history.push(snapshot[:index] + (alternative,) + snapshot[index + 1:])
        self.board[index] = chosen
        self.observations += 1
        LOGGER.debug(
            "Observed cell %s as %s (entropy %s, depth %s)",
            index,
            chosen.value,
            cell.entropy(),
            len(self.history),
        )
        return [index]

    def backtrack(self) -> List[int]:
        """Restore the latest alternative and return its pending indices."""

        snapshot = self.history.pop()
        if snapshot is None:
            raise UnsatisfiableError("Every choice point has been exhausted")
        self.board.restore(snapshot)
        self.backtracks += 1
        pending = self.board.pending()
        LOGGER.debug(
            "Backtracked to depth %s with %s pending cells",
            len(self.history),
            len(pending),
        )
        return pending

    # ------------------------------------------------------------------
    # Windowing
    # ------------------------------------------------------------------
    def pan(
        self,
        direction: PanDirection,
        distance: int,
        row_len: Optional[int] = None,
    ) -> None:
        """Shift the board and forget every recorded choice point."""

        row_len = row_len or self.row_len
        if row_len is None:
            raise ConfigurationError("Panning needs a row length")
        pan_board(self.board, direction, distance, row_len)
        self.history.clear()
        LOGGER.debug("Panned %s by %s", PanDirection(direction).value, distance)
