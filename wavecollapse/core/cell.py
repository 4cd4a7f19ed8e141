"""Cell variants: ``Unknown -> Reduced -> Collapsed``.

A cell is one of three frozen dataclasses sharing the :class:`Cell` base:

- :class:`Unknown` still holds a domain of possible states.
- :class:`Reduced` has been pinned to a single state, but neighbors have not
  yet been told about it in the current propagation round.
- :class:`Collapsed` is pinned and authoritative; neighbors may rely on it.

Cells are immutable. Every transition returns a new cell, which lets board
snapshots share cell objects with the live board.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

from .candidates import CandidateSet
from .exceptions import ConfigurationError, NoCandidateError


WeightFn = Callable[[int], float]


def uniform_weight(state: int) -> float:
    """Default weight: every candidate is equally likely."""

    return 1.0


class Cell:
    """Common interface of the three cell variants."""

    domain: CandidateSet
    value: Optional[int]

    @staticmethod
    def unknown(size: int) -> "Cell":
        # A single-state domain has nothing left to decide.
        if size == 1:
            return Cell.reduced(0, size)
        return Unknown(CandidateSet.full(size))

    @staticmethod
    def reduced(state: int, size: int) -> "Reduced":
        return Reduced(CandidateSet.singleton(state, size), state)

    @staticmethod
    def collapsed(state: int, size: int) -> "Collapsed":
        return Collapsed(CandidateSet.singleton(state, size), state)

    @property
    def states(self) -> int:
        """Width of the domain, i.e. ``N``."""

        return self.domain.size

    def is_unknown(self) -> bool:
        return False

    def is_reduced(self) -> bool:
        return False

    def is_collapsed(self) -> bool:
        return False

    def entropy(self) -> int:
        raise NotImplementedError

    def reduce(self, forbidden: CandidateSet) -> Optional["Cell"]:
        """Remove ``forbidden`` states; pinned cells are returned unchanged."""

        return self

    def observe(self, weight: WeightFn, rng: random.Random) -> "Cell":
        """Pick a state at random; pinned cells have already picked one."""

        return self

    def collapse(self) -> "Cell":
        return self


@dataclass(frozen=True)
class Unknown(Cell):
    domain: CandidateSet

    def __post_init__(self) -> None:
        if self.domain.entropy() < 2:
            raise ValueError(f"An unknown cell needs at least two candidates, got {self.domain}")

    @property
    def value(self) -> Optional[int]:
        return None

    def is_unknown(self) -> bool:
        return True

    def entropy(self) -> int:
        return self.domain.entropy()

    def reduce(self, forbidden: CandidateSet) -> Optional[Cell]:
        remaining = self.domain - forbidden
        if remaining.is_empty():
            return None
        if remaining.is_singleton():
            return Reduced(remaining, remaining.first())
        if remaining == self.domain:
            return self
        return Unknown(remaining)

    def observe(self, weight: WeightFn, rng: random.Random) -> Cell:
        states = []
        weights = []
        for state in self.domain:
            w = float(weight(state))
            if w < 0:
                raise ConfigurationError(f"Negative weight {w} for state {state}")
            if w > 0:
                states.append(state)
                weights.append(w)
        if not states:
            raise NoCandidateError(f"No weighted candidate left in {self.domain}")
        chosen = rng.choices(states, weights=weights, k=1)[0]
        return Reduced(CandidateSet.singleton(chosen, self.domain.size), chosen)


@dataclass(frozen=True)
class _Pinned(Cell):
    domain: CandidateSet
    value: int

    def __post_init__(self) -> None:
        if self.domain != CandidateSet.singleton(self.value, self.domain.size):
            raise ValueError(
                f"Pinned cell domain {self.domain} does not match value {self.value}"
            )


@dataclass(frozen=True)
class Reduced(_Pinned):
    def is_reduced(self) -> bool:
        return True

    def entropy(self) -> int:
        return 1

    def collapse(self) -> Cell:
        return Collapsed(self.domain, self.value)


@dataclass(frozen=True)
class Collapsed(_Pinned):
    def is_collapsed(self) -> bool:
        return True

    def entropy(self) -> int:
        return 0
