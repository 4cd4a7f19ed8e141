"""Fixed-width bitset describing the states a cell may still take."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .constants import MAX_STATES


def _mask(size: int) -> int:
    return (1 << size) - 1


def _check_size(size: int) -> None:
    if not 1 <= size <= MAX_STATES:
        raise ValueError(f"State count must be within 1..{MAX_STATES}, got {size}")


@dataclass(frozen=True)
class CandidateSet:
    """Immutable set of state indices ``0..size-1`` backed by an ``int``.

    Bits at positions ``>= size`` are dropped on construction, so two sets
    over the same width compare equal exactly when they hold the same states.
    """

    bits: int
    size: int

    def __post_init__(self) -> None:
        _check_size(self.size)
        object.__setattr__(self, "bits", self.bits & _mask(self.size))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def full(cls, size: int) -> "CandidateSet":
        _check_size(size)
        return cls(_mask(size), size)

    @classmethod
    def empty(cls, size: int) -> "CandidateSet":
        return cls(0, size)

    @classmethod
    def singleton(cls, state: int, size: int) -> "CandidateSet":
        _check_size(size)
        if not 0 <= state < size:
            raise ValueError(f"State {state} outside 0..{size - 1}")
        return cls(1 << state, size)

    @classmethod
    def of(cls, states: Iterable[int], size: int) -> "CandidateSet":
        _check_size(size)
        bits = 0
        for state in states:
            if not 0 <= state < size:
                raise ValueError(f"State {state} outside 0..{size - 1}")
            bits |= 1 << state
        return cls(bits, size)

    # ------------------------------------------------------------------
    # Set algebra
    # ------------------------------------------------------------------
    def __or__(self, other: "CandidateSet") -> "CandidateSet":
        return CandidateSet(self.bits | other.bits, self.size)

    def __and__(self, other: "CandidateSet") -> "CandidateSet":
        return CandidateSet(self.bits & other.bits, self.size)

    def __sub__(self, other: "CandidateSet") -> "CandidateSet":
        return CandidateSet(self.bits & ~other.bits, self.size)

    def complement(self) -> "CandidateSet":
        return CandidateSet(~self.bits, self.size)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def entropy(self) -> int:
        """Number of candidate states left."""

        return bin(self.bits).count("1")

    def is_empty(self) -> bool:
        return self.bits == 0

    def is_singleton(self) -> bool:
        return self.bits != 0 and self.bits & (self.bits - 1) == 0

    def first(self) -> Optional[int]:
        if not self.bits:
            return None
        return (self.bits & -self.bits).bit_length() - 1

    def __contains__(self, state: object) -> bool:
        if not isinstance(state, int) or not 0 <= state < self.size:
            return False
        return bool(self.bits >> state & 1)

    def __iter__(self) -> Iterator[int]:
        bits = self.bits
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def __len__(self) -> int:
        return self.entropy()

    def __bool__(self) -> bool:
        return self.bits != 0

    def __str__(self) -> str:
        return format(self.bits, f"0{self.size}b")
