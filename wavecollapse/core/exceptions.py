"""Custom exception hierarchy for the wave function collapse engine."""


class WaveCollapseError(Exception):
    """Base exception for solver failures."""


class ConfigurationError(WaveCollapseError):
    """Raised when a solver or board is configured inconsistently."""


class NoCandidateError(WaveCollapseError):
    """Raised when a cell has no candidate left to observe."""


class UnsatisfiableError(WaveCollapseError):
    """Raised when backtracking runs out of choice points to retry."""


class ParseError(WaveCollapseError):
    """Raised when a puzzle text cannot be turned into a board."""


class InvalidSizeError(ParseError):
    """Raised when a puzzle text has the wrong number of cells."""

    def __init__(self, size: int, expected: int) -> None:
        super().__init__(
            f"A board was provided with an invalid length of {size} (expected {expected})"
        )
        self.size = size
        self.expected = expected


class InvalidInputError(ParseError):
    """Raised when a puzzle text contains an unknown symbol."""

    def __init__(self, position: int, char: str) -> None:
        super().__init__(f"Character {char!r} at position {position} is invalid")
        self.position = position
        self.char = char


class ValidationError(WaveCollapseError):
    """Raised when a solved board breaks its constraints."""
