"""Generic wave function collapse solver with propagation and backtracking.

This package exposes the public API surface via:

- ``wavecollapse.engine.solver.Solver``: propagates, observes and backtracks.
- ``wavecollapse.engine.solver.SolverConfig``: topology, constraint and seed.
- ``wavecollapse.core.cell`` variants: ``Unknown``, ``Reduced``, ``Collapsed``.
- ``wavecollapse.puzzles``: sudoku and pipe maze collaborators.
"""

from .core.candidates import CandidateSet
from .core.cell import Cell, Collapsed, Reduced, Unknown, uniform_weight
from .core.constants import PanDirection
from .core.exceptions import UnsatisfiableError, WaveCollapseError
from .engine.board import Board, History
from .engine.solver import SolveResult, Solver, SolverConfig

__all__ = [
    "Board",
    "CandidateSet",
    "Cell",
    "Collapsed",
    "History",
    "PanDirection",
    "Reduced",
    "SolveResult",
    "Solver",
    "SolverConfig",
    "Unknown",
    "UnsatisfiableError",
    "WaveCollapseError",
    "uniform_weight",
]

__version__ = "0.1.0"
