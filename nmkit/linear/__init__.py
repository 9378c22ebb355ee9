"""Linear systems and their solvers."""

from nmkit.linear.system import LinearSystem
from nmkit.linear.gauss import GaussianElimination, gaussian_elimination
from nmkit.linear.iterative import (
    StationarySolver,
    JacobiSolver,
    GaussSeidelSolver,
    IterativeStep,
    IterativeTrace,
)
from nmkit.linear.factory import create_iterative_solver

__all__ = [
    "LinearSystem",
    "GaussianElimination",
    "gaussian_elimination",
    "StationarySolver",
    "JacobiSolver",
    "GaussSeidelSolver",
    "IterativeStep",
    "IterativeTrace",
    "create_iterative_solver",
]
