"""
nmkit: classical numerical methods reproduced the way they are taught.

This library provides textbook solvers with optional step traces:
- Gaussian elimination with partial pivoting and hand-calculation rounding
- Jacobi and Gauss-Seidel iteration
- Bisection, regula falsi, secant and Newton root-finding
- Newton's method for nonlinear systems
"""

__version__ = "0.1.0"

from nmkit.core import (
    Vector,
    Matrix,
    Trace,
    SolverSettings,
    DEFAULT_SETTINGS,
    NumericalError,
    InvalidArgumentError,
    DimensionMismatchError,
    SingularMatrixError,
    NonConvergenceError,
)
from nmkit.algebra import round_to_significant_digits, GaussianEliminationTrace
from nmkit.linear import LinearSystem, GaussianElimination, JacobiSolver, GaussSeidelSolver
from nmkit.nonlinear import (
    ScalarEquation,
    NonlinearSystem,
    NewtonSolver,
    bisection,
    regula_falsi,
    secant,
    newton,
)

__all__ = [
    "Vector",
    "Matrix",
    "Trace",
    "SolverSettings",
    "DEFAULT_SETTINGS",
    "NumericalError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "NonConvergenceError",
    "round_to_significant_digits",
    "GaussianEliminationTrace",
    "LinearSystem",
    "GaussianElimination",
    "JacobiSolver",
    "GaussSeidelSolver",
    "ScalarEquation",
    "NonlinearSystem",
    "NewtonSolver",
    "bisection",
    "regula_falsi",
    "secant",
    "newton",
]
