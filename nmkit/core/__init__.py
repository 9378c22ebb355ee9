"""Value types, failure taxonomy, settings and traces."""

from nmkit.core.errors import (
    NumericalError,
    InvalidArgumentError,
    DimensionMismatchError,
    SingularMatrixError,
    NonConvergenceError,
)
from nmkit.core.vector import Vector
from nmkit.core.matrix import Matrix
from nmkit.core.settings import SolverSettings, DEFAULT_SETTINGS
from nmkit.core.trace import Trace

__all__ = [
    "NumericalError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "NonConvergenceError",
    "Vector",
    "Matrix",
    "SolverSettings",
    "DEFAULT_SETTINGS",
    "Trace",
]
