"""Failure taxonomy shared by all solvers."""

import numpy as np


class NumericalError(Exception):
    """Base class for every failure raised by a solver."""


class InvalidArgumentError(NumericalError, ValueError):
    """Malformed caller input (non-positive eps, bad bracket, missing callable, ...)."""


class DimensionMismatchError(NumericalError, ValueError):
    """Matrix/vector shapes inconsistent with the system size."""


class SingularMatrixError(NumericalError, np.linalg.LinAlgError):
    """A pivot or diagonal entry fell below the near-zero threshold."""


class NonConvergenceError(NumericalError, RuntimeError):
    """Iteration budget exhausted or the sequence produced a non-finite value."""
