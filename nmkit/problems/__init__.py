"""Library of demonstration equations and systems."""

from nmkit.problems.scalar import ScalarProblem, scalar_problem
from nmkit.problems.linear import GaussProblem, IterativeProblem, gauss_problem, iterative_problem
from nmkit.problems.nonlinear import NonlinearProblem, nonlinear_problem

__all__ = [
    "ScalarProblem",
    "scalar_problem",
    "GaussProblem",
    "IterativeProblem",
    "gauss_problem",
    "iterative_problem",
    "NonlinearProblem",
    "nonlinear_problem",
]
