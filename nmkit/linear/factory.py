"""Iterative solver lookup by name."""

from nmkit.core.errors import InvalidArgumentError
from nmkit.linear.iterative import GaussSeidelSolver, JacobiSolver, StationarySolver

_SOLVERS = {
    "jacobi": JacobiSolver,
    "gaussseidel": GaussSeidelSolver,
    "gauss-seidel": GaussSeidelSolver,
    "gauss_seidel": GaussSeidelSolver,
}


def create_iterative_solver(name: str) -> StationarySolver:
    """
    Build a stationary solver from its name.

    Args:
        name: "jacobi" or "gaussSeidel" (case-insensitive; "gauss-seidel"
            and "gauss_seidel" are accepted too)

    Returns:
        Solver instance
    """
    try:
        cls = _SOLVERS[name.lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"unknown iterative solver {name!r}; expected 'jacobi' or 'gaussSeidel'"
        ) from None
    return cls()
