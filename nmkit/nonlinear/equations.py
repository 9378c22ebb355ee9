"""Callable wrappers giving root-finders a uniform evaluation contract."""

from typing import Callable, Union

from numpy.typing import ArrayLike

from nmkit.core.errors import InvalidArgumentError
from nmkit.core.matrix import Matrix
from nmkit.core.vector import Vector

ScalarFunction = Callable[[float], float]
VectorFunction = Callable[[Vector], Union[Vector, ArrayLike]]
JacobianFunction = Callable[[Vector], Union[Matrix, ArrayLike]]


class ScalarEquation:
    """f(x) = 0 for a real function f."""

    __slots__ = ("_f",)

    def __init__(self, f: ScalarFunction):
        if not callable(f):
            raise InvalidArgumentError("ScalarEquation requires a callable")
        self._f = f

    def __call__(self, x: float) -> float:
        return float(self._f(x))

    evaluate = __call__


class NonlinearSystem:
    """
    F(x) = 0 together with its Jacobian J(x).

    F and J may return Vector/Matrix or anything numpy can turn into a
    1-D / 2-D array. Shapes are checked by the solver, not here.
    """

    __slots__ = ("_F", "_J")

    def __init__(self, F: VectorFunction, J: JacobianFunction):
        if not callable(F) or not callable(J):
            raise InvalidArgumentError("NonlinearSystem requires callables F and J")
        self._F = F
        self._J = J

    def evaluate(self, x: Vector) -> Vector:
        """F(x) as a Vector; F receives a private copy of x."""
        fx = self._F(x.copy())
        return fx if isinstance(fx, Vector) else Vector(fx)

    def jacobian(self, x: Vector) -> Matrix:
        """J(x) as a Matrix; J receives a private copy of x."""
        jac = self._J(x.copy())
        return jac if isinstance(jac, Matrix) else Matrix.from_rows(jac)
