"""Tests for Newton's method on nonlinear systems."""

import math

import numpy as np
import pytest

from nmkit.core import (
    DimensionMismatchError,
    InvalidArgumentError,
    Matrix,
    NonConvergenceError,
    SingularMatrixError,
    SolverSettings,
    Vector,
)
from nmkit.nonlinear import NewtonSolver, NewtonSystemTrace, NonlinearSystem
from nmkit.problems import nonlinear_problem


def _linear(A, b):
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    return NonlinearSystem(lambda x: A @ np.asarray(x) - b, lambda x: A)


@pytest.mark.parametrize("system_id", [1, 2, 3, 4])
def test_demonstration_systems_converge(system_id):
    problem = nonlinear_problem(system_id)
    x = NewtonSolver.solve(problem.system, problem.x0, problem.eps)
    assert len(x) == len(problem.start)
    assert problem.system.evaluate(x).norm_inf() <= problem.eps


def test_system1_root():
    """The third equation forces x3 = 1/7."""
    problem = nonlinear_problem(1)
    x = NewtonSolver.solve(problem.system, problem.x0, 1e-10)
    assert x[2] == pytest.approx(1.0 / 7.0, abs=1e-9)
    assert x[1] == pytest.approx(0.48968, abs=1e-4)


def test_system2_root():
    problem = nonlinear_problem(2)
    x = NewtonSolver.solve(problem.system, problem.x0, 1e-10)
    assert np.allclose(x.to_numpy(), [6.0, 1.0, -4.0], atol=1e-8)


def test_linear_system_takes_one_step():
    """For affine F one Newton step is exact; the next residual check stops."""
    system = _linear([[2.0, 1.0], [1.0, 3.0]], [3.0, 5.0])
    trace = NewtonSystemTrace()
    x = NewtonSolver.solve(system, Vector([0.0, 0.0]), 1e-10, trace)
    assert np.allclose(x.to_numpy(), [0.8, 1.4])
    assert len(trace) == 1


def test_trace_records_updates():
    problem = nonlinear_problem(2)
    trace = NewtonSystemTrace()
    x = NewtonSolver.solve(problem.system, problem.x0, problem.eps, trace)

    assert trace[0].x == problem.x0
    assert [s.iter for s in trace] == list(range(len(trace)))
    for step, nxt in zip(trace, trace.steps[1:]):
        assert np.allclose((step.x + step.delta).to_numpy(), nxt.x.to_numpy())
    assert set(trace[0].to_dict()) == {"iter", "x", "fx", "jac", "delta"}
    assert len(x) == 3


def test_start_already_solves():
    system = _linear([[1.0]], [2.0])
    trace = NewtonSystemTrace()
    assert NewtonSolver.solve(system, Vector([2.0]), 1e-8, trace) == Vector([2.0])
    assert len(trace) == 0


def test_start_vector_not_modified():
    problem = nonlinear_problem(4)
    x0 = problem.x0
    NewtonSolver.solve(problem.system, x0, problem.eps)
    assert x0 == Vector(problem.start)


def test_start_length_mismatch():
    """F always returns three components, x0 has two."""
    system = NonlinearSystem(lambda x: [x[0], x[1], 1.0], lambda x: np.eye(3))
    with pytest.raises(DimensionMismatchError):
        NewtonSolver.solve(system, Vector([1.0, 1.0]), 1e-8)


def test_jacobian_shape_mismatch():
    system = NonlinearSystem(lambda x: [x[0] - 1.0, x[1] - 1.0], lambda x: np.eye(3))
    with pytest.raises(DimensionMismatchError):
        NewtonSolver.solve(system, Vector([0.0, 0.0]), 1e-8)


def test_singular_jacobian():
    system = _linear([[1.0, 1.0], [2.0, 2.0]], [1.0, 3.0])
    with pytest.raises(SingularMatrixError, match="iteration 0"):
        NewtonSolver.solve(system, Vector([0.0, 0.0]), 1e-8)


def test_non_finite_residual():
    system = NonlinearSystem(lambda x: [math.inf], lambda x: [[1.0]])
    with pytest.raises(NonConvergenceError):
        NewtonSolver.solve(system, Vector([0.0]), 1e-8)


def test_iteration_cap():
    """x^2 + 1 = 0 has no real root."""
    system = NonlinearSystem(lambda x: [x[0] * x[0] + 1.0], lambda x: [[2.0 * x[0]]])
    capped = SolverSettings(newton_system_max_iter=5)
    with pytest.raises(NonConvergenceError):
        NewtonSolver.solve(system, Vector([0.5]), 1e-8, settings=capped)


def test_invalid_arguments():
    problem = nonlinear_problem(3)
    with pytest.raises(InvalidArgumentError):
        NewtonSolver.solve(problem.system, problem.x0, 0.0)
    with pytest.raises(InvalidArgumentError):
        NewtonSolver.solve(problem.system, Vector([]), 1e-5)
    with pytest.raises(InvalidArgumentError):
        NewtonSolver.solve(problem.system, Vector([math.nan, 0.0]), 1e-5)


def test_callbacks_receive_copies():
    """F may scribble on its argument without disturbing the iterate."""
    seen = []

    def F(x):
        seen.append(x[0])
        x[0] = 1e6
        return [seen[-1] - 2.0]

    system = NonlinearSystem(F, lambda x: Matrix.identity(1))
    x = NewtonSolver.solve(system, Vector([0.0]), 1e-10)
    assert x == Vector([2.0])


def test_nonlinear_system_rejects_non_callables():
    with pytest.raises(InvalidArgumentError):
        NonlinearSystem(lambda x: x, None)
