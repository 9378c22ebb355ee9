"""Tests for solver settings, traces and the error hierarchy."""

import numpy as np
import pytest

from nmkit.core import (
    DEFAULT_SETTINGS,
    DimensionMismatchError,
    InvalidArgumentError,
    NonConvergenceError,
    NumericalError,
    SingularMatrixError,
    SolverSettings,
    Trace,
    Vector,
)
from nmkit.linear import IterativeStep


def test_default_settings():
    assert DEFAULT_SETTINGS.pivot_tol == 1e-15
    assert DEFAULT_SETTINGS.tie_tol == 1e-12
    assert DEFAULT_SETTINGS.bisection_max_iter == 1000
    assert DEFAULT_SETTINGS.regula_falsi_max_iter == 100_000
    assert DEFAULT_SETTINGS.secant_max_iter == 100_000
    assert DEFAULT_SETTINGS.newton_max_iter == 1000
    assert DEFAULT_SETTINGS.newton_system_max_iter == 100


def test_with_overrides_copies():
    custom = DEFAULT_SETTINGS.with_overrides(newton_max_iter=7)
    assert custom.newton_max_iter == 7
    assert DEFAULT_SETTINGS.newton_max_iter == 1000


@pytest.mark.parametrize(
    "overrides",
    [
        {"pivot_tol": 0.0},
        {"tie_tol": -1e-12},
        {"bisection_max_iter": 0},
        {"secant_max_iter": 2.5},
        {"newton_system_max_iter": True},
    ],
)
def test_invalid_settings(overrides):
    with pytest.raises(InvalidArgumentError):
        SolverSettings(**overrides)


def test_error_hierarchy():
    """Every library error is a NumericalError and a matching builtin."""
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(DimensionMismatchError, ValueError)
    assert issubclass(SingularMatrixError, np.linalg.LinAlgError)
    assert issubclass(NonConvergenceError, RuntimeError)
    for cls in (InvalidArgumentError, DimensionMismatchError, SingularMatrixError, NonConvergenceError):
        assert issubclass(cls, NumericalError)


def test_trace_records_in_order():
    trace = Trace()
    assert len(trace) == 0
    assert trace.last is None

    trace.record(IterativeStep(0, Vector([0.0])))
    trace.record(IterativeStep(1, Vector([1.0])))
    assert [s.iter for s in trace] == [0, 1]
    assert trace.last.iter == 1
    assert trace.to_records() == [{"iter": 0, "x": [0.0]}, {"iter": 1, "x": [1.0]}]

    trace.clear()
    assert trace.steps == ()
