"""Tests for the scalar root-finders."""

import math

import pytest

from nmkit.core import InvalidArgumentError, NonConvergenceError, SolverSettings
from nmkit.nonlinear import (
    BisectionTrace,
    NewtonTrace,
    RegulaFalsiTrace,
    ScalarEquation,
    SecantTrace,
    bisection,
    newton,
    regula_falsi,
    secant,
)
from nmkit.problems import scalar_problem

ROOT_EQ1 = 1.41239117  # x^2 - 4x + 4 - ln(x) on [1, 2]


@pytest.fixture
def eq1():
    return scalar_problem(1, 1)


def test_all_methods_agree(eq1):
    """The four methods find the same root of equation 1 on [1, 2]."""
    f, eps = eq1.equation, eq1.eps
    results = [
        bisection(f, eq1.a, eq1.b, eps),
        regula_falsi(f, eq1.a, eq1.b, eps),
        secant(f, eq1.a, eq1.b, eps),
        newton(f, eq1.derivative, eq1.midpoint, eps),
    ]
    assert max(results) - min(results) <= eps
    for x in results:
        assert x == pytest.approx(ROOT_EQ1, abs=1e-6)
        assert abs(f(x)) < 1e-6


def test_plain_callables_accepted():
    assert bisection(lambda x: x * x - 2.0, 0.0, 2.0, 1e-10) == pytest.approx(math.sqrt(2.0), abs=1e-9)


def test_bisection_trace(eq1):
    """First steps halve [1, 2]; f(1.5) < 0 moves b."""
    trace = BisectionTrace()
    bisection(eq1.equation, eq1.a, eq1.b, eq1.eps, trace)

    first, second = trace[0], trace[1]
    assert (first.iter, first.a, first.b, first.p) == (0, 1.0, 2.0, 1.5)
    assert first.error_bound == 0.5
    assert first.fp < 0.0
    assert (second.a, second.b, second.p) == (1.0, 1.5, 1.25)
    assert [s.iter for s in trace] == list(range(len(trace)))


def test_bisection_error_bound_halves(eq1):
    trace = BisectionTrace()
    bisection(eq1.equation, eq1.a, eq1.b, eq1.eps, trace)
    bounds = [s.error_bound for s in trace]
    for prev, cur in zip(bounds, bounds[1:]):
        assert cur == prev / 2.0


def test_bisection_endpoint_root():
    """An endpoint already within eps is returned without iterating."""
    trace = BisectionTrace()
    assert bisection(lambda x: x - 1.0, 1.0, 3.0, 1e-7, trace) == 1.0
    assert len(trace) == 0


def test_regula_falsi_first_point(eq1):
    """p = (a f(b) - b f(a)) / (f(b) - f(a))."""
    trace = RegulaFalsiTrace()
    regula_falsi(eq1.equation, eq1.a, eq1.b, eq1.eps, trace)
    fa, fb = eq1.equation(1.0), eq1.equation(2.0)
    assert trace[0].p == pytest.approx((1.0 * fb - 2.0 * fa) / (fb - fa))


def test_regula_falsi_keeps_one_endpoint(eq1):
    """f is convex and decreasing on [1, 2], so the left endpoint never moves."""
    trace = RegulaFalsiTrace()
    regula_falsi(eq1.equation, eq1.a, eq1.b, eq1.eps, trace)
    assert len(trace) > 1
    assert all(step.a == 1.0 for step in trace)


def test_regula_falsi_exact_endpoint_root():
    assert regula_falsi(lambda x: x - 2.0, 0.0, 2.0, 1e-7) == 2.0


def test_secant_trace_slides_window(eq1):
    trace = SecantTrace()
    secant(eq1.equation, eq1.a, eq1.b, eq1.eps, trace)
    assert (trace[0].x0, trace[0].x1) == (1.0, 2.0)
    for prev, cur in zip(trace, trace.steps[1:]):
        assert cur.x0 == prev.x1
        assert cur.x1 == prev.p


def test_secant_equal_function_values():
    """f(x0) == f(x1) leaves the secant line horizontal."""
    with pytest.raises(InvalidArgumentError):
        secant(lambda x: x * x - 1.0, -2.0, 2.0, 1e-7)


def test_secant_seed_within_tolerance():
    assert secant(lambda x: x - 1.0, 1.0, 5.0, 1e-7) == 1.0


def test_secant_non_finite_seed():
    f = lambda x: math.inf if x == 0.0 else x
    with pytest.raises(InvalidArgumentError):
        secant(f, 0.0, 1.0, 1e-7)


def test_newton_trace(eq1):
    trace = NewtonTrace()
    x = newton(eq1.equation, eq1.derivative, eq1.midpoint, eq1.eps, trace)
    first = trace[0]
    assert first.x == 1.5
    assert first.x_next == pytest.approx(first.x - first.fx / first.dfx)
    assert trace.last.x_next == x
    assert set(first.to_dict()) == {"iter", "x", "fx", "dfx", "xNext", "fxNext"}


def test_newton_start_is_root():
    trace = NewtonTrace()
    assert newton(lambda x: x - 3.0, lambda x: 1.0, 3.0, 1e-7, trace) == 3.0
    assert len(trace) == 0


def test_newton_requires_derivative():
    with pytest.raises(InvalidArgumentError):
        newton(lambda x: x, None, 1.0, 1e-7)
    with pytest.raises(InvalidArgumentError):
        newton(lambda x: x, 2.0, 1.0, 1e-7)


def test_newton_zero_derivative():
    with pytest.raises(NonConvergenceError):
        newton(lambda x: x * x + 1.0, lambda x: 2.0 * x, 0.0, 1e-7)


def test_newton_non_finite_values():
    with pytest.raises(InvalidArgumentError):
        newton(lambda x: math.nan, lambda x: 1.0, 0.0, 1e-7)
    with pytest.raises(InvalidArgumentError):
        newton(lambda x: x - 1.0, lambda x: math.inf, 0.0, 1e-7)


@pytest.mark.parametrize("method", [bisection, regula_falsi])
def test_interval_must_be_ordered(method):
    with pytest.raises(InvalidArgumentError):
        method(lambda x: x, 1.0, -1.0, 1e-7)
    with pytest.raises(InvalidArgumentError):
        method(lambda x: x, 1.0, 1.0, 1e-7)


@pytest.mark.parametrize("method", [bisection, regula_falsi])
def test_interval_must_bracket(method):
    with pytest.raises(InvalidArgumentError):
        method(lambda x: x * x + 1.0, -1.0, 1.0, 1e-7)


@pytest.mark.parametrize("method", [bisection, regula_falsi])
def test_endpoint_values_must_be_finite(method):
    f = lambda x: math.inf if x == 0.0 else x - 0.5
    with pytest.raises(InvalidArgumentError):
        method(f, 0.0, 1.0, 1e-7)


@pytest.mark.parametrize("eps", [0.0, -1e-7, math.nan])
def test_eps_must_be_positive(eq1, eps):
    f = eq1.equation
    with pytest.raises(InvalidArgumentError):
        bisection(f, 1.0, 2.0, eps)
    with pytest.raises(InvalidArgumentError):
        regula_falsi(f, 1.0, 2.0, eps)
    with pytest.raises(InvalidArgumentError):
        secant(f, 1.0, 2.0, eps)
    with pytest.raises(InvalidArgumentError):
        newton(f, eq1.derivative, 1.5, eps)


def test_iteration_cap_from_settings(eq1):
    capped = SolverSettings().with_overrides(bisection_max_iter=3, newton_max_iter=1)
    with pytest.raises(NonConvergenceError):
        bisection(eq1.equation, eq1.a, eq1.b, 1e-12, settings=capped)
    with pytest.raises(NonConvergenceError):
        newton(eq1.equation, eq1.derivative, 1.0, 1e-12, settings=capped)


def test_traces_reset_between_runs(eq1):
    trace = BisectionTrace()
    bisection(eq1.equation, eq1.a, eq1.b, eq1.eps, trace)
    n = len(trace)
    bisection(eq1.equation, eq1.a, eq1.b, eq1.eps, trace)
    assert len(trace) == n


def test_scalar_equation_rejects_non_callable():
    with pytest.raises(InvalidArgumentError):
        ScalarEquation(3.0)


def test_package_exports_scalar_newton():
    """nmkit.newton is the scalar function, not the systems module."""
    import nmkit
    from nmkit.nonlinear import newton as exported
    from nmkit.nonlinear.rootfinding import newton as scalar_newton

    assert exported is scalar_newton
    assert nmkit.newton is scalar_newton
    assert nmkit.newton(lambda x: x - 2.0, lambda x: 1.0, 0.0, 1e-9) == 2.0
