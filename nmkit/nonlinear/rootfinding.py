"""Scalar root-finding: bisection, regula falsi, secant and Newton."""

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Optional, Union

from nmkit.core.errors import InvalidArgumentError, NonConvergenceError
from nmkit.core.settings import DEFAULT_SETTINGS, SolverSettings
from nmkit.core.trace import Trace
from nmkit.nonlinear.equations import ScalarEquation, ScalarFunction

logger = logging.getLogger(__name__)

EquationLike = Union[ScalarEquation, ScalarFunction]


@dataclass(frozen=True)
class BisectionStep:
    iter: int
    a: float
    b: float
    p: float
    fp: float
    error_bound: float  # |b - a| / 2, the largest possible distance to the root

    def to_dict(self) -> dict[str, Any]:
        return {
            "iter": self.iter,
            "a": self.a,
            "b": self.b,
            "p": self.p,
            "fp": self.fp,
            "errorBound": self.error_bound,
        }


@dataclass(frozen=True)
class RegulaFalsiStep:
    iter: int
    a: float
    b: float
    p: float
    fp: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SecantStep:
    iter: int
    x0: float
    x1: float
    p: float
    fp: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NewtonStep:
    iter: int
    x: float
    fx: float
    dfx: float
    x_next: float
    fx_next: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "iter": self.iter,
            "x": self.x,
            "fx": self.fx,
            "dfx": self.dfx,
            "xNext": self.x_next,
            "fxNext": self.fx_next,
        }


BisectionTrace = Trace[BisectionStep]
RegulaFalsiTrace = Trace[RegulaFalsiStep]
SecantTrace = Trace[SecantStep]
NewtonTrace = Trace[NewtonStep]


def _sign(x: float) -> int:
    if x > 0.0:
        return 1
    if x < 0.0:
        return -1
    return 0


def _as_equation(eq: EquationLike) -> ScalarEquation:
    return eq if isinstance(eq, ScalarEquation) else ScalarEquation(eq)


def _check_eps(eps: float) -> None:
    if not eps > 0.0:
        raise InvalidArgumentError(f"eps must be > 0, got {eps!r}")


def _check_bracket(f: ScalarEquation, a: float, b: float) -> tuple[float, float]:
    if not a < b:
        raise InvalidArgumentError(f"invalid interval [{a}, {b}]: require a < b")

    fa = f(a)
    fb = f(b)
    if not (math.isfinite(fa) and math.isfinite(fb)):
        raise InvalidArgumentError("f(a) or f(b) is not finite")
    if _sign(fa) == _sign(fb):
        raise InvalidArgumentError(
            "interval does not bracket a root (same sign at endpoints)"
        )
    return fa, fb


def _reset(trace: Optional[Trace]) -> None:
    if trace is not None:
        trace.clear()


def bisection(
    eq: EquationLike,
    a: float,
    b: float,
    eps: float,
    trace: Optional[BisectionTrace] = None,
    *,
    settings: SolverSettings = DEFAULT_SETTINGS,
) -> float:
    """
    Halve a sign-change bracket until the midpoint is good enough.

    Stops at the midpoint p when |f(p)| <= eps, the half-width is <= eps,
    or f(p) == 0. Each endpoint whose sign matches f(p) is moved to p.

    Args:
        eq: Equation f(x) = 0
        a: Left endpoint
        b: Right endpoint, a < b and sign f(a) != sign f(b)
        eps: Tolerance (> 0)
        trace: Optional per-iteration log

    Returns:
        Approximate root

    Raises:
        InvalidArgumentError: bad eps or interval
        NonConvergenceError: iteration cap reached
    """
    f = _as_equation(eq)
    _check_eps(eps)
    fa, fb = _check_bracket(f, a, b)
    _reset(trace)

    if abs(fa) < eps:
        return a
    if abs(fb) < eps:
        return b

    for it in range(settings.bisection_max_iter):
        p = a + (b - a) / 2.0
        fp = f(p)
        half_width = abs(b - a) / 2.0

        if trace is not None:
            trace.record(BisectionStep(it, a, b, p, fp, half_width))

        if abs(fp) <= eps or half_width <= eps:
            logger.debug("bisection: converged to %r after %d iterations", p, it + 1)
            return p

        sp = _sign(fp)
        if sp == 0:
            return p

        # Not an if/else: both endpoints are compared with sign f(p).
        if _sign(fa) == sp:
            a, fa = p, fp
        if _sign(fb) == sp:
            b, fb = p, fp

    raise NonConvergenceError("bisection did not converge within iteration limit")


def regula_falsi(
    eq: EquationLike,
    a: float,
    b: float,
    eps: float,
    trace: Optional[RegulaFalsiTrace] = None,
    *,
    settings: SolverSettings = DEFAULT_SETTINGS,
) -> float:
    """
    False position: intersect the chord through (a, f(a)), (b, f(b)) with y = 0.

    p = (a f(b) - b f(a)) / (f(b) - f(a)). Only the endpoint sharing the
    sign of f(p) is replaced, so the root stays bracketed. Stops when
    |f(p)| <= eps, successive p differ by <= eps, the bracket is <= 2 eps
    wide, or f(p) == 0.

    Raises:
        InvalidArgumentError: bad eps or interval, or f(b) - f(a) == 0
        NonConvergenceError: iteration cap reached
    """
    f = _as_equation(eq)
    _check_eps(eps)
    fa, fb = _check_bracket(f, a, b)
    _reset(trace)

    if fa == 0.0:
        return a
    if fb == 0.0:
        return b

    prev_p = None
    for it in range(settings.regula_falsi_max_iter):
        denom = fb - fa
        if denom == 0.0:
            raise InvalidArgumentError("regula falsi failed: f(b) - f(a) == 0")

        p = (a * fb - b * fa) / denom
        fp = f(p)

        if trace is not None:
            trace.record(RegulaFalsiStep(it, a, b, p, fp))

        if abs(fp) <= eps:
            logger.debug("regula_falsi: |f(p)| <= eps after %d iterations", it + 1)
            return p
        if prev_p is not None and abs(p - prev_p) <= eps:
            logger.debug("regula_falsi: step <= eps after %d iterations", it + 1)
            return p
        if abs(b - a) <= 2.0 * eps:
            logger.debug("regula_falsi: bracket <= 2 eps after %d iterations", it + 1)
            return p

        sp = _sign(fp)
        if sp == 0:
            return p

        if _sign(fa) == sp:
            a, fa = p, fp
        else:
            b, fb = p, fp

        prev_p = p

    raise NonConvergenceError("regula falsi did not converge within iteration limit")


def secant(
    eq: EquationLike,
    x0: float,
    x1: float,
    eps: float,
    trace: Optional[SecantTrace] = None,
    *,
    settings: SolverSettings = DEFAULT_SETTINGS,
) -> float:
    """
    Two-point open method, p = x1 - f(x1) (x1 - x0) / (f(x1) - f(x0)).

    No bracket is needed. Stops when |f(p)| <= eps or |p - x1| <= eps;
    otherwise the window slides to (x1, p).

    Raises:
        InvalidArgumentError: bad eps, non-finite seed values or f(p),
            or f(x1) == f(x0)
        NonConvergenceError: iteration cap reached
    """
    f = _as_equation(eq)
    _check_eps(eps)
    _reset(trace)

    f0 = f(x0)
    f1 = f(x1)
    if not (math.isfinite(f0) and math.isfinite(f1)):
        raise InvalidArgumentError("secant requires finite function values at initial points")
    if abs(f0) <= eps:
        return x0
    if abs(f1) <= eps:
        return x1

    for it in range(settings.secant_max_iter):
        denom = f1 - f0
        if denom == 0.0:
            raise InvalidArgumentError("secant failed: f(x1) - f(x0) == 0")

        p = x1 - f1 * (x1 - x0) / denom
        fp = f(p)

        if trace is not None:
            trace.record(SecantStep(it, x0, x1, p, fp))

        if not math.isfinite(fp):
            raise InvalidArgumentError("secant produced non-finite f(p)")
        if abs(fp) <= eps or abs(p - x1) <= eps:
            logger.debug("secant: converged to %r after %d iterations", p, it + 1)
            return p

        x0, f0 = x1, f1
        x1, f1 = p, fp

    raise NonConvergenceError("secant did not converge within iteration limit")


def newton(
    eq: EquationLike,
    derivative: Optional[ScalarFunction],
    x0: float,
    eps: float,
    trace: Optional[NewtonTrace] = None,
    *,
    settings: SolverSettings = DEFAULT_SETTINGS,
) -> float:
    """
    Tangent method, p = x - f(x) / f'(x).

    Stops when |f(p)| <= eps or |p - x| <= eps.

    Args:
        eq: Equation f(x) = 0
        derivative: f'(x); required
        x0: Starting point with finite f(x0)
        eps: Tolerance (> 0)
        trace: Optional per-iteration log

    Returns:
        Approximate root

    Raises:
        InvalidArgumentError: bad eps, missing derivative, non-finite
            f(x0), f'(x) or f(p)
        NonConvergenceError: f'(x) == 0 or iteration cap reached
    """
    f = _as_equation(eq)
    _check_eps(eps)
    if derivative is None or not callable(derivative):
        raise InvalidArgumentError("newton requires a valid derivative function")
    _reset(trace)

    x = x0
    fx = f(x)
    if not math.isfinite(fx):
        raise InvalidArgumentError("newton requires finite f(x0)")
    if abs(fx) <= eps:
        return x

    for it in range(settings.newton_max_iter):
        df = float(derivative(x))
        if not math.isfinite(df):
            raise InvalidArgumentError("newton requires finite f'(x)")
        if df == 0.0:
            raise NonConvergenceError(f"newton failed: derivative is zero at x = {x!r}")

        p = x - fx / df
        fp = f(p)

        if trace is not None:
            trace.record(NewtonStep(it, x, fx, df, p, fp))

        if not math.isfinite(fp):
            raise InvalidArgumentError("newton produced non-finite f(p)")
        if abs(fp) <= eps or abs(p - x) <= eps:
            logger.debug("newton: converged to %r after %d iterations", p, it + 1)
            return p

        x, fx = p, fp

    raise NonConvergenceError("newton did not converge within iteration limit")
