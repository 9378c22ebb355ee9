"""
JSON reports for a front-end.

Each builder runs the relevant solvers on a demonstration problem and
returns a dict of plain Python values with a stable schema; ``dumps``
turns it into text.
"""

import json
from typing import Any, Optional

from nmkit.algebra.dense import GaussianEliminationTrace
from nmkit.core.matrix import Matrix
from nmkit.core.vector import Vector
from nmkit.linear.gauss import GaussianElimination
from nmkit.linear.iterative import GaussSeidelSolver, IterativeTrace, JacobiSolver
from nmkit.nonlinear.newton_system import NewtonSolver, NewtonSystemTrace
from nmkit.nonlinear.rootfinding import (
    BisectionTrace,
    NewtonTrace,
    RegulaFalsiTrace,
    SecantTrace,
    bisection,
    newton,
    regula_falsi,
    secant,
)
from nmkit.problems.linear import GaussProblem, IterativeProblem
from nmkit.problems.nonlinear import NonlinearProblem
from nmkit.problems.scalar import ScalarProblem


def vector_to_json(v: Vector) -> list[float]:
    return v.to_list()


def matrix_to_json(m: Matrix) -> list[list[float]]:
    return m.to_lists()


def _method_entry(name: str, x: float, fx: float, trace) -> dict[str, Any]:
    entry: dict[str, Any] = {"name": name, "x": x, "fx": fx}
    if trace is not None:
        entry["trace"] = trace.to_records()
    return entry


def rootfinding_report(
    problem: ScalarProblem,
    *,
    a: Optional[float] = None,
    b: Optional[float] = None,
    x0: Optional[float] = None,
    eps: Optional[float] = None,
    trace: bool = False,
) -> dict[str, Any]:
    """
    Run all four scalar methods on one equation.

    Bisection and regula falsi use [a, b]; the secant method is seeded
    with a and b; Newton starts at x0 (default: the midpoint of [a, b]).
    ``None`` arguments fall back to the problem's own values.
    """
    a = problem.a if a is None else a
    b = problem.b if b is None else b
    eps = problem.eps if eps is None else eps
    x0 = (a + b) / 2.0 if x0 is None else x0
    f = problem.equation

    traces = (
        (BisectionTrace(), RegulaFalsiTrace(), SecantTrace(), NewtonTrace())
        if trace else (None, None, None, None)
    )
    bis_t, rf_t, sec_t, newt_t = traces

    x_bis = bisection(f, a, b, eps, bis_t)
    x_rf = regula_falsi(f, a, b, eps, rf_t)
    x_sec = secant(f, a, b, eps, sec_t)
    x_new = newton(f, problem.derivative, x0, eps, newt_t)

    return {
        "kind": "rootfinding",
        "eq": problem.eq_id,
        "interval": problem.interval_id,
        "eps": eps,
        "statement": problem.statement,
        "a": a,
        "b": b,
        "traceEnabled": trace,
        "x0": x0,
        "methods": [
            _method_entry("bisection", x_bis, f(x_bis), bis_t),
            _method_entry("regulaFalsi", x_rf, f(x_rf), rf_t),
            _method_entry("secant", x_sec, f(x_sec), sec_t),
            _method_entry("newton", x_new, f(x_new), newt_t),
        ],
    }


def gauss_report(problem: GaussProblem, *, trace: bool = False) -> dict[str, Any]:
    """Solve a demonstration system with hand-rounded Gaussian elimination."""
    system = problem.system
    log = GaussianEliminationTrace() if trace else None
    x = GaussianElimination.solve(system, problem.significant_digits, log)

    report: dict[str, Any] = {
        "kind": "gauss",
        "system": problem.system_id,
        "significantDigits": problem.significant_digits,
        "A": matrix_to_json(system.matrix),
        "b": vector_to_json(system.rhs),
        "x": vector_to_json(x),
        "residual_inf": system.residual_inf(x),
        "traceEnabled": trace,
    }
    if log is not None:
        report["trace"] = log.to_dict()
    return report


def iterative_report(problem: IterativeProblem, *, trace: bool = False) -> dict[str, Any]:
    """Run Jacobi and Gauss-Seidel side by side from the zero vector."""
    system = problem.system
    x0 = problem.x0

    methods = []
    for solver in (JacobiSolver(), GaussSeidelSolver()):
        log = IterativeTrace() if trace else None
        x = solver.iterate(system, x0, problem.iterations, log)
        entry: dict[str, Any] = {
            "name": solver.name,
            "x": vector_to_json(x),
            "residual_inf": system.residual_inf(x),
        }
        if log is not None:
            entry["trace"] = log.to_records()
        methods.append(entry)

    return {
        "kind": "iterative",
        "system": problem.system_id,
        "iterations": problem.iterations,
        "A": matrix_to_json(system.matrix),
        "b": vector_to_json(system.rhs),
        "x0": vector_to_json(x0),
        "traceEnabled": trace,
        "methods": methods,
    }


def newton_systems_report(problem: NonlinearProblem, *, trace: bool = False) -> dict[str, Any]:
    """Solve a demonstration nonlinear system with Newton's method."""
    log = NewtonSystemTrace() if trace else None
    x0 = problem.x0
    x = NewtonSolver.solve(problem.system, x0, problem.eps, log)
    fx = problem.system.evaluate(x)

    report: dict[str, Any] = {
        "kind": "newton_systems",
        "system": problem.system_id,
        "eps": problem.eps,
        "statement": problem.statement,
        "x0": vector_to_json(x0),
        "x": vector_to_json(x),
        "fx": vector_to_json(fx),
        "residual_inf": fx.norm_inf(),
        "traceEnabled": trace,
    }
    if log is not None:
        report["trace"] = {"iterations": log.to_records()}
    return report


def dumps(report: dict[str, Any]) -> str:
    """Serialize a report, two-space indented."""
    return json.dumps(report, indent=2)
