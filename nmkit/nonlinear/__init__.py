"""Scalar root-finding and Newton's method for systems."""

from nmkit.nonlinear.equations import ScalarEquation, NonlinearSystem
from nmkit.nonlinear.rootfinding import (
    bisection,
    regula_falsi,
    secant,
    newton,
    BisectionStep,
    RegulaFalsiStep,
    SecantStep,
    NewtonStep,
    BisectionTrace,
    RegulaFalsiTrace,
    SecantTrace,
    NewtonTrace,
)
from nmkit.nonlinear.newton_system import NewtonSolver, NewtonSystemStep, NewtonSystemTrace

__all__ = [
    "ScalarEquation",
    "NonlinearSystem",
    "bisection",
    "regula_falsi",
    "secant",
    "newton",
    "BisectionStep",
    "RegulaFalsiStep",
    "SecantStep",
    "NewtonStep",
    "BisectionTrace",
    "RegulaFalsiTrace",
    "SecantTrace",
    "NewtonTrace",
    "NewtonSolver",
    "NewtonSystemStep",
    "NewtonSystemTrace",
]
