"""Rounding and the shared pivoted elimination routine."""

from nmkit.algebra.rounding import round_to_significant_digits
from nmkit.algebra.protocols import RoundingPolicy, ExactArithmetic, SignificantDigits, EXACT
from nmkit.algebra.dense import (
    pivoted_solve,
    GaussianEliminationTrace,
    ForwardStep,
    OperationStep,
    Phase,
)

__all__ = [
    "round_to_significant_digits",
    "RoundingPolicy",
    "ExactArithmetic",
    "SignificantDigits",
    "EXACT",
    "pivoted_solve",
    "GaussianEliminationTrace",
    "ForwardStep",
    "OperationStep",
    "Phase",
]
