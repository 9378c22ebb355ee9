"""Serialization of solver results and traces."""

from nmkit.io.json_export import (
    vector_to_json,
    matrix_to_json,
    rootfinding_report,
    gauss_report,
    iterative_report,
    newton_systems_report,
    dumps,
)

__all__ = [
    "vector_to_json",
    "matrix_to_json",
    "rootfinding_report",
    "gauss_report",
    "iterative_report",
    "newton_systems_report",
    "dumps",
]
