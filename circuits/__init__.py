"""Circuits built from the field chip."""

from .base import Circuit
from .polynomial import PolynomialCircuit, expected_output

__all__ = [
    "Circuit",
    "PolynomialCircuit",
    "expected_output",
]
