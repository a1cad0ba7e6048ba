"""Primitives - field arithmetic, tri-state witness values and errors."""

from primitives.errors import (
    CircuitError,
    ColumnNotInPermutation,
    ConfigurationError,
    NotEnoughRowsAvailable,
    SynthesisError,
)
from primitives.field import (
    FF,
    PALLAS_GENERATOR,
    PALLAS_PRIME,
    to_field,
)
from primitives.value import UNKNOWN, Known, Unknown, Value

__all__ = [
    # Field
    "FF",
    "PALLAS_PRIME",
    "PALLAS_GENERATOR",
    "to_field",
    # Values
    "Value",
    "Known",
    "Unknown",
    "UNKNOWN",
    # Errors
    "CircuitError",
    "ConfigurationError",
    "SynthesisError",
    "NotEnoughRowsAvailable",
    "ColumnNotInPermutation",
]
