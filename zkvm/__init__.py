"""Execution-trace proving path: guest program and prover contract."""

from .contract import Receipt, ReceiptVerificationError, TraceProver, check_program_id
from .guest import (
    GUEST_CONSTANT,
    MAX_INPUT,
    ComputationBoundViolation,
    polynomial_guest,
)

__all__ = [
    "Receipt",
    "ReceiptVerificationError",
    "TraceProver",
    "check_program_id",
    "ComputationBoundViolation",
    "polynomial_guest",
    "MAX_INPUT",
    "GUEST_CONSTANT",
]
