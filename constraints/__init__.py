"""Constraint configuration and gate evaluation.

This package declares the circuit table (advice, fixed and instance columns,
selectors) and the gates enforced over it. Each gate is a ConstraintModule
whose polynomial is written in plain Python against a ConstraintContext, so
the same code is traced at registration and evaluated row by row during
mock verification.
"""

from .arithmetic import AddConstraints, MulConstraints
from .base import (
    Column,
    ColumnKind,
    ConstraintContext,
    ConstraintModule,
    Gate,
    QueryRecorderContext,
    RowConstraintContext,
    Selector,
)
from .system import ConstraintSystem

__all__ = [
    "Column",
    "ColumnKind",
    "Selector",
    "Gate",
    "ConstraintContext",
    "QueryRecorderContext",
    "RowConstraintContext",
    "ConstraintModule",
    "MulConstraints",
    "AddConstraints",
    "ConstraintSystem",
]
