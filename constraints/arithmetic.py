"""Arithmetic gates over two advice columns.

Both gates read the same cells; the selector chooses which identity holds.
Rows 2-9 of the polynomial circuit:

    +---------+-----+-------+-------+
    | a_0     | a_1 | s_mul | s_add |
    +---------+-----+-------+-------+
    | x       | x   |   1   |   0   |
    | x^2     |     |   0   |   0   |
    | x^2     | x   |   1   |   0   |
    | x^3     |     |   0   |   0   |
    | x^3     | x   |   0   |   1   |
    | x^3 + x |     |   0   |   0   |
    | x^3 + x | c   |   0   |   1   |
    | y       |     |   0   |   0   |
    +---------+-----+-------+-------+

out is a_0 at the next row.
"""

from typing import Sequence

from primitives.value import Value
from .base import Column, ConstraintContext, ConstraintModule


class _BinaryConstraints(ConstraintModule):
    def __init__(self, advice: Sequence[Column]):
        if len(advice) != 2:
            raise ValueError(f"expected 2 advice columns, got {len(advice)}")
        self.advice = tuple(advice)


class MulConstraints(_BinaryConstraints):
    """a_0 * a_1 - out == 0"""

    def constraint_polynomial(self, ctx: ConstraintContext) -> Value:
        a_0 = ctx.col(self.advice[0])
        a_1 = ctx.col(self.advice[1])
        out = ctx.next_col(self.advice[0])
        return a_0 * a_1 - out


class AddConstraints(_BinaryConstraints):
    """a_0 + a_1 - out == 0"""

    def constraint_polynomial(self, ctx: ConstraintContext) -> Value:
        a_0 = ctx.col(self.advice[0])
        a_1 = ctx.col(self.advice[1])
        out = ctx.next_col(self.advice[0])
        return a_0 + a_1 - out
