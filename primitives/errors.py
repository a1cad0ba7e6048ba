"""Exceptions raised while configuring and synthesizing circuits.

Constraint violations found during mock verification are not exceptions:
they are collected as VerifyFailure records (protocol/failure.py) and
returned as a list.
"""


class CircuitError(Exception):
    """Base class for circuit construction errors."""


class ConfigurationError(CircuitError):
    """Invalid column/gate wiring, or mutation of a frozen ConstraintSystem.

    Raised once at configuration time. Nothing in this package catches it.
    """


class SynthesisError(CircuitError):
    """An assignment issued against an incompatible layout.

    Examples: row outside the usable area, copy on a column without equality
    enabled, a region committed twice, two exclusive selectors on one row.
    """


class NotEnoughRowsAvailable(SynthesisError):
    """The table height 2^k is too small for the requested row."""

    def __init__(self, k: int, row: int, usable_rows: int):
        self.k = k
        self.row = row
        self.usable_rows = usable_rows
        super().__init__(
            f"not enough rows available: row {row} is outside the {usable_rows} "
            f"usable rows of a 2^{k} table"
        )


class ColumnNotInPermutation(SynthesisError):
    """Copy constraint requested on a column without equality enabled."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"column {column} does not have equality enabled")
