"""Circuit table shared by the mock prover and keygen.

Table implements the Assignment interface: it stores what the layouter
writes and enforces the layout rules every backend must agree on (usable
rows, equality-enabled columns, single assignment, exclusive selectors).
"""

from typing import List, Optional, Tuple

import numpy as np

from circuits.base import Circuit
from constraints.base import Column, ColumnKind, Selector
from constraints.system import ConstraintSystem
from primitives.errors import (
    ColumnNotInPermutation,
    ConfigurationError,
    NotEnoughRowsAvailable,
    SynthesisError,
)
from primitives.value import UNKNOWN, Value
from witness.base import Assignment
from .data import CopyConstraint, RegionInfo
from .failure import FailureLocation


def configure_circuit(k: int, circuit: Circuit) -> Tuple[ConstraintSystem, object]:
    """Configure a fresh ConstraintSystem for `circuit` and freeze it.

    Raises:
        NotEnoughRowsAvailable: if 2^k is below the minimum table height
    """
    if not isinstance(k, int) or k < 0:
        raise SynthesisError(f"k must be a non-negative integer, got {k!r}")
    cs = ConstraintSystem()
    config = circuit.configure(cs)
    cs.freeze()
    n = 1 << k
    if n < cs.minimum_rows():
        raise NotEnoughRowsAvailable(k, cs.minimum_rows() - 1, max(cs.usable_rows(n), 0))
    return cs, config


class Table(Assignment):
    """Cell storage for a 2^k-row table.

    Attributes:
        k: log2 of the table height
        n: table height
        usable_rows: rows available to regions (n minus blinding rows)
        advice, fixed: per column, a list of n cells; None means unassigned
        selectors: bool matrix of shape (num_selectors, n)
        copies: recorded copy constraints, in creation order
        regions: regions in layout order
    """

    def __init__(self, k: int, cs: ConstraintSystem):
        if not cs.frozen:
            raise ConfigurationError("constraint system must be frozen before synthesis")
        self.k = k
        self.n = 1 << k
        self.cs = cs
        self.usable_rows = cs.usable_rows(self.n)
        self.advice: List[List[Optional[Value]]] = [
            [None] * self.n for _ in range(cs.num_advice_columns)
        ]
        self.fixed: List[List[Optional[Value]]] = [
            [None] * self.n for _ in range(cs.num_fixed_columns)
        ]
        self.selectors = np.zeros((cs.num_selectors, self.n), dtype=bool)
        self.copies: List[CopyConstraint] = []
        self.regions: List[RegionInfo] = []
        self._current_region: Optional[RegionInfo] = None

    # --- Assignment interface ---

    def enter_region(self, name: str) -> None:
        if self._current_region is not None:
            raise SynthesisError(
                f"region '{name}' entered while '{self._current_region.name}' is open"
            )
        self._current_region = RegionInfo(index=len(self.regions), name=name)

    def exit_region(self) -> None:
        if self._current_region is None:
            raise SynthesisError("exit_region() without an open region")
        self.regions.append(self._current_region)
        self._current_region = None

    def enable_selector(self, annotation: str, selector: Selector, row: int) -> None:
        self._check_row(row)
        if not 0 <= selector.index < self.cs.num_selectors:
            raise SynthesisError(f"{selector} is not part of this circuit")
        for other in sorted(self.cs.conflicting_selectors(selector), key=lambda s: s.index):
            if self.selectors[other.index, row]:
                raise SynthesisError(
                    f"cannot enable {selector} ('{annotation}') at row {row}: "
                    f"exclusive {other} is already enabled there"
                )
        self.selectors[selector.index, row] = True
        self._touch(row, None)

    def assign_advice(self, annotation: str, column: Column, row: int, value: Value) -> None:
        self._assign(self.advice, ColumnKind.ADVICE, annotation, column, row, value)

    def assign_fixed(self, annotation: str, column: Column, row: int, value: Value) -> None:
        self._assign(self.fixed, ColumnKind.FIXED, annotation, column, row, value)

    def copy(self, left_column: Column, left_row: int,
             right_column: Column, right_row: int) -> None:
        for column in (left_column, right_column):
            if not self.cs.has_equality(column):
                raise ColumnNotInPermutation(column)
        self._check_row(left_row)
        self._check_row(right_row)
        self.copies.append(CopyConstraint(left_column, left_row, right_column, right_row))

    # --- Cell access ---

    def cell(self, column: Column, row: int) -> Optional[Value]:
        """Stored cell content; None for unassigned advice/fixed cells."""
        if column.kind is ColumnKind.ADVICE:
            return self.advice[column.index][row]
        if column.kind is ColumnKind.FIXED:
            return self.fixed[column.index][row]
        return self.instance_value(column, row)

    def value(self, column: Column, row: int) -> Value:
        """Cell value as seen by gates. Unassigned fixed cells are zero."""
        content = self.cell(column, row)
        if content is None:
            return Value.known(0) if column.kind is ColumnKind.FIXED else UNKNOWN
        return content

    def instance_value(self, column: Column, row: int) -> Value:
        return UNKNOWN

    def locate(self, row: int) -> FailureLocation:
        for region in self.regions:
            if region.contains(row):
                return FailureLocation(row=row, region_index=region.index,
                                       region_name=region.name, region_start=region.start)
        return FailureLocation(row=row)

    @property
    def rows_used(self) -> int:
        """One past the last row touched by any region."""
        ends = [region.end for region in self.regions if region.end is not None]
        return max(ends, default=0)

    # --- Helpers ---

    def _assign(self, storage, kind: ColumnKind, annotation: str, column: Column,
                row: int, value: Value) -> None:
        if column.kind is not kind or not self.cs.is_declared(column):
            raise SynthesisError(f"cannot assign '{annotation}' to column {column}")
        if not isinstance(value, Value):
            raise TypeError(f"expected a Value for '{annotation}', got {type(value).__name__}")
        self._check_row(row)
        cells = storage[column.index]
        if cells[row] is not None:
            raise SynthesisError(
                f"cell {column} at row {row} is already assigned; "
                f"'{annotation}' must go to a new cell"
            )
        cells[row] = self._store(kind, value)
        self._touch(row, column)

    def _store(self, kind: ColumnKind, value: Value) -> Value:
        return value

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.usable_rows:
            raise NotEnoughRowsAvailable(self.k, row, self.usable_rows)

    def _touch(self, row: int, column: Optional[Column]) -> None:
        if self._current_region is None:
            return
        self._current_region.rows.add(row)
        if column is not None:
            self._current_region.columns.add(column)
