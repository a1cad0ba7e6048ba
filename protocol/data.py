"""Data structures shared by the mock prover and keygen.

Architecture Overview:
    Synthesis drives a Table (protocol/table.py) through the Assignment
    interface. The table records:

    1. Cell contents
       - advice / fixed: Value per cell, None while unassigned
       - instance: public inputs (mock prover) or Unknown (keygen)
       - selectors: numpy bool matrix, one row per selector

    2. CopyConstraint list
       - explicit (cell, cell) pairs, never shared references
       - instance bindings are copies whose right side is an instance cell

    3. RegionInfo list
       - name and rows of each region, used to locate failures
"""

from dataclasses import dataclass, field
from typing import Optional, Set

from constraints.base import Column, ColumnKind


@dataclass(frozen=True)
class CopyConstraint:
    """Equality between two table cells."""
    left_column: Column
    left_row: int
    right_column: Column
    right_row: int

    @property
    def is_instance_binding(self) -> bool:
        return ColumnKind.INSTANCE in (self.left_column.kind, self.right_column.kind)


@dataclass
class RegionInfo:
    """A region as seen by the table.

    Attributes:
        index: Region index in layout order
        name: Region name including namespace path
        rows: Absolute rows touched by the region
        columns: Columns assigned by the region
    """
    index: int
    name: str
    rows: Set[int] = field(default_factory=set)
    columns: Set[Column] = field(default_factory=set)

    @property
    def start(self) -> Optional[int]:
        return min(self.rows) if self.rows else None

    @property
    def end(self) -> Optional[int]:
        """One past the last row used."""
        return max(self.rows) + 1 if self.rows else None

    def contains(self, row: int) -> bool:
        return self.start is not None and self.start <= row < self.end
