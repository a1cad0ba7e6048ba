"""Constraint violations reported by MockProver.verify().

Failures are plain records: verification collects every one of them and
returns the list, it never raises.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from constraints.base import Column
from primitives.value import Value


@dataclass(frozen=True)
class FailureLocation:
    """Where in the table a failure happened."""
    row: int
    region_index: Optional[int] = None
    region_name: Optional[str] = None
    region_start: Optional[int] = None

    @property
    def offset(self) -> Optional[int]:
        """Row relative to the region start, None outside regions."""
        if self.region_start is None:
            return None
        return self.row - self.region_start

    def __str__(self) -> str:
        if self.region_name is None:
            return f"outside any region, at row {self.row}"
        return (f"in region {self.region_index} ('{self.region_name}') at offset "
                f"{self.offset} (row {self.row})")


# (query description, value) pairs shown in gate failures
CellValues = Tuple[Tuple[str, Value], ...]


def _format_values(cell_values: CellValues) -> str:
    return ", ".join(f"{name} = {value!r}" for name, value in cell_values)


@dataclass(frozen=True)
class VerifyFailure:
    """Base class for all verification failures."""

    @property
    def kind(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class CellNotAssigned(VerifyFailure):
    """A gate enabled at `location` reads a cell that was never assigned."""
    gate: str
    location: FailureLocation
    column: Column
    row: int

    def __str__(self) -> str:
        return (f"gate '{self.gate}' {self.location} queries unassigned "
                f"cell {self.column} at row {self.row}")


@dataclass(frozen=True)
class ConstraintNotSatisfied(VerifyFailure):
    """Gate polynomial evaluated to a nonzero value on an enabled row."""
    gate: str
    location: FailureLocation
    result: Value
    cell_values: CellValues

    def __str__(self) -> str:
        return (f"constraint '{self.gate}' is not satisfied {self.location}: "
                f"{_format_values(self.cell_values)} (evaluates to {self.result!r})")


@dataclass(frozen=True)
class ConstraintUnresolved(VerifyFailure):
    """Gate polynomial depends on an unknown value on an enabled row."""
    gate: str
    location: FailureLocation
    cell_values: CellValues

    def __str__(self) -> str:
        return (f"constraint '{self.gate}' cannot be resolved {self.location}: "
                f"{_format_values(self.cell_values)}")


@dataclass(frozen=True)
class PermutationNotSatisfied(VerifyFailure):
    """Two cells linked by a copy constraint hold different or unknown values."""
    column: Column
    location: FailureLocation
    other_column: Column
    other_row: int
    value: Optional[Value]
    other_value: Optional[Value]

    def __str__(self) -> str:
        return (f"equality constraint not satisfied: {self.column} {self.location} = "
                f"{_describe(self.value)} but {self.other_column} at row "
                f"{self.other_row} = {_describe(self.other_value)}")


@dataclass(frozen=True)
class InstanceNotSatisfied(VerifyFailure):
    """A cell bound to a public input does not equal it."""
    column: Column
    location: FailureLocation
    instance_column: Column
    instance_row: int
    expected: Value
    actual: Optional[Value]

    def __str__(self) -> str:
        return (f"public input {self.instance_column} row {self.instance_row} = "
                f"{self.expected!r} but bound cell {self.column} {self.location} = "
                f"{_describe(self.actual)}")


def _describe(value: Optional[Value]) -> str:
    return "unassigned" if value is None else repr(value)
