"""Region layout.

A Region is a named batch of row assignments. The layouter opens it at the
shared row cursor, hands it to the caller's assignment function and then
commits it exactly once, which records the region's start row and advances
the cursor past the rows it used.

Regions are placed one after another (single-chip layout). Constants
requested through assign_advice_from_constant() are collected while
regions run and written into the constant column at the end of synthesis,
starting at the first row no region used in that column.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Set, Tuple, TypeVar, Union

from constraints.base import Column, ColumnKind, Selector
from constraints.system import ConstraintSystem
from primitives.errors import SynthesisError
from primitives.field import FF, FieldLike, to_field
from primitives.value import Value
from .base import Assignment, Cell

T = TypeVar('T')


def _as_value(value: Union[Value, FieldLike]) -> Value:
    if isinstance(value, Value):
        return value
    return Value.known(value)


@dataclass(frozen=True)
class AssignedCell:
    """Immutable handle to an assigned cell and the value written to it."""
    cell: Cell
    value: Value

    def copy_advice(self, annotation: str, region: 'Region', column: Column,
                    offset: int) -> 'AssignedCell':
        """Assign this value into another cell and constrain the two equal."""
        copied = region.assign_advice(annotation, column, offset, self.value)
        region.constrain_equal(self.cell, copied.cell)
        return copied


class Region:
    """Scoped builder for one region's assignments.

    Offsets are relative to the region's start row.
    """

    def __init__(self, layouter: 'SingleChipLayouter', name: str, index: int, start: int):
        self.name = name
        self.index = index
        self.start = start
        self.columns: Set[Column] = set()
        self._layouter = layouter
        self._assignment = layouter.assignment
        self._rows = 0
        self._committed = False

    @property
    def rows(self) -> int:
        """Number of rows written so far (highest written offset + 1)."""
        return self._rows

    @property
    def committed(self) -> bool:
        return self._committed

    def _row(self, offset: int) -> int:
        if self._committed:
            raise SynthesisError(f"region '{self.name}' is already committed")
        if offset < 0:
            raise SynthesisError(f"negative offset {offset} in region '{self.name}'")
        return self.start + offset

    def _used(self, column: Union[Column, None], offset: int) -> None:
        self._rows = max(self._rows, offset + 1)
        if column is not None:
            self.columns.add(column)

    def enable_selector(self, annotation: str, selector: Selector, offset: int) -> None:
        row = self._row(offset)
        self._assignment.enable_selector(annotation, selector, row)
        self._used(None, offset)

    def assign_advice(self, annotation: str, column: Column, offset: int,
                      value: Union[Value, FieldLike]) -> AssignedCell:
        if column.kind is not ColumnKind.ADVICE:
            raise SynthesisError(f"assign_advice() on non-advice column {column}")
        value = _as_value(value)
        row = self._row(offset)
        self._assignment.assign_advice(annotation, column, row, value)
        self._used(column, offset)
        return AssignedCell(Cell(self.index, row, column), value)

    def assign_advice_from_constant(self, annotation: str, column: Column, offset: int,
                                    constant: FieldLike) -> AssignedCell:
        """Assign a constant and tie the cell to the constant column."""
        assigned = self.assign_advice(annotation, column, offset, Value.known(constant))
        self.constrain_constant(assigned.cell, constant)
        return assigned

    def assign_fixed(self, annotation: str, column: Column, offset: int,
                     value: Union[Value, FieldLike]) -> AssignedCell:
        if column.kind is not ColumnKind.FIXED:
            raise SynthesisError(f"assign_fixed() on non-fixed column {column}")
        value = _as_value(value)
        row = self._row(offset)
        self._assignment.assign_fixed(annotation, column, row, value)
        self._used(column, offset)
        return AssignedCell(Cell(self.index, row, column), value)

    def constrain_equal(self, left: Cell, right: Cell) -> None:
        if self._committed:
            raise SynthesisError(f"region '{self.name}' is already committed")
        self._assignment.copy(left.column, left.row, right.column, right.row)

    def constrain_constant(self, cell: Cell, constant: FieldLike) -> None:
        if self._committed:
            raise SynthesisError(f"region '{self.name}' is already committed")
        self._layouter.pending_constants.append((to_field(constant), cell))

    def commit(self) -> int:
        """Record the region's start row in the layouter. Returns the start row."""
        if self._committed:
            raise SynthesisError(f"region '{self.name}' committed twice")
        self._committed = True
        self._layouter._record_region(self)
        return self.start


class Layouter(ABC):
    """Entry point chips use to open regions and bind public inputs."""

    @abstractmethod
    def assign_region(self, name: str, assignment: Callable[[Region], T]) -> T:
        pass

    @abstractmethod
    def constrain_instance(self, cell: Cell, column: Column, row: int) -> None:
        pass

    @abstractmethod
    def namespace(self, name: str) -> 'Layouter':
        pass


class SingleChipLayouter(Layouter):
    """Places regions sequentially on one shared row cursor."""

    def __init__(self, cs: ConstraintSystem, assignment: Assignment):
        self.cs = cs
        self.assignment = assignment
        self.cursor = 0
        self.region_starts: List[int] = []
        self.region_names: List[str] = []
        self.pending_constants: List[Tuple[FF, Cell]] = []
        # first free row per column, for constant placement
        self.column_ends: Dict[Column, int] = {}
        self._open_region: Union[Region, None] = None

    def assign_region(self, name: str, assignment: Callable[[Region], T]) -> T:
        if self._open_region is not None:
            raise SynthesisError(
                f"cannot open region '{name}' inside region '{self._open_region.name}'"
            )
        region = Region(self, name, len(self.region_starts), self.cursor)
        self._open_region = region
        self.assignment.enter_region(name)
        try:
            result = assignment(region)
            region.commit()
        finally:
            self._open_region = None
            self.assignment.exit_region()
            if not region.committed:
                # cells written before the failure stay in the table
                self.cursor = max(self.cursor, region.start + region.rows)
        return result

    def _record_region(self, region: Region) -> None:
        self.region_starts.append(region.start)
        self.region_names.append(region.name)
        end = region.start + region.rows
        self.cursor = max(self.cursor, end)
        for column in region.columns:
            self.column_ends[column] = max(self.column_ends.get(column, 0), end)

    def constrain_instance(self, cell: Cell, column: Column, row: int) -> None:
        if column.kind is not ColumnKind.INSTANCE:
            raise SynthesisError(f"constrain_instance() on non-instance column {column}")
        self.assignment.copy(cell.column, cell.row, column, row)

    def namespace(self, name: str) -> 'Layouter':
        return NamespacedLayouter(self, (name,))

    def assign_constants(self) -> None:
        """Write pending constants into the constant column and bind them."""
        if not self.pending_constants:
            return
        if not self.cs.constants:
            raise SynthesisError(
                "constants were requested but no constant column is enabled"
            )
        column = self.cs.constants[0]
        region = Region(self, "constants", len(self.region_starts),
                        self.column_ends.get(column, 0))
        self.assignment.enter_region(region.name)
        for offset, (constant, cell) in enumerate(self.pending_constants):
            fixed = region.assign_fixed("constant", column, offset, Value.known(constant))
            region.constrain_equal(fixed.cell, cell)
        region.commit()
        self.assignment.exit_region()
        self.pending_constants = []


class NamespacedLayouter(Layouter):
    """Layouter view that prefixes region names with a namespace path."""

    def __init__(self, root: SingleChipLayouter, path: Tuple[str, ...]):
        self._root = root
        self._path = path

    def assign_region(self, name: str, assignment: Callable[[Region], T]) -> T:
        return self._root.assign_region(" / ".join(self._path + (name,)), assignment)

    def constrain_instance(self, cell: Cell, column: Column, row: int) -> None:
        self._root.constrain_instance(cell, column, row)

    def namespace(self, name: str) -> 'Layouter':
        return NamespacedLayouter(self._root, self._path + (name,))


class SimpleFloorPlanner:
    """Runs a circuit's synthesize() against an Assignment backend."""

    @staticmethod
    def synthesize(cs: ConstraintSystem, assignment: Assignment, circuit, config) -> SingleChipLayouter:
        layouter = SingleChipLayouter(cs, assignment)
        circuit.synthesize(config, layouter)
        layouter.assign_constants()
        return layouter
