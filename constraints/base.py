"""Base classes for gate evaluation.

ConstraintContext provides a uniform interface for querying table cells
relative to the row a gate is evaluated at. The same gate code runs in two
contexts:

- QueryRecorderContext, once at registration: records which (column,
  rotation) pairs the gate reads and rejects undeclared columns;
- RowConstraintContext, at every row during mock verification: returns the
  Value stored in the laid-out table.

Example:
    class MulConstraints(ConstraintModule):
        def constraint_polynomial(self, ctx):
            return ctx.col(a0) * ctx.col(a1) - ctx.next_col(a0)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple

from primitives.errors import ConfigurationError
from primitives.value import UNKNOWN, Value


class ColumnKind(Enum):
    ADVICE = "advice"
    FIXED = "fixed"
    INSTANCE = "instance"


@dataclass(frozen=True)
class Column:
    """A table column. Identity is (kind, index)."""
    kind: ColumnKind
    index: int

    def __str__(self) -> str:
        return f"{self.kind.value}[{self.index}]"


@dataclass(frozen=True)
class Selector:
    """Boolean column toggling a gate per row."""
    index: int

    def __str__(self) -> str:
        return f"selector[{self.index}]"


# (column, rotation) pair read by a gate
Query = Tuple[Column, int]


class ConstraintContext(ABC):
    """Uniform cell access for gate polynomials."""

    @abstractmethod
    def query(self, column: Column, rotation: int = 0) -> Value:
        """Get column value at current row + rotation."""
        pass

    def col(self, column: Column) -> Value:
        """Get column at current row."""
        return self.query(column, 0)

    def next_col(self, column: Column) -> Value:
        """Get column at next row (offset +1)."""
        return self.query(column, 1)

    def prev_col(self, column: Column) -> Value:
        """Get column at previous row (offset -1)."""
        return self.query(column, -1)


class QueryRecorderContext(ConstraintContext):
    """Registration-time context.

    Records every query and returns Unknown, so the polynomial can be
    traced before any witness exists.
    """

    def __init__(self, is_declared: Callable[[Column], bool], gate_name: str):
        self._is_declared = is_declared
        self._gate_name = gate_name
        self.queries: List[Query] = []

    def query(self, column: Column, rotation: int = 0) -> Value:
        if not isinstance(column, Column) or not self._is_declared(column):
            raise ConfigurationError(
                f"gate '{self._gate_name}' queries undeclared column {column}"
            )
        key = (column, rotation)
        if key not in self.queries:
            self.queries.append(key)
        return UNKNOWN


class RowConstraintContext(ConstraintContext):
    """Verification-time context bound to a single row.

    Rotations wrap around the table height n.
    """

    def __init__(self, lookup: Callable[[Column, int], Value], row: int, n: int):
        self._lookup = lookup
        self._row = row
        self._n = n
        self.cell_values: Dict[Query, Value] = {}

    def query(self, column: Column, rotation: int = 0) -> Value:
        value = self._lookup(column, (self._row + rotation) % self._n)
        self.cell_values[(column, rotation)] = value
        return value


class ConstraintModule(ABC):
    """A single gate polynomial P; the gate enforces selector * P == 0."""

    @abstractmethod
    def constraint_polynomial(self, ctx: ConstraintContext) -> Value:
        """Evaluate P at the context's row.

        Returns:
            Known(0) when the identity holds, another Known value when it is
            violated, Unknown when any queried cell is unknown.
        """
        pass


@dataclass(frozen=True)
class Gate:
    """Named polynomial identity, active on rows where its selector is 1."""
    name: str
    selector: Selector
    module: ConstraintModule
    queries: Tuple[Query, ...]

    def evaluate(self, ctx: ConstraintContext) -> Value:
        return self.module.constraint_polynomial(ctx)
