"""Table and gate configuration.

ConstraintSystem is filled in once by Circuit.configure() and then frozen.
Everything it holds (columns, selectors, gates, equality set) is shared
read-only by every synthesis run of the circuit.
"""

from typing import Dict, FrozenSet, List, Set

from primitives.errors import ConfigurationError
from .base import (
    Column,
    ColumnKind,
    ConstraintModule,
    Gate,
    QueryRecorderContext,
    Selector,
)


class ConstraintSystem:
    """Columns, selectors and gates of a circuit.

    Attributes:
        num_advice_columns, num_fixed_columns, num_instance_columns: column counts
        num_selectors: number of allocated selectors
        gates: registered gates, in registration order
        equality: columns eligible for copy constraints
        constants: fixed columns used for constant loading
        exclusive_selectors: groups of selectors that may not share a row
    """

    def __init__(self):
        self.num_advice_columns = 0
        self.num_fixed_columns = 0
        self.num_instance_columns = 0
        self.num_selectors = 0
        self.gates: List[Gate] = []
        self.equality: List[Column] = []
        self.constants: List[Column] = []
        self.exclusive_selectors: List[FrozenSet[Selector]] = []
        self._frozen = False

    # --- Column allocation ---

    def advice_column(self) -> Column:
        self._check_mutable("advice_column")
        column = Column(ColumnKind.ADVICE, self.num_advice_columns)
        self.num_advice_columns += 1
        return column

    def fixed_column(self) -> Column:
        self._check_mutable("fixed_column")
        column = Column(ColumnKind.FIXED, self.num_fixed_columns)
        self.num_fixed_columns += 1
        return column

    def instance_column(self) -> Column:
        self._check_mutable("instance_column")
        column = Column(ColumnKind.INSTANCE, self.num_instance_columns)
        self.num_instance_columns += 1
        return column

    def selector(self) -> Selector:
        self._check_mutable("selector")
        selector = Selector(self.num_selectors)
        self.num_selectors += 1
        return selector

    # --- Equality / constants ---

    def enable_equality(self, column: Column) -> None:
        """Allow copy constraints on this column."""
        self._check_mutable("enable_equality")
        self._check_declared(column)
        if column not in self.equality:
            self.equality.append(column)

    def enable_constant(self, column: Column) -> None:
        """Use a fixed column for constant loading. Also enables equality."""
        self._check_mutable("enable_constant")
        self._check_declared(column)
        if column.kind is not ColumnKind.FIXED:
            raise ConfigurationError(f"constant column must be fixed, got {column}")
        if column not in self.constants:
            self.constants.append(column)
        self.enable_equality(column)

    def has_equality(self, column: Column) -> bool:
        return column in self.equality

    # --- Gates ---

    def create_gate(self, name: str, selector: Selector, module: ConstraintModule) -> Gate:
        """Register the identity selector * P == 0.

        The polynomial is traced once to collect the cells it queries; any
        query on an undeclared column raises ConfigurationError.
        """
        self._check_mutable("create_gate")
        if not self._selector_declared(selector):
            raise ConfigurationError(f"gate '{name}' uses undeclared {selector}")
        recorder = QueryRecorderContext(self.is_declared, name)
        module.constraint_polynomial(recorder)
        if not recorder.queries:
            raise ConfigurationError(f"gate '{name}' does not query any cells")
        gate = Gate(name=name, selector=selector, module=module,
                    queries=tuple(recorder.queries))
        self.gates.append(gate)
        return gate

    def mark_exclusive(self, *selectors: Selector) -> None:
        """Declare that at most one of these selectors may be enabled per row."""
        self._check_mutable("mark_exclusive")
        for selector in selectors:
            if not self._selector_declared(selector):
                raise ConfigurationError(f"cannot mark undeclared {selector} exclusive")
        if len(set(selectors)) < 2:
            raise ConfigurationError("an exclusive group needs at least two selectors")
        self.exclusive_selectors.append(frozenset(selectors))

    def conflicting_selectors(self, selector: Selector) -> Set[Selector]:
        """Selectors that may not be enabled on the same row as `selector`."""
        conflicts: Set[Selector] = set()
        for group in self.exclusive_selectors:
            if selector in group:
                conflicts |= group
        conflicts.discard(selector)
        return conflicts

    # --- Lifecycle ---

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # --- Table geometry ---

    def blinding_factors(self) -> int:
        """Rows at the end of the table reserved for blinding.

        At least 3, or the largest number of distinct rotations queried on
        one advice column across all gates, plus 2 for the permutation
        argument.
        """
        advice_queries = {
            query for gate in self.gates for query in gate.queries
            if query[0].kind is ColumnKind.ADVICE
        }
        per_column: Dict[Column, int] = {}
        for column, _ in advice_queries:
            per_column[column] = per_column.get(column, 0) + 1
        factors = max([3] + list(per_column.values()))
        return factors + 2

    def usable_rows(self, n: int) -> int:
        """Rows available to regions in a table of height n."""
        return n - (self.blinding_factors() + 1)

    def minimum_rows(self) -> int:
        """Smallest table height with at least one usable row."""
        return self.blinding_factors() + 3

    # --- Helpers ---

    def is_declared(self, column: Column) -> bool:
        counts = {
            ColumnKind.ADVICE: self.num_advice_columns,
            ColumnKind.FIXED: self.num_fixed_columns,
            ColumnKind.INSTANCE: self.num_instance_columns,
        }
        return 0 <= column.index < counts[column.kind]

    def _selector_declared(self, selector: Selector) -> bool:
        return isinstance(selector, Selector) and 0 <= selector.index < self.num_selectors

    def _check_declared(self, column: Column) -> None:
        if not isinstance(column, Column) or not self.is_declared(column):
            raise ConfigurationError(f"column {column} has not been declared")

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            raise ConfigurationError(
                f"{operation}() called after configuration was frozen"
            )
