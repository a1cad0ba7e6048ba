"""Mock prover: non-succinct, local constraint checking.

MockProver lays out a circuit with its real witness into a 2^k-row table
and checks every constraint directly:

1. Gates - on every usable row where a gate's selector is 1, the gate
   polynomial must evaluate to zero
2. Copy constraints - both cells must hold the same known value
3. Instance bindings - the bound cell must equal the supplied public input

Every violation is collected (not fail-fast). Nothing here produces a
transferable proof; this is the check run before handing the same table to
a real proving backend.

Example:
    prover = MockProver.run(4, PolynomialCircuit.with_witness(3, 5), [[35]])
    assert prover.verify() == []
"""

from typing import List, Sequence

import numpy as np

from circuits.base import Circuit
from constraints.base import Column, ColumnKind, RowConstraintContext
from constraints.system import ConstraintSystem
from primitives.errors import SynthesisError
from primitives.field import FF, FieldLike, to_field
from primitives.value import Value
from witness.layouter import SimpleFloorPlanner
from .data import CopyConstraint
from .failure import (
    CellNotAssigned,
    ConstraintNotSatisfied,
    ConstraintUnresolved,
    InstanceNotSatisfied,
    PermutationNotSatisfied,
    VerifyFailure,
)
from .table import Table, configure_circuit


class MockProver(Table):
    """Table with a concrete witness and public inputs.

    Attributes:
        instance: public inputs per instance column, zero-padded to n
    """

    def __init__(self, k: int, cs: ConstraintSystem, instance: Sequence[Sequence[FieldLike]]):
        super().__init__(k, cs)
        if len(instance) != cs.num_instance_columns:
            raise SynthesisError(
                f"expected {cs.num_instance_columns} instance columns, got {len(instance)}"
            )
        self.instance: List[FF] = []
        for index, values in enumerate(instance):
            if len(values) > self.usable_rows:
                raise SynthesisError(
                    f"instance column {index} has {len(values)} values but only "
                    f"{self.usable_rows} usable rows"
                )
            column = FF.Zeros(self.n)
            for row, v in enumerate(values):
                column[row] = to_field(v)
            self.instance.append(column)

    @classmethod
    def run(cls, k: int, circuit: Circuit,
            instance: Sequence[Sequence[FieldLike]]) -> 'MockProver':
        """Configure, lay out and assign `circuit` in a 2^k-row table.

        Args:
            k: log2 of the table height
            circuit: circuit instance carrying the witness
            instance: public inputs, one sequence per instance column

        Raises:
            ConfigurationError: invalid circuit configuration
            SynthesisError: layout does not fit (k too small, missing
                equality, ...) or malformed public inputs
        """
        cs, config = configure_circuit(k, circuit)
        prover = cls(k, cs, instance)
        SimpleFloorPlanner.synthesize(cs, prover, circuit, config)
        return prover

    def instance_value(self, column: Column, row: int) -> Value:
        return Value.known(self.instance[column.index][row])

    # --- Verification ---

    def verify(self) -> List[VerifyFailure]:
        """Check every constraint. Returns all failures; empty means satisfied."""
        failures: List[VerifyFailure] = []
        failures.extend(self._verify_gates())
        failures.extend(self._verify_copies())
        return failures

    def assert_satisfied(self) -> None:
        """Print every failure and raise AssertionError if there are any."""
        failures = self.verify()
        if failures:
            for failure in failures:
                print(f"ERROR: {failure}")
            raise AssertionError(f"circuit is not satisfied: {len(failures)} failure(s)")

    def _verify_gates(self) -> List[VerifyFailure]:
        failures: List[VerifyFailure] = []
        for gate in self.cs.gates:
            enabled = self.selectors[gate.selector.index, :self.usable_rows]
            for row in np.flatnonzero(enabled):
                row = int(row)
                location = self.locate(row)

                unassigned = []
                for column, rotation in gate.queries:
                    query_row = (row + rotation) % self.n
                    if column.kind is ColumnKind.ADVICE and self.cell(column, query_row) is None:
                        unassigned.append(CellNotAssigned(gate.name, location, column, query_row))
                if unassigned:
                    failures.extend(unassigned)
                    continue

                ctx = RowConstraintContext(self.value, row, self.n)
                result = gate.evaluate(ctx)
                cell_values = tuple(
                    (_describe_query(column, rotation), value)
                    for (column, rotation), value in ctx.cell_values.items()
                )
                if not result.is_known():
                    failures.append(ConstraintUnresolved(gate.name, location, cell_values))
                elif int(result.assign()) != 0:
                    failures.append(ConstraintNotSatisfied(gate.name, location, result, cell_values))
        return failures

    def _verify_copies(self) -> List[VerifyFailure]:
        failures: List[VerifyFailure] = []
        for copy in self.copies:
            left = self.cell(copy.left_column, copy.left_row)
            right = self.cell(copy.right_column, copy.right_row)
            if _equal(left, right):
                continue
            failures.append(self._copy_failure(copy, left, right))
        return failures

    def _copy_failure(self, copy: CopyConstraint, left, right) -> VerifyFailure:
        if copy.is_instance_binding:
            # normalise so the instance cell is on the right
            if copy.left_column.kind is ColumnKind.INSTANCE:
                column, row, actual = copy.right_column, copy.right_row, right
                instance_column, instance_row, expected = copy.left_column, copy.left_row, left
            else:
                column, row, actual = copy.left_column, copy.left_row, left
                instance_column, instance_row, expected = copy.right_column, copy.right_row, right
            return InstanceNotSatisfied(column, self.locate(row), instance_column,
                                        instance_row, expected, actual)
        return PermutationNotSatisfied(copy.left_column, self.locate(copy.left_row),
                                       copy.right_column, copy.right_row, left, right)


def _equal(left, right) -> bool:
    """Copy constraints hold only between assigned, known, equal values."""
    if left is None or right is None:
        return False
    if not (left.is_known() and right.is_known()):
        return False
    return left == right


def _describe_query(column: Column, rotation: int) -> str:
    if rotation == 0:
        return str(column)
    return f"{column}@{rotation:+d}"
