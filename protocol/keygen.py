"""Structural pass: fix the table shape before any witness is known.

keygen() synthesizes circuit.without_witnesses() into a ShapeAssembly, which
runs the same layout rules as the mock prover but keeps every advice cell
Unknown. The resulting CircuitShape (selectors, fixed columns, copy
constraints) is what a proving backend needs to build its keys.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from circuits.base import Circuit
from constraints.base import ColumnKind
from constraints.system import ConstraintSystem
from primitives.field import FF
from primitives.value import UNKNOWN, Value
from witness.layouter import SimpleFloorPlanner
from .data import CopyConstraint, RegionInfo
from .table import Table, configure_circuit


class ShapeAssembly(Table):
    """Table that records structure only; advice values are discarded."""

    def _store(self, kind: ColumnKind, value: Value) -> Value:
        if kind is ColumnKind.ADVICE:
            return UNKNOWN
        return value


@dataclass
class CircuitShape:
    """Witness-independent description of a laid-out circuit.

    Attributes:
        k: log2 of the table height
        n: table height
        usable_rows: rows available to regions
        rows_used: one past the last row any region touched
        selectors: bool matrix (num_selectors, n)
        fixed: one FF array of length n per fixed column (unassigned = 0)
        copies: copy constraints, including instance bindings
        regions: regions in layout order
        gates: gate names in registration order
        cs: the frozen constraint system
    """
    k: int
    n: int
    usable_rows: int
    rows_used: int
    selectors: np.ndarray
    fixed: List[FF]
    copies: List[CopyConstraint]
    regions: List[RegionInfo]
    gates: List[str]
    cs: ConstraintSystem

    def summary(self) -> str:
        lines = [
            f"k = {self.k} (n = {self.n}, usable rows = {self.usable_rows}, "
            f"rows used = {self.rows_used})",
            f"gates: {', '.join(self.gates)}",
            f"regions: {len(self.regions)}",
            f"copy constraints: {len(self.copies)} "
            f"({sum(c.is_instance_binding for c in self.copies)} instance bindings)",
        ]
        for index, row in enumerate(self.selectors):
            enabled = ", ".join(str(int(r)) for r in np.flatnonzero(row))
            lines.append(f"selector[{index}] enabled at rows: {enabled or '-'}")
        for index, column in enumerate(self.fixed):
            nonzero = [(row, int(v)) for row, v in enumerate(column) if int(v) != 0]
            lines.append(f"fixed[{index}] nonzero: {nonzero or '-'}")
        return "\n".join(lines)


def keygen(k: int, circuit: Circuit) -> CircuitShape:
    """Lay out `circuit` without witnesses and return its shape.

    Raises:
        ConfigurationError: invalid circuit configuration
        SynthesisError: layout does not fit in 2^k rows
    """
    circuit = circuit.without_witnesses()
    cs, config = configure_circuit(k, circuit)
    assembly = ShapeAssembly(k, cs)
    SimpleFloorPlanner.synthesize(cs, assembly, circuit, config)

    fixed = []
    for cells in assembly.fixed:
        column = FF.Zeros(assembly.n)
        for row, value in enumerate(cells):
            if value is not None and value.is_known():
                column[row] = value.assign()
        fixed.append(column)

    return CircuitShape(
        k=k,
        n=assembly.n,
        usable_rows=assembly.usable_rows,
        rows_used=assembly.rows_used,
        selectors=assembly.selectors.copy(),
        fixed=fixed,
        copies=list(assembly.copies),
        regions=list(assembly.regions),
        gates=[gate.name for gate in cs.gates],
        cs=cs,
    )
