"""Protocol - laying out circuits and checking them."""

from protocol.data import CopyConstraint, RegionInfo
from protocol.failure import (
    CellNotAssigned,
    ConstraintNotSatisfied,
    ConstraintUnresolved,
    FailureLocation,
    InstanceNotSatisfied,
    PermutationNotSatisfied,
    VerifyFailure,
)
from protocol.keygen import CircuitShape, ShapeAssembly, keygen
from protocol.mock_prover import MockProver
from protocol.table import Table, configure_circuit

__all__ = [
    # Table
    "Table",
    "configure_circuit",
    "CopyConstraint",
    "RegionInfo",
    # Mock prover
    "MockProver",
    "VerifyFailure",
    "FailureLocation",
    "CellNotAssigned",
    "ConstraintNotSatisfied",
    "ConstraintUnresolved",
    "PermutationNotSatisfied",
    "InstanceNotSatisfied",
    # Structural pass
    "keygen",
    "CircuitShape",
    "ShapeAssembly",
]
