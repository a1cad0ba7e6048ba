"""External contract of the execution-trace prover.

The trace prover runs the guest program (zkvm/guest.py), proves the whole
execution and publishes the outputs in a journal. Only the interface lives
here; proving is done by an external zkVM.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Receipt:
    """Proof of one guest execution.

    Attributes:
        program_id: image id of the guest program that was executed
        journal: public outputs committed by the guest, in order
        seal: opaque proof bytes produced by the backend
    """
    program_id: str
    journal: Tuple[int, ...] = ()
    seal: bytes = field(default=b"", repr=False)

    def decode(self) -> int:
        """The single u64 output committed by the polynomial guest."""
        if len(self.journal) != 1:
            raise ValueError(f"expected exactly one journal entry, got {len(self.journal)}")
        return self.journal[0]


class ReceiptVerificationError(Exception):
    """A receipt does not verify against the expected program."""


class TraceProver(ABC):
    """Prove and verify guest executions."""

    @abstractmethod
    def prove(self, x: int) -> Tuple[Receipt, int]:
        """Run the guest on x and prove it.

        Returns:
            (receipt, y) where y is the decoded journal output

        Raises:
            ComputationBoundViolation: the guest refused the input
        """
        pass

    @abstractmethod
    def verify(self, receipt: Receipt, program_id: str) -> None:
        """Raise ReceiptVerificationError unless `receipt` proves `program_id`."""
        pass


def check_program_id(receipt: Receipt, program_id: str) -> None:
    """Shared first step of every TraceProver.verify()."""
    if receipt.program_id != program_id:
        raise ReceiptVerificationError(
            f"receipt was produced by program {receipt.program_id}, expected {program_id}"
        )
