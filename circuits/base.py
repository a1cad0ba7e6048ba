"""Circuit interface."""

from abc import ABC, abstractmethod
from typing import Any

from constraints.system import ConstraintSystem
from witness.layouter import Layouter


class Circuit(ABC):
    """A circuit instance: configuration is per class, witness per instance."""

    @abstractmethod
    def without_witnesses(self) -> 'Circuit':
        """Same circuit with every private input replaced by Unknown."""
        pass

    @classmethod
    @abstractmethod
    def configure(cls, cs: ConstraintSystem) -> Any:
        """Declare columns and gates. Returns the config passed to synthesize()."""
        pass

    @abstractmethod
    def synthesize(self, config: Any, layouter: Layouter) -> None:
        pass
