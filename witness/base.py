"""Base classes for witness assignment.

Assignment is the backend a layouter writes into. Two implementations
exist: MockProver (keeps witness values, checks constraints) and
ShapeAssembly (keygen; keeps only the table structure). Chips and circuits
never talk to an Assignment directly, only through a Layouter.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from constraints.base import Column, Selector
from primitives.field import FieldLike
from primitives.value import Value

if TYPE_CHECKING:
    from .field_chip import Number
    from .layouter import Layouter


@dataclass(frozen=True)
class Cell:
    """Reference to a table cell. row is absolute."""
    region_index: int
    row: int
    column: Column


class Assignment(ABC):
    """Table backend driven by the layouter."""

    @abstractmethod
    def enter_region(self, name: str) -> None:
        pass

    @abstractmethod
    def exit_region(self) -> None:
        pass

    @abstractmethod
    def enable_selector(self, annotation: str, selector: Selector, row: int) -> None:
        pass

    @abstractmethod
    def assign_advice(self, annotation: str, column: Column, row: int, value: Value) -> None:
        pass

    @abstractmethod
    def assign_fixed(self, annotation: str, column: Column, row: int, value: Value) -> None:
        pass

    @abstractmethod
    def copy(self, left_column: Column, left_row: int,
             right_column: Column, right_row: int) -> None:
        """Record an equality constraint between two cells."""
        pass


class Chip(ABC):
    """A set of gates plus the instructions that assign rows for them."""

    @abstractmethod
    def config(self) -> Any:
        pass

    @abstractmethod
    def loaded(self) -> Any:
        """Data loaded into the circuit at synthesis start (lookup tables etc)."""
        pass


class NumericInstructions(ABC):
    """Field arithmetic instruction set."""

    @abstractmethod
    def load_private(self, layouter: 'Layouter', value: Value) -> 'Number':
        pass

    @abstractmethod
    def load_constant(self, layouter: 'Layouter', constant: FieldLike) -> 'Number':
        pass

    @abstractmethod
    def mul(self, layouter: 'Layouter', a: 'Number', b: 'Number') -> 'Number':
        pass

    @abstractmethod
    def add(self, layouter: 'Layouter', a: 'Number', b: 'Number') -> 'Number':
        pass

    @abstractmethod
    def expose_public(self, layouter: 'Layouter', num: 'Number', row: int) -> None:
        pass
