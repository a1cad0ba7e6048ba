"""Witness assignment.

Layouters place regions into the circuit table; chips fill regions with
witness values, enable selectors and record copy constraints. The table
itself is owned by an Assignment backend (the mock prover or the keygen
assembly in protocol/).
"""

from .base import Assignment, Cell, Chip, NumericInstructions
from .field_chip import FieldChip, FieldConfig, Number
from .layouter import (
    AssignedCell,
    Layouter,
    NamespacedLayouter,
    Region,
    SimpleFloorPlanner,
    SingleChipLayouter,
)

__all__ = [
    'Assignment',
    'Cell',
    'Chip',
    'NumericInstructions',
    'AssignedCell',
    'Region',
    'Layouter',
    'SingleChipLayouter',
    'NamespacedLayouter',
    'SimpleFloorPlanner',
    'FieldChip',
    'FieldConfig',
    'Number',
]
