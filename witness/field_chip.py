"""Field arithmetic chip.

FieldChip is the only code that writes witness values: every cell of the
circuit is assigned here, every selector is enabled here and every copy
constraint originates here.

Layout of one mul/add region (offsets relative to the region):

    offset | a_0     | a_1 | s_mul / s_add
    -------+---------+-----+--------------
       0   | a       | b   | 1
       1   | a op b  |     | 0
"""

from dataclasses import dataclass
from typing import Sequence

from constraints.arithmetic import AddConstraints, MulConstraints
from constraints.base import Column, Selector
from constraints.system import ConstraintSystem
from primitives.field import FieldLike
from primitives.value import Value
from .base import Chip, NumericInstructions
from .layouter import AssignedCell, Layouter, Region


@dataclass(frozen=True)
class FieldConfig:
    """Columns and selectors used by FieldChip."""
    advice: tuple  # (Column, Column)
    instance: Column
    constant: Column
    s_mul: Selector
    s_add: Selector


@dataclass(frozen=True)
class Number:
    """A field element living in an advice cell."""
    cell: AssignedCell

    @property
    def value(self) -> Value:
        return self.cell.value


class FieldChip(Chip, NumericInstructions):

    def __init__(self, config: FieldConfig):
        self._config = config

    def config(self) -> FieldConfig:
        return self._config

    def loaded(self) -> None:
        return None

    @staticmethod
    def configure(cs: ConstraintSystem, advice: Sequence[Column], instance: Column,
                  constant: Column) -> FieldConfig:
        """Enable equality on the chip's columns and register its gates."""
        advice = tuple(advice)
        cs.enable_constant(constant)
        cs.enable_equality(instance)
        for column in advice:
            cs.enable_equality(column)

        s_mul = cs.selector()
        s_add = cs.selector()
        cs.mark_exclusive(s_mul, s_add)

        # if s_mul = 0, any value is allowed in a_0, a_1, and out.
        # if s_mul != 0, this constrains a_0 * a_1 = out.
        cs.create_gate("mul", s_mul, MulConstraints(advice))
        # if s_add != 0, this constrains a_0 + a_1 = out.
        cs.create_gate("add", s_add, AddConstraints(advice))

        return FieldConfig(advice=advice, instance=instance, constant=constant,
                           s_mul=s_mul, s_add=s_add)

    # --- Instructions ---

    def load_private(self, layouter: Layouter, value: Value) -> Number:
        config = self._config

        def assign(region: Region) -> Number:
            return Number(region.assign_advice("private input", config.advice[0], 0, value))

        return layouter.assign_region("load private", assign)

    def load_constant(self, layouter: Layouter, constant: FieldLike) -> Number:
        config = self._config

        def assign(region: Region) -> Number:
            return Number(region.assign_advice_from_constant(
                "constant value", config.advice[0], 0, constant))

        return layouter.assign_region("load constant", assign)

    def mul(self, layouter: Layouter, a: Number, b: Number) -> Number:
        return self._binary(layouter, "mul", self._config.s_mul, a, b,
                            lambda x, y: x * y)

    def add(self, layouter: Layouter, a: Number, b: Number) -> Number:
        return self._binary(layouter, "add", self._config.s_add, a, b,
                            lambda x, y: x + y)

    def expose_public(self, layouter: Layouter, num: Number, row: int) -> None:
        layouter.constrain_instance(num.cell.cell, self._config.instance, row)

    def _binary(self, layouter: Layouter, name: str, selector: Selector,
                a: Number, b: Number, op) -> Number:
        config = self._config

        def assign(region: Region) -> Number:
            region.enable_selector(name, selector, 0)
            lhs = a.cell.copy_advice("lhs", region, config.advice[0], 0)
            rhs = b.cell.copy_advice("rhs", region, config.advice[1], 0)
            # Unknown operands give an Unknown result
            value = op(lhs.value, rhs.value)
            return Number(region.assign_advice(f"lhs {name} rhs", config.advice[0], 1, value))

        return layouter.assign_region(name, assign)
