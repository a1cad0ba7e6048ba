"""Circuit proving knowledge of x such that y = x^3 + x + c.

x is private, c is a constant baked into the fixed column and y is the
single public input (instance row 0). x may be None or Value.unknown()
for the structural pass.
"""

from dataclasses import dataclass, field, replace

from constraints.system import ConstraintSystem
from primitives.field import FF, FieldLike, to_field
from primitives.value import Value
from witness.field_chip import FieldChip, FieldConfig
from witness.layouter import Layouter
from .base import Circuit


def expected_output(x: FieldLike, constant: FieldLike) -> FF:
    """x^3 + x + c in the field."""
    x = to_field(x)
    return x * x * x + x + to_field(constant)


@dataclass(frozen=True)
class PolynomialCircuit(Circuit):
    constant: FF = field(default_factory=lambda: to_field(0))
    x: Value = field(default_factory=Value.unknown)

    def __post_init__(self):
        object.__setattr__(self, 'constant', to_field(self.constant))
        if self.x is None:
            object.__setattr__(self, 'x', Value.unknown())
        elif not isinstance(self.x, Value):
            object.__setattr__(self, 'x', Value.known(self.x))

    @classmethod
    def with_witness(cls, x: FieldLike, constant: FieldLike) -> 'PolynomialCircuit':
        return cls(constant=constant, x=Value.known(x))

    def without_witnesses(self) -> 'PolynomialCircuit':
        # the constant is part of the circuit, not of the witness
        return replace(self, x=Value.unknown())

    @classmethod
    def configure(cls, cs: ConstraintSystem) -> FieldConfig:
        advice = (cs.advice_column(), cs.advice_column())
        instance = cs.instance_column()
        constant = cs.fixed_column()
        return FieldChip.configure(cs, advice, instance, constant)

    def synthesize(self, config: FieldConfig, layouter: Layouter) -> None:
        chip = FieldChip(config)

        x = chip.load_private(layouter.namespace("load x"), self.x)
        constant = chip.load_constant(layouter.namespace("load constant"), self.constant)

        x2 = chip.mul(layouter.namespace("x^2"), x, x)
        x3 = chip.mul(layouter.namespace("x^3"), x2, x)
        x3_plus_x = chip.add(layouter.namespace("x^3 + x"), x3, x)
        result = chip.add(layouter.namespace("x^3 + x + c"), x3_plus_x, constant)

        chip.expose_public(layouter.namespace("expose result"), result, 0)
