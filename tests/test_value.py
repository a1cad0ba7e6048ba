"""Unit tests for the Known | Unknown value type and field helpers."""

import pytest

from primitives.errors import SynthesisError
from primitives.field import FF, PALLAS_PRIME, to_field
from primitives.value import UNKNOWN, Known, Unknown, Value


class TestField:
    """Tests for field coercion."""

    def test_negative_int_reduces_mod_p(self) -> None:
        assert int(to_field(-1)) == PALLAS_PRIME - 1

    def test_field_element_passes_through(self) -> None:
        x = FF(42)
        assert to_field(x) is x

    def test_rejects_non_integers(self) -> None:
        with pytest.raises(TypeError):
            to_field(1.5)
        with pytest.raises(TypeError):
            to_field(True)

    def test_wraps_around_modulus(self) -> None:
        assert int(to_field(PALLAS_PRIME - 1) + to_field(2)) == 1


class TestKnownArithmetic:
    """Arithmetic between known values."""

    def test_add_mul_sub(self) -> None:
        a = Value.known(3)
        b = Value.known(4)
        assert a + b == Value.known(7)
        assert a * b == Value.known(12)
        assert a - b == Value.known(-1)
        assert -a == Value.known(PALLAS_PRIME - 3)

    def test_mixed_with_plain_ints(self) -> None:
        a = Value.known(3)
        assert a + 1 == Value.known(4)
        assert 1 + a == Value.known(4)
        assert 10 - a == Value.known(7)
        assert 2 * a == Value.known(6)

    def test_assign_returns_field_element(self) -> None:
        assert int(Value.known(35).assign()) == 35

    def test_map_and_zip(self) -> None:
        a = Value.known(5)
        assert a.map(lambda v: v * v) == Value.known(25)
        assert a.zip(Value.known(2)).map(lambda pair: pair[0] - pair[1]) == Value.known(3)

    def test_repr(self) -> None:
        assert repr(Value.known(7)) == "Known(7)"
        assert repr(Value.unknown()) == "Unknown"


class TestUnknownAbsorbs:
    """Unknown propagates through every combinator."""

    @pytest.mark.parametrize("op", [
        lambda a, b: a + b,
        lambda a, b: a - b,
        lambda a, b: a * b,
        lambda a, b: b + a,
        lambda a, b: b * a,
    ])
    def test_binary_ops(self, op) -> None:
        assert isinstance(op(Value.known(3), Value.unknown()), Unknown)
        assert isinstance(op(Value.unknown(), Value.known(3)), Unknown)

    def test_unknown_with_plain_int(self) -> None:
        assert (UNKNOWN + 1) is UNKNOWN
        assert (0 * UNKNOWN) is UNKNOWN

    def test_negation_and_map(self) -> None:
        assert (-UNKNOWN) is UNKNOWN
        assert UNKNOWN.map(lambda v: v + 1) is UNKNOWN
        assert UNKNOWN.zip(Value.known(1)) is UNKNOWN

    def test_assign_raises(self) -> None:
        with pytest.raises(SynthesisError):
            Value.unknown().assign()

    def test_unknown_never_equals_known(self) -> None:
        assert Value.unknown() != Value.known(0)
        assert Value.known(0) != Value.unknown()
        assert Value.unknown() == Value.unknown()


def test_known_values_are_hashable() -> None:
    assert len({Value.known(1), Value.known(1), Value.known(2)}) == 2
    assert isinstance(Value.known(1), Known)
