"""Tests for the witness-free structural pass."""

import numpy as np
import pytest

from circuits.polynomial import PolynomialCircuit
from primitives.errors import SynthesisError
from primitives.value import Value
from protocol.keygen import keygen
from protocol.mock_prover import MockProver

from .conftest import MIN_K


@pytest.fixture
def shape():
    return keygen(MIN_K, PolynomialCircuit.with_witness(3, 5))


def test_shape_geometry(shape) -> None:
    assert (shape.k, shape.n, shape.usable_rows, shape.rows_used) == (4, 16, 10, 10)
    assert shape.gates == ["mul", "add"]


def test_constant_in_fixed_column(shape) -> None:
    assert int(shape.fixed[0][0]) == 5
    assert all(int(v) == 0 for v in shape.fixed[0][1:])


def test_shape_matches_witnessed_layout(shape) -> None:
    prover = MockProver.run(MIN_K, PolynomialCircuit.with_witness(3, 5), [[35]])
    assert np.array_equal(shape.selectors, prover.selectors)
    assert shape.copies == prover.copies
    assert [r.name for r in shape.regions] == [r.name for r in prover.regions]


def test_shape_is_witness_independent(shape) -> None:
    other = keygen(MIN_K, PolynomialCircuit.with_witness(7, 5))
    assert np.array_equal(shape.selectors, other.selectors)
    assert shape.copies == other.copies


def test_advice_is_discarded() -> None:
    from protocol.keygen import ShapeAssembly
    from protocol.table import configure_circuit

    cs, config = configure_circuit(MIN_K, PolynomialCircuit())
    assembly = ShapeAssembly(MIN_K, cs)
    assembly.assign_advice("x", config.advice[0], 0, Value.known(3))
    assert assembly.advice[0][0] is Value.unknown()


def test_summary_lists_selectors_and_constants(shape) -> None:
    summary = shape.summary()
    assert "gates: mul, add" in summary
    assert "selector[0] enabled at rows: 2, 4" in summary
    assert "selector[1] enabled at rows: 6, 8" in summary
    assert "fixed[0] nonzero: [(0, 5)]" in summary
    assert "(1 instance bindings)" in summary


def test_keygen_with_none_x(shape) -> None:
    unwitnessed = keygen(MIN_K, PolynomialCircuit(constant=5, x=None))
    assert np.array_equal(unwitnessed.selectors, shape.selectors)
    assert unwitnessed.copies == shape.copies
    assert int(unwitnessed.fixed[0][0]) == 5


def test_keygen_k_too_small() -> None:
    with pytest.raises(SynthesisError):
        keygen(MIN_K - 1, PolynomialCircuit(constant=5))


def test_without_witnesses_keeps_constant() -> None:
    circuit = PolynomialCircuit.with_witness(3, 5).without_witnesses()
    assert not circuit.x.is_known()
    assert int(circuit.constant) == 5
