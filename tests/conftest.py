"""
Pytest configuration and shared fixtures for the mock prover tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path so absolute imports work
# (tests/ is inside the project root, so parent is the root)
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

# Smallest k whose usable rows fit the 10-row polynomial layout
MIN_K = 4


@pytest.fixture
def frozen_cs():
    """Frozen ConstraintSystem configured for PolynomialCircuit."""
    from circuits.polynomial import PolynomialCircuit
    from constraints.system import ConstraintSystem

    cs = ConstraintSystem()
    config = PolynomialCircuit.configure(cs)
    cs.freeze()
    return cs, config
