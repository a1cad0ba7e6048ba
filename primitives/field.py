"""Pallas base field GF(p).

Uses galois library for all field arithmetic. FF is the field type used for
every cell, constant and public input in the circuit table.

galois.GF() normally searches for a primitive element, which requires
factoring p - 1. The multiplicative generator of the Pallas base field is
known (5), so it is passed in directly and verification is skipped.
"""

from typing import Union

import galois
import numpy as np

# --- Field Construction ---

PALLAS_PRIME = 0x40000000000000000000000000000000224698fc094cf91b992d30ed00000001

PALLAS_GENERATOR = 5

FF = galois.GF(PALLAS_PRIME, primitive_element=PALLAS_GENERATOR, verify=False)
"""Base field GF(p) - Pallas base field (the scalar field of Vesta)."""

FieldLike = Union[int, FF]


# --- Conversion ---

def to_field(x: FieldLike) -> FF:
    """Coerce an int (any sign) or FF scalar into FF.

    Negative ints are reduced mod p, so to_field(-1) == FF(p - 1).
    """
    if isinstance(x, FF):
        return x
    if isinstance(x, bool) or not isinstance(x, (int, np.integer)):
        raise TypeError(f"Cannot convert {type(x).__name__} to a field element")
    return FF(int(x) % PALLAS_PRIME)
