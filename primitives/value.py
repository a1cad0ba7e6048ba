"""Witness values that may not be known yet.

A Value is either Known(v) or Unknown. Unknown shows up during the
structural pass (keygen, or a circuit built without witnesses), where the
table shape must be fixed before the prover knows any private inputs.

Arithmetic combinators absorb Unknown:

    >>> Value.known(3) + Value.known(4)
    Known(7)
    >>> Value.known(3) * Value.unknown()
    Unknown
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Union

import numpy as np

from primitives.errors import SynthesisError
from primitives.field import FF, FieldLike, to_field


class Value(ABC):
    """Known(v) | Unknown.

    Known usually wraps a single FF element; zip() produces a Known tuple
    that is meant to be consumed by map().
    """

    __slots__ = ()

    @staticmethod
    def known(value: FieldLike) -> 'Known':
        return Known(to_field(value))

    @staticmethod
    def unknown() -> 'Unknown':
        return UNKNOWN

    @abstractmethod
    def is_known(self) -> bool:
        pass

    @abstractmethod
    def map(self, fn: Callable[[Any], Any]) -> 'Value':
        pass

    @abstractmethod
    def assign(self) -> Any:
        """Return the wrapped value, or raise SynthesisError if unknown."""
        pass

    def zip(self, other: 'Value') -> 'Value':
        """Known((a, b)) if both sides are known, otherwise Unknown."""
        other = _lift(other)
        if self.is_known() and other.is_known():
            return Known((self.inner, other.inner))
        return UNKNOWN

    def _combine(self, other, op) -> 'Value':
        return self.zip(other).map(lambda pair: op(*pair))

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return _lift(other)._combine(self, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return _lift(other)._combine(self, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return _lift(other)._combine(self, lambda a, b: a * b)

    def __neg__(self):
        return self.map(lambda a: -a)


class Known(Value):
    __slots__ = ('inner',)

    def __init__(self, inner):
        self.inner = _normalize(inner)

    def is_known(self) -> bool:
        return True

    def map(self, fn):
        return Known(fn(self.inner))

    def assign(self):
        return self.inner

    def __eq__(self, other):
        if isinstance(other, Known):
            return _key(self.inner) == _key(other.inner)
        return NotImplemented

    def __hash__(self):
        return hash(('Known', _key(self.inner)))

    def __repr__(self):
        return f"Known({_key(self.inner)})"


class Unknown(Value):
    __slots__ = ()

    def is_known(self) -> bool:
        return False

    def map(self, fn):
        return self

    def assign(self):
        raise SynthesisError("value is unknown; a concrete witness is required here")

    def __eq__(self, other):
        if isinstance(other, Unknown):
            return True
        return NotImplemented

    def __hash__(self):
        return hash('Unknown')

    def __repr__(self):
        return "Unknown"


UNKNOWN = Unknown()


def _normalize(inner):
    if isinstance(inner, (int, np.integer)) and not isinstance(inner, bool):
        return to_field(inner)
    return inner


def _key(inner):
    # galois scalars are 0-d arrays and not hashable
    if isinstance(inner, FF):
        return int(inner)
    if isinstance(inner, tuple):
        return tuple(_key(v) for v in inner)
    return inner


def _lift(x: Union[Value, FieldLike]) -> Value:
    if isinstance(x, Value):
        return x
    return Known(to_field(x))
