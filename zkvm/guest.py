"""Guest program proved by the execution-trace path.

The guest reads x, refuses inputs above MAX_INPUT, and commits
y = x^3 + x + 5 computed with checked unsigned 64-bit arithmetic.
"""

U64_MAX = (1 << 64) - 1

MAX_INPUT = 100

GUEST_CONSTANT = 5


class ComputationBoundViolation(Exception):
    """The guest refused to run on an out-of-range input.

    Distinct from a constraint violation: no trace is produced at all.
    """

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"x is too large: {x} > {MAX_INPUT}")


def _checked(value: int) -> int:
    if not 0 <= value <= U64_MAX:
        raise OverflowError(f"u64 overflow: {value}")
    return value


def polynomial_guest(x: int) -> int:
    """Compute x^3 + x + 5 the way the guest does.

    Raises:
        ComputationBoundViolation: x > 100
        OverflowError: an intermediate leaves the u64 range
    """
    _checked(x)
    if x > MAX_INPUT:
        raise ComputationBoundViolation(x)
    x2 = _checked(x * x)
    x3 = _checked(x2 * x)
    return _checked(_checked(x3 + x) + GUEST_CONSTANT)
