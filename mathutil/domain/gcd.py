from __future__ import annotations

from collections.abc import Iterable

from ..errors import EmptyValuesError
from ..logging_conf import get_logger
from .integers import as_int64

__all__ = [
    "gcd_pair",
    "gcd_sequence",
    "gcd",
]

logger = get_logger("mathutil.gcd")


def _reduce(a: int, b: int) -> int:
    """Euclidean reduction over already-validated operands."""
    a, b = abs(a), abs(b)
    # Descending order: a is the larger operand from here on.
    a, b = max(a, b), min(a, b)

    if b > 0 and a % b == 0:
        return b

    # One operand is zero: gcd(0, 0) == 0 and gcd(x, 0) == |x|.
    if b == 0 or a == 0:
        return max(a, b)

    # Modulo form of repeated subtraction of b from a.
    return _reduce(a % b, b)


def gcd_pair(a: int, b: int) -> int:
    """Return the greatest common divisor of two signed integers.

    The result is never negative and does not depend on argument order.
    `gcd_pair(0, 0)` is 0 and `gcd_pair(x, 0)` is `abs(x)`.

    Raises:
        InvalidIntegerError: if either operand is not a 64-bit int.
    """
    return _reduce(as_int64(a, name="a"), as_int64(b, name="b"))


def gcd_sequence(values: Iterable[int]) -> int:
    """Return the overall GCD of a non-empty sequence of integers.

    Left-folds `gcd_pair` with the first value as accumulator, combining it
    with every value including itself (a no-op), so a single value `x`
    yields `abs(x)`.

    Raises:
        EmptyValuesError: if `values` is empty.
        InvalidIntegerError: if any value is not a 64-bit int.
    """
    items = [as_int64(v, name=f"values[{i}]") for i, v in enumerate(values)]
    if not items:
        logger.warning("gcd.empty", extra={"event": "gcd_empty"})
        raise EmptyValuesError("At least one value is required to compute the GCD")

    acc = items[0]
    for value in items:
        acc = _reduce(acc, value)

    logger.debug("gcd.fold", extra={"event": "gcd_fold", "count": len(items), "result": acc})
    return acc


def gcd(*values: int) -> int:
    """Variadic GCD: `gcd(12, 8) == 4`, `gcd(8, 12, 16) == 4`.

    Raises `EmptyValuesError` when called with no arguments.
    """
    return gcd_sequence(values)
