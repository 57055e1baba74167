from __future__ import annotations

from ..logging_conf import get_logger
from .integers import as_int64

__all__ = ["is_prime"]

logger = get_logger("mathutil.primes")


def is_prime(n: int) -> bool:
    """Return whether `n` is prime.

    Anything <= 1 is not prime. Otherwise `n` is trial-divided by every
    integer in [2, n); the first even division proves it composite.

    Raises:
        InvalidIntegerError: if `n` is not a 64-bit int.
    """
    n = as_int64(n, name="n")
    if n <= 1:
        return False

    for i in range(2, n):
        if n % i == 0:
            logger.debug("prime.check", extra={"event": "prime_check", "n": n, "divisor": i})
            return False

    logger.debug("prime.check", extra={"event": "prime_check", "n": n, "divisor": None})
    return True
