"""Small integer utilities: greatest common divisor and primality.

The public surface is a set of free functions; there is nothing to
instantiate.
"""
from importlib.metadata import PackageNotFoundError, version

from .domain.gcd import gcd, gcd_pair, gcd_sequence
from .domain.primes import is_prime
from .errors import EmptyValuesError, InvalidIntegerError, MathUtilError
from .logging_conf import get_logger, setup_logging

try:
    __version__ = version("mathutil")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "gcd",
    "gcd_pair",
    "gcd_sequence",
    "is_prime",
    "MathUtilError",
    "EmptyValuesError",
    "InvalidIntegerError",
    "setup_logging",
    "get_logger",
]
