from __future__ import annotations

__all__ = [
    "MathUtilError",
    "EmptyValuesError",
    "InvalidIntegerError",
]


class MathUtilError(ValueError):
    """Base class for invalid-argument errors raised by mathutil.

    The `code` attribute gives callers a stable machine code to map on.
    """

    code: str = "invalid_argument"


class EmptyValuesError(MathUtilError):
    code = "missing_values"


class InvalidIntegerError(MathUtilError):
    code = "invalid_integer"
