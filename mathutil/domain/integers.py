from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, TypeAdapter, ValidationError

from ..errors import InvalidIntegerError
from ..logging_conf import get_logger

__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "Int64",
    "as_int64",
]

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# Strict: bools, floats and numeric strings are rejected instead of coerced.
Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]

_INT64_ADAPTER: TypeAdapter[int] = TypeAdapter(Int64)

logger = get_logger("mathutil.integers")


def as_int64(value: Any, *, name: str = "value") -> int:
    """Validate that `value` is a signed 64-bit `int` and return it.

    Raises:
        InvalidIntegerError: if the value is not an int (bool included) or
            falls outside [-2**63, 2**63 - 1].
    """
    try:
        return _INT64_ADAPTER.validate_python(value)
    except ValidationError as e:
        logger.warning(
            "integer.rejected",
            extra={
                "event": "integer_rejected",
                "argument": name,
                "reason": e.errors()[0]["type"],
            },
        )
        raise InvalidIntegerError(
            f"{name} must be a 64-bit integer: {e.errors()[0]['msg']}"
        ) from e
