from __future__ import annotations

import pytest

from mathutil import InvalidIntegerError, MathUtilError
from mathutil.domain.integers import INT64_MAX, INT64_MIN, as_int64


@pytest.mark.parametrize("value", [0, 1, -1, INT64_MIN, INT64_MAX])
def test_as_int64_accepts_range_bounds(value: int) -> None:
    assert as_int64(value) == value


@pytest.mark.parametrize("value", [INT64_MIN - 1, INT64_MAX + 1, 10**30])
def test_as_int64_rejects_out_of_range(value: int) -> None:
    with pytest.raises(InvalidIntegerError, match="must be a 64-bit integer"):
        as_int64(value, name="n")


@pytest.mark.parametrize("value", [True, False, 3.0, "3", b"3", None, [3]])
def test_as_int64_does_not_coerce(value: object) -> None:
    with pytest.raises(InvalidIntegerError):
        as_int64(value)


def test_invalid_integer_error_is_a_value_error() -> None:
    with pytest.raises(ValueError) as exc:
        as_int64("x", name="a")
    assert isinstance(exc.value, MathUtilError)
    assert str(exc.value).startswith("a must be a 64-bit integer")
