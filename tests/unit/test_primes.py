from __future__ import annotations

import pytest

from mathutil import InvalidIntegerError, is_prime
from mathutil.domain.integers import INT64_MIN

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97]


@pytest.mark.parametrize("n", [1, 0, -1, -2, -5, -17, INT64_MIN])
def test_numbers_up_to_one_are_not_prime(n: int) -> None:
    assert is_prime(n) is False


@pytest.mark.parametrize("n,expected", [(2, True), (17, True), (18, False), (4, False), (9, False), (7919, True), (7921, False)])
def test_is_prime_literal_cases(n: int, expected: bool) -> None:
    assert is_prime(n) is expected


def test_is_prime_matches_known_primes_below_100() -> None:
    assert [n for n in range(100) if is_prime(n)] == SMALL_PRIMES


@pytest.mark.parametrize("n", range(2, 200))
def test_prime_result_implies_no_divisor_below_n(n: int) -> None:
    has_divisor = any(n % i == 0 for i in range(2, n))
    assert is_prime(n) is (not has_divisor)


@pytest.mark.parametrize("bad", [2.0, "7", None, False, 1 << 63])
def test_is_prime_rejects_non_int64(bad: object) -> None:
    with pytest.raises(InvalidIntegerError) as exc:
        is_prime(bad)  # type: ignore[arg-type]
    assert exc.value.code == "invalid_integer"
