import math

import pytest

from contestkit.numtheory import composite_marks, fibonacci, gcd, lcm, sieve


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


def test_fibonacci_eight():
    assert fibonacci(8) == 21


@pytest.mark.parametrize("n", range(2, 60))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("a", [1, 7, 12, 100])
def test_gcd_with_zero_is_identity(a):
    assert gcd(a, 0) == a


@pytest.mark.parametrize("a,b", [(2, 3), (12, 18), (100, 75), (17, 289), (1, 1)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert gcd(b, a) == gcd(a, b)


@pytest.mark.parametrize("a,b", [(2, 3), (4, 6), (21, 14), (9, 9), (1, 13)])
def test_lcm_properties(a, b):
    result = lcm(a, b)
    assert result % a == 0
    assert result % b == 0
    assert result * gcd(a, b) == a * b


def test_lcm_both_zero_raises():
    with pytest.raises(ValueError):
        lcm(0, 0)


def test_sieve_small():
    assert sieve(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_sieve_count_to_hundred():
    assert len(sieve(100)) == 25


def test_sieve_below_two_is_empty():
    assert sieve(1) == []
    assert sieve(0) == []


def test_sieve_results_are_prime():
    primes = sieve(500)
    assert len(primes) == 95
    assert primes[-1] == 499
    non_primes = [
        p for p in primes if any(p % d == 0 for d in range(2, math.isqrt(p) + 1))
    ]
    assert non_primes == []


def test_composite_marks_shape():
    marks = composite_marks(50)
    assert len(marks) == 51
    assert marks[0] is False
    assert marks[1] is True


def test_composite_marks_agree_with_sieve():
    n = 1000
    marks = composite_marks(n)
    unmarked = {i for i in range(2, n + 1) if not marks[i]}
    assert unmarked == set(sieve(n))


def test_composite_marks_negative_raises():
    with pytest.raises(ValueError):
        composite_marks(-3)