"""Small number-theory helpers: Fibonacci numbers, gcd, lcm and a prime sieve."""

from math import isqrt


def fibonacci(n):
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError("fibonacci is undefined for negative n")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def gcd(a, b):
    """Return the greatest common divisor of a and b by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a, b):
    """Return the least common multiple of a and b."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("lcm is undefined when both arguments are zero")
    return a // divisor * b


def composite_marks(n):
    """Return a list of n + 1 flags; flag i is True when i is 1 or composite."""
    if n < 0:
        raise ValueError("n must not be negative")
    marks = [False] * (n + 1)
    if n >= 1:
        marks[1] = True
    for i in range(2, isqrt(n) + 1):
        if not marks[i]:
            multiples = range(i * i, n + 1, i)
            marks[i * i :: i] = [True] * len(multiples)
    return marks


def sieve(n):
    """Return the primes up to and including n, in increasing order."""
    if n < 2:
        return []
    return [i for i, marked in enumerate(composite_marks(n)) if i >= 2 and not marked]