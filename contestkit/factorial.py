"""Exact factorials printed in full, one "n!" block per input number."""

import sys

_BASE = 10**9
_BASE_DIGITS = 9


def factorial_digits(n):
    """Return the decimal digits of n! (which is 1 for n below 2)."""
    # Little-endian limbs in base 10**9 keep arbitrarily long results printable.
    limbs = [1]
    for factor in range(2, n + 1):
        carry = 0
        product = []
        for limb in limbs:
            carry, digit = divmod(limb * factor + carry, _BASE)
            product.append(digit)
        while carry:
            carry, digit = divmod(carry, _BASE)
            product.append(digit)
        limbs = product
    head, *tail = reversed(limbs)
    return str(head) + "".join(f"{limb:0{_BASE_DIGITS}d}" for limb in tail)


def solve(text):
    """Answer every integer in text with a line "n!" followed by the digits of n!."""
    blocks = []
    for token in text.split():
        n = int(token)
        blocks.append(f"{n}!\n{factorial_digits(n)}\n")
    return "".join(blocks)


def main(argv=None):
    """Read numbers from standard input and print their factorials."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0