"""Single-number primality test by trial division.

Numbers are filtered through cheap checks first (small base cases, even
numbers, the 6n +/- 1 wheel) and only the survivors reach trial division.
"""

from __future__ import annotations

import logging

from primeset.core.validation import require_non_negative_int

logger = logging.getLogger(__name__)

# Every prime > 3 is congruent to 1 or 5 mod 6.
WHEEL_MODULUS = 6
WHEEL_RESIDUES = (1, 5)


def is_prime(num: int) -> bool:
    """Check if a single number is prime.

    Args:
        num: Non-negative integer to check.

    Returns:
        True if num is prime, False otherwise.

    Raises:
        InvalidArgumentError: If num is negative or not an integer.
    """
    num = require_non_negative_int(num, "num")

    if num < 2:
        return False
    if num in (2, 3):
        return True
    if num % 2 == 0:
        return False
    if num % WHEEL_MODULUS not in WHEEL_RESIDUES:
        return False

    return _determine_is_prime(num)


def _determine_is_prime(num: int) -> bool:
    """Trial division by odd divisors up to the square root of num.

    Only called for odd num > 3 that is 1 or 5 mod 6. The loop bound is
    i * i <= num so no float sqrt is involved.
    """
    i = 3
    while i * i <= num:
        if num % i == 0:
            logger.debug("%d divisible by %d", num, i)
            return False
        i += 2

    return True
