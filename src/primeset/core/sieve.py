"""Prime set generation by sieving.

The sieve starts from a candidate set holding 2 and every odd number up to
the limit, then removes the multiples of each base up to isqrt(limit).
What remains is exactly the primes <= limit.

NumPy helpers for mask and array lookups are built on top of the same set.
"""

from __future__ import annotations

import logging
from math import isqrt

import numpy as np

from primeset.core.validation import InvalidArgumentError, require_non_negative_int

logger = logging.getLogger(__name__)


def build_primes_set(limit: int) -> set[int]:
    """Get the set of all prime numbers up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Set of primes p with 2 <= p <= limit. Empty when limit < 2.

    Raises:
        InvalidArgumentError: If limit is negative or not an integer.
    """
    limit = require_non_negative_int(limit, "limit")

    if limit < 2:
        return set()

    candidates = {2}
    candidates.update(range(3, limit + 1, 2))

    # Every composite <= limit has a factor <= isqrt(limit).
    for base in range(2, isqrt(limit) + 1):
        candidates.difference_update(range(base * 2, limit + 1, base))

    logger.debug("Sieved %d primes up to %d", len(candidates), limit)
    return candidates


def count_primes(limit: int) -> int:
    """Count prime numbers up to limit.

    Args:
        limit: Upper bound for counting (inclusive).

    Returns:
        Number of primes <= limit.
    """
    return len(build_primes_set(limit))


def prime_sieve_mask(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        limit: Size of the mask (0 to limit-1).

    Returns:
        Boolean array of length limit.
    """
    limit = require_non_negative_int(limit, "limit")

    mask = np.zeros(limit, dtype=bool)

    if limit < 3:
        return mask

    primes = build_primes_set(limit - 1)
    mask[np.fromiter(primes, dtype=np.int64, count=len(primes))] = True
    return mask


def is_prime_array(numbers: np.ndarray) -> np.ndarray:
    """Check primality for an array of numbers.

    Sieves once up to max(numbers) and uses set membership for each
    element.

    Args:
        numbers: Array of non-negative integers to check.

    Returns:
        Boolean array of the same shape where True indicates prime.

    Raises:
        InvalidArgumentError: If the array is not of integer dtype or holds
            negative values.
    """
    numbers = np.asarray(numbers)

    if numbers.size == 0:
        return np.zeros(numbers.shape, dtype=bool)

    if not np.issubdtype(numbers.dtype, np.integer):
        raise InvalidArgumentError(f"numbers must have an integer dtype, got {numbers.dtype}")

    if int(numbers.min()) < 0:
        raise InvalidArgumentError(f"numbers must be >= 0, got min {int(numbers.min())}")

    prime_set = build_primes_set(int(numbers.max()))

    result = np.array([int(n) in prime_set for n in numbers.ravel()], dtype=bool)
    return result.reshape(numbers.shape)
