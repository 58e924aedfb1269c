"""Core sieve and primality utilities."""

from primeset.core.primality import is_prime
from primeset.core.sieve import (
    build_primes_set,
    count_primes,
    is_prime_array,
    prime_sieve_mask,
)
from primeset.core.validation import InvalidArgumentError, require_non_negative_int

__all__ = [
    "build_primes_set",
    "count_primes",
    "is_prime",
    "is_prime_array",
    "prime_sieve_mask",
    "InvalidArgumentError",
    "require_non_negative_int",
]
