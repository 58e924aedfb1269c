"""primeset - prime set generation and single-number primality testing."""

__version__ = "0.1.0"

from primeset.core.primality import is_prime
from primeset.core.sieve import (
    build_primes_set,
    count_primes,
    is_prime_array,
    prime_sieve_mask,
)
from primeset.core.validation import InvalidArgumentError

__all__ = [
    "build_primes_set",
    "count_primes",
    "is_prime",
    "is_prime_array",
    "prime_sieve_mask",
    "InvalidArgumentError",
]
