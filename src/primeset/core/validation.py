"""Argument checks shared by the sieve and primality functions."""

from __future__ import annotations

import numpy as np


class InvalidArgumentError(ValueError):
    """Raised when a limit or number is not a non-negative integer."""


def require_non_negative_int(value: object, name: str) -> int:
    """Return value as a plain int, rejecting anything that is not one.

    Accepts Python ints and NumPy integer scalars. Booleans are rejected
    even though bool subclasses int.

    Args:
        value: Candidate argument.
        name: Argument name used in the error message.

    Returns:
        The value converted to int.

    Raises:
        InvalidArgumentError: If value is not an integer or is negative.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )

    value = int(value)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value}")

    return value
