"""Secure random bytes from the operating system's entropy source."""

from __future__ import annotations

import os

__all__ = ["random_bytes"]


def random_bytes(size: int) -> bytes:
    """Return ``size`` bytes of cryptographically secure random data.

    Raises TypeError if ``size`` is not an integer and ValueError if it is
    negative.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return os.urandom(size)