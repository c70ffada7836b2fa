"""Arithmetic helpers for the field of integers modulo 2^255 - 19."""

from __future__ import annotations

__all__ = [
    "P",
    "FIELD_SIZE",
    "field_to_bytes",
    "field_from_bytes",
    "field_invert",
    "field_is_negative",
]

#: The field prime p = 2^255 - 19.
P = 2**255 - 19

#: Size in bytes of an encoded field element.
FIELD_SIZE = 32

_LOW_255_BITS = (1 << 255) - 1


def field_to_bytes(value: int) -> bytes:
    """Encode a field element as its canonical 32-byte little-endian form.

    The value is fully reduced modulo ``P`` first, so the most significant
    bit of the output is always clear.
    """
    return (value % P).to_bytes(FIELD_SIZE, "little")


def field_from_bytes(data: bytes | bytearray | memoryview) -> int:
    """Decode a 32-byte little-endian field element.

    The most significant bit is ignored, as the encoding of Curve25519 and
    Ed25519 coordinates requires. Non-canonical encodings (values between
    ``P`` and 2^255 - 1) are accepted and reduced.
    """
    raw = bytes(data)
    if len(raw) != FIELD_SIZE:
        raise ValueError(f"data must be {FIELD_SIZE} bytes long, got {len(raw)}")
    return (int.from_bytes(raw, "little") & _LOW_255_BITS) % P


def field_invert(value: int) -> int:
    """Return the multiplicative inverse of ``value`` modulo ``P``.

    Computed as ``value ** (P - 2)``, so the inverse of zero is zero.
    """
    return pow(value % P, P - 2, P)


def field_is_negative(value: int) -> bool:
    """Tell whether ``value`` is "negative", i.e. its canonical form is odd."""
    return bool((value % P) & 1)