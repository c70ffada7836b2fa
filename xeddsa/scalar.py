"""Arithmetic on scalars modulo the order of the Ed25519 base point."""

from __future__ import annotations

__all__ = ["ORDER", "SCALAR_SIZE", "WIDE_SCALAR_SIZE", "reduce", "muladd"]

#: The prime order l = 2^252 + 27742317777372353535851937790883648493.
ORDER = 2**252 + 27742317777372353535851937790883648493

#: Size in bytes of an encoded scalar.
SCALAR_SIZE = 32

#: Size in bytes of a wide value accepted by :func:`reduce`.
WIDE_SCALAR_SIZE = 64


def _decode(data: bytes | bytearray | memoryview, size: int, name: str) -> int:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{name} must be {size} bytes long, got {len(raw)}")
    return int.from_bytes(raw, "little")


def _encode(value: int) -> bytes:
    return (value % ORDER).to_bytes(SCALAR_SIZE, "little")


def reduce(data: bytes | bytearray | memoryview) -> bytes:
    """Reduce a 64-byte little-endian integer modulo ``ORDER``.

    Returns the 32-byte little-endian encoding of the result.
    """
    return _encode(_decode(data, WIDE_SCALAR_SIZE, "data"))


def muladd(
    a: bytes | bytearray | memoryview,
    b: bytes | bytearray | memoryview,
    c: bytes | bytearray | memoryview,
) -> bytes:
    """Compute ``(a * b + c) mod ORDER`` on 32-byte little-endian scalars.

    All 256 bits of each input are used, so inputs need not be reduced.
    """
    x = _decode(a, SCALAR_SIZE, "a")
    y = _decode(b, SCALAR_SIZE, "b")
    z = _decode(c, SCALAR_SIZE, "c")
    return _encode(x * y + z)