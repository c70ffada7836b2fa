"""Scalar helpers: clamping, negation and conditional moves."""

from __future__ import annotations

from xeddsa.scalar import ORDER, SCALAR_SIZE, muladd

__all__ = ["clamp", "negate", "conditional_move"]

_ZERO = bytes(SCALAR_SIZE)
_MINUS_ONE = (ORDER - 1).to_bytes(SCALAR_SIZE, "little")
_ALL_ONES = (1 << (8 * SCALAR_SIZE)) - 1


def _check(data: bytes | bytearray | memoryview, name: str) -> bytes:
    raw = bytes(data)
    if len(raw) != SCALAR_SIZE:
        raise ValueError(f"{name} must be {SCALAR_SIZE} bytes long, got {len(raw)}")
    return raw


def clamp(scalar: bytes | bytearray | memoryview) -> bytes:
    """Clamp a 32-byte scalar as mandated by RFC 7748. Idempotent.

    The three lowest bits are cleared, the highest bit is cleared and the
    second-highest bit is set.
    """
    out = bytearray(_check(scalar, "scalar"))
    out[0] &= 248
    out[31] = (out[31] & 127) | 64
    return bytes(out)


def negate(scalar: bytes | bytearray | memoryview) -> bytes:
    """Negate a 32-byte scalar modulo the order of the Ed25519 base point."""
    return muladd(_MINUS_ONE, _check(scalar, "scalar"), _ZERO)


def conditional_move(
    current: bytes | bytearray | memoryview,
    candidate: bytes | bytearray | memoryview,
    move: bool,
) -> bytes:
    """Return ``candidate`` if ``move`` is true, otherwise ``current``.

    The choice is made by masking rather than branching on the data.
    """
    cur = int.from_bytes(_check(current, "current"), "little")
    cand = int.from_bytes(_check(candidate, "candidate"), "little")
    mask = (int(bool(move)) - 1) & _ALL_ONES
    result = ((cur ^ cand) & mask) ^ cand
    return result.to_bytes(SCALAR_SIZE, "little")