"""Key derivation and conversion between Curve25519 and Ed25519 forms."""

from __future__ import annotations

import hashlib

from xeddsa.clamping import clamp, conditional_move, negate
from xeddsa.edwards import Point, scalarmult_base
from xeddsa.field import P, field_from_bytes, field_invert, field_to_bytes
from xeddsa.scalar import ORDER

__all__ = [
    "InvalidKeyError",
    "curve25519_pub_to_ed25519_pub",
    "ed25519_pub_to_curve25519_pub",
    "priv_to_curve25519_pub",
    "priv_to_ed25519_pub",
    "seed_to_ed25519_pub",
    "priv_force_sign",
    "seed_to_priv",
    "x25519",
]

_KEY_SIZE = 32
_A24 = 121665
_BASE_U = 9


class InvalidKeyError(ValueError):
    """A key was rejected because of weak or invalid security properties."""


def _check(data: bytes | bytearray | memoryview, name: str) -> bytes:
    raw = bytes(data)
    if len(raw) != _KEY_SIZE:
        raise ValueError(f"{name} must be {_KEY_SIZE} bytes long, got {len(raw)}")
    return raw


def _montgomery_ladder(k: int, u: int) -> int:
    """Compute the u coordinate of k * (u, ...) on Curve25519 (RFC 7748)."""
    x1 = u
    x2, z2 = 1, 0
    x3, z3 = u, 1
    swap = 0
    for t in reversed(range(255)):
        bit = (k >> t) & 1
        swap ^= bit
        if swap:
            x2, x3 = x3, x2
            z2, z3 = z3, z2
        swap = bit

        a = (x2 + z2) % P
        aa = a * a % P
        b = (x2 - z2) % P
        bb = b * b % P
        e = (aa - bb) % P
        c = (x3 + z3) % P
        d = (x3 - z3) % P
        da = d * a % P
        cb = c * b % P
        x3 = (da + cb) ** 2 % P
        z3 = x1 * (da - cb) ** 2 % P
        x2 = aa * bb % P
        z2 = e * (aa + _A24 * e) % P
    if swap:
        x2, x3 = x3, x2
        z2, z3 = z3, z2
    return x2 * field_invert(z2) % P


def curve25519_pub_to_ed25519_pub(
    curve25519_pub: bytes | bytearray | memoryview, set_sign_bit: bool
) -> bytes:
    """Convert a Curve25519 public key into an Ed25519 public key.

    The u coordinate only determines y; the sign of x is taken from
    ``set_sign_bit``.
    """
    u = field_from_bytes(_check(curve25519_pub, "curve25519_pub"))
    y = (u - 1) * field_invert(u + 1) % P
    out = bytearray(field_to_bytes(y))
    out[31] &= 0x7F
    out[31] |= int(bool(set_sign_bit)) << 7
    return bytes(out)


def ed25519_pub_to_curve25519_pub(ed25519_pub: bytes | bytearray | memoryview) -> bytes:
    """Convert an Ed25519 public key into a Curve25519 public key.

    Raises InvalidKeyError if the key does not decode to a point, has small
    order or lies outside the prime-order subgroup.
    """
    raw = _check(ed25519_pub, "ed25519_pub")
    try:
        point = Point.from_bytes(raw)
    except ValueError as exc:
        raise InvalidKeyError("public key is not a valid curve point") from exc
    identity = Point.identity()
    if point * 8 == identity:
        raise InvalidKeyError("public key has small order")
    if point * ORDER != identity:
        raise InvalidKeyError("public key is not in the prime-order subgroup")
    y = field_from_bytes(raw)
    u = (1 + y) * field_invert(1 - y) % P
    return field_to_bytes(u)


def priv_to_curve25519_pub(priv: bytes | bytearray | memoryview) -> bytes:
    """Derive the Curve25519 public key from a private key (clamped first)."""
    scalar = int.from_bytes(clamp(_check(priv, "priv")), "little")
    return field_to_bytes(_montgomery_ladder(scalar, _BASE_U))


def priv_to_ed25519_pub(priv: bytes | bytearray | memoryview) -> bytes:
    """Derive the Ed25519 public key from a private key (clamped first)."""
    return scalarmult_base(clamp(_check(priv, "priv"))).to_bytes()


def seed_to_ed25519_pub(seed: bytes | bytearray | memoryview) -> bytes:
    """Derive the Ed25519 public key from a seed."""
    return priv_to_ed25519_pub(seed_to_priv(seed))


def priv_force_sign(priv: bytes | bytearray | memoryview, set_sign_bit: bool) -> bytes:
    """Clamp a private key and negate it if needed so that its Ed25519 public
    key has the sign bit set (or clear) as requested."""
    clamped = clamp(_check(priv, "priv"))
    pub = scalarmult_base(clamped).to_bytes()
    negated = negate(clamped)
    sign = (pub[31] & 0x80) >> 7
    return conditional_move(clamped, negated, sign == int(not set_sign_bit))


def seed_to_priv(seed: bytes | bytearray | memoryview) -> bytes:
    """Derive the private key from a seed: the clamped low half of SHA-512."""
    digest = hashlib.sha512(_check(seed, "seed")).digest()
    return clamp(digest[:_KEY_SIZE])


def x25519(
    priv: bytes | bytearray | memoryview, curve25519_pub: bytes | bytearray | memoryview
) -> bytes:
    """Perform X25519 Diffie-Hellman key agreement.

    Raises InvalidKeyError if the shared secret consists of only zeros,
    which happens for public keys of small order.
    """
    scalar = int.from_bytes(clamp(_check(priv, "priv")), "little")
    u = field_from_bytes(_check(curve25519_pub, "curve25519_pub"))
    shared = field_to_bytes(_montgomery_ladder(scalar, u))
    if not any(shared):
        raise InvalidKeyError("public key has small order; shared secret is zero")
    return shared