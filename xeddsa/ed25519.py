"""Ed25519-compatible signatures from Curve25519/Ed25519 keys and seeds."""

from __future__ import annotations

import hashlib

from xeddsa.clamping import clamp
from xeddsa.conversion import seed_to_ed25519_pub
from xeddsa.edwards import Point, double_scalarmult, scalarmult_base
from xeddsa.entropy import random_bytes
from xeddsa.scalar import ORDER, muladd, reduce

__all__ = [
    "PUBLIC_KEY_SIZE",
    "SECRET_KEY_SIZE",
    "SIGNATURE_SIZE",
    "NONCE_SIZE",
    "BadSignatureError",
    "priv_sign",
    "seed_sign",
    "verify",
    "generate_keypair",
    "sign",
    "open_signed",
    "constant_time_equal",
]

PUBLIC_KEY_SIZE = 32
SECRET_KEY_SIZE = 64
SIGNATURE_SIZE = 64
NONCE_SIZE = 64
_KEY_SIZE = 32

_HASH_PADDING = b"\xfe" + b"\xff" * 31

Bytes = bytes | bytearray | memoryview


class BadSignatureError(Exception):
    """A signature failed to verify."""


def _check(data: Bytes, size: int, name: str) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{name} must be {size} bytes long, got {len(raw)}")
    return raw


def _sha512(*parts: bytes) -> bytes:
    digest = hashlib.sha512()
    for part in parts:
        digest.update(part)
    return digest.digest()


def _sign_expanded(scalar: bytes, prefix: bytes, pub: bytes, msg: bytes) -> bytes:
    r = reduce(_sha512(prefix, msg))
    big_r = scalarmult_base(r).to_bytes()
    k = reduce(_sha512(big_r, pub, msg))
    return big_r + muladd(k, scalar, r)


def _expand_seed(seed: bytes) -> tuple[bytes, bytes]:
    digest = _sha512(seed)
    return clamp(digest[:_KEY_SIZE]), digest[_KEY_SIZE:]


def _recompute_r(big_r: bytes, s: bytes, pub: bytes, msg: bytes) -> bytes | None:
    try:
        a = Point.from_bytes(pub)
    except ValueError:
        return None
    h = reduce(_sha512(big_r, pub, msg))
    return double_scalarmult(h, -a, s).to_bytes()


def priv_sign(priv: Bytes, msg: Bytes, nonce: Bytes) -> bytes:
    """Sign ``msg`` with a Curve25519/Ed25519 private key.

    ``nonce`` must be 64 bytes of secure random data. The private key is
    used as-is, without clamping.
    """
    priv = _check(priv, _KEY_SIZE, "priv")
    nonce = _check(nonce, NONCE_SIZE, "nonce")
    msg = bytes(msg)
    pub = scalarmult_base(priv).to_bytes()
    r = reduce(_sha512(_HASH_PADDING, priv, msg, nonce))
    big_r = scalarmult_base(r).to_bytes()
    h = reduce(_sha512(big_r, pub, msg))
    return big_r + muladd(h, priv, r)


def seed_sign(seed: Bytes, msg: Bytes) -> bytes:
    """Sign ``msg`` with a 32-byte seed, as standard Ed25519 does."""
    seed = _check(seed, _KEY_SIZE, "seed")
    scalar, prefix = _expand_seed(seed)
    return _sign_expanded(scalar, prefix, seed_to_ed25519_pub(seed), bytes(msg))


def verify(sig: Bytes, ed25519_pub: Bytes, msg: Bytes) -> None:
    """Verify an Ed25519 signature of ``msg``.

    Raises BadSignatureError if the signature does not verify.
    """
    sig = _check(sig, SIGNATURE_SIZE, "sig")
    pub = _check(ed25519_pub, PUBLIC_KEY_SIZE, "ed25519_pub")
    msg = bytes(msg)
    big_r, s = sig[:_KEY_SIZE], sig[_KEY_SIZE:]
    if int.from_bytes(s, "little") >= ORDER:
        raise BadSignatureError("signature scalar is not canonical")
    identity = Point.identity()
    try:
        a = Point.from_bytes(pub)
    except ValueError as exc:
        raise BadSignatureError("public key is not a valid curve point") from exc
    if a * 8 == identity:
        raise BadSignatureError("public key has small order")
    try:
        r_point = Point.from_bytes(big_r)
    except ValueError as exc:
        raise BadSignatureError("signature point is not a valid curve point") from exc
    if r_point * 8 == identity:
        raise BadSignatureError("signature point has small order")
    check = _recompute_r(big_r, s, pub, msg)
    if check is None or not constant_time_equal(check, big_r):
        raise BadSignatureError("signature does not match")


def generate_keypair() -> tuple[bytes, bytes]:
    """Generate a fresh key pair.

    Returns ``(public_key, secret_key)`` where the 64-byte secret key is the
    seed followed by the public key.
    """
    seed = random_bytes(_KEY_SIZE)
    pub = seed_to_ed25519_pub(seed)
    return pub, seed + pub


def sign(msg: Bytes, secret_key: Bytes) -> bytes:
    """Sign ``msg`` with a 64-byte secret key; returns signature || message."""
    expanded = _check(secret_key, SECRET_KEY_SIZE, "secret key")
    msg = bytes(msg)
    scalar, prefix = _expand_seed(expanded[:_KEY_SIZE])
    return _sign_expanded(scalar, prefix, expanded[_KEY_SIZE:], msg) + msg


def open_signed(signed_message: Bytes, public_key: Bytes) -> bytes:
    """Check a signed message (signature || message) and return the message.

    Raises BadSignatureError if the signature does not verify.
    """
    signed = bytes(signed_message)
    pub = bytes(public_key)
    if len(signed) < SIGNATURE_SIZE:
        raise BadSignatureError("signed message is too short")
    if signed[63] & 0xE0:
        raise BadSignatureError("signature scalar is out of range")
    if len(pub) != PUBLIC_KEY_SIZE:
        raise BadSignatureError("public key has the wrong length")
    big_r, s = signed[:_KEY_SIZE], signed[_KEY_SIZE:SIGNATURE_SIZE]
    msg = signed[SIGNATURE_SIZE:]
    check = _recompute_r(big_r, s, pub, msg)
    if check is None or not constant_time_equal(check, big_r):
        raise BadSignatureError("signature does not match")
    return msg


def constant_time_equal(x: Bytes, y: Bytes) -> bool:
    """Compare two 32-byte strings without an early exit."""
    a = _check(x, 32, "x")
    b = _check(y, 32, "y")
    diff = 0
    for left, right in zip(a, b):
        diff |= left ^ right
    return diff == 0