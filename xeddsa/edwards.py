"""Points on the twisted Edwards curve used by Ed25519.

Points are kept in extended homogeneous coordinates (X : Y : Z : T) with
x = X / Z, y = Y / Z and x * y = T / Z, on the curve -x^2 + y^2 = 1 + d x^2 y^2
over the field of integers modulo 2^255 - 19.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Union

from xeddsa.field import (
    FIELD_SIZE,
    P,
    field_from_bytes,
    field_invert,
    field_is_negative,
    field_to_bytes,
)

__all__ = ["D", "Point", "scalarmult_base", "double_scalarmult"]

#: The curve constant d = -121665 / 121666.
D = (-121665 * field_invert(121666)) % P

_D2 = (2 * D) % P
_SQRT_M1 = pow(2, (P - 1) // 4, P)

ScalarLike = Union[int, bytes, bytearray, memoryview]


def _recover_x(y: int, sign: int) -> int:
    """Find x on the curve for the given y, with x's parity equal to ``sign``."""
    yy = y * y % P
    u = (yy - 1) % P
    v = (D * yy + 1) % P
    v3 = v * v % P * v % P
    v7 = v3 * v3 % P * v % P
    x = u * v3 % P * pow(u * v7 % P, (P - 5) // 8, P) % P

    vxx = v * x % P * x % P
    if vxx != u:
        if vxx != (-u) % P:
            raise ValueError("encoding does not describe a point on the curve")
        x = x * _SQRT_M1 % P

    if field_is_negative(x) != bool(sign):
        x = (-x) % P
    return x


def _scalar_to_int(scalar: ScalarLike) -> int:
    if isinstance(scalar, int):
        return scalar
    raw = bytes(scalar)
    if len(raw) != 32:
        raise ValueError(f"scalar must be 32 bytes long, got {len(raw)}")
    return int.from_bytes(raw, "little")


@dataclass(frozen=True, eq=False)
class Point:
    """A point in extended coordinates; equality compares affine values."""

    x: int
    y: int
    z: int
    t: int

    @classmethod
    def identity(cls) -> Point:
        """Return the neutral element (0, 1)."""
        return cls(0, 1, 1, 0)

    @classmethod
    def base(cls) -> Point:
        """Return the Ed25519 base point (x, 4/5) with x positive."""
        return _base_point()

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Point:
        """Decode a 32-byte point encoding: y with the sign of x in the top bit.

        Raises ValueError if the length is wrong or no such point exists.
        """
        raw = bytes(data)
        if len(raw) != FIELD_SIZE:
            raise ValueError(f"data must be {FIELD_SIZE} bytes long, got {len(raw)}")
        y = field_from_bytes(raw)
        x = _recover_x(y, raw[31] >> 7)
        return cls(x, y, 1, x * y % P)

    def to_bytes(self) -> bytes:
        """Encode the point as 32 bytes: y, with the sign of x in the top bit."""
        recip = field_invert(self.z)
        x = self.x * recip % P
        y = self.y * recip % P
        out = bytearray(field_to_bytes(y))
        out[31] |= int(field_is_negative(x)) << 7
        return bytes(out)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        a = (self.y - self.x) * (other.y - other.x) % P
        b = (self.y + self.x) * (other.y + other.x) % P
        c = self.t * _D2 % P * other.t % P
        d = 2 * self.z * other.z % P
        e, f, g, h = b - a, d - c, d + c, b + a
        return Point(e * f % P, g * h % P, f * g % P, e * h % P)

    def __neg__(self) -> Point:
        return Point((-self.x) % P, self.y, self.z, (-self.t) % P)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def double(self) -> Point:
        """Return 2 * self."""
        xx = self.x * self.x % P
        yy = self.y * self.y % P
        b = 2 * self.z * self.z % P
        aa = (self.x + self.y) ** 2 % P
        y3 = (yy + xx) % P
        z3 = (yy - xx) % P
        x3 = (aa - y3) % P
        t3 = (b - z3) % P
        return Point(x3 * t3 % P, y3 * z3 % P, z3 * t3 % P, x3 * y3 % P)

    def __mul__(self, scalar: ScalarLike) -> Point:
        if not isinstance(scalar, (int, bytes, bytearray, memoryview)):
            return NotImplemented
        n = _scalar_to_int(scalar)
        point = self
        if n < 0:
            n, point = -n, -point
        result = Point.identity()
        for bit in bin(n)[2:]:
            result = result.double()
            if bit == "1":
                result = result + point
        return result

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            (self.x * other.z - other.x * self.z) % P == 0
            and (self.y * other.z - other.y * self.z) % P == 0
        )

    def __hash__(self) -> int:
        return hash(self.to_bytes())


@lru_cache(maxsize=1)
def _base_point() -> Point:
    y = 4 * field_invert(5) % P
    x = _recover_x(y, 0)
    return Point(x, y, 1, x * y % P)


def scalarmult_base(scalar: ScalarLike) -> Point:
    """Return ``scalar * B`` for a 32-byte little-endian scalar (or an int)."""
    return Point.base() * _scalar_to_int(scalar)


def double_scalarmult(a: ScalarLike, point: Point, b: ScalarLike) -> Point:
    """Return ``a * point + b * B`` where B is the base point."""
    m = _scalar_to_int(a)
    n = _scalar_to_int(b)
    first, second = point, Point.base()
    if m < 0:
        m, first = -m, -first
    if n < 0:
        n, second = -n, -second
    both = first + second
    result = Point.identity()
    for i in reversed(range(max(m.bit_length(), n.bit_length()))):
        result = result.double()
        bit_m = (m >> i) & 1
        bit_n = (n >> i) & 1
        if bit_m and bit_n:
            result = result + both
        elif bit_m:
            result = result + first
        elif bit_n:
            result = result + second
    return result