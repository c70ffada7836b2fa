import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from xeddsa.edwards import Point, double_scalarmult, scalarmult_base
from xeddsa.field import P
from xeddsa.scalar import ORDER

scalars = st.integers(min_value=0, max_value=2**255 - 1)


def _le(n: int) -> bytes:
    return n.to_bytes(32, "little")


def test_base_point_encoding():
    assert Point.base().to_bytes() == bytes([0x58]) + bytes([0x66]) * 31


def test_identity_encoding():
    assert Point.identity().to_bytes() == bytes([1]) + bytes(31)


def test_base_round_trip():
    encoded = Point.base().to_bytes()
    assert Point.from_bytes(encoded) == Point.base()


def test_order_times_base_is_identity():
    assert Point.base() * ORDER == Point.identity()
    assert scalarmult_base(_le(ORDER)) == Point.identity()


def test_scalarmult_base_one_and_zero():
    assert scalarmult_base(_le(1)) == Point.base()
    assert scalarmult_base(bytes(32)) == Point.identity()


def test_double_matches_addition():
    b = Point.base()
    assert b.double() == b + b
    assert b.double().double() == b * 4


def test_subtraction_and_negation():
    b = Point.base()
    assert b - b == Point.identity()
    assert -b + b == Point.identity()
    assert (b * 5) - (b * 3) == b * 2


def test_negation_flips_sign_bit():
    enc = Point.base().to_bytes()
    neg = (-Point.base()).to_bytes()
    assert neg[:31] == enc[:31]
    assert neg[31] == enc[31] ^ 0x80


def test_order_two_point():
    point = Point.from_bytes(_le(P - 1))
    assert point != Point.identity()
    assert point.double() == Point.identity()


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Point.from_bytes(bytes(31))
    with pytest.raises(ValueError):
        scalarmult_base(bytes(33))


def test_invalid_encodings_rejected_valid_round_trip():
    failures = 0
    for y in range(2, 60):
        try:
            point = Point.from_bytes(_le(y))
        except ValueError:
            failures += 1
        else:
            assert point.to_bytes() == _le(y)
    assert failures > 0


def test_hash_consistent_with_equality():
    b = Point.base()
    assert hash(b * 3) == hash(b + b + b)
    assert {b * 3, b + b + b} == {b * 3}


@settings(max_examples=20, deadline=None)
@given(scalars, scalars)
def test_scalarmult_base_is_additive(a, b):
    assert scalarmult_base(_le(a)) + scalarmult_base(_le(b)) == Point.base() * (a + b)


@settings(max_examples=20, deadline=None)
@given(scalars)
def test_encoding_round_trip(a):
    point = scalarmult_base(_le(a))
    assert Point.from_bytes(point.to_bytes()) == point


@settings(max_examples=15, deadline=None)
@given(scalars, scalars, scalars)
def test_double_scalarmult_matches_separate(k, a, b):
    point = scalarmult_base(_le(k))
    expected = point * a + scalarmult_base(_le(b))
    assert double_scalarmult(_le(a), point, _le(b)) == expected


@settings(max_examples=15, deadline=None)
@given(scalars)
def test_scalar_reduction_mod_order(a):
    assert scalarmult_base(_le(a)) == Point.base() * (a % ORDER)


def test_int_and_bytes_scalars_agree():
    b = Point.base()
    assert b * _le(12345) == 12345 * b
    assert b * -7 == -(b * 7)