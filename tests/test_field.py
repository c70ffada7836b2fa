import pytest
from hypothesis import given, strategies as st

from xeddsa.field import (
    FIELD_SIZE,
    P,
    field_from_bytes,
    field_invert,
    field_is_negative,
    field_to_bytes,
)

field_elements = st.integers(min_value=0, max_value=P - 1)


def test_prime_value():
    assert field_to_bytes(2**255 - 19) == bytes(FIELD_SIZE)
    assert field_to_bytes(2**255 - 18) == b"\x01" + bytes(31)
    assert field_from_bytes((2**255 - 20).to_bytes(32, "little")) == P - 1


def test_one_encodes_little_endian():
    assert field_to_bytes(1) == b"\x01" + bytes(31)


def test_prime_encodes_as_zero():
    assert field_to_bytes(P) == bytes(FIELD_SIZE)


def test_negative_one_is_reduced():
    assert field_to_bytes(-1) == (P - 1).to_bytes(32, "little")


@given(field_elements)
def test_round_trip(value):
    assert field_from_bytes(field_to_bytes(value)) == value


@given(field_elements)
def test_encoding_top_bit_clear(value):
    assert field_to_bytes(value)[31] & 0x80 == 0


@given(st.binary(min_size=32, max_size=32))
def test_top_bit_ignored(data):
    flipped = data[:31] + bytes([data[31] ^ 0x80])
    assert field_from_bytes(data) == field_from_bytes(flipped)


def test_non_canonical_encoding_reduced():
    encoded = (P + 5).to_bytes(32, "little")
    assert field_from_bytes(encoded) == 5


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_from_bytes_wrong_length(length):
    with pytest.raises(ValueError):
        field_from_bytes(bytes(length))


@given(st.integers(min_value=1, max_value=P - 1))
def test_invert_gives_inverse(value):
    assert (value * field_invert(value)) % P == 1


@given(st.integers(min_value=1, max_value=P - 1))
def test_invert_is_involution(value):
    assert field_invert(field_invert(value)) == value


def test_invert_zero_is_zero():
    assert field_invert(0) == 0
    assert field_invert(P) == 0


def test_is_negative_small_values():
    assert field_is_negative(1) is True
    assert field_is_negative(0) is False
    assert field_is_negative(2) is False


def test_is_negative_uses_reduced_value():
    assert field_is_negative(P + 1) is True
    assert field_is_negative(P - 1) is False


@given(st.integers(min_value=1, max_value=P - 1))
def test_negation_flips_sign(value):
    assert field_is_negative(value) != field_is_negative(-value)


@given(field_elements)
def test_is_negative_matches_low_bit_of_encoding(value):
    assert field_is_negative(value) == bool(field_to_bytes(value)[0] & 1)