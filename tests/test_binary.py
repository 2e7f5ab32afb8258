"""Tests for hex helpers and rounding."""
import pytest

from bobassistant.core.binary import (
    byte_at,
    bytes_at,
    hex_to_unsigned,
    is_hex,
    round_fixed,
    round_half_ceil,
)


def test_hex_to_unsigned():
    assert hex_to_unsigned("ff") == 255
    assert hex_to_unsigned("4C") == 76
    assert hex_to_unsigned("00") == 0


def test_hex_to_unsigned_odd_length_is_left_padded():
    assert hex_to_unsigned("f") == 15
    assert hex_to_unsigned("abc") == 0x0ABC


def test_byte_at():
    assert byte_at("4C32FF", 0) == 76
    assert byte_at("4C32FF", 1) == 50
    assert byte_at("4c32ff", 2) == 255


def test_bytes_at_keeps_index_order():
    assert bytes_at("000102", [2, 0, 1]) == [2, 0, 1]
    assert bytes_at("000102", []) == []


@pytest.mark.parametrize("data, expected", [
    ("aB09", True),
    ("53647F", True),
    ("", False),
    ("zz", False),
    ("0x52", False),
    ("52 64", False),
])
def test_is_hex(data, expected):
    assert is_hex(data) is expected


def test_round_fixed_ties_go_away_from_zero():
    # 0.125 is exact in binary, so this is a real tie.
    assert round_fixed(0.125, 2) == 0.13
    assert round_fixed(-0.125, 2) == -0.13


def test_round_fixed_uses_exact_binary_value():
    # 1.005 is stored slightly below 1.005.
    assert round_fixed(1.005, 2) == 1.0


def test_round_fixed_digits():
    assert round_fixed(128 / 10 / 121.45, 4) == 0.1054
    assert round_fixed(64 * 100 / 127, 1) == 50.4
    assert round_fixed(0.0, 4) == 0.0


@pytest.mark.parametrize("value, expected", [
    (2.5, 3),
    (-2.5, -2),
    (181.44, 181),
    (22.677, 23),
    (0.0, 0),
])
def test_round_half_ceil(value, expected):
    assert round_half_ceil(value) == expected
