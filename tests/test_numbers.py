import pytest

from pushswap.numbers import atoi, atol, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r+17") == atoi("17")
    assert atoi("   -17") == -atoi("17")


def test_atoi_stops_at_non_digit():
    assert atoi("123abc456") == atoi("123")


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_atoi_double_sign_is_zero():
    assert atoi("+-5") == 0


def test_atoi_magnitude_overflow_returns_minus_one():
    assert atoi("99999999999") == -1
    assert atoi("-99999999999") == -1


def test_atoi_wraps_just_past_int_max():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 5, -5, 2**40, -(2**40), 2**63 - 1, -(2**63)])
def test_atol_round_trip(n):
    assert atol(itoa(n)) == n


def test_atol_skips_whitespace_and_trailing_text():
    assert atol("  -12345xyz") == -12345


def test_atol_wraps_past_64_bits():
    assert atol(str(2**63)) == -(2**63)


def test_atol_has_no_overflow_sentinel():
    assert atol("99999999999") == int("99999999999")


def test_itoa_pins_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero_and_sign():
    assert itoa(0) == "0"
    assert itoa(-7).startswith("-")
    assert itoa(-7)[1:] == itoa(7)