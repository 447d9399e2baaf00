from decimal import Decimal

import pytest

from receipt_processor.utils import decimals
from receipt_processor.utils.decimals import InvalidDecimalError, parse_decimal


@pytest.mark.parametrize("value", ["0", "2.00", "35.35", "-1.5", "+7", "0001.10"])
def test_parse_decimal_accepts_plain_literals(value):
    assert parse_decimal(value) == Decimal(value)


@pytest.mark.parametrize("value", ["", "abc", "1.", ".5", "1e3", "NaN", "Infinity", " 1.00", "1,000.00", "$5"])
def test_parse_decimal_rejects_non_literals(value):
    with pytest.raises(InvalidDecimalError):
        parse_decimal(value)


def test_parse_decimal_rejects_non_strings():
    with pytest.raises(ValueError):
        parse_decimal(1.25)  # type: ignore[arg-type]


def test_parse_decimal_keeps_scale():
    assert parse_decimal("2.00").as_tuple().exponent == -2


def test_floor_and_ceil_return_integers_with_scale_zero():
    value = parse_decimal("2.25")
    assert decimals.floor(value) == 2
    assert decimals.ceil(value) == 3
    assert decimals.floor(value).as_tuple().exponent == 0
    assert decimals.ceil(parse_decimal("0.20")).as_tuple().exponent == 0


def test_floor_and_ceil_of_negative_values():
    value = parse_decimal("-2.25")
    assert decimals.floor(value) == -3
    assert decimals.ceil(value) == -2


def test_equals_ignores_scale():
    assert decimals.equals(parse_decimal("2.00"), parse_decimal("2"))
    assert not decimals.equals(parse_decimal("2.01"), parse_decimal("2"))


def test_mul_is_exact_and_adds_scales():
    product = decimals.mul(parse_decimal("1.00"), Decimal("0.2"))
    assert product == Decimal("0.2")
    assert product.as_tuple().exponent == -3

    large = parse_decimal("12345678901234567890123456789.99")
    assert decimals.mul(large, Decimal("0.2")) == Decimal("2469135780246913578024691357.998")


def test_mod_detects_quarter_multiples():
    quarter = Decimal("0.25")
    assert decimals.is_zero(decimals.mod(parse_decimal("9.00"), quarter))
    assert decimals.is_zero(decimals.mod(parse_decimal("35.75"), quarter))
    assert decimals.mod(parse_decimal("35.35"), quarter) == Decimal("0.10")


def test_mod_is_floored_for_negative_dividend():
    assert decimals.mod(parse_decimal("-0.10"), Decimal("0.25")) == Decimal("0.15")
    assert decimals.is_zero(decimals.mod(parse_decimal("-0.50"), Decimal("0.25")))


def test_sum_of_tenths_stays_exact():
    total = parse_decimal("0.1") + parse_decimal("0.2")
    assert decimals.equals(total, parse_decimal("0.3"))


def test_int_part_truncates_toward_zero():
    assert decimals.int_part(parse_decimal("3.99")) == 3
    assert decimals.int_part(parse_decimal("-3.99")) == -3
    assert isinstance(decimals.int_part(decimals.ceil(parse_decimal("0.20"))), int)


def test_is_zero():
    assert decimals.is_zero(parse_decimal("0.00"))
    assert decimals.is_zero(parse_decimal("-0"))
    assert not decimals.is_zero(parse_decimal("0.01"))
