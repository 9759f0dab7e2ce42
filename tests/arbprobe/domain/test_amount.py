from decimal import Decimal

import pytest

from arbprobe.domain.amount import Amount
from arbprobe.errors import DecodeError
from arbprobe.utils import decimal_to_str


@pytest.mark.parametrize(
    'value, decimals, expected',
    [
        (10**18, 18, '1.0'),
        (0, 18, '0.0'),
        (1, 18, '0.000000000000000001'),
        (5, 0, '5.0'),
        (1_234_567, 6, '1.234567'),
        (123456789012345678901234567890, 18, '123456789012.34567890123456789'),
    ],
)
def test_format_is_exact(value, decimals, expected):
    assert Amount(value).format(decimals) == expected


@pytest.mark.parametrize(
    'value, expected',
    [
        (10**18, '1.0'),
        (0, '0.0'),
        (1, '0.000000000000000001'),
        (1_500_000_000_000_000_000, '1.5'),
        (123456789012345678901234567890, '123456789012.34567890123456789'),
    ],
)
def test_to_ether(value, expected):
    assert Amount(value).to_ether() == expected


@pytest.mark.parametrize(
    'value, expected',
    [
        (100_000_000, '0.1'),
        (12_345_678_901, '12.345678901'),
        (0, '0.0'),
        (1, '0.000000001'),
        (2 * 10**18, '2000000000.0'),
    ],
)
def test_to_gwei(value, expected):
    assert Amount(value).to_gwei() == expected


def test_named_units_agree_with_generic_format():
    amount = Amount(987_654_321_123_456_789)

    assert amount.to_ether() == amount.format(18)
    assert amount.to_gwei() == amount.format(9)
    assert str(amount) == '987654321123456789'


@pytest.mark.parametrize(
    'value, expected',
    [
        (Decimal('1E-18'), '0.000000000000000001'),
        (Decimal('1.000000000000000000'), '1.0'),
        (Decimal('1E+3'), '1000.0'),
        (0, '0.0'),
    ],
)
def test_decimal_to_str(value, expected):
    assert decimal_to_str(value) == expected


@pytest.mark.parametrize('value', [-1, 1.5, '10', True, None])
def test_invalid_amount_is_rejected(value):
    with pytest.raises(DecodeError):
        Amount(value)


def test_negative_decimals_are_rejected():
    with pytest.raises(DecodeError):
        Amount(1).format(-1)
