import pytest

from arbprobe.domain.address import Address
from arbprobe.errors import DecodeError
from tests.helpers import CHECKSUMMED_ADDRESSES, ZERO_ADDRESS


@pytest.mark.parametrize('checksummed', CHECKSUMMED_ADDRESSES)
def test_checksummed_address_survives_parse_and_render(checksummed):
    address = Address.from_hex(checksummed)

    assert len(address.raw) == 20
    assert address.to_hex() == checksummed
    assert str(address) == checksummed


@pytest.mark.parametrize('checksummed', CHECKSUMMED_ADDRESSES)
def test_lower_and_upper_case_input_is_accepted(checksummed):
    lower = Address.from_hex(checksummed.lower())
    upper = Address.from_hex('0x' + checksummed[2:].upper())

    assert lower == upper == Address.from_hex(checksummed)
    assert lower.to_hex() == checksummed


def test_equality_and_hash_use_raw_bytes():
    first, second = CHECKSUMMED_ADDRESSES[:2]

    balances = {Address.from_hex(first): 1}

    assert Address.from_hex(first.lower()) in balances
    assert Address.from_hex(second) not in balances


@pytest.mark.parametrize('checksummed', CHECKSUMMED_ADDRESSES)
def test_unprefixed_input_is_accepted(checksummed):
    assert Address.from_hex(checksummed[2:]) == Address.from_hex(checksummed)
    assert Address.from_hex(checksummed[2:]).to_hex() == checksummed
    assert Address.from_hex(checksummed[2:].lower()).to_hex() == checksummed


def test_zero_address():
    assert Address.zero().to_hex() == ZERO_ADDRESS
    assert Address.zero() == Address.from_hex(ZERO_ADDRESS)


@pytest.mark.parametrize(
    'value',
    [
        '',
        '0x',
        '0x123',
        '0x' + 'ab' * 21,
        '0x' + 'zz' * 20,
        'not an address',
        # last character flipped to upper case
        '0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAeD',
        None,
        b'\x00' * 20,
    ],
)
def test_invalid_hex_is_rejected(value):
    with pytest.raises(DecodeError):
        Address.from_hex(value)


@pytest.mark.parametrize('raw', [b'', b'\x01' * 19, b'\x01' * 21, 'a' * 20])
def test_raw_value_must_be_20_bytes(raw):
    with pytest.raises(DecodeError):
        Address(raw)


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        Address.from_hex('0x123')
