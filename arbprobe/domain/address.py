from dataclasses import dataclass

from eth_typing import ChecksumAddress
from eth_utils import (
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex_address,
    to_canonical_address,
    to_checksum_address,
)

from arbprobe.errors import DecodeError

ADDRESS_LENGTH = 20


@dataclass(frozen=True, slots=True)
class Address:
    """
    A 20-byte account address.

    Equality and hashing use the raw bytes, so the same account parsed from a
    lower-case and a checksummed string compares equal.
    """

    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, bytes) or len(self.raw) != ADDRESS_LENGTH:
            raise DecodeError(f'address must be exactly {ADDRESS_LENGTH} bytes, got {self.raw!r}')

    @classmethod
    def from_hex(cls, value: str) -> 'Address':
        """
        Mixed-case input has to carry a valid EIP-55 checksum, all-lower and
        all-upper case input is taken as is.
        """
        if not isinstance(value, str) or not is_hex_address(value):
            raise DecodeError(f'invalid address {value!r}: expected 40 hex digits')
        if is_checksum_formatted_address(value) and not is_checksum_address(value):
            raise DecodeError(f'invalid address {value!r}: checksum mismatch')
        return cls(to_canonical_address(value))

    @classmethod
    def zero(cls) -> 'Address':
        return cls(b'\x00' * ADDRESS_LENGTH)

    def to_hex(self) -> ChecksumAddress:
        return to_checksum_address(self.raw)

    def __str__(self):
        return self.to_hex()
