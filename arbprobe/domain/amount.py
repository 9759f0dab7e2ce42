from dataclasses import dataclass

from eth_utils import from_wei

from arbprobe.errors import DecodeError
from arbprobe.utils import decimal_to_str, format_units


@dataclass(frozen=True, slots=True)
class Amount:
    """Quantity in the smallest currency unit (wei)."""

    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise DecodeError(f'amount must be an integer, got {self.value!r}')
        if self.value < 0:
            raise DecodeError(f'amount must not be negative, got {self.value}')

    def format(self, decimals: int) -> str:
        """For decimal counts without a unit name; see to_ether and to_gwei."""
        return format_units(self.value, decimals)

    def to_ether(self) -> str:
        return decimal_to_str(from_wei(self.value, 'ether'))

    def to_gwei(self) -> str:
        return decimal_to_str(from_wei(self.value, 'gwei'))

    def __str__(self):
        return str(self.value)
