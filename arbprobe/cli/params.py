import click

from arbprobe.domain.address import Address
from arbprobe.errors import DecodeError


class AddressParamType(click.ParamType):
    name = 'address'

    def convert(self, value, param, ctx):
        if isinstance(value, Address):
            return value
        try:
            return Address.from_hex(value)
        except DecodeError as e:
            self.fail(str(e), param, ctx)


ADDRESS = AddressParamType()
