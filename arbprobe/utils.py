# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


from decimal import Decimal

from arbprobe.errors import DecodeError, RpcError


def rpc_response_to_result(response, method=''):
    if not isinstance(response, dict):
        raise RpcError(method, f'bad rpc response: expected dict, got {type(response)}')

    error = response.get('error')
    if error is not None:
        if isinstance(error, dict):
            raise RpcError(method, str(error.get('message', error)), error.get('code'))
        raise RpcError(method, str(error))

    result = response.get('result')
    if result is None:
        raise RpcError(
            method, f'result is None in response {response}. Make sure the node is synced.'
        )
    return result


def format_units(value: int, decimals: int) -> str:
    """
    Exact fixed-point rendering of an integer amount, e.g. (10**18, 18) -> '1.0'.

    At least one fractional digit is kept, trailing zeros beyond it are dropped.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f'cannot format {value!r}: expected an integer')
    if value < 0:
        raise DecodeError(f'cannot format negative amount {value}')
    if decimals < 0:
        raise DecodeError(f'decimals must be greater or equal to 0, got {decimals}')

    whole, fraction = divmod(value, 10**decimals)
    fraction_digits = str(fraction).rjust(decimals, '0').rstrip('0') if decimals else ''
    return f'{whole}.{fraction_digits or "0"}'


def decimal_to_str(value) -> str:
    """Plain notation with at least one fractional digit: Decimal('1E-18') -> '0.000000000000000001'."""
    whole, _, fraction = format(Decimal(value), 'f').partition('.')
    return f'{whole}.{fraction.rstrip("0") or "0"}'
