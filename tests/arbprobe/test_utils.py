import pytest

from arbprobe.errors import RpcError
from arbprobe.utils import format_units, rpc_response_to_result
from tests.helpers import rpc_error, rpc_result


def test_rpc_response_to_result_returns_result():
    assert rpc_response_to_result(rpc_result('0x66eee'), 'eth_chainId') == '0x66eee'


def test_rpc_response_to_result_raises_on_error_object():
    with pytest.raises(RpcError) as exc_info:
        rpc_response_to_result(rpc_error(-32000, 'header not found'), 'eth_getBalance')

    assert exc_info.value.method == 'eth_getBalance'
    assert exc_info.value.code == -32000
    assert exc_info.value.message == 'header not found'
    assert str(exc_info.value) == 'eth_getBalance: header not found (code -32000)'


@pytest.mark.parametrize(
    'response',
    [
        {'jsonrpc': '2.0', 'id': 1},
        {'jsonrpc': '2.0', 'id': 1, 'result': None},
        {'jsonrpc': '2.0', 'id': 1, 'error': 'boom'},
        [rpc_result('0x1')],
        'not json',
        None,
    ],
)
def test_rpc_response_to_result_raises_on_malformed_response(response):
    with pytest.raises(RpcError):
        rpc_response_to_result(response, 'eth_chainId')


def test_format_units_without_decimals():
    assert format_units(42, 0) == '42.0'
