from unittest.mock import Mock

from web3 import HTTPProvider

SEPOLIA_CHAIN_ID = 421614
ZERO_ADDRESS = '0x0000000000000000000000000000000000000000'
# EIP-55 test vectors
CHECKSUMMED_ADDRESSES = (
    '0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed',
    '0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359',
    '0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB',
    '0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb',
)
CONTRACT_CODE = '0x6080604052348015600f57600080fd5b50'


def rpc_result(result, request_id=1):
    return {'jsonrpc': '2.0', 'id': request_id, 'result': result}


def rpc_error(code, message, request_id=1):
    return {'jsonrpc': '2.0', 'id': request_id, 'error': {'code': code, 'message': message}}


def make_provider(
    chain_id=SEPOLIA_CHAIN_ID,
    block_number=123,
    gas_price=100_000_000,
    balances=None,
    code=None,
    failures=None,
    endpoint_uri='https://rpc.test',
):
    """
    A fake HTTPProvider answering the read-only eth_* methods from the given state.

    balances and code are keyed by lower-case address, absent accounts have a
    zero balance and no code. failures maps a method name to either an exception
    to raise or a raw response to return.
    """
    balances = balances or {}
    code = code or {}
    failures = failures or {}

    def handle_rpc_request(method, params):
        if method in failures:
            failure = failures[method]
            if isinstance(failure, BaseException):
                raise failure
            return failure

        match method, params:
            case 'eth_chainId', []:
                return rpc_result(hex(chain_id))
            case 'eth_blockNumber', []:
                return rpc_result(hex(block_number))
            case 'eth_gasPrice', []:
                return rpc_result(hex(gas_price))
            case 'eth_getBalance', [str(address), 'latest']:
                return rpc_result(hex(balances.get(address.lower(), 0)))
            case 'eth_getCode', [str(address), 'latest']:
                return rpc_result(code.get(address.lower(), '0x'))
            case _:
                raise AssertionError(f'Unexpected request: {method} {params}')

    provider = Mock(spec=HTTPProvider)
    provider.endpoint_uri = endpoint_uri
    provider.make_request.side_effect = handle_rpc_request
    return provider
