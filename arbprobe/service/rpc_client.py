import logging
from collections.abc import Callable

import requests
from eth_utils import is_0x_prefixed, to_bytes, to_int
from web3 import HTTPProvider
from web3.exceptions import Web3Exception

from arbprobe.config.envs import envs
from arbprobe.domain.address import Address
from arbprobe.domain.amount import Amount
from arbprobe.domain.endpoint import Endpoint
from arbprobe.domain.query_result import QueryResult
from arbprobe.enumeration.query_kind import ADDRESS_QUERIES, QueryKind
from arbprobe.errors import RpcError
from arbprobe.json_rpc_requests import (
    ETH_BLOCK_NUMBER,
    ETH_CHAIN_ID,
    ETH_GAS_PRICE,
    ETH_GET_BALANCE,
    ETH_GET_CODE,
    generate_get_balance_params,
    generate_get_code_params,
)
from arbprobe.providers.auto import get_provider_from_uri
from arbprobe.utils import rpc_response_to_result

logger = logging.getLogger(__name__)


class RpcClient:
    """
    Read-only view of a single JSON-RPC endpoint.

    Every method issues exactly one request and raises RpcError on any
    failure; nothing is cached or retried.
    """

    def __init__(self, provider: HTTPProvider, endpoint: Endpoint | None = None):
        self.provider = provider
        self.endpoint = endpoint or Endpoint(url=str(provider.endpoint_uri))

    def get_chain_id(self) -> int:
        return self._get_quantity(ETH_CHAIN_ID, [])

    def get_block_number(self) -> int:
        return self._get_quantity(ETH_BLOCK_NUMBER, [])

    def get_gas_price(self) -> Amount:
        return Amount(self._get_quantity(ETH_GAS_PRICE, []))

    def get_balance(self, address: Address) -> Amount:
        """Balance at the latest block; accounts the node has never seen report 0."""
        params = generate_get_balance_params(address.to_hex())
        return Amount(self._get_quantity(ETH_GET_BALANCE, params))

    def get_code(self, address: Address) -> bytes:
        """Empty bytes for an externally-owned or unused address."""
        params = generate_get_code_params(address.to_hex())
        result = self._call(ETH_GET_CODE, params)
        if not isinstance(result, str) or not is_0x_prefixed(result):
            raise RpcError(ETH_GET_CODE, f'expected hex data, got {result!r}')
        try:
            return to_bytes(hexstr=result)
        except ValueError as e:
            raise RpcError(ETH_GET_CODE, f'expected hex data, got {result!r}') from e

    def query(self, kind: QueryKind, address: Address | None = None) -> QueryResult:
        """
        Runs one query and captures an RpcError in the result instead of raising.

        For callers that treat the failure of this particular query as non-fatal.
        """
        if kind in ADDRESS_QUERIES and address is None:
            raise ValueError(f'{kind} query needs an address')

        queries: dict[QueryKind, Callable[[], int | Amount | bytes]] = {
            QueryKind.CHAIN_ID: self.get_chain_id,
            QueryKind.BLOCK_NUMBER: self.get_block_number,
            QueryKind.GAS_PRICE: self.get_gas_price,
            QueryKind.BALANCE: lambda: self.get_balance(address),
            QueryKind.CODE: lambda: self.get_code(address),
        }
        try:
            return QueryResult(kind=kind, value=queries[kind]())
        except RpcError as e:
            logger.info('%s query against %s failed: %s', kind, self.endpoint.url, e)
            return QueryResult(kind=kind, error=e)

    def _get_quantity(self, method, params) -> int:
        result = self._call(method, params)
        if not isinstance(result, str) or not is_0x_prefixed(result):
            raise RpcError(method, f'expected hex quantity, got {result!r}')
        try:
            return to_int(hexstr=result)
        except ValueError as e:
            raise RpcError(method, f'expected hex quantity, got {result!r}') from e

    def _call(self, method, params):
        logger.debug('%s %s -> %s', method, params, self.endpoint.url)
        try:
            response = self.provider.make_request(method, params)
        except requests.Timeout as e:
            raise RpcError(method, f'request timed out: {e}') from e
        except (requests.RequestException, Web3Exception, ValueError) as e:
            raise RpcError(method, f'{type(e).__name__}: {e}') from e
        return rpc_response_to_result(response, method)


def connect(endpoint: Endpoint | str, timeout: int | None = None) -> RpcClient:
    """
    Validates the endpoint URL and builds a client for it. No request is sent.

    Raises EndpointConnectionError on a malformed URL.
    """
    if isinstance(endpoint, str):
        endpoint = Endpoint(url=endpoint)
    if timeout is None:
        timeout = envs.REQUEST_TIMEOUT
    provider = get_provider_from_uri(endpoint.url, timeout=timeout)
    return RpcClient(provider, endpoint)
