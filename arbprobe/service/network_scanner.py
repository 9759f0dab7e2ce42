import logging
from collections.abc import Iterable

from arbprobe.domain.address import Address
from arbprobe.domain.endpoint import Endpoint
from arbprobe.domain.scan import DetailedReport, ScanAttempt, ScanReport
from arbprobe.enumeration.query_kind import QueryKind
from arbprobe.errors import EndpointConnectionError, RpcError
from arbprobe.service.network_identifier import identify
from arbprobe.service.rpc_client import RpcClient, connect

logger = logging.getLogger(__name__)


def scan_endpoints(
    endpoints: Iterable[Endpoint],
    target_chain_id: int,
    timeout: int | None = None,
) -> ScanReport:
    """
    Tries the endpoints strictly in order and stops at the first one whose chain
    id equals target_chain_id.

    A failing endpoint is recorded on its attempt and the scan moves on. For the
    matching endpoint block number and gas price are fetched as well, their
    failures are kept in the attempt details.
    """
    report = ScanReport(target_chain_id=target_chain_id)
    for endpoint in endpoints:
        attempt = ScanAttempt(endpoint=endpoint)
        report.attempts.append(attempt)

        try:
            client = connect(endpoint, timeout=timeout)
            attempt.chain_id = client.get_chain_id()
        except (EndpointConnectionError, RpcError) as e:
            logger.warning('Skipping endpoint %s: %s', endpoint, e)
            attempt.error = e
            continue

        attempt.network = identify(attempt.chain_id)
        logger.info('Endpoint %s is on %s', endpoint, attempt.network.label)

        if attempt.chain_id == target_chain_id:
            attempt.details = [
                client.query(QueryKind.BLOCK_NUMBER),
                client.query(QueryKind.GAS_PRICE),
            ]
            report.matched = attempt
            break

    return report


def build_detailed_report(
    client: RpcClient,
    balance_address: Address,
    contract_address: Address,
    expected_chain_id: int,
) -> DetailedReport:
    # only the bytecode lookup is allowed to fail
    chain_id = client.get_chain_id()
    block_number = client.get_block_number()
    gas_price = client.get_gas_price()
    balance = client.get_balance(balance_address)
    code = client.query(QueryKind.CODE, contract_address)

    return DetailedReport(
        endpoint=client.endpoint,
        expected_chain_id=expected_chain_id,
        chain_id=chain_id,
        network=identify(chain_id),
        block_number=block_number,
        gas_price=gas_price,
        balance_address=balance_address,
        balance=balance,
        contract_address=contract_address,
        code=code,
    )
