from dataclasses import dataclass, field

from arbprobe.domain.address import Address
from arbprobe.domain.amount import Amount
from arbprobe.domain.endpoint import Endpoint
from arbprobe.domain.network_info import NetworkInfo
from arbprobe.domain.query_result import QueryResult
from arbprobe.errors import ProbeError


@dataclass(slots=True)
class ScanAttempt:
    endpoint: Endpoint
    chain_id: int | None = None
    network: NetworkInfo | None = None
    error: ProbeError | None = None
    # block number and gas price, only collected for the matching endpoint
    details: list[QueryResult] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(slots=True)
class ScanReport:
    target_chain_id: int
    attempts: list[ScanAttempt] = field(default_factory=list)
    matched: ScanAttempt | None = None

    @property
    def failures(self) -> list[ScanAttempt]:
        return [attempt for attempt in self.attempts if attempt.failed]


@dataclass(slots=True)
class DetailedReport:
    endpoint: Endpoint
    expected_chain_id: int
    chain_id: int
    network: NetworkInfo
    block_number: int
    gas_price: Amount
    balance_address: Address
    balance: Amount
    contract_address: Address
    code: QueryResult

    @property
    def on_expected_chain(self) -> bool:
        return self.chain_id == self.expected_chain_id
