from dataclasses import dataclass

from arbprobe.domain.amount import Amount
from arbprobe.enumeration.query_kind import QueryKind
from arbprobe.errors import RpcError

QueryValue = int | Amount | bytes


@dataclass(slots=True)
class QueryResult:
    kind: QueryKind
    value: QueryValue | None = None
    error: RpcError | None = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError(f'{self.kind} result needs exactly one of value or error')

    @property
    def ok(self) -> bool:
        return self.error is None
