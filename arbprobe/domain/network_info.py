from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NetworkInfo:
    chain_id: int
    label: str
    # None when the chain is not in the table
    is_production: bool | None
    notes: str

    @property
    def is_known(self) -> bool:
        return self.is_production is not None
