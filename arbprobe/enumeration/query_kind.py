from enum import Enum, unique


@unique
class QueryKind(str, Enum):
    CHAIN_ID = 'chain_id'
    BLOCK_NUMBER = 'block_number'
    GAS_PRICE = 'gas_price'
    BALANCE = 'balance'
    CODE = 'code'

    def __str__(self):
        return self.value


ADDRESS_QUERIES = (
    QueryKind.BALANCE,
    QueryKind.CODE,
)