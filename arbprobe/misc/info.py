from arbprobe.domain.endpoint import Endpoint

ARBITRUM_SEPOLIA_CHAIN_ID = 421614
ARBITRUM_GOERLI_CHAIN_ID = 421613
ARBITRUM_NOVA_CHAIN_ID = 42170
ARBITRUM_ONE_CHAIN_ID = 42161

# public endpoints, probed in this order
KNOWN_ENDPOINTS = (
    Endpoint(name='Arbitrum Sepolia', url='https://sepolia-rollup.arbitrum.io/rpc'),
    Endpoint(name='Arbitrum Goerli', url='https://goerli-rollup.arbitrum.io/rpc'),
    Endpoint(name='Arbitrum Nova', url='https://nova.arbitrum.io/rpc'),
    Endpoint(name='Arbitrum One', url='https://arb1.arbitrum.io/rpc'),
)

ZERO_ADDRESS = '0x0000000000000000000000000000000000000000'
