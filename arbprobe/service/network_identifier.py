from types import MappingProxyType

from arbprobe.domain.network_info import NetworkInfo
from arbprobe.misc.info import (
    ARBITRUM_GOERLI_CHAIN_ID,
    ARBITRUM_NOVA_CHAIN_ID,
    ARBITRUM_ONE_CHAIN_ID,
    ARBITRUM_SEPOLIA_CHAIN_ID,
)

UNKNOWN_NETWORK_LABEL = 'Unknown Network'

NETWORKS = MappingProxyType(
    {
        info.chain_id: info
        for info in (
            NetworkInfo(
                chain_id=ARBITRUM_SEPOLIA_CHAIN_ID,
                label='Arbitrum Sepolia Testnet',
                is_production=False,
                notes='primary target network',
            ),
            NetworkInfo(
                chain_id=ARBITRUM_GOERLI_CHAIN_ID,
                label='Arbitrum Goerli Testnet',
                is_production=False,
                notes='deprecated; superseded by Sepolia',
            ),
            NetworkInfo(
                chain_id=ARBITRUM_NOVA_CHAIN_ID,
                label='Arbitrum Nova',
                is_production=True,
                notes='data-availability-optimized chain',
            ),
            NetworkInfo(
                chain_id=ARBITRUM_ONE_CHAIN_ID,
                label='Arbitrum One',
                is_production=True,
                notes='mainnet; real-asset risk',
            ),
        )
    }
)


def identify(chain_id: int) -> NetworkInfo:
    """Never fails: chains missing from NETWORKS get an explicit 'Unknown Network' entry."""
    info = NETWORKS.get(chain_id)
    if info is not None:
        return info
    return NetworkInfo(
        chain_id=chain_id,
        label=UNKNOWN_NETWORK_LABEL,
        is_production=None,
        notes='no classification available',
    )
