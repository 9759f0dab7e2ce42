from pydantic_settings import BaseSettings


class EnvsConfig(BaseSettings):
    PROVIDER_URL: str = 'https://sepolia-rollup.arbitrum.io/rpc'
    TARGET_CHAIN_ID: int = 421614
    # account reported by `query-balance`
    BALANCE_ADDRESS: str = '0x5d8f25f74c09dee91128cb4329e4ce9f14b147ef'
    # example contract for the bytecode check, not a verified token deployment
    CONTRACT_ADDRESS: str = '0x75faf114eafb1bdbe2f0316df893fd58ce46aa4d'
    # seconds
    REQUEST_TIMEOUT: int = 10
    LOGGING_LEVEL: str = 'WARNING'
    SERVICE_NAME: str = 'arbprobe'


envs = EnvsConfig()
