from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from steak.errors import UnsupportedNetworkError

# Blockdaemon batch deposit contract per network.
NETWORK_CONTRACTS = {
    "mainnet": "0x3f124c700fb5e741f128e28985267d44f56b242f",
    "holesky": "0x0b6e07c5ead5596c1f26ca2f6b97050cec853671",
}


class NetworkSettings(BaseSettings):
    """Just the network, so an unknown one is rejected before the rest is required."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    NETWORK: str


class Settings(NetworkSettings):
    EXECUTION_API_KEY: str
    STAKING_API_KEY: str
    PRIVATE_KEY: str = Field(repr=False)
    RECEIVER_ADDRESS: str

    EXECUTION_RPC_URL: str = (
        "https://svc.blockdaemon.com/ethereum/{network}/native?apiKey={api_key}"
    )
    STAKING_API_URL: str = "https://svc.blockdaemon.com/boss"
    STAKING_API_TIMEOUT: float = 30

    # In ether; parsed as Decimal so the wei amount is exact.
    TEST_TRANSFER_AMOUNT: Decimal = Decimal("0.000001")

    LOG_LEVEL: str = "INFO"

    @property
    def execution_rpc_url(self) -> str:
        return self.EXECUTION_RPC_URL.format(
            network=self.NETWORK, api_key=self.EXECUTION_API_KEY
        )

    @property
    def contract_address(self) -> str:
        return resolve_contract_address(self.NETWORK)


def resolve_contract_address(network: str) -> str:
    try:
        return NETWORK_CONTRACTS[network]
    except KeyError:
        raise UnsupportedNetworkError(network) from None


def load_settings(**overrides) -> Settings:
    """Read the environment once; pass the result around instead of re-reading os.environ."""
    return Settings(**overrides)
