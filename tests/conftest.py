import json

import pytest
import requests

from steak.config import Settings

# Well-known development key (hardhat / anvil account #0), never funded on real networks.
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
SENDER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
RECEIVER = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
HOLESKY_CONTRACT = "0x0b6e07c5ead5596c1f26ca2f6b97050cec853671"


@pytest.fixture
def make_settings():
    def _make(**overrides):
        values = {
            "NETWORK": "holesky",
            "EXECUTION_API_KEY": "exec-key",
            "STAKING_API_KEY": "staking-key",
            "PRIVATE_KEY": PRIVATE_KEY,
            "RECEIVER_ADDRESS": RECEIVER,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


def make_response(status: int, payload=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = b"" if payload is None else json.dumps(payload).encode()
    response.headers["content-type"] = "application/json"
    return response
