import logging
from dataclasses import dataclass
from string import Formatter
from typing import Any, Mapping
from urllib.parse import quote

import requests
from pydantic import BaseModel

from steak.config import Settings
from steak.errors import error_for_status
from steak.operations import OPERATIONS, Operation
from steak.schemas import StakeIntentRequest, StakeIntentResponse
from steak.version import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://svc.blockdaemon.com/boss"
DEFAULT_TIMEOUT = 30
USER_AGENT = f"steak/{__version__} (python-requests)"


@dataclass(frozen=True)
class FetchResponse:
    status: int
    data: Any
    headers: Mapping[str, str]


def _expand_path(path: str, params: dict) -> str:
    """Fill `{name}` placeholders from params, consuming the keys it uses."""
    values = {}
    for _, field, _, _ in Formatter().parse(path):
        if field is None:
            continue
        if field not in params:
            raise ValueError(f"Missing path parameter '{field}' for {path}")
        values[field] = quote(str(params.pop(field)), safe="")
    return path.format(**values)


def _decode(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except requests.JSONDecodeError:
        return response.text


class StakingClient:
    """
    Client for the staking API. One method per endpoint, all going through `fetch`.
    Nothing is retried: a failed call raises right away.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "accept": "application/json",
                "user-agent": USER_AGENT,
            }
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "StakingClient":
        return cls(settings.STAKING_API_URL, settings.STAKING_API_TIMEOUT)

    def auth(self, api_key: str) -> "StakingClient":
        self.session.headers["X-API-Key"] = api_key
        return self

    def server(self, url: str):
        self.base_url = url.rstrip("/")

    def config(self, timeout: float | None = None):
        if timeout is not None:
            self.timeout = timeout

    def fetch(
        self,
        path: str,
        method: str,
        body: Any = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> FetchResponse:
        params = dict(metadata or {})
        url = self.base_url + _expand_path(path, params)

        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json")

        logger.debug(f"{method.upper()} {url}")
        response = self.session.request(
            method.upper(),
            url,
            params=params or None,
            json=body,
            timeout=self.timeout,
        )
        data = _decode(response)

        if not response.ok:
            error_cls = error_for_status(response.status_code)
            raise error_cls(
                f"{method.upper()} {path} failed with status {response.status_code}: {data}",
                status=response.status_code,
                body=data,
            )

        return FetchResponse(response.status_code, data, response.headers)

    def create_stake_intent(self, request: StakeIntentRequest, network: str) -> StakeIntentResponse:
        """
        Reserve validators and get back the unsigned deposit transaction.

        The transaction must be sent to `contract_address` with `unsigned_transaction`
        as its data and the full deposit amount as its value.
        """
        response = self.post_ethereum_stake_intent(request, {"network": network})
        return StakeIntentResponse.model_validate(response.data)


def _bind(operation: Operation):
    path, method = operation.path, operation.method

    if operation.has_body and operation.has_metadata:
        def call(self, body, metadata):
            return self.fetch(path, method, body, metadata)
    elif operation.has_body:
        def call(self, body):
            return self.fetch(path, method, body)
    else:
        def call(self, metadata=None):
            return self.fetch(path, method, metadata=metadata)

    call.__name__ = operation.name
    call.__qualname__ = f"StakingClient.{operation.name}"
    call.__doc__ = f"{method.upper()} {path}"
    return call


for _operation in OPERATIONS:
    setattr(StakingClient, _operation.name, _bind(_operation))
