from .api import FetchResponse, StakingClient  # noqa: F401
from .chain import ChainClient  # noqa: F401
from .config import NETWORK_CONTRACTS, Settings, load_settings, resolve_contract_address  # noqa: F401
from .errors import (  # noqa: F401
    AuthenticationError,
    InsufficientValidatorsError,
    InternalServerError,
    InvalidRequestError,
    NotFoundError,
    StakingAPIError,
    SteakError,
    UnsupportedNetworkError,
)
from .flow import FlowResult, run  # noqa: F401
from .version import __version__  # noqa: F401
