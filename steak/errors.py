class SteakError(Exception):
    pass


class UnsupportedNetworkError(SteakError):
    def __init__(self, network: str):
        self.network = network
        super().__init__(f"Network {network} not supported")


class StakingAPIError(SteakError):
    """Non-2xx response from the staking API."""

    status: int
    body: object

    def __init__(self, *args, status: int, body: object = None):
        self.status = status
        self.body = body
        super().__init__(*args)


# Invalid request.
class InvalidRequestError(StakingAPIError):
    pass


# Header 'X-API-Key' missing or rejected.
class AuthenticationError(StakingAPIError):
    pass


class NotFoundError(StakingAPIError):
    pass


class InternalServerError(StakingAPIError):
    pass


# Insufficient validators available to process the stake intent.
class InsufficientValidatorsError(StakingAPIError):
    pass


STATUS_ERRORS = {
    400: InvalidRequestError,
    401: AuthenticationError,
    404: NotFoundError,
    500: InternalServerError,
    503: InsufficientValidatorsError,
}


def error_for_status(status: int) -> type[StakingAPIError]:
    return STATUS_ERRORS.get(status, StakingAPIError)
