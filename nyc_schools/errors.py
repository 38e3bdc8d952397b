"""Errors raised by the HTTP client and the data service."""


class ServiceError(Exception):
    """Base class for everything the data layer can fail with."""

    message = "Request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidRequestTarget(ServiceError):
    """The base URL or query could not be turned into a request URL."""

    message = "Cannot build request target"


class TransportFailure(ServiceError):
    """DNS, connection or timeout failure. The original exception is chained."""

    message = "Network request failed"


class InvalidResponse(ServiceError):
    message = "Invalid response"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeFailure(ServiceError):
    message = "Malformed response body"
