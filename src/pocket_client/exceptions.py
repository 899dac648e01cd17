"""Typed exceptions for the Pocket API client."""


class PocketError(Exception):
    """Base exception for all Pocket client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PocketValidationError(PocketError):
    """Request validation error before sending to API."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class PocketSerializationError(PocketError):
    """Request payload could not be encoded as JSON."""


class PocketTransportError(PocketError):
    """Network failure, timeout or cancelled connection."""


class PocketAPIError(PocketError):
    """Non-2xx API response.

    Pocket reports the reason in the X-Error header rather than the body.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        x_error: str | None = None,
        error_code: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.x_error = x_error
        self.error_code = error_code
        super().__init__(message)


class PocketResponseError(PocketError):
    """Successful response that lacks an expected field."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field  # e.g., "code", "access_token"
        super().__init__(message)
