"""Configuration for the Pocket client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from pocket_client.exceptions import PocketValidationError

DEFAULT_TIMEOUT = 5.0


@dataclass(frozen=True, slots=True)
class PocketConfig:
    """Pocket API configuration.

    Every value is fixed for the lifetime of the client that owns it.
    """

    consumer_key: str
    timeout: float = DEFAULT_TIMEOUT

    # API URLs
    base_url: str = field(default="https://getpocket.com/v3", repr=False)
    authorize_url_template: str = field(
        default="https://getpocket.com/auth/authorize?request_token={token}&redirect_uri={redirect_url}",
        repr=False,
    )

    # Endpoints
    request_token_endpoint: str = field(default="/oauth/request", repr=False)
    authorize_endpoint: str = field(default="/oauth/authorize", repr=False)
    add_endpoint: str = field(default="/add", repr=False)

    # Header carrying the error message on non-2xx responses
    error_header: str = field(default="X-Error", repr=False)
    error_code_header: str = field(default="X-Error-Code", repr=False)

    def __post_init__(self) -> None:
        if not self.consumer_key:
            raise PocketValidationError("consumer key is empty", field="consumer_key")

    def url_for(self, endpoint: str) -> str:
        """Get the full URL for an API endpoint."""
        return f"{self.base_url}{endpoint}"

    @classmethod
    def from_env(cls) -> PocketConfig:
        """Create config from environment variables.

        Expected env vars:
        - POCKET_CONSUMER_KEY
        - POCKET_TIMEOUT (optional, seconds)
        """
        consumer_key = os.environ.get("POCKET_CONSUMER_KEY", "")
        if not consumer_key:
            msg = "Missing required environment variable: POCKET_CONSUMER_KEY"
            raise PocketValidationError(msg, field="consumer_key")

        timeout = os.environ.get("POCKET_TIMEOUT")
        if timeout:
            return cls(consumer_key=consumer_key, timeout=float(timeout))
        return cls(consumer_key=consumer_key)
