"""Pocket API client library.

A typed, async Python client for Pocket's authorization flow and Add API.

Example:
    from pocket_client import AddInput, PocketClient

    async with PocketClient("your_consumer_key") as client:
        # Step 1: request token
        request_token = await client.get_request_token("https://example.com/done")

        # Step 2: send the user to approve it
        print(client.get_authorization_url(request_token, "https://example.com/done"))
        input("Press Enter after authorizing...")

        # Step 3: exchange for an access token
        auth = await client.authorize(request_token)

        # Use the access token
        await client.add(
            AddInput(
                url="https://example.com/article",
                tags=["python", "later"],
                access_token=auth.access_token,
            )
        )
"""

from pocket_client.client import PocketClient
from pocket_client.config import PocketConfig
from pocket_client.exceptions import (
    PocketAPIError,
    PocketError,
    PocketResponseError,
    PocketSerializationError,
    PocketTransportError,
    PocketValidationError,
)
from pocket_client.models import AddInput, AuthorizeResponse

__version__ = "0.1.0"

__all__ = [
    # Main client
    "PocketClient",
    "PocketConfig",
    # Models
    "AddInput",
    "AuthorizeResponse",
    # Exceptions
    "PocketAPIError",
    "PocketError",
    "PocketResponseError",
    "PocketSerializationError",
    "PocketTransportError",
    "PocketValidationError",
]
