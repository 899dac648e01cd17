"""Main Pocket client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from pocket_client.api.items import ItemsAPI
from pocket_client.auth import PocketAuth
from pocket_client.config import PocketConfig

if TYPE_CHECKING:
    from types import TracebackType

    from pocket_client.models.auth import AuthorizeResponse
    from pocket_client.models.items import AddInput


class PocketClient:
    """Pocket API client.

    Provides the authorization flow and item creation behind one object.
    The configuration is read-only, so one client may be shared by
    concurrent tasks.

    Usage (context manager - recommended for connection pooling):
        async with PocketClient("consumer-key") as client:
            token = await client.get_request_token("https://example.com/done")
            print(client.get_authorization_url(token, "https://example.com/done"))
            ...
            auth = await client.authorize(token)
            await client.add(AddInput(url="https://example.com", access_token=auth.access_token))

    Usage (external HTTP client - shared across integrations):
        http_client = httpx.AsyncClient(timeout=5.0)
        client = PocketClient("consumer-key", http_client=http_client)
        # Client uses shared pool, doesn't close it

    Usage (no pooling - creates connection per request):
        client = PocketClient("consumer-key")
        await client.add(item)  # Per-request connection
    """

    def __init__(
        self,
        consumer_key: str | PocketConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            consumer_key: Application consumer key, or a full PocketConfig
            http_client: Optional httpx.AsyncClient for connection pooling.
                        If provided, the client will use this pool and NOT close it.

        Raises:
            PocketValidationError: If the consumer key is empty
        """
        if isinstance(consumer_key, PocketConfig):
            self.config = consumer_key
        else:
            self.config = PocketConfig(consumer_key=consumer_key)

        # HTTP client management
        self._http_client = http_client
        self._owns_http_client = http_client is None  # We manage lifecycle if not provided

        # Initialize API modules
        self.auth = PocketAuth(self.config, http_client)
        self.items = ItemsAPI(self.config, http_client)

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Update HTTP client on all API modules."""
        self._http_client = http_client
        self.auth.set_http_client(http_client)
        self.items.set_http_client(http_client)

    async def open(self) -> None:
        """Open connection pool for HTTP requests.

        Only needed if not using context manager or external http_client.
        """
        if self._http_client is None and self._owns_http_client:
            http_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._set_http_client(http_client)

    async def close(self) -> None:
        """Close connection pool.

        Only closes the pool if this client owns it (not external).
        """
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> PocketClient:
        """Async context manager entry - opens connection pool."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes connection pool."""
        await self.close()

    @classmethod
    def from_env(cls) -> PocketClient:
        """Create client from environment variables.

        Expects:
        - POCKET_CONSUMER_KEY
        """
        return cls(PocketConfig.from_env())

    @property
    def consumer_key(self) -> str:
        return self.config.consumer_key

    async def get_request_token(self, redirect_url: str, *, timeout: float | None = None) -> str:
        """Obtain the request token used to authorize a user."""
        return await self.auth.get_request_token(redirect_url, timeout=timeout)

    def get_authorization_url(self, request_token: str, redirect_url: str) -> str:
        """Build the URL the user visits to approve the request token."""
        return self.auth.get_authorization_url(request_token, redirect_url)

    async def authorize(
        self,
        request_token: str,
        *,
        timeout: float | None = None,
    ) -> AuthorizeResponse:
        """Exchange an approved request token for an access token."""
        return await self.auth.authorize(request_token, timeout=timeout)

    async def add(self, item: AddInput, *, timeout: float | None = None) -> None:
        """Create a new item in the user's Pocket list."""
        await self.items.add(item, timeout=timeout)
