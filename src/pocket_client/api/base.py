"""Base API client with common functionality."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING
from urllib.parse import parse_qs

import httpx

from pocket_client.exceptions import (
    PocketAPIError,
    PocketSerializationError,
    PocketTransportError,
)

if TYPE_CHECKING:
    from pydantic import BaseModel

    from pocket_client.config import PocketConfig

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=UTF8"


class BaseAPI:
    """Base class for Pocket API endpoints.

    Every Pocket call is a POST with a JSON body whose response is
    URL-encoded form data. This class owns that round trip and the
    classification of everything that can go wrong with it.
    """

    def __init__(
        self,
        config: PocketConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._http_client = http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    async def _request(
        self,
        endpoint: str,
        payload: BaseModel,
        *,
        timeout: float | None = None,
    ) -> dict[str, str]:
        """POST a payload to an endpoint and parse the form-encoded reply.

        Args:
            endpoint: API endpoint (e.g., "/oauth/request")
            payload: Request body model, serialized to JSON
            timeout: Per-call deadline in seconds (defaults to config timeout)

        Returns:
            Response form values, first value per key

        Raises:
            PocketSerializationError: If the payload can't be encoded
            PocketTransportError: On network failure or timeout
            PocketAPIError: On non-200 response
        """
        url = self.config.url_for(endpoint)
        content = self._encode(payload)
        headers = {"Content-Type": JSON_CONTENT_TYPE}
        request_timeout = timeout if timeout is not None else self.config.timeout

        logger.debug("Request: POST %s", url)

        try:
            if self._http_client is not None:
                # Use shared connection pool
                response = await self._http_client.post(
                    url,
                    content=content,
                    headers=headers,
                    timeout=request_timeout,
                )
            else:
                # Fallback: create per-request client (no pooling)
                async with httpx.AsyncClient(timeout=request_timeout) as client:
                    response = await client.post(url, content=content, headers=headers)
        except httpx.TimeoutException as e:
            raise PocketTransportError(f"Request to {endpoint} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise PocketTransportError(f"Failed to send request to {endpoint}: {e}") from e

        logger.debug("Response: %s %s", response.status_code, url)

        return self._handle_response(response)

    def _encode(self, payload: BaseModel) -> bytes:
        """Serialize a request model to a JSON body."""
        try:
            body = payload.model_dump(exclude_none=True)
            return json.dumps(body).encode()
        except (TypeError, ValueError) as e:
            raise PocketSerializationError(f"failed to marshal json: {e}") from e

    def _handle_response(self, response: httpx.Response) -> dict[str, str]:
        """Handle API response, raising appropriate errors."""
        if response.status_code != 200:
            x_error = response.headers.get(self.config.error_header)
            raise PocketAPIError(
                f"API Error: {x_error or ''}",
                status_code=response.status_code,
                x_error=x_error,
                error_code=response.headers.get(self.config.error_code_header),
            )

        values = parse_qs(response.text, keep_blank_values=True)
        return {key: items[0] for key, items in values.items()}
