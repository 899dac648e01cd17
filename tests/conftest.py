"""Shared fixtures for client tests."""

import json
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from pocket_client import PocketClient, PocketConfig


@dataclass
class FakePocket:
    """httpx transport handler that records requests and replays one response."""

    status_code: int = 200
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body, headers=self.headers)

    @property
    def last_json(self) -> dict[str, Any]:
        """JSON body of the most recent request."""
        return json.loads(self.requests[-1].content)


@pytest.fixture
def config() -> PocketConfig:
    """Create a test configuration."""
    return PocketConfig(consumer_key="key")


@pytest.fixture
async def make_client(
    config: PocketConfig,
) -> AsyncIterator[Callable[..., tuple[PocketClient, FakePocket]]]:
    """Build clients whose HTTP traffic goes to a FakePocket.

    Every pool created here is closed when the test finishes.
    """
    pools: list[httpx.AsyncClient] = []

    def _make(
        status_code: int = 200,
        body: str = "",
        headers: dict[str, str] | None = None,
    ) -> tuple[PocketClient, FakePocket]:
        fake = FakePocket(status_code=status_code, body=body, headers=headers or {})
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake))
        pools.append(http_client)
        return PocketClient(config, http_client=http_client), fake

    yield _make

    for http_client in pools:
        await http_client.aclose()
