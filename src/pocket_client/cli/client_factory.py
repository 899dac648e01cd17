"""Client factory for CLI commands."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from pocket_client.client import PocketClient

if TYPE_CHECKING:
    from pocket_client.cli.config import CLIConfig


@asynccontextmanager
async def get_client(config: CLIConfig) -> AsyncGenerator[PocketClient]:
    """Create a PocketClient for CLI use with a pooled connection.

    Usage:
        async with get_client(cli_config) as client:
            await client.add(item)
    """
    client = PocketClient(config.load_consumer_key())

    async with client:
        yield client
