"""Async command support for Typer."""

import asyncio
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any, TypeVar

import typer

from pocket_client.exceptions import PocketAPIError, PocketError

T = TypeVar("T")


def _describe_error(e: PocketError) -> str:
    """Build the message shown to the user for a client error."""
    if isinstance(e, PocketAPIError):
        return f"{e.message} (HTTP {e.status_code})"
    return e.message


def async_command(f: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., T]:
    """Decorator to run async Typer commands.

    Client errors are printed and turned into exit status 1.

    Usage:
        @app.command()
        @async_command
        async def my_command(ctx: typer.Context):
            async with get_client(ctx.obj) as client:
                await client.add(item)
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        from pocket_client.cli.formatters import print_error

        try:
            return asyncio.run(f(*args, **kwargs))
        except PocketError as e:
            print_error(_describe_error(e))
            raise typer.Exit(1) from None
        except ValueError as e:
            print_error(str(e))
            raise typer.Exit(1) from None

    return wrapper
