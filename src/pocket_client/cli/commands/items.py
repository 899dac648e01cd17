"""Item commands."""

import typer

from pocket_client.cli.async_runner import async_command
from pocket_client.cli.client_factory import get_client
from pocket_client.cli.config import CLIConfig
from pocket_client.cli.formatters import print_success
from pocket_client.models.items import AddInput


@async_command
async def add(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to save."),
    title: str = typer.Option(
        "",
        "--title",
        "-t",
        help="Title to use if Pocket can't find one on the page.",
    ),
    tags: list[str] = typer.Option(
        [],
        "--tag",
        help="Tag to apply (repeatable).",
    ),
    access_token: str = typer.Option(
        "",
        "--access-token",
        "-a",
        help="User access token from 'pocket-cli auth login'.",
        envvar="POCKET_ACCESS_TOKEN",
    ),
) -> None:
    """Save a URL to your Pocket list."""
    config: CLIConfig = ctx.obj

    item = AddInput(url=url, title=title, tags=tags, access_token=access_token)

    async with get_client(config) as client:
        await client.add(item)

    print_success(f"Saved {url}")
