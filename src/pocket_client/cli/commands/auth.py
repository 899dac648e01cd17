"""Authorization commands."""

import webbrowser

import typer

from pocket_client.cli.async_runner import async_command
from pocket_client.cli.client_factory import get_client
from pocket_client.cli.config import DEFAULT_REDIRECT_URL, CLIConfig, OutputFormat
from pocket_client.cli.formatters import (
    console,
    format_output,
    print_error,
    print_info,
    print_success,
)
from pocket_client.client import PocketClient
from pocket_client.exceptions import PocketError

app = typer.Typer(no_args_is_help=True)


@app.command("login")
@async_command
async def login(
    ctx: typer.Context,
    redirect_url: str = typer.Option(
        DEFAULT_REDIRECT_URL,
        "--redirect-url",
        "-r",
        help="URL Pocket redirects to after authorization.",
    ),
    no_browser: bool = typer.Option(
        False,
        "--no-browser",
        help="Don't open browser automatically.",
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """Authorize this application with Pocket.

    This command runs the authorization flow:
    1. Gets a request token
    2. Opens browser for Pocket login
    3. Exchanges the request token for an access token

    The access token is printed, not saved.
    """
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        # Step 1: Get request token
        print_info("Requesting token from Pocket...")
        request_token = await client.get_request_token(redirect_url)
        auth_url = client.get_authorization_url(request_token, redirect_url)

        # Step 2: Open browser or show URL
        if no_browser:
            console.print("\nOpen this URL in your browser:")
            console.print(auth_url, soft_wrap=True)
        else:
            print_info("Opening browser for authorization...")
            webbrowser.open(auth_url)
            console.print("\n[dim]If browser didn't open, visit:[/dim]")
            console.print(auth_url, soft_wrap=True)

        console.print()
        typer.prompt(
            "Press Enter after approving access in Pocket",
            default="",
            show_default=False,
        )

        # Step 3: Exchange for access token
        print_info("Exchanging request token for access token...")
        response = await client.authorize(request_token)

    print_success("Authorized successfully!")
    format_output(response, output, title="Pocket Access")


@app.command("url")
def url(
    ctx: typer.Context,
    request_token: str = typer.Argument(..., help="Request token to authorize."),
    redirect_url: str = typer.Option(
        DEFAULT_REDIRECT_URL,
        "--redirect-url",
        "-r",
        help="URL Pocket redirects to after authorization.",
    ),
) -> None:
    """Print the authorization URL for a request token."""
    config: CLIConfig = ctx.obj

    try:
        client = PocketClient(config.load_consumer_key())
        auth_url = client.get_authorization_url(request_token, redirect_url)
    except (ValueError, PocketError) as e:
        print_error(str(e))
        raise typer.Exit(1) from None

    console.print(auth_url, soft_wrap=True)
