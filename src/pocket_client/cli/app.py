"""Main Typer application."""

import logging

import typer

from pocket_client.cli.config import CLIConfig

# Create main app
app = typer.Typer(
    name="pocket-cli",
    help="Pocket API command-line interface.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    consumer_key: str | None = typer.Option(
        None,
        "--consumer-key",
        "-k",
        help="Pocket application consumer key.",
        envvar="POCKET_CONSUMER_KEY",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
) -> None:
    """Pocket API command-line interface."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    ctx.obj = CLIConfig(consumer_key=consumer_key)
