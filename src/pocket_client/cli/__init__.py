"""Pocket CLI - Command-line interface for the Pocket API."""

from pocket_client.cli.app import app

# Import command modules to register them with the app
from pocket_client.cli.commands import auth, items

# Register sub-apps
app.add_typer(auth.app, name="auth", help="Authorization commands.")
app.command("add")(items.add)


def main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main"]
