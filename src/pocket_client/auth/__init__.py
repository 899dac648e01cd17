"""Authorization flow for the Pocket API."""

from pocket_client.auth.oauth import PocketAuth

__all__ = ["PocketAuth"]
