"""Pocket API client modules."""

from pocket_client.api.base import BaseAPI
from pocket_client.api.items import ItemsAPI

__all__ = ["BaseAPI", "ItemsAPI"]
