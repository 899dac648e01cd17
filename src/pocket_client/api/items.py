"""Items API endpoints."""

from pocket_client.api.base import BaseAPI
from pocket_client.models.items import AddInput


class ItemsAPI(BaseAPI):
    """Pocket Add API.

    Saves URLs to the authenticated user's list.
    """

    async def add(self, item: AddInput, *, timeout: float | None = None) -> None:
        """Add a new item to the user's list.

        Args:
            item: URL, optional title and tags, and the user's access token
            timeout: Per-call deadline in seconds

        Raises:
            PocketValidationError: If the URL or access token is empty
        """
        item.validate_required()

        request = item.to_request(self.config.consumer_key)
        await self._request(self.config.add_endpoint, request, timeout=timeout)
