"""Saved item models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pocket_client.exceptions import PocketValidationError


class AddRequest(BaseModel):
    """Body of the add call.

    Empty title and tags are left out of the serialized body.
    """

    url: str
    title: str | None = None
    tags: str | None = None
    access_token: str
    consumer_key: str


class AddInput(BaseModel):
    """Data needed to create a new item in the user's list."""

    url: str = Field(default="", description="URL of the item to save")
    title: str = Field(default="", description="Item title, used when Pocket can't parse one")
    tags: list[str] = Field(default_factory=list, description="Tags to apply to the item")
    access_token: str = Field(default="", description="User access token")

    def validate_required(self) -> None:
        """Check required fields before any request is made."""
        if not self.url:
            raise PocketValidationError("required URL is empty", field="url")
        if not self.access_token:
            raise PocketValidationError("access token is empty", field="access_token")

    def to_request(self, consumer_key: str) -> AddRequest:
        """Flatten into the request body, joining tags with commas."""
        return AddRequest(
            url=self.url,
            title=self.title or None,
            tags=",".join(self.tags) or None,
            access_token=self.access_token,
            consumer_key=consumer_key,
        )
