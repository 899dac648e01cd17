"""Pydantic models for Pocket API payloads."""

from pocket_client.models.auth import AuthorizeRequest, AuthorizeResponse, RequestTokenRequest
from pocket_client.models.items import AddInput, AddRequest

__all__ = [
    "AddInput",
    "AddRequest",
    "AuthorizeRequest",
    "AuthorizeResponse",
    "RequestTokenRequest",
]
