"""OAuth token models."""

from pydantic import BaseModel, Field


class RequestTokenRequest(BaseModel):
    """Body of the request-token call (first step of the OAuth flow)."""

    consumer_key: str = Field(description="Application consumer key")
    redirect_uri: str = Field(description="URL the user returns to after authorizing")


class AuthorizeRequest(BaseModel):
    """Body of the token exchange call (final step of the OAuth flow)."""

    consumer_key: str = Field(description="Application consumer key")
    code: str = Field(description="Authorized request token")


class AuthorizeResponse(BaseModel):
    """Access token returned by the token exchange."""

    access_token: str = Field(description="Permanent access token")
    username: str = Field(default="", description="Pocket username, may be empty")
