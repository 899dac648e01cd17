"""OAuth authorization flow for the Pocket API."""

import logging

from pocket_client.api.base import BaseAPI
from pocket_client.exceptions import PocketResponseError, PocketValidationError
from pocket_client.models.auth import AuthorizeRequest, AuthorizeResponse, RequestTokenRequest

logger = logging.getLogger(__name__)


class PocketAuth(BaseAPI):
    """Authorization handler for the Pocket API.

    Implements Pocket's three-step flow:
    1. Get request token
    2. User authorization (manual step, in the browser)
    3. Exchange the request token for an access token

    Nothing is stored between steps; the caller carries the tokens.
    """

    async def get_request_token(
        self,
        redirect_url: str,
        *,
        timeout: float | None = None,
    ) -> str:
        """Step 1: Get a request token to start the flow.

        Args:
            redirect_url: URL Pocket sends the user to once they authorize
            timeout: Per-call deadline in seconds

        Returns:
            The request token (Pocket's ``code``)
        """
        if not redirect_url:
            raise PocketValidationError("redirect URL is empty", field="redirect_url")

        request = RequestTokenRequest(
            consumer_key=self.config.consumer_key,
            redirect_uri=redirect_url,
        )
        values = await self._request(
            self.config.request_token_endpoint,
            request,
            timeout=timeout,
        )

        code = values.get("code", "")
        if not code:
            raise PocketResponseError("empty request token in API response", field="code")

        logger.debug("Obtained request token")
        return code

    def get_authorization_url(self, request_token: str, redirect_url: str) -> str:
        """Step 2: Build the URL the user visits to authorize the application.

        Both values are substituted as given, without further encoding.
        """
        if not request_token:
            raise PocketValidationError("empty request token", field="request_token")
        if not redirect_url:
            raise PocketValidationError("empty redirect URL", field="redirect_url")

        return self.config.authorize_url_template.format(
            token=request_token,
            redirect_url=redirect_url,
        )

    async def authorize(
        self,
        request_token: str,
        *,
        timeout: float | None = None,
    ) -> AuthorizeResponse:
        """Step 3: Exchange an authorized request token for an access token.

        Args:
            request_token: Token from get_request_token, after the user approved it
            timeout: Per-call deadline in seconds

        Returns:
            AuthorizeResponse with the access token and username
        """
        if not request_token:
            raise PocketValidationError("empty request token", field="request_token")

        request = AuthorizeRequest(consumer_key=self.config.consumer_key, code=request_token)
        values = await self._request(self.config.authorize_endpoint, request, timeout=timeout)

        access_token = values.get("access_token", "")
        if not access_token:
            raise PocketResponseError(
                "empty access token in API response",
                field="access_token",
            )

        return AuthorizeResponse(access_token=access_token, username=values.get("username", ""))
