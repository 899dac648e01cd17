"""Tests for error handling and exception classes."""

import httpx
import pytest
from httpx import Response

from pocket_client import AddInput, PocketClient, PocketConfig
from pocket_client.api.base import BaseAPI
from pocket_client.exceptions import (
    PocketAPIError,
    PocketError,
    PocketResponseError,
    PocketSerializationError,
    PocketTransportError,
    PocketValidationError,
)


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_pocket_error_is_base(self) -> None:
        """All exceptions should inherit from PocketError."""
        assert issubclass(PocketAPIError, PocketError)
        assert issubclass(PocketResponseError, PocketError)
        assert issubclass(PocketSerializationError, PocketError)
        assert issubclass(PocketTransportError, PocketError)
        assert issubclass(PocketValidationError, PocketError)


class TestPocketError:
    """Tests for base PocketError."""

    def test_stores_message(self) -> None:
        """Should store the error message."""
        error = PocketError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"


class TestPocketAPIError:
    """Tests for PocketAPIError."""

    def test_stores_status_and_headers(self) -> None:
        """Should store status code and header details."""
        error = PocketAPIError(
            "API Error: Invalid consumer key.",
            status_code=403,
            x_error="Invalid consumer key.",
            error_code="152",
        )

        assert error.status_code == 403
        assert error.x_error == "Invalid consumer key."
        assert error.error_code == "152"

    def test_can_catch_as_pocket_error(self) -> None:
        """Should be catchable as PocketError."""
        with pytest.raises(PocketError):
            raise PocketAPIError("API Error: ", status_code=500)


class TestPocketValidationError:
    """Tests for PocketValidationError."""

    def test_stores_field(self) -> None:
        """Should store the invalid field name."""
        error = PocketValidationError("required URL is empty", field="url")

        assert error.field == "url"
        assert error.message == "required URL is empty"

    def test_field_is_optional(self) -> None:
        """Field should be None by default."""
        assert PocketValidationError("Validation failed").field is None


class TestHandleResponse:
    """Tests for BaseAPI._handle_response method."""

    @pytest.fixture
    def base_api(self) -> BaseAPI:
        return BaseAPI(PocketConfig(consumer_key="key"))

    def test_returns_form_values_on_200(self, base_api: BaseAPI) -> None:
        """Should parse the form-encoded body."""
        response = Response(200, text="access_token=abc&username=user%40example.com")

        result = base_api._handle_response(response)

        assert result == {"access_token": "abc", "username": "user@example.com"}

    def test_keeps_blank_values(self, base_api: BaseAPI) -> None:
        """Blank values should be present as empty strings."""
        result = base_api._handle_response(Response(200, text="code="))

        assert result == {"code": ""}

    def test_returns_empty_dict_for_empty_body(self, base_api: BaseAPI) -> None:
        """Should return empty dict when the body is empty."""
        assert base_api._handle_response(Response(200)) == {}

    def test_uses_first_value_for_repeated_keys(self, base_api: BaseAPI) -> None:
        """Should return the first value of a repeated key."""
        result = base_api._handle_response(Response(200, text="code=first&code=second"))

        assert result == {"code": "first"}

    def test_raises_api_error_with_x_error(self, base_api: BaseAPI) -> None:
        """Should build the message from the X-Error header."""
        response = Response(
            400,
            headers={"X-Error": "Missing consumer key.", "X-Error-Code": "138"},
        )

        with pytest.raises(PocketAPIError) as exc_info:
            base_api._handle_response(response)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "API Error: Missing consumer key."
        assert exc_info.value.error_code == "138"

    def test_raises_api_error_without_header(self, base_api: BaseAPI) -> None:
        """Should still raise when the server sends no X-Error header."""
        with pytest.raises(PocketAPIError) as exc_info:
            base_api._handle_response(Response(500, text="Internal Server Error"))

        assert exc_info.value.status_code == 500
        assert exc_info.value.x_error is None

    def test_non_200_success_status_is_an_error(self, base_api: BaseAPI) -> None:
        """Only 200 counts as success."""
        with pytest.raises(PocketAPIError):
            base_api._handle_response(Response(204))


class TestTransportErrors:
    """Tests for network failures during dispatch."""

    @staticmethod
    def _pool_raising(exc: Exception) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    async def test_connect_error_is_transport_error(self) -> None:
        """Connection failures should raise PocketTransportError."""
        async with self._pool_raising(httpx.ConnectError("connection refused")) as http_client:
            client = PocketClient("key", http_client=http_client)

            with pytest.raises(PocketTransportError) as exc_info:
                await client.add(AddInput(url="http://example.link", access_token="token"))

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_timeout_is_transport_error(self) -> None:
        """Timeouts should raise PocketTransportError."""
        async with self._pool_raising(httpx.ReadTimeout("timed out")) as http_client:
            client = PocketClient("key", http_client=http_client)

            with pytest.raises(PocketTransportError) as exc_info:
                await client.authorize("token")

        assert "timed out" in exc_info.value.message
