"""
Unit Tests for the HTTP Dispatcher

Tests for path expansion, body encoding, response handling and the
error taxonomy.
"""

import logging

import httpx
import pytest
import pytest_asyncio

from line_bot_client import (
    ApiError,
    AuthenticationError,
    BadRequestError,
    InvalidArgumentError,
    LineBotConnectionError,
    LineBotTimeoutError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
)
from line_bot_client.config import DEFAULT_CONFIG, MESSAGING_API_PREFIX, Endpoint, Endpoints
from line_bot_client.dispatcher import AsyncDispatcher, _file_part, expand_path, stringify
from line_bot_client.exceptions import error_for_status


# =============================================================================
# Path Expansion Tests
# =============================================================================


class TestExpandPath:
    """Tests for path template expansion."""

    def test_substitutes_in_order(self):
        assert expand_path("/group/{groupId}/member/{userId}", ["G1", "U1"]) == "/group/G1/member/U1"

    def test_percent_encodes_each_segment(self):
        """Test that values cannot add path segments."""
        assert expand_path("/profile/{userId}", ["a/b c?"]) == "/profile/a%2Fb%20c%3F"

    def test_no_placeholders(self):
        assert expand_path("/message/quota", []) == "/message/quota"

    def test_stringifies_numbers(self):
        assert expand_path("/audienceGroup/{audienceGroupId}", [4389303728991]) == "/audienceGroup/4389303728991"

    def test_too_few_values(self):
        with pytest.raises(InvalidArgumentError):
            expand_path("/group/{groupId}/member/{userId}", ["G1"])

    def test_too_many_values(self):
        with pytest.raises(InvalidArgumentError):
            expand_path("/message/quota", ["extra"])

    def test_build_url_uses_surface(self):
        """Test that the endpoint's surface picks the base URL."""
        dispatcher = AsyncDispatcher(DEFAULT_CONFIG)
        assert (
            dispatcher.build_url(Endpoints.MESSAGE_CONTENT, ["1"])
            == "https://api-data.line.me/v2/bot/message/1/content"
        )
        assert dispatcher.build_url(Endpoints.MESSAGE_QUOTA) == "https://api.line.me/v2/bot/message/quota"


# =============================================================================
# Value Encoding Tests
# =============================================================================


class TestValueEncoding:
    """Tests for form, query and file part values."""

    def test_booleans(self):
        assert stringify(True) == "true"
        assert stringify(False) == "false"

    def test_numbers(self):
        assert stringify(10) == "10"

    def test_file_part_from_bytes(self):
        assert _file_part("file", b"data") == ("file", b"data", "application/octet-stream")

    def test_file_part_tuple_passes_through(self):
        part = ("name.txt", b"data", "text/plain")
        assert _file_part("file", part) is part

    def test_file_part_rejects_non_file_tuple(self):
        """Test that a tuple without binary content is not a file."""
        with pytest.raises(InvalidArgumentError):
            _file_part("file", ("a", "b"))

    def test_file_part_rejects_text(self):
        with pytest.raises(InvalidArgumentError):
            _file_part("file", "text")


# =============================================================================
# Response Handling Tests
# =============================================================================


ECHO = Endpoint("GET", "/echo")


@pytest_asyncio.fixture
async def dispatcher():
    dispatcher = AsyncDispatcher(DEFAULT_CONFIG, "token")
    yield dispatcher
    await dispatcher.close()


class TestResponses:
    """Tests for 2xx responses."""

    @pytest.mark.asyncio
    async def test_json_body(self, dispatcher, respx_mock):
        respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(200, json={"a": 1}, headers={"x-line-request-id": "rid"})
        )

        envelope = await dispatcher.dispatch(ECHO)

        assert envelope.status_code == 200
        assert envelope.body == {"a": 1}
        assert envelope.request_id == "rid"
        assert envelope.headers["X-Line-Request-Id"] == "rid"

    @pytest.mark.asyncio
    async def test_empty_body(self, dispatcher, respx_mock):
        respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(return_value=httpx.Response(200))

        envelope = await dispatcher.dispatch(ECHO)

        assert envelope.body == {}

    @pytest.mark.asyncio
    async def test_query_drops_none(self, dispatcher, respx_mock):
        route = respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(200, json={})
        )

        await dispatcher.dispatch(ECHO, query={"a": None, "b": False, "c": 2})

        assert dict(route.calls.last.request.url.params) == {"b": "false", "c": "2"}

    @pytest.mark.asyncio
    async def test_per_call_headers(self, dispatcher, respx_mock):
        route = respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(200, json={})
        )

        await dispatcher.dispatch(ECHO, headers={"X-Line-Retry-Key": "k", "X-Skip": None})

        request = route.calls.last.request
        assert request.headers["x-line-retry-key"] == "k"
        assert "x-skip" not in request.headers

    @pytest.mark.asyncio
    async def test_no_authorization_without_token(self, respx_mock):
        route = respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(200, json={})
        )

        dispatcher = AsyncDispatcher(DEFAULT_CONFIG)
        await dispatcher.dispatch(ECHO)
        await dispatcher.close()

        assert "authorization" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    async def test_form_body_is_not_logged(self, dispatcher, respx_mock, caplog):
        respx_mock.post(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(200, json={})
        )

        with caplog.at_level(logging.DEBUG, logger="line_bot_client"):
            await dispatcher.dispatch(Endpoint("POST", "/echo"), form={"client_secret": "s3cr3t"})

        assert "s3cr3t" not in caplog.text
        assert "POST" in caplog.text

    @pytest.mark.asyncio
    async def test_tuple_fields_stay_json(self, dispatcher, respx_mock, parse_json):
        """Test that tuple values in a body are sent as JSON arrays."""
        route = respx_mock.post(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(200, json={})
        )

        await dispatcher.dispatch(
            Endpoint("POST", "/echo"), body={"to": ("U1", "U2"), "units": ("unit_a", "x")}
        )

        request = route.calls.last.request
        assert request.headers["content-type"] == "application/json"
        assert parse_json(request) == {"to": ["U1", "U2"], "units": ["unit_a", "x"]}

    @pytest.mark.asyncio
    async def test_files_make_multipart(self, dispatcher, respx_mock, parse_multipart):
        route = respx_mock.post(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(200, json={})
        )

        await dispatcher.dispatch(
            Endpoint("POST", "/echo"),
            body={"flag": True, "skipped": None},
            files={"file": ("ids.txt", b"U1\nU2", "text/plain")},
        )

        request = route.calls.last.request
        assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
        parts = parse_multipart(request)
        assert parts["flag"][0] == b"true"
        assert "skipped" not in parts
        assert parts["file"][0] == b"U1\nU2"

    @pytest.mark.asyncio
    async def test_invalid_file_part_is_not_sent(self, dispatcher, respx_mock):
        with pytest.raises(InvalidArgumentError):
            await dispatcher.dispatch(Endpoint("POST", "/echo"), files={"file": 42})

        assert not respx_mock.calls


# =============================================================================
# Error Tests
# =============================================================================


class TestErrors:
    """Tests for non-2xx responses and transport failures."""

    @pytest.mark.asyncio
    async def test_error_carries_status_body_and_request_id(self, dispatcher, respx_mock):
        body = {
            "message": "The request body has 2 error(s)",
            "details": [{"message": "May not be empty", "property": "messages[0].text"}],
        }
        respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(400, json=body, headers={"x-line-request-id": "rid"})
        )

        with pytest.raises(BadRequestError) as exc_info:
            await dispatcher.dispatch(ECHO)

        error = exc_info.value
        assert error.status_code == 400
        assert error.body == body
        assert error.details == body["details"]
        assert error.request_id == "rid"
        assert "The request body has 2 error(s)" in str(error)
        assert "rid" in str(error)

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, dispatcher, respx_mock):
        respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(
            return_value=httpx.Response(502, text="Bad Gateway")
        )

        with pytest.raises(ServerError) as exc_info:
            await dispatcher.dispatch(ECHO)

        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_binary_endpoint_error_is_parsed(self, dispatcher, respx_mock):
        """Test that errors from binary endpoints still carry the JSON body."""
        respx_mock.get("https://api-data.line.me/v2/bot/message/1/content").mock(
            return_value=httpx.Response(404, json={"message": "Not found"})
        )

        with pytest.raises(NotFoundError) as exc_info:
            await dispatcher.dispatch(Endpoints.MESSAGE_CONTENT, ["1"])

        assert exc_info.value.body == {"message": "Not found"}

    @pytest.mark.asyncio
    async def test_timeout(self, dispatcher, respx_mock):
        respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(side_effect=httpx.ConnectTimeout)

        with pytest.raises(LineBotTimeoutError):
            await dispatcher.dispatch(ECHO)

    @pytest.mark.asyncio
    async def test_connection_error(self, dispatcher, respx_mock):
        respx_mock.get(f"{MESSAGING_API_PREFIX}/echo").mock(side_effect=httpx.ConnectError)

        with pytest.raises(LineBotConnectionError):
            await dispatcher.dispatch(ECHO)

    @pytest.mark.parametrize(
        "status,error_class",
        [
            (400, BadRequestError),
            (401, AuthenticationError),
            (403, PermissionDeniedError),
            (404, NotFoundError),
            (429, RateLimitError),
            (500, ServerError),
            (503, ServerError),
            (418, ApiError),
        ],
    )
    def test_error_for_status(self, status, error_class):
        error = error_for_status(status, {"message": "m"}, {})
        assert type(error) is error_class
        assert error.status_code == status
