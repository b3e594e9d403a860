"""Shared pytest fixtures for testing."""

import json
from typing import Any, Dict, Tuple

import httpx
import pytest
import pytest_asyncio

from line_bot_client import AsyncLineBotClient, AsyncOAuthClient


CHANNEL_ACCESS_TOKEN = "test_channel_access_token"


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's LINE_* variables out of the tests."""
    for name in ("LINE_CHANNEL_ACCESS_TOKEN", "LINE_API_BASE_URL", "LINE_DATA_API_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest_asyncio.fixture
async def client():
    """Messaging API client with a test token."""
    client = AsyncLineBotClient(CHANNEL_ACCESS_TOKEN)
    yield client
    await client.close()


@pytest_asyncio.fixture
async def oauth():
    """OAuth client."""
    oauth = AsyncOAuthClient()
    yield oauth
    await oauth.close()


# =============================================================================
# Request Helpers
# =============================================================================


def json_body(request: httpx.Request) -> Any:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)


def form_body(request: httpx.Request) -> Dict[str, str]:
    """Decode the url-encoded body of a recorded request."""
    return dict(httpx.QueryParams(request.content.decode()))


def multipart_body(request: httpx.Request) -> Dict[str, Tuple[bytes, Dict[str, str]]]:
    """
    Split a multipart/form-data body into ``name -> (content, part headers)``.

    Good enough for the bodies httpx produces; not a general parser.
    """
    content_type = request.headers["content-type"]
    boundary = content_type.split("boundary=", 1)[1].strip('"').encode()

    parts: Dict[str, Tuple[bytes, Dict[str, str]]] = {}
    for chunk in request.content.split(b"--" + boundary)[1:-1]:
        head, _, content = chunk[2:].partition(b"\r\n\r\n")
        headers = {}
        for line in head.decode().split("\r\n"):
            key, _, value = line.partition(":")
            headers[key.strip().lower()] = value.strip()
        disposition = headers["content-disposition"]
        name = disposition.split('name="', 1)[1].split('"', 1)[0]
        parts[name] = (content[:-2], headers)
    return parts


@pytest.fixture
def parse_json():
    return json_body


@pytest.fixture
def parse_form():
    return form_body


@pytest.fixture
def parse_multipart():
    return multipart_body
