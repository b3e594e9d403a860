"""
Unit Tests for the OAuth Client

Tests for the channel access token endpoints: url-encoded forms, query
strings and the absence of a bearer token.
"""

import httpx
import pytest

from line_bot_client import AsyncOAuthClient, ClientConfig, InvalidArgumentError
from line_bot_client.config import (
    OAUTH_BASE_PREFIX,
    OAUTH_BASE_PREFIX_V2_1,
    OAUTH_BASE_PREFIX_V3,
    OAUTH_CLIENT_ASSERTION_TYPE,
)


FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


# =============================================================================
# v2 Token Tests
# =============================================================================


class TestShortLivedTokens:
    """Tests for the v2 token endpoints."""

    @pytest.mark.asyncio
    async def test_issue_access_token(self, oauth, respx_mock, parse_form):
        route = respx_mock.post(f"{OAUTH_BASE_PREFIX}/accessToken").mock(
            return_value=httpx.Response(
                200,
                json={"access_token": "access_token", "expires_in": 2592000, "token_type": "Bearer"},
            )
        )

        result = await oauth.issue_access_token("test_client_id", "test_client_secret")

        request = route.calls.last.request
        assert request.headers["content-type"] == FORM_CONTENT_TYPE
        assert request.headers["user-agent"] == "line-bot-client-python/1.0.0"
        assert "authorization" not in request.headers
        assert parse_form(request) == {
            "grant_type": "client_credentials",
            "client_id": "test_client_id",
            "client_secret": "test_client_secret",
        }
        assert result.access_token == "access_token"
        assert result.expires_in == 2592000
        assert result.token_type == "Bearer"

    @pytest.mark.asyncio
    async def test_revoke_access_token(self, oauth, respx_mock, parse_form):
        route = respx_mock.post(f"{OAUTH_BASE_PREFIX}/revoke").mock(
            return_value=httpx.Response(200)
        )

        result = await oauth.revoke_access_token("test_channel_access_token")

        assert parse_form(route.calls.last.request) == {"access_token": "test_channel_access_token"}
        assert result == {}


# =============================================================================
# v2.1 Verification Tests
# =============================================================================


class TestVerification:
    """Tests for token verification."""

    @pytest.mark.asyncio
    async def test_verify_access_token(self, oauth, respx_mock):
        """Test that the token is sent as a query parameter on GET."""
        route = respx_mock.get(f"{OAUTH_BASE_PREFIX_V2_1}/verify").mock(
            return_value=httpx.Response(
                200, json={"client_id": "1350031035", "expires_in": 3138007490, "scope": "profile"}
            )
        )

        result = await oauth.verify_access_token("test_channel_access_token")

        request = route.calls.last.request
        assert request.url.params["access_token"] == "test_channel_access_token"
        assert "authorization" not in request.headers
        assert result.client_id == "1350031035"
        assert result.scope == "profile"

    @pytest.mark.asyncio
    async def test_verify_id_token(self, oauth, respx_mock, parse_form):
        route = respx_mock.post(f"{OAUTH_BASE_PREFIX_V2_1}/verify").mock(
            return_value=httpx.Response(
                200,
                json={"iss": "https://access.line.me", "sub": "test_user_id", "amr": ["pwd"]},
            )
        )

        result = await oauth.verify_id_token(
            "test_id_token", "test_client_id", "test_nonce", "test_user_id"
        )

        assert parse_form(route.calls.last.request) == {
            "id_token": "test_id_token",
            "client_id": "test_client_id",
            "nonce": "test_nonce",
            "user_id": "test_user_id",
        }
        assert result.sub == "test_user_id"
        assert result.amr == ["pwd"]


# =============================================================================
# v2.1 Token Tests
# =============================================================================


class TestAssertionTokens:
    """Tests for the v2.1 user-specified expiration tokens."""

    @pytest.mark.asyncio
    async def test_issue_channel_access_token_v2_1(self, oauth, respx_mock, parse_form):
        route = respx_mock.post(f"{OAUTH_BASE_PREFIX_V2_1}/token").mock(
            return_value=httpx.Response(
                200,
                json={
                    "access_token": "access_token",
                    "expires_in": 2592000,
                    "token_type": "Bearer",
                    "key_id": "key_id",
                },
            )
        )

        result = await oauth.issue_channel_access_token_v2_1("client_assertion")

        assert parse_form(route.calls.last.request) == {
            "grant_type": "client_credentials",
            "client_assertion_type": OAUTH_CLIENT_ASSERTION_TYPE,
            "client_assertion": "client_assertion",
        }
        assert result.key_id == "key_id"

    @pytest.mark.asyncio
    async def test_get_channel_access_token_key_ids_v2_1(self, oauth, respx_mock):
        route = respx_mock.get(f"{OAUTH_BASE_PREFIX_V2_1}/tokens/kid").mock(
            return_value=httpx.Response(200, json={"kids": ["key_id"]})
        )

        result = await oauth.get_channel_access_token_key_ids_v2_1("client_assertion")

        params = route.calls.last.request.url.params
        assert params["client_assertion_type"] == "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"
        assert params["client_assertion"] == "client_assertion"
        assert result.kids == ["key_id"]

    @pytest.mark.asyncio
    async def test_revoke_channel_access_token_v2_1(self, oauth, respx_mock, parse_form):
        route = respx_mock.post(f"{OAUTH_BASE_PREFIX_V2_1}/revoke").mock(
            return_value=httpx.Response(200, json={})
        )

        await oauth.revoke_channel_access_token_v2_1(
            "test_client_id", "test_client_secret", "test_channel_access_token"
        )

        assert parse_form(route.calls.last.request) == {
            "client_id": "test_client_id",
            "client_secret": "test_client_secret",
            "access_token": "test_channel_access_token",
        }


# =============================================================================
# v3 Stateless Token Tests
# =============================================================================


class TestStatelessTokens:
    """Tests for the v3 stateless token endpoint."""

    @pytest.mark.asyncio
    async def test_issue_with_client_secret(self, oauth, respx_mock, parse_form):
        route = respx_mock.post(f"{OAUTH_BASE_PREFIX_V3}/token").mock(
            return_value=httpx.Response(
                200, json={"access_token": "stateless", "expires_in": 900, "token_type": "Bearer"}
            )
        )

        result = await oauth.issue_stateless_channel_token(
            client_id="test_client_id", client_secret="test_client_secret"
        )

        assert parse_form(route.calls.last.request) == {
            "grant_type": "client_credentials",
            "client_id": "test_client_id",
            "client_secret": "test_client_secret",
        }
        assert result.expires_in == 900

    @pytest.mark.asyncio
    async def test_issue_with_client_assertion(self, oauth, respx_mock, parse_form):
        route = respx_mock.post(f"{OAUTH_BASE_PREFIX_V3}/token").mock(
            return_value=httpx.Response(200, json={"access_token": "stateless"})
        )

        await oauth.issue_stateless_channel_token(client_assertion="jwt")

        assert parse_form(route.calls.last.request) == {
            "grant_type": "client_credentials",
            "client_assertion_type": OAUTH_CLIENT_ASSERTION_TYPE,
            "client_assertion": "jwt",
        }

    @pytest.mark.asyncio
    async def test_issue_without_credentials(self, oauth):
        with pytest.raises(InvalidArgumentError):
            await oauth.issue_stateless_channel_token(client_id="only_id")


# =============================================================================
# Configuration Tests
# =============================================================================


class TestOAuthConfig:
    """Tests for OAuth base URL overrides."""

    @pytest.mark.asyncio
    async def test_custom_base_url(self, respx_mock):
        route = respx_mock.post("http://localhost:8080/v2/oauth/accessToken").mock(
            return_value=httpx.Response(200, json={})
        )

        async with AsyncOAuthClient(ClientConfig(oauth_base_url="http://localhost:8080/v2/oauth/")) as oauth:
            await oauth.issue_access_token("id", "secret")

        assert route.called
