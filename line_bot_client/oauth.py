"""
LINE Bot Client - OAuth Client

This module provides the AsyncOAuthClient for issuing, verifying and
revoking channel access tokens. These endpoints take url-encoded forms and
authenticate with the credentials in the form, never with a bearer token.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from line_bot_client.config import (
    DEFAULT_CONFIG,
    OAUTH_CLIENT_ASSERTION_TYPE,
    ClientConfig,
    Endpoints,
)
from line_bot_client.dispatcher import AsyncDispatcher
from line_bot_client.exceptions import InvalidArgumentError
from line_bot_client.models import (
    ChannelAccessTokenKeyIdsResponse,
    ChannelAccessTokenResponse,
    VerifyAccessTokenResponse,
    VerifyIdTokenResponse,
)
from line_bot_client.resources.base import ApiResponse, BaseResource

logger = logging.getLogger("line_bot_client")


class AsyncOAuthClient(BaseResource):
    """
    Async client for the channel access token endpoints.

    Args:
        config: Configuration holding the OAuth base URLs
        transport: Optional httpx transport, mainly for tests

    Example:
        >>> async with AsyncOAuthClient() as oauth:
        ...     token = await oauth.issue_channel_access_token_v2_1(jwt)
        ...     client = AsyncLineBotClient(token.access_token)
    """

    def __init__(
        self,
        config: ClientConfig = DEFAULT_CONFIG,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(AsyncDispatcher(config, None, transport))
        logger.debug(f"LINE OAuth client initialized with base URL: {config.oauth_base_url}")

    # =========================================================================
    # v2 short-lived tokens
    # =========================================================================

    async def issue_access_token(self, client_id: str, client_secret: str) -> ChannelAccessTokenResponse:
        """
        Issue a short-lived channel access token (valid for 30 days).

        Args:
            client_id: Channel ID
            client_secret: Channel secret

        Returns:
            ChannelAccessTokenResponse
        """
        return (await self.issue_access_token_with_http_info(client_id, client_secret)).data

    async def issue_access_token_with_http_info(
        self, client_id: str, client_secret: str
    ) -> ApiResponse[ChannelAccessTokenResponse]:
        form = {
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
        }
        return await self._request(
            Endpoints.OAUTH_ACCESS_TOKEN, ChannelAccessTokenResponse, form=form
        )

    async def revoke_access_token(self, access_token: str) -> Dict[str, Any]:
        """Revoke a short-lived channel access token."""
        return (await self.revoke_access_token_with_http_info(access_token)).data

    async def revoke_access_token_with_http_info(self, access_token: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.OAUTH_REVOKE, form={"access_token": access_token})

    # =========================================================================
    # v2.1 verification
    # =========================================================================

    async def verify_access_token(self, access_token: str) -> VerifyAccessTokenResponse:
        """
        Check that a channel access token is valid.

        Args:
            access_token: Token to check

        Returns:
            VerifyAccessTokenResponse with the channel ID and remaining lifetime
        """
        return (await self.verify_access_token_with_http_info(access_token)).data

    async def verify_access_token_with_http_info(
        self, access_token: str
    ) -> ApiResponse[VerifyAccessTokenResponse]:
        return await self._request(
            Endpoints.OAUTH_VERIFY_ACCESS_TOKEN,
            VerifyAccessTokenResponse,
            query={"access_token": access_token},
        )

    async def verify_id_token(
        self,
        id_token: str,
        client_id: str,
        nonce: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> VerifyIdTokenResponse:
        """
        Verify a LINE Login ID token and decode its claims.

        Args:
            id_token: ID token
            client_id: Expected channel ID (``aud``)
            nonce: Expected nonce
            user_id: Expected user ID (``sub``)
        """
        return (await self.verify_id_token_with_http_info(id_token, client_id, nonce, user_id)).data

    async def verify_id_token_with_http_info(
        self,
        id_token: str,
        client_id: str,
        nonce: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> ApiResponse[VerifyIdTokenResponse]:
        form = {
            "id_token": id_token,
            "client_id": client_id,
            "nonce": nonce,
            "user_id": user_id,
        }
        return await self._request(Endpoints.OAUTH_VERIFY_ID_TOKEN, VerifyIdTokenResponse, form=form)

    # =========================================================================
    # v2.1 user-specified expiration tokens
    # =========================================================================

    async def issue_channel_access_token_v2_1(self, client_assertion: str) -> ChannelAccessTokenResponse:
        """
        Issue a channel access token with a user-specified expiration.

        Args:
            client_assertion: JWT signed with the channel's assertion signing key

        Returns:
            ChannelAccessTokenResponse including ``key_id``
        """
        return (await self.issue_channel_access_token_v2_1_with_http_info(client_assertion)).data

    async def issue_channel_access_token_v2_1_with_http_info(
        self, client_assertion: str
    ) -> ApiResponse[ChannelAccessTokenResponse]:
        form = {
            "grant_type": "client_credentials",
            "client_assertion_type": OAUTH_CLIENT_ASSERTION_TYPE,
            "client_assertion": client_assertion,
        }
        return await self._request(Endpoints.OAUTH_TOKEN_V2_1, ChannelAccessTokenResponse, form=form)

    async def get_channel_access_token_key_ids_v2_1(
        self, client_assertion: str
    ) -> ChannelAccessTokenKeyIdsResponse:
        """Get the key IDs of every valid v2.1 token of the channel."""
        return (await self.get_channel_access_token_key_ids_v2_1_with_http_info(client_assertion)).data

    async def get_channel_access_token_key_ids_v2_1_with_http_info(
        self, client_assertion: str
    ) -> ApiResponse[ChannelAccessTokenKeyIdsResponse]:
        query = {
            "client_assertion_type": OAUTH_CLIENT_ASSERTION_TYPE,
            "client_assertion": client_assertion,
        }
        return await self._request(
            Endpoints.OAUTH_TOKEN_KEY_IDS_V2_1, ChannelAccessTokenKeyIdsResponse, query=query
        )

    async def revoke_channel_access_token_v2_1(
        self, client_id: str, client_secret: str, access_token: str
    ) -> Dict[str, Any]:
        """Revoke a v2.1 channel access token."""
        response = await self.revoke_channel_access_token_v2_1_with_http_info(
            client_id, client_secret, access_token
        )
        return response.data

    async def revoke_channel_access_token_v2_1_with_http_info(
        self, client_id: str, client_secret: str, access_token: str
    ) -> ApiResponse[Dict[str, Any]]:
        form = {
            "client_id": client_id,
            "client_secret": client_secret,
            "access_token": access_token,
        }
        return await self._request(Endpoints.OAUTH_REVOKE_V2_1, form=form)

    # =========================================================================
    # v3 stateless tokens
    # =========================================================================

    async def issue_stateless_channel_token(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        client_assertion: Optional[str] = None,
    ) -> ChannelAccessTokenResponse:
        """
        Issue a stateless channel access token (valid for 15 minutes).

        Authenticate with either ``client_id`` and ``client_secret`` or a
        signed ``client_assertion``.

        Raises:
            InvalidArgumentError: If neither credential form is complete
        """
        response = await self.issue_stateless_channel_token_with_http_info(
            client_id, client_secret, client_assertion
        )
        return response.data

    async def issue_stateless_channel_token_with_http_info(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        client_assertion: Optional[str] = None,
    ) -> ApiResponse[ChannelAccessTokenResponse]:
        form: Dict[str, Optional[str]] = {"grant_type": "client_credentials"}
        if client_assertion:
            form["client_assertion_type"] = OAUTH_CLIENT_ASSERTION_TYPE
            form["client_assertion"] = client_assertion
        elif client_id and client_secret:
            form["client_id"] = client_id
            form["client_secret"] = client_secret
        else:
            raise InvalidArgumentError(
                "either client_assertion or client_id and client_secret is required"
            )
        return await self._request(Endpoints.OAUTH_TOKEN_V3, ChannelAccessTokenResponse, form=form)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._dispatcher.close()

    async def __aenter__(self) -> "AsyncOAuthClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
