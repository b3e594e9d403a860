"""
LINE Bot Client - Channel Resource

This module provides methods for bot information, the webhook endpoint
and account link tokens.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from line_bot_client.config import Endpoints
from line_bot_client.models import (
    BotInfoResponse,
    IssueLinkTokenResponse,
    WebhookEndpointResponse,
    WebhookTestResponse,
)
from line_bot_client.resources.base import ApiResponse, BaseResource


class ChannelResource(BaseResource):
    """
    Resource for channel settings.

    Example:
        >>> await client.channel.set_webhook_endpoint("https://example.com/callback")
        >>> result = await client.channel.test_webhook_endpoint()
        >>> if not result.success:
        ...     print(result.status_code, result.reason)
    """

    async def get_bot_info(self) -> BotInfoResponse:
        """Get the bot's basic information."""
        return (await self.get_bot_info_with_http_info()).data

    async def get_bot_info_with_http_info(self) -> ApiResponse[BotInfoResponse]:
        return await self._request(Endpoints.BOT_INFO, BotInfoResponse)

    async def set_webhook_endpoint(self, endpoint: str) -> Dict[str, Any]:
        """
        Set the webhook endpoint URL.

        Args:
            endpoint: HTTPS URL that receives webhook events
        """
        return (await self.set_webhook_endpoint_with_http_info(endpoint)).data

    async def set_webhook_endpoint_with_http_info(self, endpoint: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.WEBHOOK_ENDPOINT_SET, body={"endpoint": endpoint})

    async def get_webhook_endpoint(self) -> WebhookEndpointResponse:
        """Get the webhook endpoint URL and whether it is active."""
        return (await self.get_webhook_endpoint_with_http_info()).data

    async def get_webhook_endpoint_with_http_info(self) -> ApiResponse[WebhookEndpointResponse]:
        return await self._request(Endpoints.WEBHOOK_ENDPOINT, WebhookEndpointResponse)

    async def test_webhook_endpoint(self, endpoint: Optional[str] = None) -> WebhookTestResponse:
        """
        Send a test event to a webhook endpoint.

        Args:
            endpoint: URL to test; the configured endpoint if omitted

        Returns:
            WebhookTestResponse with the endpoint's answer
        """
        return (await self.test_webhook_endpoint_with_http_info(endpoint)).data

    async def test_webhook_endpoint_with_http_info(
        self, endpoint: Optional[str] = None
    ) -> ApiResponse[WebhookTestResponse]:
        return await self._request(
            Endpoints.WEBHOOK_ENDPOINT_TEST, WebhookTestResponse, body={"endpoint": endpoint}
        )

    async def issue_link_token(self, user_id: str) -> IssueLinkTokenResponse:
        """Issue a token for linking a user's LINE account to a provider account."""
        return (await self.issue_link_token_with_http_info(user_id)).data

    async def issue_link_token_with_http_info(self, user_id: str) -> ApiResponse[IssueLinkTokenResponse]:
        return await self._request(
            Endpoints.LINK_TOKEN, IssueLinkTokenResponse, path_values=[user_id]
        )
