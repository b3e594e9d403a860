"""
LINE Bot Client - Main Client

This module provides the AsyncLineBotClient class that serves as
the entry point for all Messaging API interactions.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

import httpx

from line_bot_client.config import (
    DATA_API_PREFIX,
    MESSAGING_API_PREFIX,
    ClientConfig,
)
from line_bot_client.dispatcher import AsyncDispatcher
from line_bot_client.exceptions import ConfigurationError
from line_bot_client.models import ValidationResult
from line_bot_client.request_options import RequestOptions
from line_bot_client.resources.audiences import AudiencesResource
from line_bot_client.resources.channel import ChannelResource
from line_bot_client.resources.chats import ChatsResource
from line_bot_client.resources.insights import InsightsResource
from line_bot_client.resources.messages import MessagesResource
from line_bot_client.resources.modules import ModulesResource
from line_bot_client.resources.rich_menus import RichMenusResource

logger = logging.getLogger("line_bot_client")


class AsyncLineBotClient:
    """
    Async client for the LINE Messaging API.

    Every request carries the channel access token as a bearer token.

    Args:
        channel_access_token: Channel access token. If not provided, will look
            for the LINE_CHANNEL_ACCESS_TOKEN environment variable.
        config: Full configuration; overrides the environment and ``timeout``.
        timeout: Request timeout in seconds. Defaults to 30.
        debug: Enable debug logging. Defaults to False.
        transport: Optional httpx transport, mainly for tests.

    Raises:
        ConfigurationError: If no channel access token is available

    Example:
        >>> async with AsyncLineBotClient("your-channel-access-token") as client:
        ...     await client.messages.push_message("U1234", TextMessage(text="hello"))
        ...     profile = await client.chats.get_profile("U1234")

    Attributes:
        messages: Sending messages, message content, delivery counts and quota
        chats: Profiles, followers, groups and rooms
        rich_menus: Rich menus, aliases and per-user links
        insights: Channel statistics
        audiences: Audience groups
        channel: Bot info, webhook endpoint and link tokens
        modules: Module channels and chat control
    """

    def __init__(
        self,
        channel_access_token: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        timeout: float = 30.0,
        debug: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        # Get token from parameter or environment
        token = channel_access_token or os.environ.get("LINE_CHANNEL_ACCESS_TOKEN")
        if not token:
            raise ConfigurationError()

        # Configuration
        self._config = config or ClientConfig(
            messaging_base_url=os.environ.get("LINE_API_BASE_URL", MESSAGING_API_PREFIX),
            data_base_url=os.environ.get("LINE_DATA_API_BASE_URL", DATA_API_PREFIX),
            timeout=timeout,
            debug=debug,
        )

        # Setup logging
        if self._config.debug:
            logging.basicConfig(level=logging.DEBUG)
            logger.setLevel(logging.DEBUG)

        self.dispatcher = AsyncDispatcher(self._config, token, transport)
        self._init_resources()

        logger.debug(
            f"LINE client initialized with base URL: {self._config.messaging_base_url}"
        )

    def _init_resources(self) -> None:
        """Initialize all API resources."""
        self.messages = MessagesResource(self.dispatcher)
        self.chats = ChatsResource(self.dispatcher)
        self.rich_menus = RichMenusResource(self.dispatcher)
        self.insights = InsightsResource(self.dispatcher)
        self.audiences = AudiencesResource(self.dispatcher)
        self.channel = ChannelResource(self.dispatcher)
        self.modules = ModulesResource(self.dispatcher)

    def set_request_option_once(
        self,
        retry_key: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Attach options to the next request made through this client only.

        Calling this again before a request is made replaces the pending
        options. When several requests start concurrently, exactly one of
        them receives the options; which one is not defined.

        Args:
            retry_key: Idempotency key sent as ``X-Line-Retry-Key``
            headers: Extra headers

        Example:
            >>> client.set_request_option_once(retry_key=str(uuid.uuid4()))
            >>> await client.messages.push_message("U1234", TextMessage(text="once"))
        """
        options = RequestOptions(retry_key=retry_key, headers=dict(headers or {}))
        self.dispatcher.options.put(options.to_headers())

    def validate_custom_aggregation_units(self, units: List[str]) -> ValidationResult:
        """Check custom aggregation unit names locally; see ``insights``."""
        return self.insights.validate_custom_aggregation_units(units)

    @property
    def config(self) -> ClientConfig:
        """Get the client configuration."""
        return self._config

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.dispatcher.close()

    async def __aenter__(self) -> "AsyncLineBotClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AsyncLineBotClient(base_url='{self._config.messaging_base_url}')"
