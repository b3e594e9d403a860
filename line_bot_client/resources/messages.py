"""
LINE Bot Client - Messages Resource

This module provides methods for sending messages and for reading
message content, delivery counts and quota.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from line_bot_client.config import RETRY_KEY_HEADER, Endpoints, Limits
from line_bot_client.exceptions import InvalidArgumentError, RequestValidationError
from line_bot_client.models import (
    ContentTranscodingResponse,
    Filter,
    Limit,
    MessageLike,
    MessageQuotaResponse,
    NarrowcastProgressResponse,
    NumberOfMessagesResponse,
    PushMessageResponse,
    QuotaConsumptionResponse,
    Recipient,
    ReplyMessageResponse,
)
from line_bot_client.resources.base import ApiResponse, BaseResource, as_list
from line_bot_client.resources.insights import validate_custom_aggregation_units


Messages = Union[MessageLike, Sequence[MessageLike]]


def _retry_headers(retry_key: Optional[str]) -> Optional[Dict[str, Optional[str]]]:
    return {RETRY_KEY_HEADER: retry_key} if retry_key else None


def _message_list(messages: Messages) -> List[MessageLike]:
    items = as_list(messages)
    if len(items) > Limits.MAX_MESSAGES_PER_REQUEST:
        raise InvalidArgumentError(
            f"at most {Limits.MAX_MESSAGES_PER_REQUEST} messages can be sent per request"
        )
    return items


def _aggregation_units(units: Optional[Sequence[str]]) -> Optional[List[str]]:
    if units is None:
        return None
    units = list(units)
    result = validate_custom_aggregation_units(units)
    if not result.valid:
        raise RequestValidationError(result.messages)
    return units


class MessagesResource(BaseResource):
    """
    Resource for sending messages.

    Every send accepts a single message or a list of up to five. Push,
    multicast, narrowcast and broadcast take an optional ``retry_key``; a
    repeated key makes the API answer 409 instead of sending twice.

    Example:
        >>> await client.messages.push_message("U1234", TextMessage(text="hello"))
        >>> await client.messages.broadcast(
        ...     [TextMessage(text="sale"), StickerMessage(package_id="1", sticker_id="1")],
        ...     retry_key=str(uuid.uuid4()),
        ... )
    """

    # =========================================================================
    # Sending
    # =========================================================================

    async def reply_message(
        self,
        reply_token: str,
        messages: Messages,
        notification_disabled: bool = False,
    ) -> ReplyMessageResponse:
        """
        Reply to a webhook event.

        Args:
            reply_token: Reply token received with the event
            messages: Message or list of messages
            notification_disabled: Deliver without a push notification

        Returns:
            IDs of the sent messages
        """
        response = await self.reply_message_with_http_info(
            reply_token, messages, notification_disabled
        )
        return response.data

    async def reply_message_with_http_info(
        self,
        reply_token: str,
        messages: Messages,
        notification_disabled: bool = False,
    ) -> ApiResponse[ReplyMessageResponse]:
        body = {
            "replyToken": reply_token,
            "messages": _message_list(messages),
            "notificationDisabled": notification_disabled,
        }
        return await self._request(
            Endpoints.MESSAGE_REPLY, ReplyMessageResponse, body=body
        )

    async def push_message(
        self,
        to: str,
        messages: Messages,
        notification_disabled: bool = False,
        custom_aggregation_units: Optional[Sequence[str]] = None,
        retry_key: Optional[str] = None,
    ) -> PushMessageResponse:
        """
        Send messages to a user, group or room.

        Args:
            to: User, group or room ID
            messages: Message or list of messages
            notification_disabled: Deliver without a push notification
            custom_aggregation_units: Name of the aggregation unit for statistics
            retry_key: UUID sent as ``X-Line-Retry-Key``

        Returns:
            IDs of the sent messages

        Raises:
            InvalidArgumentError: If more than five messages are given
            RequestValidationError: If an aggregation unit name is invalid

        Example:
            >>> result = await client.messages.push_message(
            ...     "U4af4980629...",
            ...     TextMessage(text="Your order has shipped"),
            ... )
            >>> print(result.sent_messages[0].id)
        """
        response = await self.push_message_with_http_info(
            to, messages, notification_disabled, custom_aggregation_units, retry_key
        )
        return response.data

    async def push_message_with_http_info(
        self,
        to: str,
        messages: Messages,
        notification_disabled: bool = False,
        custom_aggregation_units: Optional[Sequence[str]] = None,
        retry_key: Optional[str] = None,
    ) -> ApiResponse[PushMessageResponse]:
        body = {
            "to": to,
            "messages": _message_list(messages),
            "notificationDisabled": notification_disabled,
            "customAggregationUnits": _aggregation_units(custom_aggregation_units),
        }
        return await self._request(
            Endpoints.MESSAGE_PUSH,
            PushMessageResponse,
            body=body,
            headers=_retry_headers(retry_key),
        )

    async def multicast(
        self,
        to: List[str],
        messages: Messages,
        notification_disabled: bool = False,
        custom_aggregation_units: Optional[Sequence[str]] = None,
        retry_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send the same messages to several users at once.

        Args:
            to: Up to 500 user IDs
            messages: Message or list of messages
            notification_disabled: Deliver without a push notification
            custom_aggregation_units: Name of the aggregation unit for statistics
            retry_key: UUID sent as ``X-Line-Retry-Key``

        Returns:
            Empty object on success

        Raises:
            InvalidArgumentError: If more than 500 recipients or more than
                five messages are given
            RequestValidationError: If an aggregation unit name is invalid
        """
        response = await self.multicast_with_http_info(
            to, messages, notification_disabled, custom_aggregation_units, retry_key
        )
        return response.data

    async def multicast_with_http_info(
        self,
        to: List[str],
        messages: Messages,
        notification_disabled: bool = False,
        custom_aggregation_units: Optional[Sequence[str]] = None,
        retry_key: Optional[str] = None,
    ) -> ApiResponse[Dict[str, Any]]:
        if len(to) > Limits.MAX_MULTICAST_RECIPIENTS:
            raise InvalidArgumentError(
                f"multicast accepts at most {Limits.MAX_MULTICAST_RECIPIENTS} recipients"
            )
        body = {
            "to": list(to),
            "messages": _message_list(messages),
            "notificationDisabled": notification_disabled,
            "customAggregationUnits": _aggregation_units(custom_aggregation_units),
        }
        return await self._request(
            Endpoints.MESSAGE_MULTICAST, body=body, headers=_retry_headers(retry_key)
        )

    async def narrowcast(
        self,
        messages: Messages,
        recipient: Optional[Union[Recipient, Dict[str, Any]]] = None,
        filter: Optional[Union[Filter, Dict[str, Any]]] = None,
        limit: Optional[Union[Limit, Dict[str, Any]]] = None,
        notification_disabled: Optional[bool] = None,
        retry_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send messages to users matched by audience and demographic filters.

        Delivery is asynchronous; pass the ``x-line-request-id`` of the
        ``..._with_http_info`` response to ``get_narrowcast_progress``.

        Args:
            messages: Message or list of messages
            recipient: Audience or operator recipient object
            filter: Demographic filter
            limit: Maximum number of recipients
            notification_disabled: Deliver without a push notification
            retry_key: UUID sent as ``X-Line-Retry-Key``

        Returns:
            Empty object on success

        Example:
            >>> response = await client.messages.narrowcast_with_http_info(
            ...     TextMessage(text="hi"),
            ...     recipient=AudienceRecipient(audience_group_id=5614991017776),
            ...     limit=Limit(max=100),
            ... )
            >>> progress = await client.messages.get_narrowcast_progress(response.request_id)
        """
        response = await self.narrowcast_with_http_info(
            messages, recipient, filter, limit, notification_disabled, retry_key
        )
        return response.data

    async def narrowcast_with_http_info(
        self,
        messages: Messages,
        recipient: Optional[Union[Recipient, Dict[str, Any]]] = None,
        filter: Optional[Union[Filter, Dict[str, Any]]] = None,
        limit: Optional[Union[Limit, Dict[str, Any]]] = None,
        notification_disabled: Optional[bool] = None,
        retry_key: Optional[str] = None,
    ) -> ApiResponse[Dict[str, Any]]:
        body = {
            "messages": _message_list(messages),
            "recipient": recipient,
            "filter": filter,
            "limit": limit,
            "notificationDisabled": notification_disabled,
        }
        return await self._request(
            Endpoints.MESSAGE_NARROWCAST, body=body, headers=_retry_headers(retry_key)
        )

    async def broadcast(
        self,
        messages: Messages,
        notification_disabled: bool = False,
        retry_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send messages to every friend of the bot.

        Args:
            messages: Message or list of messages
            notification_disabled: Deliver without a push notification
            retry_key: UUID sent as ``X-Line-Retry-Key``

        Returns:
            Empty object on success
        """
        response = await self.broadcast_with_http_info(
            messages, notification_disabled, retry_key
        )
        return response.data

    async def broadcast_with_http_info(
        self,
        messages: Messages,
        notification_disabled: bool = False,
        retry_key: Optional[str] = None,
    ) -> ApiResponse[Dict[str, Any]]:
        body = {
            "messages": _message_list(messages),
            "notificationDisabled": notification_disabled,
        }
        return await self._request(
            Endpoints.MESSAGE_BROADCAST, body=body, headers=_retry_headers(retry_key)
        )

    # =========================================================================
    # Validation
    # =========================================================================

    async def validate_reply(self, messages: Messages) -> Dict[str, Any]:
        """Check message objects for a reply without sending them."""
        return (await self.validate_reply_with_http_info(messages)).data

    async def validate_reply_with_http_info(self, messages: Messages) -> ApiResponse[Dict[str, Any]]:
        return await self._validate(Endpoints.MESSAGE_VALIDATE_REPLY, messages)

    async def validate_push(self, messages: Messages) -> Dict[str, Any]:
        """Check message objects for a push without sending them."""
        return (await self.validate_push_with_http_info(messages)).data

    async def validate_push_with_http_info(self, messages: Messages) -> ApiResponse[Dict[str, Any]]:
        return await self._validate(Endpoints.MESSAGE_VALIDATE_PUSH, messages)

    async def validate_multicast(self, messages: Messages) -> Dict[str, Any]:
        """Check message objects for a multicast without sending them."""
        return (await self.validate_multicast_with_http_info(messages)).data

    async def validate_multicast_with_http_info(self, messages: Messages) -> ApiResponse[Dict[str, Any]]:
        return await self._validate(Endpoints.MESSAGE_VALIDATE_MULTICAST, messages)

    async def validate_narrowcast(self, messages: Messages) -> Dict[str, Any]:
        """Check message objects for a narrowcast without sending them."""
        return (await self.validate_narrowcast_with_http_info(messages)).data

    async def validate_narrowcast_with_http_info(self, messages: Messages) -> ApiResponse[Dict[str, Any]]:
        return await self._validate(Endpoints.MESSAGE_VALIDATE_NARROWCAST, messages)

    async def validate_broadcast(self, messages: Messages) -> Dict[str, Any]:
        """Check message objects for a broadcast without sending them."""
        return (await self.validate_broadcast_with_http_info(messages)).data

    async def validate_broadcast_with_http_info(self, messages: Messages) -> ApiResponse[Dict[str, Any]]:
        return await self._validate(Endpoints.MESSAGE_VALIDATE_BROADCAST, messages)

    async def _validate(self, endpoint, messages: Messages) -> ApiResponse[Dict[str, Any]]:
        return await self._request(endpoint, body={"messages": _message_list(messages)})

    # =========================================================================
    # Content
    # =========================================================================

    async def get_message_content(self, message_id: str) -> bytes:
        """
        Download the image, video, audio or file sent by a user.

        Args:
            message_id: Message ID from the webhook event

        Returns:
            Raw content bytes
        """
        return (await self.get_message_content_with_http_info(message_id)).data

    async def get_message_content_with_http_info(self, message_id: str) -> ApiResponse[bytes]:
        """Same as ``get_message_content``; ``headers`` carries the Content-Type."""
        return await self._request(Endpoints.MESSAGE_CONTENT, path_values=[message_id])

    async def get_message_content_preview(self, message_id: str) -> bytes:
        """Download the preview image of an image or video message."""
        return (await self.get_message_content_preview_with_http_info(message_id)).data

    async def get_message_content_preview_with_http_info(self, message_id: str) -> ApiResponse[bytes]:
        return await self._request(Endpoints.MESSAGE_CONTENT_PREVIEW, path_values=[message_id])

    async def get_message_content_transcoding(self, message_id: str) -> ContentTranscodingResponse:
        """Check whether a video or audio message is ready to download."""
        return (await self.get_message_content_transcoding_with_http_info(message_id)).data

    async def get_message_content_transcoding_with_http_info(
        self, message_id: str
    ) -> ApiResponse[ContentTranscodingResponse]:
        return await self._request(
            Endpoints.MESSAGE_CONTENT_TRANSCODING,
            ContentTranscodingResponse,
            path_values=[message_id],
        )

    # =========================================================================
    # Delivery counts and quota
    # =========================================================================

    async def get_number_of_sent_reply_messages(self, date: str) -> NumberOfMessagesResponse:
        """
        Get the number of reply messages sent on ``date``.

        Args:
            date: Date in ``yyyyMMdd`` format, UTC+9
        """
        return (await self.get_number_of_sent_reply_messages_with_http_info(date)).data

    async def get_number_of_sent_reply_messages_with_http_info(
        self, date: str
    ) -> ApiResponse[NumberOfMessagesResponse]:
        return await self._count(Endpoints.MESSAGE_DELIVERY_REPLY, date)

    async def get_number_of_sent_push_messages(self, date: str) -> NumberOfMessagesResponse:
        """Get the number of push messages sent on ``date`` (``yyyyMMdd``)."""
        return (await self.get_number_of_sent_push_messages_with_http_info(date)).data

    async def get_number_of_sent_push_messages_with_http_info(
        self, date: str
    ) -> ApiResponse[NumberOfMessagesResponse]:
        return await self._count(Endpoints.MESSAGE_DELIVERY_PUSH, date)

    async def get_number_of_sent_multicast_messages(self, date: str) -> NumberOfMessagesResponse:
        """Get the number of multicast messages sent on ``date`` (``yyyyMMdd``)."""
        return (await self.get_number_of_sent_multicast_messages_with_http_info(date)).data

    async def get_number_of_sent_multicast_messages_with_http_info(
        self, date: str
    ) -> ApiResponse[NumberOfMessagesResponse]:
        return await self._count(Endpoints.MESSAGE_DELIVERY_MULTICAST, date)

    async def get_number_of_sent_broadcast_messages(self, date: str) -> NumberOfMessagesResponse:
        """Get the number of broadcast messages sent on ``date`` (``yyyyMMdd``)."""
        return (await self.get_number_of_sent_broadcast_messages_with_http_info(date)).data

    async def get_number_of_sent_broadcast_messages_with_http_info(
        self, date: str
    ) -> ApiResponse[NumberOfMessagesResponse]:
        return await self._count(Endpoints.MESSAGE_DELIVERY_BROADCAST, date)

    async def _count(self, endpoint, date: str) -> ApiResponse[NumberOfMessagesResponse]:
        return await self._request(endpoint, NumberOfMessagesResponse, query={"date": date})

    async def get_narrowcast_progress(self, request_id: str) -> NarrowcastProgressResponse:
        """
        Get the status of a narrowcast.

        Args:
            request_id: ``x-line-request-id`` of the narrowcast response
        """
        return (await self.get_narrowcast_progress_with_http_info(request_id)).data

    async def get_narrowcast_progress_with_http_info(
        self, request_id: str
    ) -> ApiResponse[NarrowcastProgressResponse]:
        return await self._request(
            Endpoints.MESSAGE_NARROWCAST_PROGRESS,
            NarrowcastProgressResponse,
            query={"requestId": request_id},
        )

    async def get_message_quota(self) -> MessageQuotaResponse:
        """Get the monthly message limit of the channel."""
        return (await self.get_message_quota_with_http_info()).data

    async def get_message_quota_with_http_info(self) -> ApiResponse[MessageQuotaResponse]:
        return await self._request(Endpoints.MESSAGE_QUOTA, MessageQuotaResponse)

    async def get_message_quota_consumption(self) -> QuotaConsumptionResponse:
        """Get the number of messages sent this month."""
        return (await self.get_message_quota_consumption_with_http_info()).data

    async def get_message_quota_consumption_with_http_info(
        self,
    ) -> ApiResponse[QuotaConsumptionResponse]:
        return await self._request(Endpoints.MESSAGE_QUOTA_CONSUMPTION, QuotaConsumptionResponse)

    # =========================================================================
    # Chat indicators
    # =========================================================================

    async def show_loading_animation(
        self, chat_id: str, loading_seconds: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Show the loading animation in a one-on-one chat.

        Args:
            chat_id: User ID of the chat
            loading_seconds: Multiple of 5 up to 60; the API defaults to 20

        Raises:
            InvalidArgumentError: If ``loading_seconds`` exceeds 60
        """
        return (await self.show_loading_animation_with_http_info(chat_id, loading_seconds)).data

    async def show_loading_animation_with_http_info(
        self, chat_id: str, loading_seconds: Optional[int] = None
    ) -> ApiResponse[Dict[str, Any]]:
        if loading_seconds is not None and loading_seconds > Limits.MAX_LOADING_SECONDS:
            raise InvalidArgumentError(
                f"loading_seconds must be at most {Limits.MAX_LOADING_SECONDS}"
            )
        body = {"chatId": chat_id, "loadingSeconds": loading_seconds}
        return await self._request(Endpoints.CHAT_LOADING, body=body)

    async def mark_messages_as_read(self, user_id: str) -> Dict[str, Any]:
        """Mark all messages from ``user_id`` as read."""
        return (await self.mark_messages_as_read_with_http_info(user_id)).data

    async def mark_messages_as_read_with_http_info(self, user_id: str) -> ApiResponse[Dict[str, Any]]:
        body = {"chat": {"userId": user_id}}
        return await self._request(Endpoints.CHAT_MARK_AS_READ, body=body)
