"""
LINE Bot Client - Insights Resource

This module provides methods for reading channel statistics.
"""

from __future__ import annotations

import re
from typing import List, Optional

from line_bot_client.config import Endpoints, Limits
from line_bot_client.exceptions import RequestValidationError
from line_bot_client.models import (
    AggregationUnitNameListResponse,
    AggregationUnitUsageResponse,
    FollowersStatisticsResponse,
    FriendsDemographicsResponse,
    MessageDeliveriesResponse,
    MessageEventResponse,
    ValidationResult,
)
from line_bot_client.resources.base import ApiResponse, BaseResource


_UNIT_NAME = re.compile(r"^[a-zA-Z0-9_]+$")


def validate_custom_aggregation_units(units: List[str]) -> ValidationResult:
    """
    Check custom aggregation unit names locally.

    At most one unit is allowed; each name must be 1-30 characters of
    letters, digits or underscores. Never raises.

    Args:
        units: Unit names

    Returns:
        ValidationResult listing every failed check in order
    """
    messages: List[str] = []

    if len(units) > Limits.MAX_CUSTOM_AGGREGATION_UNITS:
        messages.append("customAggregationUnits can only contain one unit")

    for i, unit in enumerate(units):
        if len(unit) > Limits.MAX_CUSTOM_AGGREGATION_UNIT_LENGTH:
            messages.append(
                f"customAggregationUnits[{i}] must be less than or equal to "
                f"{Limits.MAX_CUSTOM_AGGREGATION_UNIT_LENGTH} characters"
            )
        if not _UNIT_NAME.match(unit):
            messages.append(
                f"customAggregationUnits[{i}] must be alphanumeric characters or underscores"
            )

    return ValidationResult(valid=not messages, messages=messages)


class InsightsResource(BaseResource):
    """
    Resource for channel statistics.

    Dates are ``yyyyMMdd`` strings in UTC+9. Statistics are usually
    available the day after; until then ``status`` is ``unready``.

    Example:
        >>> followers = await client.insights.get_number_of_followers("20191231")
        >>> if followers.status == "ready":
        ...     print(followers.followers, followers.blocks)
    """

    def validate_custom_aggregation_units(self, units: List[str]) -> ValidationResult:
        """See :func:`validate_custom_aggregation_units`."""
        return validate_custom_aggregation_units(units)

    async def get_number_of_message_deliveries(self, date: str) -> MessageDeliveriesResponse:
        """
        Get the number of messages sent from the channel on ``date``.

        Args:
            date: Date in ``yyyyMMdd`` format

        Returns:
            MessageDeliveriesResponse broken down by send method
        """
        return (await self.get_number_of_message_deliveries_with_http_info(date)).data

    async def get_number_of_message_deliveries_with_http_info(
        self, date: str
    ) -> ApiResponse[MessageDeliveriesResponse]:
        return await self._request(
            Endpoints.INSIGHT_MESSAGE_DELIVERY, MessageDeliveriesResponse, query={"date": date}
        )

    async def get_number_of_followers(self, date: Optional[str] = None) -> FollowersStatisticsResponse:
        """Get friend, targeted-reach and block counts as of ``date``."""
        return (await self.get_number_of_followers_with_http_info(date)).data

    async def get_number_of_followers_with_http_info(
        self, date: Optional[str] = None
    ) -> ApiResponse[FollowersStatisticsResponse]:
        return await self._request(
            Endpoints.INSIGHT_FOLLOWERS, FollowersStatisticsResponse, query={"date": date}
        )

    async def get_friends_demographics(self) -> FriendsDemographicsResponse:
        """Get the demographic breakdown of the channel's friends."""
        return (await self.get_friends_demographics_with_http_info()).data

    async def get_friends_demographics_with_http_info(self) -> ApiResponse[FriendsDemographicsResponse]:
        return await self._request(Endpoints.INSIGHT_DEMOGRAPHIC, FriendsDemographicsResponse)

    async def get_message_event(self, request_id: str) -> MessageEventResponse:
        """
        Get user interaction statistics of a sent message.

        Args:
            request_id: ``x-line-request-id`` of a narrowcast or broadcast
        """
        return (await self.get_message_event_with_http_info(request_id)).data

    async def get_message_event_with_http_info(
        self, request_id: str
    ) -> ApiResponse[MessageEventResponse]:
        return await self._request(
            Endpoints.INSIGHT_MESSAGE_EVENT,
            MessageEventResponse,
            query={"requestId": request_id},
        )

    async def get_statistics_per_unit(
        self, custom_aggregation_unit: str, from_: str, to: str
    ) -> MessageEventResponse:
        """
        Get interaction statistics of one custom aggregation unit.

        The unit name is checked locally first.

        Args:
            custom_aggregation_unit: Unit name given when pushing or multicasting
            from_: Start date, ``yyyyMMdd``
            to: End date, ``yyyyMMdd``

        Raises:
            RequestValidationError: If the unit name is invalid; nothing is sent

        Example:
            >>> stats = await client.insights.get_statistics_per_unit(
            ...     "promotion_a", "20210301", "20210331"
            ... )
        """
        response = await self.get_statistics_per_unit_with_http_info(
            custom_aggregation_unit, from_, to
        )
        return response.data

    async def get_statistics_per_unit_with_http_info(
        self, custom_aggregation_unit: str, from_: str, to: str
    ) -> ApiResponse[MessageEventResponse]:
        result = validate_custom_aggregation_units([custom_aggregation_unit])
        if not result.valid:
            raise RequestValidationError(result.messages)
        query = {"customAggregationUnit": custom_aggregation_unit, "from": from_, "to": to}
        return await self._request(
            Endpoints.INSIGHT_AGGREGATION, MessageEventResponse, query=query
        )

    async def get_aggregation_unit_usage(self) -> AggregationUnitUsageResponse:
        """Get the number of aggregation units used this month."""
        return (await self.get_aggregation_unit_usage_with_http_info()).data

    async def get_aggregation_unit_usage_with_http_info(
        self,
    ) -> ApiResponse[AggregationUnitUsageResponse]:
        return await self._request(Endpoints.AGGREGATION_UNIT_USAGE, AggregationUnitUsageResponse)

    async def get_aggregation_unit_name_list(
        self, limit: Optional[int] = None, start: Optional[str] = None
    ) -> AggregationUnitNameListResponse:
        """Get one page of aggregation unit names used this month."""
        return (await self.get_aggregation_unit_name_list_with_http_info(limit, start)).data

    async def get_aggregation_unit_name_list_with_http_info(
        self, limit: Optional[int] = None, start: Optional[str] = None
    ) -> ApiResponse[AggregationUnitNameListResponse]:
        return await self._request(
            Endpoints.AGGREGATION_UNIT_LIST,
            AggregationUnitNameListResponse,
            query={"limit": limit, "start": start},
        )
