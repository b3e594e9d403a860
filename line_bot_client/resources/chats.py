"""
LINE Bot Client - Chats Resource

This module provides methods for user profiles, followers, groups and rooms.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from line_bot_client.config import Endpoints, Limits
from line_bot_client.models import (
    GetFollowersResponse,
    GroupSummaryResponse,
    GroupUserProfileResponse,
    MemberCountResponse,
    MembersIdsResponse,
    UserProfileResponse,
)
from line_bot_client.resources.base import ApiResponse, BaseResource


class ChatsResource(BaseResource):
    """
    Resource for the people the bot talks to.

    The ``*_members_ids`` and ``get_followers`` methods return a single page
    with a ``next`` continuation token. ``get_group_member_ids``,
    ``get_room_member_ids`` and ``get_bot_followers_ids`` follow the tokens
    and return every ID.

    Example:
        >>> profile = await client.chats.get_profile("U1234")
        >>> print(profile.display_name)
        >>> member_ids = await client.chats.get_group_member_ids("C1234")
    """

    # =========================================================================
    # Profiles
    # =========================================================================

    async def get_profile(self, user_id: str) -> UserProfileResponse:
        """
        Get the profile of a user who added the bot as a friend.

        Args:
            user_id: User ID

        Returns:
            UserProfileResponse
        """
        return (await self.get_profile_with_http_info(user_id)).data

    async def get_profile_with_http_info(self, user_id: str) -> ApiResponse[UserProfileResponse]:
        return await self._request(Endpoints.PROFILE, UserProfileResponse, path_values=[user_id])

    async def get_group_member_profile(self, group_id: str, user_id: str) -> GroupUserProfileResponse:
        """Get the profile of a member of a group chat."""
        return (await self.get_group_member_profile_with_http_info(group_id, user_id)).data

    async def get_group_member_profile_with_http_info(
        self, group_id: str, user_id: str
    ) -> ApiResponse[GroupUserProfileResponse]:
        return await self._request(
            Endpoints.GROUP_MEMBER_PROFILE,
            GroupUserProfileResponse,
            path_values=[group_id, user_id],
        )

    async def get_room_member_profile(self, room_id: str, user_id: str) -> GroupUserProfileResponse:
        """Get the profile of a member of a multi-person chat."""
        return (await self.get_room_member_profile_with_http_info(room_id, user_id)).data

    async def get_room_member_profile_with_http_info(
        self, room_id: str, user_id: str
    ) -> ApiResponse[GroupUserProfileResponse]:
        return await self._request(
            Endpoints.ROOM_MEMBER_PROFILE,
            GroupUserProfileResponse,
            path_values=[room_id, user_id],
        )

    # =========================================================================
    # Member and follower IDs
    # =========================================================================

    async def get_group_members_ids(
        self, group_id: str, start: Optional[str] = None
    ) -> MembersIdsResponse:
        """
        Get one page of user IDs of a group's members.

        Args:
            group_id: Group ID
            start: ``next`` token of the previous page

        Returns:
            MembersIdsResponse with ``member_ids`` and ``next``
        """
        return (await self.get_group_members_ids_with_http_info(group_id, start)).data

    async def get_group_members_ids_with_http_info(
        self, group_id: str, start: Optional[str] = None
    ) -> ApiResponse[MembersIdsResponse]:
        return await self._request(
            Endpoints.GROUP_MEMBERS_IDS,
            MembersIdsResponse,
            path_values=[group_id],
            query={"start": start},
        )

    async def get_room_members_ids(
        self, room_id: str, start: Optional[str] = None
    ) -> MembersIdsResponse:
        """Get one page of user IDs of a room's members."""
        return (await self.get_room_members_ids_with_http_info(room_id, start)).data

    async def get_room_members_ids_with_http_info(
        self, room_id: str, start: Optional[str] = None
    ) -> ApiResponse[MembersIdsResponse]:
        return await self._request(
            Endpoints.ROOM_MEMBERS_IDS,
            MembersIdsResponse,
            path_values=[room_id],
            query={"start": start},
        )

    async def get_followers(
        self, start: Optional[str] = None, limit: Optional[int] = None
    ) -> GetFollowersResponse:
        """
        Get one page of user IDs of the bot's friends.

        Args:
            start: ``next`` token of the previous page
            limit: Page size, at most 1000

        Returns:
            GetFollowersResponse with ``user_ids`` and ``next``
        """
        return (await self.get_followers_with_http_info(start, limit)).data

    async def get_followers_with_http_info(
        self, start: Optional[str] = None, limit: Optional[int] = None
    ) -> ApiResponse[GetFollowersResponse]:
        return await self._request(
            Endpoints.FOLLOWERS_IDS,
            GetFollowersResponse,
            query={"start": start, "limit": limit},
        )

    async def get_group_member_ids(self, group_id: str) -> List[str]:
        """Get every member ID of a group, following ``next`` tokens."""
        return await self._collect_pages(
            lambda start: self.get_group_members_ids(group_id, start), "member_ids"
        )

    async def get_room_member_ids(self, room_id: str) -> List[str]:
        """Get every member ID of a room, following ``next`` tokens."""
        return await self._collect_pages(
            lambda start: self.get_room_members_ids(room_id, start), "member_ids"
        )

    async def get_bot_followers_ids(self) -> List[str]:
        """
        Get the user IDs of every friend of the bot.

        Pages are requested with the largest allowed page size.

        Example:
            >>> ids = await client.chats.get_bot_followers_ids()
            >>> print(f"{len(ids)} followers")
        """
        return await self._collect_pages(
            lambda start: self.get_followers(start, Limits.FOLLOWERS_PAGE_SIZE), "user_ids"
        )

    # =========================================================================
    # Groups and rooms
    # =========================================================================

    async def get_group_member_count(self, group_id: str) -> MemberCountResponse:
        """Get the number of users in a group chat."""
        return (await self.get_group_member_count_with_http_info(group_id)).data

    async def get_group_member_count_with_http_info(
        self, group_id: str
    ) -> ApiResponse[MemberCountResponse]:
        return await self._request(
            Endpoints.GROUP_MEMBERS_COUNT, MemberCountResponse, path_values=[group_id]
        )

    async def get_room_member_count(self, room_id: str) -> MemberCountResponse:
        """Get the number of users in a multi-person chat."""
        return (await self.get_room_member_count_with_http_info(room_id)).data

    async def get_room_member_count_with_http_info(
        self, room_id: str
    ) -> ApiResponse[MemberCountResponse]:
        return await self._request(
            Endpoints.ROOM_MEMBERS_COUNT, MemberCountResponse, path_values=[room_id]
        )

    async def get_group_summary(self, group_id: str) -> GroupSummaryResponse:
        """Get the name and icon of a group chat."""
        return (await self.get_group_summary_with_http_info(group_id)).data

    async def get_group_summary_with_http_info(
        self, group_id: str
    ) -> ApiResponse[GroupSummaryResponse]:
        return await self._request(
            Endpoints.GROUP_SUMMARY, GroupSummaryResponse, path_values=[group_id]
        )

    async def leave_group(self, group_id: str) -> Dict[str, Any]:
        """Leave a group chat."""
        return (await self.leave_group_with_http_info(group_id)).data

    async def leave_group_with_http_info(self, group_id: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.GROUP_LEAVE, path_values=[group_id])

    async def leave_room(self, room_id: str) -> Dict[str, Any]:
        """Leave a multi-person chat."""
        return (await self.leave_room_with_http_info(room_id)).data

    async def leave_room_with_http_info(self, room_id: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.ROOM_LEAVE, path_values=[room_id])
