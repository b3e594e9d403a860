"""
LINE Bot Client - Audiences Resource

This module provides methods for managing audience groups used as
narrowcast recipients.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from line_bot_client.config import Endpoints
from line_bot_client.dispatcher import is_binary
from line_bot_client.models import (
    Audience,
    AudienceGroupAuthorityLevel,
    AudienceGroupCreateRoute,
    AudienceGroupResponse,
    AudienceGroupsResponse,
    AudienceGroupStatus,
    AuthorityLevelResponse,
    CreateAudienceGroupResponse,
    CreateClickAudienceGroupResponse,
    CreateImpAudienceGroupResponse,
)
from line_bot_client.resources.base import ApiResponse, BaseResource


AudienceLike = Union[Audience, Dict[str, Any]]


def _audience_list(audiences: Optional[Sequence[AudienceLike]]) -> Optional[List[AudienceLike]]:
    return list(audiences) if audiences is not None else None


def _audience_file(file: Any) -> Any:
    """Audience files are newline-separated IDs; raw bytes go up as text/plain."""
    if is_binary(file):
        return ("audiences.txt", bytes(file), "text/plain")
    return file


class AudiencesResource(BaseResource):
    """
    Resource for managing audience groups.

    Upload audiences are built from user IDs or IFAs, either inline or from
    a text file with one ID per line. Click and impression audiences are
    built from users who interacted with a previously sent message.

    Example:
        >>> group = await client.audiences.create_upload_audience_group(
        ...     description="VIP customers",
        ...     audiences=[Audience(id="U1234"), Audience(id="U5678")],
        ... )
        >>> print(group.audience_group_id)
        >>> await client.audiences.add_audiences_to_upload_audience_group_by_file(
        ...     group.audience_group_id, open("more_ids.txt", "rb").read()
        ... )
    """

    # =========================================================================
    # Upload audiences
    # =========================================================================

    async def create_upload_audience_group(
        self,
        description: str,
        audiences: Optional[List[AudienceLike]] = None,
        is_ifa_audience: bool = False,
        upload_description: Optional[str] = None,
    ) -> CreateAudienceGroupResponse:
        """
        Create an audience group from a list of user IDs or IFAs.

        Args:
            description: Audience group name
            audiences: Up to 10,000 audiences
            is_ifa_audience: The IDs are IFAs rather than user IDs
            upload_description: Description of this upload job

        Returns:
            CreateAudienceGroupResponse with the new ``audience_group_id``
        """
        response = await self.create_upload_audience_group_with_http_info(
            description, audiences, is_ifa_audience, upload_description
        )
        return response.data

    async def create_upload_audience_group_with_http_info(
        self,
        description: str,
        audiences: Optional[List[AudienceLike]] = None,
        is_ifa_audience: bool = False,
        upload_description: Optional[str] = None,
    ) -> ApiResponse[CreateAudienceGroupResponse]:
        body = {
            "description": description,
            "isIfaAudience": is_ifa_audience,
            "audiences": _audience_list(audiences),
            "uploadDescription": upload_description,
        }
        return await self._request(
            Endpoints.AUDIENCE_UPLOAD, CreateAudienceGroupResponse, body=body
        )

    async def create_upload_audience_group_by_file(
        self,
        description: str,
        file: Any,
        is_ifa_audience: bool = False,
        upload_description: Optional[str] = None,
    ) -> CreateAudienceGroupResponse:
        """
        Create an audience group from a text file of IDs.

        Args:
            description: Audience group name
            file: File content as bytes, an open binary file, or a
                ``(filename, content, content_type)`` tuple
            is_ifa_audience: The IDs are IFAs rather than user IDs
            upload_description: Description of this upload job

        Returns:
            CreateAudienceGroupResponse
        """
        response = await self.create_upload_audience_group_by_file_with_http_info(
            description, file, is_ifa_audience, upload_description
        )
        return response.data

    async def create_upload_audience_group_by_file_with_http_info(
        self,
        description: str,
        file: Any,
        is_ifa_audience: bool = False,
        upload_description: Optional[str] = None,
    ) -> ApiResponse[CreateAudienceGroupResponse]:
        fields = {
            "description": description,
            "isIfaAudience": is_ifa_audience,
            "uploadDescription": upload_description,
        }
        return await self._request(
            Endpoints.AUDIENCE_UPLOAD_BY_FILE,
            CreateAudienceGroupResponse,
            body=fields,
            files={"file": _audience_file(file)},
        )

    async def add_audiences_to_upload_audience_group(
        self,
        audience_group_id: int,
        audiences: List[AudienceLike],
        upload_description: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Add user IDs or IFAs to an existing upload audience group.

        Args:
            audience_group_id: Audience group ID
            audiences: Audiences to add
            upload_description: Description of this upload job
            description: New audience group name
        """
        response = await self.add_audiences_to_upload_audience_group_with_http_info(
            audience_group_id, audiences, upload_description, description
        )
        return response.data

    async def add_audiences_to_upload_audience_group_with_http_info(
        self,
        audience_group_id: int,
        audiences: List[AudienceLike],
        upload_description: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ApiResponse[Dict[str, Any]]:
        body = {
            "audienceGroupId": audience_group_id,
            "description": description,
            "uploadDescription": upload_description,
            "audiences": _audience_list(audiences),
        }
        return await self._request(Endpoints.AUDIENCE_UPLOAD_ADD, body=body)

    async def add_audiences_to_upload_audience_group_by_file(
        self,
        audience_group_id: int,
        file: Any,
        upload_description: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Add the IDs in a text file to an existing upload audience group."""
        response = await self.add_audiences_to_upload_audience_group_by_file_with_http_info(
            audience_group_id, file, upload_description
        )
        return response.data

    async def add_audiences_to_upload_audience_group_by_file_with_http_info(
        self,
        audience_group_id: int,
        file: Any,
        upload_description: Optional[str] = None,
    ) -> ApiResponse[Dict[str, Any]]:
        fields = {"audienceGroupId": audience_group_id, "uploadDescription": upload_description}
        return await self._request(
            Endpoints.AUDIENCE_UPLOAD_ADD_BY_FILE,
            body=fields,
            files={"file": _audience_file(file)},
        )

    # =========================================================================
    # Interaction audiences
    # =========================================================================

    async def create_click_audience_group(
        self,
        description: str,
        request_id: str,
        click_url: Optional[str] = None,
    ) -> CreateClickAudienceGroupResponse:
        """
        Create an audience of users who clicked a URL in a sent message.

        Args:
            description: Audience group name
            request_id: ``x-line-request-id`` of the broadcast or narrowcast
            click_url: Only count clicks on this URL

        Returns:
            CreateClickAudienceGroupResponse
        """
        response = await self.create_click_audience_group_with_http_info(
            description, request_id, click_url
        )
        return response.data

    async def create_click_audience_group_with_http_info(
        self,
        description: str,
        request_id: str,
        click_url: Optional[str] = None,
    ) -> ApiResponse[CreateClickAudienceGroupResponse]:
        body = {"description": description, "requestId": request_id, "clickUrl": click_url}
        return await self._request(
            Endpoints.AUDIENCE_CLICK, CreateClickAudienceGroupResponse, body=body
        )

    async def create_imp_audience_group(
        self, description: str, request_id: str
    ) -> CreateImpAudienceGroupResponse:
        """Create an audience of users who opened a sent message."""
        return (await self.create_imp_audience_group_with_http_info(description, request_id)).data

    async def create_imp_audience_group_with_http_info(
        self, description: str, request_id: str
    ) -> ApiResponse[CreateImpAudienceGroupResponse]:
        body = {"description": description, "requestId": request_id}
        return await self._request(
            Endpoints.AUDIENCE_IMP, CreateImpAudienceGroupResponse, body=body
        )

    # =========================================================================
    # Audience groups
    # =========================================================================

    async def update_audience_group_description(
        self, audience_group_id: int, description: str
    ) -> Dict[str, Any]:
        """Rename an audience group."""
        response = await self.update_audience_group_description_with_http_info(
            audience_group_id, description
        )
        return response.data

    async def update_audience_group_description_with_http_info(
        self, audience_group_id: int, description: str
    ) -> ApiResponse[Dict[str, Any]]:
        return await self._request(
            Endpoints.AUDIENCE_DESCRIPTION,
            path_values=[audience_group_id],
            body={"description": description},
        )

    async def activate_audience_group(self, audience_group_id: int) -> Dict[str, Any]:
        """Reactivate an expired audience group."""
        return (await self.activate_audience_group_with_http_info(audience_group_id)).data

    async def activate_audience_group_with_http_info(
        self, audience_group_id: int
    ) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.AUDIENCE_ACTIVATE, path_values=[audience_group_id])

    async def delete_audience_group(self, audience_group_id: int) -> Dict[str, Any]:
        """Delete an audience group."""
        return (await self.delete_audience_group_with_http_info(audience_group_id)).data

    async def delete_audience_group_with_http_info(
        self, audience_group_id: int
    ) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.AUDIENCE_GROUP_DELETE, path_values=[audience_group_id])

    async def get_audience_group(self, audience_group_id: int) -> AudienceGroupResponse:
        """
        Get an audience group with its upload jobs.

        Args:
            audience_group_id: Audience group ID

        Returns:
            AudienceGroupResponse
        """
        return (await self.get_audience_group_with_http_info(audience_group_id)).data

    async def get_audience_group_with_http_info(
        self, audience_group_id: int
    ) -> ApiResponse[AudienceGroupResponse]:
        return await self._request(
            Endpoints.AUDIENCE_GROUP, AudienceGroupResponse, path_values=[audience_group_id]
        )

    async def get_audience_groups(
        self,
        page: int = 1,
        description: Optional[str] = None,
        status: Optional[Union[AudienceGroupStatus, str]] = None,
        size: Optional[int] = None,
        create_route: Optional[Union[AudienceGroupCreateRoute, str]] = None,
        includes_external_public_groups: Optional[bool] = None,
    ) -> AudienceGroupsResponse:
        """
        List audience groups.

        Args:
            page: Page number, starting at 1
            description: Only groups whose name contains this text
            status: Only groups in this status
            size: Page size, at most 40
            create_route: Only groups created this way
            includes_external_public_groups: Include groups shared from other channels

        Returns:
            AudienceGroupsResponse; ``has_next_page`` tells whether to request ``page + 1``
        """
        response = await self.get_audience_groups_with_http_info(
            page, description, status, size, create_route, includes_external_public_groups
        )
        return response.data

    async def get_audience_groups_with_http_info(
        self,
        page: int = 1,
        description: Optional[str] = None,
        status: Optional[Union[AudienceGroupStatus, str]] = None,
        size: Optional[int] = None,
        create_route: Optional[Union[AudienceGroupCreateRoute, str]] = None,
        includes_external_public_groups: Optional[bool] = None,
    ) -> ApiResponse[AudienceGroupsResponse]:
        query = {
            "page": page,
            "description": description,
            "status": status,
            "size": size,
            "includesExternalPublicGroups": includes_external_public_groups,
            "createRoute": create_route,
        }
        return await self._request(Endpoints.AUDIENCE_LIST, AudienceGroupsResponse, query=query)

    # =========================================================================
    # Authority level
    # =========================================================================

    async def get_authority_level(self) -> AuthorityLevelResponse:
        """Get whether new audience groups are public or private."""
        return (await self.get_authority_level_with_http_info()).data

    async def get_authority_level_with_http_info(self) -> ApiResponse[AuthorityLevelResponse]:
        return await self._request(Endpoints.AUDIENCE_AUTHORITY_LEVEL, AuthorityLevelResponse)

    async def update_authority_level(
        self, authority_level: Union[AudienceGroupAuthorityLevel, str]
    ) -> Dict[str, Any]:
        """Set whether new audience groups are public or private."""
        return (await self.update_authority_level_with_http_info(authority_level)).data

    async def update_authority_level_with_http_info(
        self, authority_level: Union[AudienceGroupAuthorityLevel, str]
    ) -> ApiResponse[Dict[str, Any]]:
        return await self._request(
            Endpoints.AUDIENCE_AUTHORITY_LEVEL_UPDATE,
            body={"authorityLevel": authority_level},
        )
