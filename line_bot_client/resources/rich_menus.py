"""
LINE Bot Client - Rich Menus Resource

This module provides methods for managing rich menus, their images,
aliases and links to users.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from line_bot_client.config import Endpoints
from line_bot_client.dispatcher import is_binary
from line_bot_client.exceptions import InvalidArgumentError
from line_bot_client.models import (
    RichMenuAliasListResponse,
    RichMenuAliasResponse,
    RichMenuIdResponse,
    RichMenuListResponse,
    RichMenuRequest,
    RichMenuResponse,
)
from line_bot_client.resources.base import ApiResponse, BaseResource


RichMenuLike = Union[RichMenuRequest, Dict[str, Any]]

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_JPEG_SIGNATURE = b"\xff\xd8\xff"


def image_content_type(data: bytes) -> str:
    """Content-Type of a rich menu image, from its leading bytes."""
    if data.startswith(_PNG_SIGNATURE):
        return "image/png"
    if data.startswith(_JPEG_SIGNATURE):
        return "image/jpeg"
    return "application/octet-stream"


class RichMenusResource(BaseResource):
    """
    Resource for managing rich menus.

    A rich menu is created from its definition, given an image with
    ``set_image``, and then shown either to everyone (``set_default``) or to
    specific users (``link_to_user`` / ``link_to_users``).

    Example:
        >>> menu = RichMenuRequest(
        ...     size=RichMenuSize(),
        ...     selected=False,
        ...     name="Nice richmenu",
        ...     chat_bar_text="Tap here",
        ...     areas=[RichMenuArea(bounds=RichMenuBounds(0, 0, 2500, 1686), action={...})],
        ... )
        >>> created = await client.rich_menus.create(menu)
        >>> with open("menu.png", "rb") as f:
        ...     await client.rich_menus.set_image(created.rich_menu_id, f.read())
        >>> await client.rich_menus.set_default(created.rich_menu_id)
    """

    # =========================================================================
    # Rich menus
    # =========================================================================

    async def get(self, rich_menu_id: str) -> RichMenuResponse:
        """
        Get a rich menu.

        Args:
            rich_menu_id: Rich menu ID

        Returns:
            RichMenuResponse
        """
        return (await self.get_with_http_info(rich_menu_id)).data

    async def get_with_http_info(self, rich_menu_id: str) -> ApiResponse[RichMenuResponse]:
        return await self._request(Endpoints.RICH_MENU, RichMenuResponse, path_values=[rich_menu_id])

    async def create(self, rich_menu: RichMenuLike) -> RichMenuIdResponse:
        """
        Create a rich menu.

        Args:
            rich_menu: Rich menu definition

        Returns:
            RichMenuIdResponse with the new ``rich_menu_id``
        """
        return (await self.create_with_http_info(rich_menu)).data

    async def create_with_http_info(self, rich_menu: RichMenuLike) -> ApiResponse[RichMenuIdResponse]:
        return await self._request(Endpoints.RICH_MENU_CREATE, RichMenuIdResponse, body=rich_menu)

    async def validate(self, rich_menu: RichMenuLike) -> Dict[str, Any]:
        """Check a rich menu definition without creating it."""
        return (await self.validate_with_http_info(rich_menu)).data

    async def validate_with_http_info(self, rich_menu: RichMenuLike) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.RICH_MENU_VALIDATE, body=rich_menu)

    async def delete(self, rich_menu_id: str) -> Dict[str, Any]:
        """Delete a rich menu."""
        return (await self.delete_with_http_info(rich_menu_id)).data

    async def delete_with_http_info(self, rich_menu_id: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.RICH_MENU_DELETE, path_values=[rich_menu_id])

    async def list(self) -> RichMenuListResponse:
        """List the rich menus of the channel."""
        return (await self.list_with_http_info()).data

    async def list_with_http_info(self) -> ApiResponse[RichMenuListResponse]:
        return await self._request(Endpoints.RICH_MENU_LIST, RichMenuListResponse)

    # =========================================================================
    # Images
    # =========================================================================

    async def set_image(
        self,
        rich_menu_id: str,
        data: bytes,
        content_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Upload the image of a rich menu.

        Args:
            rich_menu_id: Rich menu ID
            data: PNG or JPEG image bytes
            content_type: Image Content-Type; detected from ``data`` if omitted

        Raises:
            InvalidArgumentError: If ``data`` is not bytes
        """
        return (await self.set_image_with_http_info(rich_menu_id, data, content_type)).data

    async def set_image_with_http_info(
        self,
        rich_menu_id: str,
        data: bytes,
        content_type: Optional[str] = None,
    ) -> ApiResponse[Dict[str, Any]]:
        if not is_binary(data):
            raise InvalidArgumentError("invalid data type for binary data")
        return await self._request(
            Endpoints.RICH_MENU_IMAGE_UPLOAD,
            path_values=[rich_menu_id],
            body=data,
            content_type=content_type or image_content_type(bytes(data)),
        )

    async def get_image(self, rich_menu_id: str) -> bytes:
        """Download the image of a rich menu."""
        return (await self.get_image_with_http_info(rich_menu_id)).data

    async def get_image_with_http_info(self, rich_menu_id: str) -> ApiResponse[bytes]:
        return await self._request(Endpoints.RICH_MENU_IMAGE, path_values=[rich_menu_id])

    # =========================================================================
    # Aliases
    # =========================================================================

    async def list_aliases(self) -> RichMenuAliasListResponse:
        """List the rich menu aliases of the channel."""
        return (await self.list_aliases_with_http_info()).data

    async def list_aliases_with_http_info(self) -> ApiResponse[RichMenuAliasListResponse]:
        return await self._request(Endpoints.RICH_MENU_ALIAS_LIST, RichMenuAliasListResponse)

    async def get_alias(self, rich_menu_alias_id: str) -> RichMenuAliasResponse:
        """Get the rich menu an alias points to."""
        return (await self.get_alias_with_http_info(rich_menu_alias_id)).data

    async def get_alias_with_http_info(
        self, rich_menu_alias_id: str
    ) -> ApiResponse[RichMenuAliasResponse]:
        return await self._request(
            Endpoints.RICH_MENU_ALIAS, RichMenuAliasResponse, path_values=[rich_menu_alias_id]
        )

    async def create_alias(self, rich_menu_id: str, rich_menu_alias_id: str) -> Dict[str, Any]:
        """
        Create an alias for a rich menu.

        Args:
            rich_menu_id: Rich menu the alias points to
            rich_menu_alias_id: Alias name
        """
        return (await self.create_alias_with_http_info(rich_menu_id, rich_menu_alias_id)).data

    async def create_alias_with_http_info(
        self, rich_menu_id: str, rich_menu_alias_id: str
    ) -> ApiResponse[Dict[str, Any]]:
        body = {"richMenuId": rich_menu_id, "richMenuAliasId": rich_menu_alias_id}
        return await self._request(Endpoints.RICH_MENU_ALIAS_CREATE, body=body)

    async def update_alias(self, rich_menu_alias_id: str, rich_menu_id: str) -> Dict[str, Any]:
        """Point an existing alias at another rich menu."""
        return (await self.update_alias_with_http_info(rich_menu_alias_id, rich_menu_id)).data

    async def update_alias_with_http_info(
        self, rich_menu_alias_id: str, rich_menu_id: str
    ) -> ApiResponse[Dict[str, Any]]:
        return await self._request(
            Endpoints.RICH_MENU_ALIAS_UPDATE,
            path_values=[rich_menu_alias_id],
            body={"richMenuId": rich_menu_id},
        )

    async def delete_alias(self, rich_menu_alias_id: str) -> Dict[str, Any]:
        """Delete a rich menu alias."""
        return (await self.delete_alias_with_http_info(rich_menu_alias_id)).data

    async def delete_alias_with_http_info(self, rich_menu_alias_id: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(
            Endpoints.RICH_MENU_ALIAS_DELETE, path_values=[rich_menu_alias_id]
        )

    # =========================================================================
    # Per-user menus
    # =========================================================================

    async def get_for_user(self, user_id: str) -> RichMenuIdResponse:
        """Get the ID of the rich menu linked to a user."""
        return (await self.get_for_user_with_http_info(user_id)).data

    async def get_for_user_with_http_info(self, user_id: str) -> ApiResponse[RichMenuIdResponse]:
        return await self._request(
            Endpoints.RICH_MENU_USER, RichMenuIdResponse, path_values=[user_id]
        )

    async def link_to_user(self, user_id: str, rich_menu_id: str) -> Dict[str, Any]:
        """Link a rich menu to a user."""
        return (await self.link_to_user_with_http_info(user_id, rich_menu_id)).data

    async def link_to_user_with_http_info(
        self, user_id: str, rich_menu_id: str
    ) -> ApiResponse[Dict[str, Any]]:
        return await self._request(
            Endpoints.RICH_MENU_USER_LINK, path_values=[user_id, rich_menu_id]
        )

    async def unlink_from_user(self, user_id: str) -> Dict[str, Any]:
        """Unlink the rich menu from a user."""
        return (await self.unlink_from_user_with_http_info(user_id)).data

    async def unlink_from_user_with_http_info(self, user_id: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.RICH_MENU_USER_UNLINK, path_values=[user_id])

    async def link_to_users(self, rich_menu_id: str, user_ids: List[str]) -> Dict[str, Any]:
        """
        Link a rich menu to up to 500 users at once.

        Args:
            rich_menu_id: Rich menu ID
            user_ids: User IDs
        """
        return (await self.link_to_users_with_http_info(rich_menu_id, user_ids)).data

    async def link_to_users_with_http_info(
        self, rich_menu_id: str, user_ids: List[str]
    ) -> ApiResponse[Dict[str, Any]]:
        body = {"richMenuId": rich_menu_id, "userIds": list(user_ids)}
        return await self._request(Endpoints.RICH_MENU_BULK_LINK, body=body)

    async def unlink_from_users(self, user_ids: List[str]) -> Dict[str, Any]:
        """Unlink rich menus from up to 500 users at once."""
        return (await self.unlink_from_users_with_http_info(user_ids)).data

    async def unlink_from_users_with_http_info(self, user_ids: List[str]) -> ApiResponse[Dict[str, Any]]:
        return await self._request(
            Endpoints.RICH_MENU_BULK_UNLINK, body={"userIds": list(user_ids)}
        )

    # =========================================================================
    # Default menu
    # =========================================================================

    async def set_default(self, rich_menu_id: str) -> Dict[str, Any]:
        """Show a rich menu to every user without a linked menu."""
        return (await self.set_default_with_http_info(rich_menu_id)).data

    async def set_default_with_http_info(self, rich_menu_id: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.RICH_MENU_DEFAULT_SET, path_values=[rich_menu_id])

    async def get_default_id(self) -> RichMenuIdResponse:
        """Get the ID of the default rich menu."""
        return (await self.get_default_id_with_http_info()).data

    async def get_default_id_with_http_info(self) -> ApiResponse[RichMenuIdResponse]:
        return await self._request(Endpoints.RICH_MENU_DEFAULT, RichMenuIdResponse)

    async def cancel_default(self) -> Dict[str, Any]:
        """Remove the default rich menu."""
        return (await self.cancel_default_with_http_info()).data

    async def cancel_default_with_http_info(self) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.RICH_MENU_DEFAULT_CANCEL)
