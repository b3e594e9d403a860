"""
LINE Bot Client - Modules Resource

This module provides methods for module channels: attaching a module to a
LINE Official Account and taking over or handing back chat control.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from line_bot_client.config import Endpoints
from line_bot_client.models import AttachModuleResponse, ModulesResponse
from line_bot_client.resources.base import ApiResponse, BaseResource


class ModulesResource(BaseResource):
    """
    Resource for module channels.

    Attaching exchanges the authorization code from the attach flow for the
    module's access to the account. Chat control methods switch a chat
    between the primary channel and the module.
    """

    async def attach_module(
        self,
        grant_type: str,
        code: str,
        redirect_uri: str,
        code_verifier: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        region: Optional[str] = None,
        basic_search_id: Optional[str] = None,
        scope: Optional[str] = None,
        brand_type: Optional[str] = None,
    ) -> AttachModuleResponse:
        """
        Attach a module channel to a LINE Official Account.

        The fields are sent url-encoded to the LINE Official Account
        Manager host.

        Args:
            grant_type: Always ``authorization_code``
            code: Authorization code from the attach redirect
            redirect_uri: Redirect URI used in the attach URL
            code_verifier: PKCE verifier, if the attach URL used PKCE
            client_id: Module channel ID
            client_secret: Module channel secret
            region: Region of the LINE Official Account
            basic_search_id: Basic ID of the LINE Official Account
            scope: Space-separated scopes
            brand_type: Brand type

        Returns:
            AttachModuleResponse with the bot's user ID and granted scopes
        """
        response = await self.attach_module_with_http_info(
            grant_type,
            code,
            redirect_uri,
            code_verifier,
            client_id,
            client_secret,
            region,
            basic_search_id,
            scope,
            brand_type,
        )
        return response.data

    async def attach_module_with_http_info(
        self,
        grant_type: str,
        code: str,
        redirect_uri: str,
        code_verifier: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        region: Optional[str] = None,
        basic_search_id: Optional[str] = None,
        scope: Optional[str] = None,
        brand_type: Optional[str] = None,
    ) -> ApiResponse[AttachModuleResponse]:
        form = {
            "grant_type": grant_type,
            "code": code,
            "redirect_uri": redirect_uri,
            "code_verifier": code_verifier,
            "client_id": client_id,
            "client_secret": client_secret,
            "region": region,
            "basic_search_id": basic_search_id,
            "scope": scope,
            "brand_type": brand_type,
        }
        return await self._request(Endpoints.MODULE_ATTACH, AttachModuleResponse, form=form)

    async def detach_module(self, bot_id: str) -> Dict[str, Any]:
        """Detach the module channel from a LINE Official Account."""
        return (await self.detach_module_with_http_info(bot_id)).data

    async def detach_module_with_http_info(self, bot_id: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.MODULE_DETACH, body={"botId": bot_id})

    async def acquire_chat_control(
        self,
        chat_id: str,
        expired: Optional[bool] = None,
        ttl: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Take chat control from the primary channel.

        Args:
            chat_id: User, group or room ID
            expired: Return control automatically after ``ttl``
            ttl: Seconds until control returns, at most one year
        """
        return (await self.acquire_chat_control_with_http_info(chat_id, expired, ttl)).data

    async def acquire_chat_control_with_http_info(
        self,
        chat_id: str,
        expired: Optional[bool] = None,
        ttl: Optional[int] = None,
    ) -> ApiResponse[Dict[str, Any]]:
        return await self._request(
            Endpoints.CHAT_CONTROL_ACQUIRE,
            path_values=[chat_id],
            body={"expired": expired, "ttl": ttl},
        )

    async def release_chat_control(self, chat_id: str) -> Dict[str, Any]:
        """Hand chat control back to the primary channel."""
        return (await self.release_chat_control_with_http_info(chat_id)).data

    async def release_chat_control_with_http_info(self, chat_id: str) -> ApiResponse[Dict[str, Any]]:
        return await self._request(Endpoints.CHAT_CONTROL_RELEASE, path_values=[chat_id])

    async def get_modules(self, start: Optional[str] = None, limit: Optional[int] = None) -> ModulesResponse:
        """Get one page of the bots a module channel is attached to."""
        return (await self.get_modules_with_http_info(start, limit)).data

    async def get_modules_with_http_info(
        self, start: Optional[str] = None, limit: Optional[int] = None
    ) -> ApiResponse[ModulesResponse]:
        return await self._request(
            Endpoints.MODULE_LIST, ModulesResponse, query={"start": start, "limit": limit}
        )

    async def get_all_module_bot_ids(self) -> List[str]:
        """Get the user IDs of every bot the module is attached to."""
        bots: List[Dict[str, Any]] = await self._collect_pages(self.get_modules, "bots")
        return [bot["userId"] for bot in bots if "userId" in bot]
