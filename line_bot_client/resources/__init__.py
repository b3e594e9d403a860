"""
LINE Bot Client - Resources

This module contains all API resource classes.
"""

from line_bot_client.resources.base import ApiResponse, BaseResource
from line_bot_client.resources.messages import MessagesResource
from line_bot_client.resources.chats import ChatsResource
from line_bot_client.resources.rich_menus import RichMenusResource
from line_bot_client.resources.insights import InsightsResource
from line_bot_client.resources.audiences import AudiencesResource
from line_bot_client.resources.channel import ChannelResource
from line_bot_client.resources.modules import ModulesResource

__all__ = [
    "ApiResponse",
    "BaseResource",
    "MessagesResource",
    "ChatsResource",
    "RichMenusResource",
    "InsightsResource",
    "AudiencesResource",
    "ChannelResource",
    "ModulesResource",
]
