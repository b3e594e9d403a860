"""
LINE Bot Client - Configuration

This module contains configuration classes, API surfaces and the endpoint
descriptors used by every resource.
"""

from dataclasses import dataclass
from enum import Enum


class Surface(str, Enum):
    """Base-URL family an endpoint belongs to."""
    MESSAGING = "messaging"
    DATA = "data"
    OAUTH = "oauth"
    OAUTH_V2_1 = "oauth_v2_1"
    OAUTH_V3 = "oauth_v3"
    MANAGER = "manager"


MESSAGING_API_PREFIX = "https://api.line.me/v2/bot"
DATA_API_PREFIX = "https://api-data.line.me/v2/bot"
OAUTH_BASE_PREFIX = "https://api.line.me/v2/oauth"
OAUTH_BASE_PREFIX_V2_1 = "https://api.line.me/oauth2/v2.1"
OAUTH_BASE_PREFIX_V3 = "https://api.line.me/oauth2/v3"
MANAGER_PREFIX = "https://manager.line.biz"


@dataclass
class ClientConfig:
    """
    Configuration for the LINE clients.

    Attributes:
        messaging_base_url: Base URL of the Messaging API
        data_base_url: Base URL of the content (api-data) API
        oauth_base_url: Base URL of the v2 OAuth endpoints
        oauth_v2_1_base_url: Base URL of the v2.1 OAuth endpoints
        oauth_v3_base_url: Base URL of the v3 OAuth endpoints
        manager_base_url: Base URL of the LINE Official Account Manager
        timeout: Request timeout in seconds
        debug: Enable debug logging
    """
    messaging_base_url: str = MESSAGING_API_PREFIX
    data_base_url: str = DATA_API_PREFIX
    oauth_base_url: str = OAUTH_BASE_PREFIX
    oauth_v2_1_base_url: str = OAUTH_BASE_PREFIX_V2_1
    oauth_v3_base_url: str = OAUTH_BASE_PREFIX_V3
    manager_base_url: str = MANAGER_PREFIX
    timeout: float = 30.0
    debug: bool = False

    def base_url(self, surface: Surface) -> str:
        """Return the base URL configured for ``surface``."""
        return {
            Surface.MESSAGING: self.messaging_base_url,
            Surface.DATA: self.data_base_url,
            Surface.OAUTH: self.oauth_base_url,
            Surface.OAUTH_V2_1: self.oauth_v2_1_base_url,
            Surface.OAUTH_V3: self.oauth_v3_base_url,
            Surface.MANAGER: self.manager_base_url,
        }[surface].rstrip("/")


# Default configuration
DEFAULT_CONFIG = ClientConfig()


@dataclass(frozen=True)
class Endpoint:
    """
    Static description of one API operation.

    Attributes:
        method: HTTP method
        path: Path template with ``{name}`` placeholders
        surface: API surface the path is relative to
        binary_response: Whether the response body is raw content
    """
    method: str
    path: str
    surface: Surface = Surface.MESSAGING
    binary_response: bool = False


# Endpoints
class Endpoints:
    """API endpoint descriptors."""

    # Messages
    MESSAGE_REPLY = Endpoint("POST", "/message/reply")
    MESSAGE_PUSH = Endpoint("POST", "/message/push")
    MESSAGE_MULTICAST = Endpoint("POST", "/message/multicast")
    MESSAGE_NARROWCAST = Endpoint("POST", "/message/narrowcast")
    MESSAGE_BROADCAST = Endpoint("POST", "/message/broadcast")
    MESSAGE_VALIDATE_REPLY = Endpoint("POST", "/message/validate/reply")
    MESSAGE_VALIDATE_PUSH = Endpoint("POST", "/message/validate/push")
    MESSAGE_VALIDATE_MULTICAST = Endpoint("POST", "/message/validate/multicast")
    MESSAGE_VALIDATE_NARROWCAST = Endpoint("POST", "/message/validate/narrowcast")
    MESSAGE_VALIDATE_BROADCAST = Endpoint("POST", "/message/validate/broadcast")
    MESSAGE_DELIVERY_REPLY = Endpoint("GET", "/message/delivery/reply")
    MESSAGE_DELIVERY_PUSH = Endpoint("GET", "/message/delivery/push")
    MESSAGE_DELIVERY_MULTICAST = Endpoint("GET", "/message/delivery/multicast")
    MESSAGE_DELIVERY_BROADCAST = Endpoint("GET", "/message/delivery/broadcast")
    MESSAGE_NARROWCAST_PROGRESS = Endpoint("GET", "/message/progress/narrowcast")
    MESSAGE_QUOTA = Endpoint("GET", "/message/quota")
    MESSAGE_QUOTA_CONSUMPTION = Endpoint("GET", "/message/quota/consumption")
    MESSAGE_CONTENT = Endpoint(
        "GET", "/message/{messageId}/content", Surface.DATA, binary_response=True
    )
    MESSAGE_CONTENT_PREVIEW = Endpoint(
        "GET", "/message/{messageId}/content/preview", Surface.DATA, binary_response=True
    )
    MESSAGE_CONTENT_TRANSCODING = Endpoint(
        "GET", "/message/{messageId}/content/transcoding", Surface.DATA
    )
    CHAT_LOADING = Endpoint("POST", "/chat/loading/start")
    CHAT_MARK_AS_READ = Endpoint("POST", "/chat/markAsRead")

    # Users, groups and rooms
    PROFILE = Endpoint("GET", "/profile/{userId}")
    FOLLOWERS_IDS = Endpoint("GET", "/followers/ids")
    GROUP_SUMMARY = Endpoint("GET", "/group/{groupId}/summary")
    GROUP_MEMBER_PROFILE = Endpoint("GET", "/group/{groupId}/member/{userId}")
    GROUP_MEMBERS_IDS = Endpoint("GET", "/group/{groupId}/members/ids")
    GROUP_MEMBERS_COUNT = Endpoint("GET", "/group/{groupId}/members/count")
    GROUP_LEAVE = Endpoint("POST", "/group/{groupId}/leave")
    ROOM_MEMBER_PROFILE = Endpoint("GET", "/room/{roomId}/member/{userId}")
    ROOM_MEMBERS_IDS = Endpoint("GET", "/room/{roomId}/members/ids")
    ROOM_MEMBERS_COUNT = Endpoint("GET", "/room/{roomId}/members/count")
    ROOM_LEAVE = Endpoint("POST", "/room/{roomId}/leave")

    # Rich menus
    RICH_MENU_CREATE = Endpoint("POST", "/richmenu")
    RICH_MENU_VALIDATE = Endpoint("POST", "/richmenu/validate")
    RICH_MENU_LIST = Endpoint("GET", "/richmenu/list")
    RICH_MENU = Endpoint("GET", "/richmenu/{richMenuId}")
    RICH_MENU_DELETE = Endpoint("DELETE", "/richmenu/{richMenuId}")
    RICH_MENU_IMAGE_UPLOAD = Endpoint("POST", "/richmenu/{richMenuId}/content", Surface.DATA)
    RICH_MENU_IMAGE = Endpoint(
        "GET", "/richmenu/{richMenuId}/content", Surface.DATA, binary_response=True
    )
    RICH_MENU_ALIAS_LIST = Endpoint("GET", "/richmenu/alias/list")
    RICH_MENU_ALIAS_CREATE = Endpoint("POST", "/richmenu/alias")
    RICH_MENU_ALIAS = Endpoint("GET", "/richmenu/alias/{richMenuAliasId}")
    RICH_MENU_ALIAS_UPDATE = Endpoint("POST", "/richmenu/alias/{richMenuAliasId}")
    RICH_MENU_ALIAS_DELETE = Endpoint("DELETE", "/richmenu/alias/{richMenuAliasId}")
    RICH_MENU_USER = Endpoint("GET", "/user/{userId}/richmenu")
    RICH_MENU_USER_LINK = Endpoint("POST", "/user/{userId}/richmenu/{richMenuId}")
    RICH_MENU_USER_UNLINK = Endpoint("DELETE", "/user/{userId}/richmenu")
    RICH_MENU_BULK_LINK = Endpoint("POST", "/richmenu/bulk/link")
    RICH_MENU_BULK_UNLINK = Endpoint("POST", "/richmenu/bulk/unlink")
    RICH_MENU_DEFAULT = Endpoint("GET", "/user/all/richmenu")
    RICH_MENU_DEFAULT_SET = Endpoint("POST", "/user/all/richmenu/{richMenuId}")
    RICH_MENU_DEFAULT_CANCEL = Endpoint("DELETE", "/user/all/richmenu")

    # Channel
    BOT_INFO = Endpoint("GET", "/info")
    WEBHOOK_ENDPOINT = Endpoint("GET", "/channel/webhook/endpoint")
    WEBHOOK_ENDPOINT_SET = Endpoint("PUT", "/channel/webhook/endpoint")
    WEBHOOK_ENDPOINT_TEST = Endpoint("POST", "/channel/webhook/test")
    LINK_TOKEN = Endpoint("POST", "/user/{userId}/linkToken")

    # Insights
    INSIGHT_MESSAGE_DELIVERY = Endpoint("GET", "/insight/message/delivery")
    INSIGHT_FOLLOWERS = Endpoint("GET", "/insight/followers")
    INSIGHT_DEMOGRAPHIC = Endpoint("GET", "/insight/demographic")
    INSIGHT_MESSAGE_EVENT = Endpoint("GET", "/insight/message/event")
    INSIGHT_AGGREGATION = Endpoint("GET", "/insight/message/event/aggregation")
    AGGREGATION_UNIT_USAGE = Endpoint("GET", "/message/aggregation/info")
    AGGREGATION_UNIT_LIST = Endpoint("GET", "/message/aggregation/list")

    # Audience groups
    AUDIENCE_UPLOAD = Endpoint("POST", "/audienceGroup/upload")
    AUDIENCE_UPLOAD_ADD = Endpoint("PUT", "/audienceGroup/upload")
    AUDIENCE_UPLOAD_BY_FILE = Endpoint("POST", "/audienceGroup/upload/byFile", Surface.DATA)
    AUDIENCE_UPLOAD_ADD_BY_FILE = Endpoint("PUT", "/audienceGroup/upload/byFile", Surface.DATA)
    AUDIENCE_CLICK = Endpoint("POST", "/audienceGroup/click")
    AUDIENCE_IMP = Endpoint("POST", "/audienceGroup/imp")
    AUDIENCE_DESCRIPTION = Endpoint("PUT", "/audienceGroup/{audienceGroupId}/updateDescription")
    AUDIENCE_ACTIVATE = Endpoint("PUT", "/audienceGroup/{audienceGroupId}/activate")
    AUDIENCE_GROUP = Endpoint("GET", "/audienceGroup/{audienceGroupId}")
    AUDIENCE_GROUP_DELETE = Endpoint("DELETE", "/audienceGroup/{audienceGroupId}")
    AUDIENCE_LIST = Endpoint("GET", "/audienceGroup/list")
    AUDIENCE_AUTHORITY_LEVEL = Endpoint("GET", "/audienceGroup/authorityLevel")
    AUDIENCE_AUTHORITY_LEVEL_UPDATE = Endpoint("PUT", "/audienceGroup/authorityLevel")

    # Module channels
    MODULE_ATTACH = Endpoint("POST", "/module/auth/v1/token", Surface.MANAGER)
    MODULE_DETACH = Endpoint("POST", "/channel/detach")
    MODULE_LIST = Endpoint("GET", "/list")
    CHAT_CONTROL_ACQUIRE = Endpoint("POST", "/chat/{chatId}/control/acquire")
    CHAT_CONTROL_RELEASE = Endpoint("POST", "/chat/{chatId}/control/release")

    # OAuth
    OAUTH_ACCESS_TOKEN = Endpoint("POST", "/accessToken", Surface.OAUTH)
    OAUTH_REVOKE = Endpoint("POST", "/revoke", Surface.OAUTH)
    OAUTH_VERIFY_ACCESS_TOKEN = Endpoint("GET", "/verify", Surface.OAUTH_V2_1)
    OAUTH_VERIFY_ID_TOKEN = Endpoint("POST", "/verify", Surface.OAUTH_V2_1)
    OAUTH_TOKEN_V2_1 = Endpoint("POST", "/token", Surface.OAUTH_V2_1)
    OAUTH_TOKEN_KEY_IDS_V2_1 = Endpoint("GET", "/tokens/kid", Surface.OAUTH_V2_1)
    OAUTH_REVOKE_V2_1 = Endpoint("POST", "/revoke", Surface.OAUTH_V2_1)
    OAUTH_TOKEN_V3 = Endpoint("POST", "/token", Surface.OAUTH_V3)


# Request limits
class Limits:
    """API limits and constraints."""

    # Pagination
    FOLLOWERS_PAGE_SIZE = 1000

    # Insights
    MAX_CUSTOM_AGGREGATION_UNITS = 1
    MAX_CUSTOM_AGGREGATION_UNIT_LENGTH = 30

    # Messages
    MAX_MESSAGES_PER_REQUEST = 5
    MAX_MULTICAST_RECIPIENTS = 500
    MAX_LOADING_SECONDS = 60


OAUTH_CLIENT_ASSERTION_TYPE = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"
RETRY_KEY_HEADER = "X-Line-Retry-Key"
REQUEST_ID_HEADER = "x-line-request-id"
ACCEPTED_REQUEST_ID_HEADER = "x-line-accepted-request-id"
USER_AGENT = "line-bot-client-python/1.0.0"
