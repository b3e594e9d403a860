"""
LINE Bot Client

An async Python client for the LINE Messaging API. Provides typed methods
for sending messages, managing rich menus and audience groups, reading
insights, channel settings and the OAuth token endpoints, plus webhook
signature verification.

Example:
    >>> from line_bot_client import AsyncLineBotClient, TextMessage
    >>> async with AsyncLineBotClient("your-channel-access-token") as client:
    ...     await client.messages.push_message("U1234", TextMessage(text="hello"))
    ...     profile = await client.chats.get_profile("U1234")
"""

__version__ = "1.0.0"
__license__ = "Apache-2.0"

from line_bot_client.client import AsyncLineBotClient
from line_bot_client.oauth import AsyncOAuthClient
from line_bot_client.config import ClientConfig, Endpoint, Endpoints, Limits, Surface
from line_bot_client.dispatcher import AsyncDispatcher, Envelope
from line_bot_client.request_options import RequestOptions
from line_bot_client.resources.base import ApiResponse
from line_bot_client.signature import compute_signature, validate_signature
from line_bot_client.webhook import SIGNATURE_HEADER, WebhookParser, WebhookPayload
from line_bot_client.models import (
    # Messages
    Message,
    TextMessage,
    StickerMessage,
    ImageMessage,
    VideoMessage,
    AudioMessage,
    LocationMessage,
    FlexMessage,
    TemplateMessage,
    # Narrowcast targeting
    Recipient,
    AudienceRecipient,
    RedeliveryRecipient,
    OperatorRecipient,
    DemographicFilter,
    GenderDemographicFilter,
    AgeDemographicFilter,
    AppTypeDemographicFilter,
    AreaDemographicFilter,
    SubscriptionPeriodDemographicFilter,
    OperatorDemographicFilter,
    Filter,
    Limit,
    # Rich menus
    RichMenuSize,
    RichMenuBounds,
    RichMenuArea,
    RichMenuRequest,
    # Audiences
    Audience,
    AudienceGroupStatus,
    AudienceGroupCreateRoute,
    AudienceGroupAuthorityLevel,
    # Results
    ValidationResult,
)
from line_bot_client.exceptions import (
    LineBotError,
    ConfigurationError,
    InvalidArgumentError,
    RequestValidationError,
    LineBotConnectionError,
    LineBotTimeoutError,
    ApiError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    SignatureValidationFailed,
    WebhookParseError,
)

__all__ = [
    # Version
    "__version__",
    # Clients
    "AsyncLineBotClient",
    "AsyncOAuthClient",
    "AsyncDispatcher",
    "Envelope",
    "ApiResponse",
    "RequestOptions",
    # Configuration
    "ClientConfig",
    "Endpoint",
    "Endpoints",
    "Limits",
    "Surface",
    # Webhooks
    "validate_signature",
    "compute_signature",
    "WebhookParser",
    "WebhookPayload",
    "SIGNATURE_HEADER",
    # Messages
    "Message",
    "TextMessage",
    "StickerMessage",
    "ImageMessage",
    "VideoMessage",
    "AudioMessage",
    "LocationMessage",
    "FlexMessage",
    "TemplateMessage",
    # Narrowcast targeting
    "Recipient",
    "AudienceRecipient",
    "RedeliveryRecipient",
    "OperatorRecipient",
    "DemographicFilter",
    "GenderDemographicFilter",
    "AgeDemographicFilter",
    "AppTypeDemographicFilter",
    "AreaDemographicFilter",
    "SubscriptionPeriodDemographicFilter",
    "OperatorDemographicFilter",
    "Filter",
    "Limit",
    # Rich menus
    "RichMenuSize",
    "RichMenuBounds",
    "RichMenuArea",
    "RichMenuRequest",
    # Audiences
    "Audience",
    "AudienceGroupStatus",
    "AudienceGroupCreateRoute",
    "AudienceGroupAuthorityLevel",
    "ValidationResult",
    # Exceptions
    "LineBotError",
    "ConfigurationError",
    "InvalidArgumentError",
    "RequestValidationError",
    "LineBotConnectionError",
    "LineBotTimeoutError",
    "ApiError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "SignatureValidationFailed",
    "WebhookParseError",
]
