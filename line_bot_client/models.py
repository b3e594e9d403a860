"""
LINE Bot Client - Data Models

This module contains the request and response records used by the client.
Models are dataclasses with snake_case attributes; ``to_dict`` and
``from_dict`` translate to and from the camelCase wire format.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel(name: str) -> str:
    """``chat_bar_text`` -> ``chatBarText``; ``and_`` -> ``and``."""
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_snake(name: str) -> str:
    """``chatBarText`` -> ``chat_bar_text``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def to_wire(value: Any) -> Any:
    """Convert models, enums and containers into JSON-ready values."""
    if isinstance(value, BaseModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


class BaseModel:
    """Base class for all models with common functionality."""

    # Discriminator emitted as "type" by tagged-union members
    TYPE: Optional[str] = None
    # snake_case field name -> model class for nested records
    _nested: Dict[str, type] = {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to a wire-format dictionary, dropping unset fields."""
        data: Dict[str, Any] = {}
        if self.TYPE is not None:
            data["type"] = self.TYPE
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            data[to_camel(f.name)] = to_wire(value)
        return data

    def to_json(self) -> str:
        """Convert model to JSON string."""
        return json.dumps(self.to_dict(), default=str)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        """Create model instance from a wire-format dictionary."""
        if not is_dataclass(cls):
            raise TypeError(f"{cls.__name__} is not a dataclass model")
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = to_snake(key)
            if name not in known and f"{name}_" in known:
                name = f"{name}_"
            if name not in known:
                continue
            nested = cls._nested.get(name)
            if nested is not None and value is not None:
                if isinstance(value, list):
                    value = [nested.from_dict(item) for item in value]
                else:
                    value = nested.from_dict(value)
            kwargs[name] = value
        return cls(**kwargs)


# =============================================================================
# Enums
# =============================================================================

class AudienceGroupStatus(str, Enum):
    """Status of an audience group."""
    IN_PROGRESS = "IN_PROGRESS"
    READY = "READY"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"
    INACTIVE = "INACTIVE"
    ACTIVATING = "ACTIVATING"


class AudienceGroupCreateRoute(str, Enum):
    """How an audience group was created."""
    OA_MANAGER = "OA_MANAGER"
    MESSAGING_API = "MESSAGING_API"
    POINT_AD = "POINT_AD"
    AD_MANAGER = "AD_MANAGER"


class AudienceGroupAuthorityLevel(str, Enum):
    """Authority level of audience groups in a channel."""
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


# =============================================================================
# Messages
# =============================================================================

class Message(BaseModel):
    """Base class of message objects."""


@dataclass
class TextMessage(Message):
    """Text message."""
    TYPE = "text"
    text: str
    emojis: Optional[List[Dict[str, Any]]] = None
    quote_token: Optional[str] = None
    quick_reply: Optional[Dict[str, Any]] = None
    sender: Optional[Dict[str, Any]] = None


@dataclass
class StickerMessage(Message):
    """Sticker message."""
    TYPE = "sticker"
    package_id: str
    sticker_id: str
    quote_token: Optional[str] = None
    quick_reply: Optional[Dict[str, Any]] = None
    sender: Optional[Dict[str, Any]] = None


@dataclass
class ImageMessage(Message):
    """Image message."""
    TYPE = "image"
    original_content_url: str
    preview_image_url: str
    quick_reply: Optional[Dict[str, Any]] = None
    sender: Optional[Dict[str, Any]] = None


@dataclass
class VideoMessage(Message):
    """Video message."""
    TYPE = "video"
    original_content_url: str
    preview_image_url: str
    tracking_id: Optional[str] = None
    quick_reply: Optional[Dict[str, Any]] = None
    sender: Optional[Dict[str, Any]] = None


@dataclass
class AudioMessage(Message):
    """Audio message."""
    TYPE = "audio"
    original_content_url: str
    duration: int
    quick_reply: Optional[Dict[str, Any]] = None
    sender: Optional[Dict[str, Any]] = None


@dataclass
class LocationMessage(Message):
    """Location message."""
    TYPE = "location"
    title: str
    address: str
    latitude: float
    longitude: float
    quick_reply: Optional[Dict[str, Any]] = None
    sender: Optional[Dict[str, Any]] = None


@dataclass
class FlexMessage(Message):
    """Flex message; ``contents`` is a bubble or carousel container."""
    TYPE = "flex"
    alt_text: str
    contents: Dict[str, Any]
    quick_reply: Optional[Dict[str, Any]] = None
    sender: Optional[Dict[str, Any]] = None


@dataclass
class TemplateMessage(Message):
    """Template message."""
    TYPE = "template"
    alt_text: str
    template: Dict[str, Any]
    quick_reply: Optional[Dict[str, Any]] = None
    sender: Optional[Dict[str, Any]] = None


MessageLike = Union[Message, Dict[str, Any]]


# =============================================================================
# Narrowcast targeting
# =============================================================================

class Recipient(BaseModel):
    """Base class of narrowcast recipient objects."""


@dataclass
class AudienceRecipient(Recipient):
    TYPE = "audience"
    audience_group_id: int


@dataclass
class RedeliveryRecipient(Recipient):
    TYPE = "redelivery"
    request_id: str


@dataclass
class OperatorRecipient(Recipient):
    """Combines recipients with ``and``/``or``/``not``."""
    TYPE = "operator"
    and_: Optional[List[Recipient]] = None
    or_: Optional[List[Recipient]] = None
    not_: Optional[Recipient] = None


class DemographicFilter(BaseModel):
    """Base class of demographic filter objects."""


@dataclass
class GenderDemographicFilter(DemographicFilter):
    TYPE = "gender"
    one_of: Optional[List[str]] = None


@dataclass
class AgeDemographicFilter(DemographicFilter):
    TYPE = "age"
    gte: Optional[str] = None
    lt: Optional[str] = None


@dataclass
class AppTypeDemographicFilter(DemographicFilter):
    TYPE = "appType"
    one_of: Optional[List[str]] = None


@dataclass
class AreaDemographicFilter(DemographicFilter):
    TYPE = "area"
    one_of: Optional[List[str]] = None


@dataclass
class SubscriptionPeriodDemographicFilter(DemographicFilter):
    TYPE = "subscriptionPeriod"
    gte: Optional[str] = None
    lt: Optional[str] = None


@dataclass
class OperatorDemographicFilter(DemographicFilter):
    """Combines demographic filters with ``and``/``or``/``not``."""
    TYPE = "operator"
    and_: Optional[List[DemographicFilter]] = None
    or_: Optional[List[DemographicFilter]] = None
    not_: Optional[DemographicFilter] = None


@dataclass
class Filter(BaseModel):
    demographic: Optional[DemographicFilter] = None


@dataclass
class Limit(BaseModel):
    """Upper bound on narrowcast recipients."""
    max: Optional[int] = None
    up_to_remaining_quota: Optional[bool] = None


# =============================================================================
# Message responses
# =============================================================================

@dataclass
class SentMessage(BaseModel):
    id: Optional[str] = None
    quote_token: Optional[str] = None


@dataclass
class ReplyMessageResponse(BaseModel):
    sent_messages: List[SentMessage] = field(default_factory=list)

    _nested = {"sent_messages": SentMessage}


@dataclass
class PushMessageResponse(BaseModel):
    sent_messages: List[SentMessage] = field(default_factory=list)

    _nested = {"sent_messages": SentMessage}


@dataclass
class NumberOfMessagesResponse(BaseModel):
    """Number of sent messages on a given day."""
    status: Optional[str] = None
    success: Optional[int] = None


@dataclass
class NarrowcastProgressResponse(BaseModel):
    phase: Optional[str] = None
    success_count: Optional[int] = None
    failure_count: Optional[int] = None
    target_count: Optional[int] = None
    failed_description: Optional[str] = None
    error_code: Optional[int] = None
    accepted_time: Optional[str] = None
    completed_time: Optional[str] = None


@dataclass
class MessageQuotaResponse(BaseModel):
    type: Optional[str] = None
    value: Optional[int] = None


@dataclass
class QuotaConsumptionResponse(BaseModel):
    total_usage: Optional[int] = None


@dataclass
class ContentTranscodingResponse(BaseModel):
    """Preparation status of audio/video content: processing, succeeded or failed."""
    status: Optional[str] = None


# =============================================================================
# Users, groups and rooms
# =============================================================================

@dataclass
class UserProfileResponse(BaseModel):
    display_name: Optional[str] = None
    user_id: Optional[str] = None
    picture_url: Optional[str] = None
    status_message: Optional[str] = None
    language: Optional[str] = None


@dataclass
class GroupUserProfileResponse(BaseModel):
    display_name: Optional[str] = None
    user_id: Optional[str] = None
    picture_url: Optional[str] = None


@dataclass
class GroupSummaryResponse(BaseModel):
    group_id: Optional[str] = None
    group_name: Optional[str] = None
    picture_url: Optional[str] = None


@dataclass
class MembersIdsResponse(BaseModel):
    """One page of member IDs; ``next`` is the continuation token."""
    member_ids: List[str] = field(default_factory=list)
    next: Optional[str] = None


@dataclass
class GetFollowersResponse(BaseModel):
    """One page of follower IDs; ``next`` is the continuation token."""
    user_ids: List[str] = field(default_factory=list)
    next: Optional[str] = None


@dataclass
class MemberCountResponse(BaseModel):
    count: Optional[int] = None


# =============================================================================
# Rich menus
# =============================================================================

@dataclass
class RichMenuSize(BaseModel):
    width: int = 2500
    height: int = 1686


@dataclass
class RichMenuBounds(BaseModel):
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class RichMenuArea(BaseModel):
    bounds: RichMenuBounds
    action: Dict[str, Any]

    _nested = {"bounds": RichMenuBounds}


@dataclass
class RichMenuRequest(BaseModel):
    """Rich menu definition sent to create/validate."""
    size: RichMenuSize
    selected: bool
    name: str
    chat_bar_text: str
    areas: List[RichMenuArea] = field(default_factory=list)


@dataclass
class RichMenuResponse(BaseModel):
    rich_menu_id: Optional[str] = None
    size: Optional[RichMenuSize] = None
    selected: Optional[bool] = None
    name: Optional[str] = None
    chat_bar_text: Optional[str] = None
    areas: List[RichMenuArea] = field(default_factory=list)

    _nested = {"size": RichMenuSize, "areas": RichMenuArea}


@dataclass
class RichMenuListResponse(BaseModel):
    richmenus: List[RichMenuResponse] = field(default_factory=list)

    _nested = {"richmenus": RichMenuResponse}


@dataclass
class RichMenuIdResponse(BaseModel):
    rich_menu_id: Optional[str] = None


@dataclass
class RichMenuAliasResponse(BaseModel):
    rich_menu_alias_id: Optional[str] = None
    rich_menu_id: Optional[str] = None


@dataclass
class RichMenuAliasListResponse(BaseModel):
    aliases: List[RichMenuAliasResponse] = field(default_factory=list)

    _nested = {"aliases": RichMenuAliasResponse}


# =============================================================================
# Channel
# =============================================================================

@dataclass
class BotInfoResponse(BaseModel):
    user_id: Optional[str] = None
    basic_id: Optional[str] = None
    premium_id: Optional[str] = None
    display_name: Optional[str] = None
    picture_url: Optional[str] = None
    chat_mode: Optional[str] = None
    mark_as_read_mode: Optional[str] = None


@dataclass
class WebhookEndpointResponse(BaseModel):
    endpoint: Optional[str] = None
    active: Optional[bool] = None


@dataclass
class WebhookTestResponse(BaseModel):
    """Result of sending a test webhook event."""
    success: Optional[bool] = None
    timestamp: Optional[str] = None
    status_code: Optional[int] = None
    reason: Optional[str] = None
    detail: Optional[str] = None


@dataclass
class IssueLinkTokenResponse(BaseModel):
    link_token: Optional[str] = None


# =============================================================================
# Insights
# =============================================================================

@dataclass
class ValidationResult(BaseModel):
    """Outcome of a local argument check."""
    valid: bool
    messages: List[str] = field(default_factory=list)


@dataclass
class MessageDeliveriesResponse(BaseModel):
    status: Optional[str] = None
    broadcast: Optional[int] = None
    targeting: Optional[int] = None
    auto_response: Optional[int] = None
    welcome_response: Optional[int] = None
    chat: Optional[int] = None
    api_broadcast: Optional[int] = None
    api_push: Optional[int] = None
    api_multicast: Optional[int] = None
    api_narrowcast: Optional[int] = None
    api_reply: Optional[int] = None


@dataclass
class FollowersStatisticsResponse(BaseModel):
    status: Optional[str] = None
    followers: Optional[int] = None
    targeted_reaches: Optional[int] = None
    blocks: Optional[int] = None


@dataclass
class FriendsDemographicsResponse(BaseModel):
    available: Optional[bool] = None
    genders: List[Dict[str, Any]] = field(default_factory=list)
    ages: List[Dict[str, Any]] = field(default_factory=list)
    areas: List[Dict[str, Any]] = field(default_factory=list)
    app_types: List[Dict[str, Any]] = field(default_factory=list)
    subscription_periods: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class MessageEventResponse(BaseModel):
    """Interaction statistics; also returned per custom aggregation unit."""
    overview: Optional[Dict[str, Any]] = None
    messages: List[Dict[str, Any]] = field(default_factory=list)
    clicks: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class AggregationUnitUsageResponse(BaseModel):
    num_of_custom_aggregation_units: Optional[int] = None


@dataclass
class AggregationUnitNameListResponse(BaseModel):
    custom_aggregation_units: List[str] = field(default_factory=list)
    next: Optional[str] = None


# =============================================================================
# Audience groups
# =============================================================================

@dataclass
class Audience(BaseModel):
    """User ID or IFA to add to an upload audience."""
    id: str


@dataclass
class AudienceGroup(BaseModel):
    audience_group_id: Optional[int] = None
    create_route: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    failed_type: Optional[str] = None
    audience_count: Optional[int] = None
    created: Optional[int] = None
    permission: Optional[str] = None
    expire_timestamp: Optional[int] = None
    is_ifa_audience: Optional[bool] = None
    request_id: Optional[str] = None
    click_url: Optional[str] = None


@dataclass
class CreateAudienceGroupResponse(BaseModel):
    """Upload audience group as created."""
    audience_group_id: Optional[int] = None
    create_route: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    created: Optional[int] = None
    permission: Optional[str] = None
    expire_timestamp: Optional[int] = None
    is_ifa_audience: Optional[bool] = None


@dataclass
class CreateClickAudienceGroupResponse(CreateAudienceGroupResponse):
    """Click audience group as created."""
    request_id: Optional[str] = None
    click_url: Optional[str] = None


@dataclass
class CreateImpAudienceGroupResponse(BaseModel):
    """Impression audience group as created."""
    audience_group_id: Optional[int] = None
    type: Optional[str] = None
    description: Optional[str] = None
    created: Optional[int] = None
    request_id: Optional[str] = None


@dataclass
class AudienceGroupResponse(BaseModel):
    audience_group: Optional[AudienceGroup] = None
    jobs: List[Dict[str, Any]] = field(default_factory=list)
    adaccount: Optional[Dict[str, Any]] = None

    _nested = {"audience_group": AudienceGroup}


@dataclass
class AudienceGroupsResponse(BaseModel):
    audience_groups: List[AudienceGroup] = field(default_factory=list)
    has_next_page: Optional[bool] = None
    total_count: Optional[int] = None
    read_write_audience_group_total_count: Optional[int] = None
    page: Optional[int] = None
    size: Optional[int] = None

    _nested = {"audience_groups": AudienceGroup}


@dataclass
class AuthorityLevelResponse(BaseModel):
    authority_level: Optional[str] = None


# =============================================================================
# Module channels
# =============================================================================

@dataclass
class AttachModuleResponse(BaseModel):
    bot_id: Optional[str] = None
    scopes: List[str] = field(default_factory=list)


@dataclass
class ModulesResponse(BaseModel):
    bots: List[Dict[str, Any]] = field(default_factory=list)
    next: Optional[str] = None


# =============================================================================
# OAuth
# =============================================================================

@dataclass
class ChannelAccessTokenResponse(BaseModel):
    access_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
    key_id: Optional[str] = None


@dataclass
class VerifyAccessTokenResponse(BaseModel):
    client_id: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None


@dataclass
class VerifyIdTokenResponse(BaseModel):
    iss: Optional[str] = None
    sub: Optional[str] = None
    aud: Optional[str] = None
    exp: Optional[int] = None
    iat: Optional[int] = None
    auth_time: Optional[int] = None
    nonce: Optional[str] = None
    amr: List[str] = field(default_factory=list)
    name: Optional[str] = None
    picture: Optional[str] = None
    email: Optional[str] = None


@dataclass
class ChannelAccessTokenKeyIdsResponse(BaseModel):
    kids: List[str] = field(default_factory=list)
