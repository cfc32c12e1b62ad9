"""Conversation-level payloads: rosters, creation parameters, reply batches."""

from __future__ import annotations

from typing import Any

from ._base import SchemaModel
from .accounts import ChannelAccount
from .activity import Activity
from .responses import ResourceResponse


class ConversationMembers(SchemaModel):
    id: str | None = None
    members: list[ChannelAccount] | None = None


class ConversationsResult(SchemaModel):
    continuation_token: str | None = None
    conversations: list[ConversationMembers] | None = None


class PagedMembersResult(SchemaModel):
    continuation_token: str | None = None
    members: list[ChannelAccount] | None = None


class ConversationParameters(SchemaModel):
    """Parameters for starting a new conversation; ``activity`` is the optional first message."""

    is_group: bool | None = None
    bot: ChannelAccount | None = None
    members: list[ChannelAccount] | None = None
    topic_name: str | None = None
    activity: Activity | None = None
    channel_data: Any = None
    tenant_id: str | None = None


class ConversationResourceResponse(ResourceResponse):
    activity_id: str | None = None
    service_url: str | None = None


class ExpectedReplies(SchemaModel):
    """Replies buffered for an ``expectReplies`` delivery."""

    activities: list[Activity] | None = None


class Transcript(SchemaModel):
    activities: list[Activity] | None = None
