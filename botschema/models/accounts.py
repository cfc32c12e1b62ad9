"""Identities: users, bots and skills inside a channel, and the conversation itself."""

from __future__ import annotations

from ._base import SchemaModel


class ChannelAccount(SchemaModel):
    """A user, bot or skill as known to a channel."""

    id: str | None = None
    name: str | None = None
    aad_object_id: str | None = None
    role: str | None = None


class ConversationAccount(SchemaModel):
    """The conversation (thread, group chat, channel) an activity belongs to."""

    is_group: bool | None = None
    conversation_type: str | None = None
    id: str | None = None
    name: str | None = None
    aad_object_id: str | None = None
    role: str | None = None
    tenant_id: str | None = None
