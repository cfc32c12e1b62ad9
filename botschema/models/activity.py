"""The Activity record -- the unit of exchange between a bot and a channel.

``Activity`` is deliberately flat: it holds every field any activity kind
may use, and ``type`` decides which of them are meaningful. Narrowed
views live in :mod:`botschema.models.views`; the ``as_*`` methods here
delegate to them.

Reply and routing helpers:

- ``create_reply()`` / ``create_trace()`` build an outgoing activity
  addressed back to the sender.
- ``get_conversation_reference()`` / ``apply_conversation_reference()``
  move routing information between an activity and a compact
  :class:`ConversationReference`.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, ClassVar, TypeVar

from pydantic import Field, SerializeAsAny, TypeAdapter

from ..config.settings import cfg
from ..util.result import Result
from . import views
from ._base import SchemaModel
from .accounts import ChannelAccount, ConversationAccount
from .attachments import Attachment
from .cards import SuggestedActions
from .constants import ActivityTypes, ContentTypes
from .conversation_reference import ConversationReference
from .entities import Entity, Mention, SemanticAction
from .responses import ResourceResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Types whose canonical casing is not just a lower-cased first letter.
_CANONICAL_TYPES = {
    t.value.lower(): t.value
    for t in (
        ActivityTypes.message,
        ActivityTypes.contact_relation_update,
        ActivityTypes.conversation_update,
        ActivityTypes.delete_user_data,
        ActivityTypes.typing,
    )
}


class MessageReaction(SchemaModel):
    type: str | None = None


class TextHighlight(SchemaModel):
    """Span of an earlier message's text; ``occurrence`` picks among repeats (1-based)."""

    text: str | None = None
    occurrence: int | None = None


class Activity(SchemaModel):
    content_type: ClassVar[str] = ContentTypes.activity.value

    type: str | None = None
    id: str | None = None
    timestamp: datetime | None = None
    local_timestamp: datetime | None = None
    local_timezone: str | None = None
    service_url: str | None = None
    channel_id: str | None = None
    from_: ChannelAccount | None = Field(default=None, alias="from")
    conversation: ConversationAccount | None = None
    recipient: ChannelAccount | None = None
    text_format: str | None = None
    attachment_layout: str | None = None
    members_added: list[ChannelAccount] | None = None
    members_removed: list[ChannelAccount] | None = None
    reactions_added: list[MessageReaction] | None = None
    reactions_removed: list[MessageReaction] | None = None
    topic_name: str | None = None
    history_disclosed: bool | None = None
    locale: str | None = None
    text: str | None = None
    speak: str | None = None
    input_hint: str | None = None
    summary: str | None = None
    suggested_actions: SuggestedActions | None = None
    attachments: list[Attachment] | None = None
    entities: list[SerializeAsAny[Entity]] | None = None
    channel_data: Any = None
    action: str | None = None
    reply_to_id: str | None = None
    label: str | None = None
    value_type: str | None = None
    value: Any = None
    name: str | None = None
    relates_to: ConversationReference | None = None
    code: str | None = None
    expiration: datetime | None = None
    importance: str | None = None
    delivery_mode: str | None = None
    listen_for: list[str] | None = None
    text_highlights: list[TextHighlight] | None = None
    semantic_action: SemanticAction | None = None
    caller_id: str | None = None

    # -- factories ---------------------------------------------------------

    @classmethod
    def create_message_activity(cls) -> Activity:
        return cls(type=ActivityTypes.message.value, attachments=[], entities=[])

    @classmethod
    def create_contact_relation_update_activity(cls) -> Activity:
        return cls(type=ActivityTypes.contact_relation_update.value)

    @classmethod
    def create_conversation_update_activity(cls) -> Activity:
        return cls(
            type=ActivityTypes.conversation_update.value,
            members_added=[],
            members_removed=[],
        )

    @classmethod
    def create_typing_activity(cls) -> Activity:
        return cls(type=ActivityTypes.typing.value)

    @classmethod
    def create_handoff_activity(cls) -> Activity:
        return cls(type=ActivityTypes.handoff.value)

    @classmethod
    def create_end_of_conversation_activity(cls) -> Activity:
        return cls(type=ActivityTypes.end_of_conversation.value)

    @classmethod
    def create_event_activity(cls) -> Activity:
        return cls(type=ActivityTypes.event.value)

    @classmethod
    def create_invoke_activity(cls) -> Activity:
        return cls(type=ActivityTypes.invoke.value)

    @classmethod
    def create_trace_activity(
        cls,
        name: str,
        value_type: str | None = None,
        value: Any = None,
        label: str | None = None,
    ) -> Activity:
        return cls(
            type=ActivityTypes.trace.value,
            name=name,
            label=label,
            value_type=value_type or _type_name(value),
            value=value,
        )

    # -- replies -----------------------------------------------------------

    def create_reply(self, text: str | None = None, locale: str | None = None) -> Activity:
        """New message addressed back to the sender of this activity.

        ``from`` and ``recipient`` are swapped, ``reply_to_id`` points at this
        activity, and the conversation and channel are carried over.
        Raises ``AttributeError`` if ``conversation`` is unset.
        """
        return Activity(
            type=ActivityTypes.message.value,
            timestamp=datetime.now(timezone.utc),
            from_=_account_copy(self.recipient),
            recipient=_account_copy(self.from_),
            reply_to_id=self.id,
            service_url=self.service_url,
            channel_id=self.channel_id,
            conversation=ConversationAccount(
                is_group=self.conversation.is_group,
                id=self.conversation.id,
                name=self.conversation.name,
            ),
            text=text or "",
            locale=_first_set(locale, self.locale, cfg.default_locale),
            attachments=[],
            entities=[],
        )

    def create_trace(
        self,
        name: str,
        value: Any = None,
        value_type: str | None = None,
        label: str | None = None,
    ) -> views.TraceActivity:
        """Trace activity routed like a reply to this one."""
        trace = Activity(
            type=ActivityTypes.trace.value,
            timestamp=datetime.now(timezone.utc),
            from_=_account_copy(self.recipient),
            recipient=_account_copy(self.from_),
            reply_to_id=self.id,
            service_url=self.service_url,
            channel_id=self.channel_id,
            conversation=self.conversation,
            name=name,
            label=label,
            value_type=value_type or _type_name(value),
            value=value,
        )
        return views.TraceActivity(trace)

    # -- narrowing ---------------------------------------------------------

    def is_activity(self, activity_type: str) -> bool:
        return views.is_activity(self.type, activity_type)

    def as_message_activity(self) -> views.MessageActivity | None:
        return views.as_message_activity(self)

    def as_contact_relation_update_activity(self) -> views.ContactRelationUpdateActivity | None:
        return views.as_contact_relation_update_activity(self)

    def as_installation_update_activity(self) -> views.InstallationUpdateActivity | None:
        return views.as_installation_update_activity(self)

    def as_conversation_update_activity(self) -> views.ConversationUpdateActivity | None:
        return views.as_conversation_update_activity(self)

    def as_typing_activity(self) -> views.TypingActivity | None:
        return views.as_typing_activity(self)

    def as_end_of_conversation_activity(self) -> views.EndOfConversationActivity | None:
        return views.as_end_of_conversation_activity(self)

    def as_event_activity(self) -> views.EventActivity | None:
        return views.as_event_activity(self)

    def as_invoke_activity(self) -> views.InvokeActivity | None:
        return views.as_invoke_activity(self)

    def as_message_update_activity(self) -> views.MessageUpdateActivity | None:
        return views.as_message_update_activity(self)

    def as_message_delete_activity(self) -> views.MessageDeleteActivity | None:
        return views.as_message_delete_activity(self)

    def as_message_reaction_activity(self) -> views.MessageReactionActivity | None:
        return views.as_message_reaction_activity(self)

    def as_suggestion_activity(self) -> views.SuggestionActivity | None:
        return views.as_suggestion_activity(self)

    def as_trace_activity(self) -> views.TraceActivity | None:
        return views.as_trace_activity(self)

    def as_handoff_activity(self) -> views.HandoffActivity | None:
        return views.as_handoff_activity(self)

    def as_command_activity(self) -> views.CommandActivity | None:
        return views.as_command_activity(self)

    def as_command_result_activity(self) -> views.CommandResultActivity | None:
        return views.as_command_result_activity(self)

    def get_activity_type(self) -> str | None:
        """Base type without any ``/subtype``, in canonical casing."""
        if not self.type:
            return self.type
        base = self.type.split("/", 1)[0]
        if not base:
            return base
        canonical = _CANONICAL_TYPES.get(base.lower())
        if canonical:
            return canonical
        return base[0].lower() + base[1:]

    # -- content -----------------------------------------------------------

    def has_content(self) -> bool:
        if self.text and self.text.strip():
            return True
        if self.summary and self.summary.strip():
            return True
        if self.attachments:
            return True
        return self.channel_data is not None

    def get_mentions(self) -> list[Mention]:
        """Mention entities in ``entities`` order; empty when there are none."""
        if not self.entities:
            return []
        return [
            e.get_as(Mention)
            for e in self.entities
            if e.type is not None and e.type.lower() == "mention"
        ]

    def mentions_id(self, account_id: str) -> bool:
        return any(
            m.mentioned is not None and m.mentioned.id == account_id
            for m in self.get_mentions()
        )

    def mentions_recipient(self) -> bool:
        return self.mentions_id(self.recipient.id)

    def remove_mention_text(self, account_id: str) -> str | None:
        """Strip the text of every mention of *account_id* from ``text``.

        Matching is a case-insensitive substring replace, not tokenized.
        """
        for mention in self.get_mentions():
            if mention.mentioned is None or mention.mentioned.id != account_id:
                continue
            if not mention.text or self.text is None:
                continue
            self.text = re.sub(re.escape(mention.text), "", self.text, flags=re.IGNORECASE)
        return self.text

    def remove_recipient_mention(self) -> str | None:
        return self.remove_mention_text(self.recipient.id)

    # -- channel data ------------------------------------------------------

    def get_channel_data(self, model_cls: type[T] | None = None) -> T | Any:
        """Return ``channel_data``, coerced into *model_cls* when given.

        Returns ``None`` when unset. Coercion errors propagate.
        """
        data = self.channel_data
        if data is None:
            return None
        if model_cls is None or isinstance(data, model_cls):
            return data
        return TypeAdapter(model_cls).validate_python(data)

    def try_get_channel_data(self, model_cls: type[T]) -> Result:
        if self.channel_data is None:
            return Result.fail("channel data is not set")
        try:
            return Result.ok(self.get_channel_data(model_cls))
        except (TypeError, ValueError) as exc:
            logger.debug(
                "Channel data for activity %s is not a %s: %s",
                self.id, getattr(model_cls, "__name__", model_cls), exc,
            )
            return Result.fail(str(exc))

    # -- conversation references ------------------------------------------

    def get_conversation_reference(self) -> ConversationReference:
        return ConversationReference(
            activity_id=self.id,
            user=self.from_,
            bot=self.recipient,
            conversation=self.conversation,
            channel_id=self.channel_id,
            locale=self.locale,
            service_url=self.service_url,
        )

    def get_reply_conversation_reference(self, reply: ResourceResponse) -> ConversationReference:
        """Reference to an activity the bot sent, for later update or delete."""
        reference = self.get_conversation_reference()
        reference.activity_id = reply.id
        return reference

    def apply_conversation_reference(
        self, reference: ConversationReference, is_incoming: bool = False
    ) -> Activity:
        """Stamp the routing information from *reference* onto this activity.

        Outgoing (default): the bot is the sender and ``reply_to_id`` is set
        from the reference. Incoming: the user is the sender and ``id`` is
        set from the reference.
        """
        self.channel_id = reference.channel_id
        self.service_url = reference.service_url
        self.conversation = reference.conversation
        self.locale = reference.locale or self.locale

        if is_incoming:
            self.from_ = reference.user
            self.recipient = reference.bot
            if reference.activity_id is not None:
                self.id = reference.activity_id
        else:
            self.from_ = reference.bot
            self.recipient = reference.user
            if reference.activity_id is not None:
                self.reply_to_id = reference.activity_id
        return self

    def is_from_streaming_connection(self) -> bool:
        if self.service_url is None:
            return False
        return not self.service_url.lower().startswith("http")


# -- helpers ---------------------------------------------------------------


def _account_copy(account: ChannelAccount | None) -> ChannelAccount:
    if account is None:
        return ChannelAccount()
    return ChannelAccount(id=account.id, name=account.name)


def _type_name(value: Any) -> str | None:
    return type(value).__name__ if value is not None else None


def _first_set(*values: str | None) -> str | None:
    return next((v for v in values if v is not None), None)
