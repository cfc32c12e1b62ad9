"""Narrowed views over an :class:`~botschema.models.activity.Activity`.

One concrete ``Activity`` carries every field any activity kind might
use; which of them mean anything depends on ``type``. A view wraps the
activity and exposes only the fields meaningful for one kind. Reads and
writes go straight through to the wrapped activity, so a view never
copies state.

Narrowing honours the ``<kind>/<subtype>`` convention::

    is_activity("message", "message")          # True
    is_activity("Message/foo", "message")      # True
    is_activity("messageUpdate", "message")    # False

Use the ``as_*`` functions (or the matching ``Activity.as_*`` methods),
which return ``None`` when the activity is of a different kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from .constants import ActivityTypes

if TYPE_CHECKING:
    from .activity import Activity
    from .conversation_reference import ConversationReference
    from .entities import Mention

ViewT = TypeVar("ViewT", bound="ActivityView")


def is_activity(activity_type: str | None, target: str) -> bool:
    """Return whether *activity_type* is *target* or a ``target/...`` subtype.

    Comparison is case-insensitive. A longer type only matches when the
    character right after the prefix is ``/``; anything after that slash
    (including further slashes) is accepted.
    """
    if not activity_type:
        return False
    n = len(target)
    if activity_type[:n].lower() != target.lower():
        return False
    if len(activity_type) == n:
        return True
    return activity_type[n] == "/"


class _Field:
    """Descriptor forwarding one attribute to the wrapped activity."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, view: ActivityView | None, owner: type | None = None) -> Any:
        if view is None:
            return self
        return getattr(view.activity, self.name)

    def __set__(self, view: ActivityView, value: Any) -> None:
        setattr(view.activity, self.name, value)


class ActivityView:
    """Fields shared by every activity kind."""

    kind: ClassVar[str]

    type = _Field()
    id = _Field()
    timestamp = _Field()
    local_timestamp = _Field()
    local_timezone = _Field()
    service_url = _Field()
    channel_id = _Field()
    from_ = _Field()
    conversation = _Field()
    recipient = _Field()
    reply_to_id = _Field()
    entities = _Field()
    channel_data = _Field()
    caller_id = _Field()

    __slots__ = ("activity",)

    def __init__(self, activity: Activity) -> None:
        self.activity = activity

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.activity.type!r}, id={self.activity.id!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActivityView):
            return NotImplemented
        return type(self) is type(other) and self.activity is other.activity

    def __hash__(self) -> int:
        return hash((type(self), id(self.activity)))

    def get_conversation_reference(self) -> ConversationReference:
        return self.activity.get_conversation_reference()


# -- message family --------------------------------------------------------


class MessageActivity(ActivityView):
    kind = ActivityTypes.message.value
    __slots__ = ()

    locale = _Field()
    text = _Field()
    speak = _Field()
    input_hint = _Field()
    summary = _Field()
    text_format = _Field()
    attachment_layout = _Field()
    attachments = _Field()
    suggested_actions = _Field()
    importance = _Field()
    delivery_mode = _Field()
    expiration = _Field()
    listen_for = _Field()
    value = _Field()

    def has_content(self) -> bool:
        return self.activity.has_content()

    def get_mentions(self) -> list[Mention]:
        return self.activity.get_mentions()


class MessageUpdateActivity(MessageActivity):
    kind = ActivityTypes.message_update.value
    __slots__ = ()


class MessageDeleteActivity(ActivityView):
    kind = ActivityTypes.message_delete.value
    __slots__ = ()


class MessageReactionActivity(ActivityView):
    kind = ActivityTypes.message_reaction.value
    __slots__ = ()

    reactions_added = _Field()
    reactions_removed = _Field()


class SuggestionActivity(MessageActivity):
    """Private suggestion to a single recipient, highlighting parts of an earlier message."""

    kind = ActivityTypes.suggestion.value
    __slots__ = ()

    text_highlights = _Field()


# -- membership ------------------------------------------------------------


class ContactRelationUpdateActivity(ActivityView):
    kind = ActivityTypes.contact_relation_update.value
    __slots__ = ()

    action = _Field()


class InstallationUpdateActivity(ActivityView):
    kind = ActivityTypes.installation_update.value
    __slots__ = ()

    action = _Field()


class ConversationUpdateActivity(ActivityView):
    kind = ActivityTypes.conversation_update.value
    __slots__ = ()

    members_added = _Field()
    members_removed = _Field()
    topic_name = _Field()
    history_disclosed = _Field()


# -- signals ---------------------------------------------------------------


class TypingActivity(ActivityView):
    kind = ActivityTypes.typing.value
    __slots__ = ()


class EndOfConversationActivity(ActivityView):
    kind = ActivityTypes.end_of_conversation.value
    __slots__ = ()

    code = _Field()
    text = _Field()


class HandoffActivity(ActivityView):
    kind = ActivityTypes.handoff.value
    __slots__ = ()


# -- named operations ------------------------------------------------------


class EventActivity(ActivityView):
    kind = ActivityTypes.event.value
    __slots__ = ()

    name = _Field()
    value = _Field()
    relates_to = _Field()


class InvokeActivity(ActivityView):
    """Request that expects an :class:`InvokeResponse` from the bot."""

    kind = ActivityTypes.invoke.value
    __slots__ = ()

    name = _Field()
    value = _Field()
    relates_to = _Field()


class TraceActivity(ActivityView):
    kind = ActivityTypes.trace.value
    __slots__ = ()

    name = _Field()
    label = _Field()
    value_type = _Field()
    value = _Field()
    relates_to = _Field()


class CommandActivity(ActivityView):
    kind = ActivityTypes.command.value
    __slots__ = ()

    name = _Field()
    value = _Field()


class CommandResultActivity(ActivityView):
    kind = ActivityTypes.command_result.value
    __slots__ = ()

    name = _Field()
    value = _Field()


# -- narrowing -------------------------------------------------------------


def narrow(activity: Activity, view_cls: type[ViewT]) -> ViewT | None:
    """Wrap *activity* in *view_cls* if its type matches the view's kind."""
    if is_activity(activity.type, view_cls.kind):
        return view_cls(activity)
    return None


def as_message_activity(activity: Activity) -> MessageActivity | None:
    return narrow(activity, MessageActivity)


def as_contact_relation_update_activity(activity: Activity) -> ContactRelationUpdateActivity | None:
    return narrow(activity, ContactRelationUpdateActivity)


def as_installation_update_activity(activity: Activity) -> InstallationUpdateActivity | None:
    return narrow(activity, InstallationUpdateActivity)


def as_conversation_update_activity(activity: Activity) -> ConversationUpdateActivity | None:
    return narrow(activity, ConversationUpdateActivity)


def as_typing_activity(activity: Activity) -> TypingActivity | None:
    return narrow(activity, TypingActivity)


def as_end_of_conversation_activity(activity: Activity) -> EndOfConversationActivity | None:
    return narrow(activity, EndOfConversationActivity)


def as_event_activity(activity: Activity) -> EventActivity | None:
    return narrow(activity, EventActivity)


def as_invoke_activity(activity: Activity) -> InvokeActivity | None:
    return narrow(activity, InvokeActivity)


def as_message_update_activity(activity: Activity) -> MessageUpdateActivity | None:
    return narrow(activity, MessageUpdateActivity)


def as_message_delete_activity(activity: Activity) -> MessageDeleteActivity | None:
    return narrow(activity, MessageDeleteActivity)


def as_message_reaction_activity(activity: Activity) -> MessageReactionActivity | None:
    return narrow(activity, MessageReactionActivity)


def as_suggestion_activity(activity: Activity) -> SuggestionActivity | None:
    return narrow(activity, SuggestionActivity)


def as_trace_activity(activity: Activity) -> TraceActivity | None:
    return narrow(activity, TraceActivity)


def as_handoff_activity(activity: Activity) -> HandoffActivity | None:
    return narrow(activity, HandoffActivity)


def as_command_activity(activity: Activity) -> CommandActivity | None:
    return narrow(activity, CommandActivity)


def as_command_result_activity(activity: Activity) -> CommandResultActivity | None:
    return narrow(activity, CommandResultActivity)
