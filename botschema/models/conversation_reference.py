"""Compact pointer to a conversation, used to resume or originate one later."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from ._base import SchemaModel
from .accounts import ChannelAccount, ConversationAccount
from .constants import ActivityEventNames, ActivityTypes

if TYPE_CHECKING:
    from .activity import Activity


class ConversationReference(SchemaModel):
    """Routing information lifted from an activity.

    ``user`` is the account on the channel side and ``bot`` the agent, as seen
    from an incoming activity.
    """

    activity_id: str | None = None
    user: ChannelAccount | None = None
    bot: ChannelAccount | None = None
    conversation: ConversationAccount | None = None
    channel_id: str | None = None
    locale: str | None = None
    service_url: str | None = None

    def get_continuation_activity(self) -> Activity:
        """Build the ``ContinueConversation`` event used to resume this conversation."""
        from .activity import Activity

        return Activity(
            type=ActivityTypes.event.value,
            name=ActivityEventNames.continue_conversation.value,
            id=str(uuid.uuid4()),
            channel_id=self.channel_id,
            locale=self.locale,
            service_url=self.service_url,
            conversation=self.conversation,
            recipient=self.bot,
            from_=self.user,
            relates_to=self,
        )
