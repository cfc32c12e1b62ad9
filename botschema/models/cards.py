"""Rich cards, card actions and suggested actions.

Each card class knows its attachment content type; ``to_attachment()``
wraps the card in the :class:`Attachment` envelope an activity carries.
Adaptive Cards are free-form JSON and go through
:func:`adaptive_card_attachment` instead.
"""

from __future__ import annotations

from typing import Any, ClassVar

from ._base import SchemaModel
from .attachments import Attachment
from .constants import ActionTypes, ContentTypes
from .tokens import TokenExchangeInvokeRequest, TokenExchangeResource, TokenPostResource

ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.5"


class CardAction(SchemaModel):
    """A clickable action: button, tap target or suggested action."""

    type: str | None = None
    title: str | None = None
    image: str | None = None
    text: str | None = None
    display_text: str | None = None
    value: Any = None
    channel_data: Any = None
    image_alt_text: str | None = None

    @classmethod
    def from_string(cls, text: str) -> CardAction:
        """Action whose title and value are both *text*."""
        return cls(title=text, value=text)


class CardImage(SchemaModel):
    url: str | None = None
    alt: str | None = None
    tap: CardAction | None = None


class Fact(SchemaModel):
    """Key/value pair shown on a receipt card."""

    key: str | None = None
    value: str | None = None


class ReceiptItem(SchemaModel):
    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    image: CardImage | None = None
    price: str | None = None
    quantity: str | None = None
    tap: CardAction | None = None


class MediaUrl(SchemaModel):
    url: str | None = None
    profile: str | None = None


class ThumbnailUrl(SchemaModel):
    url: str | None = None
    alt: str | None = None


class MediaEventValue(SchemaModel):
    """Value of a media event; echoes the ``value`` of the card that raised it."""

    card_value: Any = None


# -- cards -----------------------------------------------------------------


class _Card(SchemaModel):
    content_type: ClassVar[str]

    def to_attachment(self) -> Attachment:
        return Attachment(content_type=self.content_type, content=self)


class HeroCard(_Card):
    """Card with a single large image."""

    content_type: ClassVar[str] = ContentTypes.hero_card.value

    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    images: list[CardImage] | None = None
    buttons: list[CardAction] | None = None
    tap: CardAction | None = None


class ThumbnailCard(_Card):
    content_type: ClassVar[str] = ContentTypes.thumbnail_card.value

    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    images: list[CardImage] | None = None
    buttons: list[CardAction] | None = None
    tap: CardAction | None = None


class ReceiptCard(_Card):
    content_type: ClassVar[str] = ContentTypes.receipt_card.value

    title: str | None = None
    facts: list[Fact] | None = None
    items: list[ReceiptItem] | None = None
    tap: CardAction | None = None
    total: str | None = None
    tax: str | None = None
    vat: str | None = None
    buttons: list[CardAction] | None = None


class SigninCard(_Card):
    content_type: ClassVar[str] = ContentTypes.signin_card.value

    text: str | None = None
    buttons: list[CardAction] | None = None

    @classmethod
    def create(cls, text: str, button_label: str, url: str) -> SigninCard:
        """Sign-in card with one ``signin`` button pointing at *url*."""
        return cls(
            text=text,
            buttons=[CardAction(type=ActionTypes.signin.value, title=button_label, value=url)],
        )


class OAuthCard(_Card):
    """Sign-in card bound to an OAuth connection configured for the bot."""

    content_type: ClassVar[str] = ContentTypes.oauth_card.value

    text: str | None = None
    connection_name: str | None = None
    buttons: list[CardAction] | None = None
    token_exchange_resource: TokenExchangeResource | None = None
    token_post_resource: TokenPostResource | None = None


class _MediaCardBase(_Card):
    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    image: ThumbnailUrl | None = None
    media: list[MediaUrl] | None = None
    buttons: list[CardAction] | None = None
    shareable: bool | None = None
    autoloop: bool | None = None
    autostart: bool | None = None
    aspect: str | None = None
    duration: str | None = None
    value: Any = None


class MediaCard(_MediaCardBase):
    content_type: ClassVar[str] = ContentTypes.media_card.value


class AnimationCard(_MediaCardBase):
    content_type: ClassVar[str] = ContentTypes.animation_card.value


class AudioCard(_MediaCardBase):
    content_type: ClassVar[str] = ContentTypes.audio_card.value


class VideoCard(_MediaCardBase):
    content_type: ClassVar[str] = ContentTypes.video_card.value


# -- suggested actions -----------------------------------------------------


class SuggestedActions(SchemaModel):
    """Quick replies shown to the recipients listed in ``to`` (everyone when unset)."""

    to: list[str] | None = None
    actions: list[CardAction] | None = None

    @classmethod
    def from_strings(cls, actions: list[str], to: list[str] | None = None) -> SuggestedActions:
        return cls(to=to, actions=[CardAction.from_string(a) for a in actions])


# -- adaptive cards --------------------------------------------------------


def adaptive_card_attachment(card: dict[str, Any]) -> Attachment:
    """Wrap an Adaptive Card payload, filling in ``type``, ``version`` and ``$schema``."""
    card.setdefault("type", "AdaptiveCard")
    card.setdefault("version", ADAPTIVE_CARD_VERSION)
    card.setdefault("$schema", ADAPTIVE_CARD_SCHEMA)
    return Attachment(content_type=ContentTypes.adaptive_card.value, content=card)


class AdaptiveCardInvokeAction(SchemaModel):
    type: str | None = None
    id: str | None = None
    verb: str | None = None
    data: Any = None


class AdaptiveCardInvokeValue(SchemaModel):
    """Value of an ``adaptiveCard/action`` invoke activity."""

    action: AdaptiveCardInvokeAction | None = None
    authentication: TokenExchangeInvokeRequest | None = None
    state: str | None = None


class AdaptiveCardInvokeResponse(SchemaModel):
    status_code: int | None = None
    type: str | None = None
    value: Any = None
