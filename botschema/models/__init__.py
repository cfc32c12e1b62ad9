"""Activity protocol schema -- activities, accounts, entities, cards, tokens, payments."""

from ._base import SchemaModel
from .accounts import ChannelAccount, ConversationAccount
from .activity import Activity, MessageReaction, TextHighlight
from .attachments import Attachment, AttachmentData, AttachmentInfo, AttachmentView
from .cards import (
    AdaptiveCardInvokeAction,
    AdaptiveCardInvokeResponse,
    AdaptiveCardInvokeValue,
    AnimationCard,
    AudioCard,
    CardAction,
    CardImage,
    Fact,
    HeroCard,
    MediaCard,
    MediaEventValue,
    MediaUrl,
    OAuthCard,
    ReceiptCard,
    ReceiptItem,
    SigninCard,
    SuggestedActions,
    ThumbnailCard,
    ThumbnailUrl,
    VideoCard,
    adaptive_card_attachment,
)
from .constants import (
    ActionTypes,
    ActivityEventNames,
    ActivityImportance,
    ActivityTypes,
    ActivityTypesEx,
    AttachmentLayoutTypes,
    CallerIdConstants,
    Channels,
    ContactRelationUpdateActionTypes,
    ContentTypes,
    DeliveryModes,
    EndOfConversationCodes,
    InputHints,
    InstallationUpdateActionTypes,
    MessageReactionTypes,
    PaymentOperations,
    RoleTypes,
    SemanticActionStates,
    SignInConstants,
    TextFormatTypes,
)
from .conversation_reference import ConversationReference
from .conversations import (
    ConversationMembers,
    ConversationParameters,
    ConversationResourceResponse,
    ConversationsResult,
    ExpectedReplies,
    PagedMembersResult,
    Transcript,
)
from .entities import Entity, GeoCoordinates, Mention, Place, SemanticAction, Thing
from .payments import (
    MicrosoftPayMethodData,
    PaymentAddress,
    PaymentCurrencyAmount,
    PaymentDetails,
    PaymentDetailsModifier,
    PaymentItem,
    PaymentMethodData,
    PaymentOptions,
    PaymentRequest,
    PaymentRequestComplete,
    PaymentRequestCompleteResult,
    PaymentRequestUpdate,
    PaymentRequestUpdateResult,
    PaymentResponse,
    PaymentShippingOption,
)
from .responses import Error, ErrorResponse, InnerHttpError, InvokeResponse, ResourceResponse
from .tokens import (
    AadResourceUrls,
    SignInResource,
    TokenExchangeInvokeRequest,
    TokenExchangeInvokeResponse,
    TokenExchangeRequest,
    TokenExchangeResource,
    TokenExchangeState,
    TokenOrSignInResourceResponse,
    TokenPostResource,
    TokenRequest,
    TokenResponse,
    TokenStatus,
)
from .views import (
    ActivityView,
    CommandActivity,
    CommandResultActivity,
    ContactRelationUpdateActivity,
    ConversationUpdateActivity,
    EndOfConversationActivity,
    EventActivity,
    HandoffActivity,
    InstallationUpdateActivity,
    InvokeActivity,
    MessageActivity,
    MessageDeleteActivity,
    MessageReactionActivity,
    MessageUpdateActivity,
    SuggestionActivity,
    TraceActivity,
    TypingActivity,
    is_activity,
    narrow,
)

__all__ = [
    # base
    "SchemaModel",
    # accounts / conversations
    "ChannelAccount",
    "ConversationAccount",
    "ConversationMembers",
    "ConversationParameters",
    "ConversationReference",
    "ConversationResourceResponse",
    "ConversationsResult",
    "ExpectedReplies",
    "PagedMembersResult",
    "Transcript",
    # activity + views
    "Activity",
    "ActivityView",
    "CommandActivity",
    "CommandResultActivity",
    "ContactRelationUpdateActivity",
    "ConversationUpdateActivity",
    "EndOfConversationActivity",
    "EventActivity",
    "HandoffActivity",
    "InstallationUpdateActivity",
    "InvokeActivity",
    "MessageActivity",
    "MessageDeleteActivity",
    "MessageReaction",
    "MessageReactionActivity",
    "MessageUpdateActivity",
    "SuggestionActivity",
    "TextHighlight",
    "TraceActivity",
    "TypingActivity",
    "is_activity",
    "narrow",
    # entities
    "Entity",
    "GeoCoordinates",
    "Mention",
    "Place",
    "SemanticAction",
    "Thing",
    # attachments / cards
    "AdaptiveCardInvokeAction",
    "AdaptiveCardInvokeResponse",
    "AdaptiveCardInvokeValue",
    "AnimationCard",
    "Attachment",
    "AttachmentData",
    "AttachmentInfo",
    "AttachmentView",
    "AudioCard",
    "CardAction",
    "CardImage",
    "Fact",
    "HeroCard",
    "MediaCard",
    "MediaEventValue",
    "MediaUrl",
    "OAuthCard",
    "ReceiptCard",
    "ReceiptItem",
    "SigninCard",
    "SuggestedActions",
    "ThumbnailCard",
    "ThumbnailUrl",
    "VideoCard",
    "adaptive_card_attachment",
    # tokens
    "AadResourceUrls",
    "SignInResource",
    "TokenExchangeInvokeRequest",
    "TokenExchangeInvokeResponse",
    "TokenExchangeRequest",
    "TokenExchangeResource",
    "TokenExchangeState",
    "TokenOrSignInResourceResponse",
    "TokenPostResource",
    "TokenRequest",
    "TokenResponse",
    "TokenStatus",
    # payments
    "MicrosoftPayMethodData",
    "PaymentAddress",
    "PaymentCurrencyAmount",
    "PaymentDetails",
    "PaymentDetailsModifier",
    "PaymentItem",
    "PaymentMethodData",
    "PaymentOptions",
    "PaymentRequest",
    "PaymentRequestComplete",
    "PaymentRequestCompleteResult",
    "PaymentRequestUpdate",
    "PaymentRequestUpdateResult",
    "PaymentResponse",
    "PaymentShippingOption",
    # responses
    "Error",
    "ErrorResponse",
    "InnerHttpError",
    "InvokeResponse",
    "ResourceResponse",
    # constants
    "ActionTypes",
    "ActivityEventNames",
    "ActivityImportance",
    "ActivityTypes",
    "ActivityTypesEx",
    "AttachmentLayoutTypes",
    "CallerIdConstants",
    "Channels",
    "ContactRelationUpdateActionTypes",
    "ContentTypes",
    "DeliveryModes",
    "EndOfConversationCodes",
    "InputHints",
    "InstallationUpdateActionTypes",
    "MessageReactionTypes",
    "PaymentOperations",
    "RoleTypes",
    "SemanticActionStates",
    "SignInConstants",
    "TextFormatTypes",
]
