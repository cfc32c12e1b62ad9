"""String constants that are part of the wire contract.

Every enumeration mixes in ``str``: members compare equal to, and
serialize as, their wire value.
"""

from __future__ import annotations

from enum import Enum


class ActivityTypes(str, Enum):
    message = "message"
    contact_relation_update = "contactRelationUpdate"
    conversation_update = "conversationUpdate"
    typing = "typing"
    end_of_conversation = "endOfConversation"
    event = "event"
    invoke = "invoke"
    delete_user_data = "deleteUserData"
    message_update = "messageUpdate"
    message_delete = "messageDelete"
    installation_update = "installationUpdate"
    message_reaction = "messageReaction"
    suggestion = "suggestion"
    trace = "trace"
    handoff = "handoff"
    command = "command"
    command_result = "commandResult"


class ActivityTypesEx(str, Enum):
    """Activity types used between a bot and its host, never sent to a channel."""

    delay = "delay"
    invoke_response = "invokeResponse"


class DeliveryModes(str, Enum):
    normal = "normal"
    notification = "notification"
    expect_replies = "expectReplies"
    ephemeral = "ephemeral"


class EndOfConversationCodes(str, Enum):
    unknown = "unknown"
    completed_successfully = "completedSuccessfully"
    user_cancelled = "userCancelled"
    bot_timed_out = "botTimedOut"
    bot_issued_invalid_message = "botIssuedInvalidMessage"
    channel_failed = "channelFailed"


class ActionTypes(str, Enum):
    open_url = "openUrl"
    im_back = "imBack"
    post_back = "postBack"
    play_audio = "playAudio"
    play_video = "playVideo"
    show_image = "showImage"
    download_file = "downloadFile"
    signin = "signin"
    call = "call"
    message_back = "messageBack"
    open_app = "openApp"


class ActivityImportance(str, Enum):
    low = "low"
    normal = "normal"
    high = "high"


class AttachmentLayoutTypes(str, Enum):
    list = "list"
    carousel = "carousel"


class ContactRelationUpdateActionTypes(str, Enum):
    add = "add"
    remove = "remove"


class InstallationUpdateActionTypes(str, Enum):
    add = "add"
    remove = "remove"


class InputHints(str, Enum):
    accepting_input = "acceptingInput"
    ignoring_input = "ignoringInput"
    expecting_input = "expectingInput"


class MessageReactionTypes(str, Enum):
    like = "like"
    plus_one = "plusOne"


class RoleTypes(str, Enum):
    user = "user"
    bot = "bot"
    skill = "skill"


class SemanticActionStates(str, Enum):
    start = "start"
    continue_ = "continue"
    done = "done"


class TextFormatTypes(str, Enum):
    markdown = "markdown"
    plain = "plain"
    xml = "xml"


class ActivityEventNames(str, Enum):
    continue_conversation = "ContinueConversation"
    create_conversation = "CreateConversation"


class CallerIdConstants(str, Enum):
    public_azure_channel = "urn:botframework:azure"
    us_gov_channel = "urn:botframework:azureusgov"
    bot_to_bot_prefix = "urn:botframework:aadappid:"


class Channels(str, Enum):
    alexa = "alexa"
    console = "console"
    direct_line = "directline"
    direct_line_speech = "directlinespeech"
    email = "email"
    emulator = "emulator"
    facebook = "facebook"
    groupme = "groupme"
    kik = "kik"
    line = "line"
    ms_teams = "msteams"
    outlook = "outlook"
    skype = "skype"
    skype_for_business = "skypeforbusiness"
    slack = "slack"
    sms = "sms"
    telegram = "telegram"
    telephony = "telephony"
    test = "test"
    twilio = "twilio-sms"
    webchat = "webchat"
    webex = "webex"


class ContentTypes(str, Enum):
    activity = "application/vnd.microsoft.activity"
    adaptive_card = "application/vnd.microsoft.card.adaptive"
    animation_card = "application/vnd.microsoft.card.animation"
    audio_card = "application/vnd.microsoft.card.audio"
    hero_card = "application/vnd.microsoft.card.hero"
    media_card = "application/vnd.microsoft.card.media"
    oauth_card = "application/vnd.microsoft.card.oauth"
    receipt_card = "application/vnd.microsoft.card.receipt"
    signin_card = "application/vnd.microsoft.card.signin"
    thumbnail_card = "application/vnd.microsoft.card.thumbnail"
    video_card = "application/vnd.microsoft.card.video"


class SignInConstants(str, Enum):
    verify_state_operation_name = "signin/verifyState"
    token_exchange_operation_name = "signin/tokenExchange"
    sign_in_failure = "signin/failure"
    token_response_event_name = "tokens/response"


class PaymentOperations(str, Enum):
    update_shipping_address_operation_name = "payments/update/address"
    update_shipping_option_operation_name = "payments/update/shippingoption"
    payment_complete_operation_name = "payments/complete"
