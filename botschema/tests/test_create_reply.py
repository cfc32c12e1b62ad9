"""Tests for reply and trace construction."""

from __future__ import annotations

from datetime import datetime

import pytest

from botschema.models import Activity, ChannelAccount, ConversationAccount


class TestCreateReply:
    def test_documented_example(self) -> None:
        source = Activity.deserialize({
            "id": "1",
            "from": {"id": "A"},
            "recipient": {"id": "B"},
            "conversation": {"id": "C"},
            "channelId": "test",
            "serviceUrl": "https://x",
        })
        reply = source.create_reply(text="hi")
        data = reply.serialize()
        assert data["type"] == "message"
        assert data["from"] == {"id": "B"}
        assert data["recipient"] == {"id": "A"}
        assert data["replyToId"] == "1"
        assert data["conversation"] == {"id": "C"}
        assert data["channelId"] == "test"
        assert data["serviceUrl"] == "https://x"
        assert data["text"] == "hi"

    def test_swaps_accounts(self, incoming: Activity) -> None:
        reply = incoming.create_reply()
        assert reply.from_.id == "B"
        assert reply.from_.name == "Bot"
        assert reply.recipient.id == "A"
        assert reply.recipient.name == "User"

    def test_accounts_are_copies(self, incoming: Activity) -> None:
        reply = incoming.create_reply()
        assert reply.from_ is not incoming.recipient
        assert reply.conversation is not incoming.conversation
        assert reply.conversation.id == "C"
        assert reply.conversation.is_group is False

    def test_defaults(self, incoming: Activity) -> None:
        reply = incoming.create_reply()
        assert reply.type == "message"
        assert reply.text == ""
        assert reply.locale == "en-US"
        assert reply.attachments == []
        assert reply.entities == []
        assert isinstance(reply.timestamp, datetime)
        assert reply.timestamp.tzinfo is not None

    def test_reply_to_id_for_conversation_update(self, incoming: Activity) -> None:
        incoming.type = "conversationUpdate"
        incoming.channel_id = "webchat"
        assert incoming.create_reply().reply_to_id == "1"

    def test_explicit_locale_wins(self, incoming: Activity) -> None:
        assert incoming.create_reply(locale="fr-FR").locale == "fr-FR"

    def test_empty_locale_is_kept(self, incoming: Activity, monkeypatch: pytest.MonkeyPatch) -> None:
        from botschema.config import cfg

        monkeypatch.setenv("BOTSCHEMA_DEFAULT_LOCALE", "en-GB")
        cfg.reload()
        assert incoming.create_reply(locale="").locale == ""
        incoming.locale = ""
        assert incoming.create_reply().locale == ""

    def test_default_locale_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from botschema.config import cfg

        monkeypatch.setenv("BOTSCHEMA_DEFAULT_LOCALE", "en-GB")
        cfg.reload()
        source = Activity(type="message", conversation=ConversationAccount(id="c"))
        assert source.create_reply().locale == "en-GB"

    def test_missing_accounts_tolerated(self) -> None:
        source = Activity(type="message", id="1", conversation=ConversationAccount(id="c"))
        reply = source.create_reply("x")
        assert reply.from_.id is None
        assert reply.recipient.id is None

    def test_missing_conversation_raises(self) -> None:
        source = Activity(type="message", from_=ChannelAccount(id="a"))
        with pytest.raises(AttributeError):
            source.create_reply("x")

    def test_reply_is_a_message(self, incoming: Activity) -> None:
        assert incoming.create_reply("x").as_message_activity() is not None


class TestCreateTrace:
    def test_routed_like_reply(self, incoming: Activity) -> None:
        trace = incoming.create_trace("step", value=3, label="debug").activity
        assert trace.type == "trace"
        assert trace.from_.id == "B"
        assert trace.recipient.id == "A"
        assert trace.reply_to_id == "1"
        assert trace.conversation is incoming.conversation
        assert trace.value_type == "int"
        assert trace.label == "debug"

    def test_explicit_value_type(self, incoming: Activity) -> None:
        trace = incoming.create_trace("step", value={}, value_type="https://schema/x")
        assert trace.value_type == "https://schema/x"

    def test_no_value_no_type(self, incoming: Activity) -> None:
        assert incoming.create_trace("step").value_type is None


class TestFactories:
    def test_message_activity(self) -> None:
        activity = Activity.create_message_activity()
        assert activity.type == "message"
        assert activity.attachments == []
        assert activity.entities == []

    def test_conversation_update_activity(self) -> None:
        activity = Activity.create_conversation_update_activity()
        assert activity.members_added == []
        assert activity.members_removed == []

    def test_simple_factories(self) -> None:
        assert Activity.create_contact_relation_update_activity().type == "contactRelationUpdate"
        assert Activity.create_typing_activity().type == "typing"
        assert Activity.create_handoff_activity().type == "handoff"
        assert Activity.create_end_of_conversation_activity().type == "endOfConversation"
        assert Activity.create_event_activity().type == "event"
        assert Activity.create_invoke_activity().type == "invoke"

    def test_trace_activity(self) -> None:
        activity = Activity.create_trace_activity("name", value=[1, 2], label="lbl")
        assert activity.type == "trace"
        assert activity.value_type == "list"
        assert activity.label == "lbl"
