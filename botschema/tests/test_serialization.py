"""Tests for wire serialization and the extension bag."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from botschema.models import (
    Activity,
    Attachment,
    ChannelAccount,
    ConversationAccount,
    Entity,
    HeroCard,
    Mention,
)


class TestExtensionBag:
    def test_unknown_property_round_trips(self) -> None:
        payload = '{"type": "message", "id": "1", "foo": "bar"}'
        activity = Activity.from_json(payload)
        assert activity.properties == {"foo": "bar"}
        assert json.loads(activity.to_json())["foo"] == "bar"

    def test_nested_unknown_properties_preserved(self) -> None:
        activity = Activity.deserialize({
            "type": "message",
            "from": {"id": "u", "customField": {"a": 1}},
            "conversation": {"id": "c", "extra": True},
        })
        data = activity.serialize()
        assert data["from"]["customField"] == {"a": 1}
        assert data["conversation"]["extra"] is True

    def test_bag_insertion_order(self) -> None:
        account = ChannelAccount.deserialize({"id": "x", "z": 1, "a": 2, "m": 3})
        assert list(account.properties) == ["z", "a", "m"]

    def test_properties_writable(self) -> None:
        account = ChannelAccount(id="x")
        account.properties["tenant"] = "t1"
        assert account.serialize() == {"id": "x", "tenant": "t1"}

    def test_declared_field_wins_over_bag(self) -> None:
        account = ChannelAccount(id="declared")
        account.properties["id"] = "from-bag"
        assert account.serialize()["id"] == "declared"
        assert account.properties["id"] == "from-bag"

    def test_declared_alias_wins_over_bag(self) -> None:
        activity = Activity(type="message", channel_id="real")
        activity.properties["channelId"] = "shadow"
        assert activity.serialize()["channelId"] == "real"


class TestAliases:
    def test_camel_case_keys(self) -> None:
        activity = Activity(type="message", reply_to_id="r", channel_id="c", service_url="s")
        data = activity.serialize()
        assert data == {"type": "message", "replyToId": "r", "channelId": "c", "serviceUrl": "s"}

    def test_from_alias(self) -> None:
        activity = Activity(type="message", from_=ChannelAccount(id="a"))
        assert activity.serialize()["from"] == {"id": "a"}
        assert Activity.deserialize({"from": {"id": "b"}}).from_.id == "b"

    def test_populate_by_field_name(self) -> None:
        conv = ConversationAccount.deserialize({"is_group": True, "tenantId": "t"})
        assert conv.is_group is True
        assert conv.tenant_id == "t"

    def test_aad_object_id(self) -> None:
        account = ChannelAccount(aad_object_id="oid")
        assert account.serialize() == {"aadObjectId": "oid"}


class TestPolymorphicContent:
    def test_mention_keeps_fields_in_entities(self) -> None:
        activity = Activity(
            type="message",
            entities=[Mention(mentioned=ChannelAccount(id="bot"), text="@bot")],
        )
        entity = activity.serialize()["entities"][0]
        assert entity == {"type": "mention", "mentioned": {"id": "bot"}, "text": "@bot"}

    def test_card_content_serialized_with_aliases(self) -> None:
        attachment = HeroCard(title="T", images=[]).to_attachment()
        assert isinstance(attachment, Attachment)
        data = attachment.serialize()
        assert data["contentType"] == "application/vnd.microsoft.card.hero"
        assert data["content"] == {"title": "T", "images": []}

    def test_entity_get_as_and_set_as(self) -> None:
        entity = Entity(type="unknown")
        entity.set_as(Mention(mentioned=ChannelAccount(id="m"), text="@m"))
        assert entity.type == "mention"
        assert entity.get_as(Mention).mentioned.id == "m"


class TestSettingsDrivenOutput:
    def test_keep_none_when_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from botschema.config import cfg

        monkeypatch.setenv("BOTSCHEMA_EXCLUDE_NONE", "false")
        cfg.reload()
        data = ChannelAccount(id="x").serialize()
        assert data["name"] is None
        assert "aadObjectId" in data

    def test_json_indent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from botschema.config import cfg

        monkeypatch.setenv("BOTSCHEMA_JSON_INDENT", "2")
        cfg.reload()
        assert "\n  " in ChannelAccount(id="x").to_json()

    def test_compact_by_default(self) -> None:
        assert ChannelAccount(id="x").to_json() == '{"id":"x"}'


class TestValidation:
    def test_malformed_payload_raises(self) -> None:
        with pytest.raises(ValidationError):
            Activity.deserialize({"type": "message", "attachments": "not-a-list"})

    def test_timestamp_parsed(self) -> None:
        activity = Activity.deserialize({"timestamp": "2024-05-01T10:00:00.123Z"})
        assert activity.timestamp.year == 2024
        assert activity.timestamp.tzinfo is not None
