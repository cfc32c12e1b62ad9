"""Tests for typed channel data access."""

from __future__ import annotations

import logging

import pytest
from pydantic import BaseModel, ValidationError

from botschema.models import Activity


class _SlackData(BaseModel):
    team: str
    ts: float | None = None


class TestGetChannelData:
    def test_unset_returns_none(self) -> None:
        assert Activity().get_channel_data(_SlackData) is None

    def test_raw_without_class(self) -> None:
        assert Activity(channel_data={"a": 1}).get_channel_data() == {"a": 1}

    def test_coerces_dict(self) -> None:
        data = Activity(channel_data={"team": "T1", "ts": 1.5}).get_channel_data(_SlackData)
        assert isinstance(data, _SlackData)
        assert data.team == "T1"

    def test_instance_returned_as_is(self) -> None:
        existing = _SlackData(team="T2")
        assert Activity(channel_data=existing).get_channel_data(_SlackData) is existing

    def test_coercion_error_propagates(self) -> None:
        with pytest.raises(ValidationError):
            Activity(channel_data={"nope": 1}).get_channel_data(_SlackData)

    def test_has_content_counts_channel_data(self) -> None:
        assert Activity(type="message", channel_data={}).has_content()


class TestTryGetChannelData:
    def test_success(self) -> None:
        result = Activity(channel_data={"team": "T1"}).try_get_channel_data(_SlackData)
        assert result
        assert result.value.team == "T1"

    def test_unset_is_failure(self) -> None:
        ok, value = Activity().try_get_channel_data(_SlackData)
        assert ok is False
        assert value is None

    def test_bad_shape_is_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="botschema.models.activity"):
            result = Activity(id="a1", channel_data={"nope": 1}).try_get_channel_data(_SlackData)
        assert not result
        assert result.message
        assert "a1" in caplog.text


class TestHasContent:
    def test_blank_text_is_not_content(self) -> None:
        assert not Activity(type="message", text="   ").has_content()

    def test_summary_is_content(self) -> None:
        assert Activity(type="message", summary="s").has_content()

    def test_empty_attachments_not_content(self) -> None:
        assert not Activity.create_message_activity().has_content()
