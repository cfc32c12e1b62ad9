"""Shared pytest fixtures for botschema tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from botschema.models import Activity, ChannelAccount, ConversationAccount


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    env_path = tmp_path / ".env"
    monkeypatch.setenv("DOTENV_PATH", str(env_path))
    for key in ("BOTSCHEMA_EXCLUDE_NONE", "BOTSCHEMA_DEFAULT_LOCALE", "BOTSCHEMA_JSON_INDENT"):
        monkeypatch.delenv(key, raising=False)
    return env_path


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: Path, monkeypatch: pytest.MonkeyPatch):
    from botschema.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    monkeypatch.undo()
    reset_all_singletons()


@pytest.fixture()
def env_path(_isolate_env: Path) -> Path:
    return _isolate_env


@pytest.fixture()
def incoming() -> Activity:
    """A user message as a channel would deliver it to the bot."""
    return Activity(
        type="message",
        id="1",
        from_=ChannelAccount(id="A", name="User"),
        recipient=ChannelAccount(id="B", name="Bot"),
        conversation=ConversationAccount(id="C", is_group=False, name="chat"),
        channel_id="test",
        service_url="https://x",
        locale="en-US",
        text="hello",
    )
