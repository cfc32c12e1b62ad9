"""Outcome type for operations that report failure instead of raising."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Result:
    """Success flag plus an optional payload and diagnostic message.

    Evaluates truthy on success and unpacks to ``(success, value)``::

        result = activity.try_get_channel_data(SlackChannelData)
        if result:
            channel = result.value

        ok, data = activity.try_get_channel_data(SlackChannelData)
    """

    success: bool
    value: Any = field(default=None, repr=False)
    message: str = ""

    @classmethod
    def ok(cls, value: Any = None, message: str = "") -> Result:
        return cls(success=True, value=value, message=message)

    @classmethod
    def fail(cls, message: str = "") -> Result:
        return cls(success=False, message=message)

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self):
        yield self.success
        yield self.value
