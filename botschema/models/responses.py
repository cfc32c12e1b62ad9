"""Channel service responses and error envelopes."""

from __future__ import annotations

from typing import Any

from ._base import SchemaModel


class ResourceResponse(SchemaModel):
    """Id assigned by the channel to a resource the bot created (usually a sent activity)."""

    id: str | None = None


class InvokeResponse(SchemaModel):
    """HTTP status and body returned for an ``invoke`` activity."""

    status: int | None = None
    body: Any = None

    @property
    def is_success(self) -> bool:
        return self.status is not None and 200 <= self.status <= 299


class InnerHttpError(SchemaModel):
    status_code: int | None = None
    body: Any = None


class Error(SchemaModel):
    code: str | None = None
    message: str | None = None
    inner_http_error: InnerHttpError | None = None


class ErrorResponse(SchemaModel):
    error: Error | None = None
