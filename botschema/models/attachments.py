"""The attachment envelope and the upload/info types around it."""

from __future__ import annotations

from typing import Any

from ._base import SchemaModel


class Attachment(SchemaModel):
    """Media or card payload carried by an activity.

    ``content`` holds inline content (usually a card object); ``content_url``
    points at hosted content. ``content_type`` says how to interpret either.
    """

    content_type: str | None = None
    content_url: str | None = None
    content: Any = None
    name: str | None = None
    thumbnail_url: str | None = None


class AttachmentData(SchemaModel):
    """Attachment upload payload; binary fields are base64 text."""

    type: str | None = None
    name: str | None = None
    original_base64: str | None = None
    thumbnail_base64: str | None = None


class AttachmentView(SchemaModel):
    view_id: str | None = None
    size: int | None = None


class AttachmentInfo(SchemaModel):
    name: str | None = None
    type: str | None = None
    views: list[AttachmentView] | None = None
