"""Typed metadata attached to an activity.

An :class:`Entity` is a ``type`` tag plus an open property bag. Typed views
(:class:`Mention`, :class:`Place`, ...) are produced by re-validating the
entity's wire form rather than through inheritance on decode.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import SerializeAsAny

from ._base import SchemaModel
from .accounts import ChannelAccount

EntityT = TypeVar("EntityT", bound="Entity")


class Entity(SchemaModel):
    type: str | None = None

    def get_as(self, model_cls: type[EntityT]) -> EntityT:
        """Project this entity onto *model_cls* via its serialized form."""
        return model_cls.model_validate(self.serialize())

    def set_as(self, obj: SchemaModel) -> None:
        """Replace this entity's contents with the serialized form of *obj*."""
        data: dict[str, Any] = obj.serialize()
        self.type = data.pop("type", None)
        self.properties.clear()
        self.properties.update(data)


class Mention(Entity):
    """``@mention`` of an account; ``text`` is the highlighted snippet in the message."""

    type: str | None = "mention"
    mentioned: ChannelAccount | None = None
    text: str | None = None


class GeoCoordinates(Entity):
    type: str | None = "GeoCoordinates"
    elevation: float | None = None
    latitude: float | None = None
    longitude: float | None = None
    name: str | None = None


class Place(Entity):
    type: str | None = "Place"
    address: Any = None
    geo: Any = None
    has_map: Any = None
    name: str | None = None


class Thing(Entity):
    name: str | None = None


class SemanticAction(SchemaModel):
    """Programmatic action attached to an activity (e.g. a recognized intent)."""

    id: str | None = None
    entities: dict[str, SerializeAsAny[Entity]] | None = None
    state: str | None = None
