"""Base class for every wire type.

Field names are snake_case in Python and camelCase on the wire. Properties
the model does not declare are kept in an open bag (``properties``) and
written back out on serialization, so payloads survive a decode/encode
round trip even when a channel adds fields this library has never seen.
"""

from __future__ import annotations

import functools
from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel

from ..config.settings import cfg


class SchemaModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @property
    def properties(self) -> dict[str, Any]:
        """Undeclared properties, in the order they were received."""
        if self.__pydantic_extra__ is None:
            object.__setattr__(self, "__pydantic_extra__", {})
        return self.__pydantic_extra__

    @model_serializer(mode="wrap")
    def _declared_fields_win(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        extra = self.__pydantic_extra__
        if not extra:
            return handler(self)
        declared = _declared_keys(type(self))
        if not any(key in declared for key in extra):
            return handler(self)

        original = dict(extra)
        extra.clear()
        extra.update((k, v) for k, v in original.items() if k not in declared)
        try:
            return handler(self)
        finally:
            extra.clear()
            extra.update(original)

    # -- wire helpers ------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        """Return the JSON-compatible wire form (camelCase keys)."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=cfg.serialize_exclude_none,
        )

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(
            by_alias=True,
            exclude_none=cfg.serialize_exclude_none,
            indent=indent if indent is not None else cfg.json_indent,
        )

    @classmethod
    def deserialize(cls, data: dict[str, Any]):
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str | bytes):
        return cls.model_validate_json(text)


@functools.cache
def _declared_keys(model_cls: type[SchemaModel]) -> frozenset[str]:
    keys: set[str] = set()
    for name, info in model_cls.model_fields.items():
        keys.add(name)
        if info.alias:
            keys.add(info.alias)
    return frozenset(keys)
