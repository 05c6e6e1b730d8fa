"""Shared pydantic base model and decoding helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from sparkapi.core.exceptions import ResponseDecodeError

__all__ = ["ItemList", "SparkModel", "decode", "format_timestamp"]

ModelT = TypeVar("ModelT", bound=BaseModel)


class SparkModel(BaseModel):
    """Base for wire records: camelCase on the wire, snake_case in Python.

    Unset (``None``) fields are left out of request bodies and unknown
    response fields are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


class ItemList(BaseModel, Generic[ModelT]):
    """The ``{"items": [...]}`` envelope wrapping every list response."""

    items: list[ModelT] = Field(default_factory=list)


def decode(model: type[ModelT], content: bytes) -> ModelT:
    """Parse ``content`` as JSON into ``model`` or raise :class:`ResponseDecodeError`."""

    try:
        return model.model_validate_json(content)
    except ValidationError as exc:
        raise ResponseDecodeError(f"could not decode {model.__name__}: {exc}") from exc


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as an RFC 3339 UTC timestamp; naive values are taken as UTC."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
