"""Keyword groups that carry no nested schemas and are copied through conversion unchanged."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import Any

from schemanorm.core import NOT_SET, NotSet

JsonValue = dict[str, Any] | list | str | int | float | bool | None
Number = int | float


class InstanceType(str, enum.Enum):
    """Values of the `type` keyword."""

    NULL = "null"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    STRING = "string"
    INTEGER = "integer"


def to_json_type_name(v: Any) -> str:
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "boolean"
    if isinstance(v, dict):
        return "object"
    if isinstance(v, list):
        return "array"
    if isinstance(v, (int, float)):
        return "number"
    if isinstance(v, str):
        return "string"
    return type(v).__name__


@dataclass
class KeywordGroup:
    """Base for groups of keywords that are stored as `None` on a schema object when all of them are unset."""

    __slots__ = ()

    def is_default(self) -> bool:
        default = type(self)()
        return all(getattr(self, field.name) == getattr(default, field.name) for field in fields(self))


@dataclass
class Metadata(KeywordGroup):
    """Annotations that have no effect on validation."""

    id: str | None
    title: str | None
    description: str | None
    # `None` is a valid default value, `NOT_SET` means the keyword is absent
    default: Any
    deprecated: bool
    read_only: bool
    write_only: bool
    examples: list[Any]

    __slots__ = ("id", "title", "description", "default", "deprecated", "read_only", "write_only", "examples")

    def __init__(
        self,
        *,
        id: str | None = None,
        title: str | None = None,
        description: str | None = None,
        default: Any = NOT_SET,
        deprecated: bool = False,
        read_only: bool = False,
        write_only: bool = False,
        examples: list[Any] | None = None,
    ) -> None:
        self.id = id
        self.title = title
        self.description = description
        self.default = default
        self.deprecated = deprecated
        self.read_only = read_only
        self.write_only = write_only
        self.examples = examples or []

    @property
    def has_default(self) -> bool:
        return not isinstance(self.default, NotSet)


@dataclass
class NumberValidation(KeywordGroup):
    multiple_of: Number | None
    maximum: Number | None
    exclusive_maximum: Number | None
    minimum: Number | None
    exclusive_minimum: Number | None

    __slots__ = ("multiple_of", "maximum", "exclusive_maximum", "minimum", "exclusive_minimum")

    def __init__(
        self,
        *,
        multiple_of: Number | None = None,
        maximum: Number | None = None,
        exclusive_maximum: Number | None = None,
        minimum: Number | None = None,
        exclusive_minimum: Number | None = None,
    ) -> None:
        self.multiple_of = multiple_of
        self.maximum = maximum
        self.exclusive_maximum = exclusive_maximum
        self.minimum = minimum
        self.exclusive_minimum = exclusive_minimum


@dataclass
class StringValidation(KeywordGroup):
    max_length: int | None
    min_length: int | None
    pattern: str | None

    __slots__ = ("max_length", "min_length", "pattern")

    def __init__(
        self,
        *,
        max_length: int | None = None,
        min_length: int | None = None,
        pattern: str | None = None,
    ) -> None:
        self.max_length = max_length
        self.min_length = min_length
        self.pattern = pattern
