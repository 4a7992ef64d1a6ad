"""Base error handling that is not tied to a specific stage of processing."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SchemanormError(Exception):
    """Base exception class for all schemanorm errors."""


def encode_pointer(pointer: str) -> str:
    return pointer.replace("~", "~0").replace("/", "~1")


def to_pointer(path: list[str | int]) -> str:
    return "".join(f"/{encode_pointer(str(token))}" for token in path)


class DecodingError(SchemanormError):
    """The input document can not be decoded into the schema model."""

    def __init__(self, message: str, path: list[str | int] | None = None) -> None:
        self.message = message
        self.path = path or []

    @property
    def pointer(self) -> str:
        return to_pointer(self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at `{self.pointer}`)"
        return self.message


class SegmentKind(str, enum.Enum):
    FIELD = "field"
    PATTERN_PROPERTY = "pattern_property"
    SUBSCHEMAS = "subschemas"
    KEYWORD = "keyword"
    INDEX = "index"
    DEFINITION = "definition"


@dataclass(frozen=True)
class PathSegment:
    """A single breadcrumb pointing to where in the schema tree a conversion error occurred."""

    kind: SegmentKind
    value: str | int | None

    __slots__ = ("kind", "value")

    @classmethod
    def field(cls, name: str) -> PathSegment:
        return cls(SegmentKind.FIELD, name)

    @classmethod
    def pattern_property(cls, pattern: str) -> PathSegment:
        return cls(SegmentKind.PATTERN_PROPERTY, pattern)

    @classmethod
    def subschemas(cls) -> PathSegment:
        return cls(SegmentKind.SUBSCHEMAS, None)

    @classmethod
    def keyword(cls, name: str) -> PathSegment:
        return cls(SegmentKind.KEYWORD, name)

    @classmethod
    def index(cls, idx: int) -> PathSegment:
        return cls(SegmentKind.INDEX, idx)

    @classmethod
    def definition(cls, name: str) -> PathSegment:
        return cls(SegmentKind.DEFINITION, name)

    @property
    def tokens(self) -> list[str | int]:
        """JSON pointer tokens for this segment."""
        if self.kind == SegmentKind.FIELD:
            return ["properties", self.value]  # type: ignore[list-item]
        if self.kind == SegmentKind.PATTERN_PROPERTY:
            return ["patternProperties", self.value]  # type: ignore[list-item]
        if self.kind == SegmentKind.DEFINITION:
            return ["definitions", self.value]  # type: ignore[list-item]
        if self.kind == SegmentKind.SUBSCHEMAS:
            return []
        return [self.value]  # type: ignore[list-item]

    def __str__(self) -> str:
        if self.kind == SegmentKind.FIELD:
            return f"in field '{self.value}'"
        if self.kind == SegmentKind.PATTERN_PROPERTY:
            return f"in pattern property '{self.value}'"
        if self.kind == SegmentKind.SUBSCHEMAS:
            return "in subschemas"
        if self.kind == SegmentKind.KEYWORD:
            return f"in '{self.value}'"
        if self.kind == SegmentKind.INDEX:
            return f"at index {self.value}"
        return f"in definition '{self.value}'"


class ConversionError(SchemanormError):
    """Converting a legacy-tolerant schema to its canonical form failed.

    The path is accumulated while the error propagates towards the root, outermost segment first.
    """

    def __init__(self, message: str, path: list[PathSegment] | None = None) -> None:
        self.message = message
        self.path = path or []

    def within(self, segment: PathSegment) -> ConversionError:
        self.path.insert(0, segment)
        return self

    @property
    def pointer(self) -> str:
        return to_pointer([token for segment in self.path for token in segment.tokens])

    def __str__(self) -> str:
        return ": ".join([*(str(segment) for segment in self.path), self.message])


class IllegalRequiredFlag(ConversionError):
    """A boolean `required` annotation appears where there is no enclosing object to hoist it into."""

    def __init__(self, path: list[PathSegment] | None = None, *, at_root: bool = False) -> None:
        message = 'found illegal "required" annotation'
        if at_root:
            message += " at the document root"
        super().__init__(message, path)
        self.at_root = at_root


class RecursionLimitExceeded(ConversionError):
    """The schema is nested deeper than the configured limit."""

    def __init__(self, limit: int, path: list[PathSegment] | None = None) -> None:
        super().__init__(f"schema nesting exceeds the maximum depth of {limit}", path)
        self.limit = limit
