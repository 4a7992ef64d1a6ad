"""Keyword groups holding nested schemas.

Both the legacy and the canonical model use these groups, parametrized by their own schema type, so that
converting a group means converting every nested schema while keeping all other keywords as they are.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from schemanorm.core import NOT_SET, NotSet
from schemanorm.core.ordered import Map, OrderedSet
from schemanorm.jsonschema.types import InstanceType, KeywordGroup, Metadata, NumberValidation, StringValidation

S = TypeVar("S")
O = TypeVar("O")


@dataclass
class SubschemaValidation(KeywordGroup, Generic[S]):
    """Keywords that apply other schemas to the same instance."""

    all_of: list[S] | None
    any_of: list[S] | None
    one_of: list[S] | None
    not_schema: S | None
    if_schema: S | None
    then_schema: S | None
    else_schema: S | None

    __slots__ = ("all_of", "any_of", "one_of", "not_schema", "if_schema", "then_schema", "else_schema")

    def __init__(
        self,
        *,
        all_of: list[S] | None = None,
        any_of: list[S] | None = None,
        one_of: list[S] | None = None,
        not_schema: S | None = None,
        if_schema: S | None = None,
        then_schema: S | None = None,
        else_schema: S | None = None,
    ) -> None:
        self.all_of = all_of
        self.any_of = any_of
        self.one_of = one_of
        self.not_schema = not_schema
        self.if_schema = if_schema
        self.then_schema = then_schema
        self.else_schema = else_schema


@dataclass
class ArrayValidation(KeywordGroup, Generic[S]):
    # A single schema applies to every item, a list applies positionally
    items: S | list[S] | None
    additional_items: S | None
    max_items: int | None
    min_items: int | None
    unique_items: bool | None
    contains: S | None

    __slots__ = ("items", "additional_items", "max_items", "min_items", "unique_items", "contains")

    def __init__(
        self,
        *,
        items: S | list[S] | None = None,
        additional_items: S | None = None,
        max_items: int | None = None,
        min_items: int | None = None,
        unique_items: bool | None = None,
        contains: S | None = None,
    ) -> None:
        self.items = items
        self.additional_items = additional_items
        self.max_items = max_items
        self.min_items = min_items
        self.unique_items = unique_items
        self.contains = contains


@dataclass
class ObjectValidation(KeywordGroup, Generic[S]):
    max_properties: int | None
    min_properties: int | None
    required: OrderedSet[str]
    properties: Map[str, S]
    pattern_properties: Map[str, S]
    additional_properties: S | None
    property_names: S | None

    __slots__ = (
        "max_properties",
        "min_properties",
        "required",
        "properties",
        "pattern_properties",
        "additional_properties",
        "property_names",
    )

    def __init__(
        self,
        *,
        max_properties: int | None = None,
        min_properties: int | None = None,
        required: OrderedSet[str] | None = None,
        properties: Map[str, S] | None = None,
        pattern_properties: Map[str, S] | None = None,
        additional_properties: S | None = None,
        property_names: S | None = None,
    ) -> None:
        self.max_properties = max_properties
        self.min_properties = min_properties
        self.required = required if required is not None else OrderedSet()
        self.properties = properties if properties is not None else Map()
        self.pattern_properties = pattern_properties if pattern_properties is not None else Map()
        self.additional_properties = additional_properties
        self.property_names = property_names


@dataclass
class SchemaObjectBase(Generic[S]):
    """Keywords shared by the legacy-tolerant and the canonical schema objects.

    Keyword groups that are entirely unset are stored as `None`.
    """

    metadata: Metadata | None
    instance_type: InstanceType | list[InstanceType] | None
    format: str | None
    enum_values: list[Any] | None
    # `None` is a valid constant, `NOT_SET` means the keyword is absent
    const_value: Any
    subschemas: SubschemaValidation[S] | None
    number: NumberValidation | None
    string: StringValidation | None
    array: ArrayValidation[S] | None
    object: ObjectValidation[S] | None
    reference: str | None
    extensions: Map[str, Any]

    __slots__ = (
        "metadata",
        "instance_type",
        "format",
        "enum_values",
        "const_value",
        "subschemas",
        "number",
        "string",
        "array",
        "object",
        "reference",
        "extensions",
    )

    def __init__(
        self,
        *,
        metadata: Metadata | None = None,
        instance_type: InstanceType | list[InstanceType] | None = None,
        format: str | None = None,
        enum_values: list[Any] | None = None,
        const_value: Any = NOT_SET,
        subschemas: SubschemaValidation[S] | None = None,
        number: NumberValidation | None = None,
        string: StringValidation | None = None,
        array: ArrayValidation[S] | None = None,
        object: ObjectValidation[S] | None = None,
        reference: str | None = None,
        extensions: Map[str, Any] | None = None,
    ) -> None:
        self.metadata = metadata
        self.instance_type = instance_type
        self.format = format
        self.enum_values = enum_values
        self.const_value = const_value
        self.subschemas = subschemas
        self.number = number
        self.string = string
        self.array = array
        self.object = object
        self.reference = reference
        self.extensions = extensions if extensions is not None else Map()

    @property
    def has_const(self) -> bool:
        return not isinstance(self.const_value, NotSet)


@dataclass
class RootSchemaBase(Generic[S, O]):
    meta_schema: str | None
    schema: O
    definitions: Map[str, S]

    __slots__ = ("meta_schema", "schema", "definitions")

    def __init__(
        self,
        *,
        schema: O,
        meta_schema: str | None = None,
        definitions: Map[str, S] | None = None,
    ) -> None:
        self.meta_schema = meta_schema
        self.schema = schema
        self.definitions = definitions if definitions is not None else Map()
