"""Encoding of the canonical schema model into plain JSON-compatible values."""

from __future__ import annotations

from typing import Any

from schemanorm.core import json
from schemanorm.core.transforms import deepclone
from schemanorm.jsonschema.canonical import RootSchema, Schema, SchemaObject
from schemanorm.jsonschema.keywords import (
    ARRAY_KEYWORDS,
    DEFINITIONS_KEYWORD,
    META_SCHEMA_KEYWORD,
    NUMBER_KEYWORDS,
    REFERENCE_KEYWORD,
    STRING_KEYWORDS,
    SUBSCHEMA_LIST_KEYWORDS,
    SUBSCHEMA_SINGLE_KEYWORDS,
)
from schemanorm.jsonschema.types import InstanceType

SCHEMA_ARRAY_KEYWORDS = frozenset(("additionalItems", "contains"))


def to_dict(value: RootSchema | Schema) -> dict[str, Any] | bool:
    """Encode a canonical root schema or a single schema node."""
    if isinstance(value, RootSchema):
        return encode_root(value)
    return encode_schema(value)


def dumps(value: RootSchema | Schema, *, sort_keys: bool = False, indent: bool = False) -> str:
    return json.dumps(to_dict(value), sort_keys=sort_keys, indent=indent)


def encode_root(root: RootSchema) -> dict[str, Any]:
    output: dict[str, Any] = {}
    if root.meta_schema is not None:
        output[META_SCHEMA_KEYWORD] = root.meta_schema
    output.update(encode_object(root.schema))
    if not root.definitions.is_empty():
        output[DEFINITIONS_KEYWORD] = {name: encode_schema(schema) for name, schema in root.definitions.items()}
    return output


def encode_schema(schema: Schema) -> dict[str, Any] | bool:
    if isinstance(schema, bool):
        return schema
    return encode_object(schema)


def _encode_type(value: InstanceType | list[InstanceType]) -> str | list[str]:
    if isinstance(value, list):
        return [item.value for item in value]
    return value.value


def encode_object(schema: SchemaObject) -> dict[str, Any]:
    output: dict[str, Any] = {}

    metadata = schema.metadata
    if metadata is not None:
        if metadata.id is not None:
            output["$id"] = metadata.id
        if metadata.title is not None:
            output["title"] = metadata.title
        if metadata.description is not None:
            output["description"] = metadata.description
        if metadata.has_default:
            output["default"] = deepclone(metadata.default)
        if metadata.deprecated:
            output["deprecated"] = True
        if metadata.read_only:
            output["readOnly"] = True
        if metadata.write_only:
            output["writeOnly"] = True
        if metadata.examples:
            output["examples"] = deepclone(metadata.examples)

    if schema.instance_type is not None:
        output["type"] = _encode_type(schema.instance_type)
    if schema.format is not None:
        output["format"] = schema.format
    if schema.enum_values is not None:
        output["enum"] = deepclone(schema.enum_values)
    if schema.has_const:
        output["const"] = deepclone(schema.const_value)

    subschemas = schema.subschemas
    if subschemas is not None:
        for keyword, attribute in SUBSCHEMA_LIST_KEYWORDS.items():
            value = getattr(subschemas, attribute)
            if value is not None:
                output[keyword] = [encode_schema(item) for item in value]
        for keyword, attribute in SUBSCHEMA_SINGLE_KEYWORDS.items():
            value = getattr(subschemas, attribute)
            if value is not None:
                output[keyword] = encode_schema(value)

    for group, keywords in ((schema.number, NUMBER_KEYWORDS), (schema.string, STRING_KEYWORDS)):
        if group is not None:
            for keyword, attribute in keywords.items():
                value = getattr(group, attribute)
                if value is not None:
                    output[keyword] = value

    array = schema.array
    if array is not None:
        for keyword, attribute in ARRAY_KEYWORDS.items():
            value = getattr(array, attribute)
            if value is None:
                continue
            if keyword == "items":
                if isinstance(value, list):
                    output[keyword] = [encode_schema(item) for item in value]
                else:
                    output[keyword] = encode_schema(value)
            elif keyword in SCHEMA_ARRAY_KEYWORDS:
                output[keyword] = encode_schema(value)
            else:
                output[keyword] = value

    object_ = schema.object
    if object_ is not None:
        if object_.max_properties is not None:
            output["maxProperties"] = object_.max_properties
        if object_.min_properties is not None:
            output["minProperties"] = object_.min_properties
        if not object_.required.is_empty():
            output["required"] = list(object_.required)
        if not object_.properties.is_empty():
            output["properties"] = {name: encode_schema(item) for name, item in object_.properties.items()}
        if not object_.pattern_properties.is_empty():
            output["patternProperties"] = {
                pattern: encode_schema(item) for pattern, item in object_.pattern_properties.items()
            }
        if object_.additional_properties is not None:
            output["additionalProperties"] = encode_schema(object_.additional_properties)
        if object_.property_names is not None:
            output["propertyNames"] = encode_schema(object_.property_names)

    if schema.reference is not None:
        output[REFERENCE_KEYWORD] = schema.reference
    for key, value in schema.extensions.items():
        output[key] = deepclone(value)
    return output
