"""Decoding of parsed JSON documents into the typed schema models.

Recognized keywords are shape-checked and routed to their typed fields, everything else is kept verbatim
in `extensions`. With `legacy=True` a boolean `required` keyword is accepted as the per-property annotation.
"""

from __future__ import annotations

from typing import Any, Literal, overload

from schemanorm.core import json
from schemanorm.core.errors import DecodingError
from schemanorm.core.ordered import Map, OrderedSet
from schemanorm.jsonschema.canonical import RootSchema, Schema, SchemaObject
from schemanorm.jsonschema.groups import ArrayValidation, ObjectValidation, SubschemaValidation
from schemanorm.jsonschema.keywords import (
    ALL_KEYWORDS,
    ARRAY_KEYWORDS,
    ASSERTION_KEYWORDS,
    COUNT_KEYWORDS,
    DEFINITIONS_ALIAS,
    DEFINITIONS_KEYWORD,
    META_SCHEMA_KEYWORD,
    METADATA_KEYWORDS,
    NULLABLE_KEYWORDS,
    NUMBER_KEYWORDS,
    OBJECT_KEYWORDS,
    REFERENCE_KEYWORD,
    STRING_KEYWORDS,
    SUBSCHEMA_LIST_KEYWORDS,
    SUBSCHEMA_SINGLE_KEYWORDS,
)
from schemanorm.jsonschema.legacy import LegacyRootSchema, LegacySchema, LegacySchemaObject
from schemanorm.jsonschema.types import (
    InstanceType,
    KeywordGroup,
    Metadata,
    NumberValidation,
    StringValidation,
    to_json_type_name,
)

Path = list[str | int]

STRING_VALUED = frozenset(("$id", "title", "description", "format", "pattern", REFERENCE_KEYWORD))
BOOLEAN_VALUED = frozenset(("deprecated", "readOnly", "writeOnly", "uniqueItems"))
ARRAY_VALUED = frozenset(("examples", "enum"))
SCHEMA_VALUED = frozenset(
    (*SUBSCHEMA_SINGLE_KEYWORDS, "additionalItems", "contains", "additionalProperties", "propertyNames")
)
SCHEMA_MAP_VALUED = frozenset(("properties", "patternProperties"))
INSTANCE_TYPES = frozenset(item.value for item in InstanceType)
# Integers that the JSON backend can serialize
MIN_INTEGER = -(2**63)
MAX_INTEGER = 2**64 - 1


def _invalid(keyword: str, expected: str, value: Any, path: Path) -> DecodingError:
    return DecodingError(f"Invalid `{keyword}`: expected {expected}, got {to_json_type_name(value)}", path)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_integers(keyword: str, value: Any, path: Path) -> Any:
    """Reject integers that can not be written back as JSON numbers without loss."""
    if isinstance(value, int) and not isinstance(value, bool):
        if not MIN_INTEGER <= value <= MAX_INTEGER:
            raise DecodingError(f"Invalid `{keyword}`: integer {value} is outside of the 64-bit range", path)
    elif isinstance(value, dict):
        for name, item in value.items():
            _check_integers(keyword, item, [*path, name])
    elif isinstance(value, list):
        for idx, item in enumerate(value):
            _check_integers(keyword, item, [*path, idx])
    return value


def _collapse(group: KeywordGroup) -> KeywordGroup | None:
    return None if group.is_default() else group


class SchemaDecoder:
    """Builds either the legacy-tolerant or the canonical model from plain Python values.

    With `max_depth` set, schemas nested deeper than the limit are rejected. The root is at depth 0.
    """

    legacy: bool
    max_depth: int | None

    __slots__ = ("legacy", "max_depth")

    def __init__(self, *, legacy: bool = True, max_depth: int | None = None) -> None:
        self.legacy = legacy
        self.max_depth = max_depth

    def decode_root(self, data: Any) -> LegacyRootSchema | RootSchema:
        try:
            return self._decode_root(data)
        except RecursionError:
            raise DecodingError("Schema is nested too deeply to be decoded") from None

    def _decode_root(self, data: Any) -> LegacyRootSchema | RootSchema:
        if not isinstance(data, dict):
            raise DecodingError(f"Root schema must be a JSON object, got {to_json_type_name(data)}")
        if DEFINITIONS_KEYWORD in data and DEFINITIONS_ALIAS in data:
            raise DecodingError(
                f"Both `{DEFINITIONS_KEYWORD}` and `{DEFINITIONS_ALIAS}` are present, only one of them is allowed"
            )
        meta_schema = None
        definitions: Map[str, Any] = Map()
        rest = {}
        for key, value in data.items():
            if key == META_SCHEMA_KEYWORD:
                if value is not None:
                    meta_schema = self._string(key, value, [key])
            elif key in (DEFINITIONS_KEYWORD, DEFINITIONS_ALIAS):
                if value is not None:
                    definitions = self._schema_map(key, value, [key], 1)
            else:
                rest[key] = value
        schema = self.decode_object(rest, [], 0)
        if self.legacy:
            return LegacyRootSchema(schema=schema, meta_schema=meta_schema, definitions=definitions)
        return RootSchema(schema=schema, meta_schema=meta_schema, definitions=definitions)

    def decode_schema(self, data: Any, path: Path, depth: int = 0) -> LegacySchema | Schema:
        if isinstance(data, bool):
            return data
        if isinstance(data, dict):
            return self.decode_object(data, path, depth)
        raise DecodingError(f"Expected JSON Schema (object or boolean), got {to_json_type_name(data)}", path)

    def decode_object(self, data: dict[str, Any], path: Path, depth: int = 0) -> LegacySchemaObject | SchemaObject:
        if self.max_depth is not None and depth > self.max_depth:
            raise DecodingError(f"schema nesting exceeds the maximum depth of {self.max_depth}", path)
        metadata: dict[str, Any] = {}
        assertions: dict[str, Any] = {}
        subschemas: dict[str, Any] = {}
        number: dict[str, Any] = {}
        string: dict[str, Any] = {}
        array: dict[str, Any] = {}
        object_: dict[str, Any] = {}
        reference = None
        required_flag = None
        extensions: Map[str, Any] = Map()

        for key, value in data.items():
            location = [*path, key]
            if value is None and key in ALL_KEYWORDS and key not in NULLABLE_KEYWORDS:
                # An explicit `null` is the same as omitting the keyword
                continue
            if key in METADATA_KEYWORDS:
                metadata[METADATA_KEYWORDS[key]] = self._value(key, value, location, depth)
            elif key in ASSERTION_KEYWORDS:
                assertions[ASSERTION_KEYWORDS[key]] = self._value(key, value, location, depth)
            elif key in SUBSCHEMA_LIST_KEYWORDS:
                subschemas[SUBSCHEMA_LIST_KEYWORDS[key]] = self._value(key, value, location, depth)
            elif key in SUBSCHEMA_SINGLE_KEYWORDS:
                subschemas[SUBSCHEMA_SINGLE_KEYWORDS[key]] = self._value(key, value, location, depth)
            elif key in NUMBER_KEYWORDS:
                number[NUMBER_KEYWORDS[key]] = self._value(key, value, location, depth)
            elif key in STRING_KEYWORDS:
                string[STRING_KEYWORDS[key]] = self._value(key, value, location, depth)
            elif key in ARRAY_KEYWORDS:
                array[ARRAY_KEYWORDS[key]] = self._value(key, value, location, depth)
            elif key == "required":
                if isinstance(value, bool) and self.legacy:
                    required_flag = value
                else:
                    object_["required"] = self._required(value, location)
            elif key in OBJECT_KEYWORDS:
                object_[OBJECT_KEYWORDS[key]] = self._value(key, value, location, depth)
            elif key == REFERENCE_KEYWORD:
                reference = self._string(key, value, location)
            else:
                extensions[key] = _check_integers(key, value, location)

        kwargs: dict[str, Any] = {
            "metadata": _collapse(Metadata(**metadata)),
            "subschemas": _collapse(SubschemaValidation(**subschemas)),
            "number": _collapse(NumberValidation(**number)),
            "string": _collapse(StringValidation(**string)),
            "array": _collapse(ArrayValidation(**array)),
            "object": _collapse(ObjectValidation(**object_)),
            "reference": reference,
            "extensions": extensions,
            **assertions,
        }
        if self.legacy:
            return LegacySchemaObject(required=required_flag, **kwargs)
        return SchemaObject(**kwargs)

    def _value(self, key: str, value: Any, path: Path, depth: int) -> Any:
        if key in NULLABLE_KEYWORDS:
            return _check_integers(key, value, path)
        if key in STRING_VALUED:
            return self._string(key, value, path)
        if key in BOOLEAN_VALUED:
            if not isinstance(value, bool):
                raise _invalid(key, "boolean", value, path)
            return value
        if key in ARRAY_VALUED:
            if not isinstance(value, list):
                raise _invalid(key, "array", value, path)
            return _check_integers(key, value, path)
        if key in COUNT_KEYWORDS:
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise _invalid(key, "non-negative integer", value, path)
            return _check_integers(key, value, path)
        if key in NUMBER_KEYWORDS:
            if not _is_number(value):
                raise _invalid(key, "number", value, path)
            return _check_integers(key, value, path)
        if key == "type":
            return self._instance_type(value, path)
        if key in SUBSCHEMA_LIST_KEYWORDS:
            return self._schema_list(key, value, path, depth + 1)
        if key in SCHEMA_VALUED:
            return self.decode_schema(value, path, depth + 1)
        if key in SCHEMA_MAP_VALUED:
            return self._schema_map(key, value, path, depth + 1)
        if key == "items":
            if isinstance(value, list):
                return self._schema_list(key, value, path, depth + 1)
            return self.decode_schema(value, path, depth + 1)
        raise AssertionError(f"Unhandled keyword: {key}")

    def _string(self, key: str, value: Any, path: Path) -> str:
        if not isinstance(value, str):
            raise _invalid(key, "string", value, path)
        return value

    def _instance_type(self, value: Any, path: Path) -> InstanceType | list[InstanceType]:
        if isinstance(value, str):
            if value not in INSTANCE_TYPES:
                raise DecodingError(f"Unknown type: `{value}`", path)
            return InstanceType(value)
        if isinstance(value, list):
            types = []
            for idx, item in enumerate(value):
                if not isinstance(item, str) or item not in INSTANCE_TYPES:
                    raise DecodingError(f"Unknown type: `{item}`", [*path, idx])
                types.append(InstanceType(item))
            return types
        raise _invalid("type", "string or array of strings", value, path)

    def _required(self, value: Any, path: Path) -> OrderedSet[str]:
        if not isinstance(value, list):
            expected = "array of strings or boolean" if self.legacy else "array of strings"
            raise _invalid("required", expected, value, path)
        for idx, item in enumerate(value):
            if not isinstance(item, str):
                raise _invalid("required", "property name (string)", item, [*path, idx])
        return OrderedSet(value)

    def _schema_list(self, key: str, value: Any, path: Path, depth: int) -> list[LegacySchema | Schema]:
        if not isinstance(value, list):
            raise _invalid(key, "array of schemas", value, path)
        return [self.decode_schema(item, [*path, idx], depth) for idx, item in enumerate(value)]

    def _schema_map(self, key: str, value: Any, path: Path, depth: int) -> Map[str, LegacySchema | Schema]:
        if not isinstance(value, dict):
            raise _invalid(key, "object", value, path)
        return Map((name, self.decode_schema(item, [*path, name], depth)) for name, item in value.items())


@overload
def decode_root(
    data: Any, *, legacy: Literal[True] = True, max_depth: int | None = None
) -> LegacyRootSchema: ...  # pragma: no cover


@overload
def decode_root(
    data: Any, *, legacy: Literal[False], max_depth: int | None = None
) -> RootSchema: ...  # pragma: no cover


def decode_root(data: Any, *, legacy: bool = True, max_depth: int | None = None) -> LegacyRootSchema | RootSchema:
    """Decode a parsed JSON document into a root schema.

    :param legacy: Accept boolean `required` annotations and build the legacy-tolerant model.
    :param max_depth: Maximum nesting depth of schemas, unlimited by default.
    :raises DecodingError: If the document is not a valid schema or is nested too deeply.
    """
    return SchemaDecoder(legacy=legacy, max_depth=max_depth).decode_root(data)


def decode_schema(data: Any, *, legacy: bool = True, max_depth: int | None = None) -> LegacySchema | Schema:
    """Decode a single (non-root) schema node."""
    try:
        return SchemaDecoder(legacy=legacy, max_depth=max_depth).decode_schema(data, [])
    except RecursionError:
        raise DecodingError("Schema is nested too deeply to be decoded") from None


def loads(text: str | bytes, *, legacy: bool = True, max_depth: int | None = None) -> LegacyRootSchema | RootSchema:
    """Parse JSON text and decode it into a root schema.

    Integers beyond the 64-bit range are parsed as floats by the JSON backend.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodingError(f"Invalid JSON: {exc}") from exc
    return decode_root(data, legacy=legacy, max_depth=max_depth)
