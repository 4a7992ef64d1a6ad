"""Conversion of legacy-tolerant schemas into their canonical form.

Older tooling marks a property as required by putting `"required": true` into the property's own schema
(JSON Schema draft 03). The canonical form lists such properties in the `required` array of the enclosing
object instead. The conversion walks the whole tree in document order, moves every annotation found on a
`properties` entry into the parent's `required` set, and fails on the first annotation that has no
enclosing object to move into.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from schemanorm.core.errors import ConversionError, IllegalRequiredFlag, PathSegment, RecursionLimitExceeded
from schemanorm.core.ordered import Map, OrderedSet
from schemanorm.core.result import Err, Ok, Result
from schemanorm.core.transforms import deepclone
from schemanorm.jsonschema.canonical import RootSchema, Schema, SchemaObject
from schemanorm.jsonschema.decoding import decode_root
from schemanorm.jsonschema.encoding import encode_root
from schemanorm.jsonschema.groups import ArrayValidation, ObjectValidation, SubschemaValidation
from schemanorm.jsonschema.legacy import LegacyRootSchema, LegacySchema, LegacySchemaObject
from schemanorm.jsonschema.types import Metadata

logger = logging.getLogger(__name__)

TOO_DEEP_MESSAGE = "schema is nested too deeply to be converted"


class Converter:
    """Converts legacy-tolerant schemas into canonical ones.

    Instances hold only settings, so a single converter can be reused for any number of documents.
    """

    max_depth: int | None

    __slots__ = ("max_depth",)

    def __init__(self, *, max_depth: int | None = None) -> None:
        self.max_depth = max_depth

    def convert_root(self, root: LegacyRootSchema) -> RootSchema:
        # The root has no enclosing object the annotation could be moved into
        if root.schema.required is not None:
            raise IllegalRequiredFlag(at_root=True)
        schema = self.convert_object(root.schema, 0)
        definitions: Map[str, Schema] = Map()
        for name, definition in root.definitions.items():
            try:
                definitions[name] = self.convert_schema(definition, 1)
            except ConversionError as exc:
                exc.within(PathSegment.definition(name))
                raise
        logger.debug("Converted root schema with %d definition(s)", len(definitions))
        return RootSchema(schema=schema, meta_schema=root.meta_schema, definitions=definitions)

    def convert_schema(self, schema: LegacySchema, depth: int) -> Schema:
        if isinstance(schema, bool):
            return schema
        return self.convert_object(schema, depth)

    def convert_object(self, schema: LegacySchemaObject, depth: int) -> SchemaObject:
        if schema.required is not None:
            raise IllegalRequiredFlag()
        if self.max_depth is not None and depth > self.max_depth:
            raise RecursionLimitExceeded(self.max_depth)
        subschemas = None
        if schema.subschemas is not None:
            try:
                subschemas = self._convert_subschemas(schema.subschemas, depth)
            except ConversionError as exc:
                exc.within(PathSegment.subschemas())
                raise
        array = None
        if schema.array is not None:
            array = self._convert_array(schema.array, depth)
        object_ = None
        if schema.object is not None:
            object_ = self._convert_object_validation(schema.object, depth)
        instance_type = schema.instance_type
        return SchemaObject(
            metadata=_copy_metadata(schema.metadata),
            instance_type=list(instance_type) if isinstance(instance_type, list) else instance_type,
            format=schema.format,
            enum_values=deepclone(schema.enum_values),
            const_value=deepclone(schema.const_value),
            subschemas=subschemas,
            number=replace(schema.number) if schema.number is not None else None,
            string=replace(schema.string) if schema.string is not None else None,
            array=array,
            object=object_,
            reference=schema.reference,
            extensions=Map((key, deepclone(value)) for key, value in schema.extensions.items()),
        )

    def _convert_keyword(self, keyword: str, schema: LegacySchema | None, depth: int) -> Schema | None:
        if schema is None:
            return None
        try:
            return self.convert_schema(schema, depth + 1)
        except ConversionError as exc:
            exc.within(PathSegment.keyword(keyword))
            raise

    def _convert_list(self, keyword: str, schemas: list[LegacySchema] | None, depth: int) -> list[Schema] | None:
        if schemas is None:
            return None
        converted = []
        for idx, schema in enumerate(schemas):
            try:
                converted.append(self.convert_schema(schema, depth + 1))
            except ConversionError as exc:
                exc.within(PathSegment.index(idx)).within(PathSegment.keyword(keyword))
                raise
        return converted

    def _convert_subschemas(
        self, subschemas: SubschemaValidation[LegacySchema], depth: int
    ) -> SubschemaValidation[Schema]:
        return SubschemaValidation(
            all_of=self._convert_list("allOf", subschemas.all_of, depth),
            any_of=self._convert_list("anyOf", subschemas.any_of, depth),
            one_of=self._convert_list("oneOf", subschemas.one_of, depth),
            not_schema=self._convert_keyword("not", subschemas.not_schema, depth),
            if_schema=self._convert_keyword("if", subschemas.if_schema, depth),
            then_schema=self._convert_keyword("then", subschemas.then_schema, depth),
            else_schema=self._convert_keyword("else", subschemas.else_schema, depth),
        )

    def _convert_array(self, array: ArrayValidation[LegacySchema], depth: int) -> ArrayValidation[Schema]:
        items: Schema | list[Schema] | None
        if isinstance(array.items, list):
            items = self._convert_list("items", array.items, depth)
        else:
            items = self._convert_keyword("items", array.items, depth)
        return ArrayValidation(
            items=items,
            additional_items=self._convert_keyword("additionalItems", array.additional_items, depth),
            max_items=array.max_items,
            min_items=array.min_items,
            unique_items=array.unique_items,
            contains=self._convert_keyword("contains", array.contains, depth),
        )

    def _convert_object_validation(
        self, validation: ObjectValidation[LegacySchema], depth: int
    ) -> ObjectValidation[Schema]:
        # Explicitly listed names come first, hoisted ones follow in declaration order
        required = validation.required.copy()
        properties = self._convert_properties(validation.properties, required, depth)
        pattern_properties: Map[str, Schema] = Map()
        for pattern, schema in validation.pattern_properties.items():
            try:
                pattern_properties[pattern] = self.convert_schema(schema, depth + 1)
            except ConversionError as exc:
                exc.within(PathSegment.pattern_property(pattern))
                raise
        additional_properties = self._convert_keyword("additionalProperties", validation.additional_properties, depth)
        return ObjectValidation(
            max_properties=validation.max_properties,
            min_properties=validation.min_properties,
            required=required,
            properties=properties,
            pattern_properties=pattern_properties,
            additional_properties=additional_properties,
            property_names=self._convert_keyword("propertyNames", validation.property_names, depth),
        )

    def _convert_properties(
        self, properties: Map[str, LegacySchema], required: OrderedSet[str], depth: int
    ) -> Map[str, Schema]:
        """Convert `properties`, moving the members' `required` annotations into the parent's `required` set."""
        converted: Map[str, Schema] = Map()
        for name, schema in properties.items():
            if isinstance(schema, LegacySchemaObject) and schema.required is not None:
                if schema.required:
                    required.add(name)
                    logger.debug("Hoisted `required` annotation of property %r", name)
                schema = replace(schema, required=None)
            try:
                converted[name] = self.convert_schema(schema, depth + 1)
            except ConversionError as exc:
                exc.within(PathSegment.field(name))
                raise
        return converted


def _copy_metadata(metadata: Metadata | None) -> Metadata | None:
    if metadata is None:
        return None
    return replace(metadata, default=deepclone(metadata.default), examples=deepclone(metadata.examples))


def convert(root: LegacyRootSchema, *, max_depth: int | None = None) -> RootSchema:
    """Convert a legacy-tolerant root schema into a canonical one.

    :param root: Decoded legacy-tolerant document.
    :param max_depth: Maximum nesting depth of schemas, unlimited by default.
    :raises ConversionError: On the first problem found, in document order.
    """
    try:
        return Converter(max_depth=max_depth).convert_root(root)
    except RecursionError:
        raise ConversionError(TOO_DEEP_MESSAGE) from None


def try_convert(root: LegacyRootSchema, *, max_depth: int | None = None) -> Result[RootSchema, ConversionError]:
    """Same as `convert`, but returns the outcome instead of raising."""
    try:
        return Ok(convert(root, max_depth=max_depth))
    except ConversionError as exc:
        return Err(exc)


def convert_schema(schema: LegacySchema, *, max_depth: int | None = None) -> Schema:
    """Convert a single schema node, which is treated as having no enclosing object."""
    try:
        return Converter(max_depth=max_depth).convert_schema(schema, 0)
    except RecursionError:
        raise ConversionError(TOO_DEEP_MESSAGE) from None


def normalize(document: dict[str, Any], *, max_depth: int | None = None) -> dict[str, Any]:
    """Decode a JSON document, convert it and encode the canonical result back into plain values."""
    return encode_root(convert(decode_root(document, max_depth=max_depth), max_depth=max_depth))
