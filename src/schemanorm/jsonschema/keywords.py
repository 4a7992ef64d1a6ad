"""Keyword names recognized by the schema models, in the order they are emitted."""

# JSON keyword -> attribute name, per keyword group
METADATA_KEYWORDS = {
    "$id": "id",
    "title": "title",
    "description": "description",
    "default": "default",
    "deprecated": "deprecated",
    "readOnly": "read_only",
    "writeOnly": "write_only",
    "examples": "examples",
}
SUBSCHEMA_LIST_KEYWORDS = {
    "allOf": "all_of",
    "anyOf": "any_of",
    "oneOf": "one_of",
}
SUBSCHEMA_SINGLE_KEYWORDS = {
    "not": "not_schema",
    "if": "if_schema",
    "then": "then_schema",
    "else": "else_schema",
}
NUMBER_KEYWORDS = {
    "multipleOf": "multiple_of",
    "maximum": "maximum",
    "exclusiveMaximum": "exclusive_maximum",
    "minimum": "minimum",
    "exclusiveMinimum": "exclusive_minimum",
}
STRING_KEYWORDS = {
    "maxLength": "max_length",
    "minLength": "min_length",
    "pattern": "pattern",
}
ARRAY_KEYWORDS = {
    "items": "items",
    "additionalItems": "additional_items",
    "maxItems": "max_items",
    "minItems": "min_items",
    "uniqueItems": "unique_items",
    "contains": "contains",
}
OBJECT_KEYWORDS = {
    "maxProperties": "max_properties",
    "minProperties": "min_properties",
    "required": "required",
    "properties": "properties",
    "patternProperties": "pattern_properties",
    "additionalProperties": "additional_properties",
    "propertyNames": "property_names",
}
ASSERTION_KEYWORDS = {
    "type": "instance_type",
    "format": "format",
    "enum": "enum_values",
    "const": "const_value",
}
REFERENCE_KEYWORD = "$ref"

# Keywords only recognized on the document root
META_SCHEMA_KEYWORD = "$schema"
DEFINITIONS_KEYWORD = "definitions"
DEFINITIONS_ALIAS = "$defs"

# Keywords whose `null` value is distinct from their absence
NULLABLE_KEYWORDS = frozenset(("default", "const"))

# Keywords whose value is a non-negative integer
COUNT_KEYWORDS = frozenset(
    ("maxLength", "minLength", "maxItems", "minItems", "maxProperties", "minProperties"),
)

ALL_KEYWORDS = frozenset(
    (
        *METADATA_KEYWORDS,
        *ASSERTION_KEYWORDS,
        *SUBSCHEMA_LIST_KEYWORDS,
        *SUBSCHEMA_SINGLE_KEYWORDS,
        *NUMBER_KEYWORDS,
        *STRING_KEYWORDS,
        *ARRAY_KEYWORDS,
        *OBJECT_KEYWORDS,
        REFERENCE_KEYWORD,
    )
)
