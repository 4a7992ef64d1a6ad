from .canonical import RootSchema, Schema, SchemaObject
from .decoding import SchemaDecoder, decode_root, decode_schema, loads
from .encoding import dumps, to_dict
from .groups import ArrayValidation, ObjectValidation, SubschemaValidation
from .keywords import ALL_KEYWORDS
from .legacy import LegacyRootSchema, LegacySchema, LegacySchemaObject
from .types import InstanceType, Metadata, NumberValidation, StringValidation

__all__ = [
    "ALL_KEYWORDS",
    "ArrayValidation",
    "InstanceType",
    "LegacyRootSchema",
    "LegacySchema",
    "LegacySchemaObject",
    "Metadata",
    "NumberValidation",
    "ObjectValidation",
    "RootSchema",
    "Schema",
    "SchemaDecoder",
    "SchemaObject",
    "StringValidation",
    "SubschemaValidation",
    "decode_root",
    "decode_schema",
    "dumps",
    "loads",
    "to_dict",
]
