from __future__ import annotations

from schemanorm.conversion import Converter, convert, convert_schema, normalize, try_convert
from schemanorm.core import NOT_SET, NotSet
from schemanorm.core.errors import (
    ConversionError,
    DecodingError,
    IllegalRequiredFlag,
    PathSegment,
    RecursionLimitExceeded,
    SchemanormError,
)
from schemanorm.core.ordered import Map, OrderedSet
from schemanorm.core.result import Err, Ok, Result
from schemanorm.core.version import SCHEMANORM_VERSION
from schemanorm.jsonschema import (
    InstanceType,
    LegacyRootSchema,
    LegacySchema,
    LegacySchemaObject,
    RootSchema,
    Schema,
    SchemaObject,
    decode_root,
    decode_schema,
    dumps,
    loads,
    to_dict,
)

__version__ = SCHEMANORM_VERSION

__all__ = [
    "__version__",
    # Conversion
    "Converter",
    "convert",
    "convert_schema",
    "normalize",
    "try_convert",
    # Decoding & encoding
    "decode_root",
    "decode_schema",
    "dumps",
    "loads",
    "to_dict",
    # Models
    "InstanceType",
    "LegacyRootSchema",
    "LegacySchema",
    "LegacySchemaObject",
    "Map",
    "NOT_SET",
    "NotSet",
    "OrderedSet",
    "RootSchema",
    "Schema",
    "SchemaObject",
    # Errors
    "ConversionError",
    "DecodingError",
    "IllegalRequiredFlag",
    "PathSegment",
    "RecursionLimitExceeded",
    "SchemanormError",
    # Results
    "Err",
    "Ok",
    "Result",
]
