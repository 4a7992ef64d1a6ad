"""The canonical, standards-compliant schema model.

Required-ness of object members is expressed only by the object-level `required` keyword.
"""

from __future__ import annotations

from schemanorm.jsonschema.groups import RootSchemaBase, SchemaObjectBase


class SchemaObject(SchemaObjectBase["Schema"]):
    __slots__ = ()


# `True` matches every instance, `False` matches none
Schema = bool | SchemaObject


class RootSchema(RootSchemaBase[Schema, SchemaObject]):
    """The root of a canonical JSON Schema document."""

    __slots__ = ()
