"""The legacy-tolerant schema model.

Identical to the canonical model, except that any schema object may carry a boolean `required` annotation
(JSON Schema draft 03), meaning that the property it describes is required by the enclosing object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from schemanorm.jsonschema.groups import RootSchemaBase, SchemaObjectBase


@dataclass
class LegacySchemaObject(SchemaObjectBase["LegacySchema"]):
    required: bool | None

    __slots__ = ("required",)

    def __init__(self, *, required: bool | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.required = required


LegacySchema = bool | LegacySchemaObject


class LegacyRootSchema(RootSchemaBase[LegacySchema, LegacySchemaObject]):
    """The root of a legacy-tolerant JSON Schema document."""

    __slots__ = ()
