from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class OutputConfig:
    """How converted documents are serialized."""

    compact: bool
    sort_keys: bool

    __slots__ = ("compact", "sort_keys")

    def __init__(self, *, compact: bool = False, sort_keys: bool = False) -> None:
        self.compact = compact
        self.sort_keys = sort_keys

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OutputConfig:
        return cls(compact=data.get("compact", False), sort_keys=data.get("sort-keys", False))

    def update(self, *, compact: bool | None = None, sort_keys: bool | None = None) -> None:
        if compact is not None:
            self.compact = compact
        if sort_keys is not None:
            self.sort_keys = sort_keys
