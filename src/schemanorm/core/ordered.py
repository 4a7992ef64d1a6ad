"""Insertion-ordered containers used throughout the schema models.

Keyword maps such as `properties` keep the order in which keys were first seen, so a converted schema
serializes its members in the same order as the source document.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable, Iterator, MutableSet
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class Map(OrderedDict[K, V]):
    """A mapping that iterates in first-insertion order.

    Updating an existing key keeps its original position. Two `Map` instances are equal only if they
    hold the same pairs in the same order.
    """

    def is_empty(self) -> bool:
        return not self

    def __repr__(self) -> str:
        return f"Map({dict(self)!r})"


class OrderedSet(MutableSet[T]):
    """A set that iterates in first-insertion order.

    Adding an element that is already present is a no-op and keeps its original position.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = dict.fromkeys(items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: T) -> None:
        self._items.setdefault(value, None)

    def discard(self, value: T) -> None:
        self._items.pop(value, None)

    def copy(self) -> OrderedSet[T]:
        return OrderedSet(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, OrderedSet):
            return list(self._items) == list(other._items)
        return super().__eq__(other)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"
