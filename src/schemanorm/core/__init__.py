from __future__ import annotations


class NotSet:
    """Marker for a keyword that is absent from the document, as opposed to one explicitly set to `null`."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_SET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> NotSet:
        return self

    def __deepcopy__(self, memo: dict) -> NotSet:
        return self


NOT_SET = NotSet()
