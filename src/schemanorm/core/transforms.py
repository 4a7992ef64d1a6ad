from __future__ import annotations

from typing import Any, TypeVar, overload

T = TypeVar("T")


@overload
def deepclone(value: dict) -> dict: ...  # pragma: no cover


@overload
def deepclone(value: list) -> list: ...  # pragma: no cover


@overload
def deepclone(value: T) -> T: ...  # pragma: no cover


def deepclone(value: Any) -> Any:
    """A specialized version of `deepcopy` that copies only `dict` and `list`.

    Raw JSON values carried through conversion (`enum`, `const`, extensions, ...) are cloned with it,
    so the input and output trees never share mutable containers.
    """
    if isinstance(value, dict):
        return {key: deepclone(item) for key, item in value.items()}
    if isinstance(value, list):
        return [deepclone(item) for item in value]
    return value
