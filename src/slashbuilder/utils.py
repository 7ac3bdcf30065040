from __future__ import annotations

from typing import Any, TYPE_CHECKING
from enum import Enum

from orjson import dumps as _dumps

from .missing import MISSING, _MissingType, is_not_missing
from .errors import ShapeError

if TYPE_CHECKING:
    from collections.abc import Iterable


__all__ = (
    'dumps',
    'filter_missing',
    'normalize_array',
)


_ARRAY_TYPES = (list, tuple, set, frozenset)


def normalize_array[T](values: tuple[T | Iterable[T], ...]) -> list[T]:
    """
    accept both `fn(a, b, c)` and `fn([a, b, c])`, returning `[a, b, c]`

    strings are treated as scalars; an array passed alongside other values,
    or an array nested inside the array, raises ShapeError
    """
    items = (
        list(values[0])
        if len(values) == 1 and isinstance(values[0], _ARRAY_TYPES) else
        list(values)
    )

    for item in items:
        if isinstance(item, _ARRAY_TYPES):
            raise ShapeError(
                'expected either a single array or individual values, not both',
                values
            )

    return items


def _serialize(value: Any) -> Any:  # noqa: ANN401
    match value:
        case dict():
            return filter_missing(value)
        case list() | tuple() | set():
            return [
                _serialize(i)
                for i in value
                if is_not_missing(i)]
        case Enum():
            return value.value
        case _MissingType():
            return MISSING

    return value


def filter_missing(data: dict) -> dict:
    filtered = {}

    for k, v in data.items():
        if is_not_missing(value := _serialize(v)):
            filtered[k] = value

    return filtered


def dumps(documents: dict | list[dict]) -> bytes:
    """encode serialized documents into a request body"""
    return _dumps(
        [filter_missing(d) for d in documents]
        if isinstance(documents, list) else
        filter_missing(documents)
    )
