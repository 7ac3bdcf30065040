from __future__ import annotations

from typing import Any, Literal, TypeGuard, TYPE_CHECKING

from pydantic_core import CoreSchema, core_schema

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler


__all__ = (
    'MISSING',
    'Nullable',
    'Optional',
    '_MissingType',
    'is_not_missing',
)


class _MissingType:
    """
    marks a builder field that was never set

    falsy like `None`, but kept apart from it because `None` is a
    meaningful value for several api fields
    """
    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)

        return cls._instance

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return 'MISSING'

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(
        self,
        _: Any  # noqa: ANN401
    ) -> _MissingType:
        return self

    def __reduce__(self) -> str:
        return 'MISSING'

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.is_instance_schema(cls)


def is_not_missing[T](value: T | _MissingType) -> TypeGuard[T]:
    return not isinstance(value, _MissingType)


MISSING = _MissingType()

type Optional[T] = T | _MissingType
type Nullable[T] = T | None
