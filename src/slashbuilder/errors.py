from __future__ import annotations

from typing import Any

from .missing import MISSING


__all__ = (
    'BuilderException',
    'ShapeError',
    'ValidationError',
)


class BuilderException(Exception):
    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        super().__init__(*args, **kwargs)


class ValidationError(BuilderException):
    """a value, or the accumulated builder state, failed a rule"""

    def __init__(
        self,
        field: str,
        value: Any = MISSING,  # noqa: ANN401
        detail: str | None = None
    ) -> None:
        self.field = field
        self.value = value
        self.detail = detail

        super().__init__(
            f'invalid {field}: {value!r}' +
            (f' ({detail})' if detail else '')
        )


class ShapeError(BuilderException):
    """a variadic-or-array argument was malformed before any rule ran"""

    def __init__(self, detail: str, values: tuple[Any, ...] = ()) -> None:
        self.detail = detail
        self.values = values

        super().__init__(detail)
