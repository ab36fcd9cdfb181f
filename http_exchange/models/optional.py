"""Explicit present/absent wrapper, distinct from a ``None`` reference."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from http_exchange.errors import illegal_argument


T = TypeVar("T")

_ABSENT = object()


class OptionalValue(Generic[T]):
    """Immutable container holding either one non-None value or nothing."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = _ABSENT) -> None:
        object.__setattr__(self, "_value", value)

    @classmethod
    def of(cls, value: T) -> "OptionalValue[T]":
        if value is None:
            raise illegal_argument("empty_optional", "OptionalValue.of() requires a non-None value")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> "OptionalValue[T]":
        return cls.empty() if value is None else cls(value)

    @classmethod
    def empty(cls) -> "OptionalValue[T]":
        return cls()

    def is_present(self) -> bool:
        return self._value is not _ABSENT

    def get(self) -> T:
        if self._value is _ABSENT:
            raise illegal_argument("empty_optional", "No value present")
        return self._value

    def or_else(self, default: T | None) -> T | None:
        return self._value if self._value is not _ABSENT else default

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("OptionalValue is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalValue):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __hash__(self) -> int:
        return hash((OptionalValue, None if self._value is _ABSENT else self._value))

    def __bool__(self) -> bool:
        return self.is_present()

    def __repr__(self) -> str:
        if self._value is _ABSENT:
            return "OptionalValue.empty()"
        return f"OptionalValue.of({self._value!r})"


__all__ = ["OptionalValue"]
