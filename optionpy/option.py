from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, TypeVar

from ._variant import Variant, payload_eq, payload_hash, render, _HASH_ABSENT, _HASH_NULL

if TYPE_CHECKING:
    from .reasoned import OptionWithReason

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


class Option(Variant[T]):
    """An optional value: either ``Some(value)`` or ``NONE``."""

    __slots__ = ()

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self.is_none() or other.is_none():
            return self.is_none() and other.is_none()
        return payload_eq(self.value, other.value)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return self.match(lambda v: payload_hash(v, _HASH_NULL), lambda: _HASH_ABSENT)

    def __str__(self) -> str:
        return self.match(lambda v: f"Some({render(v)})", lambda: "None")

    def or_(self, alternative: T) -> "Option[T]":
        return self.match(lambda _: self, lambda: Some(alternative))

    def or_else(self, alternative: Callable[[], T]) -> "Option[T]":
        return self.match(lambda _: self, lambda: Some(alternative()))

    def with_reason(self, reason: E) -> "OptionWithReason[T, E]":
        from .reasoned import SomeWithReason, NoneWithReason
        return self.match(lambda v: SomeWithReason(v), lambda: NoneWithReason(reason))

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        return self.match(lambda v: Some(f(v)), lambda: NONE)

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        return self.match(f, lambda: NONE)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self.match(lambda v: self if predicate(v) else NONE, lambda: self)


@dataclass(frozen=True, eq=False, repr=False)
class Some(Option[T]):
    value: T

    def is_some(self) -> bool: return True

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        return on_some(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class Nothing(Option[T]):
    __slots__ = ()

    def is_some(self) -> bool: return False

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        return on_none()

    def __repr__(self) -> str: return "NONE"


NONE: Option = Nothing()


def some(value: T) -> Option[T]:
    return Some(value)


def none() -> Option[T]:
    return NONE


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
