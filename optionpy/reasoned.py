from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from ._variant import Variant, payload_eq, payload_hash, render, _HASH_ABSENT, _HASH_NULL
from .option import Option, Some, NONE

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")


class OptionWithReason(Variant[T], Generic[T, E]):
    """An optional value whose absent case carries a reason.

    Present instances compare and hash by value alone; absent instances
    compare and hash by reason. The reason is threaded through ``map`` and
    ``flat_map`` untouched and only changes through ``map_reason`` or the
    replacement reason given to ``filter``.
    """

    __slots__ = ()

    def match(self, on_some: Callable[[T], R], on_none: Callable[[E], R]) -> R:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionWithReason):
            return NotImplemented
        if self.is_some() != other.is_some():
            return False
        if self.is_some():
            return payload_eq(self.value, other.value)  # type: ignore[attr-defined]
        return payload_eq(self.reason, other.reason)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return self.match(lambda v: payload_hash(v, _HASH_NULL), lambda r: payload_hash(r, _HASH_ABSENT))

    def __str__(self) -> str:
        return self.match(lambda v: f"Some({render(v)})", lambda r: f"None({render(r)})")

    def or_(self, alternative: T) -> "OptionWithReason[T, E]":
        return self.match(lambda _: self, lambda _: SomeWithReason(alternative))

    def or_else(self, alternative: Callable[[], T]) -> "OptionWithReason[T, E]":
        return self.match(lambda _: self, lambda _: SomeWithReason(alternative()))

    def drop_reason(self) -> Option[T]:
        return self.match(lambda v: Some(v), lambda _: NONE)

    def map(self, f: Callable[[T], U]) -> "OptionWithReason[U, E]":
        return self.match(lambda v: SomeWithReason(f(v)), lambda r: NoneWithReason(r))

    def map_reason(self, f: Callable[[E], F]) -> "OptionWithReason[T, F]":
        return self.match(lambda v: SomeWithReason(v), lambda r: NoneWithReason(f(r)))

    def flat_map(self, f: Callable[[T], "OptionWithReason[U, E]"]) -> "OptionWithReason[U, E]":
        return self.match(f, lambda r: NoneWithReason(r))

    def filter(self, predicate: Callable[[T], bool], reason: E) -> "OptionWithReason[T, E]":
        return self.match(lambda v: self if predicate(v) else NoneWithReason(reason), lambda _: self)


@dataclass(frozen=True, eq=False, repr=False)
class SomeWithReason(OptionWithReason[T, E]):
    value: T

    def is_some(self) -> bool: return True

    def match(self, on_some: Callable[[T], R], on_none: Callable[[E], R]) -> R:
        return on_some(self.value)

    def __repr__(self) -> str:
        return f"SomeWithReason({self.value!r})"


@dataclass(frozen=True, eq=False, repr=False)
class NoneWithReason(OptionWithReason[T, E]):
    reason: E

    def is_some(self) -> bool: return False

    def match(self, on_some: Callable[[T], R], on_none: Callable[[E], R]) -> R:
        return on_none(self.reason)

    def __repr__(self) -> str:
        return f"NoneWithReason({self.reason!r})"


def some_with_reason(value: T) -> OptionWithReason[T, E]:
    return SomeWithReason(value)


def none_with_reason(reason: E) -> OptionWithReason[T, E]:
    return NoneWithReason(reason)
