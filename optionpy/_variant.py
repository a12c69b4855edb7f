from __future__ import annotations
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .errors import MissingValue
from .logger import ConsoleLogger, default_logger

T = TypeVar("T")
R = TypeVar("R")

_HASH_ABSENT = 0
_HASH_NULL = 1


def payload_eq(a: Any, b: Any) -> bool:
    # A None payload only equals another None payload; __eq__ is never consulted for it.
    if a is None or b is None:
        return a is None and b is None
    return a == b


def payload_hash(x: Any, null_hash: int) -> int:
    return null_hash if x is None else hash(x)


def render(x: Any) -> str:
    return "null" if x is None else str(x)


class Variant(Generic[T]):
    """Two-case tagged variant shared by ``Option`` and ``OptionWithReason``.

    Subclasses provide ``is_some`` and ``match``; everything here is
    expressed through ``match`` so that exactly one branch runs per call.
    The absent branch of ``match`` takes no argument for ``Option`` and the
    reason for ``OptionWithReason``, hence the ``*_`` catch-alls below.
    """

    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    @property
    def present(self) -> bool:
        return self.is_some()

    def match(self, on_some: Callable[[T], R], on_none: Callable[..., R]) -> R:
        raise NotImplementedError

    def value_or(self, alternative: T) -> T:
        return self.match(lambda v: v, lambda *_: alternative)

    def value_or_else(self, alternative: Callable[[], T]) -> T:
        return self.match(lambda v: v, lambda *_: alternative())

    def unwrap(self) -> T:
        def missing(*reason: Any) -> T:
            raise MissingValue(*reason)
        return self.match(lambda v: v, missing)

    def __iter__(self) -> Iterator[T]:
        return iter(self.match(lambda v: (v,), lambda *_: ()))

    def traced(self, label: str, logger: Optional[ConsoleLogger] = None):
        log = logger if logger is not None else default_logger
        rendered = str(self)
        log.debug(f"{label}: {rendered}", label=label, state="some" if self.is_some() else "none", rendered=rendered)
        return self
