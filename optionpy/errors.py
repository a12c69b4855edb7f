from __future__ import annotations
from typing import Generic, Optional, TypeVar

E = TypeVar("E")


class OptionError(Exception):
    """Base class for errors raised by optionpy."""


class MissingValue(OptionError, Generic[E]):
    """Raised by ``unwrap()`` on an absent option.

    ``reason`` is the absent payload of an ``OptionWithReason``, or ``None``
    when the option carries no reason.
    """

    def __init__(self, reason: Optional[E] = None):
        super().__init__(repr(reason)); self.reason = reason
