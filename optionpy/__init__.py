from .option import Option, Some, Nothing, NONE, some, none, from_nullable
from .reasoned import (
    OptionWithReason,
    SomeWithReason,
    NoneWithReason,
    some_with_reason,
    none_with_reason,
)
from .errors import OptionError, MissingValue
from .logger import ConsoleLogger
