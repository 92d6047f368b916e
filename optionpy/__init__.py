from .option import (
    Option,
    Some,
    NONE,
    none,
    some,
    of,
    from_nullable,
    InvalidState,
    OptionalValue,
)
from .logger import ConsoleLogger
from .instrument import instrument, traced
