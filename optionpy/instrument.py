from __future__ import annotations
import functools
from typing import Any, Callable, Dict, Optional, TypeVar

from .logger import ConsoleLogger, default_logger
from .option import Option

T = TypeVar("T")


def instrument(name: str, fn: Callable[..., Option[T]], logger: Optional[ConsoleLogger] = None,
               tags: Optional[Dict[str, str]] = None) -> Callable[..., Option[T]]:
    """Wrap an Option-returning callable with logging.

    Each call logs ``start <name>`` and ``end <name> -> <outcome>`` at DEBUG.
    An exception raised by ``fn`` is logged at ERROR and re-raised unchanged.

    Args:
        name: Operation name used in the log lines
        fn: The callable to wrap; it must return an ``Option``
        logger: Logger to write to; the module default when omitted
        tags: Extra fields attached to every line

    Example:
        ```python
        lookup = instrument("user.lookup", lambda uid: from_nullable(users.get(uid)))
        lookup(42)  # logs "end user.lookup -> None" when the id is unknown
        ```
    """
    @functools.wraps(fn)
    def run(*args: Any, **kwargs: Any) -> Option[T]:
        log = (logger or default_logger).bind(**(tags or {}))
        log.debug(f"start {name}")
        try:
            res = fn(*args, **kwargs)
        except BaseException as ex:
            log.error(f"fail {name}: {ex}", error=type(ex).__name__)
            raise
        outcome = "some" if res.is_some() else "none"
        log.debug(f"end {name} -> {res}", outcome=outcome)
        return res
    return run


def traced(name: str, logger: Optional[ConsoleLogger] = None,
           tags: Optional[Dict[str, str]] = None) -> Callable[[Callable[..., Option[T]]], Callable[..., Option[T]]]:
    def deco(fn: Callable[..., Option[T]]) -> Callable[..., Option[T]]:
        return instrument(name, fn, logger=logger, tags=tags)
    return deco
