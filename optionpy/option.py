from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, Protocol, TypeVar, Union, runtime_checkable

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
S = TypeVar("S")


class InvalidState(Exception):
    def __init__(self, message: str = "Option has no value."):
        super().__init__(message)


@runtime_checkable
class OptionalValue(Protocol):
    def is_some(self) -> bool: ...
    def is_none(self) -> bool: ...


class Option(Generic[T]):
    """Either a present value (``Some``) or no value (``NONE``).

    ``Some(None)`` collapses to ``NONE``, so a ``Some`` can always be unwrapped.
    """

    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def count(self) -> int:
        return 1 if self.is_some() else 0

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return self.is_some()

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]

    def to_list(self) -> List[T]:
        return list(self)

    def unwrap(self) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise InvalidState()

    def expect(self, message: str) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise InvalidState(message)

    def get_or_else(self, default: U) -> Union[T, U]:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def or_else(self, alternative: "Option[T]") -> "Option[T]":
        return self if self.is_some() else alternative

    def bind(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    flat_map = bind

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    select = map

    def select_many(self, project: Callable[[T], "Option[U]"], select: Callable[[T, U], V]) -> "Option[V]":
        return self.bind(lambda a: project(a).bind(lambda b: Some(select(a, b))))

    def filter(self, pred: Callable[[T], bool]) -> "Option[T]":
        return self if self.is_some() and pred(self.value) else NONE  # type: ignore[attr-defined]

    where = filter

    def exists(self, pred: Callable[[T], bool]) -> bool:
        return self.is_some() and bool(pred(self.value))  # type: ignore[attr-defined]

    def for_all(self, pred: Callable[[T], bool]) -> bool:
        return self.is_none() or bool(pred(self.value))  # type: ignore[attr-defined]

    def fold(self, seed: S, f: Callable[[S, T], S]) -> S:
        return f(seed, self.value) if self.is_some() else seed  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T

    def __new__(cls, value: T):
        # an absent value is never wrapped
        if value is None:
            return NONE
        return super().__new__(cls)

    def is_some(self) -> bool: return True

    def __hash__(self) -> int:
        return hash(self.value)

    def __getnewargs__(self):
        return (self.value,)

    def __repr__(self) -> str: return f"Some({self.value!r})"
    def __str__(self) -> str: return f"Some({self.value})"


class _None(Option[Any]):
    __slots__ = ()

    def is_some(self) -> bool: return False

    @property
    def value(self) -> Any:
        raise InvalidState()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _None)

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str: return "None"

    # copy and pickle resolve to the module-level singleton
    def __reduce__(self) -> str: return "NONE"


NONE: Option[Any] = _None()


def none() -> Option[T]:
    return NONE


def some(value: T) -> Option[T]:
    return Some(value)


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE  # type: ignore[return-value]


def of(value: Union[T, Option[T], None]) -> Option[T]:
    """Lift anything into an ``Option``; existing options pass through untouched."""
    if isinstance(value, Option):
        return value
    return from_nullable(value)
