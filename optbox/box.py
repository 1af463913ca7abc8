"""
Optional value container

A box holds zero or one value and offers combinators that avoid explicit
``None`` checks at each call site. ``filter`` and ``map`` accept an extra
callback that fires exactly when the "other" branch is taken: a present box
rejected by its predicate, or a present box whose mapper produced nothing.

    from optbox import wrap

    wrap(20071226).map(lambda x: x * 2)           # OptionalBox.Present(40142452)
    wrap(None).get_or("fallback")                 # 'fallback'
    wrap("value").filter(lambda v: False, print)  # prints 'value', returns Absent
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar, Union

from loguru import logger

from optbox.exceptions import MissingCallableError

T = TypeVar('T')
U = TypeVar('U')


def _require(operation: str, argument: str, func: Any) -> None:
    if func is None or not callable(func):
        raise MissingCallableError(operation, argument)


def _optional(operation: str, argument: str, func: Any) -> None:
    if func is not None and not callable(func):
        raise MissingCallableError(operation, argument)


def _expect_box(operation: str, result: Any) -> "OptionalBox[Any]":
    if not isinstance(result, OptionalBox):
        raise TypeError(
            f"{operation}() expected an OptionalBox, got {type(result).__name__}"
        )
    return result


class OptionalBox(ABC, Generic[T]):
    """
    OptionalBox<T> - zero or one value of T

    Two variants: ``Present(value)`` and ``Absent()``. Every combinator
    returns a box (possibly the same one) and never mutates its receiver.

    Usage:
        box = OptionalBox.of(10)
        box.map(lambda x: x * 2).unwrap()  # 20

        empty = OptionalBox.empty()
        empty.get_or(0)  # 0
    """

    @classmethod
    def of(cls, value: Optional[T]) -> 'OptionalBox[T]':
        """Wrap a value, treating None as absence"""
        return wrap(value)

    @classmethod
    def empty(cls) -> 'OptionalBox[T]':
        """Create an absent box"""
        return Absent()

    @abstractmethod
    def is_present(self) -> bool:
        """Check if Present"""

    def is_absent(self) -> bool:
        """Check if Absent"""
        return not self.is_present()

    @abstractmethod
    def unwrap(self) -> Optional[T]:
        """Stored value, or None when absent"""

    def get_or(self, fallback: T) -> T:
        """Stored value, or ``fallback`` when absent"""
        return self.unwrap() if self.is_present() else fallback

    def get_or_compute(self, supplier: Callable[[], T]) -> T:
        """Stored value, or the result of ``supplier()`` when absent.

        The supplier is only invoked on the absent path.
        """
        _require("get_or_compute", "supplier", supplier)
        if self.is_present():
            return self.unwrap()
        return supplier()

    def filter(
        self,
        predicate: Callable[[T], Any],
        on_rejected: Optional[Callable[[T], Any]] = None,
    ) -> 'OptionalBox[T]':
        """Keep the value only if it satisfies ``predicate``.

        An absent box is returned as is and the predicate is not invoked. When
        a present value is rejected, ``on_rejected`` (if given) is called once
        with that value after the empty result has been built.
        """
        _require("filter", "predicate", predicate)
        _optional("filter", "on_rejected", on_rejected)
        if not self.is_present():
            return self

        value = self.unwrap()
        if predicate(value):
            return self

        result: OptionalBox[T] = Absent()
        if on_rejected is not None:
            logger.debug("filter rejected a {} value", type(value).__name__)
            on_rejected(value)
        return result

    def map(
        self,
        mapper: Callable[[T], Optional[U]],
        on_empty: Optional[Callable[[T], Any]] = None,
    ) -> 'OptionalBox[U]':
        """Apply ``mapper`` to a present value and wrap the result.

        A mapper returning None yields an absent box; in that case
        ``on_empty`` (if given) is called once with the original value.
        """
        _require("map", "mapper", mapper)
        _optional("map", "on_empty", on_empty)
        if not self.is_present():
            return Absent()

        value = self.unwrap()
        result = wrap(mapper(value))
        if not result.is_present() and on_empty is not None:
            logger.debug("map produced no value from a {} value", type(value).__name__)
            on_empty(value)
        return result

    def flat_map(self, mapper: Callable[[T], 'OptionalBox[U]']) -> 'OptionalBox[U]':
        """FlatMap for chaining boxes"""
        _require("flat_map", "mapper", mapper)
        if not self.is_present():
            return Absent()
        return _expect_box("flat_map", mapper(self.unwrap()))

    def or_else(self, supplier: Callable[[], 'OptionalBox[T]']) -> 'OptionalBox[T]':
        """This box if present, otherwise the box produced by ``supplier``"""
        _require("or_else", "supplier", supplier)
        if self.is_present():
            return self
        return _expect_box("or_else", supplier())

    def for_each(self, consumer: Callable[[T], Any]) -> 'OptionalBox[T]':
        """Tap: call ``consumer`` with a present value, return this box"""
        _require("for_each", "consumer", consumer)
        if self.is_present():
            consumer(self.unwrap())
        return self

    def match(self, on_present: Callable[[T], U], on_absent: Callable[[], U]) -> U:
        """Pattern matching"""
        _require("match", "on_present", on_present)
        _require("match", "on_absent", on_absent)
        if self.is_present():
            return on_present(self.unwrap())
        return on_absent()

    def to_sequence(self) -> 'BoxSequence[T]':
        """Lazy view with zero or one element"""
        return BoxSequence(self)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_sequence())


@dataclass(frozen=True, repr=False)
class Present(OptionalBox[T]):
    """A box holding ``value``. ``Present(None)`` is a present box."""

    value: T

    def is_present(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"OptionalBox.Present({self.value!r})"


@dataclass(frozen=True, repr=False)
class Absent(OptionalBox[Any]):
    """The empty box. All absent boxes are equal."""

    def is_present(self) -> bool:
        return False

    def unwrap(self) -> None:
        return None

    def __repr__(self) -> str:
        return "OptionalBox.Absent"


class BoxSequence(Sequence[T]):
    """Read-only sequence over a box.

    Holds a reference to the box and reads it on every access, so it can be
    iterated any number of times with the same result.
    """

    __slots__ = ("_box",)

    def __init__(self, box: OptionalBox[T]):
        self._box = box

    def _items(self) -> tuple:
        return (self._box.unwrap(),) if self._box.is_present() else ()

    def __len__(self) -> int:
        return 1 if self._box.is_present() else 0

    def __getitem__(self, index: Union[int, slice]) -> Any:
        return self._items()[index]

    def __iter__(self) -> Iterator[T]:
        if self._box.is_present():
            yield self._box.unwrap()

    def __repr__(self) -> str:
        return f"BoxSequence({list(self)!r})"


def wrap(value: Optional[T]) -> OptionalBox[T]:
    """Absent for None, Present otherwise"""
    if value is None:
        return Absent()
    return Present(value)
