"""Comparator value type and combinators."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterable, TypeVar

from ordcmp.core.config import Placement, parse_placement
from ordcmp.core.errors import InvalidArgumentError
from ordcmp.core.ordering import compare
from ordcmp.core.types import CompareFn, Ordered

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Comparator(Generic[T]):
    """Wraps a three-way function returning -1, 0 or 1."""

    fn: CompareFn[T]

    def __call__(self, a: T, b: T) -> int:
        return self.fn(a, b)

    def less(self, a: T, b: T) -> bool:
        return self.fn(a, b) < 0

    def equal(self, a: T, b: T) -> bool:
        return self.fn(a, b) == 0

    def greater(self, a: T, b: T) -> bool:
        return self.fn(a, b) > 0

    def then(self, other: Comparator[T]) -> Comparator[T]:
        """Compare by ``self``, falling back to ``other`` on ties."""
        first = self.fn
        second = other.fn

        def compare_then(a: T, b: T) -> int:
            res = first(a, b)
            if res != 0:
                return res
            return second(a, b)

        return Comparator(compare_then)

    def then_by(self, f: Callable[[T], Ordered]) -> Comparator[T]:
        return self.then(by(f))

    def reversed(self) -> Comparator[T]:
        fn = self.fn

        def compare_reversed(a: T, b: T) -> int:
            return -fn(a, b)

        return Comparator(compare_reversed)

    def with_sentinel(self, t: T, placement: Placement | str) -> Comparator[T]:
        """Force values equal to ``t`` to the first or last position.

        ``a`` is checked before ``b``, so two sentinels compare as -1 when
        placed first and +1 when placed last, never 0.
        """
        forced = -1 if parse_placement(placement) is Placement.FIRST else 1
        fn = self.fn

        def compare_sentinel(a: T, b: T) -> int:
            if fn(a, t) == 0:
                return forced
            if fn(b, t) == 0:
                return -forced
            return fn(a, b)

        return Comparator(compare_sentinel)

    def with_bottom(self, t: T) -> Comparator[T]:
        return self.with_sentinel(t, Placement.FIRST)

    def with_top(self, t: T) -> Comparator[T]:
        return self.with_sentinel(t, Placement.LAST)

    def optional(
        self, *, absent: Placement | str = Placement.FIRST
    ) -> Comparator[T | None]:
        return optional_lift(self, absent=absent)

    def max(self, first: T, *rest: T) -> T:
        """Greatest value; the earliest one wins ties."""
        best = first
        for v in rest:
            if self.fn(v, best) > 0:
                best = v
        return best

    def min(self, first: T, *rest: T) -> T:
        """Least value; the earliest one wins ties."""
        best = first
        for v in rest:
            if self.fn(v, best) < 0:
                best = v
        return best

    def max_of(self, values: Iterable[T]) -> T:
        first, rest = _split_first(values, "max_of")
        return self.max(first, *rest)

    def min_of(self, values: Iterable[T]) -> T:
        first, rest = _split_first(values, "min_of")
        return self.min(first, *rest)

    def key(self) -> Callable[[T], Any]:
        """Adapter for ``sorted``, ``list.sort`` and other ``key=`` consumers."""
        return cmp_to_key(self.fn)


def _split_first(values: Iterable[T], op: str) -> tuple[T, list[T]]:
    it = iter(values)
    try:
        first = next(it)
    except StopIteration:
        logger.debug("%s called with no values", op)
        raise InvalidArgumentError(f"{op}() requires at least one value") from None
    return first, list(it)


_NATURAL: Comparator[Any] = Comparator(compare)


def natural() -> Comparator[Any]:
    """Ordering by ``<`` with NaN below every number and equal to itself."""
    return _NATURAL


def by(f: Callable[[U], Ordered]) -> Comparator[U]:
    def compare_by(a: U, b: U) -> int:
        return compare(f(a), f(b))

    return Comparator(compare_by)


def optional_lift(
    c: Comparator[T], *, absent: Placement | str = Placement.FIRST
) -> Comparator[T | None]:
    """Lift ``c`` to values that may be ``None``.

    Two ``None`` values are equal; ``None`` sorts before every present value
    unless ``absent`` is ``Placement.LAST``.
    """
    low = -1 if parse_placement(absent) is Placement.FIRST else 1
    fn = c.fn

    def compare_optional(a: T | None, b: T | None) -> int:
        if a is None and b is None:
            return 0
        if a is None:
            return low
        if b is None:
            return -low
        return fn(a, b)

    return Comparator(compare_optional)
