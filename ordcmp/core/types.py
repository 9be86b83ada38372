"""Core comparison types."""

from __future__ import annotations

from typing import Any, Callable, Literal, Protocol, TypeVar


class Ordered(Protocol):
    def __lt__(self, other: Any, /) -> bool:
        """Strict less-than against a value of the same kind."""


Ordering = Literal[-1, 0, 1]

T = TypeVar("T")

CompareFn = Callable[[T, T], int]
