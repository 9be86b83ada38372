"""Composable three-way comparators."""

from __future__ import annotations

from ordcmp.comparator.base import Comparator, by, natural, optional_lift
from ordcmp.core import (
    ComparatorError,
    InvalidArgumentError,
    Ordered,
    Ordering,
    Placement,
    compare,
    is_nan,
)

__all__ = [
    "Comparator",
    "ComparatorError",
    "InvalidArgumentError",
    "Ordered",
    "Ordering",
    "Placement",
    "by",
    "compare",
    "is_nan",
    "natural",
    "optional_lift",
]
