"""Core primitives for comparator construction."""

from __future__ import annotations

from ordcmp.core.config import Placement, parse_placement
from ordcmp.core.errors import ComparatorError, InvalidArgumentError
from ordcmp.core.ordering import compare, is_nan
from ordcmp.core.types import CompareFn, Ordered, Ordering

__all__ = [
    "CompareFn",
    "ComparatorError",
    "InvalidArgumentError",
    "Ordered",
    "Ordering",
    "Placement",
    "compare",
    "is_nan",
    "parse_placement",
]
