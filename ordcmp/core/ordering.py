"""Natural ordering primitive.

``compare`` follows ``<`` except for NaN: a NaN sorts below every other
value and equals any other NaN. ``-0.0`` and ``0.0`` compare equal. Tuples
are compared member by member under the same rules, then by length.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from ordcmp.core.types import Ordering


def is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    # numpy.float32 and other non-float IEEE types
    return bool(value != value)


def _compare_tuples(a: tuple[Any, ...], b: tuple[Any, ...]) -> Ordering:
    for x, y in zip(a, b):
        res = compare(x, y)
        if res != 0:
            return res
    return compare(len(a), len(b))


def compare(a: Any, b: Any) -> Ordering:
    if isinstance(a, tuple) and isinstance(b, tuple):
        return _compare_tuples(a, b)
    a_nan = is_nan(a)
    b_nan = is_nan(b)
    if a_nan or b_nan:
        if a_nan and b_nan:
            return 0
        return -1 if a_nan else 1
    if a < b:
        return -1
    if b < a:
        return 1
    return 0
