"""Placement options for sentinel and absent values."""

from __future__ import annotations

from enum import Enum

from ordcmp.core.errors import InvalidArgumentError


class Placement(str, Enum):
    FIRST = "first"
    LAST = "last"


def parse_placement(value: Placement | str) -> Placement:
    if isinstance(value, Placement):
        return value
    if isinstance(value, str):
        v = value.lower()
        if v == "first":
            return Placement.FIRST
        if v == "last":
            return Placement.LAST
    raise InvalidArgumentError(f"invalid placement: {value!r}")
