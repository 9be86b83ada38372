import math
from decimal import Decimal

from ordcmp.core import compare, is_nan

NAN = float("nan")


def test_compare_follows_less_than() -> None:
    assert compare(1, 2) == -1
    assert compare(2, 1) == 1
    assert compare(2, 2) == 0
    assert compare("a", "b") == -1
    assert compare((1, "b"), (1, "a")) == 1


def test_nan_sorts_below_everything() -> None:
    assert compare(NAN, 1.0) == -1
    assert compare(1.0, NAN) == 1
    assert compare(NAN, -math.inf) == -1
    assert compare(NAN, NAN) == 0


def test_negative_zero_equals_zero() -> None:
    assert compare(-0.0, 0.0) == 0
    assert compare(0.0, -0.0) == 0


def test_decimal_nan_never_reaches_operators() -> None:
    assert compare(Decimal("NaN"), Decimal("1")) == -1
    assert compare(Decimal("1"), Decimal("sNaN")) == 1
    assert compare(Decimal("NaN"), Decimal("sNaN")) == 0
    assert compare(Decimal("NaN"), NAN) == 0
    assert compare(Decimal("-0"), Decimal("0")) == 0


def test_is_nan() -> None:
    assert is_nan(NAN)
    assert is_nan(Decimal("NaN"))
    assert not is_nan(1.0)
    assert not is_nan("nan")
    assert not is_nan(None)


class _Wrapped:
    """Float-like value that is not a ``float`` subclass."""

    def __init__(self, value: float) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Wrapped) and self.value == other.value

    def __lt__(self, other: "_Wrapped") -> bool:
        return self.value < other.value


def test_nan_inside_tuples() -> None:
    assert compare((1, NAN), (1, 2.0)) == -1
    assert compare((1, 2.0), (1, NAN)) == 1
    assert compare((1, NAN), (1, NAN)) == 0
    assert compare((0, NAN), (1, -5.0)) == -1
    assert compare((1, -0.0), (1, 0.0)) == 0
    assert compare((1, (NAN, 2)), (1, (0.0, 1))) == -1


def test_tuple_length_breaks_ties() -> None:
    assert compare((1,), (1, NAN)) == -1
    assert compare((1, 2), (1,)) == 1
    assert compare((), ()) == 0


def test_nan_detected_on_non_float_types() -> None:
    assert is_nan(_Wrapped(NAN))
    assert not is_nan(_Wrapped(1.0))
    assert compare(_Wrapped(NAN), _Wrapped(1.0)) == -1
    assert compare(_Wrapped(NAN), _Wrapped(NAN)) == 0
    assert compare(_Wrapped(2.0), _Wrapped(1.0)) == 1
