"""Descriptive statistics over finite collections of real numbers.

``average`` and ``median`` accept any iterable of ``numbers.Real`` (ints,
floats, ``Fraction``, ``Decimal``) and return a float. Every member must be
finite once converted to float. ``mode`` works on any values; hashable ones
are counted directly, others are grouped by equality.
"""

from __future__ import annotations

import math
from collections import Counter
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, List, TypeVar, Union

from .errors import EmptyInput, InvalidArgument

T = TypeVar("T")

Number = Union[Real, Decimal]


def _as_floats(values: Iterable[Number], *, operation: str) -> List[float]:
    out: list[float] = []
    for i, v in enumerate(values):
        if isinstance(v, bool) or not isinstance(v, (Real, Decimal)):
            raise TypeError(f"values[{i}] must be a real number, got {type(v).__name__}")
        try:
            f = float(v)
        except OverflowError as exc:
            raise InvalidArgument("values", v, f"values[{i}] is out of float range") from exc
        if not math.isfinite(f):
            raise InvalidArgument("values", v, f"values[{i}] must be finite, got {f}")
        out.append(f)
    if not out:
        raise EmptyInput(operation)
    return out


def _clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def average(values: Iterable[Number]) -> float:
    """Arithmetic mean. Raises ``EmptyInput`` for an empty collection."""
    xs = _as_floats(values, operation="average")
    n = len(xs)
    try:
        mean = math.fsum(xs) / n
    except OverflowError:
        # Sum exceeds the float range; the mean itself does not.
        try:
            mean = math.fsum(x / n for x in xs)
        except OverflowError:
            # Rounding of the scaled terms pushed the mean past the largest float.
            mean = math.copysign(math.inf, sum(x / n for x in xs))
    return _clamp(mean, min(xs), max(xs))


def median(values: Iterable[Number]) -> float:
    """Middle value of the sorted input; mean of the two middle values for even length."""
    xs = sorted(_as_floats(values, operation="median"))
    mid = len(xs) // 2
    if len(xs) % 2 == 1:
        return xs[mid]
    a, b = xs[mid - 1], xs[mid]
    if (a < 0) == (b < 0):
        midpoint = a + (b - a) / 2.0
    else:
        midpoint = (a + b) / 2.0
    return _clamp(midpoint, a, b)


def _mode_unhashable(values: List[Any]) -> List[Any]:
    groups: list[list[Any]] = []
    for v in values:
        for group in groups:
            if group[0] == v:
                group[1] += 1
                break
        else:
            groups.append([v, 1])
    top = max(count for _, count in groups)
    return [v for v, count in groups if count == top]


def mode(values: Iterable[T]) -> List[T]:
    """
    Every value tied at the highest occurrence count.

    Order follows first appearance in *values*; treat it as unspecified and
    compare as a set. An empty input gives ``[]``. Unhashable members (lists,
    dicts) are grouped by ``==`` in quadratic time.
    """
    items = list(values)
    if not items:
        return []
    try:
        counts = Counter(items)
    except TypeError:
        return _mode_unhashable(items)
    top = max(counts.values())
    return [v for v, c in counts.items() if c == top]
