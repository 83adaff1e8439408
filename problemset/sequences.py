"""Verdicts and statistics over lists of integers."""

from __future__ import annotations

from collections.abc import Sequence


def _require(values: Sequence[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def spread_verdict(values: Sequence[int]) -> str:
    """Judge the gap between the largest and smallest value."""
    items = _require(values)
    spread = max(items) - min(items)
    if spread == 0:
        return "Same"
    return "Yes" if spread % 3 == 0 else "No"


def sum_verdict(values: Sequence[int]) -> str:
    """Judge the sum of the largest and smallest value."""
    items = _require(values)
    high, low = max(items), min(items)
    if high < 0 or low < 0:
        return "HMM!"
    total = high + low
    if total == 0:
        return "ZERO"
    return "YES" if total % 7 == 0 else "NO"


def count_signs(values: Sequence[int]) -> tuple[int, int]:
    """Count negative and positive values; zeros count as neither."""
    negatives = sum(1 for v in values if v < 0)
    positives = sum(1 for v in values if v > 0)
    return negatives, positives


def score_verdict(scores: Sequence[int]) -> str:
    """GOOD when the total lies strictly between 80 and 181."""
    total = sum(scores)
    return "GOOD" if 80 < total < 181 else "NOT GOOD"


def extremes(values: Sequence[int]) -> tuple[int, int]:
    """Largest and smallest value."""
    items = _require(values)
    return max(items), min(items)


def largest_triangle_perimeter(lengths: Sequence[int]) -> int:
    """Largest perimeter from three sides adjacent in sorted order, or 0.

    Degenerate triangles, whose two short sides just reach the long one,
    are accepted.
    """
    sides = sorted(lengths)
    for top in range(len(sides) - 1, 1, -1):
        a, b, c = sides[top - 2], sides[top - 1], sides[top]
        if a + b >= c:
            return a + b + c
    return 0


def distinct_sorted(values: Sequence[int]) -> list[int]:
    """The distinct values in ascending order."""
    return sorted(set(values))


def count_above_average(values: Sequence[int]) -> int:
    """How many values exceed the integer average (truncated toward zero)."""
    items = _require(values)
    total = sum(items)
    average = abs(total) // len(items)
    if total < 0:
        average = -average
    return sum(1 for v in items if v > average)


def count_fixed_positions(values: Sequence[int]) -> int:
    """Positions where the ascending and descending sort agree."""
    ascending = sorted(values)
    descending = sorted(values, reverse=True)
    return sum(1 for x, y in zip(ascending, descending) if x == y)


def is_consecutive(values: Sequence[int]) -> bool:
    """Return True if the sorted values never jump by more than one."""
    ordered = sorted(values)
    return all(b - a <= 1 for a, b in zip(ordered, ordered[1:]))