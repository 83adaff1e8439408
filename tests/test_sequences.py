import pytest

from problemset.sequences import (
    count_above_average,
    count_fixed_positions,
    count_signs,
    distinct_sorted,
    extremes,
    is_consecutive,
    largest_triangle_perimeter,
    score_verdict,
    spread_verdict,
    sum_verdict,
)


def test_spread_verdict():
    assert spread_verdict([5]) == "Same"
    assert spread_verdict([1, 4]) == "Yes"
    assert spread_verdict([1, 2]) == "No"


def test_spread_verdict_empty():
    with pytest.raises(ValueError):
        spread_verdict([])


def test_sum_verdict():
    assert sum_verdict([-1, 5]) == "HMM!"
    assert sum_verdict([0]) == "ZERO"
    assert sum_verdict([3, 4]) == "YES"
    assert sum_verdict([1, 2]) == "NO"


def test_sum_verdict_empty():
    with pytest.raises(ValueError):
        sum_verdict([])


def test_count_signs():
    assert count_signs([-1, 0, 2, 3]) == (1, 2)
    assert count_signs([0, 0]) == (0, 0)
    values = [-3, -2, 0, 4, 0, 9, -1]
    negatives, positives = count_signs(values)
    assert negatives + positives + values.count(0) == len(values)


def test_score_verdict_boundaries():
    assert score_verdict([10] * 6) == "NOT GOOD"
    assert score_verdict([15] * 6) == "GOOD"
    assert score_verdict([30] * 6) == "GOOD"
    assert score_verdict([30] * 5 + [31]) == "NOT GOOD"


def test_extremes():
    assert extremes([3, -1, 7]) == (7, -1)
    with pytest.raises(ValueError):
        extremes([])


def test_largest_triangle_perimeter():
    assert largest_triangle_perimeter([1, 2, 3]) == sum([1, 2, 3])
    assert largest_triangle_perimeter([1, 1, 10]) == 0
    assert largest_triangle_perimeter([4, 3]) == 0
    lengths = [2, 9, 3, 4, 20]
    assert largest_triangle_perimeter(lengths) == largest_triangle_perimeter(sorted(lengths))
    assert largest_triangle_perimeter(lengths) == 2 + 3 + 4 or largest_triangle_perimeter(lengths) > 9


def test_distinct_sorted():
    assert distinct_sorted([3, 1, 3, 2]) == [1, 2, 3]
    assert distinct_sorted([]) == []


def test_count_above_average():
    assert count_above_average([5, 5, 5]) == 0
    assert count_above_average([1, 1, 10]) == 1
    with pytest.raises(ValueError):
        count_above_average([])


def test_count_fixed_positions():
    assert count_fixed_positions([4, 4, 4, 4]) == 4
    assert count_fixed_positions([1, 2, 3]) == 1
    assert count_fixed_positions([1, 2]) == 0


def test_is_consecutive():
    assert is_consecutive([3, 1, 2]) is True
    assert is_consecutive([1, 3]) is False
    assert is_consecutive([]) is True
    assert is_consecutive([2, 2, 3]) is True