"""Tests for per-column descriptive statistics."""

import math

import pytest

from analytics.statistics import Statistics, column_statistics, describe, describe_column
from analytics.table import parse_table


class TestDescribe:
    def test_empty_input_has_no_statistics(self):
        assert describe([]) is None

    def test_odd_count(self):
        stats = describe([5, 1, 3, 2, 4])
        assert stats.count == 5
        assert stats.mean == 3
        assert stats.median == 3
        assert stats.min == 1
        assert stats.max == 5
        assert stats.q1 == 2  # sorted[floor(1.25)]
        assert stats.q3 == 4  # sorted[floor(3.75)]

    def test_even_count_median_averages_middle_pair(self):
        stats = describe([4, 1, 3, 2])
        assert stats.median == 2.5
        assert stats.q1 == 2  # sorted[1]
        assert stats.q3 == 4  # sorted[3]

    def test_population_standard_deviation(self):
        stats = describe([2, 4, 4, 4, 5, 5, 7, 9])
        assert stats.std == pytest.approx(2.0)

    def test_single_value(self):
        stats = describe([7.5])
        assert stats.count == 1
        assert stats.std == 0
        assert stats.q1 == stats.median == stats.q3 == stats.mode == 7.5

    @pytest.mark.parametrize(
        "values,expected",
        [([1, 1, 2, 3], 1), ([1, 2, 2, 3], 2), ([3, 2, 1], 1), ([2, 2, 1, 1], 1)],
    )
    def test_mode_ties_resolve_to_smallest(self, values, expected):
        assert describe(values).mode == expected

    def test_mean_within_range(self):
        values = [-3.2, 10.5, 0.0, 4.4, 4.4, 99.1]
        stats = describe(values)
        assert stats.min <= stats.mean <= stats.max

    def test_caller_data_not_mutated(self):
        values = [3, 1, 2]
        describe(values)
        assert values == [3, 1, 2]

    def test_full_precision_kept(self):
        stats = describe([1, 2, 2])
        assert stats.mean == pytest.approx(5 / 3)
        assert stats.mean != 1.67

    def test_values_near_float_limit_stay_finite(self):
        stats = describe([1e308, 1e308])
        assert stats.mean == 1e308
        assert stats.std == 0
        assert stats.median == 1e308

        stats = describe([-1e308, 1e308])
        assert stats.mean == 0
        assert stats.std == pytest.approx(1e308)
        assert stats.median == 0
        assert all(math.isfinite(v) for v in stats.as_dict().values())


class TestRounding:
    def test_rounded_copy(self):
        stats = describe([1, 2, 2])
        shown = stats.rounded(2)
        assert shown.mean == 1.67
        assert shown.count == 3
        assert isinstance(shown.count, int)
        assert stats.mean == pytest.approx(5 / 3)

    def test_as_dict_field_order(self):
        stats = Statistics(3, 1.0, 0.5, 0.0, 0.5, 1.0, 1.5, 2.0, 1.0)
        assert list(stats.as_dict()) == [
            "count", "mean", "std", "min", "q1", "median", "q3", "max", "mode"
        ]


class TestColumnStatistics:
    def test_mixed_column_uses_numeric_cells_only(self):
        stats = describe_column(["10", "n/a", "20", ""])
        assert stats.count == 2
        assert stats.mean == 15

    def test_no_numeric_cells(self):
        assert describe_column(["a", "b", "NaN"]) is None

    def test_columns_without_numbers_are_skipped(self, sample_table):
        result = column_statistics(sample_table)
        assert [s.column for s in result] == ["id", "height", "weight"]

    def test_values(self, sample_table):
        height = column_statistics(sample_table)[1].stats
        assert height.count == 4
        assert height.mean == 165
        assert height.std == pytest.approx(math.sqrt(125))
        assert height.median == 165
        assert height.q1 == 160
        assert height.q3 == 180

    def test_header_only_table(self):
        assert column_statistics(parse_table("a,b")) == []
