"""
Per-column distributions: fixed-width histograms for numeric columns and
value counts for categorical ones
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Literal, Sequence, Union

import numpy as np

from analytics.table import Table, is_numeric_column

DEFAULT_BINS = 10


@dataclass(frozen=True)
class NumericBin:
    label: str
    lower: float
    upper: float
    count: int


@dataclass(frozen=True)
class CategoryBucket:
    label: str
    count: int


Bucket = Union[NumericBin, CategoryBucket]


@dataclass(frozen=True)
class ColumnDistribution:
    column: str
    kind: Literal["numeric", "categorical"]
    buckets: List[Bucket]


def _range_label(lower: float, upper: float) -> str:
    return f"{lower:.2f} - {upper:.2f}"


def histogram(values: Sequence[float], bins: int = DEFAULT_BINS) -> List[NumericBin]:
    """
    Equal-width histogram between min and max

    The maximum is clamped into the last bin. A zero-range input yields a
    single bin holding every value.
    """
    if bins < 1:
        raise ValueError("bins must be at least 1")
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return []

    min_val = float(data.min())
    max_val = float(data.max())
    if max_val == min_val:
        return [NumericBin(_range_label(min_val, max_val), min_val, max_val, int(data.size))]

    # a range wider than the float limit is binned on a copy scaled into [-1, 1]
    scale = 1.0
    if not np.isfinite(max_val - min_val):
        scale = max(abs(min_val), abs(max_val))
    scaled_min = min_val / scale
    bin_size = (max_val / scale - scaled_min) / bins
    indices = np.clip(np.floor((data / scale - scaled_min) / bin_size).astype(int), 0, bins - 1)
    counts = np.bincount(indices, minlength=bins)

    result = []
    edges = [
        min(max((scaled_min + i * bin_size) * scale, min_val), max_val)
        for i in range(bins + 1)
    ]
    for i, count in enumerate(counts):
        lower, upper = edges[i], edges[i + 1]
        result.append(NumericBin(_range_label(lower, upper), lower, upper, int(count)))
    return result


def category_counts(cells: Iterable[str]) -> List[CategoryBucket]:
    """Occurrences of each distinct cell, in order of first appearance"""
    return [CategoryBucket(label, count) for label, count in Counter(cells).items()]


def column_distribution(column: str, cells: Sequence[str], bins: int = DEFAULT_BINS) -> ColumnDistribution:
    if is_numeric_column(cells):
        values = [float(cell) for cell in cells]
        return ColumnDistribution(column, "numeric", list(histogram(values, bins)))
    return ColumnDistribution(column, "categorical", list(category_counts(cells)))


def column_distributions(table: Table, bins: int = DEFAULT_BINS) -> List[ColumnDistribution]:
    """One distribution per column; empty when the table has no rows"""
    if table.n_rows == 0:
        return []
    return [
        column_distribution(column, table.column(index), bins)
        for index, column in enumerate(table.columns)
    ]
