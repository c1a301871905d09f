"""
Descriptive statistics for numeric columns
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np

from analytics.table import Table, is_numeric

STAT_FIELDS = ("count", "mean", "std", "min", "q1", "median", "q3", "max", "mode")


@dataclass(frozen=True)
class Statistics:
    count: int
    mean: float
    std: float
    min: float
    q1: float
    median: float
    q3: float
    max: float
    mode: float

    def rounded(self, decimals: int = 2) -> "Statistics":
        """Presentation copy with every float rounded to `decimals` places"""
        values = {
            name: round(value, decimals) if name != "count" else value
            for name, value in asdict(self).items()
        }
        return Statistics(**values)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ColumnStatistics:
    column: str
    stats: Statistics


def _overflow_safe(reduce: Callable[[np.ndarray], float], data: np.ndarray) -> float:
    # mean and std of values near the float limit overflow; recompute on a
    # copy scaled into [-1, 1] when that happens
    with np.errstate(over="ignore", invalid="ignore"):
        result = float(reduce(data))
        if math.isfinite(result):
            return result
        scale = float(np.max(np.abs(data)))
        return float(reduce(data / scale)) * scale


def _mode(sorted_values: np.ndarray) -> float:
    # scanning in sorted order and replacing only on a strictly greater count
    # resolves ties to the smallest value
    counts: Dict[float, int] = {}
    mode = sorted_values[0]
    mode_count = 1
    for value in sorted_values:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > mode_count:
            mode_count = counts[value]
            mode = value
    return float(mode)


def describe(values: Iterable[float]) -> Optional[Statistics]:
    """
    Summary statistics over a sequence of numbers

    Quartiles use the nearest-rank position floor(count * p) with no
    interpolation. Standard deviation is the population one.

    Returns:
        Statistics, or None when `values` is empty
    """
    data = np.sort(np.asarray(list(values), dtype=float))
    count = len(data)
    if count == 0:
        return None

    # rounding in the scaled path must not push results past their bounds
    mean = min(max(_overflow_safe(np.mean, data), float(data[0])), float(data[-1]))
    std = min(_overflow_safe(np.std, data), float(data[-1] / 2 - data[0] / 2))
    middle = count // 2
    if count % 2 == 0:
        median = float(data[middle - 1] / 2 + data[middle] / 2)
    else:
        median = float(data[middle])

    return Statistics(
        count=count,
        mean=mean,
        std=std,
        min=float(data[0]),
        q1=float(data[int(count * 0.25)]),
        median=median,
        q3=float(data[int(count * 0.75)]),
        max=float(data[-1]),
        mode=_mode(data),
    )


def describe_column(cells: Iterable[str]) -> Optional[Statistics]:
    """Statistics over the numeric cells of a column, ignoring the rest"""
    return describe(float(cell) for cell in cells if is_numeric(cell))


def column_statistics(table: Table) -> List[ColumnStatistics]:
    """Statistics for every column with at least one numeric cell, in table order"""
    results = []
    for index, column in enumerate(table.columns):
        stats = describe_column(table.column(index))
        if stats is not None:
            results.append(ColumnStatistics(column=column, stats=stats))
    return results
