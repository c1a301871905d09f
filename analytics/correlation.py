"""
Pearson correlation across the all-numeric columns of a table
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from analytics.table import Table, is_numeric_column


@dataclass(frozen=True)
class CorrelationMatrix:
    """Square, row-major matrix labelled by numeric column names"""

    columns: List[str]
    values: List[List[Optional[float]]]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.values, index=self.columns, columns=self.columns, dtype=float)

    def pairs(self) -> pd.DataFrame:
        """Upper-triangle pairs, strongest absolute correlation first"""
        n = len(self.columns)
        idx_i, idx_j = np.triu_indices(n, k=1)
        pairs = pd.DataFrame(
            {
                "col_i": [self.columns[i] for i in idx_i],
                "col_j": [self.columns[j] for j in idx_j],
                "value": [self.values[i][j] for i, j in zip(idx_i, idx_j)],
            },
            columns=["col_i", "col_j", "value"],
        )
        pairs["value"] = pairs["value"].astype(float)
        order = pairs["value"].abs().sort_values(ascending=False, na_position="last").index
        return pairs.reindex(order).reset_index(drop=True)

    def to_csv(self) -> str:
        return self.to_frame().to_csv()


def pearson(x: Sequence[float], y: Sequence[float]) -> Optional[float]:
    """
    Pearson correlation coefficient of two equal-length sequences

    Each sequence is divided by its largest magnitude first so that
    deviation products cannot overflow. Returns None when either sequence
    has zero variance.
    """
    a = np.asarray(x, dtype=float)
    b = np.asarray(y, dtype=float)
    if a.size != b.size:
        raise ValueError("Sequences must have the same length")
    if a.size == 0:
        return None

    if a.min() == a.max() or b.min() == b.max():
        return None

    a = a / np.max(np.abs(a))
    b = b / np.max(np.abs(b))
    dev_a = a - a.mean()
    dev_b = b - b.mean()
    denom = np.sqrt(np.sum(dev_a * dev_a) * np.sum(dev_b * dev_b))
    if denom == 0:
        return None
    r = float(np.sum(dev_a * dev_b) / denom)
    if not np.isfinite(r):
        return None
    return max(-1.0, min(1.0, r))


def numeric_column_indices(table: Table) -> List[int]:
    """Indices of columns where every row is numeric"""
    return [i for i in range(table.n_cols) if is_numeric_column(table.column(i))]


def correlation_matrix(table: Table, decimals: Optional[int] = 2) -> CorrelationMatrix:
    """
    Pairwise Pearson correlation for the numeric columns of `table`

    Each pair is computed once and mirrored so the matrix is exactly
    symmetric. The diagonal is 1.0. Zero-variance pairs are None.

    Args:
        table: Source table
        decimals: Rounding applied to off-diagonal values, None keeps full precision
    """
    if table.n_rows == 0:
        return CorrelationMatrix(columns=[], values=[])

    indices = numeric_column_indices(table)
    data = [[float(cell) for cell in table.column(i)] for i in indices]
    n = len(indices)

    values: List[List[Optional[float]]] = [[None] * n for _ in range(n)]
    for i in range(n):
        values[i][i] = 1.0
        for j in range(i + 1, n):
            r = pearson(data[i], data[j])
            if r is not None and decimals is not None:
                r = round(r, decimals)
            values[i][j] = r
            values[j][i] = r

    return CorrelationMatrix(columns=[table.columns[i] for i in indices], values=values)
