"""
Explicit recomputation of every derived view for a table
"""

from dataclasses import dataclass
from typing import List

from analytics.correlation import CorrelationMatrix, correlation_matrix
from analytics.distribution import DEFAULT_BINS, ColumnDistribution, column_distributions
from analytics.statistics import ColumnStatistics, column_statistics
from analytics.table import Table


@dataclass(frozen=True)
class Analysis:
    statistics: List[ColumnStatistics]
    distributions: List[ColumnDistribution]
    correlation: CorrelationMatrix


def recompute(table: Table, bins: int = DEFAULT_BINS, decimals: int = 2) -> Analysis:
    """Compute statistics, distributions and correlation from scratch"""
    return Analysis(
        statistics=column_statistics(table),
        distributions=column_distributions(table, bins),
        correlation=correlation_matrix(table, decimals=decimals),
    )
