"""
JSON shapes for the derived views. Rounding for display happens here.
"""

from dataclasses import asdict
from typing import Any, Dict, List

from analytics.correlation import CorrelationMatrix
from analytics.distribution import ColumnDistribution
from analytics.statistics import ColumnStatistics
from analytics.table import Table


def table_payload(table: Table) -> Dict[str, Any]:
    return {
        "columns": list(table.columns),
        "data": [list(row) for row in table.rows],
        "rows_returned": table.n_rows,
    }


def statistics_payload(stats: List[ColumnStatistics], decimals: int = 2) -> List[Dict[str, Any]]:
    return [
        {"column": s.column, "stats": s.stats.rounded(decimals).as_dict()}
        for s in stats
    ]


def distribution_payload(dist: ColumnDistribution) -> Dict[str, Any]:
    return {
        "column": dist.column,
        "kind": dist.kind,
        "buckets": [asdict(b) for b in dist.buckets],
    }


def correlation_payload(corr: CorrelationMatrix) -> Dict[str, Any]:
    return {"columns": corr.columns, "matrix": corr.values}
