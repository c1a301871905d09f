import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from analytics.distribution import column_distribution, column_distributions
from analytics.table import Table
from api import config
from api.deps import current_table
from api.serializers import distribution_payload

logger = logging.getLogger(__name__)

router = APIRouter()


# ────────────────────────────────────────────────────────────────────────────────
# Distribution Endpoints
# ────────────────────────────────────────────────────────────────────────────────
@router.get("/table/distributions", tags=["Distribution Methods"])
def get_distributions(
    column: Optional[str] = None,
    bins: int = Query(default=config.HISTOGRAM_BINS, ge=1, le=80),
    table: Table = Depends(current_table),
):
    """Histogram for numeric columns, value counts for categorical ones"""
    try:
        if column is None:
            dists = column_distributions(table, bins)
            return {
                "success": True,
                "distributions": [distribution_payload(d) for d in dists],
            }

        if column not in table.columns:
            raise HTTPException(status_code=404, detail=f"Column '{column}' not found")
        if table.n_rows == 0:
            raise HTTPException(
                status_code=404, detail="No data available for this column"
            )

        index = table.columns.index(column)
        dist = column_distribution(column, table.column(index), bins)
        return {"success": True, "distribution": distribution_payload(dist)}

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Distribution computation failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to compute distribution: {str(e)}"
        )
