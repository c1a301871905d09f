import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from analytics.statistics import column_statistics
from analytics.table import Table
from api.deps import current_table
from api.serializers import statistics_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/table/statistics", tags=["Statistics"])
def get_statistics(
    decimals: int = Query(default=2, ge=0, le=10),
    table: Table = Depends(current_table),
):
    """Descriptive statistics for every column with numeric cells"""
    try:
        stats = column_statistics(table)
        return {"success": True, "statistics": statistics_payload(stats, decimals)}
    except Exception as e:
        logger.exception("Statistics computation failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to compute statistics: {str(e)}"
        )
