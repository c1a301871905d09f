import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from analytics.report import recompute
from analytics.table import Table
from api import config
from api.deps import current_table
from api.serializers import correlation_payload, distribution_payload, statistics_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/table/analysis", tags=["Analysis"])
def get_analysis(
    bins: int = Query(default=config.HISTOGRAM_BINS, ge=1, le=80),
    decimals: int = Query(default=2, ge=0, le=10),
    table: Table = Depends(current_table),
):
    """Statistics, distributions and correlation in one response"""
    try:
        analysis = recompute(table, bins=bins, decimals=decimals)
        return {
            "success": True,
            "statistics": statistics_payload(analysis.statistics, decimals),
            "distributions": [distribution_payload(d) for d in analysis.distributions],
            "correlation": correlation_payload(analysis.correlation),
        }
    except Exception as e:
        logger.exception("Analysis failed")
        raise HTTPException(status_code=500, detail=f"Failed to analyse table: {str(e)}")
