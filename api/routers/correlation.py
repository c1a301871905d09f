import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from analytics.correlation import correlation_matrix
from analytics.table import Table
from api.deps import current_table
from api.serializers import correlation_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/table/correlation", tags=["Correlation Matrix"])
def get_correlation_matrix(
    decimals: int = Query(default=2, ge=0, le=10),
    table: Table = Depends(current_table),
):
    """Pearson correlation matrix for all numeric columns"""
    try:
        corr = correlation_matrix(table, decimals=decimals)
        return {"success": True, **correlation_payload(corr)}
    except Exception as e:
        logger.exception("Correlation computation failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to compute correlation: {str(e)}"
        )


@router.get("/table/correlation/pairs", tags=["Correlation Matrix"])
def get_correlation_pairs(
    top_k: int = Query(default=10, ge=1, le=100),
    table: Table = Depends(current_table),
):
    """Strongest and weakest column pairs by absolute correlation"""
    try:
        corr = correlation_matrix(table)
        if len(corr.columns) < 2:
            raise HTTPException(
                status_code=400,
                detail="Need at least 2 numeric columns for correlation",
            )

        pairs = corr.pairs().dropna(subset=["value"])
        top_pairs = pairs.head(top_k)
        low_pairs = pairs.iloc[::-1].head(top_k)

        return {
            "success": True,
            "top_pairs": top_pairs.to_dict(orient="records"),
            "lowest_pairs": low_pairs.to_dict(orient="records"),
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Correlation pair ranking failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to rank correlations: {str(e)}"
        )


@router.get("/table/correlation.csv", tags=["Correlation Matrix"])
def download_correlation_csv(table: Table = Depends(current_table)):
    """Full correlation matrix as CSV"""
    try:
        csv = correlation_matrix(table).to_csv()
        return Response(
            content=csv,
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="correlation.csv"'},
        )
    except Exception as e:
        logger.exception("Correlation export failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to export correlation: {str(e)}"
        )
