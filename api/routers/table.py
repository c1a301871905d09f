from __future__ import annotations

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from pydantic import BaseModel

from analytics.errors import AnalyticsError, ReadFailure
from analytics.table import Table, read_table
from api import config
from api.deps import current_table
from api.serializers import table_payload
from storage import tables
from storage.tables import NoTableLoaded, UploadSuperseded

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_CHUNK_SIZE = 1024 * 1024


class TableInfo(BaseModel):
    token: int
    filename: str
    columns: List[str]
    n_rows: int
    n_cols: int
    uploaded_at: datetime


def _info(stored: tables.StoredTable) -> TableInfo:
    return TableInfo(
        token=stored.token,
        filename=stored.filename,
        columns=list(stored.table.columns),
        n_rows=stored.table.n_rows,
        n_cols=stored.table.n_cols,
        uploaded_at=stored.uploaded_at,
    )


async def _read_upload(upload: UploadFile, limit: int) -> bytes:
    chunks = []
    size = 0
    while True:
        chunk = await upload.read(UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
        if size > limit:
            raise HTTPException(
                status_code=413, detail=f"File exceeds the {limit}-byte upload limit"
            )
        chunks.append(chunk)
    return b"".join(chunks)


# ────────────────────────────────────────────────────────────────────────────────
# Upload
# ────────────────────────────────────────────────────────────────────────────────
@router.post("/upload", tags=["Table"])
async def upload_table(file: UploadFile = File(...)):
    """
    Upload a CSV file, replacing the current table
    Only the most recently started upload is kept
    """
    try:
        if not file.filename:
            raise HTTPException(status_code=400, detail="Filename missing or invalid")
        if not file.filename.lower().endswith(".csv"):
            raise HTTPException(status_code=400, detail="Only CSV files are supported")

        token = tables.begin_upload()

        try:
            content = await _read_upload(file, config.MAX_UPLOAD_BYTES)
        except OSError as e:
            logger.warning("Reading upload %s failed: %s", file.filename, e)
            raise ReadFailure() from e

        table = read_table(content)
        stored = tables.commit(token, table, file.filename)

        return {
            "success": True,
            **_info(stored).model_dump(mode="json"),
            "message": f"Successfully loaded {file.filename}",
        }

    except HTTPException:
        raise
    except AnalyticsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UploadSuperseded as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.exception("Upload of %s failed", file.filename)
        raise HTTPException(status_code=500, detail=f"Upload failed: {str(e)}")


# ────────────────────────────────────────────────────────────────────────────────
# Current table
# ────────────────────────────────────────────────────────────────────────────────
@router.get("/table", tags=["Table"])
def get_table_info():
    """Metadata for the current table"""
    try:
        return {"success": True, **_info(tables.current()).model_dump(mode="json")}
    except NoTableLoaded as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/table/preview", tags=["Table"])
def preview_table(
    rows: int = Query(default=config.PREVIEW_DEFAULT_ROWS, ge=0, le=config.PREVIEW_MAX_ROWS),
    table: Table = Depends(current_table),
):
    """First N rows of the current table"""
    return {"success": True, **table_payload(table.preview(rows))}


@router.delete("/table", tags=["Table"])
def clear_table():
    """Drop the current table"""
    tables.clear()
    return {"success": True, "message": "Table cleared"}
