from fastapi import HTTPException

from analytics.table import Table
from storage.tables import NoTableLoaded, current


def current_table() -> Table:
    """FastAPI dependency resolving the active table or answering 404"""
    try:
        return current().table
    except NoTableLoaded as e:
        raise HTTPException(status_code=404, detail=str(e))
