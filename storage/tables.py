# storage/tables.py
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Optional

from analytics.table import Table

logger = logging.getLogger(__name__)


class NoTableLoaded(Exception):
    pass


class UploadSuperseded(Exception):
    pass


@dataclass(frozen=True)
class StoredTable:
    token: int
    filename: str
    table: Table
    uploaded_at: datetime


_current: Optional[StoredTable] = None
_latest_token = 0
_lock = Lock()


def begin_upload() -> int:
    """Issue a token for an upload that is about to be read."""
    global _latest_token
    with _lock:
        _latest_token += 1
        return _latest_token


def commit(token: int, table: Table, filename: str) -> StoredTable:
    """Install `table` if no newer upload has started since `token` was issued."""
    global _current
    with _lock:
        if token != _latest_token:
            logger.info("Discarding upload %d (%s): upload %d started later", token, filename, _latest_token)
            raise UploadSuperseded(f"Upload {token} was superseded by upload {_latest_token}")
        _current = StoredTable(
            token=token,
            filename=filename,
            table=table,
            uploaded_at=datetime.now(timezone.utc),
        )
    logger.info("Loaded %s as upload %d (%dx%d)", filename, token, table.n_rows, table.n_cols)
    return _current


def current() -> StoredTable:
    """Return the active table snapshot."""
    with _lock:
        stored = _current
    if stored is None:
        raise NoTableLoaded("No table loaded. Upload a CSV first.")
    return stored


def peek() -> Optional[StoredTable]:
    with _lock:
        return _current


def clear():
    global _current
    with _lock:
        _current = None
    logger.info("Cleared current table")


def reset():
    """Forget the table and the token counter."""
    global _current, _latest_token
    with _lock:
        _current = None
        _latest_token = 0
