"""
Table ingestion and numeric classification
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import pandas as pd

from analytics.errors import EmptyInputError, ReadFailure

logger = logging.getLogger(__name__)

DELIMITER = ","


@dataclass(frozen=True)
class Table:
    """Header plus rows of raw string cells, positionally aligned"""

    columns: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.columns)

    def column(self, index: int) -> Tuple[str, ...]:
        """Cells at `index` across every row"""
        return tuple(row[index] for row in self.rows)

    def preview(self, n_rows: int) -> "Table":
        if n_rows < 0:
            raise ValueError("n_rows must be non-negative")
        return Table(columns=self.columns, rows=self.rows[:n_rows])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.rows), columns=list(self.columns), dtype=str)


def is_numeric(cell: str) -> bool:
    """True if the cell is a finite decimal number"""
    text = cell.strip()
    if not text or "_" in text:
        return False
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value)


def is_numeric_column(cells: Iterable[str]) -> bool:
    return all(is_numeric(cell) for cell in cells)


def _normalize_row(cells: Sequence[str], width: int) -> Tuple[str, ...]:
    if len(cells) < width:
        return tuple(cells) + ("",) * (width - len(cells))
    return tuple(cells[:width])


def parse_table(content: str) -> Table:
    """
    Parse comma-separated text into a Table

    The first non-blank line is the header. Rows whose cell count differs
    from the header are padded with empty cells or truncated.

    Raises:
        EmptyInputError: content holds no non-blank lines
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]
    lines = [line for line in lines if line.strip()]
    if not lines:
        raise EmptyInputError()

    columns = tuple(lines[0].split(DELIMITER))
    width = len(columns)

    rows = []
    malformed = 0
    for line in lines[1:]:
        cells = line.split(DELIMITER)
        if len(cells) != width:
            malformed += 1
        rows.append(_normalize_row(cells, width))

    if malformed:
        logger.warning(
            "Normalized %d row(s) whose cell count differs from the %d-column header",
            malformed,
            width,
        )
    logger.debug("Parsed table with %d rows x %d columns", len(rows), width)
    return Table(columns=columns, rows=tuple(rows))


def read_table(data: bytes, encoding: str = "utf-8") -> Table:
    """Decode uploaded bytes and parse them into a Table"""
    try:
        content = data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning("Failed to decode upload as %s: %s", encoding, e)
        raise ReadFailure() from e
    return parse_table(content.lstrip("\ufeff"))
