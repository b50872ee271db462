# timesheet_summary/row_matcher.py
from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from .errors import AmbiguousMatch, MissingSearchName
from .models import CsvRow

log = logging.getLogger("timesheet_summary.row_matcher")

DEFAULT_NAME_PATTERN = re.compile(r"full\s*name|name|ชื่อ", flags=re.I)


def collapse_ws(text: str) -> str:
    return re.sub(r"\s+", " ", text or "").strip()


def full_name(first: str, last: str) -> str:
    return " ".join(p for p in ((first or "").strip(), (last or "").strip()) if p)


def name_column(header: CsvRow, pattern: re.Pattern = DEFAULT_NAME_PATTERN) -> int:
    """First header cell that looks like a name column, else 0."""
    for idx, cell in enumerate(header):
        if pattern.search(cell or ""):
            return idx
    return 0


def find_row(
    header: CsvRow,
    rows: Sequence[CsvRow],
    target: str,
    pattern: re.Pattern = DEFAULT_NAME_PATTERN,
) -> Optional[int]:
    """
    1-based index of the data row whose name cell matches `target`.

    An exact match (after whitespace collapsing) anywhere wins over
    substring hits. A substring hit is accepted only when it is unique.
    """
    wanted = collapse_ws(target)
    if not wanted:
        raise MissingSearchName()

    col = name_column(header, pattern)
    cells = [collapse_ws(r[col]) if col < len(r) else "" for r in rows]

    for i, cell in enumerate(cells, start=1):
        if cell == wanted:
            log.debug("exact match for %r at row %d", wanted, i)
            return i

    partial = [i for i, cell in enumerate(cells, start=1) if wanted in cell]
    if len(partial) > 1:
        raise AmbiguousMatch(wanted, partial)
    if partial:
        log.debug("substring match for %r at row %d", wanted, partial[0])
        return partial[0]
    return None
