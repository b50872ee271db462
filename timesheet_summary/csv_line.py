# timesheet_summary/csv_line.py
from __future__ import annotations

import re
from typing import List, Tuple

from .models import CsvRow


def parse_csv_line(line: str) -> CsvRow:
    """
    Split one line into trimmed fields.

    A field whose first non-blank character is '"' runs to the next '"'
    (there is no escaped quote); whatever follows the closing quote up to the
    next comma is dropped. An unclosed quote takes the rest of the line.
    """
    if not line.strip():
        return []

    fields: List[str] = []
    i, n = 0, len(line)
    while True:
        j = i
        while j < n and line[j] in " \t":
            j += 1

        if j < n and line[j] == '"':
            close = line.find('"', j + 1)
            if close == -1:
                fields.append(line[j + 1:].strip())
                return fields
            fields.append(line[j + 1:close].strip())
            comma = line.find(",", close + 1)
        else:
            comma = line.find(",", i)
            fields.append((line[i:] if comma == -1 else line[i:comma]).strip())

        if comma == -1:
            return fields
        i = comma + 1


def split_lines(text: str) -> List[str]:
    """Non-blank lines of a document, any newline style."""
    return [ln for ln in re.split(r"\r\n|\r|\n", text) if ln.strip()]


def parse_document(text: str) -> Tuple[str, List[CsvRow]]:
    """
    -> (title line, parsed rows after the title)
    The title line is returned raw; it is free text, not a table row.
    """
    lines = split_lines(text)
    if not lines:
        return "", []
    return lines[0], [parse_csv_line(ln) for ln in lines[1:]]
