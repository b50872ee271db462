# timesheet_summary/leave_codes.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config_loader import LeaveRule

log = logging.getLogger("timesheet_summary.leave_codes")


def normalize_leave(raw: Optional[str], rules: Sequence[LeaveRule]) -> Optional[str]:
    """
    Classify one attendance cell.

    Returns None for a blank cell (the day counts as present), the code of
    the first rule that matches, or the raw text unchanged when nothing does.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None

    for rule in rules:
        if rule.matches(text):
            return rule.code

    log.warning("unrecognized leave text %r; kept as-is", raw)
    return raw


def leave_label(code: str, labels: dict) -> str:
    """Remark text for a code; the code itself when no label is configured."""
    return labels.get(code) or code
