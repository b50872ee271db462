# timesheet_summary/month_year.py
from __future__ import annotations

import logging
import re
from typing import Dict, Optional

from .models import MonthYear

log = logging.getLogger("timesheet_summary.month_year")

# "2026" or "( 2026 )" right after the month name
_YEAR_AFTER = re.compile(r"\s*(?:\(\s*(\d{4})\s*\)|(\d{4}))(?!\d)")


def _month_regex(months: Dict[str, int]) -> re.Pattern:
    # longest first so an alias never loses to a shorter prefix
    names = sorted(months, key=len, reverse=True)
    alt = "|".join(map(re.escape, names))
    return re.compile(rf"(?<![A-Za-z])({alt})(?![A-Za-z])", flags=re.I)


class MonthYearDetector:
    """Finds 'January 2026' / 'January (2026)' in a free-text title line."""

    def __init__(self, months: Dict[str, int]):
        self.months = {k.lower(): v for k, v in months.items()}
        self._rx = _month_regex(self.months)

    def detect(self, title: str) -> Optional[MonthYear]:
        m = self._rx.search(title or "")
        if not m:
            log.debug("no month name in title %r", title)
            return None

        y = _YEAR_AFTER.match(title, m.end())
        if not y:
            log.debug("month %r found without a year in %r", m.group(1), title)
            return None

        year = int(y.group(1) or y.group(2))
        if year < 1:
            log.debug("year %d is not a calendar year in %r", year, title)
            return None
        return MonthYear(month=self.months[m.group(1).lower()], year=year)
