# timesheet_summary/workdays.py
from __future__ import annotations

import logging
from calendar import monthrange
from datetime import date
from typing import List

from .models import HolidayTable

log = logging.getLogger("timesheet_summary.workdays")


def holidays_for(table: HolidayTable, year: int, month: int) -> frozenset:
    months = table.get(year)
    if months is None:
        log.warning("no holiday list for %s; assuming none", year)
        return frozenset()
    return frozenset(months.get(month, ()))


def working_days(year: int, month: int, table: HolidayTable) -> List[int]:
    """
    Days of the month that are Mon-Fri and not holidays, ascending.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")

    _, days_in_month = monthrange(year, month)
    off = holidays_for(table, year, month)

    return [
        d for d in range(1, days_in_month + 1)
        if date(year, month, d).weekday() < 5 and d not in off
    ]
