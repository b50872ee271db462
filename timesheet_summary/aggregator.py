# timesheet_summary/aggregator.py
from __future__ import annotations

import logging
import random
import re
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from .config_loader import LeaveCfg, TimesCfg, format_hhmm
from .leave_codes import leave_label, normalize_leave
from .models import (
    Aggregate, CsvRow, DayRecord, MonthYear, SummaryCounters, TimesheetRow,
)

log = logging.getLogger("timesheet_summary.aggregator")


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


# ---------- helpers ----------

def day_columns(header: CsvRow) -> Dict[int, int]:
    """{day_of_month: column_index} for header cells that are just 1..31."""
    cols: Dict[int, int] = {}
    for idx, cell in enumerate(header):
        label = (cell or "").strip()
        if not re.fullmatch(r"\d+", label):
            continue
        day = int(label)
        if 1 <= day <= 31 and day not in cols:
            cols[day] = idx
    return cols


def _cell(row: CsvRow, idx: Optional[int]) -> str:
    if idx is None or idx >= len(row):
        return ""
    return row[idx]


def _morning_start(times: TimesCfg, rng: RandomSource) -> str:
    return format_hhmm(rng.randint(times.band_start, times.band_end))


def clock_times(
    code: Optional[str],
    leave: LeaveCfg,
    times: TimesCfg,
    rng: RandomSource,
) -> Tuple[str, str]:
    """
    (time_in, time_out) for one working day.
    Full-day leave/absence is blank; a half day keeps the half that was worked.
    """
    weight = leave.counters.get(code) if code is not None else None
    if weight is None:
        return _morning_start(times, rng), times.evening
    if weight.period == "morning":
        return times.midday, times.evening
    if weight.period == "afternoon":
        return _morning_start(times, rng), times.midday
    return "", ""


# ---------- main ----------

def aggregate(
    row: CsvRow,
    header: CsvRow,
    workdays: Sequence[int],
    month_year: MonthYear,
    leave: LeaveCfg,
    times: TimesCfg,
    *,
    generate_times: bool = True,
    rng: Optional[RandomSource] = None,
    era_offset: int = 543,
) -> Aggregate:
    """
    Merge the working days with the matched row's leave cells into
    printable rows and the present/personal/sick/absent counters.
    """
    if generate_times and rng is None:
        rng = random.Random()

    cols = day_columns(header)
    if not cols:
        log.warning("header has no day-of-month columns; every working day is present")

    days: List[DayRecord] = []
    for day in sorted(cols):
        raw = _cell(row, cols[day])
        if raw.strip():
            days.append(DayRecord(day=day, code=normalize_leave(raw, leave.rules)))
    codes = {d.day: d.code for d in days}

    counters = SummaryCounters()
    rows: List[TimesheetRow] = []
    shown_year = month_year.year + era_offset

    for day in workdays:
        code = codes.get(day)
        weight = leave.counters.get(code) if code is not None else None

        if weight is None:
            counters.add("present", 1.0)
            remark = code.strip() if code else ""   # passthrough text, if any
        else:
            counters.add(weight.counter, weight.weight)
            if weight.weight < 1.0 and weight.counter != "absent":
                counters.add("present", 1.0 - weight.weight)
            remark = leave_label(code, leave.labels)

        if generate_times:
            time_in, time_out = clock_times(code, leave, times, rng)
        else:
            time_in, time_out = "", ""

        rows.append(TimesheetRow(
            date=f"{day}/{month_year.month}/{shown_year}",
            time_in=time_in,
            time_out=time_out,
            remark=remark,
        ))

    log.debug("aggregated %d working days: %s", len(rows), counters)
    return Aggregate(rows=rows, days=days, counters=counters)
