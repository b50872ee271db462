# timesheet_summary/engine.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from .aggregator import RandomSource, aggregate
from .config_loader import AppCfg, load_config, load_holidays
from .csv_line import parse_document
from .errors import (
    DecodeFailed, EmptyInput, MonthYearNotFound, NoDataRows, NoMatchingRow,
    NotCsvFile,
)
from .models import HolidayTable, PrintSheet, RunSummary, TimesheetResult
from .month_year import MonthYearDetector
from .row_matcher import collapse_ws, find_row, full_name
from .workdays import working_days

log = logging.getLogger("timesheet_summary.engine")


# ---------- input boundary ----------

def decode_csv_bytes(data: bytes) -> str:
    """Strict UTF-8; a leading BOM is dropped."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        log.debug("decode failed: %s", e)
        raise DecodeFailed() from e


def read_csv_file(path: str | Path) -> str:
    p = Path(path)
    if not p.name.lower().endswith(".csv"):
        raise NotCsvFile()
    return decode_csv_bytes(p.read_bytes())


# ---------- Engine ----------
class TimesheetEngine:
    """Attendance CSV -> monthly timesheet. Tables are injected; nothing is kept between runs."""

    def __init__(self, cfg: Optional[AppCfg] = None, holidays: Optional[HolidayTable] = None):
        self.cfg = cfg or load_config()
        self.holidays = holidays if holidays is not None else load_holidays()
        self.detector = MonthYearDetector(self.cfg.dates.months)

    def run(
        self,
        text: str,
        first_name: str,
        last_name: str,
        identifier: str = "",
        *,
        generate_times: bool = True,
        rng: Optional[RandomSource] = None,
    ) -> TimesheetResult:
        title, rows = parse_document(text or "")
        if not title:
            raise EmptyInput()

        month_year = self.detector.detect(title)
        if month_year is None:
            raise MonthYearNotFound()
        log.info("detected %s", month_year.label)

        # rows[0] is the header; everything after it is data
        if len(rows) < 2:
            raise NoDataRows()
        header, data = rows[0], rows[1:]

        target = full_name(first_name, last_name)
        row_index = find_row(header, data, target, self.cfg.columns.name_regex)
        if row_index is None:
            raise NoMatchingRow(collapse_ws(target))
        log.info("matched %r at data row %d", target, row_index)

        days = working_days(month_year.year, month_year.month, self.holidays)

        agg = aggregate(
            data[row_index - 1],
            header,
            days,
            month_year,
            self.cfg.leave,
            self.cfg.times,
            generate_times=generate_times,
            rng=rng,
            era_offset=self.cfg.dates.era_offset,
        )

        summary = RunSummary(
            month_year=month_year,
            row_index=row_index,
            working_days=days,
        )
        sheet = PrintSheet(
            month_label=month_year.thai_label(self.cfg.dates.thai_months, self.cfg.dates.era_offset),
            full_name=collapse_ws(target),
            identifier=(identifier or "").strip(),
            rows=agg.rows,
            counters=agg.counters,
            days=agg.days,
        )
        return TimesheetResult(summary=summary, sheet=sheet)

    def run_file(self, path: str | Path, first_name: str, last_name: str, identifier: str = "", **kwargs) -> TimesheetResult:
        return self.run(read_csv_file(path), first_name, last_name, identifier, **kwargs)
