# timesheet_summary/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence

# year -> month -> days off
HolidayTable = Dict[int, Dict[int, FrozenSet[int]]]

CsvRow = List[str]

# ---------- canonical leave codes ----------
PERSONAL_FULL = "PL"
PERSONAL_MORNING = "PL-AM"
PERSONAL_AFTERNOON = "PL-PM"
SICK_FULL = "SL"
SICK_MORNING = "SL-AM"
SICK_AFTERNOON = "SL-PM"
ABSENT = "AB"

LEAVE_CODES = frozenset({
    PERSONAL_FULL, PERSONAL_MORNING, PERSONAL_AFTERNOON,
    SICK_FULL, SICK_MORNING, SICK_AFTERNOON,
    ABSENT,
})

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class MonthYear:
    month: int   # 1..12
    year: int    # AD

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")

    @property
    def label(self) -> str:
        return f"{_MONTH_NAMES[self.month - 1]} {self.year}"

    def thai_label(self, month_names: Sequence[str], era_offset: int = 543) -> str:
        """'มกราคม 2569' for January 2026."""
        return f"{month_names[self.month - 1]} {self.year + era_offset}"


@dataclass(frozen=True)
class DayRecord:
    day: int
    code: Optional[str]


@dataclass(frozen=True)
class TimesheetRow:
    date: str        # D/M/Y
    time_in: str = ""
    time_out: str = ""
    remark: str = ""


@dataclass
class SummaryCounters:
    present: float = 0.0
    personal: float = 0.0
    sick: float = 0.0
    absent: float = 0.0

    def add(self, counter: str, amount: float) -> None:
        setattr(self, counter, getattr(self, counter) + amount)

    @property
    def total(self) -> float:
        return self.present + self.personal + self.sick + self.absent

    def formatted(self) -> Dict[str, str]:
        return {
            "present": format_count(self.present),
            "personal": format_count(self.personal),
            "sick": format_count(self.sick),
            "absent": format_count(self.absent),
        }


def format_count(value: float) -> str:
    """3.0 -> '3', 2.5 -> '2.5'"""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


@dataclass
class Aggregate:
    rows: List[TimesheetRow]
    days: List[DayRecord]
    counters: SummaryCounters


# ---------- pipeline outputs ----------

@dataclass
class RunSummary:
    """Human-readable result of one run."""
    month_year: MonthYear
    row_index: int                 # 1-based among data rows
    working_days: List[int]

    @property
    def label(self) -> str:
        return self.month_year.label

    @property
    def working_day_count(self) -> int:
        return len(self.working_days)


@dataclass
class PrintSheet:
    """Print-ready structure consumed by the UI and the Excel generator."""
    month_label: str               # Thai month, Buddhist-era year
    full_name: str
    identifier: str
    rows: List[TimesheetRow]
    counters: SummaryCounters
    days: List[DayRecord] = field(default_factory=list)

    @property
    def totals(self) -> Dict[str, str]:
        return self.counters.formatted()


@dataclass
class TimesheetResult:
    summary: RunSummary
    sheet: PrintSheet
