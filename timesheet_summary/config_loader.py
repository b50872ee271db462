# timesheet_summary/config_loader.py
from dataclasses import dataclass
from pathlib import Path
import re
import json
import yaml
from typing import Optional

from .models import HolidayTable

# ──────────────────────────────────────────────────────────────────────────────
# Dataclasses for structured config
# ──────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DatesCfg:
    months: dict          # "January" -> 1, aliases folded in lowercase
    thai_months: tuple    # index 0 -> January
    era_offset: int

@dataclass(frozen=True)
class LeaveRule:
    code: str
    patterns: tuple       # compiled re.Pattern objects

    def matches(self, text: str) -> bool:
        return any(p.search(text) for p in self.patterns)

@dataclass(frozen=True)
class LeaveWeight:
    counter: str          # personal | sick | absent
    weight: float
    period: str           # full | morning | afternoon

@dataclass(frozen=True)
class LeaveCfg:
    rules: tuple          # ordered LeaveRule
    labels: dict
    counters: dict        # code -> LeaveWeight

@dataclass(frozen=True)
class ColumnsCfg:
    name_regex: re.Pattern

@dataclass(frozen=True)
class TimesCfg:
    band_start: int       # minutes after midnight
    band_end: int
    midday: str
    evening: str

@dataclass(frozen=True)
class AppCfg:
    dates: DatesCfg
    columns: ColumnsCfg
    leave: LeaveCfg
    times: TimesCfg


# Singletons (memoized after first load)
_cfg: Optional[AppCfg] = None
_holidays: Optional[HolidayTable] = None

_COUNTERS = ("personal", "sick", "absent")
_PERIODS = ("full", "morning", "afternoon")


# ──────────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────────

def _config_dir() -> Path:
    # The config/ folder lives inside the package: timesheet_summary/config/
    return Path(__file__).parent / "config"

def _require_keys(data: dict, keys: list[str], root_label: str = "config") -> None:
    missing = [k for k in keys if k not in data]
    if missing:
        raise KeyError(f"Missing keys in {root_label}: {missing}")

def parse_hhmm(value: str) -> int:
    """'07:30' -> 450"""
    m = re.fullmatch(r"\s*(\d{1,2}):(\d{2})\s*", str(value))
    if not m:
        raise ValueError(f"Expected HH:MM, got {value!r}")
    hh, mm = int(m.group(1)), int(m.group(2))
    if hh > 23 or mm > 59:
        raise ValueError(f"Time out of range: {value!r}")
    return hh * 60 + mm

def format_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


# ──────────────────────────────────────────────────────────────────────────────
# Builders (also used by tests to construct configs from plain dicts)
# ──────────────────────────────────────────────────────────────────────────────

def build_config(data: dict) -> AppCfg:
    """
    Validate a raw config mapping (as read from app_config.yaml) and build
    the frozen config objects.
    """
    _require_keys(data, ["dates", "columns", "leave_types", "times"], "app_config.yaml")
    _require_keys(data["dates"], ["months", "thai_months"], "dates")
    _require_keys(data["columns"], ["name_pattern"], "columns")
    _require_keys(data["leave_types"], ["rules", "labels", "counters"], "leave_types")
    _require_keys(data["times"], ["band_start", "band_end", "midday", "evening"], "times")

    # Month vocabulary: canonical names plus aliases, keyed lowercase
    months = {name.lower(): int(num) for name, num in data["dates"]["months"].items()}
    for alias, canon in (data["dates"].get("month_aliases") or {}).items():
        if canon.lower() not in months:
            raise KeyError(f"month_aliases: unknown month {canon!r} for alias {alias!r}")
        months[alias.lower()] = months[canon.lower()]

    thai_months = tuple(data["dates"]["thai_months"])
    if len(thai_months) != 12:
        raise ValueError("dates.thai_months must list 12 names")

    dates_cfg = DatesCfg(
        months=months,
        thai_months=thai_months,
        era_offset=int(data["dates"].get("buddhist_era_offset", 543)),
    )

    columns_cfg = ColumnsCfg(
        name_regex=re.compile(data["columns"]["name_pattern"], flags=re.I),
    )

    # Leave rules keep YAML order; first hit wins
    rules = []
    for i, raw in enumerate(data["leave_types"]["rules"]):
        _require_keys(raw, ["code", "patterns"], f"leave_types.rules[{i}]")
        rules.append(LeaveRule(
            code=str(raw["code"]),
            patterns=tuple(re.compile(p, flags=re.I) for p in raw["patterns"]),
        ))

    counters = {}
    for code, raw in data["leave_types"]["counters"].items():
        _require_keys(raw, ["counter", "weight", "period"], f"leave_types.counters.{code}")
        if raw["counter"] not in _COUNTERS:
            raise ValueError(f"leave_types.counters.{code}: unknown counter {raw['counter']!r}")
        if raw["period"] not in _PERIODS:
            raise ValueError(f"leave_types.counters.{code}: unknown period {raw['period']!r}")
        counters[str(code)] = LeaveWeight(
            counter=raw["counter"],
            weight=float(raw["weight"]),
            period=raw["period"],
        )

    undeclared = [r.code for r in rules if r.code not in counters]
    if undeclared:
        raise KeyError(f"leave_types.counters missing codes: {undeclared}")

    leave_cfg = LeaveCfg(
        rules=tuple(rules),
        labels=dict(data["leave_types"]["labels"]),
        counters=counters,
    )

    t = data["times"]
    times_cfg = TimesCfg(
        band_start=parse_hhmm(t["band_start"]),
        band_end=parse_hhmm(t["band_end"]),
        midday=format_hhmm(parse_hhmm(t["midday"])),
        evening=format_hhmm(parse_hhmm(t["evening"])),
    )
    if times_cfg.band_end < times_cfg.band_start:
        raise ValueError("times.band_end is before times.band_start")

    return AppCfg(
        dates=dates_cfg,
        columns=columns_cfg,
        leave=leave_cfg,
        times=times_cfg,
    )


def build_holidays(data: dict) -> HolidayTable:
    """
    {"2026": {"1": [1]}} -> {2026: {1: frozenset({1})}}
    """
    table: HolidayTable = {}
    for year, months in data.items():
        table[int(year)] = {
            int(month): frozenset(int(d) for d in days)
            for month, days in months.items()
        }
    return table


# ──────────────────────────────────────────────────────────────────────────────
# Public API
# ──────────────────────────────────────────────────────────────────────────────

def load_config() -> AppCfg:
    """
    Load and cache the app configuration from config/app_config.yaml.
    """
    global _cfg
    if _cfg:
        return _cfg

    cfg_path = _config_dir() / "app_config.yaml"
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    _cfg = build_config(data)
    return _cfg


def load_holidays(path: Optional[str | Path] = None) -> HolidayTable:
    """
    Load the holiday table. Without a path, the packaged
    config/holidays_th.json is loaded once and cached.
    """
    global _holidays
    if path is not None:
        return build_holidays(json.loads(Path(path).read_text(encoding="utf-8")))

    if _holidays is not None:
        return _holidays

    json_path = _config_dir() / "holidays_th.json"
    _holidays = build_holidays(json.loads(json_path.read_text(encoding="utf-8")))
    return _holidays
