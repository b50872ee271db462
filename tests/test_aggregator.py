import random

import pytest

from timesheet_summary.aggregator import aggregate, clock_times, day_columns
from timesheet_summary.models import MonthYear

JAN_2026 = MonthYear(1, 2026)
HEADER = ["No", "Full Name", "1", "2", "5", "6", "7", "8"]
ROW = ["2", "สมชาย ใจดี", "", "ลากิจครึ่งวันเช้า", "ลาป่วยทั้งวัน", "ขาดงาน", "WFH", "1ก"]


def _agg(cfg, row=ROW, header=HEADER, days=(2, 5, 6, 7, 8, 9), **kw):
    kw.setdefault("era_offset", cfg.dates.era_offset)
    return aggregate(list(row), header, list(days), JAN_2026, cfg.leave, cfg.times, **kw)


def test_day_columns_only_plain_day_numbers():
    header = ["No", "Name", "1", " 2 ", "0", "32", "1a", "05", "2"]
    assert day_columns(header) == {1: 2, 2: 3, 5: 7}


def test_counters_and_remarks(cfg, low_rng):
    agg = _agg(cfg, rng=low_rng)
    c = agg.counters
    assert c.personal == 1.5        # half day + full day
    assert c.sick == 1.0
    assert c.absent == 1.0
    assert c.present == 2.5         # day 7 (WFH), day 9, other half of day 2
    assert c.total == 6

    remarks = [r.remark for r in agg.rows]
    assert remarks == ["ลากิจครึ่งวันเช้า", "ลาป่วยทั้งวัน", "ขาดงาน", "WFH", "ลากิจทั้งวัน", ""]


def test_sick_cell_on_day_five(cfg, low_rng):
    agg = _agg(cfg, days=[5], rng=low_rng)
    assert agg.rows[0].remark == "ลาป่วยทั้งวัน"
    assert agg.counters.sick == 1
    assert agg.counters.present == 0


def test_dates_use_buddhist_year(cfg, low_rng):
    agg = _agg(cfg, rng=low_rng)
    assert [r.date for r in agg.rows][:2] == ["2/1/2569", "5/1/2569"]


def test_day_records_cover_every_filled_day_column(cfg, low_rng):
    # day 1 is blank; 2..8 are filled whether or not they are working days
    agg = _agg(cfg, days=[2], rng=low_rng)
    assert [(d.day, d.code) for d in agg.days] == [
        (2, "PL-AM"), (5, "SL"), (6, "AB"), (7, "WFH"), (8, "PL"),
    ]


def test_synthetic_times(cfg, low_rng):
    rows = _agg(cfg, rng=low_rng).rows
    times = [(r.time_in, r.time_out) for r in rows]
    assert times == [
        ("12:00", "16:30"),   # morning off
        ("", ""),             # sick, full day
        ("", ""),             # absent
        ("07:00", "16:30"),   # passthrough counts as present
        ("", ""),             # personal, full day
        ("07:00", "16:30"),   # plain present
    ]


def test_afternoon_half_day(cfg, low_rng):
    assert clock_times("SL-PM", cfg.leave, cfg.times, low_rng) == ("07:00", "12:00")
    assert clock_times("PL-AM", cfg.leave, cfg.times, low_rng) == ("12:00", "16:30")


def test_times_disabled(cfg):
    rows = _agg(cfg, generate_times=False).rows
    assert all(r.time_in == "" and r.time_out == "" for r in rows)


def test_random_start_stays_in_band(cfg):
    rng = random.Random(7)
    seen = set()
    for _ in range(500):
        t_in, _out = clock_times(None, cfg.leave, cfg.times, rng)
        hh, mm = map(int, t_in.split(":"))
        minutes = hh * 60 + mm
        assert 7 * 60 <= minutes <= 8 * 60 + 30
        seen.add(minutes)
    assert len(seen) > 60


def test_seeded_runs_repeat(cfg):
    a = _agg(cfg, rng=random.Random(42)).rows
    b = _agg(cfg, rng=random.Random(42)).rows
    assert a == b


@pytest.mark.parametrize("row", [
    ["2", "สมชาย ใจดี"],                 # short row: every day column missing
    ["2", "สมชาย ใจดี", "", "", ""],
])
def test_missing_cells_count_as_present(cfg, low_rng, row):
    agg = _agg(cfg, row=row, rng=low_rng)
    assert agg.counters.present == 6
    assert agg.days == []


def test_header_without_day_columns(cfg, low_rng):
    agg = _agg(cfg, header=["No", "Full Name"], rng=low_rng)
    assert agg.counters.present == 6


def test_unknown_cell_warns_once_and_remark_is_trimmed(cfg, low_rng, caplog):
    row = ["2", "สมชาย ใจดี", "", "  WFH  "]
    with caplog.at_level("WARNING", logger="timesheet_summary.leave_codes"):
        agg = _agg(cfg, row=row, days=[2], rng=low_rng)
    warnings = [r for r in caplog.records if r.name == "timesheet_summary.leave_codes"]
    assert len(warnings) == 1
    assert agg.rows[0].remark == "WFH"
    assert agg.counters.present == 1
