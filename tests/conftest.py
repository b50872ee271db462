import random

import pytest

from timesheet_summary.config_loader import load_config, load_holidays
from timesheet_summary.engine import TimesheetEngine


SAMPLE_CSV = "\n".join([
    ",,,January (2026),,,,",
    "No,Full Name,1,2,5,6,7,8",
    "1,สมหญิง รักดี,,,,,,",
    "2,สมชาย   ใจดี,,ลากิจครึ่งวันเช้า,ลาป่วยทั้งวัน,ขาดงาน,WFH,1ก",
    "",
])


class LowRandom:
    """Always the earliest minute of the band."""

    def randint(self, a, b):
        return a


@pytest.fixture
def cfg():
    return load_config()


@pytest.fixture
def holidays():
    return load_holidays()


@pytest.fixture
def engine(cfg, holidays):
    return TimesheetEngine(cfg, holidays)


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def low_rng():
    return LowRandom()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def sample_file(tmp_path, sample_csv):
    p = tmp_path / "attendance.csv"
    p.write_text(sample_csv, encoding="utf-8")
    return p
