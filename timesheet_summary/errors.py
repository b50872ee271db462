# timesheet_summary/errors.py
from __future__ import annotations

import os
import sys
import traceback
from functools import wraps
from datetime import datetime
from typing import Sequence

from .ui import panel

LOG_DIR = os.path.join(os.path.expanduser("~"), ".tssum")
LOG_PATH = os.path.join(LOG_DIR, "tssum_errors.log")


# ── Error taxonomy ─────────────────────────────────────────────────────────────
# Every one of these ends the run; the message is shown to the user as-is.

class TimesheetError(Exception):
    message = "เกิดข้อผิดพลาด"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        return str(self)


class NotCsvFile(TimesheetError):
    message = "กรุณาเลือกเฉพาะไฟล์ CSV (.csv)"


class DecodeFailed(TimesheetError):
    message = "ไฟล์ต้องเป็น CSV ที่เข้ารหัส UTF-8 เท่านั้น"


class EmptyInput(TimesheetError):
    message = "ไฟล์ว่างเปล่า ไม่พบข้อมูล"


class MonthYearNotFound(TimesheetError):
    message = "ไม่พบเดือน/ปีในบรรทัดแรกของไฟล์ (เช่น January (2026))"


class NoDataRows(TimesheetError):
    message = "ไม่พบแถวข้อมูลในไฟล์"


class MissingSearchName(TimesheetError):
    message = "กรุณากรอกชื่อและนามสกุล"


class NoMatchingRow(TimesheetError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"ไม่พบชื่อ \"{name}\" ในไฟล์")


class AmbiguousMatch(TimesheetError):
    def __init__(self, name: str, rows: Sequence[int]):
        self.name = name
        self.rows = list(rows)
        listed = ", ".join(str(r) for r in self.rows)
        super().__init__(f"พบชื่อ \"{name}\" มากกว่าหนึ่งแถว (แถวที่ {listed}) กรุณาระบุชื่อให้ครบถ้วน")


# ── Top-level guard ────────────────────────────────────────────────────────────

def _log_error(e: BaseException) -> str:
    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"\n[{ts}] {type(e).__name__}: {e}\n")
            traceback.print_exc(file=f)
        return LOG_PATH
    except OSError:
        return ""


def catch_all(*, flow: str = "App", on_cancel: str = "exit"):
    """
    Decorator for the CLI entry point.
    - TimesheetError -> red panel with its message, returns 1.
    - Ctrl-C / EOF   -> Cancelled panel; "exit" leaves with 0, "stay" returns 1.
    - anything else  -> traceback appended to ~/.tssum/tssum_errors.log, returns 1.
    """
    assert on_cancel in ("stay", "exit")
    def _decorator(fn):
        @wraps(fn)
        def _wrapped(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except TimesheetError as e:
                panel(f"❌ {e.user_message}")
                return 1
            except (KeyboardInterrupt, EOFError):
                panel("↩️ Cancelled.")
                if on_cancel == "exit":
                    sys.exit(0)
                return 1
            except SystemExit:
                raise
            except Exception as e:
                path = _log_error(e)
                where = f" Details: {path}" if path else ""
                panel(f"⛔ {flow} failed: {type(e).__name__}: {e}.{where}")
                return 1
        return _wrapped
    return _decorator
