# timesheet_summary/cli.py
from __future__ import annotations

import argparse
import logging
import random
from typing import Optional

from .config_loader import load_config, load_holidays
from .engine import TimesheetEngine
from .errors import catch_all
from .generators.timesheet_excel import generate_timesheet
from .ui import banner, input_prompt, panel, show_sheet, show_summary


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tssum",
        description="Build a printable monthly timesheet from an attendance CSV export.",
    )
    p.add_argument("csv", help="attendance export (.csv, UTF-8)")
    p.add_argument("--first-name", "-f", default=None, help="employee first name")
    p.add_argument("--last-name", "-l", default=None, help="employee last name")
    p.add_argument("--id", dest="identifier", default="", help="employee identifier printed on the sheet")
    p.add_argument("--holidays", default=None, help="holiday table JSON (default: packaged Thai table)")
    p.add_argument("--no-times", action="store_true", help="leave clock-in/out columns blank")
    p.add_argument("--seed", type=int, default=None, help="seed for generated clock-in times")
    p.add_argument("--out", default="generated_timesheets", help="output folder for the .xlsx")
    p.add_argument("--no-excel", action="store_true", help="only print the summary")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return p


def _ask_name(value: Optional[str], label: str) -> str:
    if value is not None:
        return value
    return input_prompt(label)


# ------------------------------ main ------------------------------------------

@catch_all(flow="CLI", on_cancel="exit")   # Ctrl-C exits cleanly
def main(argv: Optional[list] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    banner(args.csv)

    first = _ask_name(args.first_name, "ชื่อ")
    last = _ask_name(args.last_name, "นามสกุล")

    engine = TimesheetEngine(load_config(), load_holidays(args.holidays))
    result = engine.run_file(
        args.csv,
        first,
        last,
        args.identifier,
        generate_times=not args.no_times,
        rng=random.Random(args.seed),
    )

    show_summary(result.summary)
    show_sheet(result.sheet)

    if not args.no_excel:
        path = generate_timesheet(result.sheet, args.out)
        panel(f"✅ Saved -> {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
