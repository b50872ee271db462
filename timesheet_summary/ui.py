# timesheet_summary/ui.py
from __future__ import annotations
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.prompt import Prompt
from rich.text import Text
from rich.box import ROUNDED

from .models import PrintSheet, RunSummary


console = Console()

# Default border color for our panels
BORDER = "bright_blue"


# ── Top banner ──────────────────────────────────────────────────────────────────
def banner(subtitle_line: str) -> None:
    """Show the welcome banner."""
    title = Text("Monthly Timesheet Summary", style="bold cyan")
    subtitle = Text(subtitle_line, style="dim")
    body = Text("Attendance CSV -> printable monthly timesheet.", style="white")
    console.print(
        Panel(
            body,
            title=title,
            subtitle=subtitle,
            box=ROUNDED,
            border_style=BORDER,
            expand=True,
        )
    )


# ── Message panels ──────────────────────────────────────────────────────────────
def panel(msg: str) -> None:
    """Pretty-print a single message in a colored box based on its emoji/severity."""
    style = "white"
    if msg.startswith(("✅", "🟢")):
        style = "green"
    elif msg.startswith(("⚠️", "❗")):
        style = "yellow"
    elif msg.startswith(("❌", "⛔")):
        style = "red"
    elif msg.startswith(("📊", "💾", "📁")) or "Saved ->" in msg:
        style = "cyan"
    console.print(Panel(msg, border_style=style, box=ROUNDED))


def input_prompt(prompt_text: str = "›") -> str:
    """Unified input prompt (styled)."""
    return Prompt.ask(f"[bold cyan]{prompt_text}[/]")


# ── Results ─────────────────────────────────────────────────────────────────────
def summary_lines(summary: RunSummary) -> list[str]:
    days = ", ".join(str(d) for d in summary.working_days) or "—"
    return [
        f"Month/Year: {summary.label}",
        f"Matched row: {summary.row_index}",
        f"Working days: {days}",
        f"Working day count: {summary.working_day_count}",
    ]


def show_summary(summary: RunSummary) -> None:
    console.print(
        Panel("\n".join(summary_lines(summary)), title="📊 Summary", border_style="cyan", box=ROUNDED)
    )


def show_sheet(sheet: PrintSheet) -> None:
    """Preview of the print-ready timesheet."""
    table = Table(box=ROUNDED, border_style=BORDER, expand=False)
    table.add_column("วันที่", justify="right")
    table.add_column("เวลามา", justify="center")
    table.add_column("เวลากลับ", justify="center")
    table.add_column("หมายเหตุ")
    for row in sheet.rows:
        remark = Text(row.remark, style="red") if row.remark else Text("")
        table.add_row(row.date, row.time_in, row.time_out, remark)

    heading = f"{sheet.full_name}  ·  {sheet.month_label}"
    if sheet.identifier:
        heading += f"  ·  {sheet.identifier}"
    console.print(Panel.fit(table, title=heading, border_style=BORDER, box=ROUNDED))

    t = sheet.totals
    console.print(
        f"[green]มาทำงาน {t['present']}[/]   "
        f"[blue]ลากิจ {t['personal']}[/]   "
        f"[magenta]ลาป่วย {t['sick']}[/]   "
        f"[red]ขาดงาน {t['absent']}[/]"
    )
