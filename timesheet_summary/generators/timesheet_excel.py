# timesheet_summary/generators/timesheet_excel.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from ..models import PrintSheet
from ..styles import (
    thin_border, header_fill, light_red_fill, light_green_fill,
    base_font, bold_font, title_font, red_font,
    center_alignment, left_alignment, right_alignment,
)

HEADERS = ["ลำดับ", "วันที่", "เวลามา", "เวลากลับ", "หมายเหตุ"]
TOTAL_LABELS = [
    ("present", "มาทำงาน (วัน)"),
    ("personal", "ลากิจ (วัน)"),
    ("sick", "ลาป่วย (วัน)"),
    ("absent", "ขาดงาน (วัน)"),
]

TABLE_HEADER_ROW = 6


# ---------- Helpers ----------

def _col_letter(idx: int) -> str:
    """1-based column index -> Excel column letter."""
    div, mod = divmod(idx - 1, 26)
    letter = chr(65 + mod)
    if div == 0:
        return letter
    return _col_letter(div) + letter


def default_filename(sheet: PrintSheet) -> str:
    stub = f"{sheet.month_label}_Timesheet_{sheet.full_name}"
    # keep Thai letters; drop characters that are unsafe in file names
    stub = re.sub(r'[\\/:*?"<>|]+', "", stub)
    return re.sub(r"\s+", "_", stub.strip()) + ".xlsx"


def _boxed(ws: Worksheet, row: int, first_col: int, last_col: int) -> None:
    for c in range(first_col, last_col + 1):
        ws.cell(row=row, column=c).border = thin_border


# ---------- Main generator ----------

def build_workbook(sheet: PrintSheet) -> Workbook:
    """
    Lays the print-ready timesheet out on one A4 portrait page:
    title, name/identifier block, one row per working day, totals, signatures.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Timesheet"
    last_col = len(HEADERS)
    last_letter = _col_letter(last_col)

    # ---------- Title ----------
    ws.merge_cells(f"A1:{last_letter}1")
    ws["A1"] = f"ใบลงเวลาปฏิบัติงาน ประจำเดือน {sheet.month_label}"
    ws["A1"].font = title_font
    ws["A1"].alignment = center_alignment

    # ---------- Person ----------
    ws.merge_cells(f"B3:{last_letter}3")
    ws.merge_cells(f"B4:{last_letter}4")
    ws["A3"], ws["B3"] = "ชื่อ-นามสกุล", sheet.full_name
    ws["A4"], ws["B4"] = "รหัสพนักงาน", sheet.identifier or "-"
    for r in (3, 4):
        ws[f"A{r}"].font = bold_font
        ws[f"B{r}"].font = base_font
        ws[f"A{r}"].alignment = left_alignment
        ws[f"B{r}"].alignment = left_alignment
        _boxed(ws, r, 1, last_col)

    # ---------- Table headers ----------
    for col_idx, hdr in enumerate(HEADERS, start=1):
        cell = ws.cell(row=TABLE_HEADER_ROW, column=col_idx, value=hdr)
        cell.font = bold_font
        cell.alignment = center_alignment
        cell.border = thin_border
        cell.fill = header_fill

    # ---------- Data rows ----------
    r = TABLE_HEADER_ROW + 1
    for sn, row in enumerate(sheet.rows, start=1):
        values = [sn, row.date, row.time_in, row.time_out, row.remark]
        for c_idx, val in enumerate(values, start=1):
            cell = ws.cell(row=r, column=c_idx, value=val)
            cell.font = base_font
            cell.border = thin_border
            cell.alignment = center_alignment

        rem_cell = ws.cell(row=r, column=last_col)
        rem_cell.alignment = left_alignment
        if row.remark:
            rem_cell.fill = light_red_fill
            rem_cell.font = red_font
        r += 1

    # ---------- Totals ----------
    r += 1
    totals = sheet.totals
    for key, label in TOTAL_LABELS:
        ws.merge_cells(start_row=r, start_column=1, end_row=r, end_column=2)
        ws.cell(row=r, column=1, value=label).font = bold_font
        ws.cell(row=r, column=1).alignment = left_alignment
        val = ws.cell(row=r, column=3, value=totals[key])
        val.font = base_font
        val.alignment = right_alignment
        val.fill = light_green_fill
        _boxed(ws, r, 1, 3)
        r += 1

    # ---------- Signature block ----------
    r += 1
    ws.merge_cells(start_row=r, start_column=3, end_row=r, end_column=last_col)
    ws.cell(row=r, column=3, value="ลงชื่อ ................................................ ผู้ปฏิบัติงาน")
    ws.merge_cells(start_row=r + 1, start_column=3, end_row=r + 1, end_column=last_col)
    ws.cell(row=r + 1, column=3, value=f"( {sheet.full_name} )")
    ws.merge_cells(start_row=r + 3, start_column=3, end_row=r + 3, end_column=last_col)
    ws.cell(row=r + 3, column=3, value="ลงชื่อ ................................................ ผู้บังคับบัญชา")
    for rr in (r, r + 1, r + 3):
        ws.cell(row=rr, column=3).font = base_font
        ws.cell(row=rr, column=3).alignment = center_alignment

    # Column widths
    ws.column_dimensions["A"].width = 8
    ws.column_dimensions["B"].width = 14
    ws.column_dimensions["C"].width = 12
    ws.column_dimensions["D"].width = 12
    ws.column_dimensions["E"].width = 30

    # ---------- Print setup ----------
    ws.page_setup.orientation = ws.ORIENTATION_PORTRAIT
    ws.page_setup.paperSize = ws.PAPERSIZE_A4
    ws.page_setup.fitToWidth = 1
    ws.page_setup.fitToHeight = 0
    ws.sheet_properties.pageSetUpPr.fitToPage = True
    ws.print_title_rows = f"{TABLE_HEADER_ROW}:{TABLE_HEADER_ROW}"
    ws.print_options.horizontalCentered = True

    return wb


def generate_timesheet(
    sheet: PrintSheet,
    out_dir: str | Path = "generated_timesheets",
    filename: Optional[str] = None,
) -> str:
    """
    Writes the workbook and returns the absolute path of the saved .xlsx.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / (filename or default_filename(sheet))

    wb = build_workbook(sheet)
    wb.save(str(out_path))
    return str(out_path.resolve())
