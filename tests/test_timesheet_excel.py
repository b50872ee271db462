from pathlib import Path

from openpyxl import load_workbook

from timesheet_summary.generators.timesheet_excel import (
    HEADERS, TABLE_HEADER_ROW, build_workbook, default_filename, generate_timesheet,
)


def _sheet(engine, sample_csv, low_rng):
    return engine.run(sample_csv, "สมชาย", "ใจดี", "EMP-002", rng=low_rng).sheet


def test_generate_writes_workbook(tmp_path, engine, sample_csv, low_rng):
    sheet = _sheet(engine, sample_csv, low_rng)
    path = generate_timesheet(sheet, tmp_path)
    assert Path(path).exists()
    assert Path(path).suffix == ".xlsx"

    ws = load_workbook(path).active
    assert "มกราคม 2569" in ws["A1"].value
    assert ws["B3"].value == "สมชาย ใจดี"
    assert ws["B4"].value == "EMP-002"
    assert [c.value for c in ws[TABLE_HEADER_ROW]][:len(HEADERS)] == HEADERS

    first = TABLE_HEADER_ROW + 1
    assert ws.cell(row=first, column=1).value == 1
    assert ws.cell(row=first, column=2).value == "2/1/2569"
    assert ws.cell(row=first, column=3).value == "12:00"
    assert ws.cell(row=first, column=5).value == "ลากิจครึ่งวันเช้า"

    totals_row = first + len(sheet.rows) + 1
    assert ws.cell(row=totals_row, column=3).value == "17.5"
    assert ws.cell(row=totals_row + 2, column=3).value == "1"


def test_page_is_a4_portrait(engine, sample_csv, low_rng):
    ws = build_workbook(_sheet(engine, sample_csv, low_rng)).active
    assert ws.page_setup.orientation == "portrait"
    assert str(ws.page_setup.paperSize) == str(ws.PAPERSIZE_A4)
    assert ws.sheet_properties.pageSetUpPr.fitToPage


def test_default_filename(engine, sample_csv, low_rng):
    name = default_filename(_sheet(engine, sample_csv, low_rng))
    assert name == "มกราคม_2569_Timesheet_สมชาย_ใจดี.xlsx"


def test_explicit_filename(tmp_path, engine, sample_csv, low_rng):
    path = generate_timesheet(_sheet(engine, sample_csv, low_rng), tmp_path / "out", "x.xlsx")
    assert Path(path).name == "x.xlsx"
