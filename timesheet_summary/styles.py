# timesheet_summary/styles.py
from openpyxl.styles import Alignment, PatternFill, Font, Border, Side

# Borders
thin_border = Border(left=Side(style="thin"), right=Side(style="thin"),
                     top=Side(style="thin"), bottom=Side(style="thin"))

# Fills
header_fill      = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")  # Light Blue (table header)
light_red_fill   = PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid")  # Light Red (leave remarks)
light_green_fill = PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid")  # Light Green (totals)

# Fonts (Thai glyphs need a font that carries them)
FONT_NAME  = "TH Sarabun New"
base_font  = Font(name=FONT_NAME, size=14)
bold_font  = Font(name=FONT_NAME, size=14, bold=True)
title_font = Font(name=FONT_NAME, size=18, bold=True)
red_font   = Font(name=FONT_NAME, size=14, color="FF0000")

# Alignments
center_alignment = Alignment(horizontal="center", vertical="center")
left_alignment   = Alignment(horizontal="left",   vertical="center")
right_alignment  = Alignment(horizontal="right",  vertical="center")
