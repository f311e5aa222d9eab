"""
Colors, fonts, fills, borders and alignments for the Excel reports.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
NAVY = "1F3A5F"
SLATE = "4A6FA5"
PALE_BLUE = "EAF1FB"
STRIPE = "F6F8FA"
WHITE = "FFFFFF"
BLACK = "000000"
GRAY = "6B7280"
GREEN = "2E7D32"
RED = "C62828"
TOTAL_BG = "DCE6F2"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=20, bold=True, color=NAVY)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=GRAY)
SECTION_FONT = Font(name="Calibri", size=13, bold=True, color=SLATE)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
NEGATIVE_FONT = Font(name="Calibri", size=10, color=RED)
TOTAL_FONT = Font(name="Calibri", size=10, bold=True, color=BLACK)
KPI_VALUE_FONT = Font(name="Calibri", size=22, bold=True, color=NAVY)
KPI_NEGATIVE_FONT = Font(name="Calibri", size=22, bold=True, color=RED)
KPI_LABEL_FONT = Font(name="Calibri", size=9, color=GRAY)

# ---------------------------------------------------------------------------
# Fills / borders / alignment
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=NAVY, end_color=NAVY, fill_type="solid")
STRIPE_FILL = PatternFill(start_color=STRIPE, end_color=STRIPE, fill_type="solid")
TOTAL_FILL = PatternFill(start_color=TOTAL_BG, end_color=TOTAL_BG, fill_type="solid")
KPI_FILL = PatternFill(start_color=PALE_BLUE, end_color=PALE_BLUE, fill_type="solid")

_thin = Side(style="thin", color="D0D7DE")
THIN_BORDER = Border(left=_thin, right=_thin, top=_thin, bottom=_thin)
TOTAL_BORDER = Border(left=_thin, right=_thin, top=Side(style="medium", color=SLATE), bottom=_thin)

CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")

# ---------------------------------------------------------------------------
# Number formats by column type
# ---------------------------------------------------------------------------
NUMBER_FORMATS = {
    "currency": '#,##0.00;[Red]-#,##0.00',
    "number": "#,##0",
    "percent": '0.0"%"',
    "date": "yyyy-mm-dd",
}
NUMERIC_TYPES = ("currency", "number", "percent")
