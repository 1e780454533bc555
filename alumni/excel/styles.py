"""
Directory workbook look: palette, fonts, fills, borders, alignments.
"""
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
CAROLINA_BLUE = "4B9CD3"
NAVY = "13294B"
STRIPE = "EEF5FB"
GRID = "D0D7DE"
INK = "1F2328"
MUTED = "656D76"
LINK = "0969DA"
WHITE = "FFFFFF"


def _font(size: int, color: str = INK, **kw) -> Font:
    return Font(name="Calibri", size=size, color=color, **kw)


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _box(color: str, bottom: str = "thin") -> Border:
    side = Side(style="thin", color=color)
    return Border(left=side, right=side, top=side, bottom=Side(style=bottom, color=color))


# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = _font(22, NAVY, bold=True)
SUBTITLE_FONT = _font(11, MUTED, italic=True)
SECTION_FONT = _font(13, CAROLINA_BLUE, bold=True)
HEADER_FONT = _font(11, WHITE, bold=True)
DATA_FONT = _font(10)
LINK_FONT = _font(10, LINK, underline="single")
KPI_VALUE_FONT = _font(26, NAVY, bold=True)
KPI_LABEL_FONT = _font(9, MUTED)

# ---------------------------------------------------------------------------
# Fills and borders
# ---------------------------------------------------------------------------
HEADER_FILL = _solid(NAVY)
STRIPE_FILL = _solid(STRIPE)
CELL_BORDER = _box(GRID)
HEADER_BORDER = _box(NAVY, bottom="medium")

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="top")
WRAP = Alignment(horizontal="left", vertical="top", wrap_text=True)
