"""
Centralized configuration and constants for the flash card maker.

Sheet geometry is fixed: A4 portrait, 5 mm margins and a 4x4 card grid.
Only rendering details (font, borders, title) can be changed through
CardOptions.
"""

from typing import FrozenSet, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm


# Input format
DELIMITER = '|'
FIELDS_PER_LINE = 2

# Page size in points (portrait), A4 is 210 x 297 mm
PAGE_SIZE: Tuple[float, float] = A4
PAGE_WIDTH, PAGE_HEIGHT = PAGE_SIZE

# Grid layout
GRID_COLS = 4
GRID_ROWS = 4
CARDS_PER_PAGE = GRID_COLS * GRID_ROWS

# Card geometry in points
MARGIN = 5 * mm
CARD_WIDTH = (PAGE_WIDTH - 2 * MARGIN) / GRID_COLS     # 50 mm
CARD_HEIGHT = (PAGE_HEIGHT - 2 * MARGIN) / GRID_ROWS   # 71.75 mm
CARD_PADDING = 3 * mm           # Clear space kept between text and card edge

# Text rendering
TEXT_ROTATION = -90             # Degrees, reportlab rotates counter-clockwise
DEFAULT_FONT_NAME = 'Helvetica'
DEFAULT_FONT_SIZE = 12
MIN_FONT_SIZE = 4
MAX_FONT_SIZE = 36
LINE_SPACING = 1.2              # Leading as a multiple of the font size
BORDER_WIDTH = 0.5
BORDER_GRAY = 0.6

DEFAULT_TITLE = 'Flash Cards'
CREATOR = 'flashcard-maker'

# The 14 fonts every PDF viewer must provide
STANDARD_FONTS: FrozenSet[str] = frozenset({
    'Courier', 'Courier-Bold', 'Courier-Oblique', 'Courier-BoldOblique',
    'Helvetica', 'Helvetica-Bold', 'Helvetica-Oblique', 'Helvetica-BoldOblique',
    'Times-Roman', 'Times-Bold', 'Times-Italic', 'Times-BoldItalic',
    'Symbol', 'ZapfDingbats',
})
