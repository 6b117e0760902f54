"""
PDF Service - Renders laid-out pages into a print-ready A4 document.

Pages are drawn with reportlab into memory, checked with pypdf, and only
then written to disk, so a failed run never leaves a half-written file.
"""

import io
from pathlib import Path
from typing import List, Sequence

from pypdf import PdfReader
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ..config import (
    PAGE_SIZE,
    PAGE_HEIGHT,
    MARGIN,
    CARD_WIDTH,
    CARD_HEIGHT,
    CARD_PADDING,
    TEXT_ROTATION,
    LINE_SPACING,
    BORDER_WIDTH,
    BORDER_GRAY,
    CREATOR,
)
from ..errors import OutputWriteError
from ..models import CardOptions, Page


class PdfService:
    """
    Service for rendering card pages to PDF.

    Card text is drawn rotated 90 degrees clockwise on both sides, so it
    runs along the card's long edge.
    """

    def __init__(self, options: CardOptions = None):
        self.options = options or CardOptions()

    @staticmethod
    def card_origin(row: int, col: int) -> tuple:
        """
        Bottom-left corner of a grid cell in PDF coordinates.

        Row 0 is the top band; the PDF origin is the bottom-left of the page.
        """
        x = MARGIN + col * CARD_WIDTH
        y = PAGE_HEIGHT - MARGIN - (row + 1) * CARD_HEIGHT
        return x, y

    def wrap_text(self, text: str) -> List[str]:
        """
        Break card text into lines that fit along the card's long edge.

        The font size is never changed; text that does not fit in the card
        simply runs over, which DeckValidator reports as a warning.
        """
        max_width = CARD_HEIGHT - 2 * CARD_PADDING
        lines = []
        for paragraph in text.split('\n'):
            lines.extend(simpleSplit(paragraph, self.options.font_name,
                                     self.options.font_size, max_width) or [''])
        return lines

    def max_lines(self) -> int:
        """How many wrapped lines fit across the card's short edge."""
        leading = self.options.font_size * LINE_SPACING
        return max(1, int((CARD_WIDTH - 2 * CARD_PADDING) // leading))

    def draw_card(self, c: canvas.Canvas, row: int, col: int, text: str):
        """Draw one card's border and its rotated, centred text."""
        x, y = self.card_origin(row, col)

        if self.options.draw_borders:
            c.setLineWidth(BORDER_WIDTH)
            c.setStrokeGray(BORDER_GRAY)
            c.rect(x, y, CARD_WIDTH, CARD_HEIGHT, stroke=1, fill=0)

        lines = self.wrap_text(text)
        font_size = self.options.font_size
        leading = font_size * LINE_SPACING

        c.saveState()
        c.translate(x + CARD_WIDTH / 2, y + CARD_HEIGHT / 2)
        c.rotate(TEXT_ROTATION)
        c.setFillGray(0)
        c.setFont(self.options.font_name, font_size)

        # Centre the block of lines; 0.35em drops the baseline to optical centre
        baseline = (len(lines) - 1) * leading / 2 - font_size * 0.35
        for line in lines:
            c.drawCentredString(0, baseline, line)
            baseline -= leading

        c.restoreState()

    def draw_page(self, c: canvas.Canvas, page: Page):
        """Draw every filled cell of a page and finish it."""
        for row, col, text in page.filled_slots():
            self.draw_card(c, row, col, text)
        c.showPage()

    def render(self, pages: Sequence[Page]) -> bytes:
        """
        Render pages to PDF bytes in the given order.

        Raises:
            OutputWriteError: If card text cannot be encoded for the font
        """
        buffer = io.BytesIO()
        c = canvas.Canvas(buffer, pagesize=PAGE_SIZE, invariant=1)
        c.setTitle(self.options.title)
        c.setCreator(CREATOR)

        try:
            for page in pages:
                self.draw_page(c, page)
            c.save()
        except UnicodeError as e:
            raise OutputWriteError(f"Failed to encode card text for {self.options.font_name}: {e}") from e

        return buffer.getvalue()

    @staticmethod
    def count_pages(data: bytes) -> int:
        """Read rendered PDF bytes back and count their pages."""
        return len(PdfReader(io.BytesIO(data)).pages)

    def write(self, pages: Sequence[Page], output_path: Path) -> Path:
        """
        Render pages and save them as a single PDF.

        Args:
            pages: Pages in print order (front, back, front, back, ...)
            output_path: Destination file

        Returns:
            Path to the written file

        Raises:
            OutputWriteError: If the document cannot be rendered or written
            RuntimeError: If the rendered page count does not match
        """
        output_path = Path(output_path)
        data = self.render(pages)

        rendered = self.count_pages(data)
        if rendered != len(pages):
            raise RuntimeError(f"Rendered {rendered} pages, expected {len(pages)}")

        try:
            output_path.write_bytes(data)
        except OSError as e:
            raise OutputWriteError(f"Failed to write output file {output_path}: {e}") from e

        return output_path
