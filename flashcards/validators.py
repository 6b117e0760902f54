"""
Input validators for flash card generation.

DeckService stops at the first bad line; DeckValidator instead walks the whole
file and collects every problem, so a user can fix a card list in one pass.
"""

from typing import Iterable

from .errors import MalformedRowError
from .models import CardOptions, FlashCard, ValidationResult
from .services.deck_service import DeckService
from .services.pdf_service import PdfService


class DeckValidator:
    """Validates card lists before rendering."""

    @staticmethod
    def is_renderable(text: str) -> bool:
        """
        Check if text only uses characters the standard PDF fonts can show.

        The built-in Type 1 fonts cover Latin-1; anything else prints as
        a missing glyph.
        """
        try:
            text.encode('latin-1')
        except UnicodeEncodeError:
            return False
        return True

    @classmethod
    def check_card(cls, card: FlashCard, line_number: int, renderer: PdfService,
                   result: ValidationResult):
        """Add warnings for a single parsed card."""
        max_lines = renderer.max_lines()

        for side_name, text in (('front', card.front), ('back', card.back)):
            if not text.strip():
                result.add_warning(f"Line {line_number}: {side_name} side is empty")
                continue

            if not cls.is_renderable(text):
                result.add_warning(
                    f"Line {line_number}: {side_name} side has characters "
                    f"{renderer.options.font_name} cannot print"
                )

            lines_needed = len(renderer.wrap_text(text))
            if lines_needed > max_lines:
                result.add_warning(
                    f"Line {line_number}: {side_name} side needs {lines_needed} lines, "
                    f"only {max_lines} fit on a card"
                )

    @classmethod
    def validate_lines(cls, lines: Iterable[str], options: CardOptions = None) -> ValidationResult:
        """
        Validate every line of a card list.

        Args:
            lines: Input lines without terminators
            options: Rendering options used to judge text fit

        Returns:
            ValidationResult with one error per malformed line and
            warnings for cards that will not print well
        """
        result = ValidationResult(is_valid=True)
        renderer = PdfService(options)
        card_count = 0

        for line_number, line in enumerate(lines, start=1):
            if DeckService.is_blank(line):
                continue

            try:
                card = DeckService.parse_line(line, line_number)
            except MalformedRowError as e:
                result.add_error(str(e))
                continue

            card_count += 1
            cls.check_card(card, line_number, renderer, result)

        if card_count == 0 and result.is_valid:
            result.add_warning("No cards found; output will be a single blank sheet")

        return result
