"""
Error kinds raised while converting a card list into a PDF.

Every error subclasses FlashCardError so the command line can report any of
them the same way, and also the closest builtin exception so callers that
only know about files and values still catch them.
"""

from typing import Optional


class FlashCardError(Exception):
    """Base class for all flash card maker errors."""


class InputNotFoundError(FlashCardError, FileNotFoundError):
    """The input card list does not exist."""


class InputReadError(FlashCardError, OSError):
    """The input card list exists but could not be read or decoded."""


class MalformedRowError(FlashCardError, ValueError):
    """A line does not split into exactly two fields."""

    def __init__(self, line_number: int, field_count: int, line: Optional[str] = None):
        self.line_number = line_number
        self.field_count = field_count
        self.line = line
        super().__init__(
            f"Line {line_number}: expected 2 fields separated by '|', got {field_count}"
        )


class OutputWriteError(FlashCardError, OSError):
    """The output PDF could not be written."""
