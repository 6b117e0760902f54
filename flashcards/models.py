"""
Data models for the flash card maker.

This module defines the typed dataclasses that flow through the pipeline:
cards read from the input, the sheet plan, the laid-out pages, and the
rendering options.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from .config import (
    CARDS_PER_PAGE,
    GRID_COLS,
    GRID_ROWS,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_TITLE,
    MIN_FONT_SIZE,
    MAX_FONT_SIZE,
    STANDARD_FONTS,
)


class Side(Enum):
    """Which side of a sheet a page is printed on."""
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class FlashCard:
    """
    A single card read from one input line.

    The card's position in the input list is its identity; the text on
    either side is kept exactly as it appeared in the file.
    """
    front: str
    back: str

    def text_for(self, side: Side) -> str:
        """Return the text printed on the given side."""
        return self.front if side is Side.FRONT else self.back


@dataclass(frozen=True)
class Page:
    """
    One side of a sheet: 16 cells in row-major order.

    Each cell holds the text to print or None when the cell is empty.
    """
    sheet_index: int
    side: Side
    cells: Tuple[Optional[str], ...]

    def __post_init__(self):
        """Validate cell count."""
        if len(self.cells) != CARDS_PER_PAGE:
            raise ValueError(
                f"A page must have {CARDS_PER_PAGE} cells, got {len(self.cells)}"
            )

    def cell(self, row: int, col: int) -> Optional[str]:
        """Return the text at grid position (row, col)."""
        return self.cells[row * GRID_COLS + col]

    def filled_slots(self) -> Iterator[Tuple[int, int, str]]:
        """Yield (row, col, text) for every non-empty cell."""
        for row in range(GRID_ROWS):
            for col in range(GRID_COLS):
                text = self.cell(row, col)
                if text is not None:
                    yield row, col, text


@dataclass(frozen=True)
class Sheet:
    """A physical sheet: the front page and its mirrored back page."""
    index: int
    front: Page
    back: Page

    def pages(self) -> Tuple[Page, Page]:
        """Return (front, back) in print order."""
        return (self.front, self.back)


@dataclass(frozen=True)
class SheetPlan:
    """
    Result of pagination.

    positions maps each card index to (sheet index, cell index) with cells
    filled row-major.
    """
    card_count: int
    sheet_count: int
    positions: Dict[int, Tuple[int, int]] = field(default_factory=dict)


@dataclass
class CardOptions:
    """
    Rendering options for the generated document.

    These control how card text is drawn; page size and grid are fixed.
    """
    font_name: str = DEFAULT_FONT_NAME
    font_size: float = DEFAULT_FONT_SIZE
    draw_borders: bool = True
    title: str = DEFAULT_TITLE

    def __post_init__(self):
        """Validate options."""
        if self.font_name not in STANDARD_FONTS:
            raise ValueError(
                f"font_name must be one of the standard PDF fonts, got '{self.font_name}'"
            )
        if not MIN_FONT_SIZE <= self.font_size <= MAX_FONT_SIZE:
            raise ValueError(
                f"font_size must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}, got {self.font_size}"
            )
        if not self.title or not self.title.strip():
            raise ValueError("title cannot be empty")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            'font_name': self.font_name,
            'font_size': self.font_size,
            'draw_borders': self.draw_borders,
            'title': self.title,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CardOptions':
        """Create from dictionary."""
        return cls(
            font_name=data.get('font_name', DEFAULT_FONT_NAME),
            font_size=data.get('font_size', DEFAULT_FONT_SIZE),
            draw_borders=bool(data.get('draw_borders', True)),
            title=data.get('title', DEFAULT_TITLE),
        )


@dataclass
class ValidationResult:
    """
    Result of validation checks.

    Contains validation status, errors, and warnings that can be
    displayed to the user.
    """
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def get_summary(self) -> str:
        """Get a human-readable summary of validation results."""
        if self.is_valid and not self.warnings:
            return "Validation passed with no issues"

        parts = []
        if self.errors:
            parts.append(f"{len(self.errors)} error(s)")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warning(s)")

        return ", ".join(parts)

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, {self.get_summary()})"
