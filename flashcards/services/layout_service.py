"""
Layout Service - Pagination and front/back card placement.

Cards fill a 4x4 grid row-major, one sheet at a time. The back page of each
sheet holds the same cards with every row reversed left-to-right, so that
flipping the printed sheet along its long edge brings each back text
behind its front text.
"""

import math
from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..config import CARDS_PER_PAGE, GRID_COLS
from ..models import FlashCard, Page, Sheet, SheetPlan, Side

T = TypeVar('T')


class LayoutService:
    """Computes sheet plans and builds mirrored page pairs."""

    @staticmethod
    def sheets_needed(card_count: int) -> int:
        """
        Number of double-sided sheets required for a deck.

        Every sheet is printed as a front and a back page, so the page count
        is always even. An empty deck still produces one blank sheet.

        Example:
            >>> LayoutService.sheets_needed(0), LayoutService.sheets_needed(16), LayoutService.sheets_needed(17)
            (1, 1, 2)
        """
        if card_count < 0:
            raise ValueError(f"card_count must be >= 0, got {card_count}")
        return max(1, math.ceil(card_count / CARDS_PER_PAGE))

    @classmethod
    def plan(cls, card_count: int) -> SheetPlan:
        """
        Assign every card to a sheet and a cell.

        Args:
            card_count: Number of cards in the deck

        Returns:
            SheetPlan mapping card index to (sheet index, cell index)
        """
        sheet_count = cls.sheets_needed(card_count)
        positions = {
            index: (index // CARDS_PER_PAGE, index % CARDS_PER_PAGE)
            for index in range(card_count)
        }
        return SheetPlan(card_count=card_count, sheet_count=sheet_count, positions=positions)

    @staticmethod
    def mirror_position(row: int, col: int) -> Tuple[int, int]:
        """Return the back-side cell behind front cell (row, col)."""
        return row, GRID_COLS - 1 - col

    @classmethod
    def mirror_row(cls, cells: Sequence[T]) -> List[T]:
        """
        Reverse a horizontal band of cells: back column c holds front column 3 - c.

        Applying this twice returns the original order.
        """
        if len(cells) != GRID_COLS:
            raise ValueError(f"A row must have {GRID_COLS} cells, got {len(cells)}")
        return [cells[cls.mirror_position(0, col)[1]] for col in range(GRID_COLS)]

    @classmethod
    def mirror_cells(cls, cells: Sequence[T]) -> List[T]:
        """Mirror every row band of a full page of cells; rows keep their order."""
        mirrored: List[T] = []
        for start in range(0, len(cells), GRID_COLS):
            mirrored.extend(cls.mirror_row(cells[start:start + GRID_COLS]))
        return mirrored

    @classmethod
    def build_sheets(cls, cards: Sequence[FlashCard]) -> List[Sheet]:
        """
        Lay out all cards onto front/back page pairs.

        Args:
            cards: Cards in input order

        Returns:
            One Sheet per planned sheet, empty cells set to None
        """
        plan = cls.plan(len(cards))
        fronts: List[List[Optional[str]]] = [[None] * CARDS_PER_PAGE for _ in range(plan.sheet_count)]
        backs: List[List[Optional[str]]] = [[None] * CARDS_PER_PAGE for _ in range(plan.sheet_count)]

        for index, (sheet_index, cell_index) in plan.positions.items():
            for side, grid in ((Side.FRONT, fronts), (Side.BACK, backs)):
                grid[sheet_index][cell_index] = cards[index].text_for(side)

        sheets = []
        for sheet_index in range(plan.sheet_count):
            front = Page(sheet_index, Side.FRONT, tuple(fronts[sheet_index]))
            back = Page(sheet_index, Side.BACK, tuple(cls.mirror_cells(backs[sheet_index])))
            sheets.append(Sheet(index=sheet_index, front=front, back=back))

        return sheets

    @staticmethod
    def iter_pages(sheets: Sequence[Sheet]) -> Iterator[Page]:
        """Yield pages in print order: front, back, front, back, ..."""
        for sheet in sheets:
            yield from sheet.pages()
