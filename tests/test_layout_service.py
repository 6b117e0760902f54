"""
Tests for the layout service module.
"""

import pytest

from flashcards.models import Side
from flashcards.services.layout_service import LayoutService


class TestPagination:
    """Tests for sheet planning."""

    @pytest.mark.parametrize("card_count, sheets", [
        (0, 1),
        (1, 1),
        (16, 1),
        (17, 2),
        (32, 2),
        (33, 3),
        (100, 7),
    ])
    def test_sheets_needed(self, card_count, sheets):
        """Test sheet counts, including the blank sheet for an empty deck."""
        assert LayoutService.sheets_needed(card_count) == sheets

    def test_sheet_count_matches_plan(self):
        """Test that the plan holds every card on the planned sheets."""
        for n in range(0, 70):
            plan = LayoutService.plan(n)
            assert plan.sheet_count == LayoutService.sheets_needed(n)
            assert all(sheet < plan.sheet_count for sheet, _cell in plan.positions.values())

    def test_negative_count_rejected(self):
        """Test that a negative card count raises ValueError."""
        with pytest.raises(ValueError):
            LayoutService.sheets_needed(-1)

    def test_row_major_positions(self):
        """Test that cards fill cells row-major, sheet by sheet."""
        plan = LayoutService.plan(18)

        assert plan.positions[0] == (0, 0)
        assert plan.positions[3] == (0, 3)
        assert plan.positions[4] == (0, 4)
        assert plan.positions[15] == (0, 15)
        assert plan.positions[16] == (1, 0)
        assert plan.positions[17] == (1, 1)


class TestMirroring:
    """Tests for the long-edge mirror rule."""

    def test_mirror_position(self):
        """Test that columns are reversed and rows kept."""
        assert LayoutService.mirror_position(0, 0) == (0, 3)
        assert LayoutService.mirror_position(2, 1) == (2, 2)
        assert LayoutService.mirror_position(3, 3) == (3, 0)

    def test_mirror_row_twice_is_identity(self):
        """Test that mirroring a row twice restores it."""
        row = ["a", "b", None, "d"]

        assert LayoutService.mirror_row(row) == ["d", None, "b", "a"]
        assert LayoutService.mirror_row(LayoutService.mirror_row(row)) == row

    def test_mirror_row_requires_four_cells(self):
        """Test that partial rows are rejected."""
        with pytest.raises(ValueError, match="4 cells"):
            LayoutService.mirror_row(["a", "b"])

    def test_mirror_cells_keeps_row_order(self):
        """Test that whole-page mirroring never moves cells between rows."""
        cells = list(range(16))

        mirrored = LayoutService.mirror_cells(cells)

        assert mirrored[:4] == [3, 2, 1, 0]
        assert mirrored[12:] == [15, 14, 13, 12]
        assert LayoutService.mirror_cells(mirrored) == cells


class TestBuildSheets:
    """Tests for building front/back pages."""

    def test_hello_bonjour(self, sample_cards):
        """Test the front and mirrored back of a two-card deck."""
        sheets = LayoutService.build_sheets(sample_cards)

        assert len(sheets) == 1
        front, back = sheets[0].pages()
        assert front.side is Side.FRONT
        assert back.side is Side.BACK
        assert front.cell(0, 0) == "Hello"
        assert front.cell(0, 1) == "Goodbye"
        assert back.cell(0, 3) == "Bonjour"
        assert back.cell(0, 2) == "Au revoir"
        assert back.cell(0, 0) is None

    def test_empty_deck_is_one_blank_sheet(self):
        """Test that no cards still gives a blank front and back."""
        sheets = LayoutService.build_sheets([])

        assert len(sheets) == 1
        assert all(text is None for text in sheets[0].front.cells)
        assert all(text is None for text in sheets[0].back.cells)

    def test_full_sheet(self, make_deck):
        """Test that 16 cards fill exactly one sheet."""
        sheets = LayoutService.build_sheets(make_deck(16))

        assert len(sheets) == 1
        assert None not in sheets[0].front.cells
        assert None not in sheets[0].back.cells

    def test_overflow_sheet_mostly_blank(self, make_deck):
        """Test that card 17 starts a second sheet."""
        sheets = LayoutService.build_sheets(make_deck(17))

        assert len(sheets) == 2
        assert sheets[1].front.cell(0, 0) == "front 16"
        assert sheets[1].back.cell(0, 3) == "back 16"
        assert sum(text is not None for text in sheets[1].front.cells) == 1

    def test_every_back_sits_behind_its_front(self, make_deck):
        """Test the mirror invariant for every card of a multi-sheet deck."""
        cards = make_deck(40)
        plan = LayoutService.plan(len(cards))
        sheets = LayoutService.build_sheets(cards)

        for index, (sheet_index, cell_index) in plan.positions.items():
            row, col = divmod(cell_index, 4)
            back_row, back_col = LayoutService.mirror_position(row, col)

            assert back_row == row
            assert back_col == 3 - col
            assert sheets[sheet_index].front.cell(row, col) == f"front {index}"
            assert sheets[sheet_index].back.cell(back_row, back_col) == f"back {index}"

    def test_front_text_appears_once(self, make_deck):
        """Test that each front text is on exactly one front page cell."""
        cards = make_deck(20)
        sheets = LayoutService.build_sheets(cards)
        all_fronts = [text for sheet in sheets for text in sheet.front.cells]

        for card in cards:
            assert all_fronts.count(card.front) == 1

    def test_iter_pages_order(self, make_deck):
        """Test that pages alternate front and back, sheet by sheet."""
        sheets = LayoutService.build_sheets(make_deck(20))

        pages = list(LayoutService.iter_pages(sheets))

        assert [(p.sheet_index, p.side) for p in pages] == [
            (0, Side.FRONT), (0, Side.BACK), (1, Side.FRONT), (1, Side.BACK),
        ]
