"""
Deck Service - Reads card lists from pipe-delimited text files.

Each non-empty line holds one card: the front text and the back text
separated by a single '|'. There is no header line and no quoting.
"""

from pathlib import Path
from typing import Iterable, List

from ..config import DELIMITER, FIELDS_PER_LINE
from ..errors import InputNotFoundError, InputReadError, MalformedRowError
from ..models import FlashCard


class DeckService:
    """
    Parses card lists into FlashCard objects.

    Parsing is strict: a line that does not split into exactly two fields
    stops the whole read, so a bad input never produces a partial deck.
    """

    @staticmethod
    def parse_line(line: str, line_number: int) -> FlashCard:
        """
        Parse one line into a card.

        Args:
            line: Line text without its line terminator
            line_number: 1-based line number, used in error messages

        Returns:
            FlashCard with the two fields kept verbatim

        Raises:
            MalformedRowError: If the line does not have exactly two fields

        Example:
            >>> DeckService.parse_line("Hello|Bonjour", 1)
            FlashCard(front='Hello', back='Bonjour')
        """
        fields = line.split(DELIMITER)
        if len(fields) != FIELDS_PER_LINE:
            raise MalformedRowError(line_number, len(fields), line)
        return FlashCard(front=fields[0], back=fields[1])

    @staticmethod
    def is_blank(line: str) -> bool:
        """Check if a line carries no card."""
        return not line.strip()

    @classmethod
    def parse_lines(cls, lines: Iterable[str]) -> List[FlashCard]:
        """
        Parse a sequence of lines, skipping blank ones.

        Line numbers in errors count every physical line, blank lines
        included, so they match what an editor shows.
        """
        cards = []
        for line_number, line in enumerate(lines, start=1):
            if cls.is_blank(line):
                continue
            cards.append(cls.parse_line(line, line_number))
        return cards

    @staticmethod
    def read_text(path: Path) -> str:
        """
        Read the whole input file as UTF-8 text.

        Raises:
            InputNotFoundError: If the file does not exist
            InputReadError: If the file cannot be opened or decoded
        """
        if not path.exists():
            raise InputNotFoundError(f"Input file not found: {path}")

        try:
            # utf-8-sig drops a leading byte order mark if present
            return path.read_text(encoding='utf-8-sig')
        except UnicodeDecodeError as e:
            raise InputReadError(f"Input file is not valid UTF-8: {path} ({e.reason})") from e
        except OSError as e:
            raise InputReadError(f"Failed to read input file {path}: {e}") from e

    @classmethod
    def read_cards(cls, path: Path) -> List[FlashCard]:
        """
        Read every card from a file.

        Args:
            path: Path to the pipe-delimited input file

        Returns:
            Cards in file order

        Raises:
            InputNotFoundError: If the file does not exist
            InputReadError: If the file cannot be read
            MalformedRowError: If any line has the wrong number of fields
        """
        text = cls.read_text(Path(path))
        return cls.parse_lines(text.splitlines())
