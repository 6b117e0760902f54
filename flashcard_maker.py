#!/usr/bin/env python3
"""
Flash Card Sheet Maker

Converts a pipe-delimited card list ("front|back" per line) into a print-ready
A4 PDF with 16 cards per page. Each sheet is emitted as a front page followed
by its back page, mirrored left-to-right for long-edge duplex printing.
"""

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import Optional

from flashcards import __version__
from flashcards.config import CARDS_PER_PAGE, MIN_FONT_SIZE, MAX_FONT_SIZE
from flashcards.errors import FlashCardError
from flashcards.models import CardOptions
from flashcards.services import ConfigService, DeckService, LayoutService, PdfService
from flashcards.validators import DeckValidator


def generate_flashcards(input_path: str, output_path: str, options: CardOptions = None) -> dict:
    """
    Read a card list and write the duplex PDF.

    Args:
        input_path: Path to the pipe-delimited input file
        output_path: Path for the generated PDF
        options: Rendering options (defaults if None)

    Returns:
        dict with: cards, sheets, pages, output_path

    Raises:
        FlashCardError: If the input cannot be read or parsed, or the
            output cannot be written
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    options = options or CardOptions()

    lines = DeckService.read_text(input_path).splitlines()
    cards = DeckService.parse_lines(lines)
    print(f"Loaded {len(cards)} flash cards from {input_path.name}")

    validation = DeckValidator.validate_lines(lines, options)
    for warning in validation.warnings:
        print(f"Warning: {warning}")

    sheets = LayoutService.build_sheets(cards)
    pages = list(LayoutService.iter_pages(sheets))
    print(f"  Sheets: {len(sheets)}, Pages: {len(pages)} ({CARDS_PER_PAGE} cards per page)")

    PdfService(options).write(pages, output_path)
    print(f"Generated PDF: {output_path}")

    return {
        'cards': len(cards),
        'sheets': len(sheets),
        'pages': len(pages),
        'output_path': str(output_path),
    }


def check_flashcards(input_path: str, options: CardOptions = None) -> bool:
    """
    Report every problem in a card list without writing anything.

    Returns:
        True if the card list has no errors (warnings are allowed)
    """
    lines = DeckService.read_text(Path(input_path)).splitlines()
    result = DeckValidator.validate_lines(lines, options)

    for error in result.errors:
        print(f"Error: {error}")
    for warning in result.warnings:
        print(f"Warning: {warning}")
    print(result.get_summary())

    return result.is_valid


def build_options(args: argparse.Namespace) -> CardOptions:
    """Combine the optional config file with command-line overrides."""
    options = ConfigService(args.config).load()

    overrides = {}
    if args.font_size is not None:
        overrides['font_size'] = args.font_size
    if args.no_borders:
        overrides['draw_borders'] = False

    return dataclasses.replace(options, **overrides) if overrides else options


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="Generate a double-sided flash card PDF from a pipe-delimited file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  One card per line, front and back separated by '|', no header:
    Hello|Bonjour
    Goodbye|Au revoir

Examples:
  %(prog)s -i cards.txt -o cards.pdf
  %(prog)s cards.txt cards.pdf --no-borders
  %(prog)s -i cards.txt --check                    # Report problems only
  %(prog)s -i cards.txt -o cards.pdf --config options.json
  %(prog)s --write-config options.json             # Write default options
        """
    )

    parser.add_argument('input_pos', nargs='?', metavar='INPUT', help=argparse.SUPPRESS)
    parser.add_argument('output_pos', nargs='?', metavar='OUTPUT', help=argparse.SUPPRESS)
    parser.add_argument('-i', '--input', help='Input card list (pipe-delimited, no header)')
    parser.add_argument('-o', '--output', help='Output PDF file')
    parser.add_argument('--config', type=Path,
                        help='JSON file with rendering options (font_name, font_size, draw_borders, title)')
    parser.add_argument('--write-config', type=Path, metavar='FILE',
                        help='Write the current options to FILE and exit')
    parser.add_argument('--font-size', type=float,
                        help=f'Font size in points ({MIN_FONT_SIZE}-{MAX_FONT_SIZE}, default: 12)')
    parser.add_argument('--no-borders', action='store_true',
                        help='Do not draw card outlines')
    parser.add_argument('--check', action='store_true',
                        help='Validate the input and report problems without writing a PDF')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    input_path = args.input or args.input_pos
    output_path = args.output or args.output_pos

    try:
        options = build_options(args)
    except ValueError as e:
        parser.error(str(e))

    if args.write_config:
        if input_path or output_path or args.check:
            parser.error("--write-config cannot be combined with an input, an output or --check")
        try:
            ConfigService(args.write_config).save(options)
        except OSError as e:
            print(f"Error: Failed to write config file {args.write_config}: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Wrote options to {args.write_config}")
        return

    if not input_path:
        parser.error("an input file is required (-i/--input)")

    try:
        if args.check:
            if not check_flashcards(input_path, options):
                sys.exit(1)
            return

        if not output_path:
            parser.error("an output file is required (-o/--output)")

        generate_flashcards(input_path, output_path, options)
    except (FlashCardError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
