"""
Service layer for the flash card maker.

Services cover one pipeline stage each: reading the deck, laying out
sheets, rendering the PDF and loading options.
"""

from .config_service import ConfigService
from .deck_service import DeckService
from .layout_service import LayoutService
from .pdf_service import PdfService

__all__ = ['ConfigService', 'DeckService', 'LayoutService', 'PdfService']
