"""Converters from office and PDF content to markdown."""

from .opendocument_converter import convert_opendocument
from .pdf_converter import convert_pdf
from .presentation_converter import convert_presentation
from .spreadsheet_converter import convert_spreadsheet
from .word_converter import convert_word

__all__ = [
    'convert_word',
    'convert_presentation',
    'convert_spreadsheet',
    'convert_opendocument',
    'convert_pdf',
]
