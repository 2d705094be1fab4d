"""
office2markdown - Extract the text of office documents (docx, pptx, xlsx,
odt, odp, ods) and PDF files as structured markdown.
"""

from .config import Config
from .core import parse_office, parse_office_async, process_to_markdown
from .exceptions import (
    ExtensionUnsupportedError,
    FileCorruptedError,
    FileDoesNotExistError,
    ImproperArgumentsError,
    ImproperBuffersError,
    InvalidInputError,
    OfficeParserError,
)

__version__ = '1.0.0'

__all__ = [
    'Config',
    'parse_office',
    'parse_office_async',
    'process_to_markdown',
    'OfficeParserError',
    'ExtensionUnsupportedError',
    'FileCorruptedError',
    'FileDoesNotExistError',
    'ImproperArgumentsError',
    'ImproperBuffersError',
    'InvalidInputError',
]
