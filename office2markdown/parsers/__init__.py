"""Parsers for office XML structures."""

from .chart_parser import parse_chart_values
from .drawing_parser import extract_paragraph_texts
from .note_parser import iter_block_containers
from .run_parser import get_run_formatting, parse_run_to_markdown
from .sheet_parser import parse_shared_strings, read_cell_value
from .style_parser import parse_styles_xml

__all__ = [
    'parse_chart_values',
    'extract_paragraph_texts',
    'iter_block_containers',
    'get_run_formatting',
    'parse_run_to_markdown',
    'parse_shared_strings',
    'read_cell_value',
    'parse_styles_xml',
]
