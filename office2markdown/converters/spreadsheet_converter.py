"""
Markdown converter for XLSX files.

Every worksheet becomes a table headed by its column letters. Text in
drawings and cached chart values are listed in sections of their own.
"""

import logging
import math

from ..exceptions import FileCorruptedError
from ..parsers.chart_parser import parse_chart_values
from ..parsers.drawing_parser import extract_paragraph_texts
from ..parsers.sheet_parser import (
    cell_position, iter_cells, parse_shared_strings, read_cell_value,
)
from ..utils.file_utils import describe_source, extract_files
from ..utils.path_filters import (
    entry_number, is_chart, is_drawing, is_shared_strings, is_worksheet,
    spreadsheet_filter,
)
from ..utils.xml_utils import parse_xml
from .table_builder import SparseGrid

LOGGER = logging.getLogger(__name__)

EMPTY_SHEET = '*This sheet is empty*'


def _by_entry_number(files):
    def key(f):
        number = entry_number(f.path)
        return math.inf if number is None else number
    return sorted(files, key=key)


def build_sheet_grid(root, shared_strings, source_name):
    """
    Collects the valid cells of a worksheet into a SparseGrid.

    Args:
        root: Root element of the worksheet
        shared_strings: List of shared strings
        source_name: Name of the workbook, used in error messages

    Returns:
        SparseGrid
    """
    grid = SparseGrid()
    for cell in iter_cells(root):
        value = read_cell_value(cell, shared_strings, source_name)
        if value is None:
            continue
        position = cell_position(cell)
        if position is None:
            continue
        grid.set(position.row, position.col, value)
    return grid


def parse_sheet_to_markdown(root, shared_strings, source_name):
    """
    Converts one worksheet to markdown lines.

    Returns:
        list[str]: Table lines, or the empty-sheet marker
    """
    lines = build_sheet_grid(root, shared_strings, source_name).to_markdown()
    return lines or [EMPTY_SHEET]


def _list_section(title, item_title, groups):
    """Renders ``## title`` followed by one ``### item_title i`` bullet list per non-empty group."""
    lines = ['## {}\n'.format(title)]
    for index, items in enumerate(groups, start=1):
        if not items:
            continue
        lines.append('### {} {}\n'.format(item_title, index))
        lines.extend('- ' + item for item in items)
        lines.append('')
    return lines


def convert_spreadsheet(source, config):
    """
    Converts an XLSX file to markdown format.

    Args:
        source: Path of the XLSX file or its bytes
        config: Config

    Returns:
        Markdown string

    Raises:
        FileCorruptedError: If the workbook has no worksheet or a cell
            refers to a shared string that does not exist
    """
    source_name = describe_source(source)
    files = extract_files(source, spreadsheet_filter)
    sheet_files = _by_entry_number(f for f in files if is_worksheet(f.path))
    if not sheet_files:
        raise FileCorruptedError(source_name)

    strings_file = next((f for f in files if is_shared_strings(f.path)), None)
    shared_strings = parse_shared_strings(strings_file.content) if strings_file else []
    LOGGER.debug('Loaded %d shared strings', len(shared_strings))

    lines = []
    for index, sheet_file in enumerate(sheet_files, start=1):
        lines.append('## Sheet {}\n'.format(index))
        root = parse_xml(sheet_file.content, sheet_file.path)
        lines.extend(parse_sheet_to_markdown(root, shared_strings, source_name))
        lines.append('')

    drawing_files = [f for f in files if is_drawing(f.path)]
    if drawing_files:
        lines.extend(_list_section('Drawings', 'Drawing', [
            [text for text in extract_paragraph_texts(parse_xml(f.content, f.path))
             if text.strip()]
            for f in drawing_files
        ]))

    chart_files = [f for f in files if is_chart(f.path)]
    if chart_files:
        lines.extend(_list_section('Charts', 'Chart', [
            parse_chart_values(parse_xml(f.content, f.path)) for f in chart_files
        ]))

    return config.newline_delimiter.join(lines).strip()
