"""
Builds Markdown pipe tables from rows of cell text.

Shared by the Word, spreadsheet and OpenDocument converters.
"""

import re

from ..types import column_letters

PLACEHOLDER = ' '
LINE_BREAK = re.compile(r'\r\n|\r|\n')


def escape_cell(value):
    """Escapes pipes and turns line breaks into <br> so a cell stays on one line."""
    return LINE_BREAK.sub('<br>', str(value).replace('|', '\\|'))


def _render_row(cells):
    return '| ' + ' | '.join(escape_cell(cell) for cell in cells) + ' |'


def build_table(rows, header=None):
    """
    Converts rows of cell text to markdown table lines.

    Rows shorter than the widest one are padded with a blank placeholder
    cell. Without an explicit header the first row becomes the header.

    Args:
        rows: Iterable of lists of cell strings, in document order
        header: Optional list of header labels

    Returns:
        list[str]: Table lines (header, separator, data rows); empty when
        there are no rows or no columns
    """
    table_data = [list(row) for row in rows if row]
    if header is not None:
        table_data.insert(0, list(header))
    if not table_data:
        return []

    max_cols = max(len(row) for row in table_data)
    if max_cols == 0:
        return []

    for row in table_data:
        row.extend([PLACEHOLDER] * (max_cols - len(row)))

    lines = [_render_row(table_data[0])]
    lines.append('|' + ' --- |' * max_cols)
    lines.extend(_render_row(row) for row in table_data[1:])
    return lines


def expand_repeated(value, count):
    """Expands a cell that declares a repeat count into that many cells."""
    try:
        count = int(count) if count is not None else 1
    except ValueError:
        count = 1
    return [value] * max(count, 1)


class SparseGrid:
    """
    Cell values keyed by 1-based (row, col), for sheets that only store
    populated cells.
    """

    def __init__(self):
        self._cells = {}
        self.max_row = 0
        self.max_col = 0

    def __len__(self):
        return len(self._cells)

    def set(self, row, col, value):
        self._cells[(row, col)] = value
        self.max_row = max(self.max_row, row)
        self.max_col = max(self.max_col, col)

    def get(self, row, col):
        return self._cells.get((row, col), '')

    def rows(self):
        """Dense rows 1..max_row, each with max_col cells; gaps are empty strings."""
        for row in range(1, self.max_row + 1):
            yield [self.get(row, col) for col in range(1, self.max_col + 1)]

    def column_headers(self):
        return [column_letters(col) for col in range(1, self.max_col + 1)]

    def to_markdown(self):
        """Table lines headed by column letters, empty if no cell was set."""
        if not self._cells:
            return []
        return build_table(self.rows(), header=self.column_headers())
