"""
Parser for XLSX worksheet cells and the shared string table.

Tags are matched by local name so both transitional and strict
SpreadsheetML namespaces are understood.
"""

from ..exceptions import FileCorruptedError
from ..types import CellPosition
from ..utils.path_filters import SHARED_STRINGS
from ..utils.xml_utils import local_name, parse_xml


def _children(elem, name):
    return [child for child in elem if local_name(child.tag) == name]


def _first_child(elem, name):
    for child in elem:
        if local_name(child.tag) == name:
            return child
    return None


def _rich_text(elem):
    """Text of a <si> or <is> element: plain <t> plus rich-text runs, without phonetic hints."""
    parts = []
    for child in elem:
        name = local_name(child.tag)
        if name == 't':
            parts.append(child.text or '')
        elif name == 'r':
            parts.extend(t.text or '' for t in _children(child, 't'))
    return ''.join(parts)


def parse_shared_strings(content, path=SHARED_STRINGS):
    """
    Parses sharedStrings.xml into the list cells refer to by index.

    Args:
        content: Text of sharedStrings.xml, or None if the workbook has none
        path: Entry name, used in error messages

    Returns:
        list[str]: One string per <si>, in declaration order
    """
    if content is None:
        return []
    root = parse_xml(content, path)
    return [_rich_text(si) for si in _children(root, 'si')]


def iter_cells(root):
    """Yields every <c> element of a worksheet in document order."""
    for elem in root.iter():
        if local_name(elem.tag) == 'c':
            yield elem


def cell_position(cell):
    """Decodes the ``r`` attribute of a cell, None if absent or malformed."""
    return CellPosition.from_reference(cell.get('r'))


def read_cell_value(cell, shared_strings, source_name):
    """
    Resolves the displayed value of a cell.

    A cell is valid if it is an inline string cell with non-empty text, or
    if it has a non-empty <v>. Shared string cells (``t="s"``) are looked
    up in ``shared_strings``.

    Args:
        cell: The <c> element
        shared_strings: Result of parse_shared_strings
        source_name: Name of the workbook, used in error messages

    Returns:
        str: The cell value, or None for cells that hold nothing

    Raises:
        FileCorruptedError: If a shared string index is out of range
    """
    cell_type = cell.get('t')

    if cell_type == 'inlineStr':
        inline = _first_child(cell, 'is')
        if inline is not None:
            text = _rich_text(inline)
            if text:
                return text

    v = _first_child(cell, 'v')
    if v is None or not v.text:
        return None
    value = v.text

    if cell_type == 's':
        try:
            index = int(value)
        except ValueError:
            index = -1
        if index < 0 or index >= len(shared_strings):
            raise FileCorruptedError(
                source_name,
                'Your file {} seems to be corrupted: cell {} refers to shared '
                'string {} but only {} are defined.'.format(
                    source_name, cell.get('r', '?'), value, len(shared_strings)),
            )
        return shared_strings[index]

    if cell_type == 'b':
        return 'TRUE' if value.strip() == '1' else 'FALSE'

    return value
