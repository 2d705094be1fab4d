"""
Markdown converter for OpenDocument files (ODT, ODP, ODS).

All text lives in <text:h> and <text:p> elements, with formatting in nested
spans that are not carried over. Tables are rendered where they appear.
Charts and other embedded objects keep their text in
``Object N/content.xml``, which is processed after the main content.
"""

import logging

from ..exceptions import FileCorruptedError
from ..utils.file_utils import describe_source, extract_files
from ..utils.path_filters import (
    is_opendocument_content, is_opendocument_object, opendocument_filter,
)
from ..utils.xml_utils import build_parent_map, find_ancestor, has_ancestor, parse_xml, qn
from .table_builder import PLACEHOLDER, build_table, expand_repeated

LOGGER = logging.getLogger(__name__)

HEADING = qn('text:h')
PARAGRAPH = qn('text:p')
TEXT_TAGS = {HEADING, PARAGRAPH}
SPACE = qn('text:s')
TAB = qn('text:tab')
LINE_BREAK = qn('text:line-break')

TABLE = qn('table:table')
TABLE_ROW = qn('table:table-row')
CELL_TAGS = {qn('table:table-cell'), qn('table:covered-table-cell')}
COLUMNS_REPEATED = qn('table:number-columns-repeated')

NOTES = qn('presentation:notes')
NOTES_HEADER = '## Notes'


def _append_text(node, parts):
    if node.tag == SPACE:
        try:
            count = int(node.get(qn('text:c'), 1))
        except ValueError:
            count = 1
        parts.append(' ' * count)
        return
    if node.tag == TAB:
        parts.append('\t')
        return
    if node.tag == LINE_BREAK:
        parts.append('\n')
        return

    if node.text:
        parts.append(node.text)
    for child in node:
        _append_text(child, parts)
        if child.tail:
            parts.append(child.tail)


def extract_text(node):
    """
    Returns the plain text of an element and everything nested in it.

    <text:s>, <text:tab> and <text:line-break> are turned into the
    whitespace they stand for.
    """
    parts = []
    _append_text(node, parts)
    return ''.join(parts)


def _cell_text(cell):
    parts = []
    for paragraph in cell.iter(PARAGRAPH):
        text = extract_text(paragraph).strip()
        if text:
            parts.append(text)
    return ' '.join(parts) or PLACEHOLDER


def parse_table_rows(table, parent_map):
    """
    Collects the cell texts of a <table:table>, row by row.

    Rows of nested tables are left to their own table. Repeated cells are
    expanded, covered (merged) cells become blank placeholders, and the
    blank padding spreadsheets carry at the end of rows and tables is
    trimmed. A blank row inside the table keeps its place as a single
    placeholder cell.
    """
    rows = []
    for row_elem in table.iter(TABLE_ROW):
        if find_ancestor(row_elem, parent_map, {TABLE}) is not table:
            continue
        row = []
        for cell in row_elem:
            if cell.tag not in CELL_TAGS:
                continue
            row.extend(expand_repeated(_cell_text(cell), cell.get(COLUMNS_REPEATED)))
        while row and not row[-1].strip():
            row.pop()
        rows.append(row)

    while rows and not rows[-1]:
        rows.pop()
    return [row or [PLACEHOLDER] for row in rows]


def parse_document_to_markdown(root, config):
    """
    Walks one content document in document order.

    Args:
        root: Root element of content.xml or an object's content.xml
        config: Config

    Returns:
        tuple: (blocks, notes_blocks) of markdown strings. Notes only go to
        ``notes_blocks`` when they are deferred or ignored.
    """
    newline = config.newline_delimiter
    divert_notes = config.put_notes_at_last or config.ignore_notes
    parent_map = build_parent_map(root)

    blocks = []
    notes_blocks = []
    for node in root.iter():
        if node.tag == TABLE:
            if has_ancestor(node, parent_map, {TABLE}):
                continue
            block = newline.join(build_table(parse_table_rows(node, parent_map)))
        elif node.tag in TEXT_TAGS:
            if has_ancestor(node, parent_map, TEXT_TAGS | {TABLE}):
                continue
            text = extract_text(node).strip()
            if not text:
                continue
            block = '## ' + text if node.tag == HEADING else text
        else:
            continue

        if not block:
            continue
        if divert_notes and has_ancestor(node, parent_map, {NOTES}):
            notes_blocks.append(block)
        else:
            blocks.append(block)

    return blocks, notes_blocks


def convert_opendocument(source, config):
    """
    Converts an ODT, ODP or ODS file to markdown format.

    Args:
        source: Path of the file or its bytes
        config: Config

    Returns:
        Markdown string

    Raises:
        FileCorruptedError: If content.xml is missing
    """
    files = extract_files(source, opendocument_filter)
    content_files = [f for f in files if is_opendocument_content(f.path)]
    if not content_files:
        raise FileCorruptedError(describe_source(source))
    content_files += [f for f in files if is_opendocument_object(f.path)]

    blocks = []
    notes_blocks = []
    for content_file in content_files:
        root = parse_xml(content_file.content, content_file.path)
        doc_blocks, doc_notes = parse_document_to_markdown(root, config)
        blocks.extend(doc_blocks)
        notes_blocks.extend(doc_notes)

    if notes_blocks and config.put_notes_at_last and not config.ignore_notes:
        blocks.append(NOTES_HEADER)
        blocks.extend(notes_blocks)

    LOGGER.debug('Converted %d content documents', len(content_files))
    blank_line = config.newline_delimiter * 2
    return blank_line.join(blocks).strip()
