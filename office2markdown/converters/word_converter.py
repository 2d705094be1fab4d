"""
Markdown converter for DOCX files.
Converts DOCX structures (tables, headings, inline formatting) to markdown.
"""

import logging

from ..exceptions import FileCorruptedError
from ..parsers.note_parser import iter_block_containers
from ..parsers.run_parser import has_text_nodes, paragraph_text
from ..parsers.style_parser import parse_styles_xml
from ..utils.file_utils import describe_source, extract_files
from ..utils.path_filters import (
    is_word_document, is_word_note, is_word_styles, word_filter,
)
from ..utils.xml_utils import parse_xml, qn
from .table_builder import PLACEHOLDER, build_table

LOGGER = logging.getLogger(__name__)


def get_heading_level(p_elem, styles_info):
    """
    Looks up the heading level of a paragraph through its style.

    Args:
        p_elem: XML element representing a paragraph
        styles_info: Dict mapping style IDs to StyleInfo

    Returns:
        int: Heading level (1-6) or None if not a heading
    """
    pPr = p_elem.find(qn('w:pPr'))
    if pPr is None:
        return None
    pStyle = pPr.find(qn('w:pStyle'))
    if pStyle is None:
        return None

    style = styles_info.get(pStyle.get(qn('w:val')))
    if style is None or not style.is_heading or not style.heading_level:
        return None
    return min(style.heading_level, 6)


def parse_paragraph_to_markdown(p_elem, styles_info):
    """
    Converts a paragraph (<w:p>) to markdown.

    Args:
        p_elem: XML element representing a paragraph
        styles_info: Dict mapping style IDs to StyleInfo

    Returns:
        Markdown string, empty if the paragraph has no text
    """
    if not has_text_nodes(p_elem):
        return ''

    text = paragraph_text(p_elem)
    if not text.strip():
        return ''

    level = get_heading_level(p_elem, styles_info)
    if level:
        return '#' * level + ' ' + text
    return text


def _cell_text(cell):
    parts = []
    for p in cell.iter(qn('w:p')):
        if not has_text_nodes(p):
            continue
        text = paragraph_text(p).strip()
        if text:
            parts.append(text)
    return ' '.join(parts) or PLACEHOLDER


def _grid_span(cell):
    tcPr = cell.find(qn('w:tcPr'))
    if tcPr is None:
        return 1
    span = tcPr.find(qn('w:gridSpan'))
    if span is None:
        return 1
    try:
        return max(int(span.get(qn('w:val'), 1)), 1)
    except ValueError:
        return 1


def parse_table_rows(tbl_elem):
    """
    Collects the cell texts of a table (<w:tbl>), row by row.

    Horizontally merged cells (gridSpan) are followed by blank placeholder
    cells so later columns stay aligned.
    """
    rows = []
    for tr in tbl_elem.findall(qn('w:tr')):
        row = []
        for tc in tr.findall(qn('w:tc')):
            row.append(_cell_text(tc))
            row.extend([PLACEHOLDER] * (_grid_span(tc) - 1))
        if row:
            rows.append(row)
    return rows


def parse_table_to_markdown(tbl_elem, newline='\n'):
    """
    Converts a table (<w:tbl>) to markdown table syntax.

    The table ends with a delimiter so a blank line separates it from the
    next block.

    Returns:
        Markdown table string, empty if the table has no cells
    """
    lines = build_table(parse_table_rows(tbl_elem))
    if not lines:
        return ''
    return newline.join(lines) + newline


def _iter_blocks(container):
    for elem in container:
        if elem.tag == qn('w:sdt'):
            content = elem.find(qn('w:sdtContent'))
            if content is not None:
                yield from _iter_blocks(content)
        else:
            yield elem


def parse_body_to_markdown(container, styles_info, newline='\n'):
    """
    Traverses the direct children of a body, footnote or endnote and
    converts paragraphs and tables to markdown blocks.

    Args:
        container: <w:body>, <w:footnote> or <w:endnote> element
        styles_info: Dict mapping style IDs to StyleInfo
        newline: Delimiter used inside multi-line blocks

    Returns:
        list[str]: Markdown blocks in document order
    """
    blocks = []
    for elem in _iter_blocks(container):
        if elem.tag == qn('w:tbl'):
            table_md = parse_table_to_markdown(elem, newline)
            if table_md:
                blocks.append(table_md)
        elif elem.tag == qn('w:p'):
            para_md = parse_paragraph_to_markdown(elem, styles_info)
            if para_md:
                blocks.append(para_md)
    return blocks


def convert_word(source, config):
    """
    Converts a DOCX file to markdown format.

    The main document comes first; footnotes and endnotes follow in
    container order.

    Args:
        source: Path of the DOCX file or its bytes
        config: Config

    Returns:
        Markdown string

    Raises:
        FileCorruptedError: If word/document.xml is missing
    """
    files = extract_files(source, word_filter)
    if not any(is_word_document(f.path) for f in files):
        raise FileCorruptedError(describe_source(source))

    styles_file = next((f for f in files if is_word_styles(f.path)), None)
    styles_info = parse_styles_xml(
        styles_file.content if styles_file else None,
        styles_file.path if styles_file else 'word/styles.xml',
    )
    LOGGER.debug('Resolved %d styles', len(styles_info))

    content_files = ([f for f in files if is_word_document(f.path)]
                     + [f for f in files if is_word_note(f.path)])

    blocks = []
    for content_file in content_files:
        root = parse_xml(content_file.content, content_file.path)
        for container in iter_block_containers(root):
            blocks.extend(parse_body_to_markdown(
                container, styles_info, config.newline_delimiter))

    return config.newline_delimiter.join(blocks)
