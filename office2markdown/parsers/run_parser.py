"""
Parser for DOCX text runs (<w:r>) and their inline formatting.
"""

from ..types import Formatting
from ..utils.xml_utils import qn

# Values of w:val that switch a toggle property off.
OFF_VALUES = {'0', 'false', 'off', 'none'}


def _is_on(rPr, *tags):
    for tag in tags:
        elem = rPr.find(qn(tag))
        if elem is not None:
            val = elem.get(qn('w:val'))
            return val is None or val.lower() not in OFF_VALUES
    return False


def get_run_formatting(r_elem):
    """
    Reads bold, italic, underline and strike flags from a run's properties.

    Args:
        r_elem: XML element representing a text run

    Returns:
        Formatting
    """
    rPr = r_elem.find(qn('w:rPr'))
    if rPr is None:
        return Formatting()
    return Formatting(
        bold=_is_on(rPr, 'w:b'),
        italic=_is_on(rPr, 'w:i'),
        underline=_is_on(rPr, 'w:u'),
        strike=_is_on(rPr, 'w:strike', 'w:dstrike'),
    )


def apply_markdown_formatting(text, formatting):
    """
    Wraps text in Markdown emphasis markers.

    Markdown has no underline, so underline is dropped.
    """
    if not text.strip():
        return text

    if formatting.bold and formatting.italic:
        text = '***' + text + '***'
    elif formatting.bold:
        text = '**' + text + '**'
    elif formatting.italic:
        text = '*' + text + '*'

    if formatting.strike:
        text = '~~' + text + '~~'

    return text


def parse_run_to_markdown(r_elem):
    """
    Converts a text run (<w:r>) to markdown with formatting.

    Args:
        r_elem: XML element representing a text run

    Returns:
        Markdown string, empty when the run carries no text
    """
    text = ''.join(t.text for t in r_elem.findall(qn('w:t')) if t.text)
    if not text:
        return ''
    return apply_markdown_formatting(text, get_run_formatting(r_elem))


def paragraph_text(p_elem):
    """
    Concatenates the formatted runs of a paragraph in document order,
    including runs nested in hyperlinks, insertions and fields.
    """
    return ''.join(parse_run_to_markdown(r) for r in p_elem.iter(qn('w:r')))


def has_text_nodes(p_elem):
    return any(True for _ in p_elem.iter(qn('w:t')))
