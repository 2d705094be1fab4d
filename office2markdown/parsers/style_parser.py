"""
Parser for DOCX styles.xml to find out which paragraph styles are headings.
"""

import re

from ..types import StyleInfo
from ..utils.xml_utils import parse_xml, qn

HEADING_NAME = re.compile(r'^heading\s*(\d+)$', re.IGNORECASE)
TITLE_NAME = re.compile(r'^title$', re.IGNORECASE)


def classify_style_name(name):
    """
    Maps a style display name to a heading level.

    Args:
        name: Style name such as ``heading 2`` or ``Title``

    Returns:
        int: Heading level, or None if the style is not a heading
    """
    if not name:
        return None
    match = HEADING_NAME.match(name)
    if match:
        return int(match.group(1))
    if TITLE_NAME.match(name):
        return 1
    return None


def parse_styles_xml(content, path='word/styles.xml'):
    """
    Parses styles.xml to extract style information.

    Args:
        content: Text of styles.xml, or None when the document has none
        path: Entry name, used in error messages

    Returns:
        dict: Mapping of style ID to StyleInfo
    """
    styles = {}
    if content is None:
        return styles

    root = parse_xml(content, path)
    for style in root.iter(qn('w:style')):
        style_id = style.get(qn('w:styleId'))
        if not style_id:
            continue

        name = ''
        name_elem = style.find(qn('w:name'))
        if name_elem is not None:
            name = name_elem.get(qn('w:val')) or ''

        level = classify_style_name(name)
        styles[style_id] = StyleInfo(
            id=style_id,
            name=name,
            type=style.get(qn('w:type')),
            is_heading=level is not None,
            heading_level=level,
        )

    return styles
