"""
Parser for DrawingML text (<a:p>/<a:t>) as found in slides, notes slides
and spreadsheet drawings.
"""

from ..utils.xml_utils import qn


def _placeholder_paragraphs(root, placeholder_types):
    skipped = set()
    for shape in root.iter(qn('p:sp')):
        ph = shape.find('{}/{}/{}'.format(qn('p:nvSpPr'), qn('p:nvPr'), qn('p:ph')))
        if ph is not None and ph.get('type') in placeholder_types:
            skipped.update(shape.iter(qn('a:p')))
    return skipped


def extract_paragraph_texts(root, skip_placeholders=()):
    """
    Extracts the text of every DrawingML paragraph holding text runs.

    Args:
        root: Root element of a slide, notes slide or drawing part
        skip_placeholders: Placeholder types (e.g. ``'sldNum'``) whose
            shapes are left out

    Returns:
        list[str]: Paragraph texts in document order; paragraphs without
        any non-empty <a:t> are dropped
    """
    skipped = _placeholder_paragraphs(root, skip_placeholders) if skip_placeholders else set()

    texts = []
    for paragraph in root.iter(qn('a:p')):
        if paragraph in skipped:
            continue
        text = ''.join(t.text for t in paragraph.iter(qn('a:t')) if t.text)
        if text:
            texts.append(text)
    return texts
