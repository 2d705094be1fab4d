"""
Parser for the block containers of DOCX content parts: the document body,
or the individual footnotes and endnotes.
"""

from ..utils.xml_utils import qn

NOTE_TAGS = (qn('w:footnote'), qn('w:endnote'))


def iter_block_containers(root):
    """
    Yields the elements whose children are paragraphs and tables.

    For document.xml that is the single <w:body>. For footnotes.xml and
    endnotes.xml every <w:footnote>/<w:endnote> is a container of its own;
    the separator notes Word writes hold no text and produce no output.

    Args:
        root: Root element of a DOCX content part

    Returns:
        Iterator of container elements in document order
    """
    body = root.find(qn('w:body'))
    if body is not None:
        yield body
        return

    for note in root:
        if note.tag in NOTE_TAGS:
            yield note
