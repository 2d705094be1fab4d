"""
Pytest configuration and shared fixtures.

The fixtures build minimal office containers in memory, holding only the
entries the converters read.
"""

import io
import sys
import zipfile
from pathlib import Path

import pytest

# Allow running the tests from a source checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from office2markdown.config import Config  # noqa: E402

W_NS = 'http://schemas.openxmlformats.org/wordprocessingml/2006/main'
A_NS = 'http://schemas.openxmlformats.org/drawingml/2006/main'
P_NS = 'http://schemas.openxmlformats.org/presentationml/2006/main'
S_NS = 'http://schemas.openxmlformats.org/spreadsheetml/2006/main'
C_NS = 'http://schemas.openxmlformats.org/drawingml/2006/chart'
XDR_NS = 'http://schemas.openxmlformats.org/drawingml/2006/spreadsheetDrawing'

ODF_NAMESPACES = (
    'xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0" '
    'xmlns:text="urn:oasis:names:tc:opendocument:xmlns:text:1.0" '
    'xmlns:table="urn:oasis:names:tc:opendocument:xmlns:table:1.0" '
    'xmlns:draw="urn:oasis:names:tc:opendocument:xmlns:drawing:1.0" '
    'xmlns:presentation="urn:oasis:names:tc:opendocument:xmlns:presentation:1.0"'
)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

CONTENT_TYPES = (
    XML_DECLARATION
    + '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types"/>'
)


def make_zip(entries):
    """Zips ``{name: text}`` in insertion order and returns the bytes."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as zipf:
        for name, content in entries.items():
            zipf.writestr(name, content)
    return buffer.getvalue()


# ============================================================================
# Word
# ============================================================================


def w_run(text, bold=False, italic=False, underline=False, strike=False):
    props = ''
    if bold:
        props += '<w:b/>'
    if italic:
        props += '<w:i/>'
    if underline:
        props += '<w:u w:val="single"/>'
    if strike:
        props += '<w:strike/>'
    rpr = '<w:rPr>{}</w:rPr>'.format(props) if props else ''
    return '<w:r>{}<w:t xml:space="preserve">{}</w:t></w:r>'.format(rpr, text)


def w_paragraph(*runs, style=None):
    ppr = '<w:pPr><w:pStyle w:val="{}"/></w:pPr>'.format(style) if style else ''
    return '<w:p>{}{}</w:p>'.format(ppr, ''.join(runs))


def w_table(rows):
    xml = '<w:tbl>'
    for row in rows:
        xml += '<w:tr>'
        for cell in row:
            xml += '<w:tc>{}</w:tc>'.format(w_paragraph(w_run(cell)) if cell else '<w:p/>')
        xml += '</w:tr>'
    return xml + '</w:tbl>'


WORD_STYLES = (
    XML_DECLARATION
    + '<w:styles xmlns:w="{}">'.format(W_NS)
    + '<w:style w:type="paragraph" w:styleId="Heading1"><w:name w:val="heading 1"/></w:style>'
    + '<w:style w:type="paragraph" w:styleId="Heading2"><w:name w:val="Heading 2"/></w:style>'
    + '<w:style w:type="paragraph" w:styleId="Title"><w:name w:val="Title"/></w:style>'
    + '<w:style w:type="paragraph" w:styleId="Heading9"><w:name w:val="heading 9"/></w:style>'
    + '<w:style w:type="paragraph" w:styleId="Normal"><w:name w:val="Normal"/></w:style>'
    + '</w:styles>'
)


@pytest.fixture
def build_docx():
    """Returns a factory producing DOCX bytes from body XML."""
    def factory(body, styles=WORD_STYLES, footnotes=None, include_document=True):
        entries = {'[Content_Types].xml': CONTENT_TYPES}
        if include_document:
            entries['word/document.xml'] = (
                XML_DECLARATION
                + '<w:document xmlns:w="{}"><w:body>{}</w:body></w:document>'.format(W_NS, body)
            )
        if styles is not None:
            entries['word/styles.xml'] = styles
        if footnotes is not None:
            entries['word/footnotes.xml'] = (
                XML_DECLARATION
                + '<w:footnotes xmlns:w="{}">{}</w:footnotes>'.format(W_NS, footnotes)
            )
        return make_zip(entries)
    return factory


# ============================================================================
# PowerPoint
# ============================================================================


def _shape(paragraphs, placeholder=None):
    ph = '<p:ph type="{}"/>'.format(placeholder) if placeholder else ''
    body = ''.join(
        '<a:p><a:r><a:t>{}</a:t></a:r></a:p>'.format(text) if text else '<a:p/>'
        for text in paragraphs
    )
    return ('<p:sp><p:nvSpPr><p:cNvPr id="2" name="Shape"/><p:cNvSpPr/>'
            '<p:nvPr>{}</p:nvPr></p:nvSpPr><p:txBody>{}</p:txBody></p:sp>').format(ph, body)


def slide_xml(paragraphs, root='sld', slide_number=None):
    shapes = _shape(paragraphs)
    if slide_number is not None:
        shapes += _shape([str(slide_number)], placeholder='sldNum')
    return (XML_DECLARATION
            + '<p:{root} xmlns:a="{a}" xmlns:p="{p}"><p:cSld><p:spTree>{shapes}'
              '</p:spTree></p:cSld></p:{root}>').format(root=root, a=A_NS, p=P_NS, shapes=shapes)


@pytest.fixture
def build_pptx():
    """
    Returns a factory producing PPTX bytes.

    ``slides`` and ``notes`` map slide numbers to paragraph texts. Entries
    are written in the order given, notes first, so tests see the converter
    sort them.
    """
    def factory(slides, notes=None):
        entries = {'[Content_Types].xml': CONTENT_TYPES}
        for number, paragraphs in (notes or {}).items():
            entries['ppt/notesSlides/notesSlide{}.xml'.format(number)] = slide_xml(
                paragraphs, root='notes', slide_number=number)
        for number, paragraphs in slides.items():
            entries['ppt/slides/slide{}.xml'.format(number)] = slide_xml(paragraphs)
        return make_zip(entries)
    return factory


# ============================================================================
# Excel
# ============================================================================


def xlsx_cell(reference, value, cell_type=None):
    if cell_type == 'inlineStr':
        return '<c r="{}" t="inlineStr"><is><t>{}</t></is></c>'.format(reference, value)
    t_attr = ' t="{}"'.format(cell_type) if cell_type else ''
    return '<c r="{}"{}><v>{}</v></c>'.format(reference, t_attr, value)


def sheet_xml(cells):
    return (XML_DECLARATION
            + '<worksheet xmlns="{}"><sheetData><row>{}</row></sheetData></worksheet>'.format(
                S_NS, ''.join(cells)))


def shared_strings_xml(strings):
    items = ''.join('<si><t>{}</t></si>'.format(s) for s in strings)
    return XML_DECLARATION + '<sst xmlns="{}">{}</sst>'.format(S_NS, items)


@pytest.fixture
def build_xlsx():
    """Returns a factory producing XLSX bytes from sheet cell lists."""
    def factory(sheets, shared_strings=None, extra=None):
        entries = {'[Content_Types].xml': CONTENT_TYPES}
        if shared_strings is not None:
            entries['xl/sharedStrings.xml'] = shared_strings_xml(shared_strings)
        for index, cells in enumerate(sheets, start=1):
            entries['xl/worksheets/sheet{}.xml'.format(index)] = sheet_xml(cells)
        entries.update(extra or {})
        return make_zip(entries)
    return factory


# ============================================================================
# OpenDocument
# ============================================================================


def odf_content(body):
    return (XML_DECLARATION
            + '<office:document-content {}><office:body>{}</office:body>'
              '</office:document-content>'.format(ODF_NAMESPACES, body))


@pytest.fixture
def build_odf():
    """Returns a factory producing OpenDocument bytes from office:body XML."""
    def factory(body, mimetype='application/vnd.oasis.opendocument.text',
                objects=None, include_content=True):
        entries = {'mimetype': mimetype}
        if include_content:
            entries['content.xml'] = odf_content(body)
        for index, object_body in enumerate(objects or [], start=1):
            entries['Object {}/content.xml'.format(index)] = odf_content(object_body)
        return make_zip(entries)
    return factory


# ============================================================================
# Config
# ============================================================================


@pytest.fixture
def config():
    return Config()
