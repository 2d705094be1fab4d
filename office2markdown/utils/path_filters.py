"""
Entry name patterns selecting the container entries each format needs.
"""

import re

WORD_DOCUMENT = re.compile(r'word/document\d*\.xml')
WORD_FOOTNOTES = re.compile(r'word/footnotes\d*\.xml')
WORD_ENDNOTES = re.compile(r'word/endnotes\d*\.xml')
WORD_STYLES = re.compile(r'word/styles\.xml')

SLIDE = re.compile(r'ppt/slides/slide\d+\.xml')
NOTES_SLIDE = re.compile(r'ppt/notesSlides/notesSlide\d+\.xml')
SLIDE_NUMBER = re.compile(r'lide(\d+)\.xml')

WORKSHEET = re.compile(r'xl/worksheets/sheet\d+\.xml')
DRAWING = re.compile(r'xl/drawings/drawing\d+\.xml')
CHART = re.compile(r'xl/charts/chart\d+\.xml')
SHARED_STRINGS = 'xl/sharedStrings.xml'

OPENDOCUMENT_CONTENT = 'content.xml'
OPENDOCUMENT_OBJECT = re.compile(r'Object \d+/content\.xml')

TRAILING_NUMBER = re.compile(r'(\d+)\.xml$')


def _matches(pattern, name):
    return pattern.fullmatch(name) is not None


def is_word_document(name):
    return _matches(WORD_DOCUMENT, name)


def is_word_note(name):
    return _matches(WORD_FOOTNOTES, name) or _matches(WORD_ENDNOTES, name)


def is_word_styles(name):
    return _matches(WORD_STYLES, name)


def word_filter(name):
    """Main document, footnotes, endnotes and the stylesheet."""
    return is_word_document(name) or is_word_note(name) or is_word_styles(name)


def is_slide(name):
    return _matches(SLIDE, name)


def is_notes_slide(name):
    return _matches(NOTES_SLIDE, name)


def presentation_filter(ignore_notes=False):
    """Returns the predicate for slides, plus notes slides unless ignored."""
    if ignore_notes:
        return is_slide
    return lambda name: is_slide(name) or is_notes_slide(name)


def is_worksheet(name):
    return _matches(WORKSHEET, name)


def is_drawing(name):
    return _matches(DRAWING, name)


def is_chart(name):
    return _matches(CHART, name)


def is_shared_strings(name):
    return name == SHARED_STRINGS


def spreadsheet_filter(name):
    """Worksheets, drawings, charts and the shared string table."""
    return (is_worksheet(name) or is_drawing(name) or is_chart(name)
            or is_shared_strings(name))


def is_opendocument_content(name):
    return name == OPENDOCUMENT_CONTENT


def is_opendocument_object(name):
    return _matches(OPENDOCUMENT_OBJECT, name)


def opendocument_filter(name):
    """Main content document and the content of embedded objects."""
    return is_opendocument_content(name) or is_opendocument_object(name)


def slide_number(name):
    """
    Parses the slide index out of a slide or notes slide entry name.

    Returns:
        int or None if the name carries no index
    """
    match = SLIDE_NUMBER.search(name)
    return int(match.group(1)) if match else None


def entry_number(name):
    """Trailing number of an entry such as ``xl/worksheets/sheet12.xml``."""
    match = TRAILING_NUMBER.search(name)
    return int(match.group(1)) if match else None
