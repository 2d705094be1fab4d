"""
Markdown converter for PPTX files.

Each slide becomes a ``## Slide N`` section listing its paragraphs as
bullets; notes slides follow their slide under ``### Notes``, or are
gathered at the end when ``put_notes_at_last`` is set.
"""

import logging
import math
import re

from ..exceptions import FileCorruptedError
from ..parsers.drawing_parser import extract_paragraph_texts
from ..utils.file_utils import describe_source, extract_files
from ..utils.path_filters import is_notes_slide, is_slide, presentation_filter, slide_number
from ..utils.xml_utils import parse_xml

LOGGER = logging.getLogger(__name__)

SLIDE_HEADER = '\n## Slide {}\n'
NOTES_HEADER = '\n### Notes\n'
# Placeholders in notes slides that repeat slide furniture, not notes.
NOTES_SKIPPED_PLACEHOLDERS = ('sldNum',)
EXCESS_BLANK_LINES = re.compile(r'\n{3,}')


def slide_sort_key(path):
    """Orders by slide index (unnumbered entries last), a slide before its notes."""
    number = slide_number(path)
    return (math.inf if number is None else number, is_notes_slide(path))


def order_slide_files(files, config):
    """
    Sorts slide and notes slide entries into rendering order.

    Args:
        files: ExtractedFile list from the container
        config: Config

    Returns:
        list[ExtractedFile]
    """
    ordered = sorted(files, key=lambda f: slide_sort_key(f.path))
    if not config.ignore_notes and config.put_notes_at_last:
        # Stable: slides keep their order, then notes keep theirs.
        ordered.sort(key=lambda f: is_notes_slide(f.path))
    return ordered


def convert_presentation(source, config):
    """
    Converts a PPTX file to markdown format.

    Args:
        source: Path of the PPTX file or its bytes
        config: Config

    Returns:
        Markdown string

    Raises:
        FileCorruptedError: If the presentation has no slides
    """
    newline = config.newline_delimiter
    files = extract_files(source, presentation_filter(config.ignore_notes))
    if not any(is_slide(f.path) for f in files):
        raise FileCorruptedError(describe_source(source))

    blocks = []
    current_slide = 0
    processing_notes = False

    for slide_file in order_slide_files(files, config):
        notes = is_notes_slide(slide_file.path)
        number = slide_number(slide_file.path) or 0

        if not notes and number != current_slide:
            current_slide = number
            blocks.append(SLIDE_HEADER.format(number))
            processing_notes = False

        if notes and not processing_notes:
            blocks.append(NOTES_HEADER)
            processing_notes = True

        root = parse_xml(slide_file.content, slide_file.path)
        if notes:
            texts = extract_paragraph_texts(root, NOTES_SKIPPED_PLACEHOLDERS)
        else:
            texts = ['- ' + text for text in extract_paragraph_texts(root)]

        content = newline.join(texts)
        if content.strip():
            blocks.append(content)

    LOGGER.debug('Converted %d slide parts', len(files))
    markdown = newline.join(blocks)
    return EXCESS_BLANK_LINES.sub('\n\n', markdown).strip()
