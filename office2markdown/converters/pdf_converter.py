"""
Markdown converter for PDF files.

Text runs are read page by page through pypdf, stitched back into lines by
their baseline, and handed to the plain-text structurer.
"""

import asyncio
import importlib
import io
import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from ..exceptions import FileCorruptedError
from ..types import TextRun
from ..utils.file_utils import describe_source
from .text_structurer import structure_text

LOGGER = logging.getLogger(__name__)


class PdfEngine:
    """Thin handle around the pypdf module."""

    def __init__(self, module, errors):
        self._pypdf = module
        self.error = errors.PyPdfError

    @property
    def version(self):
        return getattr(self._pypdf, '__version__', 'unknown')

    def open(self, source):
        """Opens a PDF from a path or from its bytes."""
        if isinstance(source, (bytes, bytearray)):
            return self._pypdf.PdfReader(io.BytesIO(source))
        return self._pypdf.PdfReader(source)


_engine = None
_engine_lock = threading.Lock()


def get_pdf_engine():
    """
    Returns the process-wide PdfEngine.

    pypdf is imported on the first call only. Initialisation happens at most
    once per process: concurrent first callers wait on a lock and all receive
    the same instance, which is read-only afterwards.
    """
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = PdfEngine(importlib.import_module('pypdf'),
                                    importlib.import_module('pypdf.errors'))
                LOGGER.debug('Loaded pypdf %s', _engine.version)
    return _engine


def _baseline(cm, tm):
    # y translation of the text matrix combined with the current transformation matrix
    return tm[4] * cm[1] + tm[5] * cm[3] + cm[5]


def extract_page_runs(page):
    """
    Collects the positioned text runs of one page.

    Args:
        page: A pypdf PageObject

    Returns:
        list[TextRun]: Runs in content stream order
    """
    runs = []

    def visitor(text, cm, tm, font_dict, font_size):
        text = text.replace('\n', '')
        if text:
            runs.append(TextRun(text=text, baseline=_baseline(cm, tm)))

    page.extract_text(visitor_text=visitor)
    return runs


async def read_all_pages(pages):
    """
    Extracts the runs of every page in a worker thread, leaving the event
    loop free while pypdf works.

    Results are returned in page order regardless of which page finishes
    first.
    """
    loop = asyncio.get_running_loop()
    # Pages share the reader's stream, so a single worker reads them in turn.
    with ThreadPoolExecutor(max_workers=1) as executor:
        return await asyncio.gather(*(
            loop.run_in_executor(executor, extract_page_runs, page) for page in pages
        ))


def build_transcript(pages, newline='\n'):
    """
    Joins text runs into lines.

    A line break is inserted whenever a run's baseline differs from the
    previous run's; runs sharing a baseline are concatenated as they are.

    Args:
        pages: List of per-page TextRun lists, in page order
        newline: Line delimiter

    Returns:
        str: Flat text transcript
    """
    parts = []
    baseline = None
    for runs in pages:
        for run in runs:
            if not run.text:
                continue
            if run.baseline != baseline:
                parts.append(newline)
            parts.append(run.text)
            baseline = run.baseline
    return ''.join(parts)


async def convert_pdf(source, config):
    """
    Converts a PDF file to markdown format.

    Args:
        source: Path of the PDF file or its bytes
        config: Config

    Returns:
        Markdown string

    Raises:
        FileCorruptedError: If pypdf cannot read the document
    """
    engine = get_pdf_engine()
    try:
        reader = await asyncio.get_running_loop().run_in_executor(None, engine.open, source)
        pages = await read_all_pages(reader.pages)
    except engine.error as exc:
        raise FileCorruptedError(describe_source(source)) from exc
    LOGGER.debug('Read text runs from %d pages', len(pages))
    transcript = build_transcript(pages, config.newline_delimiter)
    return structure_text(transcript, config.newline_delimiter)
