"""
Core processing functions for office2markdown.

Detects the type of the input, normalises the configuration and routes the
document to the converter for its format.
"""

import asyncio
import logging
import os

from .config import Config
from .converters.opendocument_converter import convert_opendocument
from .converters.pdf_converter import convert_pdf
from .converters.presentation_converter import convert_presentation
from .converters.spreadsheet_converter import convert_spreadsheet
from .converters.word_converter import convert_word
from .exceptions import (
    ExtensionUnsupportedError, FileDoesNotExistError, ImproperBuffersError,
    InvalidInputError,
)
from .utils.file_utils import describe_source, sniff_extension

LOGGER = logging.getLogger('office2markdown')

ERROR_HEADER = '[office2markdown]: '

CONVERTERS = {
    'docx': convert_word,
    'pptx': convert_presentation,
    'xlsx': convert_spreadsheet,
    'odt': convert_opendocument,
    'odp': convert_opendocument,
    'ods': convert_opendocument,
}

ASYNC_CONVERTERS = {
    'pdf': convert_pdf,
}

SUPPORTED_EXTENSIONS = frozenset(CONVERTERS) | frozenset(ASYNC_CONVERTERS)


def prepare_input(src):
    """
    Works out what the input is and which format it holds.

    Args:
        src: Path (str or os.PathLike) or file content (bytes, bytearray,
            memoryview)

    Returns:
        tuple: (source, extension) where source is a path string or bytes
        and extension is lower-case without the dot

    Raises:
        FileDoesNotExistError: If a path does not point to a file
        ImproperBuffersError: If the type of a buffer cannot be recognised
        InvalidInputError: For any other kind of input
    """
    if isinstance(src, memoryview):
        src = src.tobytes()

    if isinstance(src, (bytes, bytearray)):
        extension = sniff_extension(src)
        if extension is None:
            raise ImproperBuffersError()
        return bytes(src), extension

    if isinstance(src, (str, os.PathLike)):
        path = os.fspath(src)
        if not os.path.isfile(path):
            raise FileDoesNotExistError(path)
        _, extension = os.path.splitext(path)
        return path, extension.lstrip('.').lower()

    raise InvalidInputError()


async def convert(source, extension, config):
    """
    Runs the converter registered for ``extension``.

    Synchronous converters run in the default executor so the event loop
    is not blocked while a container is parsed.

    Raises:
        ExtensionUnsupportedError: If no converter handles the extension
    """
    if extension in ASYNC_CONVERTERS:
        return await ASYNC_CONVERTERS[extension](source, config)
    if extension in CONVERTERS:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, CONVERTERS[extension], source, config)
    raise ExtensionUnsupportedError(extension)


def handle_error(error, config):
    """Logs a failure when the configuration asks for it."""
    if config.output_error_to_console:
        LOGGER.error('%s%s', ERROR_HEADER, error)


async def parse_office_async(src, config=None):
    """
    Extracts the text of an office or PDF document as markdown.

    Args:
        src: Path of the document or its content as bytes
        config: Config, a mapping of options, or None for the defaults

    Returns:
        Markdown string

    Raises:
        OfficeParserError: Subclass describing what went wrong
    """
    config = Config.from_options(config)
    try:
        source, extension = prepare_input(src)
        LOGGER.debug('Converting %s as %s', describe_source(source), extension)
        return await convert(source, extension, config)
    except Exception as error:
        handle_error(error, config)
        raise


def parse_office(src, callback=None, config=None):
    """
    Synchronous entry point.

    With a callback, the outcome is delivered as ``callback(result, None)``
    or ``callback(None, error)`` and None is returned. Without one, the
    markdown is returned and errors are raised.

    Must not be called from a running event loop; await
    parse_office_async there instead.

    Args:
        src: Path of the document or its content as bytes
        callback: Optional two-argument callable
        config: Config, a mapping of options, or None for the defaults
    """
    try:
        result = asyncio.run(parse_office_async(src, config))
    except Exception as error:
        if callback is None:
            raise
        callback(None, error)
        return None

    if callback is None:
        return result
    callback(result, None)
    return None


def process_to_markdown(src, **options):
    """
    Convert a document to markdown format.

    Args:
        src: Path of the document or its content as bytes
        **options: Config options, e.g. ``ignore_notes=True``

    Returns:
        Markdown string
    """
    return parse_office(src, config=options)
