"""
File utility functions: reading selected entries out of office containers and
guessing the type of in-memory buffers.
"""

import io
import logging
import zipfile

from ..exceptions import FileCorruptedError
from ..types import ExtractedFile

LOGGER = logging.getLogger(__name__)

# Leading bytes of formats we can recognise without opening them.
MAGIC_NUMBERS = [
    (b'%PDF', 'pdf'),
    (b'\x89PNG\r\n\x1a\n', 'png'),
    (b'\xff\xd8\xff', 'jpg'),
    (b'GIF87a', 'gif'),
    (b'GIF89a', 'gif'),
    (b'\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1', 'cfb'),
    (b'{\\rtf', 'rtf'),
]

ZIP_MAGIC = b'PK\x03\x04'

OPENDOCUMENT_MIMETYPES = {
    'application/vnd.oasis.opendocument.text': 'odt',
    'application/vnd.oasis.opendocument.presentation': 'odp',
    'application/vnd.oasis.opendocument.spreadsheet': 'ods',
    'application/vnd.oasis.opendocument.graphics': 'odg',
}

OOXML_PART_PREFIXES = [
    ('word/', 'docx'),
    ('ppt/', 'pptx'),
    ('xl/', 'xlsx'),
]


def describe_source(source):
    """Returns a printable name for a path or buffer, used in error messages."""
    if isinstance(source, (bytes, bytearray)):
        return '<buffer of {} bytes>'.format(len(source))
    return str(source)


def _open_container(source):
    if isinstance(source, (bytes, bytearray)):
        return zipfile.ZipFile(io.BytesIO(source))
    return zipfile.ZipFile(source)


def extract_files(source, predicate):
    """
    Reads the container entries accepted by ``predicate``.

    Entries are visited in container order and each one is read completely
    before the next is looked at, so the returned list preserves that order.

    Args:
        source: Path of the container or its bytes
        predicate: Callable taking an entry name and returning True if the
            entry should be extracted

    Returns:
        list[ExtractedFile]: Selected entries with their content decoded
        as UTF-8

    Raises:
        FileCorruptedError: If the source is not a readable zip container
    """
    extracted = []
    try:
        with _open_container(source) as zipf:
            for info in zipf.infolist():
                if info.is_dir() or not predicate(info.filename):
                    continue
                data = zipf.read(info)
                extracted.append(ExtractedFile(
                    path=info.filename,
                    content=data.decode('utf-8', errors='replace'),
                ))
    except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError) as exc:
        raise FileCorruptedError(describe_source(source)) from exc

    LOGGER.debug('Selected %d entries from %s',
                 len(extracted), describe_source(source))
    return extracted


def _sniff_zip(data):
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as zipf:
            names = zipf.namelist()
            if 'mimetype' in names:
                mimetype = zipf.read('mimetype').decode('ascii', errors='replace').strip()
                if mimetype in OPENDOCUMENT_MIMETYPES:
                    return OPENDOCUMENT_MIMETYPES[mimetype]
    except zipfile.BadZipFile:
        return None

    for prefix, extension in OOXML_PART_PREFIXES:
        if any(name.startswith(prefix) for name in names):
            return extension
    return 'zip'


def sniff_extension(data):
    """
    Guesses the file extension of an in-memory buffer from its content.

    Args:
        data: The file content

    Returns:
        str: Lower-case extension without the dot, or None if the type is
        not recognised
    """
    data = bytes(data)
    for magic, extension in MAGIC_NUMBERS:
        if data.startswith(magic):
            return extension
    if data.startswith(ZIP_MAGIC):
        return _sniff_zip(data)
    return None
