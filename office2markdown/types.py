"""
Value types shared by the parsers and converters.
"""

import re
from dataclasses import dataclass
from typing import Optional

_REFERENCE_RE = re.compile(r'^([A-Z]+)(\d+)$')


@dataclass(frozen=True)
class ExtractedFile:
    """One selected container entry, decoded as text."""

    path: str
    content: str


@dataclass(frozen=True)
class StyleInfo:
    id: str
    name: str
    type: Optional[str]
    is_heading: bool = False
    heading_level: Optional[int] = None


@dataclass(frozen=True)
class Formatting:
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False


@dataclass(frozen=True)
class TextRun:
    """A piece of PDF text and the y coordinate of its baseline."""

    text: str
    baseline: float


def column_index(letters):
    """
    Decodes spreadsheet column letters into a 1-based index.

    ``A`` is 1, ``Z`` is 26, ``AA`` is 27 and so on.

    Args:
        letters: Upper-case column letters

    Returns:
        int: Column index
    """
    if not letters or not letters.isalpha() or not letters.isupper():
        raise ValueError('Invalid column letters: {!r}'.format(letters))
    index = 0
    for char in letters:
        index = index * 26 + (ord(char) - ord('A') + 1)
    return index


def column_letters(index):
    """
    Encodes a 1-based column index as spreadsheet column letters.

    Args:
        index: Column index, 1 or greater

    Returns:
        str: Column letters (``1`` -> ``A``, ``28`` -> ``AB``)
    """
    if index < 1:
        raise ValueError('Column index must be positive, got {}'.format(index))
    letters = ''
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord('A') + remainder) + letters
    return letters


@dataclass(frozen=True)
class CellPosition:
    row: int
    col: int

    @classmethod
    def from_reference(cls, reference):
        """
        Parses a cell reference such as ``AA12``.

        Returns None when the reference is not a plain column/row pair.
        """
        match = _REFERENCE_RE.match(reference or '')
        if not match:
            return None
        row = int(match.group(2))
        if row < 1:
            return None
        return cls(row=row, col=column_index(match.group(1)))

    @property
    def reference(self):
        return '{}{}'.format(column_letters(self.col), self.row)
