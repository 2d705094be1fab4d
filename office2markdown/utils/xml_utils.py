"""
XML utility functions shared by the office format parsers.
"""

import xml.etree.ElementTree as ET

from ..exceptions import FileCorruptedError

NSMAP = {
    'w': 'http://schemas.openxmlformats.org/wordprocessingml/2006/main',
    'r': 'http://schemas.openxmlformats.org/officeDocument/2006/relationships',
    'a': 'http://schemas.openxmlformats.org/drawingml/2006/main',
    'p': 'http://schemas.openxmlformats.org/presentationml/2006/main',
    'c': 'http://schemas.openxmlformats.org/drawingml/2006/chart',
    'office': 'urn:oasis:names:tc:opendocument:xmlns:office:1.0',
    'text': 'urn:oasis:names:tc:opendocument:xmlns:text:1.0',
    'table': 'urn:oasis:names:tc:opendocument:xmlns:table:1.0',
    'presentation': 'urn:oasis:names:tc:opendocument:xmlns:presentation:1.0',
}


def qn(tag):
    """
    Stands for 'qualified name', a utility function to turn a namespace
    prefixed tag name into a Clark-notation qualified tag name.

    Example: ``qn('w:p')`` returns ``'{http://schemas.../main}p'``

    Args:
        tag: A namespace-prefixed tag name (e.g., 'w:p', 'text:h')

    Returns:
        A Clark-notation qualified tag name
    """
    prefix, tagroot = tag.split(':')
    uri = NSMAP[prefix]
    return '{{{}}}{}'.format(uri, tagroot)


def local_name(tag):
    """Returns a tag name without its namespace, e.g. ``'c'`` for ``'{ns}c'``."""
    if not isinstance(tag, str):
        return ''
    return tag.rsplit('}', 1)[-1]


def parse_xml(content, path):
    """
    Parses the XML text of a container entry.

    Args:
        content: XML document as a string
        path: Entry name, used in the error raised on malformed XML

    Returns:
        The root Element

    Raises:
        FileCorruptedError: If the entry is not well-formed XML
    """
    try:
        return ET.fromstring(content)
    except ET.ParseError as exc:
        raise FileCorruptedError(
            path, 'Entry {} is not well-formed XML: {}'.format(path, exc)
        ) from exc


def build_parent_map(root):
    """ElementTree keeps no parent pointers, so build child -> parent once per tree."""
    return {child: parent for parent in root.iter() for child in parent}


def find_ancestor(node, parent_map, tags):
    """
    Walks up the parent chain and returns the first ancestor whose tag is in
    ``tags``, or None. The walk is iterative so deeply nested documents do
    not exhaust the stack.
    """
    parent = parent_map.get(node)
    while parent is not None:
        if parent.tag in tags:
            return parent
        parent = parent_map.get(parent)
    return None


def has_ancestor(node, parent_map, tags):
    return find_ancestor(node, parent_map, tags) is not None
