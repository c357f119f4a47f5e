# uniprot_fetch/parser.py
# This module is responsible for parsing the XML documents exported by the
# batch service into individual entries.

from typing import BinaryIO, Iterator
import xml.etree.ElementTree as ET

from .errors import EntryParseError

ENTRY_TAG = "entry"


def _local_name(tag: str) -> str:
    """'{http://uniprot.org/uniprot}entry' -> 'entry'"""
    return tag.rsplit("}", 1)[-1]


def _strip_namespaces(element: ET.Element) -> None:
    for node in element.iter():
        if isinstance(node.tag, str):
            node.tag = _local_name(node.tag)


def uniprot_entries(stream: BinaryIO) -> Iterator[ET.Element]:
    """
    Reads a UniProt XML document and yields its entries one at a time.

    Only the top-level <entry> elements are yielded; the <copyright> block and
    any other wrapper content are skipped. Namespaces are removed from the
    tags of yielded entries so they can be queried with plain paths such as
    'organism/name'.

    The document is parsed incrementally. The stream is not closed here: it
    belongs to the caller, who must finish with the entries before closing
    it. The generator can only be consumed once.

    Args:
        stream: A binary file-like object holding the XML document.

    Yields:
        One element per entry, in document order.

    Raises:
        EntryParseError: The document is not well-formed XML.
    """
    depth = 0
    root = None
    try:
        for event, element in ET.iterparse(stream, events=("start", "end")):
            if event == "start":
                if root is None:
                    root = element
                depth += 1
                continue

            depth -= 1
            if depth == 1:
                if _local_name(element.tag) == ENTRY_TAG:
                    _strip_namespaces(element)
                    yield element
                # Detached from the tree; a yielded entry stays alive through
                # the caller's reference.
                root.remove(element)
    except ET.ParseError as e:
        raise EntryParseError(f"Malformed UniProt XML: {e}") from e
