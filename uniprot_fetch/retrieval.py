# uniprot_fetch/retrieval.py
# Search, batch export and parsing combined into entry-level operations.

from contextlib import closing
from typing import BinaryIO, Iterable, Iterator, Optional
import xml.etree.ElementTree as ET

import requests
import urllib3

from .batch_client import submit_and_retrieve
from .errors import TransportFailure
from .parser import uniprot_entries
from .search_client import search


def get_uniprot_sequences(
    email: str, accessions: Iterable[str], session: Optional[requests.Session] = None
) -> Optional[BinaryIO]:
    """
    Takes a list of accessions and returns a stream from UniProt containing
    the entries in XML format, ready for parser.uniprot_entries. The caller
    closes the stream. Returns None for an empty list.
    """
    return submit_and_retrieve(accessions, email, session=session)


def fetch_entries(
    accessions: Iterable[str], email: str, session: Optional[requests.Session] = None
) -> Iterator[ET.Element]:
    """
    Retrieves the given accessions and yields their entries.

    The export stream is opened lazily, on the first iteration, and closed
    once the generator is exhausted or closed. A connection lost while the
    export is being read raises TransportFailure.
    """
    stream = submit_and_retrieve(accessions, email, session=session)
    if stream is None:
        return
    with closing(stream):
        try:
            yield from uniprot_entries(stream)
        except (urllib3.exceptions.HTTPError, requests.exceptions.RequestException) as e:
            raise TransportFailure(f"Error reading the export: {e}") from e


def search_entries(
    query: str, email: str, session: Optional[requests.Session] = None
) -> Iterator[ET.Element]:
    """Runs a search and yields the entries of every matching accession."""
    yield from fetch_entries(search(query, email, session=session), email, session=session)
