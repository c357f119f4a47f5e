# uniprot_fetch/search_client.py
# This module pages through the UniProt list endpoint.

import logging
from typing import Any, Dict, List, NamedTuple, Optional

import requests

from . import config
from .errors import SearchFailure, TransportFailure
from .utils import get_session, user_agent

logger = logging.getLogger(__name__)

_SESSION = get_session()


class SearchQuery(NamedTuple):
    """One page request against the list endpoint."""

    text: str
    email: str
    offset: int = 0

    def params(self) -> Dict[str, Any]:
        return {
            'query': self.text,
            'format': 'list',
            'offset': self.offset,
            'limit': config.PAGE_SIZE,
        }

    def next_page(self) -> "SearchQuery":
        return self._replace(offset=self.offset + config.PAGE_SIZE)


def fetch_page(query: SearchQuery, session: Optional[requests.Session] = None) -> List[str]:
    """
    Fetches one page of accessions from the list endpoint.

    Args:
        query: The query text, contact address and offset of the page.
        session: HTTP session to use; defaults to the module session.

    Returns:
        The non-blank lines of the response, in the order UniProt sent them.
    """
    session = session or _SESSION
    try:
        response = session.get(
            config.SEARCH_URL,
            params=query.params(),
            headers={'User-Agent': user_agent(query.email)},
            timeout=config.REQUEST_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        raise TransportFailure(f"Error fetching search page at offset {query.offset}: {e}") from e

    if not 200 <= response.status_code < 300:
        raise SearchFailure(response.status_code, query.offset)

    return [line.strip() for line in response.text.split('\n') if line.strip()]


def search(query: str, email: str, session: Optional[requests.Session] = None) -> List[str]:
    """
    Submits a search to UniProt and returns every matching accession.

    The query uses the same syntax as the UniProt web interface, for example
    'organism:6183 AND keyword:1185' for the Schistosoma mansoni reference
    proteome or 'reviewed:yes AND organism:9606' for reviewed human entries.

    Args:
        query: The search term, passed to UniProt untouched.
        email: Contact address sent in the User-Agent, required by UniProt.
        session: HTTP session to use; defaults to the module session.

    Returns:
        The accessions in UniProt's order. An empty list means no matches.

    Raises:
        SearchFailure: A page was answered with a non-success status.
        TransportFailure: A page could not be fetched at all.
    """
    page_query = SearchQuery(query, email)
    accessions: List[str] = []

    while True:
        page = fetch_page(page_query, session)
        logger.debug("Search page at offset %d returned %d accessions", page_query.offset, len(page))
        accessions.extend(page)

        # A short (or empty) page is the last one.
        if len(page) < config.PAGE_SIZE:
            break

        page_query = page_query.next_page()

    logger.info("Search %r matched %d accessions", query, len(accessions))
    return accessions
