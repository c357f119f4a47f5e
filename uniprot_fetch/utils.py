# uniprot_fetch/utils.py
# Shared HTTP helpers.

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import __version__


def get_session() -> requests.Session:
    """Return a requests session that reconnects on transient network errors.

    Only connection and read failures of GET requests are retried here. HTTP
    status codes, redirects and Retry-After are left to the callers, which
    classify them as part of the retrieval protocol.
    """
    retries = Retry(
        total=5,
        backoff_factor=1,
        allowed_methods=["GET"],
        respect_retry_after_header=False,
    )
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def user_agent(email: str) -> str:
    """User-Agent carrying the contact address UniProt asks clients to send."""
    return f"uniprot-fetch/{__version__} ({email})"


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """
    Converts a Retry-After header value to a number of seconds.

    Args:
        value: The raw header, either delta-seconds or an HTTP date.

    Returns:
        Seconds to wait (never negative), or None if the header is absent
        or unreadable.
    """
    if value is None:
        return None
    value = value.strip()
    try:
        return max(float(value), 0.0)
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max((when - datetime.now(timezone.utc)).total_seconds(), 0.0)


def media_type(content_type: Optional[str]) -> Optional[str]:
    """Strip parameters such as charset from a Content-Type value."""
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower()
