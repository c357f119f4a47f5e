# uniprot_fetch/errors.py
# Failures raised by the search and batch retrieval clients.

from typing import Optional


class UniprotError(Exception):
    """Base class for every failure raised by this package."""


class SearchFailure(UniprotError):
    """The list endpoint answered a page request with a non-success status."""

    def __init__(self, status: int, offset: int):
        self.status = status
        self.offset = offset
        super().__init__(f"Search failed at offset {offset}: HTTP {status}")


class SubmissionRejected(UniprotError):
    """The batch endpoint did not redirect to a job location."""

    def __init__(self, status: int, detail: str = ""):
        self.status = status
        self.detail = detail
        message = f"Batch submission rejected: HTTP {status}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class RetrievalError(UniprotError):
    """A polling step received a definitive error status."""

    def __init__(self, status: int, location: Optional[str] = None):
        self.status = status
        self.location = location
        super().__init__(f"Error in sequence retrieval: HTTP {status} from {location}")


class EmptyExport(UniprotError):
    """The job finished but did not produce an export in the requested format.

    The batch service reports "no matching records" this way instead of with
    an error status.
    """

    def __init__(self, content_type: Optional[str]):
        self.content_type = content_type
        super().__init__(f"No matching export produced (content type {content_type!r})")


class RetryBudgetExceeded(UniprotError):
    """Too many "still processing" answers at one polling location."""

    def __init__(self, location: str, attempts: int):
        self.location = location
        self.attempts = attempts
        super().__init__(f"Too many tries: {attempts} polls of {location} without progress")


class TransportFailure(UniprotError):
    """Network-level failure (connection, timeout, malformed response)."""


class EntryParseError(UniprotError):
    """The exported document could not be parsed as XML."""
