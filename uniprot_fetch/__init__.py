# uniprot_fetch/__init__.py
# Client for searching UniProt and retrieving entries through the batch service.

__version__ = "0.2.0"

from .batch_client import submit_and_retrieve
from .errors import (
    EmptyExport,
    EntryParseError,
    RetrievalError,
    RetryBudgetExceeded,
    SearchFailure,
    SubmissionRejected,
    TransportFailure,
    UniprotError,
)
from .parser import uniprot_entries
from .retrieval import fetch_entries, get_uniprot_sequences, search_entries
from .search_client import search

__all__ = [
    "search",
    "submit_and_retrieve",
    "uniprot_entries",
    "search_entries",
    "fetch_entries",
    "get_uniprot_sequences",
    "UniprotError",
    "SubmissionRejected",
    "RetrievalError",
    "EmptyExport",
    "RetryBudgetExceeded",
    "TransportFailure",
    "SearchFailure",
    "EntryParseError",
]
