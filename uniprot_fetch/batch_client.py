# uniprot_fetch/batch_client.py
# This module drives the UniProt batch service: the accession list is posted
# as a file, the service redirects to a job location, and that location is
# polled until the export is ready.

import logging
import os
import time
from dataclasses import dataclass, field
from enum import Enum
from tempfile import NamedTemporaryFile
from typing import BinaryIO, Iterable, List, Optional
from urllib.parse import urljoin

import requests

from . import config
from .errors import (
    EmptyExport,
    RetrievalError,
    RetryBudgetExceeded,
    SubmissionRejected,
    TransportFailure,
    UniprotError,
)
from .utils import get_session, media_type, parse_retry_after, user_agent

logger = logging.getLogger(__name__)

_SESSION = get_session()

SUBMIT_REDIRECTS = (302, 303)


class JobPhase(Enum):
    SUBMITTING = "submitting"
    POLLING = "polling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class RetrievalJob:
    """State of one batch export, owned by a single submit_and_retrieve call."""

    accessions: List[str]
    phase: JobPhase = JobPhase.SUBMITTING
    location: Optional[str] = None
    attempts: int = 0
    # Retry-After as sent by the service. Only logged; polls use POLL_INTERVAL.
    wait_hint: Optional[float] = field(default=None, repr=False)

    def move_to(self, location: str) -> None:
        """Follow a redirect; the attempt count restarts at the new location."""
        self.location = location
        self.attempts = 0


def _headers(email: str) -> dict:
    return {'User-Agent': user_agent(email)}


def _submit(job: RetrievalJob, email: str, session: requests.Session) -> None:
    """
    Posts the accession list and records the job location.

    The accessions go into a temporary file, one per line, which is removed
    whatever the outcome of the request.
    """
    tmp = NamedTemporaryFile("w", prefix="up-seq-", suffix=".txt", delete=False)
    try:
        with tmp:
            tmp.write("\n".join(job.accessions))
        with open(tmp.name, "rb") as payload:
            response = session.post(
                config.BATCH_URL,
                files={'file': payload},
                data={'format': config.EXPORT_FORMAT},
                headers=_headers(email),
                allow_redirects=False,
                timeout=config.REQUEST_TIMEOUT,
            )
    except requests.exceptions.RequestException as e:
        raise TransportFailure(f"Error submitting batch request: {e}") from e
    finally:
        os.unlink(tmp.name)

    response.close()
    location = response.headers.get('Location')
    if response.status_code not in SUBMIT_REDIRECTS:
        raise SubmissionRejected(response.status_code, response.reason or "")
    if not location:
        raise SubmissionRejected(response.status_code, "redirect without a Location header")

    job.move_to(urljoin(config.BATCH_URL, location))
    job.phase = JobPhase.POLLING
    logger.info("Submitted %d accessions, job at %s", len(job.accessions), job.location)

    job.wait_hint = parse_retry_after(response.headers.get('Retry-After'))
    if job.wait_hint:
        logger.debug("Waiting %.1f seconds before the first poll", job.wait_hint)
        time.sleep(job.wait_hint)


def _poll(job: RetrievalJob, email: str, session: requests.Session) -> BinaryIO:
    """Polls the job location until the export is available or the job fails."""
    while True:
        try:
            response = session.get(
                job.location,
                headers=_headers(email),
                allow_redirects=False,
                stream=True,
                timeout=config.REQUEST_TIMEOUT,
            )
        except requests.exceptions.RequestException as e:
            raise TransportFailure(f"Error polling {job.location}: {e}") from e

        retry_after = response.headers.get('Retry-After')

        if retry_after is None:
            if response.status_code == 200:
                content_type = response.headers.get('Content-Type')
                if media_type(content_type) != config.EXPORT_CONTENT_TYPE:
                    response.close()
                    raise EmptyExport(content_type)
                job.phase = JobPhase.SUCCEEDED
                logger.info("Export ready at %s", job.location)
                response.raw.decode_content = True
                return response.raw

            response.close()
            location = response.headers.get('Location')
            if response.status_code == 302 and location:
                job.move_to(urljoin(job.location, location))
                logger.debug("Job redirected to %s", job.location)
                continue
            raise RetrievalError(response.status_code, job.location)

        # Still processing.
        response.close()
        job.wait_hint = parse_retry_after(retry_after)
        job.attempts += 1
        if job.attempts > config.MAX_POLL_ATTEMPTS:
            raise RetryBudgetExceeded(job.location, job.attempts)
        logger.debug(
            "Job at %s still running (attempt %d, server hint %s s)",
            job.location, job.attempts, job.wait_hint,
        )
        time.sleep(config.POLL_INTERVAL)


def submit_and_retrieve(
    accessions: Iterable[str], email: str, session: Optional[requests.Session] = None
) -> Optional[BinaryIO]:
    """
    Retrieves UniProt entries in XML through the batch service.

    Args:
        accessions: The accessions to export, in the order they are sent.
        email: Contact address sent in the User-Agent, required by UniProt.
        session: HTTP session to use; defaults to the module session.

    Returns:
        A binary stream of the exported XML document, which the caller must
        close, or None when no accessions were given (nothing is requested).

    Raises:
        SubmissionRejected, RetrievalError, EmptyExport, RetryBudgetExceeded,
        TransportFailure.
    """
    job = RetrievalJob(list(accessions))
    if not job.accessions:
        return None

    session = session or _SESSION
    try:
        _submit(job, email, session)
        return _poll(job, email, session)
    except UniprotError as e:
        job.phase = JobPhase.FAILED
        logger.warning("Batch retrieval of %d accessions failed: %s", len(job.accessions), e)
        raise
