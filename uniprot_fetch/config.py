# uniprot_fetch/config.py
# Endpoints and protocol constants. Endpoints and the request timeout can be
# overridden through environment variables.

import os

SEARCH_URL = os.environ.get("UNIPROT_SEARCH_URL", "https://www.uniprot.org/uniprot/")
BATCH_URL = os.environ.get("UNIPROT_BATCH_URL", "https://www.uniprot.org/batch/")
REQUEST_TIMEOUT = float(os.environ.get("UNIPROT_TIMEOUT", "60"))

PAGE_SIZE = 1000  # the list endpoint's maximum page size

EXPORT_FORMAT = "xml"
EXPORT_CONTENT_TYPE = "application/xml"

# A "still processing" answer is retried at most this many times per polling
# target; a redirect to a new target starts the count again.
MAX_POLL_ATTEMPTS = 50
POLL_INTERVAL = 10  # seconds, used instead of the server's Retry-After hint

FASTA_LINE_WIDTH = 70
