"""
scanscroll - Scan and scroll through large search result sets.

Quick Start
-----------
    from scanscroll import SearchClient

    client = SearchClient()
    cursor = client.scan().index("logs").size(500).do()
    for page in cursor:
        for hit in page.documents:
            print(hit.id, hit.source)

Configuration
-------------
Set these environment variables (or use a .env file):

    SCANSCROLL_BASE_URL  - Cluster URL (default http://localhost:9200)
    SCANSCROLL_USERNAME  - Basic auth user (optional)
    SCANSCROLL_PASSWORD  - Basic auth password (optional)
    SCANSCROLL_TIMEOUT   - Per-request timeout in seconds (default 30)

Stepping Explicitly
-------------------
    outcome = cursor.step()
    if isinstance(outcome, Page):
        ...                      # outcome.result is the new ResultPage
    elif outcome is END_OF_STREAM:
        ...                      # no more pages, repeatable
    else:
        outcome.raise_error()    # Failure(kind, error)

Exceptions
----------
    TransportError        - Request failed or returned non-2xx (status, body)
    DecodeError           - Response was not a valid result page
    MissingScrollIdError  - Cursor has no scroll id to continue from
"""

__version__ = "0.1.0"

from scanscroll.client import SearchClient
from scanscroll.config import SearchSettings
from scanscroll.cursor import (
    DEFAULT_KEEP_ALIVE,
    END_OF_STREAM,
    CursorState,
    EndOfStream,
    Failure,
    FailureKind,
    Page,
    ScrollCursor,
)
from scanscroll.exceptions import (
    ScanScrollError,
    TransportError,
    DecodeError,
    MissingScrollIdError,
)
from scanscroll.models import ResultPage, SearchHit, SearchHits
from scanscroll.query import MatchAllQuery
from scanscroll.scan import ScanService, ScrollConfiguration, start_scroll
from scanscroll.transport import Transport

__all__ = [
    "SearchClient",
    "SearchSettings",
    "ScanService",
    "ScrollConfiguration",
    "start_scroll",
    "ScrollCursor",
    "CursorState",
    "Page",
    "EndOfStream",
    "END_OF_STREAM",
    "Failure",
    "FailureKind",
    "DEFAULT_KEEP_ALIVE",
    "ResultPage",
    "SearchHit",
    "SearchHits",
    "MatchAllQuery",
    "Transport",
    "ScanScrollError",
    "TransportError",
    "DecodeError",
    "MissingScrollIdError",
    "__version__",
]
