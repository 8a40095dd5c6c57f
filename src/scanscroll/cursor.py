"""ScrollCursor - steps through a scroll context one page at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NoReturn, Optional, Union

from scanscroll.exceptions import (
    DecodeError,
    MissingScrollIdError,
    ScanScrollError,
    TransportError,
)
from scanscroll.models import ResultPage, SearchHit, decode_page
from scanscroll.transport import TransportProtocol

logger = logging.getLogger(__name__)

DEFAULT_KEEP_ALIVE = "5m"
SCROLL_PATH = "/_search/scroll"


class CursorState(str, Enum):
    """
    Lifecycle of a scroll cursor.
    
    Attributes:
        FRESH: Seeded with the initiation response, not stepped yet
        ACTIVE: At least one page fetched, more may follow
        EXHAUSTED: A terminal page was seen; no further requests are made
    """
    FRESH = "fresh"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class FailureKind(str, Enum):
    """Why a step failed."""
    TRANSPORT = "transport"
    DECODE = "decode"
    MISSING_SCROLL_ID = "missing_scroll_id"


@dataclass(frozen=True)
class Page:
    """A step produced a page of documents."""
    result: ResultPage


class EndOfStream:
    """A step found no more pages. Not an error."""
    
    _instance: Optional["EndOfStream"] = None
    
    def __new__(cls) -> "EndOfStream":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __repr__(self) -> str:
        return "END_OF_STREAM"


END_OF_STREAM = EndOfStream()


@dataclass(frozen=True)
class Failure:
    """
    A step failed.
    
    Attributes:
        kind: Category of the failure
        error: The exception describing it (status, body, cause)
    """
    kind: FailureKind
    error: ScanScrollError
    
    def raise_error(self) -> NoReturn:
        """Raise the carried exception."""
        raise self.error


StepResult = Union[Page, EndOfStream, Failure]


class ScrollCursor:
    """
    Cursor over the pages of one server-side scroll context.
    
    Created by a scan with the initiation response. Under scan semantics
    that first response only carries the total hit count and the scroll
    id; documents arrive through step().
    
    A cursor must not be stepped from more than one thread at a time.
    Independent cursors can be used concurrently. The server expires the
    scroll context after keep_alive passes without a step; the cursor
    cannot tell an expired context from one that never existed.
    
    Attributes:
        keep_alive: Scroll context TTL sent with every continuation
        pretty: Ask the server for indented JSON
        debug: Log each exchange at INFO
    
    Example:
        cursor = client.scan().index("logs").size(500).do()
        while True:
            outcome = cursor.step()
            if isinstance(outcome, EndOfStream):
                break
            if isinstance(outcome, Failure):
                outcome.raise_error()
            handle(outcome.result.documents)
    """
    
    def __init__(
        self,
        transport: TransportProtocol,
        result: Optional[ResultPage],
        keep_alive: Optional[str] = None,
        pretty: bool = False,
        debug: bool = False,
    ):
        self._transport = transport
        self._results = result
        self.keep_alive = keep_alive
        self.pretty = pretty
        self.debug = debug
        self._current_page = 0
        self._state = CursorState.FRESH
    
    @property
    def results(self) -> Optional[ResultPage]:
        """Most recently received page (the initiation response before any step)."""
        return self._results
    
    @property
    def scroll_id(self) -> Optional[str]:
        if self._results is None:
            return None
        return self._results.scroll_id
    
    @property
    def current_page(self) -> int:
        """Number of successful steps so far."""
        return self._current_page
    
    @property
    def state(self) -> CursorState:
        return self._state
    
    def total_hits(self) -> int:
        """Total documents in the scroll, 0 until a page has reported it."""
        if self._results is None:
            return 0
        return self._results.total_hits
    
    def _is_exhausted(self) -> bool:
        if self._current_page == 0:
            return False
        return self._results is None or self._results.is_terminal
    
    def _continuation_params(self) -> dict:
        params = {}
        if self.pretty:
            params["pretty"] = "true"
        params["scroll"] = self.keep_alive or DEFAULT_KEEP_ALIVE
        return params
    
    def step(self) -> StepResult:
        """
        Fetch the next page.
        
        Returns:
            Page with the new result, END_OF_STREAM once a terminal page
            was received (repeatable, makes no request), or Failure for
            transport, decode and missing scroll id errors
        """
        if self._is_exhausted():
            self._state = CursorState.EXHAUSTED
            return END_OF_STREAM
        
        scroll_id = self.scroll_id
        if not scroll_id:
            return Failure(
                FailureKind.MISSING_SCROLL_ID,
                MissingScrollIdError("Cursor holds no scroll id to continue from"),
            )
        
        logger.debug("Fetching scroll page %d", self._current_page + 1)
        try:
            text = self._transport.perform_request(
                "POST",
                SCROLL_PATH,
                params=self._continuation_params(),
                body=scroll_id,
                debug=self.debug,
            )
        except TransportError as e:
            return Failure(FailureKind.TRANSPORT, e)
        
        try:
            page = decode_page(text)
        except DecodeError as e:
            return Failure(FailureKind.DECODE, e)
        
        self._results = page
        self._current_page += 1
        
        if page.is_terminal:
            self._state = CursorState.EXHAUSTED
            logger.debug("Scroll exhausted after %d steps", self._current_page)
            return END_OF_STREAM
        
        self._state = CursorState.ACTIVE
        return Page(page)
    
    def next_page(self) -> Optional[ResultPage]:
        """
        Fetch the next page, raising on failure.
        
        Returns:
            The next ResultPage, or None at end of stream
        
        Raises:
            TransportError: If the request failed or returned non-2xx
            DecodeError: If the response could not be decoded
            MissingScrollIdError: If there is no scroll id to continue from
        """
        outcome = self.step()
        if isinstance(outcome, Failure):
            outcome.raise_error()
        if isinstance(outcome, EndOfStream):
            return None
        return outcome.result
    
    def __iter__(self) -> Iterator[ResultPage]:
        """Yield pages until end of stream. Failures are raised."""
        while True:
            page = self.next_page()
            if page is None:
                return
            yield page
    
    def iter_documents(self) -> Iterator[SearchHit]:
        """
        Yield documents one at a time across all remaining pages.
        
        Use this for very large result sets that don't fit in memory.
        """
        for page in self:
            yield from page.documents
