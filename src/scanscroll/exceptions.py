"""Exception hierarchy for scanscroll."""

from typing import Optional


class ScanScrollError(Exception):
    """Base exception for all scanscroll errors."""
    pass


class TransportError(ScanScrollError):
    """
    The HTTP exchange failed or returned a non-success status.
    
    status_code is None when the request never completed (connection
    refused, timeout, ...). Otherwise status_code and body hold the
    server's reply so callers can decide whether to retry.
    
    Never retried internally.
    """
    
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(ScanScrollError):
    """
    Response body could not be decoded into a result page.
    
    Raised for invalid JSON, an unexpected shape, or a page that reports
    zero total hits while still carrying documents.
    """
    pass


class MissingScrollIdError(ScanScrollError):
    """
    The cursor was asked to continue but holds no scroll id.
    
    Common causes:
    - The server did not return a continuable scroll context
    - The scroll context expired and the server dropped it
    - The cursor was constructed from a non-scroll search result
    """
    pass
