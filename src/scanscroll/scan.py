"""Scan initiation - opens a scroll context and returns a cursor."""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scanscroll.cursor import DEFAULT_KEEP_ALIVE, ScrollCursor
from scanscroll.models import decode_page
from scanscroll.query import MatchAllQuery, Query, QueryLike, serialize_query
from scanscroll.transport import TransportProtocol

logger = logging.getLogger(__name__)


class ScrollConfiguration(BaseModel):
    """
    Immutable description of a scan.
    
    Attributes:
        indices: Target indices, in the order they were added
        types: Target document types, in the order they were added
        query: Query object or serialized dict; None sends no query
        keep_alive: Scroll context TTL, None for the 5 minute default
        size: Page size hint, sent only when positive
        pretty: Ask the server for indented JSON
        debug: Log each exchange at INFO
    """
    
    model_config = ConfigDict(frozen=True)
    
    indices: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    query: Optional[Any] = Field(default_factory=MatchAllQuery)
    keep_alive: Optional[str] = None
    size: Optional[int] = None
    pretty: bool = False
    debug: bool = False
    
    @field_validator("query")
    @classmethod
    def _check_query(cls, value: Any) -> Any:
        if value is None or isinstance(value, (dict, Query)):
            return value
        raise ValueError(
            f"query must be a dict or expose source(), got {type(value).__name__}"
        )


def _join_path_segment(names: tuple[str, ...]) -> str:
    return ",".join(quote(name, safe="") for name in names)


def build_scan_path(config: ScrollConfiguration) -> str:
    """
    Build /<indices>/<types>/_search, leaving out empty segments.
    
    Example:
        build_scan_path(ScrollConfiguration(indices=("a", "b")))  # "/a,b/_search"
    """
    segments = []
    if config.indices:
        segments.append(_join_path_segment(config.indices))
    if config.types:
        segments.append(_join_path_segment(config.types))
    segments.append("_search")
    return "/" + "/".join(segments)


def build_scan_params(config: ScrollConfiguration) -> dict:
    """Query parameters for the initiation request, in wire order."""
    params = {}
    if config.pretty:
        params["pretty"] = "true"
    params["scroll"] = config.keep_alive or DEFAULT_KEEP_ALIVE
    params["search_type"] = "scan"
    if config.size is not None and config.size > 0:
        params["size"] = str(config.size)
    return params


def build_scan_body(config: ScrollConfiguration) -> dict:
    """JSON body for the initiation request; empty when no query is set."""
    body = {}
    query = serialize_query(config.query)
    if query is not None:
        body["query"] = query
    return body


def start_scroll(transport: TransportProtocol, config: ScrollConfiguration) -> ScrollCursor:
    """
    Open a scroll context and return a cursor seeded with the response.
    
    The initiation response is not expected to contain documents; it
    reports the total hit count and the first scroll id.
    
    Args:
        transport: Performs the HTTP exchange
        config: What to scan and how
    
    Returns:
        A fresh ScrollCursor
    
    Raises:
        TransportError: If the request failed or returned non-2xx
        DecodeError: If the response could not be decoded
    """
    path = build_scan_path(config)
    text = transport.perform_request(
        "POST",
        path,
        params=build_scan_params(config),
        body=build_scan_body(config),
        debug=config.debug,
    )
    result = decode_page(text)
    logger.debug("Opened scroll on %s with %d total hits", path, result.total_hits)
    
    return ScrollCursor(
        transport,
        result,
        keep_alive=config.keep_alive,
        pretty=config.pretty,
        debug=config.debug,
    )


class ScanService:
    """
    Builder for a scan.
    
    Indices and types accumulate across calls in call order. build()
    returns an immutable ScrollConfiguration; the builder itself is not
    meant to be shared.
    
    Example:
        cursor = (
            ScanService(transport)
            .index("logs-2024")
            .types("event", "audit")
            .query({"term": {"level": "error"}})
            .size(500)
            .do()
        )
    """
    
    def __init__(self, transport: TransportProtocol):
        self._transport = transport
        self._indices: list[str] = []
        self._types: list[str] = []
        self._query: Optional[QueryLike] = MatchAllQuery()
        self._keep_alive: Optional[str] = None
        self._size: Optional[int] = None
        self._pretty = False
        self._debug = False
    
    def index(self, index: str) -> "ScanService":
        self._indices.append(index)
        return self
    
    def indices(self, *indices: str) -> "ScanService":
        self._indices.extend(indices)
        return self
    
    def type(self, typ: str) -> "ScanService":
        self._types.append(typ)
        return self
    
    def types(self, *types: str) -> "ScanService":
        self._types.extend(types)
        return self
    
    def keep_alive(self, keep_alive: str) -> "ScanService":
        """Time the scroll context stays open between steps, e.g. "5m"."""
        self._keep_alive = keep_alive
        return self
    
    def scroll(self, keep_alive: str) -> "ScanService":
        """Alias for keep_alive()."""
        return self.keep_alive(keep_alive)
    
    def query(self, query: Optional[QueryLike]) -> "ScanService":
        self._query = query
        return self
    
    def size(self, size: int) -> "ScanService":
        self._size = size
        return self
    
    def pretty(self, pretty: bool) -> "ScanService":
        self._pretty = pretty
        return self
    
    def debug(self, debug: bool) -> "ScanService":
        self._debug = debug
        return self
    
    def build(self) -> ScrollConfiguration:
        """
        Freeze the builder's state.
        
        Raises:
            pydantic.ValidationError: If the query is neither a dict nor
                an object with source()
        """
        return ScrollConfiguration(
            indices=tuple(self._indices),
            types=tuple(self._types),
            query=self._query,
            keep_alive=self._keep_alive,
            size=self._size,
            pretty=self._pretty,
            debug=self._debug,
        )
    
    def do(self) -> ScrollCursor:
        """Build the configuration and open the scroll."""
        return start_scroll(self._transport, self.build())
