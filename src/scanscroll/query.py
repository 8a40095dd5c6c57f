"""Opaque query objects accepted by a scan."""

from typing import Any, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class Query(Protocol):
    """Any object that can render itself as a JSON-serializable query body."""
    
    def source(self) -> Any: ...


class MatchAllQuery:
    """Matches every document. Used when a scan sets no query."""
    
    def source(self) -> dict:
        return {"match_all": {}}
    
    def __eq__(self, other: object) -> bool:
        return isinstance(other, MatchAllQuery)
    
    def __hash__(self) -> int:
        return hash(MatchAllQuery)
    
    def __repr__(self) -> str:
        return "MatchAllQuery()"


QueryLike = Union[Query, dict]


def serialize_query(query: Optional[QueryLike]) -> Optional[Any]:
    """
    Render a query for the request body.
    
    A dict is taken as already serialized. None yields None so the
    caller can leave the key out entirely.
    """
    if query is None:
        return None
    if isinstance(query, dict):
        return query
    if isinstance(query, Query):
        return query.source()
    raise TypeError(f"Unsupported query object: {type(query).__name__}")
