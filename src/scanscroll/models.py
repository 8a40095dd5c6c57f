"""Result page models decoded from search responses."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from scanscroll.exceptions import DecodeError


class SearchHit(BaseModel):
    """
    A single matched document.
    
    Attributes:
        index: Index the document lives in
        type: Document type (legacy mapping type)
        id: Document id
        score: Relevance score, None under scan ordering
        source: The stored document body
    """
    
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")
    
    index: Optional[str] = Field(default=None, alias="_index")
    type: Optional[str] = Field(default=None, alias="_type")
    id: Optional[str] = Field(default=None, alias="_id")
    score: Optional[float] = Field(default=None, alias="_score")
    source: Optional[dict[str, Any]] = Field(default=None, alias="_source")


class SearchHits(BaseModel):
    """The hits block of a response: total count plus this page's documents."""
    
    model_config = ConfigDict(frozen=True, extra="allow")
    
    total: int = 0
    max_score: Optional[float] = None
    hits: tuple[SearchHit, ...] = ()
    
    @field_validator("total", mode="before")
    @classmethod
    def _unwrap_total(cls, value: Any) -> Any:
        # Newer servers report {"value": n, "relation": "eq"}
        if isinstance(value, dict):
            return value.get("value", 0)
        return value


class ResultPage(BaseModel):
    """
    One response of a scroll: documents for this step plus the scroll id.
    
    Pages are immutable snapshots. The cursor swaps in a new page on
    every step instead of updating the previous one, so a page kept by
    the caller never changes underneath them.
    
    Attributes:
        scroll_id: Opaque token to present on the next continuation
        took: Server-side time in milliseconds
        timed_out: Whether the server cut the search short
        hits: Total count and documents, None if the server sent none
    """
    
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")
    
    scroll_id: Optional[str] = Field(default=None, alias="_scroll_id")
    took: Optional[int] = None
    timed_out: Optional[bool] = None
    hits: Optional[SearchHits] = None
    
    @property
    def documents(self) -> tuple[SearchHit, ...]:
        """Documents in this page, empty if there is no hits block."""
        if self.hits is None:
            return ()
        return self.hits.hits
    
    @property
    def total_hits(self) -> int:
        """Total hits for the whole scroll, 0 if never reported."""
        if self.hits is None:
            return 0
        return self.hits.total
    
    @property
    def is_terminal(self) -> bool:
        """True when this page signals that no more documents follow."""
        return self.hits is None or not self.hits.hits or self.hits.total == 0


def decode_page(text: str) -> ResultPage:
    """
    Decode a response body into a ResultPage.
    
    Args:
        text: Raw JSON response body
    
    Returns:
        Decoded, validated page
    
    Raises:
        DecodeError: If the body is not JSON, has the wrong shape, or
            reports zero total hits alongside documents
    """
    try:
        page = ResultPage.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError(f"Could not decode search response: {e}") from e
    
    if page.hits is not None and page.hits.total == 0 and page.hits.hits:
        raise DecodeError(
            f"Inconsistent page: total hits is 0 but {len(page.hits.hits)} documents were returned"
        )
    return page
