"""DataFrame conversion utilities."""

from typing import Iterable

import pandas as pd

from scanscroll.models import SearchHit


def hits_to_dataframe(hits: Iterable[SearchHit]) -> pd.DataFrame:
    """
    Convert scrolled documents to a pandas DataFrame.
    
    Each row holds the document's _index and _id followed by the
    top-level fields of its _source. Nested objects stay as dicts.
    A _source field named _index or _id is dropped in favour of the
    hit metadata.
    
    Args:
        hits: Iterable of SearchHit (e.g., from ScrollCursor.iter_documents)
    
    Returns:
        pandas DataFrame with one row per document
    
    Example:
        df = hits_to_dataframe(cursor.iter_documents())
        print(df.columns)  # Index(['_index', '_id', 'user', 'message'], ...)
    """
    rows = []
    for hit in hits:
        row = {"_index": hit.index, "_id": hit.id}
        for key, value in (hit.source or {}).items():
            # Hit metadata wins over same-named _source fields
            row.setdefault(key, value)
        rows.append(row)
    
    return pd.DataFrame(rows)
