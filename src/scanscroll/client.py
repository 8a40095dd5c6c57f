"""SearchClient - main entry point for scanscroll."""

from __future__ import annotations

from typing import Iterator, Optional

import pandas as pd

from scanscroll.config import SearchSettings
from scanscroll.models import SearchHit
from scanscroll.scan import ScanService, ScrollConfiguration, start_scroll
from scanscroll.transport import Transport, TransportProtocol
from scanscroll._utils.dataframe import hits_to_dataframe


class SearchClient:
    """
    Client for scanning large result sets from a search cluster.
    
    Reads configuration from environment variables (SCANSCROLL_*) automatically.
    All calls block the calling thread for one HTTP round trip per page.
    
    Example:
        client = SearchClient()
        cursor = client.scan().index("logs").size(1000).do()
        for page in cursor:
            print(len(page.documents))
    
    DataFrame Example:
        config = client.scan().index("logs").keep_alive("1m").build()
        df = client.to_dataframe(config)
    
    Attributes:
        settings: SearchSettings instance with connection configuration
    """
    
    def __init__(
        self,
        settings: Optional[SearchSettings] = None,
        transport: Optional[TransportProtocol] = None,
    ):
        """
        Initialize the search client.
        
        Args:
            settings: Optional SearchSettings instance. If not provided,
                     settings are loaded from environment variables.
            transport: Optional transport override. Defaults to a
                     Transport built from settings.
        """
        self.settings = settings or SearchSettings()
        self.transport = transport or Transport(self.settings)
    
    def __enter__(self) -> "SearchClient":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()
    
    def scan(self) -> ScanService:
        """
        Start building a scan against this client's cluster.
        
        Returns:
            ScanService bound to this client's transport
        """
        return ScanService(self.transport)
    
    def scroll_documents(self, config: ScrollConfiguration) -> Iterator[SearchHit]:
        """
        Open a scroll and yield every matching document.
        
        Args:
            config: Scan configuration from ScanService.build()
        
        Yields:
            Individual SearchHit documents, page by page
        
        Raises:
            TransportError: If any request fails or returns non-2xx
            DecodeError: If any response cannot be decoded
            MissingScrollIdError: If the server stops issuing scroll ids
        """
        cursor = start_scroll(self.transport, config)
        yield from cursor.iter_documents()
    
    def to_dataframe(self, config: ScrollConfiguration) -> pd.DataFrame:
        """
        Scroll through all matching documents and collect them into a DataFrame.
        
        Args:
            config: Scan configuration from ScanService.build()
        
        Returns:
            pandas DataFrame with one row per document
        """
        return hits_to_dataframe(self.scroll_documents(config))
