"""Tests for scanscroll.client module."""

import pytest
import respx
from httpx import Response

from scanscroll.client import SearchClient
from scanscroll.config import SearchSettings
from scanscroll.cursor import ScrollCursor
from scanscroll.exceptions import MissingScrollIdError
from scanscroll.scan import ScanService, ScrollConfiguration
from scanscroll.transport import Transport


@pytest.fixture
def client(settings):
    """SearchClient with test settings."""
    return SearchClient(settings)


class TestSearchClientInit:
    """Tests for SearchClient initialization."""
    
    def test_loads_settings_from_env(self, monkeypatch):
        """Client loads settings from environment if not provided."""
        monkeypatch.setenv("SCANSCROLL_BASE_URL", "https://env.example.com")
        
        client = SearchClient()
        
        assert client.settings.base_url == "https://env.example.com"
        assert isinstance(client.transport, Transport)
    
    def test_accepts_explicit_settings(self, settings):
        """Client accepts explicit settings."""
        client = SearchClient(settings)
        
        assert client.settings is settings
        assert client.transport.settings is settings
    
    def test_accepts_transport_override(self, settings, scripted_transport):
        """A custom transport replaces the default one."""
        transport = scripted_transport([])
        
        client = SearchClient(settings, transport=transport)
        
        assert client.transport is transport
        assert client.scan()._transport is transport


class TestSearchClientScan:
    """Tests for scanning through the client."""
    
    def test_scan_returns_bound_service(self, client):
        """scan() returns a ScanService."""
        assert isinstance(client.scan(), ScanService)
    
    @respx.mock
    def test_scan_end_to_end(self, client, base_url, make_page):
        """Initiation then continuation until an empty page."""
        respx.post(f"{base_url}/logs/_search").mock(
            return_value=Response(200, text=make_page(scroll_id="s1", total=3))
        )
        scroll_route = respx.post(f"{base_url}/_search/scroll")
        scroll_route.side_effect = [
            Response(200, text=make_page(scroll_id="s2", total=3, docs=[1, 2])),
            Response(200, text=make_page(scroll_id="s3", total=3, docs=[3])),
            Response(200, text=make_page(scroll_id="s4", total=3, docs=[])),
        ]
        
        cursor = client.scan().index("logs").size(2).do()
        pages = list(cursor)
        
        assert isinstance(cursor, ScrollCursor)
        assert [len(page.documents) for page in pages] == [2, 1]
        assert [call.request.content for call in scroll_route.calls] == [b"s1", b"s2", b"s3"]
        assert cursor.total_hits() == 3
    
    def test_scroll_documents(self, settings, scripted_transport, make_page):
        """scroll_documents yields every document across pages."""
        transport = scripted_transport([
            make_page(scroll_id="s1", total=3),
            make_page(scroll_id="s2", total=3, docs=[1, 2]),
            make_page(scroll_id="s3", total=3, docs=[3]),
            make_page(scroll_id="s4", total=3, docs=[]),
        ])
        client = SearchClient(settings, transport=transport)
        
        ids = [hit.id for hit in client.scroll_documents(ScrollConfiguration(indices=("logs",)))]
        
        assert ids == ["1", "2", "3"]
        assert transport.calls[0]["path"] == "/logs/_search"
    
    def test_scroll_documents_raises_without_scroll_id(self, settings, scripted_transport, make_page):
        """A server that never issues a scroll id raises MissingScrollIdError."""
        transport = scripted_transport([make_page(scroll_id=None, total=3)])
        client = SearchClient(settings, transport=transport)
        
        with pytest.raises(MissingScrollIdError):
            list(client.scroll_documents(ScrollConfiguration()))
    
    def test_to_dataframe(self, settings, scripted_transport, make_page):
        """to_dataframe collects all documents into one DataFrame."""
        transport = scripted_transport([
            make_page(scroll_id="s1", total=2),
            make_page(scroll_id="s2", total=2, docs=[1, 2]),
            make_page(scroll_id="s3", total=2, docs=[]),
        ])
        client = SearchClient(settings, transport=transport)
        
        df = client.to_dataframe(ScrollConfiguration())
        
        assert len(df) == 2
        assert df["n"].tolist() == [1, 2]
        assert df["_id"].tolist() == ["1", "2"]
    
    def test_context_manager_closes_transport(self, settings):
        """Leaving the with-block closes the transport."""
        closed = []
        
        class ClosingTransport:
            def perform_request(self, *args, **kwargs):
                raise AssertionError("not expected")
            
            def close(self):
                closed.append(True)
        
        with SearchClient(settings, transport=ClosingTransport()):
            pass
        
        assert closed == [True]
