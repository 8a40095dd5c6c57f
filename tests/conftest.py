"""Shared pytest fixtures for scanscroll tests."""

import json

import pytest

from scanscroll.config import SearchSettings


BASE_URL = "http://search.test:9200"


class ScriptedTransport:
    """Transport stand-in that replays canned bodies and records every call."""
    
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []
    
    @property
    def call_count(self):
        return len(self.calls)
    
    def perform_request(self, method, path, params=None, body=None, debug=False):
        self.calls.append(
            {"method": method, "path": path, "params": params, "body": body, "debug": debug}
        )
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {path}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _page(scroll_id="scroll-1", total=3, docs=None):
    """Build a search response body."""
    hits = [
        {"_index": "logs", "_type": "event", "_id": str(doc_id), "_score": None, "_source": {"n": doc_id}}
        for doc_id in (docs or [])
    ]
    body = {
        "took": 1,
        "timed_out": False,
        "hits": {"total": total, "max_score": None, "hits": hits},
    }
    if scroll_id is not None:
        body["_scroll_id"] = scroll_id
    return json.dumps(body)


@pytest.fixture
def make_page():
    """Factory for JSON search response bodies."""
    return _page


@pytest.fixture
def scripted_transport():
    """Factory for a ScriptedTransport replaying the given bodies."""
    return ScriptedTransport


@pytest.fixture
def settings():
    """Return test settings pointing at a fake cluster."""
    return SearchSettings(base_url=BASE_URL)


@pytest.fixture
def base_url():
    """Base URL for mocked API."""
    return BASE_URL
