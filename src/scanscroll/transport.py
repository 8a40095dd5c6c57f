"""Blocking HTTP transport for the search cluster."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Union

import httpx

from scanscroll.config import SearchSettings
from scanscroll.exceptions import TransportError

logger = logging.getLogger(__name__)

Body = Union[str, dict, None]


class TransportProtocol(Protocol):
    """Anything that can perform one blocking request and return the body text."""
    
    def perform_request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        body: Body = None,
        debug: bool = False,
    ) -> str: ...


class Transport:
    """
    Performs single HTTP exchanges against the search cluster.
    
    Without an injected client, a new httpx.Client is opened for every
    request and closed right after, so no connection is held between
    scroll steps. An injected client is reused for every request and
    becomes owned by the transport: close() closes it. A closed transport
    rejects further requests.
    
    Attributes:
        settings: SearchSettings with base URL, credentials and timeout
    
    Example:
        transport = Transport(SearchSettings())
        text = transport.perform_request("POST", "/_search/scroll", body=scroll_id)
    """
    
    def __init__(
        self,
        settings: Optional[SearchSettings] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.settings = settings or SearchSettings()
        self._client = client
        self._closed = False
    
    def _new_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.settings.base_url,
            auth=self.settings.auth,
            timeout=self.settings.timeout,
        )
    
    def perform_request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        body: Body = None,
        debug: bool = False,
    ) -> str:
        """
        Send one request and return the response text.
        
        Args:
            method: HTTP method
            path: Path relative to settings.base_url, including leading slash
            params: Query parameters, sent in the given order
            body: dict is sent as JSON, str is sent verbatim, None sends nothing
            debug: Log the full exchange at INFO instead of DEBUG
        
        Returns:
            Body of a 2xx response
        
        Raises:
            TransportError: On a non-2xx status, if the request failed, or
                if the transport was closed
        """
        if self._closed:
            raise TransportError(f"Transport is closed: {method} {path}")
        
        kwargs: dict[str, Any] = {"params": params}
        if isinstance(body, str):
            kwargs["content"] = body.encode("utf-8")
            kwargs["headers"] = {"Content-Type": "text/plain; charset=utf-8"}
        elif body is not None:
            kwargs["json"] = body
        
        level = logging.INFO if debug else logging.DEBUG
        logger.log(level, "%s %s params=%s body=%r", method, path, params, body)
        
        try:
            if self._client is not None:
                response = self._client.request(method, path, **kwargs)
            else:
                with self._new_client() as client:
                    response = client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {method} {path}: {e}") from e
        
        logger.log(level, "%s %s -> %d %s", method, path, response.status_code, response.text)
        
        if not response.is_success:
            raise TransportError(
                f"{method} {path} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return response.text
    
    def close(self) -> None:
        """Close the injected client, if any, and reject further requests."""
        if self._client is not None:
            self._client.close()
        self._closed = True
