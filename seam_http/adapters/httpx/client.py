"""
httpx client adapter

Sends ClientRequests through an httpx.AsyncClient. Relative request URLs
are resolved against the client's base URL when the request is sent.
"""

import time
import logging
from typing import Any, AsyncIterable, Optional

import httpx

from seam_http.adapters.adapter_interface import HttpClientAdapterInterface
from seam_http.adapters.request import ClientRequest, DEFAULT_HTTP_VERSION
from seam_http.utils.serialization import (
    encode_form,
    encode_json,
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
)

logger = logging.getLogger(__name__)


class HttpxClient(HttpClientAdapterInterface):
    """
    httpx-backed client adapter, performs the network call for a ClientRequest
    """

    def __init__(self,
                 base_url: str = "",
                 timeout_ms: int = 5000,
                 client: Optional[httpx.AsyncClient] = None,
                 **client_kwargs):
        """Initialize the httpx client

        Args:
            base_url: Base URL that relative request URLs resolve against
            timeout_ms: Request timeout (milliseconds)
            client: Existing httpx.AsyncClient to send through; it is not
                closed by aclose()
            **client_kwargs: Additional kwargs passed to httpx.AsyncClient;
                http2=True makes requests declare "HTTP/2"
        """
        self.timeout_ms = timeout_ms
        if client_kwargs.get("http2"):
            self.default_version = "HTTP/2"
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                base_url=base_url,
                timeout=timeout_ms / 1000.0,
                **client_kwargs
            )
        self.client = client
        logger.info(f"httpx client created, base URL: {self.client.base_url}, timeout: {timeout_ms}ms")

    async def aclose(self) -> None:
        """Close the underlying httpx client if this adapter created it"""
        if self._owns_client:
            await self.client.aclose()

    async def send(self, request: ClientRequest) -> httpx.Response:
        return await self._dispatch(request)

    async def send_body(self, request: ClientRequest, body) -> httpx.Response:
        return await self._dispatch(request, content=body)

    async def send_form(self, request: ClientRequest, value: Any) -> httpx.Response:
        content = encode_form(value)
        request.headers.setdefault("content-type", FORM_CONTENT_TYPE)
        return await self._dispatch(request, content=content)

    async def send_json(self, request: ClientRequest, value: Any) -> httpx.Response:
        content = encode_json(value)
        request.headers.setdefault("content-type", JSON_CONTENT_TYPE)
        return await self._dispatch(request, content=content)

    async def send_stream(self, request: ClientRequest, stream: AsyncIterable[bytes]) -> httpx.Response:
        return await self._dispatch(request, content=stream)

    async def _dispatch(self, request: ClientRequest, content=None) -> httpx.Response:
        http_request = self.client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=content,
        )

        start_time = time.time()
        logger.debug(f"Sending request: {http_request.method} {http_request.url}")
        response = await self.client.send(http_request)
        latency_ms = (time.time() - start_time) * 1000
        logger.debug(f"Received response {response.status_code}, latency: {latency_ms:.2f}ms")

        return response
