"""
Pending outgoing HTTP request

A ClientRequest is built by an HTTP client adapter, can be decorated with
headers and a peer address, and is sent exactly once through one of its send
operations. trace_request() wraps it for tracing.
"""

from typing import Any, AsyncIterable, Optional, TYPE_CHECKING

import httpx
from opentelemetry.context import Context

from seam_http.config import TracingConfig
from seam_http.telemetry.client import (
    InstrumentedClientRequest,
    trace_request,
    trace_request_with_context,
)

if TYPE_CHECKING:
    from seam_http.adapters.adapter_interface import HttpClientAdapterInterface

DEFAULT_HTTP_VERSION = "HTTP/1.1"


class ClientRequest:
    """Outgoing request bound to the client adapter that will send it"""

    def __init__(self,
                 client: "HttpClientAdapterInterface",
                 method: str,
                 url,
                 headers=None,
                 version: str = DEFAULT_HTTP_VERSION,
                 peer_addr: Optional[str] = None):
        """Initialize a pending request

        Args:
            client: Adapter performing the network call
            method: HTTP method token, uppercased
            url: Absolute or relative (to the client's base URL) request URL
            headers: Initial headers
            version: HTTP version, e.g. "HTTP/1.1". Reported as http.flavor;
                it is the version declared for the request, not forwarded to
                the transport, which negotiates its own
            peer_addr: Textual peer address, when known before sending
        """
        self.client = client
        self.method = method.upper()
        self.url = httpx.URL(url)
        self.headers = httpx.Headers(headers)
        self.version = version
        self.peer_addr = peer_addr
        self._sent = False

    def __repr__(self) -> str:
        return f"<ClientRequest {self.method} {self.url}>"

    def insert_header(self, key: str, value: str) -> "ClientRequest":
        """Set a header, replacing any existing value"""
        self.headers[key] = value
        return self

    def address(self, peer_addr: str) -> "ClientRequest":
        """Record the peer address the request will be sent to"""
        self.peer_addr = peer_addr
        return self

    def trace_request(self, config: Optional[TracingConfig] = None) -> InstrumentedClientRequest:
        """Trace this request using the current context"""
        return trace_request(self, config)

    def trace_request_with_context(self, cx: Context,
                                   config: Optional[TracingConfig] = None) -> InstrumentedClientRequest:
        """Trace this request using the given context"""
        return trace_request_with_context(self, cx, config)

    async def send(self) -> httpx.Response:
        self._mark_sent()
        return await self.client.send(self)

    async def send_body(self, body) -> httpx.Response:
        self._mark_sent()
        return await self.client.send_body(self, body)

    async def send_form(self, value: Any) -> httpx.Response:
        self._mark_sent()
        return await self.client.send_form(self, value)

    async def send_json(self, value: Any) -> httpx.Response:
        self._mark_sent()
        return await self.client.send_json(self, value)

    async def send_stream(self, stream: AsyncIterable[bytes]) -> httpx.Response:
        self._mark_sent()
        return await self.client.send_stream(self, stream)

    def _mark_sent(self):
        if self._sent:
            raise RuntimeError(f"Request {self.method} {self.url} has already been sent")
        self._sent = True
