"""
HTTP client adapter interface

Defines the interface every HTTP client adapter implements. The request
tracer only relies on these operations, so the transport can change without
touching the tracing code.
"""

import abc
from typing import Any, AsyncIterable, Optional

from seam_http.adapters.request import ClientRequest, DEFAULT_HTTP_VERSION


class HttpClientAdapterInterface(abc.ABC):
    """HTTP client adapter interface, defines the methods all client adapters must implement"""

    # HTTP version declared on requests built without an explicit one
    default_version = DEFAULT_HTTP_VERSION

    def build_request(self,
                      method: str,
                      url,
                      headers=None,
                      version: Optional[str] = None,
                      peer_addr: Optional[str] = None) -> ClientRequest:
        """Create a pending request bound to this client

        Args:
            method: HTTP method
            url: Request URL
            headers: Initial request headers
            version: HTTP version, defaults to the adapter's default_version
            peer_addr: Peer address, when known

        Returns:
            ClientRequest: The pending request
        """
        return ClientRequest(self, method, url, headers=headers, version=version or self.default_version, peer_addr=peer_addr)

    def get(self, url, **kwargs) -> ClientRequest:
        return self.build_request("GET", url, **kwargs)

    def head(self, url, **kwargs) -> ClientRequest:
        return self.build_request("HEAD", url, **kwargs)

    def options(self, url, **kwargs) -> ClientRequest:
        return self.build_request("OPTIONS", url, **kwargs)

    def post(self, url, **kwargs) -> ClientRequest:
        return self.build_request("POST", url, **kwargs)

    def put(self, url, **kwargs) -> ClientRequest:
        return self.build_request("PUT", url, **kwargs)

    def patch(self, url, **kwargs) -> ClientRequest:
        return self.build_request("PATCH", url, **kwargs)

    def delete(self, url, **kwargs) -> ClientRequest:
        return self.build_request("DELETE", url, **kwargs)

    @abc.abstractmethod
    async def send(self, request: ClientRequest) -> Any:
        """Send the request without a body

        Args:
            request: The pending request, headers already final

        Returns:
            The response object, exposing ``status_code``

        Raises:
            Exception: Any transport error, propagated unchanged
        """
        pass

    @abc.abstractmethod
    async def send_body(self, request: ClientRequest, body) -> Any:
        """Send the request with an opaque bytes or str body"""
        pass

    @abc.abstractmethod
    async def send_form(self, request: ClientRequest, value: Any) -> Any:
        """Send the request with a form-urlencoded body"""
        pass

    @abc.abstractmethod
    async def send_json(self, request: ClientRequest, value: Any) -> Any:
        """Send the request with a JSON body"""
        pass

    @abc.abstractmethod
    async def send_stream(self, request: ClientRequest, stream: AsyncIterable[bytes]) -> Any:
        """Send the request with a streaming body"""
        pass

    @abc.abstractmethod
    async def aclose(self) -> None:
        """Close connections and release resources"""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
