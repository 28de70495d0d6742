"""
HTTP Client Adapters Module

Adapter implementations that perform the network call of a ClientRequest:
- httpx: httpx.AsyncClient adapter

Requests built by any adapter can be wrapped with trace_request() for
client span creation and trace context injection.
"""

from .adapter_interface import HttpClientAdapterInterface
from .request import ClientRequest
from .httpx import HttpxClient

__all__ = [
    "HttpClientAdapterInterface",
    "ClientRequest",
    "HttpxClient",
]
