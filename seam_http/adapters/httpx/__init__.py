"""
httpx Adapter

HTTP client adapter built on httpx.AsyncClient.
"""

from seam_http.adapters.httpx.client import HttpxClient

__all__ = [
    "HttpxClient",
]
