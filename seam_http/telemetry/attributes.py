"""
Span attributes of an outgoing HTTP request
"""

from typing import Dict, TYPE_CHECKING

from opentelemetry.util.types import AttributeValue

if TYPE_CHECKING:
    from seam_http.adapters.request import ClientRequest

HTTP_METHOD = "http.method"
HTTP_URL = "http.url"
HTTP_FLAVOR = "http.flavor"
HTTP_STATUS_CODE = "http.status_code"
NET_PEER_IP = "net.peer.ip"


def http_flavor(version: str) -> str:
    """HTTP version without the "HTTP/" prefix, e.g. "HTTP/1.1" -> "1.1" """
    return version.replace("HTTP/", "")


def extract_attributes(request: "ClientRequest") -> Dict[str, AttributeValue]:
    """Build the initial attribute set of a client span

    Must be called before header injection; only the method, URL, version
    and peer address of the request are read.

    Args:
        request: The pending request

    Returns:
        Dict: Ordered attributes; net.peer.ip only when the peer is known
    """
    attributes = {
        HTTP_METHOD: request.method.upper(),
        HTTP_URL: str(request.url),
        HTTP_FLAVOR: http_flavor(request.version),
    }

    if request.peer_addr is not None:
        attributes[NET_PEER_IP] = str(request.peer_addr)

    return attributes
