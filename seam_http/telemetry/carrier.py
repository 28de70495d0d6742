"""
Header carrier for trace context injection

Write-only view over an outgoing request's headers. The propagator calls
HeaderSetter.set for each key/value pair it wants to transmit; the carrier
validates the pair and writes it onto the request.
"""

import re
import logging
from typing import TYPE_CHECKING

from opentelemetry.propagators.textmap import Setter

from seam_http.config import HeaderPolicy

if TYPE_CHECKING:
    from seam_http.adapters.request import ClientRequest

logger = logging.getLogger(__name__)

# RFC 9110 field-name token
_HEADER_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# Visible ASCII, space and horizontal tab
_HEADER_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")


class InvalidHeaderError(ValueError):
    """Raised when a propagator emits a header that cannot go on the wire"""

    def __init__(self, key, value, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid propagation header {key!r}: {reason}")


def validate_header(key, value) -> None:
    """Check that key/value form a valid HTTP header field

    Raises:
        InvalidHeaderError: if the name is not a token or the value contains
            control or non-ASCII characters
    """
    if not isinstance(key, str) or not _HEADER_NAME_RE.fullmatch(key):
        raise InvalidHeaderError(key, value, "must be header name")
    if not isinstance(value, str) or not _HEADER_VALUE_RE.fullmatch(value):
        raise InvalidHeaderError(key, value, "must be a header value")


class HeaderCarrier:
    """Write-only carrier backed by a ClientRequest's headers"""

    def __init__(self, request: "ClientRequest", policy: HeaderPolicy = HeaderPolicy.RAISE):
        self.request = request
        self.policy = policy

    def set(self, key: str, value: str) -> None:
        """Write or overwrite a header on the underlying request

        Args:
            key: Header field name
            value: Header field value
        """
        try:
            validate_header(key, value)
        except InvalidHeaderError as e:
            if self.policy is HeaderPolicy.RAISE:
                raise
            logger.warning(f"Dropping propagation header: {e}")
            return

        self.request.headers[key] = value
        logger.debug(f"Injected header {key} into {self.request.method} {self.request.url}")


class HeaderSetter(Setter[HeaderCarrier]):
    """Adapts HeaderCarrier to the OpenTelemetry propagator setter interface"""

    def set(self, carrier: HeaderCarrier, key: str, value: str) -> None:
        carrier.set(key, value)


HEADER_SETTER = HeaderSetter()
