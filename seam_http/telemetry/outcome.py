"""
Outcome recording on a request span

Exactly one of these runs per traced request; both end the span.
"""

import logging

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Status, StatusCode

from seam_http.telemetry.attributes import HTTP_STATUS_CODE

logger = logging.getLogger(__name__)


def describe_error(err: BaseException) -> str:
    """Textual form of an error, the class name when str() is empty"""
    return str(err) or type(err).__name__


def record_response(response, cx: Context) -> None:
    """Attach the response status code to the span and end it

    Args:
        response: Response with an integer ``status_code``
        cx: Context carrying the request span
    """
    span = trace.get_current_span(cx)
    span.set_attribute(HTTP_STATUS_CODE, int(response.status_code))
    span.end()


def record_error(err: BaseException, cx: Context, record_exception: bool = True) -> None:
    """Mark the span as failed with the error's description and end it

    Args:
        err: Error raised by the underlying client
        cx: Context carrying the request span
        record_exception: Also attach an exception event to the span
    """
    span = trace.get_current_span(cx)
    if record_exception:
        span.record_exception(err)
    span.set_status(Status(StatusCode.ERROR, describe_error(err)))
    span.end()
    logger.debug(f"Recorded request error on span: {describe_error(err)}")
