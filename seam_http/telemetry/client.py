"""
Traced HTTP client requests

Wraps a pending ClientRequest so that sending it:
1. starts a client-kind span named after the request, with its attributes
2. injects the span's context into the request headers
3. delegates the send to the underlying HTTP client
4. records the status code or the error on the span and ends it

The response or error is handed back to the caller unchanged.
"""

import time
import logging
from typing import Any, AsyncIterable, Awaitable, Callable, Optional, TYPE_CHECKING

from opentelemetry import context as otel_context
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import SpanKind, Status, StatusCode

from seam_http.config import TracingConfig
from seam_http.telemetry.attributes import extract_attributes
from seam_http.telemetry.carrier import HeaderCarrier, HEADER_SETTER
from seam_http.telemetry.naming import span_name
from seam_http.telemetry.outcome import record_error, record_response

if TYPE_CHECKING:
    from seam_http.adapters.request import ClientRequest

logger = logging.getLogger(__name__)

SendFn = Callable[["ClientRequest"], Awaitable[Any]]


class SpanGuard:
    """Ends the request span when the traced block exits with the span still open

    Covers cancellation while awaiting the send and failures before the send
    (e.g. an invalid propagation header). Exceptions are never suppressed.
    """

    def __init__(self, cx: Context, record_exception: bool = True):
        self.cx = cx
        self.record_exception = record_exception
        self.closed = False

    def __enter__(self) -> "SpanGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self.closed:
            self.closed = True
            span = trace.get_current_span(self.cx)
            if exc_type is not None:
                span.set_status(Status(StatusCode.ERROR, f"request abandoned: {exc_type.__name__}"))
                logger.warning(f"Request span closed on abandonment: {exc_type.__name__}")
            span.end()
        return False

    def record_response(self, response) -> None:
        record_response(response, self.cx)
        self.closed = True

    def record_error(self, err: BaseException) -> None:
        record_error(err, self.cx, record_exception=self.record_exception)
        self.closed = True


class InstrumentedClientRequest:
    """A ClientRequest that is traced when sent

    Each send operation can be called once per instance; all variants share
    the same span lifecycle and differ only in how the body is attached.
    """

    def __init__(self, cx: Optional[Context], request: "ClientRequest", config: Optional[TracingConfig] = None):
        self.cx = cx
        self.request = request
        self.config = config or TracingConfig.default()
        self._sent = False

    async def send(self):
        """Send the traced request with an empty body"""
        return await self._trace_request(lambda request: request.send())

    async def send_body(self, body):
        """Send the traced request with the given bytes or str body"""
        return await self._trace_request(lambda request: request.send_body(body))

    async def send_form(self, value):
        """Send the traced request with a form-urlencoded body"""
        return await self._trace_request(lambda request: request.send_form(value))

    async def send_json(self, value):
        """Send the traced request with a JSON body"""
        return await self._trace_request(lambda request: request.send_json(value))

    async def send_stream(self, stream: AsyncIterable[bytes]):
        """Send the traced request with a streaming body"""
        return await self._trace_request(lambda request: request.send_stream(stream))

    async def _trace_request(self, send: SendFn):
        if self._sent:
            raise RuntimeError("Traced request has already been sent")
        self._sent = True

        request = self.request
        tracer = self.config.get_tracer()
        client_metrics = self.config.get_metrics()

        span = tracer.start_span(
            span_name(request.method, request.url),
            context=self.cx,
            kind=SpanKind.CLIENT,
            attributes=extract_attributes(request),
        )
        cx = trace.set_span_in_context(span, self.cx)

        with SpanGuard(cx, record_exception=self.config.record_exception) as guard:
            self.config.get_propagator().inject(
                HeaderCarrier(request, self.config.header_policy),
                context=cx,
                setter=HEADER_SETTER,
            )

            if client_metrics is not None:
                _record_metrics(client_metrics.record_request, request.method)

            start_time = time.time()
            try:
                logger.debug(f"Sending traced request {request.method} {request.url}")
                response = await send(request)
            except Exception as e:
                latency_ms = (time.time() - start_time) * 1000
                logger.error(f"Traced request {request.method} {request.url} failed after {latency_ms:.2f}ms: {e!r}")
                guard.record_error(e)
                if client_metrics is not None:
                    _record_metrics(client_metrics.record_error, request.method, e)
                    _record_metrics(client_metrics.record_latency, request.method, latency_ms)
                raise

            latency_ms = (time.time() - start_time) * 1000
            logger.debug(f"Traced request {request.method} {request.url} -> {response.status_code}, latency: {latency_ms:.2f}ms")
            guard.record_response(response)
            if client_metrics is not None:
                _record_metrics(client_metrics.record_latency, request.method, latency_ms,
                                {"http.status_code": int(response.status_code)})

        return response


def _record_metrics(record: Callable[..., None], *args) -> None:
    """Run a metrics recording call; failures are logged and never reach the caller"""
    try:
        record(*args)
    except Exception as e:
        logger.warning(f"Failed to record client metrics: {e!r}")


def trace_request(request: "ClientRequest", config: Optional[TracingConfig] = None) -> InstrumentedClientRequest:
    """Trace a request under the currently active context

    Example:
        async with HttpxClient() as client:
            response = await trace_request(client.get("http://localhost:8080")).send()
    """
    return trace_request_with_context(request, otel_context.get_current(), config)


def trace_request_with_context(request: "ClientRequest",
                               cx: Context,
                               config: Optional[TracingConfig] = None) -> InstrumentedClientRequest:
    """Trace a request as a child of the given context"""
    return InstrumentedClientRequest(cx, request, config)
