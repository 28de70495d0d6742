"""
Seam HTTP: traced outgoing HTTP client requests

Wraps outgoing HTTP requests with OpenTelemetry client spans:
- telemetry: span lifecycle, header carrier, attributes, outcome recording
- adapters: HTTP client adapters (httpx) that perform the actual send
- config: tracer/propagator/meter wiring for the instrumentation

Every traced request starts a client-kind span, injects the trace context
into the outgoing headers, and records the status code or error before the
span is closed.
"""

from importlib import import_module

__version__ = "0.1.0"

__all__ = [
    "HttpxClient",
    "ClientRequest",
    "InstrumentedClientRequest",
    "TracingConfig",
    "HeaderPolicy",
    "trace_request",
    "trace_request_with_context",
]


def __getattr__(name: str):
    """Lazily import symbols to avoid import cycles at package import time."""
    if name == "HttpxClient":
        return import_module(".adapters.httpx.client", __package__).HttpxClient
    if name == "ClientRequest":
        return import_module(".adapters.request", __package__).ClientRequest
    if name in ("InstrumentedClientRequest", "trace_request", "trace_request_with_context"):
        return getattr(import_module(".telemetry.client", __package__), name)
    if name in ("TracingConfig", "HeaderPolicy"):
        return getattr(import_module(".config", __package__), name)
    raise AttributeError(name)
