"""
OpenTelemetry Integration Module

Provides client-side tracing for outgoing HTTP requests:
- client: request tracer (span start, header injection, outcome, span end)
- carrier: header carrier used by the propagator during injection
- attributes / naming: span attributes and operation name of a request
- outcome: success and failure recording on the request span
- tracer / metrics: SDK bootstrap and client metrics
"""

from importlib import import_module

_EXPORTS = {
    "InstrumentedClientRequest": ".client",
    "SpanGuard": ".client",
    "trace_request": ".client",
    "trace_request_with_context": ".client",
    "HeaderCarrier": ".carrier",
    "HeaderSetter": ".carrier",
    "InvalidHeaderError": ".carrier",
    "extract_attributes": ".attributes",
    "span_name": ".naming",
    "record_response": ".outcome",
    "record_error": ".outcome",
    "setup_tracer": ".tracer",
    "setup_metrics": ".metrics",
    "ClientMetrics": ".metrics",
}

__all__ = list(_EXPORTS)


def __getattr__(name: str):
    """Lazily import symbols so config and telemetry can import each other's modules."""
    if name in _EXPORTS:
        return getattr(import_module(_EXPORTS[name], __package__), name)
    raise AttributeError(name)
