"""
OpenTelemetry Tracer Setup

Configures the SDK tracer provider that client spans are reported to.
"""

import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)
from opentelemetry.sdk.trace.sampling import ALWAYS_ON, Sampler
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
    OTLPSpanExporter,
)

logger = logging.getLogger(__name__)


def setup_tracer(service_name: str,
                 otlp_endpoint: str = "localhost:4317",
                 console: bool = False,
                 sampler: Sampler = ALWAYS_ON) -> TracerProvider:
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
        console: Also print finished spans to the console
        sampler: Sampler of the provider

    Returns:
        TracerProvider: The provider registered as the global tracer provider
    """
    provider = TracerProvider(
        resource=Resource.create({"service.name": service_name}),
        sampler=sampler
    )

    # Batch span processor over the OTLP exporter
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)))
    if console:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return provider
