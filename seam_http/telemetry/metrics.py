"""
OpenTelemetry Metrics Collection

Provides metrics setup and the per-request client metrics recorded by the
request tracer (request count, error count, request duration).
"""

import logging
from typing import Dict, Any, Optional

from opentelemetry import metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    PeriodicExportingMetricReader
)
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter

logger = logging.getLogger(__name__)

REQUESTS_COUNTER = "http.client.requests"
ERRORS_COUNTER = "http.client.errors"
DURATION_HISTOGRAM = "http.client.duration"


def setup_metrics(service_name: str,
                  otlp_endpoint: str = "localhost:4317",
                  export_interval_ms: int = 5000,
                  console: bool = False) -> MeterProvider:
    """Configure OpenTelemetry metrics collection

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
        export_interval_ms: Metrics export interval in milliseconds
        console: Also export to the console (for development debugging)

    Returns:
        MeterProvider: The provider registered as the global meter provider
    """
    readers = [
        PeriodicExportingMetricReader(
            OTLPMetricExporter(endpoint=otlp_endpoint, insecure=True),
            export_interval_millis=export_interval_ms
        )
    ]
    if console:
        readers.append(PeriodicExportingMetricReader(
            ConsoleMetricExporter(),
            export_interval_millis=export_interval_ms
        ))

    provider = MeterProvider(
        resource=Resource.create({"service.name": service_name}),
        metric_readers=readers
    )
    metrics.set_meter_provider(provider)

    logger.info(f"OpenTelemetry metrics configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return provider


class ClientMetrics:
    """Instruments recorded once per traced request"""

    def __init__(self, meter: metrics.Meter):
        self.requests = meter.create_counter(
            name=REQUESTS_COUNTER,
            description="Number of outgoing HTTP requests",
            unit="1"
        )
        self.errors = meter.create_counter(
            name=ERRORS_COUNTER,
            description="Number of outgoing HTTP requests that failed to complete",
            unit="1"
        )
        self.duration = meter.create_histogram(
            name=DURATION_HISTOGRAM,
            description="Duration of outgoing HTTP requests",
            unit="ms"
        )

    def record_request(self, method: str, attributes: Optional[Dict[str, Any]] = None):
        """Count one outgoing request"""
        self.requests.add(1, {"http.method": method, **(attributes or {})})

    def record_error(self, method: str, error: BaseException):
        """Count a failed request, tagged with the error class"""
        self.errors.add(1, {"http.method": method, "error.type": type(error).__name__})

    def record_latency(self, method: str, value_ms: float, attributes: Optional[Dict[str, Any]] = None):
        """Record request duration histogram

        Args:
            method: HTTP method of the request
            value_ms: Duration in milliseconds
            attributes: Extra attribute labels (e.g. status code)
        """
        self.duration.record(value_ms, {"http.method": method, **(attributes or {})})
