"""
Shared fixtures: in-memory OpenTelemetry backends and a fake HTTP client
"""

import asyncio
from typing import Any, Dict, List, Optional

import httpx
import pytest
from opentelemetry.context import Context
from opentelemetry.propagators.textmap import TextMapPropagator, default_getter, default_setter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import InMemoryMetricReader
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from seam_http.adapters.adapter_interface import HttpClientAdapterInterface
from seam_http.config import TracingConfig


class FakeClient(HttpClientAdapterInterface):
    """Client adapter that records sends instead of hitting the network"""

    def __init__(self, events: List[str], status_code: int = 200, error: Optional[BaseException] = None):
        self.events = events
        self.status_code = status_code
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.block: Optional[asyncio.Event] = None

    async def _respond(self, request, variant: str, body=None):
        self.events.append("send")
        self.calls.append({
            "variant": variant,
            "body": body,
            "headers": dict(request.headers),
        })
        if self.block is not None:
            await self.block.wait()
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code)

    async def send(self, request):
        return await self._respond(request, "send")

    async def send_body(self, request, body):
        return await self._respond(request, "body", body)

    async def send_form(self, request, value):
        return await self._respond(request, "form", value)

    async def send_json(self, request, value):
        return await self._respond(request, "json", value)

    async def send_stream(self, request, stream):
        chunks = [chunk async for chunk in stream]
        return await self._respond(request, "stream", b"".join(chunks))

    async def aclose(self):
        pass


class RecordingPropagator(TextMapPropagator):
    """Propagator that logs its injection and writes fixed headers"""

    def __init__(self, events: List[str], headers: Optional[Dict[str, str]] = None):
        self.events = events
        self.headers = headers if headers is not None else {"x-test-trace": "abc123"}

    def extract(self, carrier, context=None, getter=default_getter):
        return context if context is not None else Context()

    def inject(self, carrier, context=None, setter=default_setter):
        self.events.append("inject")
        for key, value in self.headers.items():
            setter.set(carrier, key, value)

    @property
    def fields(self):
        return set(self.headers)


def metric_points(reader: InMemoryMetricReader, name: str) -> list:
    """Collect the data points of one metric from an in-memory reader"""
    data = reader.get_metrics_data()
    if data is None:
        return []
    points = []
    for resource_metrics in data.resource_metrics:
        for scope_metrics in resource_metrics.scope_metrics:
            for metric in scope_metrics.metrics:
                if metric.name == name:
                    points.extend(metric.data.data_points)
    return points


@pytest.fixture
def span_exporter():
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter):
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture
def metric_reader():
    return InMemoryMetricReader()


@pytest.fixture
def meter_provider(metric_reader):
    return MeterProvider(metric_readers=[metric_reader])


@pytest.fixture
def events():
    return []


@pytest.fixture
def fake_client(events):
    return FakeClient(events)


@pytest.fixture
def tracing_config(tracer_provider, meter_provider):
    """Config wired to in-memory backends and the W3C trace context propagator"""
    return TracingConfig(
        tracer_provider=tracer_provider,
        propagator=TraceContextTextMapPropagator(),
        meter_provider=meter_provider,
    )
