"""
Tests for tracer and metrics bootstrap
"""
from unittest.mock import patch

from opentelemetry.sdk.trace import TracerProvider

from seam_http.telemetry.metrics import setup_metrics
from seam_http.telemetry.tracer import setup_tracer


class TestSetupTracer:
    """Test tracer provider setup"""

    def test_registers_provider_with_otlp_exporter(self):
        with patch("seam_http.telemetry.tracer.OTLPSpanExporter") as exporter_cls, \
                patch("seam_http.telemetry.tracer.trace.set_tracer_provider") as set_provider:
            provider = setup_tracer("orders", otlp_endpoint="collector:4317")

        assert isinstance(provider, TracerProvider)
        assert provider.resource.attributes["service.name"] == "orders"
        exporter_cls.assert_called_once_with(endpoint="collector:4317", insecure=True)
        set_provider.assert_called_once_with(provider)
        provider.shutdown()


class TestSetupMetrics:
    """Test meter provider setup"""

    def test_registers_provider_with_otlp_reader(self):
        with patch("seam_http.telemetry.metrics.OTLPMetricExporter") as exporter_cls, \
                patch("seam_http.telemetry.metrics.PeriodicExportingMetricReader") as reader_cls, \
                patch("seam_http.telemetry.metrics.MeterProvider") as provider_cls, \
                patch("seam_http.telemetry.metrics.metrics.set_meter_provider") as set_provider:
            provider = setup_metrics("orders", otlp_endpoint="collector:4317", console=True)

        exporter_cls.assert_called_once_with(endpoint="collector:4317", insecure=True)
        assert reader_cls.call_count == 2
        assert provider is provider_cls.return_value
        set_provider.assert_called_once_with(provider)
