"""
Tests for success and failure recording on a request span
"""
import httpx
import pytest
from opentelemetry import trace
from opentelemetry.trace import StatusCode

from seam_http.telemetry.outcome import describe_error, record_error, record_response


@pytest.fixture
def span_cx(tracer_provider):
    span = tracer_provider.get_tracer("test").start_span("GET /items", kind=trace.SpanKind.CLIENT)
    return trace.set_span_in_context(span)


class TestRecordResponse:
    """Test success recording"""

    def test_status_code_attribute_and_end(self, span_cx, span_exporter):
        record_response(httpx.Response(404), span_cx)

        spans = span_exporter.get_finished_spans()
        assert len(spans) == 1
        assert spans[0].attributes["http.status_code"] == 404
        assert spans[0].status.status_code == StatusCode.UNSET


class TestRecordError:
    """Test failure recording"""

    def test_error_status_with_description(self, span_cx, span_exporter):
        record_error(ConnectionError("connection refused"), span_cx)

        spans = span_exporter.get_finished_spans()
        assert len(spans) == 1
        assert spans[0].status.status_code == StatusCode.ERROR
        assert spans[0].status.description == "connection refused"
        assert "http.status_code" not in spans[0].attributes
        assert [event.name for event in spans[0].events] == ["exception"]

    def test_without_exception_event(self, span_cx, span_exporter):
        record_error(TimeoutError("timed out"), span_cx, record_exception=False)

        span = span_exporter.get_finished_spans()[0]
        assert span.status.description == "timed out"
        assert len(span.events) == 0


class TestDescribeError:
    """Test error descriptions"""

    def test_uses_message(self):
        assert describe_error(ValueError("bad input")) == "bad input"

    def test_empty_message_falls_back_to_class_name(self):
        assert describe_error(httpx.ReadTimeout("")) == "ReadTimeout"
