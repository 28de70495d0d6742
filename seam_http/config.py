"""
Configuration settings for HTTP client tracing
"""
import os
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from enum import Enum

from opentelemetry import metrics, propagate, trace
from opentelemetry.propagators.textmap import TextMapPropagator

from seam_http import __version__
from seam_http.telemetry.metrics import ClientMetrics


class HeaderPolicy(Enum):
    """What the header carrier does with an invalid propagation header"""
    RAISE = "raise"
    SKIP = "skip"  # Drop the header and log a warning


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class TracingConfig:
    """Tracer, propagator and meter wiring for traced requests

    Anything left as None resolves to the process-wide OpenTelemetry
    registration when first used.
    """
    tracer_name: str = "seam_http.client"
    tracer_provider: Optional[trace.TracerProvider] = None
    propagator: Optional[TextMapPropagator] = None
    meter_provider: Optional[metrics.MeterProvider] = None
    header_policy: HeaderPolicy = HeaderPolicy.RAISE
    record_exception: bool = True
    enable_metrics: bool = True

    _metrics: Optional[ClientMetrics] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def default(cls) -> "TracingConfig":
        """Create default configuration backed by the global providers"""
        return cls()

    @classmethod
    def from_env(cls) -> "TracingConfig":
        """Create config from environment variables"""
        policy = os.getenv("SEAM_HTTP_HEADER_POLICY", HeaderPolicy.RAISE.value).strip().lower()
        try:
            header_policy = HeaderPolicy(policy)
        except ValueError:
            raise ValueError(f"Unsupported header policy: {policy}") from None

        return cls(
            tracer_name=os.getenv("SEAM_HTTP_TRACER_NAME", "seam_http.client"),
            header_policy=header_policy,
            record_exception=_env_flag("SEAM_HTTP_RECORD_EXCEPTION", True),
            enable_metrics=_env_flag("SEAM_HTTP_ENABLE_METRICS", True),
        )

    def get_tracer(self) -> trace.Tracer:
        """Resolve the tracer used to start client spans"""
        if self.tracer_provider is not None:
            return self.tracer_provider.get_tracer(self.tracer_name, __version__)
        return trace.get_tracer(self.tracer_name, __version__)

    def get_propagator(self) -> TextMapPropagator:
        """Resolve the propagator that writes the trace context into headers"""
        if self.propagator is not None:
            return self.propagator
        return propagate.get_global_textmap()

    def get_metrics(self) -> Optional[ClientMetrics]:
        """Resolve the client metrics recorder, None when metrics are disabled"""
        if not self.enable_metrics:
            return None
        if self._metrics is None:
            provider = self.meter_provider or metrics.get_meter_provider()
            self._metrics = ClientMetrics(provider.get_meter(self.tracer_name, __version__))
        return self._metrics

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging"""
        return {
            "tracer_name": self.tracer_name,
            "header_policy": self.header_policy.value,
            "record_exception": self.record_exception,
            "enable_metrics": self.enable_metrics,
            "custom_tracer_provider": self.tracer_provider is not None,
            "custom_propagator": self.propagator is not None,
        }
