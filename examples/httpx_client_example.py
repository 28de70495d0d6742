#!/usr/bin/env python
"""
Traced httpx Client Example

Demonstrates how to trace outgoing requests made through HttpxClient: each
request gets a client span and carries a traceparent header to the server.
"""

import sys
import os
import asyncio
import logging
import argparse

# Add project root directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from seam_http.adapters.httpx import HttpxClient
from seam_http.config import TracingConfig
from seam_http.telemetry.tracer import setup_tracer
from seam_http.telemetry.metrics import setup_metrics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def run(base_url: str, otlp_endpoint: str):
    """
    Send a few traced requests under one parent span

    Args:
        base_url: Server base URL
        otlp_endpoint: OTLP collector address
    """
    tracer_provider = setup_tracer("seam-http-example", otlp_endpoint=otlp_endpoint, console=True)
    meter_provider = setup_metrics("seam-http-example", otlp_endpoint=otlp_endpoint)
    config = TracingConfig(tracer_provider=tracer_provider, meter_provider=meter_provider)
    logger.info(f"Tracing config: {config.to_dict()}")

    tracer = tracer_provider.get_tracer(__name__)

    async with HttpxClient(base_url=base_url, timeout_ms=5000) as client:
        with tracer.start_as_current_span("example.workflow"):
            try:
                response = await client.get("/get").trace_request(config).send()
                logger.info(f"GET /get -> {response.status_code}")

                response = await client.post("/post").trace_request(config).send_json({"message": "Hello, World!"})
                logger.info(f"POST /post -> {response.status_code}")

                response = await client.post("/post").trace_request(config).send_form({"user": "alice"})
                logger.info(f"POST /post (form) -> {response.status_code}")
            except Exception as e:
                logger.error(f"Request failed: {e}")

    tracer_provider.shutdown()
    meter_provider.shutdown()


def main():
    parser = argparse.ArgumentParser(description="Traced httpx client example")
    parser.add_argument("--base-url", default="https://httpbin.org", help="Server base URL")
    parser.add_argument("--otlp-endpoint", default="localhost:4317", help="OTLP collector address")
    args = parser.parse_args()

    asyncio.run(run(args.base_url, args.otlp_endpoint))


if __name__ == "__main__":
    main()
