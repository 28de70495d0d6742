from setuptools import setup, find_packages

setup(
    name="seam_http",
    version="0.1.0",
    description="Seam HTTP - OpenTelemetry tracing for outgoing HTTP client requests",
    author="Oppie.xyz Team",
    packages=find_packages(include=["seam_http", "seam_http.*"]),
    install_requires=[
        "httpx>=0.24.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "httpx[http2]>=0.24.0",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
