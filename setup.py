from setuptools import setup, find_packages

setup(
    name="jsonrpc_httpclient",
    version="0.1.0",
    description="Minimal JSON-RPC 2.0 over HTTP client",
    author="jsonrpc-httpclient Team",
    packages=find_packages(include=["jsonrpc_httpclient", "jsonrpc_httpclient.*"]),
    install_requires=[
        "requests>=2.28.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
