"""
JSON-RPC client metrics

OpenTelemetry instruments for outgoing calls. The client records:

- rpc.client.requests: calls sent
- rpc.client.success: calls that returned a result
- rpc.client.errors: failed calls, labelled with the error class
- rpc.client.latency: round-trip time in milliseconds

Instruments are taken from the global meter, so recording is a no-op until
setup_metrics() installs a provider.
"""

import logging
from typing import Dict, Any, Tuple

from opentelemetry import metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter

logger = logging.getLogger(__name__)

METER_NAME = "jsonrpc_httpclient"

# name -> (description, unit)
CLIENT_METRICS: Dict[str, Tuple[str, str]] = {
    "rpc.client.requests": ("JSON-RPC requests sent", "1"),
    "rpc.client.success": ("JSON-RPC calls that returned a result", "1"),
    "rpc.client.errors": ("JSON-RPC calls that failed, by error type", "1"),
    "rpc.client.latency": ("JSON-RPC round-trip latency", "ms"),
}

_counters = {}
_histograms = {}

def setup_metrics(service_name: str, otlp_endpoint: str = "localhost:4317", export_interval_ms: int = 5000):
    """Install a MeterProvider that exports to an OTLP collector

    Args:
        service_name: Name reported for the client service
        otlp_endpoint: OTLP receiver address
        export_interval_ms: How often metrics are pushed, in milliseconds

    Returns:
        Meter: Meter named after the service
    """
    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=otlp_endpoint),
        export_interval_millis=export_interval_ms
    )
    metrics.set_meter_provider(MeterProvider(metric_readers=[reader]))

    logger.info(f"Exporting {service_name} metrics to {otlp_endpoint} every {export_interval_ms}ms")

    return metrics.get_meter(service_name)

def _describe(name: str, fallback_unit: str) -> Tuple[str, str]:
    return CLIENT_METRICS.get(name, (f"JSON-RPC client metric {name}", fallback_unit))

def get_counter(name: str):
    """Counter for ``name``, created on first use"""
    if name not in _counters:
        description, unit = _describe(name, "1")
        _counters[name] = metrics.get_meter(METER_NAME).create_counter(
            name=name, description=description, unit=unit
        )
    return _counters[name]

def get_histogram(name: str):
    """Histogram for ``name``, created on first use"""
    if name not in _histograms:
        description, unit = _describe(name, "ms")
        _histograms[name] = metrics.get_meter(METER_NAME).create_histogram(
            name=name, description=description, unit=unit
        )
    return _histograms[name]

def increment_counter(name: str, amount: int = 1, attributes: Dict[str, Any] = None):
    get_counter(name).add(amount, attributes or {})

def record_latency(name: str, value_ms: float, attributes: Dict[str, Any] = None):
    get_histogram(name).record(value_ms, attributes or {})
