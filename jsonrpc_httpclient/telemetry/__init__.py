"""
OpenTelemetry Integration Module

- tracer: tracer setup and span creation
- metrics: request counters and latency histograms
"""

from .tracer import setup_tracer, create_span
from .metrics import setup_metrics, increment_counter, record_latency

__all__ = [
    "setup_tracer",
    "create_span",
    "setup_metrics",
    "increment_counter",
    "record_latency",
]
