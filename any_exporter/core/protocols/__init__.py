"""Core protocols for dependency injection."""

from any_exporter.core.protocols.metric_families import MetricFamily, MetricFamilyFactory
from any_exporter.core.protocols.metrics_renderer import MetricsRenderer

__all__ = [
    "MetricFamily",
    "MetricFamilyFactory",
    "MetricsRenderer",
]
