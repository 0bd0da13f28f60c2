"""Metrics renderer adapters."""

from any_exporter.adapters.metrics_renderer.fake import FakeMetricsRenderer
from any_exporter.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer", "FakeMetricsRenderer"]
