"""Metric family adapters."""

from any_exporter.adapters.metric_families.fake import FakeMetricFamily, FakeMetricFamilyFactory
from any_exporter.adapters.metric_families.prometheus import (
    PrometheusMetricFamily,
    PrometheusMetricFamilyFactory,
)

__all__ = [
    "FakeMetricFamily",
    "FakeMetricFamilyFactory",
    "PrometheusMetricFamily",
    "PrometheusMetricFamilyFactory",
]
