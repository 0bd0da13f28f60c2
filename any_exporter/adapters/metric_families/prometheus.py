"""Prometheus implementation of the MetricFamilyFactory protocol.

Families live on a dedicated CollectorRegistry so scripted metrics are
isolated from the default global registry (and from the process/platform
collectors registered there).
"""

from typing import Mapping, Sequence, Union

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram

from any_exporter.core.protocols.metric_families import MetricFamily, MetricFamilyFactory

_Collector = Union[Counter, Gauge, Histogram]


class PrometheusMetricFamily(MetricFamily):
    """A prometheus-client metric with label values passed as a mapping."""

    def __init__(self, name: str, collector: _Collector) -> None:
        self.name = name
        self.collector = collector

    def inc(self, labels: Mapping[str, str], amount: float) -> None:
        self.collector.labels(**labels).inc(amount)

    def set(self, labels: Mapping[str, str], value: float) -> None:
        self.collector.labels(**labels).set(value)

    def observe(self, labels: Mapping[str, str], value: float) -> None:
        self.collector.labels(**labels).observe(value)


class PrometheusMetricFamilyFactory(MetricFamilyFactory):
    """Creates prometheus-client collectors on one shared registry."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    # -- MetricFamilyFactory protocol methods --

    def counter(self, name: str, labels: Sequence[str]) -> PrometheusMetricFamily:
        collector = Counter(
            name,
            f"Scripted counter {name}",
            list(labels),
            registry=self._registry,
        )
        return PrometheusMetricFamily(name, collector)

    def gauge(self, name: str, labels: Sequence[str]) -> PrometheusMetricFamily:
        collector = Gauge(
            name,
            f"Scripted gauge {name}",
            list(labels),
            registry=self._registry,
        )
        return PrometheusMetricFamily(name, collector)

    def histogram(
        self,
        name: str,
        labels: Sequence[str],
        buckets: Sequence[float] = (),
    ) -> PrometheusMetricFamily:
        collector = Histogram(
            name,
            f"Scripted histogram {name}",
            list(labels),
            buckets=tuple(buckets) or Histogram.DEFAULT_BUCKETS,
            registry=self._registry,
        )
        return PrometheusMetricFamily(name, collector)

    def release(self, family: MetricFamily) -> None:
        self._registry.unregister(family.collector)  # type: ignore[attr-defined]
