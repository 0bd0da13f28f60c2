"""Prometheus implementation of the MetricsRenderer protocol.

Serializes the CollectorRegistry the scripted metric families live on, so
whatever the last ``update()`` left behind is what the scraper sees.
"""

from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from any_exporter.adapters.metric_families.prometheus import PrometheusMetricFamilyFactory
from any_exporter.core.protocols.metrics_renderer import MetricsRenderer


class PrometheusMetricsRenderer(MetricsRenderer):
    """Text exposition of whatever families a factory currently holds.

    Families released by ``clear()`` are unregistered from the factory's
    registry and therefore vanish from the next scrape.
    """

    def __init__(self, families: PrometheusMetricFamilyFactory) -> None:
        self._families = families

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    def generate(self) -> bytes:
        return generate_latest(self._families.registry)
