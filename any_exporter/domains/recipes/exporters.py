"""Metric exporters: one per registered metric name.

Every exporter shares the same advance/prune loop; the variants differ
only in how a single scripted value is applied to the metric family.
"""

from typing import Type

from any_exporter.core.logging import logger
from any_exporter.core.protocols.metric_families import MetricFamily
from any_exporter.domains.recipes.series import Series
from any_exporter.domains.recipes.types import MetricKind


class MetricExporter:
    """Owns a metric family and the live series scripted for it."""

    kind: MetricKind

    def __init__(self, family: MetricFamily, series: list[Series]) -> None:
        self.family = family
        self.series = series
        self._logger = logger.with_context(component="exporter", metric=family.name)

    @property
    def name(self) -> str:
        return self.family.name

    @property
    def drained(self) -> bool:
        """True once every series has consumed its last value."""
        return all(s.drained for s in self.series)

    def apply(self, series: Series, value: float) -> None:
        raise NotImplementedError

    def advance(self) -> None:
        """Apply one value from every live series, then drop drained ones."""
        if not self.series:
            return

        for series in self.series:
            self.apply(series, series.pop())
            if series.drained:
                self._logger.debug(f"Series {series.labels} drained")

        self.series = [s for s in self.series if not s.drained]


class CounterExporter(MetricExporter):
    """Counters receive the difference from the last emitted reading."""

    kind = MetricKind.COUNTER

    def apply(self, series: Series, value: float) -> None:
        self.family.inc(series.labels, value - series.last_emitted)
        series.last_emitted = value


class GaugeExporter(MetricExporter):
    """Gauges are set to each value as-is."""

    kind = MetricKind.GAUGE

    def apply(self, series: Series, value: float) -> None:
        self.family.set(series.labels, value)


class HistogramExporter(MetricExporter):
    """Each value becomes one histogram observation."""

    kind = MetricKind.HISTOGRAM

    def apply(self, series: Series, value: float) -> None:
        self.family.observe(series.labels, value)


EXPORTER_CLASSES: dict[MetricKind, Type[MetricExporter]] = {
    MetricKind.COUNTER: CounterExporter,
    MetricKind.GAUGE: GaugeExporter,
    MetricKind.HISTOGRAM: HistogramExporter,
}
