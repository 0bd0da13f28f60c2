"""MetricFamily protocols for scripted metric output.

Abstracts the metric-family storage so the recipe registry depends on a
protocol rather than a concrete library.  Production uses Prometheus;
tests inject a fake that records every call in memory.
"""

from typing import Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class MetricFamily(Protocol):
    """A labelled metric family (one name, many label sets)."""

    name: str

    def inc(self, labels: Mapping[str, str], amount: float) -> None:
        """Add ``amount`` to the counter child at ``labels``."""
        ...

    def set(self, labels: Mapping[str, str], value: float) -> None:
        """Set the gauge child at ``labels`` to ``value``."""
        ...

    def observe(self, labels: Mapping[str, str], value: float) -> None:
        """Record one histogram observation at ``labels``."""
        ...


@runtime_checkable
class MetricFamilyFactory(Protocol):
    """Creates and releases metric families on a backing registry."""

    def counter(self, name: str, labels: Sequence[str]) -> MetricFamily:
        """Create and register a counter family.

        Raises:
            ValueError: The backing registry rejects the name or labels.
        """
        ...

    def gauge(self, name: str, labels: Sequence[str]) -> MetricFamily:
        """Create and register a gauge family."""
        ...

    def histogram(
        self,
        name: str,
        labels: Sequence[str],
        buckets: Sequence[float] = (),
    ) -> MetricFamily:
        """Create and register a histogram family.

        An empty ``buckets`` sequence selects the library defaults.
        """
        ...

    def release(self, family: MetricFamily) -> None:
        """Unregister a family so its name disappears from the exposition."""
        ...
