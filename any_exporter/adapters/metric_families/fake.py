"""Fake MetricFamilyFactory for testing.

Keeps the current value (or observations) per label set in memory so
tests can assert on exporter behaviour without reaching into
prometheus-client internals.
"""

from dataclasses import dataclass, field
from typing import Mapping, Sequence


def _key(labels: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    return tuple(sorted(labels.items()))


@dataclass
class FakeMetricFamily:
    """In-memory spy implementing the MetricFamily protocol.

    Usage:
        family = FakeMetricFamily("requests", "counter", ["method"])
        family.inc({"method": "GET"}, 2)
        assert family.value(method="GET") == 2
    """

    name: str
    kind: str
    labels: list[str]
    buckets: list[float] = field(default_factory=list)
    values: dict[tuple[tuple[str, str], ...], float] = field(default_factory=dict)
    observations: dict[tuple[tuple[str, str], ...], list[float]] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, str], float]] = field(default_factory=list)

    def _check(self, labels: Mapping[str, str]) -> None:
        if set(labels) != set(self.labels):
            raise ValueError(f"Incorrect label names {sorted(labels)}")

    def inc(self, labels: Mapping[str, str], amount: float) -> None:
        self._check(labels)
        if amount < 0:
            raise ValueError("Counters can only be incremented by non-negative amounts.")
        key = _key(labels)
        self.values[key] = self.values.get(key, 0.0) + amount
        self.calls.append(("inc", dict(labels), amount))

    def set(self, labels: Mapping[str, str], value: float) -> None:
        self._check(labels)
        self.values[_key(labels)] = value
        self.calls.append(("set", dict(labels), value))

    def observe(self, labels: Mapping[str, str], value: float) -> None:
        self._check(labels)
        self.observations.setdefault(_key(labels), []).append(value)
        self.calls.append(("observe", dict(labels), value))

    # -- test helpers --

    def value(self, **labels: str) -> float | None:
        return self.values.get(_key(labels))

    def observed(self, **labels: str) -> list[float]:
        return self.observations.get(_key(labels), [])


class FakeMetricFamilyFactory:
    """In-memory MetricFamilyFactory.

    ``families`` holds the live families by name; ``released`` lists every
    family handed to ``release()``.  Names listed in ``reject`` make the
    factory raise ValueError, mimicking a registry refusing a collector.
    """

    def __init__(self, reject: Sequence[str] = ()) -> None:
        self.families: dict[str, FakeMetricFamily] = {}
        self.released: list[FakeMetricFamily] = []
        self.reject = set(reject)

    def _create(self, name: str, kind: str, labels: Sequence[str], buckets=()) -> FakeMetricFamily:
        if name in self.reject or name in self.families:
            raise ValueError(f"Duplicated timeseries in CollectorRegistry: {name}")
        family = FakeMetricFamily(name, kind, list(labels), list(buckets))
        self.families[name] = family
        return family

    def counter(self, name: str, labels: Sequence[str]) -> FakeMetricFamily:
        return self._create(name, "counter", labels)

    def gauge(self, name: str, labels: Sequence[str]) -> FakeMetricFamily:
        return self._create(name, "gauge", labels)

    def histogram(
        self,
        name: str,
        labels: Sequence[str],
        buckets: Sequence[float] = (),
    ) -> FakeMetricFamily:
        return self._create(name, "histogram", labels, buckets)

    def release(self, family: FakeMetricFamily) -> None:
        self.families.pop(family.name, None)
        self.released.append(family)

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.families.clear()
        self.released.clear()
