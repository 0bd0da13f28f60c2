"""Unit tests for the counter, gauge and histogram exporters."""

from any_exporter.adapters.metric_families import FakeMetricFamily
from any_exporter.domains.recipes.exporters import (
    CounterExporter,
    GaugeExporter,
    HistogramExporter,
)
from any_exporter.domains.recipes.series import Series

A = {"aaa": "aaa_val1", "bbb": "bbb_val1"}
B = {"aaa": "aaa_val1", "bbb": "bbb_val2"}


def _family(kind: str) -> FakeMetricFamily:
    return FakeMetricFamily("test1", kind, ["aaa", "bbb"])


class TestCounterExporter:
    def test_applies_deltas_from_last_reading(self):
        family = _family("counter")
        exporter = CounterExporter(family, [Series.build(A, [1, 2, 3]), Series.build(B, [0, 1, 1])])

        exporter.advance()
        assert family.value(**A) == 1
        assert family.value(**B) == 0

        exporter.advance()
        assert family.value(**A) == 2
        assert family.value(**B) == 1

        exporter.advance()
        assert family.value(**A) == 3
        assert family.value(**B) == 1

        assert [c[2] for c in family.calls if c[1] == A] == [1, 1, 1]

    def test_sum_of_deltas_equals_last_value(self):
        family = _family("counter")
        values = [2.5, 2.5, 4, 10, 10.25]
        exporter = CounterExporter(family, [Series.build(A, values)])

        for _ in values:
            exporter.advance()

        assert sum(c[2] for c in family.calls) == 10.25
        assert family.value(**A) == 10.25

    def test_values_hold_after_exhaustion(self):
        family = _family("counter")
        exporter = CounterExporter(family, [Series.build(A, [1, 2, 3])])

        for _ in range(3):
            exporter.advance()
        calls = len(family.calls)

        exporter.advance()
        exporter.advance()

        assert family.value(**A) == 3
        assert len(family.calls) == calls
        assert exporter.series == []
        assert exporter.drained


class TestGaugeExporter:
    def test_sets_absolute_values(self):
        family = _family("gauge")
        exporter = GaugeExporter(family, [Series.build(A, [5, -2, 7.5])])

        observed = []
        for _ in range(3):
            exporter.advance()
            observed.append(family.value(**A))

        assert observed == [5, -2, 7.5]
        assert all(c[0] == "set" for c in family.calls)

    def test_leaves_last_emitted_untouched(self):
        family = _family("gauge")
        series = Series.build(A, [5, 6])
        exporter = GaugeExporter(family, [series])

        exporter.advance()

        assert family.value(**A) == 5
        assert series.last_emitted == 0


class TestHistogramExporter:
    def test_observes_each_value(self):
        family = _family("histogram")
        exporter = HistogramExporter(family, [Series.build(A, [0.7, 1.5, 40])])

        for _ in range(4):
            exporter.advance()

        assert family.observed(**A) == [0.7, 1.5, 40]


class TestAdvance:
    def test_prunes_only_drained_series(self):
        family = _family("gauge")
        short = Series.build(A, [1])
        long = Series.build(B, [1, 2, 3])
        exporter = GaugeExporter(family, [short, long])

        exporter.advance()

        assert exporter.series == [long]
        assert not exporter.drained

    def test_consumes_in_fifo_order(self):
        family = _family("gauge")
        series = Series.build(A, [3, 1, 2])
        exporter = GaugeExporter(family, [series])

        exporter.advance()

        assert list(series.values) == [1, 2]
        assert family.value(**A) == 3

    def test_no_series_is_noop(self):
        family = _family("gauge")
        exporter = GaugeExporter(family, [])

        exporter.advance()

        assert family.calls == []
        assert exporter.drained

    def test_name_comes_from_family(self):
        assert GaugeExporter(_family("gauge"), []).name == "test1"
