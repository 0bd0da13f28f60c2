"""Fake MetricsRenderer for testing.

Counts scrapes and returns a canned payload so endpoint tests do not
depend on prometheus-client output.
"""

from any_exporter.core.protocols.metrics_renderer import MetricsRenderer


class FakeMetricsRenderer(MetricsRenderer):
    """In-memory spy implementing the MetricsRenderer protocol."""

    def __init__(self, payload: bytes = b"# scripted metrics\n") -> None:
        self.payload = payload
        self.generate_calls: int = 0

    @property
    def content_type(self) -> str:
        return "text/plain"

    def generate(self) -> bytes:
        self.generate_calls += 1
        return self.payload
