"""MetricsRenderer protocol for the scrape endpoint.

The recipe registry only advances scripted series; turning the current
state of every metric family into exposition text is the renderer's job.
Production renders a Prometheus ``CollectorRegistry``; tests inject a fake
that counts scrapes.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Serializes the current metric families for one scrape."""

    @property
    def content_type(self) -> str:
        """MIME type sent with the ``/metrics`` response."""
        ...

    def generate(self) -> bytes:
        """Render every registered family in text exposition format."""
        ...
