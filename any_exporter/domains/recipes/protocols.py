"""Recipe registry protocol.

The HTTP layer depends on this protocol so endpoint tests can inject a
fake instead of a Prometheus-backed registry.
"""

from typing import Protocol, Sequence, runtime_checkable

from any_exporter.domains.recipes.schemas import Recipe


@runtime_checkable
class RecipeRegistryProtocol(Protocol):
    """Register, advance and retire scripted metrics."""

    def register(self, recipes: Sequence[Recipe]) -> list[str]:
        """Install every recipe of the batch or none of them.

        Returns the registered names in batch order.
        """
        ...

    def register_document(self, text: str | bytes) -> list[str]:
        """Parse a YAML recipe document and register it."""
        ...

    def update(self) -> None:
        """Advance every registered metric by one step."""
        ...

    def clear(self, force: bool = False) -> list[str]:
        """Retire drained metrics (or all of them when ``force``).

        Returns the removed names.
        """
        ...

    def names(self) -> list[str]:
        """Names currently owning a registry slot."""
        ...
