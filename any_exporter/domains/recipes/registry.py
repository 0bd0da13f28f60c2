"""Recipe registry: name-scoped lifecycle of scripted metrics.

``register`` validates and installs a batch atomically, ``update`` advances
every metric once per scrape, and ``clear`` retires metrics either when
fully drained or unconditionally.  One lock serializes all three.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

from any_exporter.core.logging import logger
from any_exporter.core.protocols.metric_families import MetricFamily, MetricFamilyFactory
from any_exporter.domains.recipes.document import load_recipes
from any_exporter.domains.recipes.exporters import EXPORTER_CLASSES, MetricExporter
from any_exporter.domains.recipes.schemas import MetricSpec, Recipe
from any_exporter.domains.recipes.types import MetricKind, RecipeValidationError
from any_exporter.domains.recipes.validation import RecipeValidator


class RecipeRegistry:
    """Owns every registered metric exporter, keyed by metric name."""

    def __init__(
        self,
        families: MetricFamilyFactory,
        validator: RecipeValidator | None = None,
    ) -> None:
        self._families = families
        self._validator = validator or RecipeValidator()
        self._exporters: dict[str, MetricExporter] = {}
        self._lock = threading.Lock()
        self._logger = logger.with_context(component="registry")

    # -- inspection --

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._exporters

    def __len__(self) -> int:
        with self._lock:
            return len(self._exporters)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._exporters)

    def kind_of(self, name: str) -> MetricKind:
        """Return the declared kind of ``name``. Raises KeyError if absent."""
        with self._lock:
            return self._exporters[name].kind

    def exporter(self, name: str) -> MetricExporter:
        """Return the exporter for ``name``. Raises KeyError if absent."""
        with self._lock:
            return self._exporters[name]

    # -- lifecycle --

    def register_document(self, text: str | bytes) -> list[str]:
        return self.register(load_recipes(text))

    def register(self, recipes: Sequence[Recipe]) -> list[str]:
        with self._lock:
            compiled = self._validator.validate(recipes, self._exporters.keys())
            families = self._create_families([r.spec for r in recipes])

            for recipe, family, series in zip(recipes, families, compiled):
                kind = MetricKind(recipe.spec.type)
                self._exporters[recipe.spec.name] = EXPORTER_CLASSES[kind](family, series)

            names = [r.spec.name for r in recipes]
            self._logger.info(f"Registered metrics {names}")
            return names

    def update(self) -> None:
        with self._lock:
            for exporter in self._exporters.values():
                exporter.advance()

    def clear(self, force: bool = False) -> list[str]:
        with self._lock:
            removed = sorted(
                name
                for name, exporter in self._exporters.items()
                if force or exporter.drained
            )
            for name in removed:
                self._families.release(self._exporters.pop(name).family)

            self._logger.info(f"Cleared metrics {removed} (force={force})")
            return removed

    # -- helpers --

    def _create_families(self, specs: Sequence[MetricSpec]) -> list[MetricFamily]:
        """Create one family per spec, releasing all of them if any is rejected."""
        created: list[MetricFamily] = []
        for index, spec in enumerate(specs):
            try:
                created.append(self._create_family(spec))
            except ValueError as e:
                for family in created:
                    self._families.release(family)
                raise RecipeValidationError(
                    f"metric {spec.name!r} rejected: {e}", index=index
                ) from e
        return created

    def _create_family(self, spec: MetricSpec) -> MetricFamily:
        kind = MetricKind(spec.type)
        if kind is MetricKind.COUNTER:
            return self._families.counter(spec.name, spec.labels)
        if kind is MetricKind.GAUGE:
            return self._families.gauge(spec.name, spec.labels)
        return self._families.histogram(spec.name, spec.labels, spec.buckets)
