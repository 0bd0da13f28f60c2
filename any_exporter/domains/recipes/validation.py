"""Recipe batch validation.

Checks run in a fixed precedence, each one across the whole batch before
the next begins, so the reported index is stable for a given document:

1. name conflicts (with the live registry or inside the batch)
2. spec well-formedness
3. data-row label keys
4. data-row sequences (counters: non-decreasing, starting at zero or above)

A successful validation returns the compiled series, so callers never
compile a sequence twice.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

from any_exporter.domains.recipes.schemas import DataRow, MetricSpec, Recipe
from any_exporter.domains.recipes.sequence import compile_sequence, is_non_decreasing
from any_exporter.domains.recipes.series import Series
from any_exporter.domains.recipes.types import (
    MetricKind,
    RecipeConflictError,
    RecipeValidationError,
    SequenceFormatError,
)


def valid_buckets(buckets: Sequence[float]) -> bool:
    """Bucket bounds must be strictly positive and strictly increasing."""
    prev = 0.0
    for bound in buckets:
        if bound <= prev:
            return False
        prev = bound
    return True


def spec_problem(spec: MetricSpec) -> str | None:
    """Describe what is wrong with ``spec``, or return None if it is usable."""
    if not spec.name:
        return "metric name is empty"
    kind = MetricKind.parse(spec.type)
    if kind is None:
        return f"unknown metric type {spec.type!r}"
    if not spec.labels:
        return "label set is empty"
    if len(set(spec.labels)) != len(spec.labels):
        return f"duplicated label keys {spec.labels}"
    if kind is MetricKind.HISTOGRAM and not valid_buckets(spec.buckets):
        return f"buckets must be positive and strictly increasing: {spec.buckets}"
    return None


def row_labels_match(spec_labels: Sequence[str], row: DataRow) -> bool:
    """True if the row assigns exactly the declared label keys, once each."""
    keys = row.label_keys()
    if len(keys) != len(set(keys)):
        return False
    return len(keys) == len(spec_labels) and set(keys) == set(spec_labels)


class RecipeValidator:
    """Validates recipe batches against each other and the live registry."""

    def validate(
        self,
        recipes: Sequence[Recipe],
        registered: Collection[str],
    ) -> list[list[Series]]:
        """Validate ``recipes`` and compile their data rows.

        Args:
            recipes: The submitted batch, in document order.
            registered: Names currently owned by the registry.

        Returns:
            One list of compiled series per recipe, aligned with ``recipes``.

        Raises:
            RecipeConflictError: A name is already registered or repeated.
            RecipeValidationError: A spec or data row is inconsistent.
            SequenceFormatError: A sequence cannot be compiled.
        """
        self._check_conflicts(recipes, registered)
        self._check_specs(recipes)
        self._check_row_labels(recipes)
        return [self._compile_rows(index, recipe) for index, recipe in enumerate(recipes)]

    @staticmethod
    def _check_conflicts(recipes: Sequence[Recipe], registered: Collection[str]) -> None:
        seen: set[str] = set()
        for index, recipe in enumerate(recipes):
            name = recipe.spec.name
            if not name:
                continue
            if name in registered or name in seen:
                raise RecipeConflictError(name, index=index)
            seen.add(name)

    @staticmethod
    def _check_specs(recipes: Sequence[Recipe]) -> None:
        for index, recipe in enumerate(recipes):
            problem = spec_problem(recipe.spec)
            if problem:
                raise RecipeValidationError(
                    f"invalid metrics spec {recipe.spec.name!r}: {problem}", index=index
                )

    @staticmethod
    def _check_row_labels(recipes: Sequence[Recipe]) -> None:
        for index, recipe in enumerate(recipes):
            for row_index, row in enumerate(recipe.data):
                if not row_labels_match(recipe.spec.labels, row):
                    raise RecipeValidationError(
                        f"data labels {row.label_keys()} do not match "
                        f"spec labels {recipe.spec.labels}",
                        index=index,
                        row=row_index,
                    )

    @staticmethod
    def _compile_rows(index: int, recipe: Recipe) -> list[Series]:
        kind = MetricKind(recipe.spec.type)
        compiled = []
        for row_index, row in enumerate(recipe.data):
            try:
                values = compile_sequence(row.sequence)
            except SequenceFormatError as e:
                raise SequenceFormatError(
                    f"{recipe.spec.name}: {e.message}",
                    token=e.token,
                    index=index,
                    row=row_index,
                ) from e

            if kind is MetricKind.COUNTER and not is_non_decreasing(values):
                raise RecipeValidationError(
                    f"{recipe.spec.name}: counter sequence must be non-decreasing",
                    index=index,
                    row=row_index,
                )
            if kind is MetricKind.COUNTER and values[0] < 0:
                raise RecipeValidationError(
                    f"{recipe.spec.name}: counter sequence must not start below zero",
                    index=index,
                    row=row_index,
                )
            compiled.append(Series.build(row.label_map(), values))
        return compiled
