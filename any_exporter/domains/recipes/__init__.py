"""Recipes domain - scripted metric registration and scrape-driven advancement."""

from any_exporter.domains.recipes.registry import RecipeRegistry
from any_exporter.domains.recipes.schemas import DataRow, LabelPair, MetricSpec, Recipe
from any_exporter.domains.recipes.sequence import compile_sequence
from any_exporter.domains.recipes.types import (
    MetricKind,
    RecipeConflictError,
    RecipeError,
    RecipeValidationError,
    SequenceFormatError,
)

__all__ = [
    "DataRow",
    "LabelPair",
    "MetricKind",
    "MetricSpec",
    "Recipe",
    "RecipeConflictError",
    "RecipeError",
    "RecipeRegistry",
    "RecipeValidationError",
    "SequenceFormatError",
    "compile_sequence",
]
