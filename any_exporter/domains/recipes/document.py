"""Loader for YAML recipe documents.

A document holds one recipe per YAML document, separated by ``---``.
"""

from __future__ import annotations

import yaml
from pydantic import ValidationError

from any_exporter.domains.recipes.schemas import Recipe
from any_exporter.domains.recipes.types import RecipeValidationError


def _describe(error: ValidationError) -> str:
    def _loc(err: dict) -> str:
        loc = err.get("loc", ())
        return ".".join(str(x) for x in loc) if loc else "?"

    return "; ".join(f"{_loc(err)}: {err.get('msg')}" for err in error.errors())


def load_recipes(text: str | bytes) -> list[Recipe]:
    """Parse every recipe in ``text``.

    Empty YAML documents (e.g. a trailing ``---``) are skipped.

    Raises:
        RecipeValidationError: The text is not YAML, a document is not a
            recipe mapping, or no recipe is present at all.
    """
    recipes: list[Recipe] = []
    index = 0
    try:
        for raw in yaml.safe_load_all(text):
            if raw is None:
                continue
            if not isinstance(raw, dict):
                raise RecipeValidationError(
                    f"recipe must be a mapping, got {type(raw).__name__}", index=index
                )
            try:
                recipes.append(Recipe.model_validate(raw))
            except ValidationError as e:
                raise RecipeValidationError(
                    f"invalid recipe structure: {_describe(e)}", index=index
                ) from e
            index += 1
    except yaml.YAMLError as e:
        raise RecipeValidationError(f"invalid YAML: {e}", index=index) from e

    if not recipes:
        raise RecipeValidationError("recipe document is empty")
    return recipes
