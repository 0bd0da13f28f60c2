"""Recipe domain fakes."""

from any_exporter.domains.recipes.fakes.registry import FakeRecipeRegistry

__all__ = ["FakeRecipeRegistry"]
