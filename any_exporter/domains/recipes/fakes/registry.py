"""Fake recipe registry for testing."""

from __future__ import annotations

from typing import Optional, Sequence

from any_exporter.domains.recipes.schemas import Recipe


class FakeRecipeRegistry:
    """Test implementation of RecipeRegistryProtocol.

    Records calls and returns canned results. Configure via seed methods.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._removed: list[str] = []
        self._should_raise: Optional[Exception] = None
        self.documents: list[str | bytes] = []
        self.update_calls: int = 0
        self.clear_calls: list[bool] = []

    def seed_names(self, *names: str) -> None:
        self._names.extend(names)

    def seed_removed(self, *names: str) -> None:
        self._removed.extend(names)

    def set_error(self, error: Exception) -> None:
        self._should_raise = error

    def register(self, recipes: Sequence[Recipe]) -> list[str]:
        if self._should_raise:
            raise self._should_raise
        names = [r.spec.name for r in recipes]
        self._names.extend(names)
        return names

    def register_document(self, text: str | bytes) -> list[str]:
        self.documents.append(text)
        if self._should_raise:
            raise self._should_raise
        return list(self._names)

    def update(self) -> None:
        self.update_calls += 1

    def clear(self, force: bool = False) -> list[str]:
        self.clear_calls.append(force)
        removed = list(self._removed)
        self._names = [n for n in self._names if n not in removed]
        return removed

    def names(self) -> list[str]:
        return sorted(self._names)
