"""Request-scoped dependencies.

The registry and renderer are built once in ``create_app`` and stored on
``app.state``; endpoints resolve them through these helpers so tests can
swap in fakes.
"""

from fastapi import Request

from any_exporter.core.protocols.metrics_renderer import MetricsRenderer
from any_exporter.domains.recipes.protocols import RecipeRegistryProtocol


def get_registry(request: Request) -> RecipeRegistryProtocol:
    return request.app.state.recipe_registry


def get_renderer(request: Request) -> MetricsRenderer:
    return request.app.state.metrics_renderer
