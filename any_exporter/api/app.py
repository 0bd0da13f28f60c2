"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from any_exporter.adapters.metric_families import PrometheusMetricFamilyFactory
from any_exporter.adapters.metrics_renderer import PrometheusMetricsRenderer
from any_exporter.api.endpoints import health, metrics, recipe
from any_exporter.core.logging import logger
from any_exporter.core.protocols.metrics_renderer import MetricsRenderer
from any_exporter.domains.recipes.protocols import RecipeRegistryProtocol
from any_exporter.domains.recipes.registry import RecipeRegistry
from any_exporter.domains.recipes.types import RecipeConflictError, RecipeError

_logger = logger.with_context(component="api")


async def _conflict_handler(request: Request, exc: RecipeConflictError) -> JSONResponse:
    _logger.warning(f"Recipe rejected: {exc}")
    return JSONResponse(status_code=409, content={"detail": str(exc), "name": exc.name})


async def _recipe_error_handler(request: Request, exc: RecipeError) -> JSONResponse:
    _logger.warning(f"Recipe rejected: {exc}")
    content = {"detail": str(exc), "index": exc.index}
    if exc.row is not None:
        content["row"] = exc.row
    return JSONResponse(status_code=400, content=content)


def create_app(
    registry: Optional[RecipeRegistryProtocol] = None,
    renderer: Optional[MetricsRenderer] = None,
) -> FastAPI:
    """Build the exporter application.

    Without arguments the app gets a Prometheus-backed registry on a private
    CollectorRegistry, and the renderer serializes that same registry.

    Args:
        registry: Recipe registry to serve; tests pass a fake.
        renderer: Renderer used by ``/metrics``; must be given together with
            a custom ``registry`` unless the default renderer is wanted.
    """
    if registry is None:
        families = PrometheusMetricFamilyFactory()
        registry = RecipeRegistry(families)
        renderer = renderer or PrometheusMetricsRenderer(families)
    if renderer is None:
        raise ValueError("a renderer is required when a custom registry is given")

    app = FastAPI(title="any-exporter")
    app.state.recipe_registry = registry
    app.state.metrics_renderer = renderer

    app.add_exception_handler(RecipeConflictError, _conflict_handler)
    app.add_exception_handler(RecipeError, _recipe_error_handler)

    app.include_router(health.router)
    app.include_router(recipe.router)
    app.include_router(metrics.router)
    return app
