"""Scrape endpoint."""

from fastapi import APIRouter, Depends, Response

from any_exporter.api.deps import get_registry, get_renderer
from any_exporter.core.protocols.metrics_renderer import MetricsRenderer
from any_exporter.domains.recipes.protocols import RecipeRegistryProtocol

router = APIRouter()


@router.get("/metrics")
def get_metrics(
    registry: RecipeRegistryProtocol = Depends(get_registry),
    renderer: MetricsRenderer = Depends(get_renderer),
) -> Response:
    """Advance every scripted series one step, then render the exposition."""
    registry.update()
    return Response(content=renderer.generate(), media_type=renderer.content_type)
