"""Recipe endpoints: register and retire scripted metrics."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from any_exporter.api.deps import get_registry
from any_exporter.core.logging import logger
from any_exporter.domains.recipes.protocols import RecipeRegistryProtocol

router = APIRouter()

_logger = logger.with_context(component="api", endpoint="/recipe")


@router.post("/recipe")
async def post_recipe(
    request: Request,
    registry: RecipeRegistryProtocol = Depends(get_registry),
) -> dict[str, Any]:
    """Register every recipe in the YAML request body.

    Responds 409 if a name is already registered and 400 if the document
    is invalid; in both cases nothing from the body is registered.
    """
    body = await request.body()
    if not body:
        _logger.warning("Recipe request body is empty")
        raise HTTPException(status_code=400, detail="request body is empty")

    names = await run_in_threadpool(registry.register_document, body)
    _logger.info("Recipe post request completed successfully")
    return {"status": "ok", "registered": names}


@router.delete("/recipe")
def delete_recipe(
    force: str = "",
    registry: RecipeRegistryProtocol = Depends(get_registry),
) -> dict[str, Any]:
    """Retire drained metrics, or every metric when ``force=true``.

    Metrics that still have values to emit are skipped silently unless
    forced; the request always succeeds.
    """
    removed = registry.clear(force=force.lower() == "true")
    _logger.info("Recipe delete request completed successfully")
    return {"status": "ok", "removed": removed}
