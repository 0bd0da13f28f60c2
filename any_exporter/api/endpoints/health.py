"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check() -> dict[str, str]:
    """Check if the exporter is up.

    Returns:
    --------
        dict: A dictionary containing the status of the exporter.
    """
    return {"status": "healthy"}
