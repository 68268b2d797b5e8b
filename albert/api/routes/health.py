"""
Health check endpoints.
"""
from fastapi import APIRouter, status
from datetime import datetime

from albert import __version__
from ..schemas import HealthResponse
from ..dependencies import check_services_configured

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Check API status and whether the external services are configured.",
)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.
    Reports "degraded" while any external service lacks credentials.
    """
    configured = check_services_configured()

    return HealthResponse(
        status="healthy" if configured else "degraded",
        service="albert-podcast-api",
        version=__version__,
        services_configured=configured,
        timestamp=datetime.utcnow(),
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness Probe",
    description="Kubernetes liveness probe endpoint.",
)
async def liveness() -> dict:
    """Liveness probe - always returns OK if app is running."""
    return {"status": "alive"}


@router.get(
    "/health/config",
    status_code=status.HTTP_200_OK,
    summary="Configuration Status",
    description="Check API key configuration status (does not expose actual keys).",
)
async def config_status() -> dict:
    """
    Configuration status endpoint.
    Returns which APIs are configured without exposing sensitive keys.
    """
    from albert.config import config

    status = config.validate()

    return {
        "status": "configured" if status["ready_for_podcast"] else "partial",
        "apis": {
            "llm": "configured" if status["ai"]["llm_configured"] else "missing",
            "research": "configured" if status["ai"]["research_configured"] else "missing",
            "images": "configured" if status["ai"]["images_configured"] else "missing",
        },
        "models": status["models"],
    }
