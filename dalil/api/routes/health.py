"""
Health Check Routes - Liveness endpoint for load balancers and probes.

Does not check Groq connectivity.
"""
from fastapi import APIRouter, Depends

from dalil import __version__
from dalil.core.config import Settings
from dalil.core.logging_config import get_logger
from dalil.models.chat import HealthResponse
from dalil.api.dependencies import get_app_settings

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Report that the API is running and which model it relays to."""
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        model=settings.llm_model,
        version=__version__,
    )
