"""
Health Check Endpoints

Provides system health and readiness endpoints for:
- Load balancer health checks
- Kubernetes health checks
- Monitoring systems
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from genibi import __version__
from genibi.api.dependencies import get_app_settings, get_chat_service
from genibi.config import Settings
from genibi.services.chat.chat_service import ChatService

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    environment: str


class ReadinessResponse(BaseModel):
    """Readiness check response with component health."""

    ready: bool
    components: dict


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Basic health check endpoint for load balancers",
)
async def health_check(
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """Returns 200 if application is running."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.env,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Readiness check including chat components",
)
async def readiness_check(
    service: ChatService = Depends(get_chat_service),
) -> ReadinessResponse:
    """
    Readiness check.

    The rule-based safety path has no external dependencies, so the
    service is ready even when the chat model is not configured;
    replies then come from the fallback generator.
    """
    components = {
        "safety_pipeline": True,
        "llm_available": service.model_available(),
    }

    return ReadinessResponse(
        ready=components["safety_pipeline"],
        components=components,
    )


@router.get(
    "/live",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Kubernetes liveness endpoint",
)
async def liveness_check(
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """Returns 200 if application process is alive."""
    return HealthResponse(
        status="alive",
        version=__version__,
        environment=settings.env,
    )
