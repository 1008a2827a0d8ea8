"""
API v1 Router

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter

from genibi.api.v1.endpoints.chat import router as chat_router
from genibi.api.v1.endpoints.health import router as health_router
from genibi.api.v1.endpoints.resources import router as resources_router

api_router = APIRouter()

api_router.include_router(
    health_router,
    prefix="/health",
    tags=["Health"],
)

api_router.include_router(
    chat_router,
    prefix="/chat",
    tags=["Chat"],
)

api_router.include_router(
    resources_router,
    prefix="/resources",
    tags=["Resources"],
)
