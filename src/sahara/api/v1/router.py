"""
API v1 Router

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter

from sahara.api.v1.endpoints.health import router as health_router
from sahara.api.v1.endpoints.sentiment import router as sentiment_router
from sahara.api.v1.endpoints.support import router as support_router

api_router = APIRouter()

api_router.include_router(
    health_router,
    prefix="/health",
    tags=["Health"],
)

api_router.include_router(
    sentiment_router,
    prefix="/sentiment",
    tags=["Sentiment"],
)

api_router.include_router(
    support_router,
    prefix="/support",
    tags=["Support"],
)
