"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from mindscore.api.v1 import assessments, health, instruments

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Instrument catalog and stateless scoring
api_router.include_router(instruments.router)

# Stored patient assessments
api_router.include_router(assessments.router)
