"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1 import config, events_stream, reference

api_router = APIRouter()

# Include routers
api_router.include_router(config.router, prefix="/config", tags=["Config"])
api_router.include_router(reference.router, prefix="/reference", tags=["Reference"])
api_router.include_router(events_stream.router, tags=["Events"])
