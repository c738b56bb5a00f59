"""Top-level API router composition."""

from fastapi import APIRouter

from flink_lifecycle.api.routes import decisions_router, health_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(decisions_router)

__all__ = ["api_router"]
