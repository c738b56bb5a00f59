"""Route modules public API."""

from flink_lifecycle.api.routes.decisions import router as decisions_router
from flink_lifecycle.api.routes.health import router as health_router

__all__ = ["decisions_router", "health_router"]
