"""HTTP API public surface."""

from flink_lifecycle.api.router import api_router

__all__ = ["api_router"]
