"""HTTP API: routers, endpoints and dependencies."""

from sponsorship.api.router import api_router

__all__ = ["api_router"]
