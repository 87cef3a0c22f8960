"""Version 1 of the HTTP API."""

from sahara.api.v1.router import api_router

__all__ = ["api_router"]
