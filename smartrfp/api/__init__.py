"""API modules."""

from smartrfp.api.app import create_app
from smartrfp.api.routes import router

__all__ = ["create_app", "router"]
