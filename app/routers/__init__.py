"""API route handlers.

This module contains FastAPI routers for:
- Greet endpoint
"""

from app.routers.greet import router as greet_router

__all__ = ["greet_router"]
