"""
API route handlers.
"""

from api.routes.draft import router as draft_router

__all__ = ["draft_router"]
