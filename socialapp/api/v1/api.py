"""API v1 router aggregator."""

from fastapi import APIRouter

from socialapp.api.v1.endpoints import posts, users, notifications

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(posts.router)
api_router.include_router(users.router)
api_router.include_router(notifications.router)

__all__ = ["api_router"]
