"""CRUD operations package - exports singleton instances for all models."""

from .base import CRUDBase
from .user import crud_user
from .post import crud_post
from .like import crud_like
from .notification import crud_notification


__all__ = [
    # Base
    "CRUDBase",
    # CRUD instances
    "crud_user",
    "crud_post",
    "crud_like",
    "crud_notification",
]
