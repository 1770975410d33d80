"""
SQLAlchemy Models for the social feed
"""

from ..database import Base
from .user import User
from .post import Post
from .comment import Comment
from .like import Like
from .notification import Notification, NotificationType

# Export all models
__all__ = [
    "Base",
    "User",
    "Post",
    "Comment",
    "Like",
    "Notification",
    "NotificationType",
]
