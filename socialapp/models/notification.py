import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import Column, String, Boolean, TIMESTAMP, ForeignKey, Index, Enum as SQLEnum
from sqlalchemy.orm import relationship
from ..database import Base


class NotificationType(str, Enum):
    """Interactions that notify a post's author."""
    LIKE = "LIKE"
    COMMENT = "COMMENT"


class Notification(Base):
    __tablename__ = "notifications"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    
    # Recipient
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # Actor
    creator_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    
    # Classification
    type = Column(SQLEnum(NotificationType, name="notification_type"), nullable=False)
    
    # Status
    read = Column(Boolean, default=False, nullable=False)
    
    # Related Entity
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=True)
    comment_id = Column(String(36), ForeignKey("comments.id", ondelete="CASCADE"), nullable=True)
    
    # Timestamps
    created_at = Column(TIMESTAMP, default=datetime.utcnow, index=True)
    
    __table_args__ = (
        Index("ix_notifications_user_created", "user_id", "created_at"),
    )
    
    # Relationships
    user = relationship("User", foreign_keys=[user_id], back_populates="notifications")
    creator = relationship("User", foreign_keys=[creator_id])
    post = relationship("Post", back_populates="notifications")
    comment = relationship("Comment", back_populates="notifications")
