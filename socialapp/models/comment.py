"""Comment model for post comments."""

import uuid
from datetime import datetime

from sqlalchemy import Column, String, Text, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship
from ..database import Base


class Comment(Base):
    """Comment on a post. Removed together with its post."""
    
    __tablename__ = "comments"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    
    # Foreign Keys
    post_id = Column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    author_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    # Comment Content
    content = Column(Text, nullable=False)
    
    # Timestamps
    created_at = Column(TIMESTAMP, default=datetime.utcnow, index=True)
    
    # Constraints & Indexes
    __table_args__ = (
        Index('idx_comment_author_post', 'author_id', 'post_id'),
    )
    
    # Relationships
    post = relationship("Post", back_populates="comments")
    author = relationship("User", back_populates="comments")
    notifications = relationship(
        "Notification",
        back_populates="comment",
        cascade="all, delete"
    )
