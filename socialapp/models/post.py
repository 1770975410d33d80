"""Post model for the social feed."""

import uuid
from datetime import datetime

from sqlalchemy import Column, String, Text, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship
from ..database import Base


class Post(Base):
    """A post written by a single author."""
    
    __tablename__ = "posts"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    
    # Foreign Keys
    author_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    # Post Content
    content = Column(Text, nullable=True)
    image = Column(String(500), nullable=True)
    
    # Timestamps
    created_at = Column(TIMESTAMP, default=datetime.utcnow, index=True)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Constraints & Indexes
    __table_args__ = (
        # Posts by author, newest first
        Index('idx_post_author_created', 'author_id', 'created_at'),
    )
    
    # Relationships
    author = relationship("User", back_populates="posts")
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete",
        order_by="Comment.created_at.asc()"
    )
    likes = relationship(
        "Like",
        back_populates="post",
        cascade="all, delete"
    )
    notifications = relationship(
        "Notification",
        back_populates="post",
        cascade="all, delete"
    )
