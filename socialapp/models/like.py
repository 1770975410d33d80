"""Like model for post likes."""

import uuid
from datetime import datetime

from sqlalchemy import Column, String, TIMESTAMP, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from ..database import Base


class Like(Base):
    """A (user, post) like pair."""
    
    __tablename__ = "likes"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    
    # Foreign Keys
    post_id = Column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    # Timestamps
    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    
    # Constraints
    __table_args__ = (
        # One like per user per post
        UniqueConstraint('user_id', 'post_id', name='uq_like_user_post'),
        Index('idx_like_post', 'post_id', 'created_at'),
    )
    
    # Relationships
    post = relationship("Post", back_populates="likes")
    user = relationship("User", back_populates="likes")
