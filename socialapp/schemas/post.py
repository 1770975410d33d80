"""Pydantic schemas for posts and the feed."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from .comment import CommentRead
from .user import AuthorSummary


class PostCreate(BaseModel):
    """Schema for creating a new post. Content and image are stored as given."""
    content: Optional[str] = Field(None, description="Post content")
    image: Optional[str] = Field(None, description="Image URL")


class PostRead(BaseModel):
    """Schema for a stored post."""
    id: str
    author_id: str
    content: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class LikeRef(BaseModel):
    user_id: str
    
    class Config:
        from_attributes = True


class FeedCounts(BaseModel):
    likes: int
    comments: int


class FeedPost(PostRead):
    """Post with author, comments, likers and counts embedded."""
    author: AuthorSummary
    comments: List[CommentRead] = []
    likes: List[LikeRef] = []
    counts: FeedCounts
