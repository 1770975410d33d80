"""Pydantic schemas for comments."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .user import AuthorSummary


class CommentCreate(BaseModel):
    """Schema for creating a comment."""
    content: str = Field("", description="Comment content")


class CommentRead(BaseModel):
    """Schema for a stored comment."""
    id: str
    post_id: str
    author_id: str
    content: str
    created_at: datetime
    author: Optional[AuthorSummary] = None
    
    class Config:
        from_attributes = True
