"""Pydantic schemas for notifications."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from socialapp.models.notification import NotificationType
from .user import AuthorSummary


class NotificationPost(BaseModel):
    id: str
    content: Optional[str] = None
    image: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class NotificationComment(BaseModel):
    id: str
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationResponse(BaseModel):
    id: str
    type: NotificationType
    read: bool
    created_at: datetime
    creator: AuthorSummary
    post: Optional[NotificationPost] = None
    comment: Optional[NotificationComment] = None

    model_config = ConfigDict(from_attributes=True, json_schema_extra={
        "example": {
            "id": "5b0c4a1e-4c1f-4bb0-9f3e-0d1e2a3b4c5d",
            "type": "LIKE",
            "read": False,
            "created_at": "2026-10-19T10:00:00Z",
            "creator": {"id": "c3", "name": "Bob", "image": None, "username": "bob"},
            "post": {"id": "p1", "content": "hello", "image": None},
            "comment": None,
        }
    })


class MarkReadRequest(BaseModel):
    notification_ids: List[str] = Field(..., min_length=1)


class MarkReadResponse(BaseModel):
    success: bool = True
    marked: int
