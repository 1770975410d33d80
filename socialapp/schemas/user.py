"""Pydantic schemas for users and identity-provider principals."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class AuthorSummary(BaseModel):
    """Author projection embedded in posts, comments and notifications."""
    id: str
    name: Optional[str] = None
    image: Optional[str] = None
    username: str

    model_config = ConfigDict(from_attributes=True)


class SessionUser(BaseModel):
    """Client-safe view of the signed-in identity-provider user."""
    id: str
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": "user_2aXkQ1",
            "username": "ada",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "image_url": "https://img.example.com/ada.png",
            "email": "ada@example.com",
        }
    })
