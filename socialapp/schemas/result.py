"""Uniform result envelope returned by mutating actions."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .comment import CommentRead
from .post import PostRead


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INVALID_INPUT = "invalid_input"
    INTERNAL = "internal"


class ActionResult(BaseModel):
    """{success, error} envelope; `error_kind` lets callers branch without parsing text."""
    success: bool
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    post: Optional[PostRead] = None
    comment: Optional[CommentRead] = None

    @classmethod
    def ok(cls, **payload) -> "ActionResult":
        return cls(success=True, **payload)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "ActionResult":
        return cls(success=False, error=message, error_kind=kind)
