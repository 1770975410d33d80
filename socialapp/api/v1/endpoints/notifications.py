"""Notification endpoints for the signed-in user."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from socialapp.api.deps import get_db, require_current_user_id
from socialapp.crud import crud_notification
from socialapp.schemas.notification import (
    MarkReadRequest,
    MarkReadResponse,
    NotificationResponse,
)

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
)


@router.get(
    "",
    response_model=List[NotificationResponse],
    status_code=status.HTTP_200_OK,
    summary="List notifications",
    description="""
    Get the current user's notifications, newest first, with the user who
    triggered each one and the related post and comment.
    """,
    responses={
        200: {"description": "List of notifications retrieved successfully"},
        401: {"description": "Not authenticated"},
    },
)
def list_notifications(
    user_id: str = Depends(require_current_user_id),
    db: Session = Depends(get_db),
) -> List[NotificationResponse]:
    """List all notifications for the current user."""
    notifications = crud_notification.get_by_user(db, user_id=user_id)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.post(
    "/read",
    response_model=MarkReadResponse,
    status_code=status.HTTP_200_OK,
    summary="Mark notifications as read",
    responses={
        200: {"description": "Notifications marked as read"},
        401: {"description": "Not authenticated"},
    },
)
def mark_notifications_read(
    body: MarkReadRequest,
    user_id: str = Depends(require_current_user_id),
    db: Session = Depends(get_db),
) -> MarkReadResponse:
    """Mark the given notifications of the current user as read."""
    marked = crud_notification.mark_as_read(db, user_id=user_id, notification_ids=body.notification_ids)
    return MarkReadResponse(marked=marked)
