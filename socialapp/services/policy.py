"""Authorization and notification rules, free of any database access."""

from typing import List, Optional

from socialapp.models.notification import NotificationType
from socialapp.services.transaction import (
    AddComment,
    AddLike,
    AddNotification,
    WriteIntent,
)


def can_delete_post(author_id: str, user_id: Optional[str]) -> bool:
    """Only the author may delete a post."""
    return user_id is not None and author_id == user_id


def notification_intent(
    type: NotificationType,
    *,
    actor_id: str,
    recipient_id: str,
    post_id: str,
    comment_key: Optional[str] = None,
) -> Optional[AddNotification]:
    """Notification for an interaction, or None when users act on their own posts."""
    if actor_id == recipient_id:
        return None
    return AddNotification(
        type=type,
        recipient_id=recipient_id,
        actor_id=actor_id,
        post_id=post_id,
        comment_key=comment_key,
    )


def like_intents(*, user_id: str, post_id: str, post_author_id: str) -> List[WriteIntent]:
    intents: List[WriteIntent] = [AddLike(user_id=user_id, post_id=post_id)]
    notification = notification_intent(
        NotificationType.LIKE,
        actor_id=user_id,
        recipient_id=post_author_id,
        post_id=post_id,
    )
    if notification:
        intents.append(notification)
    return intents


def comment_intents(
    *, user_id: str, post_id: str, post_author_id: str, content: str
) -> List[WriteIntent]:
    comment = AddComment(author_id=user_id, post_id=post_id, content=content)
    intents: List[WriteIntent] = [comment]
    notification = notification_intent(
        NotificationType.COMMENT,
        actor_id=user_id,
        recipient_id=post_author_id,
        post_id=post_id,
        comment_key=comment.key,
    )
    if notification:
        intents.append(notification)
    return intents
