"""Write intents and the single-commit executor that applies them."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from sqlalchemy.orm import Session

from socialapp.database import Base
from socialapp.models.comment import Comment
from socialapp.models.like import Like
from socialapp.models.notification import Notification, NotificationType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddLike:
    user_id: str
    post_id: str
    key: str = "like"


@dataclass(frozen=True)
class AddComment:
    author_id: str
    post_id: str
    content: str
    key: str = "comment"


@dataclass(frozen=True)
class AddNotification:
    type: NotificationType
    recipient_id: str
    actor_id: str
    post_id: str
    # Key of an AddComment earlier in the same batch
    comment_key: Optional[str] = None
    key: str = "notification"


WriteIntent = Union[AddLike, AddComment, AddNotification]


def _build(intent: WriteIntent, created: Dict[str, Base]) -> Base:
    if isinstance(intent, AddLike):
        return Like(user_id=intent.user_id, post_id=intent.post_id)
    if isinstance(intent, AddComment):
        return Comment(
            author_id=intent.author_id,
            post_id=intent.post_id,
            content=intent.content,
        )
    if isinstance(intent, AddNotification):
        notification = Notification(
            type=intent.type,
            user_id=intent.recipient_id,
            creator_id=intent.actor_id,
            post_id=intent.post_id,
        )
        if intent.comment_key is not None:
            if intent.comment_key not in created:
                raise KeyError(f"No write intent with key '{intent.comment_key}' precedes this notification")
            notification.comment = created[intent.comment_key]
        return notification
    raise TypeError(f"Unsupported write intent: {intent!r}")


def commit_intents(db: Session, intents: Sequence[WriteIntent]) -> Dict[str, Base]:
    """Apply all intents in one transaction.

    Either every row is committed or none is. Returns the created objects
    by intent key, refreshed after commit.
    """
    created: Dict[str, Base] = {}
    try:
        for intent in intents:
            obj = _build(intent, created)
            db.add(obj)
            # Flush so later intents can reference generated ids
            db.flush()
            created[intent.key] = obj
        db.commit()
    except Exception:
        db.rollback()
        raise

    for obj in created.values():
        db.refresh(obj)
    logger.debug(f"Committed {len(created)} write intent(s): {sorted(created)}")
    return created


__all__ = [
    "AddLike",
    "AddComment",
    "AddNotification",
    "WriteIntent",
    "commit_intents",
]
