"""CRUD operations for `Notification` model."""

from __future__ import annotations

from typing import List

from sqlalchemy import select, update, and_
from sqlalchemy.orm import Session, selectinload

from socialapp.crud.base import CRUDBase
from socialapp.models.notification import Notification


class CRUDNotification(CRUDBase[Notification]):
    def get_by_user(self, db: Session, *, user_id: str) -> List[Notification]:
        """Get notifications addressed to a user, newest first."""
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .options(
                selectinload(Notification.creator),
                selectinload(Notification.post),
                selectinload(Notification.comment),
            )
            .order_by(Notification.created_at.desc())
        )
        return list(db.scalars(stmt).all())

    def mark_as_read(self, db: Session, *, user_id: str, notification_ids: List[str]) -> int:
        """Mark the user's notifications with the given ids as read.

        Ids belonging to other users are ignored. Returns the number of rows updated.
        """
        stmt = (
            update(Notification)
            .where(
                and_(
                    Notification.user_id == user_id,
                    Notification.id.in_(notification_ids),
                )
            )
            .values(read=True)
        )
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return result.rowcount


# Singleton instance
crud_notification = CRUDNotification(Notification)
