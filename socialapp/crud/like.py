"""CRUD operations for Like."""

from typing import Optional
from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from socialapp.crud.base import CRUDBase
from socialapp.models.like import Like


class CRUDLike(CRUDBase[Like]):
    """CRUD operations for Like."""
    
    def get_like(
        self,
        db: Session,
        *,
        post_id: str,
        user_id: str
    ) -> Optional[Like]:
        """Get like record if exists."""
        stmt = select(Like).where(
            and_(
                Like.post_id == post_id,
                Like.user_id == user_id
            )
        )
        return db.scalars(stmt).first()


# Singleton instance
crud_like = CRUDLike(Like)
