"""CRUD operations for `User` model."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from socialapp.crud.base import CRUDBase
from socialapp.models.user import User


class CRUDUser(CRUDBase[User]):
    def get_by_external_id(self, db: Session, external_id: str) -> Optional[User]:
        return self.get_by_field(db, "external_id", external_id)

    def get_id_by_external_id(self, db: Session, external_id: str) -> Optional[str]:
        """Return only the local id, without loading the full row."""
        stmt = select(User.id).where(User.external_id == external_id).limit(1)
        return db.scalar(stmt)

    def create_from_identity(
        self,
        db: Session,
        *,
        external_id: str,
        email: str,
        username: str,
        name: Optional[str] = None,
        image: Optional[str] = None,
    ) -> User:
        db_obj = User(
            external_id=external_id,
            email=email,
            username=username,
            name=name,
            image=image,
        )
        try:
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        except Exception:
            db.rollback()
            raise
        return db_obj


crud_user = CRUDUser(User)
