"""CRUD operations for Post."""

from typing import List, Optional
from sqlalchemy import select, desc
from sqlalchemy.orm import Session, selectinload

from socialapp.crud.base import CRUDBase
from socialapp.models.comment import Comment
from socialapp.models.post import Post


class CRUDPost(CRUDBase[Post]):
    """CRUD operations for Post."""
    
    def create_post(
        self,
        db: Session,
        *,
        author_id: str,
        content: Optional[str],
        image: Optional[str]
    ) -> Post:
        """Create a new post."""
        post = Post(
            author_id=author_id,
            content=content,
            image=image,
        )
        try:
            db.add(post)
            db.commit()
            db.refresh(post)
        except Exception:
            db.rollback()
            raise
        return post
    
    def get_author_id(self, db: Session, *, post_id: str) -> Optional[str]:
        """Get only the author id of a post, or None if the post does not exist."""
        stmt = select(Post.author_id).where(Post.id == post_id)
        return db.scalar(stmt)
    
    def delete_post(self, db: Session, *, post_id: str) -> Optional[Post]:
        """Delete a post with its comments, likes and notifications."""
        post = self.get(db, post_id)
        if not post:
            return None
        return self.remove(db, db_obj=post)
    
    def get_feed(self, db: Session, *, limit: int = 100) -> List[Post]:
        """Get the newest posts with authors, comments and likes eagerly loaded."""
        stmt = (
            select(Post)
            .options(
                selectinload(Post.author),
                selectinload(Post.comments).selectinload(Comment.author),
                selectinload(Post.likes),
            )
            .order_by(desc(Post.created_at))
            .limit(limit)
        )
        return list(db.scalars(stmt).all())


# Singleton instance
crud_post = CRUDPost(Post)
