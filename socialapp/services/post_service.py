"""Service layer for post, like and comment actions and the feed."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from socialapp.config import settings
from socialapp.core.exceptions import (
    ActionError,
    FeedUnavailableError,
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
)
from socialapp.crud import crud_like, crud_post
from socialapp.models.post import Post
from socialapp.schemas.comment import CommentRead
from socialapp.schemas.post import FeedCounts, FeedPost, LikeRef, PostRead
from socialapp.schemas.result import ActionResult, ErrorKind
from socialapp.schemas.user import AuthorSummary
from socialapp.services import policy
from socialapp.services.cache import PageCache, get_page_cache
from socialapp.services.transaction import commit_intents

logger = logging.getLogger(__name__)


class PostService:
    """
    Mutations and reads of the social feed.

    Every mutation takes the acting user's id explicitly. A missing id means
    the caller is signed out (or not yet synced): `create_post`,
    `toggle_like` and `create_comment` then return None and do nothing.

    Expected failures come back as an `ActionResult` with an `ErrorKind`;
    unexpected ones are logged with traceback and reported only as the
    operation's generic message.
    """

    def __init__(self, cache: Optional[PageCache] = None, feed_path: Optional[str] = None):
        self.cache = cache or get_page_cache()
        self.feed_path = feed_path or settings.FEED_CACHE_PATH

    def _invalidate_feed(self) -> None:
        self.cache.invalidate(self.feed_path)

    # ----- Posts -----
    def create_post(
        self,
        db: Session,
        *,
        user_id: Optional[str],
        content: Optional[str],
        image: Optional[str] = None,
    ) -> Optional[ActionResult]:
        """Create a post. Content and image are stored as given."""
        try:
            if not user_id:
                return None

            post = crud_post.create_post(db, author_id=user_id, content=content, image=image)

            self._invalidate_feed()
            return ActionResult.ok(post=PostRead.model_validate(post))
        except Exception:
            logger.exception("Failed to create post")
            return ActionResult.fail(ErrorKind.INTERNAL, "Failed to create post")

    def delete_post(
        self,
        db: Session,
        *,
        user_id: Optional[str],
        post_id: Optional[str],
    ) -> ActionResult:
        """Delete a post. Only its author may do so."""
        try:
            if not isinstance(post_id, str) or not post_id.strip():
                raise InvalidInputError("Invalid post ID")

            if not user_id:
                raise PermissionDeniedError("Unauthorized")

            author_id = crud_post.get_author_id(db, post_id=post_id)
            if author_id is None:
                raise NotFoundError("Post not found")

            if not policy.can_delete_post(author_id, user_id):
                raise PermissionDeniedError("Unauthorized - no delete permission")

            crud_post.delete_post(db, post_id=post_id)

            self._invalidate_feed()
            return ActionResult.ok()
        except ActionError as e:
            return ActionResult.fail(e.kind, e.message)
        except Exception:
            # Generic message only, details stay in the server log
            logger.exception(f"Failed to delete post {post_id}")
            return ActionResult.fail(ErrorKind.INTERNAL, "Failed to delete post")

    # ----- Likes -----
    def toggle_like(
        self,
        db: Session,
        *,
        user_id: Optional[str],
        post_id: str,
    ) -> Optional[ActionResult]:
        """Like the post, or unlike it if the user already liked it."""
        try:
            if not user_id:
                return None

            existing_like = crud_like.get_like(db, post_id=post_id, user_id=user_id)

            author_id = crud_post.get_author_id(db, post_id=post_id)
            if author_id is None:
                raise NotFoundError("Post not found")

            if existing_like:
                crud_like.remove(db, db_obj=existing_like)
            else:
                commit_intents(
                    db,
                    policy.like_intents(user_id=user_id, post_id=post_id, post_author_id=author_id),
                )

            self._invalidate_feed()
            return ActionResult.ok()
        except NotFoundError as e:
            logger.warning(f"Failed to toggle like on {post_id}: {e.message}")
            return ActionResult.fail(e.kind, "Failed to toggle like")
        except Exception:
            logger.exception(f"Failed to toggle like on {post_id}")
            return ActionResult.fail(ErrorKind.INTERNAL, "Failed to toggle like")

    # ----- Comments -----
    def create_comment(
        self,
        db: Session,
        *,
        user_id: Optional[str],
        post_id: str,
        content: Optional[str],
    ) -> Optional[ActionResult]:
        """Comment on a post, notifying its author unless they commented themselves."""
        try:
            if not user_id:
                return None
            if not content:
                raise InvalidInputError("Content is required")

            author_id = crud_post.get_author_id(db, post_id=post_id)
            if author_id is None:
                raise NotFoundError("Post not found")

            created = commit_intents(
                db,
                policy.comment_intents(
                    user_id=user_id,
                    post_id=post_id,
                    post_author_id=author_id,
                    content=content,
                ),
            )
            comment = created["comment"]

            self._invalidate_feed()
            return ActionResult.ok(comment=CommentRead.model_validate(comment))
        except ActionError as e:
            return ActionResult.fail(e.kind, e.message)
        except Exception:
            logger.exception(f"Failed to create comment on {post_id}")
            return ActionResult.fail(ErrorKind.INTERNAL, "Failed to create comment")

    # ----- Feed -----
    def get_posts(self, db: Session, *, limit: Optional[int] = None) -> List[FeedPost]:
        """
        Get the newest posts, denormalized for rendering.

        Args:
            db: Database session
            limit: Maximum number of posts (default: FEED_LIMIT)

        Returns:
            List[FeedPost]: Newest first; comments oldest first.

        Raises:
            FeedUnavailableError: If storage fails. The original message is kept.
        """
        try:
            posts = crud_post.get_feed(db, limit=limit or settings.FEED_LIMIT)
            return [_to_feed_post(post) for post in posts]
        except Exception as e:
            logger.error(f"Error in get_posts: {e}", exc_info=True)
            raise FeedUnavailableError(str(e) or type(e).__name__) from e


def _to_feed_post(post: Post) -> FeedPost:
    return FeedPost(
        **PostRead.model_validate(post).model_dump(),
        author=AuthorSummary.model_validate(post.author),
        comments=[CommentRead.model_validate(comment) for comment in post.comments],
        likes=[LikeRef.model_validate(like) for like in post.likes],
        counts=FeedCounts(likes=len(post.likes), comments=len(post.comments)),
    )
