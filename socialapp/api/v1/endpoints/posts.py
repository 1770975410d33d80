"""Post, like, comment and feed endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from socialapp.api.deps import get_current_user_id, get_db, get_post_service
from socialapp.core.exceptions import FeedUnavailableError, FeedUnavailableException
from socialapp.schemas.comment import CommentCreate
from socialapp.schemas.post import PostCreate
from socialapp.schemas.result import ActionResult, ErrorKind
from socialapp.services.post_service import PostService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
)

ERROR_STATUS = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _envelope_response(
    result: Optional[ActionResult],
    success_status: int = status.HTTP_200_OK,
    user_id: Optional[str] = None,
) -> Response:
    """Render an action result. None (signed-out no-op) becomes 204 No Content."""
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    if result.success:
        status_code = success_status
    elif result.error_kind == ErrorKind.UNAUTHORIZED and user_id is None:
        status_code = status.HTTP_401_UNAUTHORIZED
    else:
        status_code = ERROR_STATUS.get(result.error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(mode="json", exclude_none=True),
    )


@router.post(
    "",
    response_model=ActionResult,
    status_code=status.HTTP_201_CREATED,
    summary="Create new post",
    responses={204: {"description": "Signed out, nothing happened"}},
)
def create_post(
    post_in: PostCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    db: Session = Depends(get_db),
) -> Response:
    """Create a new post for the signed-in user."""
    result = service.create_post(db, user_id=user_id, content=post_in.content, image=post_in.image)
    return _envelope_response(result, success_status=status.HTTP_201_CREATED)


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="Get the feed",
    description="""
    Get the newest posts (at most `FEED_LIMIT`, newest first) with author,
    comments (oldest first), liking user ids and counts.

    There is no pagination. The rendered feed is cached until the next write.
    """,
)
def get_posts(
    service: PostService = Depends(get_post_service),
    db: Session = Depends(get_db),
):
    """Get the feed, from the page cache when possible."""
    cached = service.cache.get(service.feed_path)
    if cached is not None:
        return JSONResponse(content=cached)

    generation = service.cache.generation(service.feed_path)
    try:
        posts = service.get_posts(db)
    except FeedUnavailableError as e:
        raise FeedUnavailableException(detail=str(e))

    content = [post.model_dump(mode="json") for post in posts]
    # A write that landed during the read leaves this page uncached
    service.cache.set(service.feed_path, content, generation=generation)
    return JSONResponse(content=content)


@router.delete(
    "/{post_id}",
    response_model=ActionResult,
    status_code=status.HTTP_200_OK,
    summary="Delete post",
    description="""
    Delete a post with its comments, likes and notifications.

    **Access:** Post author only
    """,
)
def delete_post(
    post_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    db: Session = Depends(get_db),
) -> Response:
    """Delete a post."""
    result = service.delete_post(db, user_id=user_id, post_id=post_id)
    return _envelope_response(result, user_id=user_id)


@router.post(
    "/{post_id}/like",
    response_model=ActionResult,
    status_code=status.HTTP_200_OK,
    summary="Toggle like on post",
    description="""
    Like or unlike a post. If already liked, it will unlike. If not liked, it will like
    and notify the post's author (unless it is your own post).
    """,
)
def toggle_like(
    post_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    db: Session = Depends(get_db),
) -> Response:
    """Toggle like on a post."""
    result = service.toggle_like(db, user_id=user_id, post_id=post_id)
    return _envelope_response(result)


@router.post(
    "/{post_id}/comments",
    response_model=ActionResult,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment on post",
)
def create_comment(
    post_id: str,
    comment_in: CommentCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    db: Session = Depends(get_db),
) -> Response:
    """Comment on a post."""
    result = service.create_comment(db, user_id=user_id, post_id=post_id, content=comment_in.content)
    return _envelope_response(result, success_status=status.HTTP_201_CREATED)
