"""FastAPI dependency injection functions for identity and database access."""

import logging
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from socialapp.core.exceptions import NotAuthenticatedException
from socialapp.database import SessionLocal
from socialapp.services.cache import PageCache, get_page_cache
from socialapp.services.identity_service import (
    IdentityProvider,
    Principal,
    get_identity_provider,
    resolve_current_user_id,
)
from socialapp.services.post_service import PostService

logger = logging.getLogger(__name__)

# Bearer token scheme; a missing header is not an error
bearer_scheme_optional = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency to get database session.
    
    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme_optional),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Optional[Principal]:
    """
    Dependency to get the identity-provider principal of the request.

    Returns None if no token is provided or the token does not verify.
    """
    if credentials is None:
        return None

    token = credentials.credentials
    token_preview = token[:20] + "..." if len(token) > 20 else token
    principal = provider.verify(token)
    if principal is None:
        logger.warning(f"[AUTH] Token rejected: {token_preview}")
        return None

    logger.debug(f"[AUTH] Principal resolved: external_id={principal.external_id}")
    return principal


def get_current_user_id(
    principal: Optional[Principal] = Depends(get_principal),
    db: Session = Depends(get_db),
) -> Optional[str]:
    """
    Dependency to resolve the local user id once per request.

    Returns None when signed out or when the principal has not been synced yet.
    """
    user_id = resolve_current_user_id(db, principal)
    if principal is not None and user_id is None:
        logger.info(f"[AUTH] No local user yet for external_id={principal.external_id}")
    return user_id


def require_current_user_id(
    user_id: Optional[str] = Depends(get_current_user_id),
) -> str:
    """
    Dependency for endpoints that cannot run signed out.

    Raises:
        NotAuthenticatedException: 401 if no local user was resolved
    """
    if user_id is None:
        raise NotAuthenticatedException()
    return user_id


def get_post_service(cache: PageCache = Depends(get_page_cache)) -> PostService:
    return PostService(cache=cache)


__all__ = [
    "bearer_scheme_optional",
    "get_db",
    "get_principal",
    "get_current_user_id",
    "require_current_user_id",
    "get_post_service",
]
