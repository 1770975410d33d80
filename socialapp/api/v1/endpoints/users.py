"""User endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from socialapp.api.deps import get_db, get_principal
from socialapp.schemas.user import SessionUser
from socialapp.services.identity_service import Principal, sync_user

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.get(
    "/session",
    response_model=Optional[SessionUser],
    status_code=status.HTTP_200_OK,
    summary="Get the signed-in user for the navigation bar",
)
def get_session_user(
    principal: Optional[Principal] = Depends(get_principal),
    db: Session = Depends(get_db),
) -> Optional[SessionUser]:
    """
    Return the client-safe view of the signed-in user, syncing them into
    the local database first. Returns null when signed out.
    
    Args:
        principal: Identity-provider user (injected via bearer token)
        db: Database session
        
    Returns:
        Optional[SessionUser]: Signed-in user or None
    """
    if principal is None:
        return None

    sync_user(db, principal)
    return principal.to_session_user()
