"""Verification of identity-provider session tokens."""

import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt

from socialapp.config import settings

logger = logging.getLogger(__name__)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and verify an identity-provider session JWT.
    
    Args:
        token: JWT token string
    
    Returns:
        Token payload dictionary
    
    Raises:
        ValueError: If IDENTITY_JWT_KEY is not configured
        HTTPException: If token is invalid or expired
    """
    if not settings.IDENTITY_JWT_KEY:
        raise ValueError("IDENTITY_JWT_KEY environment variable is not set")

    options = {"verify_aud": settings.IDENTITY_JWT_AUDIENCE is not None}
    try:
        payload = jwt.decode(
            token,
            settings.IDENTITY_JWT_KEY,
            algorithms=[settings.IDENTITY_JWT_ALGORITHM],
            audience=settings.IDENTITY_JWT_AUDIENCE,
            issuer=settings.IDENTITY_JWT_ISSUER,
            options=options,
        )
        return payload
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def get_token_claims(token: str) -> Optional[Dict[str, Any]]:
    """Return verified claims, or None if the token is invalid.
    
    Args:
        token: JWT token string
    
    Returns:
        Claims dictionary, or None if invalid
    """
    try:
        return decode_token(token)
    except HTTPException:
        return None
    except ValueError as e:
        logger.error(f"[AUTH] Cannot verify session token: {e}")
        return None
