"""Identity-provider principals, their verification, and local user sync."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from socialapp.config import settings
from socialapp.core.security import get_token_claims
from socialapp.crud import crud_user
from socialapp.models.user import User
from socialapp.schemas.user import SessionUser
from socialapp.services.firebase_service import firebase_auth_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """The signed-in user as the identity provider describes them."""

    external_id: str
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None
    email: Optional[str] = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def to_session_user(self) -> SessionUser:
        return SessionUser(
            id=self.external_id,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            image_url=self.image_url,
            email=self.email,
        )


class IdentityProvider(Protocol):
    def verify(self, token: str) -> Optional[Principal]:
        ...


class JWTIdentityProvider:
    """Verifies session JWTs issued by the identity provider."""

    def verify(self, token: str) -> Optional[Principal]:
        claims = get_token_claims(token)
        if not claims or not claims.get("sub"):
            return None
        return Principal(
            external_id=claims["sub"],
            username=claims.get("username"),
            first_name=claims.get("first_name") or claims.get("given_name"),
            last_name=claims.get("last_name") or claims.get("family_name"),
            image_url=claims.get("image_url") or claims.get("picture"),
            email=claims.get("email"),
        )


class FirebaseIdentityProvider:
    """Verifies Firebase ID tokens."""

    def verify(self, token: str) -> Optional[Principal]:
        claims: Optional[Dict[str, Any]] = firebase_auth_service.verify_id_token(token)
        if not claims or not claims.get("uid"):
            return None
        first_name, _, last_name = (claims.get("name") or "").partition(" ")
        return Principal(
            external_id=claims["uid"],
            first_name=first_name or None,
            last_name=last_name or None,
            image_url=claims.get("picture"),
            email=claims.get("email"),
        )


# Singleton instance - chosen from settings on first use
identity_provider: Optional[IdentityProvider] = None


def get_identity_provider() -> IdentityProvider:
    """Get or create the configured identity provider."""
    global identity_provider
    if identity_provider is None:
        if settings.AUTH_PROVIDER == "firebase":
            identity_provider = FirebaseIdentityProvider()
        elif settings.AUTH_PROVIDER == "jwt":
            identity_provider = JWTIdentityProvider()
        else:
            raise ValueError(f"Unknown AUTH_PROVIDER '{settings.AUTH_PROVIDER}'. Use 'jwt' or 'firebase'.")
    return identity_provider


def resolve_current_user_id(db: Session, principal: Optional[Principal]) -> Optional[str]:
    """Local user id for the principal, or None when signed out or not yet synced."""
    if principal is None:
        return None
    return crud_user.get_id_by_external_id(db, principal.external_id)


def sync_user(db: Session, principal: Principal) -> User:
    """
    Create the local user for a principal on first sight; return existing users unchanged.

    Username and email are unique locally. If another user already holds
    them, the username gets the external id as suffix and the email falls
    back to a placeholder address.
    """
    existing = crud_user.get_by_external_id(db, principal.external_id)
    if existing:
        return existing

    email = principal.email or f"{principal.external_id}@users.invalid"
    username = principal.username or (principal.email or "").split("@")[0] or principal.external_id

    for attempt in range(2):
        try:
            user = crud_user.create_from_identity(
                db,
                external_id=principal.external_id,
                email=email,
                username=username,
                name=principal.display_name or None,
                image=principal.image_url,
            )
            break
        except IntegrityError:
            # A concurrent request synced the same principal first
            user = crud_user.get_by_external_id(db, principal.external_id)
            if user is not None:
                return user
            if attempt:
                raise

            if crud_user.get_by_field(db, "username", username) is not None:
                username = f"{username}_{principal.external_id}"
            if crud_user.get_by_field(db, "email", email) is not None:
                email = f"{principal.external_id}@users.invalid"
            logger.warning(
                f"Username or email taken for external_id={principal.external_id}, "
                f"retrying as username={username}"
            )

    logger.info(f"Synced new user id={user.id} for external_id={principal.external_id}")
    return user
