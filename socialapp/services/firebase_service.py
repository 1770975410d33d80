"""Firebase Authentication service for verifying identity-provider ID tokens."""

import logging
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import auth, credentials

from socialapp.config import settings

logger = logging.getLogger(__name__)


class FirebaseAuthService:
    """
    Service for verifying Firebase ID tokens.

    Handles lazy initialization of the Firebase Admin SDK. Token
    verification never raises: an unverifiable token yields None.
    """

    def __init__(self):
        self._app: Optional[firebase_admin.App] = None
        self._initialized: bool = False

    def initialize(self) -> bool:
        """
        Initialize Firebase Admin SDK with credentials from config.

        Returns:
            bool: True if initialization succeeded, False otherwise.
        """
        if self._initialized:
            logger.debug("Firebase already initialized, skipping.")
            return True

        if not settings.FIREBASE_CREDENTIALS_PATH:
            logger.warning("FIREBASE_CREDENTIALS_PATH is not set. Firebase auth disabled.")
            return False

        try:
            cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
            self._app = firebase_admin.initialize_app(cred, {
                "projectId": settings.FIREBASE_PROJECT_ID,
            })
            self._initialized = True
            logger.info(
                f"Firebase initialized successfully for project: {settings.FIREBASE_PROJECT_ID}"
            )
            return True
        except FileNotFoundError:
            logger.error(
                f"Firebase credentials file not found: {settings.FIREBASE_CREDENTIALS_PATH}"
            )
            return False
        except Exception as e:
            logger.error(f"Failed to initialize Firebase: {e}")
            return False

    def is_initialized(self) -> bool:
        """Check whether Firebase Admin SDK is ready."""
        return self._initialized

    def verify_id_token(self, id_token: str) -> Optional[Dict[str, Any]]:
        """
        Verify a Firebase ID token.

        Args:
            id_token: Token from the client's Authorization header.

        Returns:
            Decoded claims on success, None on failure.
        """
        if not self.initialize():
            return None

        try:
            return auth.verify_id_token(id_token, app=self._app)
        except (auth.ExpiredIdTokenError, auth.RevokedIdTokenError) as e:
            logger.info(f"[AUTH] Firebase token rejected: {type(e).__name__}")
            return None
        except (auth.InvalidIdTokenError, ValueError) as e:
            logger.warning(f"[AUTH] Invalid Firebase token: {e}")
            return None
        except Exception as e:
            logger.error(f"[AUTH] Firebase token verification failed: {e}")
            return None


firebase_auth_service = FirebaseAuthService()
