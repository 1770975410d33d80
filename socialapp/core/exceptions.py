"""Custom exceptions for the social API."""

from fastapi import HTTPException, status

from socialapp.schemas.result import ErrorKind


class ActionError(Exception):
    """Expected failure of a mutating action.

    Carries the user-facing message and the kind used to build the
    `ActionResult` envelope. Raised inside services, never past them.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(ActionError):
    """Exception when request input fails validation."""

    kind = ErrorKind.INVALID_INPUT


class NotFoundError(ActionError):
    """Exception when the referenced post does not exist."""

    kind = ErrorKind.NOT_FOUND


class PermissionDeniedError(ActionError):
    """Exception when the acting user may not perform the action."""

    kind = ErrorKind.UNAUTHORIZED


class FeedUnavailableError(Exception):
    """
    Exception when the feed cannot be read from storage.

    Unlike `ActionError`, this one propagates to the caller with the
    underlying message appended:

        Failed to fetch posts: <original message>
    """

    def __init__(self, detail: str):
        super().__init__(f"Failed to fetch posts: {detail}")


class NotAuthenticatedException(HTTPException):
    """Exception when an endpoint needs a synced, signed-in user."""

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class FeedUnavailableException(HTTPException):
    """HTTP form of `FeedUnavailableError`."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )


__all__ = [
    "ActionError",
    "InvalidInputError",
    "NotFoundError",
    "PermissionDeniedError",
    "FeedUnavailableError",
    "NotAuthenticatedException",
    "FeedUnavailableException",
]
