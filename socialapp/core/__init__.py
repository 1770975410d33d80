"""Core module exports."""

from .security import (
    decode_token,
    get_token_claims,
)

__all__ = [
    "decode_token",
    "get_token_claims",
]
