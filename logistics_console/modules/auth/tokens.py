"""
JWT handling for the client side.

The console cannot verify the backend's signature (it never sees the
signing key); it only reads the claims to learn the subject, the role
and the expiry. The backend remains the authority on validity.
"""

from typing import Any

import jwt

from .exceptions import InvalidTokenError, MissingTokenError
from .models import TokenClaims


def decode_claims(token: str) -> TokenClaims:
    """
    Decode a token's claims without verifying its signature or expiry.

    Args:
        token: Raw JWT string

    Returns:
        TokenClaims with subject email, role and expiry

    Raises:
        MissingTokenError: If the token is empty
        InvalidTokenError: If the token is malformed or lacks sub/exp
    """
    if not token:
        raise MissingTokenError()

    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False},
        )
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(str(e))

    subject = payload.get("sub")
    expiry = payload.get("exp")
    if not subject or not isinstance(expiry, (int, float)):
        raise InvalidTokenError("Token sans sujet ou date d'expiration")

    role = payload.get("role")
    return TokenClaims(
        subject_email=str(subject),
        role=str(role) if role is not None else None,
        expiry=int(expiry),
    )
