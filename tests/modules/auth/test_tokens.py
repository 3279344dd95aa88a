"""Tests for client-side JWT claim decoding."""

import time

import jwt
import pytest

from logistics_console.modules.auth.exceptions import InvalidTokenError, MissingTokenError
from logistics_console.modules.auth.tokens import decode_claims

from tests.conftest import ADMIN_EMAIL, create_test_token


class TestDecodeClaims:
    def test_valid_token(self):
        claims = decode_claims(create_test_token())
        assert claims.subject_email == ADMIN_EMAIL
        assert claims.role == "ADMIN"
        assert not claims.is_expired(time.time())

    def test_expired_token_still_decodes(self):
        """Expiry is reported, not enforced, at decode time."""
        claims = decode_claims(create_test_token(expired=True))
        assert claims.is_expired(time.time())

    def test_signature_not_verified(self):
        """The console never holds the signing key."""
        token = jwt.encode(
            {"sub": ADMIN_EMAIL, "exp": int(time.time()) + 60},
            "some-other-secret",
            algorithm="HS256",
        )
        assert decode_claims(token).subject_email == ADMIN_EMAIL

    def test_missing_role_claim(self):
        claims = decode_claims(create_test_token(role=None))
        assert claims.role is None

    def test_empty_token(self):
        with pytest.raises(MissingTokenError):
            decode_claims("")

    def test_garbage_token(self):
        with pytest.raises(InvalidTokenError):
            decode_claims("not-a-valid-token")

    def test_token_without_expiry(self):
        token = jwt.encode({"sub": ADMIN_EMAIL}, "secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            decode_claims(token)

    def test_token_without_subject(self):
        token = jwt.encode({"exp": int(time.time()) + 60}, "secret", algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            decode_claims(token)


class TestTokenClaims:
    def test_expiry_boundary(self):
        """A token expiring exactly now is expired."""
        claims = decode_claims(create_test_token())
        assert claims.is_expired(claims.expiry)
        assert not claims.is_expired(claims.expiry - 1)

    def test_expires_at_is_utc(self):
        claims = decode_claims(create_test_token())
        assert claims.expires_at.tzinfo is not None
        assert int(claims.expires_at.timestamp()) == claims.expiry
