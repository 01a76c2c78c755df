"""Tests for the passlib password hasher and the JWT token service."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from invoicer.domain.exceptions import AuthenticationError
from invoicer.domain.model.user import User
from invoicer.infrastructure.security.jwt_tokens import ALGORITHM, JwtTokenService
from invoicer.infrastructure.security.passlib_hasher import PasslibPasswordHasher

SECRET = "test-secret"


def _user() -> User:
    return User(id=5, name="Ann", email="ann@example.com", password_hash="x")


class TestPasslibPasswordHasher:

    def test_hash_and_verify(self):
        hasher = PasslibPasswordHasher()
        hashed = hasher.hash("secret1")
        assert hashed != "secret1"
        assert hasher.verify("secret1", hashed)
        assert not hasher.verify("secret2", hashed)

    def test_same_password_hashes_differently(self):
        hasher = PasslibPasswordHasher()
        assert hasher.hash("secret1") != hasher.hash("secret1")

    def test_malformed_hash_does_not_verify(self):
        assert not PasslibPasswordHasher().verify("secret1", "not-a-hash")


class TestJwtTokenService:

    def test_issue_and_verify(self):
        tokens = JwtTokenService(SECRET)
        assert tokens.verify(tokens.issue(_user())) == 5

    def test_claims(self):
        token = JwtTokenService(SECRET, ttl_hours=1).issue(_user())
        claims = jwt.decode(token, SECRET, algorithms=[ALGORITHM])
        assert claims["sub"] == "5"
        assert claims["email"] == "ann@example.com"

    def test_wrong_secret_rejected(self):
        token = JwtTokenService("other-secret").issue(_user())
        with pytest.raises(AuthenticationError, match="Invalid token"):
            JwtTokenService(SECRET).verify(token)

    def test_expired_token_rejected(self):
        expired = jwt.encode(
            {"sub": "5", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            SECRET,
            algorithm=ALGORITHM,
        )
        with pytest.raises(AuthenticationError, match="Invalid token"):
            JwtTokenService(SECRET).verify(expired)

    def test_missing_token(self):
        with pytest.raises(AuthenticationError, match="Access token required"):
            JwtTokenService(SECRET).verify("")

    def test_garbage_token(self):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            JwtTokenService(SECRET).verify("a.b.c")
