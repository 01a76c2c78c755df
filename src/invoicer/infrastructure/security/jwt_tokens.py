"""TokenService issuing HS256 JWTs with python-jose."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from invoicer.domain.exceptions import AuthenticationError
from invoicer.domain.model.user import User
from invoicer.domain.service.identity_service import TokenService

ALGORITHM = "HS256"


class JwtTokenService(TokenService):

    def __init__(self, secret_key: str, ttl_hours: int = 24) -> None:
        self._secret_key = secret_key
        self._ttl = timedelta(hours=ttl_hours)

    def issue(self, user: User) -> str:
        claims = {
            "sub": str(user.id),
            "email": user.email,
            "exp": datetime.now(timezone.utc) + self._ttl,
        }
        return jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> int:
        if not token:
            raise AuthenticationError("Access token required")
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
            return int(payload["sub"])
        except (JWTError, KeyError, TypeError, ValueError) as exc:
            raise AuthenticationError("Invalid token") from exc
