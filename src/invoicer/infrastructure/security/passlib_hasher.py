"""PasswordHasher backed by a passlib CryptContext."""

from __future__ import annotations

from passlib.context import CryptContext

from invoicer.domain.service.identity_service import PasswordHasher


class PasslibPasswordHasher(PasswordHasher):

    def __init__(self, schemes: list[str] | None = None) -> None:
        self._ctx = CryptContext(schemes=schemes or ["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._ctx.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return self._ctx.verify(password, hashed)
        except ValueError:
            # unrecognised or malformed hash
            return False
