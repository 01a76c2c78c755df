"""Identity ports: password hashing and bearer tokens.

The invoice core only ever sees an owner id. How credentials are hashed
and how tokens are signed is left to the infrastructure adapters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from invoicer.domain.model.user import User


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash suitable for storage."""

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Return True if ``password`` matches ``hashed``."""


class TokenService(ABC):

    @abstractmethod
    def issue(self, user: User) -> str:
        """Issue a bearer token for ``user``."""

    @abstractmethod
    def verify(self, token: str) -> int:
        """Return the user id carried by ``token``.

        Raises AuthenticationError if the token is invalid or expired.
        """
