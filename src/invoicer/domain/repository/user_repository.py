"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from invoicer.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def add(self, user: User) -> User:
        """Insert a new user and return it with its assigned ID."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by ID, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by e-mail (case-insensitive), or None."""
