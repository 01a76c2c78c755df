"""Application service: Register User use case."""

from __future__ import annotations

import logging

from invoicer.application.dto import AuthResultDTO, UserDTO
from invoicer.domain.exceptions import ValidationError
from invoicer.domain.model.user import User
from invoicer.domain.model.value_objects import EmailAddress
from invoicer.domain.repository.user_repository import UserRepository
from invoicer.domain.service.identity_service import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class RegisterUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens

    def handle(self, name: str, email: str, password: str) -> AuthResultDTO:
        """Create an account and log it in straight away."""
        if not name or not name.strip():
            raise ValidationError("Name is required")
        address = EmailAddress(email)
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if self._user_repo.get_by_email(address.value) is not None:
            raise ValidationError("User already exists")

        user = self._user_repo.add(
            User(
                id=None,
                name=name.strip(),
                email=address.value,
                password_hash=self._hasher.hash(password),
            )
        )
        logger.info("User #%s registered", user.id)
        return AuthResultDTO(token=self._tokens.issue(user), user=UserDTO.from_domain(user))
