"""Application service: Login and Current User use cases."""

from __future__ import annotations

from invoicer.application.dto import AuthResultDTO, UserDTO
from invoicer.domain.exceptions import AuthenticationError, EntityNotFoundError
from invoicer.domain.repository.user_repository import UserRepository
from invoicer.domain.service.identity_service import PasswordHasher, TokenService


class LoginUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens

    def handle(self, email: str, password: str) -> AuthResultDTO:
        """Exchange credentials for a bearer token.

        Unknown e-mail and wrong password fail the same way.
        """
        user = self._user_repo.get_by_email((email or "").strip())
        if user is None or not self._hasher.verify(password or "", user.password_hash):
            raise AuthenticationError("Invalid credentials")
        return AuthResultDTO(token=self._tokens.issue(user), user=UserDTO.from_domain(user))


class CurrentUserHandler:

    def __init__(self, user_repo: UserRepository, tokens: TokenService) -> None:
        self._user_repo = user_repo
        self._tokens = tokens

    def handle(self, token: str) -> UserDTO:
        user_id = self._tokens.verify(token)
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User not found")
        return UserDTO.from_domain(user)
