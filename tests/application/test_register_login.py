"""Tests for the identity use cases (register / login / current user)."""

import pytest

from invoicer.application.login_user import CurrentUserHandler, LoginUserHandler
from invoicer.application.register_user import RegisterUserHandler
from invoicer.domain.exceptions import (
    AuthenticationError,
    EntityNotFoundError,
    ValidationError,
)
from tests.fakes import FakePasswordHasher, FakeTokenService, FakeUserRepository


def _setup():
    users = FakeUserRepository()
    hasher = FakePasswordHasher()
    tokens = FakeTokenService()
    return (
        RegisterUserHandler(users, hasher, tokens),
        LoginUserHandler(users, hasher, tokens),
        CurrentUserHandler(users, tokens),
        users,
    )


class TestRegister:

    def test_registers_and_issues_token(self):
        register, _, _, users = _setup()
        result = register.handle("Ann", "ann@example.com", "secret1")
        assert result.token == "token-1"
        assert result.user.email == "ann@example.com"
        assert users.get_by_id(1).password_hash == "hashed:secret1"

    def test_duplicate_email_rejected(self):
        register, _, _, _ = _setup()
        register.handle("Ann", "ann@example.com", "secret1")
        with pytest.raises(ValidationError, match="User already exists"):
            register.handle("Ann Again", "ANN@example.com", "secret2")

    @pytest.mark.parametrize(
        "name, email, password, message",
        [
            ("", "ann@example.com", "secret1", "Name is required"),
            ("Ann", "ann", "secret1", "Invalid email address"),
            ("Ann", "ann@example.com", "12345", "at least 6 characters"),
        ],
    )
    def test_invalid_input(self, name, email, password, message):
        register, _, _, users = _setup()
        with pytest.raises(ValidationError, match=message):
            register.handle(name, email, password)
        assert users.get_by_id(1) is None


class TestLogin:

    def test_valid_credentials(self):
        register, login, _, _ = _setup()
        register.handle("Ann", "ann@example.com", "secret1")
        result = login.handle(" ann@example.com ", "secret1")
        assert result.user.id == 1
        assert result.token == "token-1"

    def test_wrong_password(self):
        register, login, _, _ = _setup()
        register.handle("Ann", "ann@example.com", "secret1")
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            login.handle("ann@example.com", "wrong!")

    def test_unknown_email_fails_the_same_way(self):
        _, login, _, _ = _setup()
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            login.handle("nobody@example.com", "secret1")


class TestCurrentUser:

    def test_resolves_token(self):
        register, _, current, _ = _setup()
        result = register.handle("Ann", "ann@example.com", "secret1")
        assert current.handle(result.token).name == "Ann"

    def test_bad_token(self):
        _, _, current, _ = _setup()
        with pytest.raises(AuthenticationError):
            current.handle("garbage")

    def test_token_for_missing_user(self):
        _, _, current, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="User not found"):
            current.handle("token-9")
