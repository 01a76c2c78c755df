"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from invoicer.application.login_user import CurrentUserHandler
from invoicer.domain.exceptions import (
    AuthenticationError,
    DomainException,
    EntityNotFoundError,
    InternalError,
    RenderError,
    ValidationError,
)
from invoicer.infrastructure.bootstrap import token_service, user_repository

# Stable exit code per error kind.
EXIT_CODES: dict[type[DomainException], int] = {
    ValidationError: 3,
    EntityNotFoundError: 4,
    RenderError: 5,
    InternalError: 6,
    AuthenticationError: 7,
}


class DomainClickException(click.ClickException):

    def __init__(self, exc: DomainException) -> None:
        super().__init__(str(exc))
        self.exit_code = EXIT_CODES.get(type(exc), 1)


def token_option(func):
    return click.option(
        "--token",
        envvar="INVOICER_TOKEN",
        required=True,
        help="Bearer token from 'auth login' (or set INVOICER_TOKEN).",
    )(func)


def resolve_owner(token: str) -> int:
    """Turn a bearer token into the id of an existing user."""
    handler = CurrentUserHandler(user_repo=user_repository(), tokens=token_service())
    try:
        return handler.handle(token).id
    except DomainException as exc:
        raise DomainClickException(exc)
