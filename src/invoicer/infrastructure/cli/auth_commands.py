"""CLI commands for registration and login."""

from __future__ import annotations

import click

from invoicer.application.login_user import CurrentUserHandler, LoginUserHandler
from invoicer.application.register_user import RegisterUserHandler
from invoicer.domain.exceptions import DomainException
from invoicer.infrastructure.bootstrap import (
    password_hasher,
    token_service,
    user_repository,
)
from invoicer.infrastructure.cli.common import DomainClickException, token_option


@click.command("register")
@click.option("--name", required=True, help="Your name.")
@click.option("--email", required=True, help="Login e-mail.")
@click.option("--password", required=True, prompt=True, hide_input=True,
              confirmation_prompt=True, help="At least 6 characters.")
def auth_register(name: str, email: str, password: str) -> None:
    """Create an account."""
    handler = RegisterUserHandler(
        user_repo=user_repository(),
        hasher=password_hasher(),
        tokens=token_service(),
    )

    try:
        result = handler.handle(name=name, email=email, password=password)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"User #{result.user.id} '{result.user.name}' registered.")
    click.echo(f"Token: {result.token}")


@click.command("login")
@click.option("--email", required=True, help="Login e-mail.")
@click.option("--password", required=True, prompt=True, hide_input=True)
def auth_login(email: str, password: str) -> None:
    """Log in and print a bearer token."""
    handler = LoginUserHandler(
        user_repo=user_repository(),
        hasher=password_hasher(),
        tokens=token_service(),
    )

    try:
        result = handler.handle(email=email, password=password)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Logged in as {result.user.name} <{result.user.email}>")
    click.echo(f"Token: {result.token}")


@click.command("whoami")
@token_option
def auth_whoami(token: str) -> None:
    """Show the user a token belongs to."""
    handler = CurrentUserHandler(user_repo=user_repository(), tokens=token_service())

    try:
        user = handler.handle(token)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"User #{user.id}: {user.name} <{user.email}>")
