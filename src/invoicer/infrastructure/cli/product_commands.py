"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from invoicer.application.create_product import CreateProductHandler
from invoicer.application.delete_product import DeleteProductHandler
from invoicer.application.list_products import ListProductsHandler
from invoicer.domain.exceptions import DomainException
from invoicer.infrastructure.bootstrap import product_repository
from invoicer.infrastructure.cli.common import (
    DomainClickException,
    resolve_owner,
    token_option,
)


@click.command("add")
@token_option
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Quantity (at least 1).")
@click.option("--rate", required=True, help="Unit rate (e.g. 10.00).")
def product_add(token: str, name: str, quantity: int, rate: str) -> None:
    """Add a product; total and 18% tax are computed automatically."""
    owner_id = resolve_owner(token)
    handler = CreateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(owner_id, name=name, quantity=quantity, rate=rate)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(
        f"Product #{product.id} '{product.name}' added: "
        f"{product.quantity} x ${product.rate} = ${product.total} (tax ${product.tax_amount})"
    )


@click.command("list")
@token_option
def product_list(token: str) -> None:
    """List your products."""
    owner_id = resolve_owner(token)
    products = ListProductsHandler(product_repo=product_repository()).handle(owner_id)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Qty':>5} {'Rate':>10} {'Total':>10} {'Tax':>10}")
    click.echo("-" * 66)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.quantity:>5} "
            f"{'$' + p.rate:>10} {'$' + p.total:>10} {'$' + p.tax_amount:>10}"
        )


@click.command("delete")
@token_option
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(token: str, product_id: int) -> None:
    """Delete one of your products."""
    owner_id = resolve_owner(token)
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(owner_id, product_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Product #{product_id} deleted.")
