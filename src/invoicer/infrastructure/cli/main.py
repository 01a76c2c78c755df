import logging

import click

from invoicer.infrastructure.bootstrap import settings
from invoicer.infrastructure.cli.auth_commands import auth_login, auth_register, auth_whoami
from invoicer.infrastructure.cli.invoice_commands import (
    invoice_create,
    invoice_list,
    invoice_pdf,
    invoice_show,
)
from invoicer.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
)


@click.group()
def cli() -> None:
    """Invoicer: products, invoices and PDF export."""
    logging.basicConfig(
        level=settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.group()
def auth() -> None:
    """Register and log in."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def invoice() -> None:
    """Generate and export invoices."""


# Register subcommands
auth.add_command(auth_register)
auth.add_command(auth_login)
auth.add_command(auth_whoami)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_delete)
invoice.add_command(invoice_create)
invoice.add_command(invoice_list)
invoice.add_command(invoice_show)
invoice.add_command(invoice_pdf)
