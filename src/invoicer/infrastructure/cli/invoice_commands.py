"""CLI commands for the Invoice aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from invoicer.application.document_renderer import tax_label
from invoicer.application.dto import InvoiceDTO, InvoiceRequest
from invoicer.application.generate_invoice import GenerateInvoiceHandler
from invoicer.application.list_invoices import ListInvoicesHandler
from invoicer.application.render_invoice_pdf import (
    RenderInvoiceHtmlHandler,
    RenderInvoicePdfHandler,
)
from invoicer.application.show_invoice import ShowInvoiceHandler
from invoicer.domain.exceptions import DomainException
from invoicer.infrastructure.bootstrap import (
    document_renderer,
    invoice_item_repository,
    invoice_number_generator,
    invoice_repository,
    product_repository,
)
from invoicer.infrastructure.cli.common import (
    DomainClickException,
    resolve_owner,
    token_option,
)


def _parse_ids(raw: str) -> list[int]:
    """Parse '1,2,2,5' into [1, 2, 2, 5]. Repeats are kept."""
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{part}'.")
    return ids


def _display_header(dto: InvoiceDTO) -> None:
    click.echo(f"Invoice {dto.invoice_number}  (#{dto.id}, status={dto.status})")
    click.echo(f"Client:   {dto.client_name} <{dto.client_email}>")
    if dto.client_company:
        click.echo(f"Company:  {dto.client_company}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Due:      {dto.due_date or 'N/A'}")


def _display_totals(dto: InvoiceDTO) -> None:
    click.echo(f"  {'Subtotal':<27} {'$' + dto.subtotal:>20}")
    click.echo(f"  {tax_label():<27} {'$' + dto.total_tax:>20}")
    click.echo(f"  {'Total Amount':<27} {'$' + dto.total_amount:>20}")


@click.command("create")
@token_option
@click.option("--client-name", required=True, help="Client contact name.")
@click.option("--client-email", required=True, help="Client e-mail.")
@click.option("--client-company", default=None, help="Client company.")
@click.option("--due-date", default=None, help="Due date as YYYY-MM-DD.")
@click.option("--status", default=None, type=click.Choice(["draft", "sent", "paid"]),
              help="Initial status (default: draft).")
@click.option("--products", "products_str", required=True,
              help="Product IDs as '1,2,3'.")
def invoice_create(
    token: str,
    client_name: str,
    client_email: str,
    client_company: str | None,
    due_date: str | None,
    status: str | None,
    products_str: str,
) -> None:
    """Generate an invoice from your products."""
    owner_id = resolve_owner(token)
    request = InvoiceRequest(
        client_name=client_name,
        client_email=client_email,
        client_company=client_company,
        due_date=due_date,
        status=status,
        product_ids=_parse_ids(products_str),
    )
    handler = GenerateInvoiceHandler(
        invoice_repo=invoice_repository(),
        item_repo=invoice_item_repository(),
        product_repo=product_repository(),
        number_generator=invoice_number_generator(),
    )

    try:
        dto = handler.handle(owner_id, request)
    except DomainException as exc:
        raise DomainClickException(exc)

    _display_header(dto)
    click.echo()
    _display_totals(dto)


@click.command("list")
@token_option
def invoice_list(token: str) -> None:
    """List your invoices."""
    owner_id = resolve_owner(token)
    invoices = ListInvoicesHandler(invoice_repo=invoice_repository()).handle(owner_id)

    if not invoices:
        click.echo("No invoices found.")
        return

    click.echo(f"{'ID':<6} {'Number':<26} {'Client':<20} {'Status':<7} {'Total':>12}")
    click.echo("-" * 75)
    for inv in invoices:
        click.echo(
            f"{inv.id:<6} {inv.invoice_number:<26} {inv.client_name:<20} "
            f"{inv.status:<7} {'$' + inv.total_amount:>12}"
        )


@click.command("show")
@token_option
@click.option("--id", "invoice_id", required=True, type=int, help="Invoice ID.")
@click.option("--html", "html_path", default=None, type=click.Path(dir_okay=False),
              help="Also write the invoice page as HTML to this file.")
def invoice_show(token: str, invoice_id: int, html_path: str | None) -> None:
    """Show an invoice with its line items."""
    owner_id = resolve_owner(token)
    handler = ShowInvoiceHandler(
        invoice_repo=invoice_repository(),
        item_repo=invoice_item_repository(),
    )

    try:
        detail = handler.handle(owner_id, invoice_id)
        page = None
        if html_path:
            page = RenderInvoiceHtmlHandler(
                invoice_repo=invoice_repository(),
                item_repo=invoice_item_repository(),
                renderer=document_renderer(),
            ).handle(owner_id, invoice_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    _display_header(detail.invoice)
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Rate':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in detail.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} "
            f"{'$' + item.rate:>10} {'$' + item.total:>10}"
        )
    click.echo(f"  {'-'*47}")
    _display_totals(detail.invoice)

    if page is not None:
        Path(html_path).write_text(page, encoding="utf-8")
        click.echo(f"HTML written to {html_path}")


@click.command("pdf")
@token_option
@click.option("--id", "invoice_id", required=True, type=int, help="Invoice ID.")
@click.option("--output", "output", default=None, type=click.Path(dir_okay=False),
              help="Target file (default: invoice-<number>.pdf).")
def invoice_pdf(token: str, invoice_id: int, output: str | None) -> None:
    """Export an invoice as PDF."""
    owner_id = resolve_owner(token)
    handler = RenderInvoicePdfHandler(
        invoice_repo=invoice_repository(),
        item_repo=invoice_item_repository(),
        renderer=document_renderer(),
    )

    try:
        document = handler.handle(owner_id, invoice_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    target = Path(output or document.filename)
    target.write_bytes(document.content)
    click.echo(f"PDF written to {target} ({len(document.content)} bytes)")
