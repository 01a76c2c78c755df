"""Invoice aggregate, the core of the domain.

An Invoice owns its InvoiceItems. Both are frozen: once an invoice is
assembled nothing about it changes. Items are snapshots of the products
selected at creation time, copied by value so that later deletion of a
product never reaches back into an invoice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from invoicer.domain.exceptions import ValidationError
from invoicer.domain.model.product import Product
from invoicer.domain.model.value_objects import EmailAddress, Money, Quantity


class InvoiceStatus(Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"

    @staticmethod
    def parse(raw: str | None) -> InvoiceStatus:
        if raw is None or not raw.strip():
            return InvoiceStatus.DRAFT
        try:
            return InvoiceStatus(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in InvoiceStatus)
            raise ValidationError(
                f"Invalid status '{raw}'. Expected one of: {allowed}"
            ) from exc


@dataclass(frozen=True)
class InvoiceItem:
    """A line item: the commercial fields of a product at invoicing time."""

    id: int | None
    invoice_id: int
    product_name: str
    quantity: Quantity
    rate: Money
    total: Money

    @staticmethod
    def snapshot_of(product: Product, invoice_id: int) -> InvoiceItem:
        return InvoiceItem(
            id=None,
            invoice_id=invoice_id,
            product_name=product.name,
            quantity=product.quantity,
            rate=product.rate,
            total=product.total,
        )


@dataclass(frozen=True)
class Invoice:
    """Aggregate root for client invoices.

    Use the ``Invoice.create()`` factory for new invoices; it derives the
    totals from the selected products.  The ``__init__`` is intentionally
    simple so the repository can reconstitute persisted invoices.
    """

    id: int | None
    owner_id: int
    invoice_number: str
    client_name: str
    client_email: str
    subtotal: Money
    total_tax: Money
    total_amount: Money
    client_company: str | None = None
    status: InvoiceStatus = InvoiceStatus.DRAFT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    due_date: date | None = None

    # --- Factory (used for NEW invoices only) ---------------------------------

    @staticmethod
    def create(
        owner_id: int,
        invoice_number: str,
        client_name: str,
        client_email: str,
        products: list[Product],
        client_company: str | None = None,
        status: InvoiceStatus = InvoiceStatus.DRAFT,
        due_date: date | None = None,
        created_at: datetime | None = None,
    ) -> Invoice:
        """Create a new invoice over exactly ``products``.

        Repeated products are counted once per occurrence.
        """
        if not products:
            raise ValidationError("No products selected")
        if not client_name or not client_name.strip():
            raise ValidationError("Client name is required")
        email = EmailAddress(client_email)

        subtotal = Money.zero()
        total_tax = Money.zero()
        for product in products:
            subtotal = subtotal + product.total
            total_tax = total_tax + product.tax_amount

        company = client_company.strip() if client_company else None
        return Invoice(
            id=None,
            owner_id=owner_id,
            invoice_number=invoice_number,
            client_name=client_name.strip(),
            client_email=str(email),
            client_company=company or None,
            subtotal=subtotal,
            total_tax=total_tax,
            total_amount=subtotal + total_tax,
            status=status,
            created_at=created_at or datetime.now(timezone.utc),
            due_date=due_date,
        )


def parse_due_date(raw: str | None) -> date | None:
    """Parse an optional ``YYYY-MM-DD`` due date."""
    if raw is None or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise ValidationError(
            f"Invalid due date '{raw}'. Expected YYYY-MM-DD."
        ) from exc
