"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Monetary fields are
plain decimal strings such as ``"30.00"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from invoicer.domain.model.invoice import Invoice, InvoiceItem
from invoicer.domain.model.product import Product
from invoicer.domain.model.user import User


@dataclass(frozen=True)
class InvoiceRequest:
    """Input: who the invoice is for and which products go on it."""

    client_name: str
    client_email: str
    product_ids: list[int] = field(default_factory=list)
    client_company: str | None = None
    due_date: str | None = None  # YYYY-MM-DD
    status: str | None = None


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    quantity: int
    rate: str
    total: str
    tax_amount: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            quantity=product.quantity.value,
            rate=product.rate.to_plain(),
            total=product.total.to_plain(),
            tax_amount=product.tax_amount.to_plain(),
        )


@dataclass(frozen=True)
class InvoiceItemDTO:
    product_name: str
    quantity: int
    rate: str
    total: str

    @staticmethod
    def from_domain(item: InvoiceItem) -> InvoiceItemDTO:
        return InvoiceItemDTO(
            product_name=item.product_name,
            quantity=item.quantity.value,
            rate=item.rate.to_plain(),
            total=item.total.to_plain(),
        )


@dataclass(frozen=True)
class InvoiceDTO:
    """Output: an invoice header as displayed to the user."""

    id: int
    invoice_number: str
    client_name: str
    client_email: str
    client_company: str | None
    subtotal: str
    total_tax: str
    total_amount: str
    status: str
    created_at: str
    due_date: str | None

    @staticmethod
    def from_domain(invoice: Invoice) -> InvoiceDTO:
        return InvoiceDTO(
            id=invoice.id,  # type: ignore[arg-type]
            invoice_number=invoice.invoice_number,
            client_name=invoice.client_name,
            client_email=invoice.client_email,
            client_company=invoice.client_company,
            subtotal=invoice.subtotal.to_plain(),
            total_tax=invoice.total_tax.to_plain(),
            total_amount=invoice.total_amount.to_plain(),
            status=invoice.status.value,
            created_at=invoice.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            due_date=invoice.due_date.isoformat() if invoice.due_date else None,
        )


@dataclass(frozen=True)
class InvoiceDetailDTO:
    """Output: an invoice together with its line items."""

    invoice: InvoiceDTO
    items: list[InvoiceItemDTO]


@dataclass(frozen=True)
class RenderedDocument:
    filename: str
    content: bytes


@dataclass(frozen=True)
class UserDTO:
    id: int
    name: str
    email: str

    @staticmethod
    def from_domain(user: User) -> UserDTO:
        return UserDTO(id=user.id, name=user.name, email=user.email)  # type: ignore[arg-type]


@dataclass(frozen=True)
class AuthResultDTO:
    token: str
    user: UserDTO
