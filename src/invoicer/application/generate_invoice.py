"""Application service: Generate Invoice use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup + Invoice and InvoiceItem creation).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from invoicer.application.dto import InvoiceDTO, InvoiceRequest
from invoicer.domain.exceptions import ValidationError
from invoicer.domain.model.invoice import (
    Invoice,
    InvoiceItem,
    InvoiceStatus,
    parse_due_date,
)
from invoicer.domain.model.product import Product
from invoicer.domain.model.value_objects import EmailAddress
from invoicer.domain.repository.invoice_repository import (
    InvoiceItemRepository,
    InvoiceRepository,
)
from invoicer.domain.repository.product_repository import ProductRepository
from invoicer.domain.service.invoice_number_generator import InvoiceNumberGenerator

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenerateInvoiceHandler:

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        product_repo: ProductRepository,
        number_generator: InvoiceNumberGenerator,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._invoice_repo = invoice_repo
        self._item_repo = item_repo
        self._product_repo = product_repo
        self._number_generator = number_generator
        self._clock = clock

    def handle(self, owner_id: int, request: InvoiceRequest) -> InvoiceDTO:
        """Assemble and persist a new invoice.

        Steps:
        1. Reject an empty selection and malformed client fields.
        2. Resolve every product id against the owner (fail if any is
           missing or belongs to someone else; nothing is written).
        3. Let the Invoice aggregate derive the totals.
        4. Persist the invoice, then one snapshot item per product.
           A failure while writing items removes everything written.
        """
        if not request.product_ids:
            raise ValidationError("No products selected")

        if not request.client_name or not request.client_name.strip():
            raise ValidationError("Client name is required")
        EmailAddress(request.client_email)
        status = InvoiceStatus.parse(request.status)
        due_date = parse_due_date(request.due_date)

        products = self._resolve_products(owner_id, request.product_ids)

        invoice = Invoice.create(
            owner_id=owner_id,
            invoice_number=self._number_generator.next_number(),
            client_name=request.client_name,
            client_email=request.client_email,
            client_company=request.client_company,
            products=products,
            status=status,
            due_date=due_date,
            created_at=self._clock(),
        )

        saved = self._invoice_repo.add(invoice)
        self._add_items(saved, products)

        logger.info(
            "Invoice %s (#%s) generated for user #%s with %d item(s), total=%s",
            saved.invoice_number, saved.id, owner_id, len(products),
            saved.total_amount.to_plain(),
        )
        return InvoiceDTO.from_domain(saved)

    # --- Internal helpers -----------------------------------------------------

    def _resolve_products(
        self, owner_id: int, product_ids: list[int]
    ) -> list[Product]:
        products: list[Product] = []
        for product_id in product_ids:
            product = self._product_repo.get_for_owner(product_id, owner_id)
            if product is None:
                raise ValidationError("Invalid product selection")
            products.append(product)
        return products

    def _add_items(self, invoice: Invoice, products: list[Product]) -> None:
        invoice_id: int = invoice.id  # type: ignore[assignment]
        try:
            for product in products:
                self._item_repo.add(InvoiceItem.snapshot_of(product, invoice_id))
        except Exception:
            logger.warning(
                "Writing items for invoice %s failed; rolling back",
                invoice.invoice_number,
            )
            self._roll_back(invoice, invoice_id)
            raise

    def _roll_back(self, invoice: Invoice, invoice_id: int) -> None:
        """Remove the invoice, then its items.

        Cleanup failures are logged and not raised; the caller re-raises the
        original error.
        """
        try:
            self._invoice_repo.delete(invoice_id)
        except Exception:
            logger.exception(
                "Could not delete invoice %s during rollback", invoice.invoice_number
            )
        try:
            self._item_repo.delete_by_invoice(invoice_id)
        except Exception:
            logger.exception(
                "Could not delete items of invoice %s during rollback",
                invoice.invoice_number,
            )
