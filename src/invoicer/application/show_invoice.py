"""Application service: Show Invoice use case (query)."""

from __future__ import annotations

from invoicer.application.dto import InvoiceDetailDTO, InvoiceDTO, InvoiceItemDTO
from invoicer.domain.exceptions import EntityNotFoundError
from invoicer.domain.model.invoice import Invoice, InvoiceItem
from invoicer.domain.repository.invoice_repository import (
    InvoiceItemRepository,
    InvoiceRepository,
)


def load_owned_invoice(
    invoice_repo: InvoiceRepository,
    item_repo: InvoiceItemRepository,
    owner_id: int,
    invoice_id: int,
) -> tuple[Invoice, list[InvoiceItem]]:
    """Fetch an invoice and its items, hiding invoices of other users."""
    invoice = invoice_repo.get_for_owner(invoice_id, owner_id)
    if invoice is None:
        raise EntityNotFoundError("Invoice not found")
    return invoice, item_repo.list_by_invoice(invoice_id)


class ShowInvoiceHandler:

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ) -> None:
        self._invoice_repo = invoice_repo
        self._item_repo = item_repo

    def handle(self, owner_id: int, invoice_id: int) -> InvoiceDetailDTO:
        invoice, items = load_owned_invoice(
            self._invoice_repo, self._item_repo, owner_id, invoice_id
        )
        return InvoiceDetailDTO(
            invoice=InvoiceDTO.from_domain(invoice),
            items=[InvoiceItemDTO.from_domain(item) for item in items],
        )
