"""Application service: List Invoices use case (query).

Items are not attached; use ShowInvoiceHandler for a single invoice
with its line items.
"""

from __future__ import annotations

from invoicer.application.dto import InvoiceDTO
from invoicer.domain.repository.invoice_repository import InvoiceRepository


class ListInvoicesHandler:

    def __init__(self, invoice_repo: InvoiceRepository) -> None:
        self._invoice_repo = invoice_repo

    def handle(self, owner_id: int) -> list[InvoiceDTO]:
        return [
            InvoiceDTO.from_domain(invoice)
            for invoice in self._invoice_repo.list_by_owner(owner_id)
        ]
