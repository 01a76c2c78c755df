"""Application service: Render Invoice PDF use case."""

from __future__ import annotations

import logging

from invoicer.application.document_renderer import InvoiceDocumentRenderer
from invoicer.application.dto import RenderedDocument
from invoicer.application.show_invoice import load_owned_invoice
from invoicer.domain.repository.invoice_repository import (
    InvoiceItemRepository,
    InvoiceRepository,
)

logger = logging.getLogger(__name__)


class RenderInvoicePdfHandler:

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        renderer: InvoiceDocumentRenderer,
    ) -> None:
        self._invoice_repo = invoice_repo
        self._item_repo = item_repo
        self._renderer = renderer

    def handle(self, owner_id: int, invoice_id: int) -> RenderedDocument:
        invoice, items = load_owned_invoice(
            self._invoice_repo, self._item_repo, owner_id, invoice_id
        )
        content = self._renderer.render(invoice, items)
        logger.info(
            "Rendered %s (%d bytes) for user #%s",
            invoice.invoice_number, len(content), owner_id,
        )
        return RenderedDocument(
            filename=f"invoice-{invoice.invoice_number}.pdf",
            content=content,
        )


class RenderInvoiceHtmlHandler:
    """Same lookup as the PDF handler, but returns the HTML page."""

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        renderer: InvoiceDocumentRenderer,
    ) -> None:
        self._invoice_repo = invoice_repo
        self._item_repo = item_repo
        self._renderer = renderer

    def handle(self, owner_id: int, invoice_id: int) -> str:
        invoice, items = load_owned_invoice(
            self._invoice_repo, self._item_repo, owner_id, invoice_id
        )
        return self._renderer.render_html(invoice, items)
