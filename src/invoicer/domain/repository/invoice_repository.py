"""Abstract repositories for the Invoice aggregate and its line items."""

from __future__ import annotations

from abc import ABC, abstractmethod

from invoicer.domain.model.invoice import Invoice, InvoiceItem


class InvoiceRepository(ABC):

    @abstractmethod
    def add(self, invoice: Invoice) -> Invoice:
        """Insert a new invoice and return it with its assigned ID."""

    @abstractmethod
    def get_for_owner(self, invoice_id: int, owner_id: int) -> Invoice | None:
        """Return the invoice if it exists and belongs to ``owner_id``."""

    @abstractmethod
    def list_by_owner(self, owner_id: int) -> list[Invoice]:
        """Return every invoice owned by ``owner_id``, in insertion order."""

    @abstractmethod
    def delete(self, invoice_id: int) -> None:
        """Remove an invoice. Only used to undo a failed assembly."""


class InvoiceItemRepository(ABC):

    @abstractmethod
    def add(self, item: InvoiceItem) -> InvoiceItem:
        """Insert a line item and return it with its assigned ID."""

    @abstractmethod
    def list_by_invoice(self, invoice_id: int) -> list[InvoiceItem]:
        """Return the items of an invoice ordered by creation."""

    @abstractmethod
    def delete_by_invoice(self, invoice_id: int) -> None:
        """Remove all items of an invoice. Only used to undo a failed assembly."""
