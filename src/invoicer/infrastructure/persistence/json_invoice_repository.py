"""JSON-file-backed implementations of InvoiceRepository and InvoiceItemRepository."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from invoicer.domain.exceptions import InternalError
from invoicer.domain.model.invoice import Invoice, InvoiceItem, InvoiceStatus
from invoicer.domain.model.value_objects import Money, Quantity
from invoicer.domain.repository.invoice_repository import (
    InvoiceItemRepository,
    InvoiceRepository,
)
from invoicer.infrastructure.persistence.json_file import JsonFile


class JsonInvoiceRepository(InvoiceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- InvoiceRepository interface ------------------------------------------

    def add(self, invoice: Invoice) -> Invoice:
        with self._file.locked():
            records = self._file.load()
            if any(r["invoice_number"] == invoice.invoice_number for r in records):
                raise InternalError(
                    f"Duplicate invoice number {invoice.invoice_number}"
                )
            saved = dataclasses.replace(invoice, id=self._file.next_id())
            records.append(self._to_raw(saved))
            self._file.persist(records)
        return saved

    def get_for_owner(self, invoice_id: int, owner_id: int) -> Invoice | None:
        for raw in self._file.load():
            if raw["id"] == invoice_id and raw["owner_id"] == owner_id:
                return self._to_domain(raw)
        return None

    def list_by_owner(self, owner_id: int) -> list[Invoice]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["owner_id"] == owner_id
        ]

    def delete(self, invoice_id: int) -> None:
        with self._file.locked():
            records = self._file.load()
            self._file.persist([r for r in records if r["id"] != invoice_id])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(invoice: Invoice) -> dict:
        return {
            "id": invoice.id,
            "owner_id": invoice.owner_id,
            "invoice_number": invoice.invoice_number,
            "client_name": invoice.client_name,
            "client_email": invoice.client_email,
            "client_company": invoice.client_company,
            "subtotal": invoice.subtotal.to_plain(),
            "total_tax": invoice.total_tax.to_plain(),
            "total_amount": invoice.total_amount.to_plain(),
            "status": invoice.status.value,
            "created_at": invoice.created_at.isoformat(),
            "due_date": invoice.due_date.isoformat() if invoice.due_date else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Invoice:
        due = raw.get("due_date")
        return Invoice(
            id=raw["id"],
            owner_id=raw["owner_id"],
            invoice_number=raw["invoice_number"],
            client_name=raw["client_name"],
            client_email=raw["client_email"],
            client_company=raw.get("client_company"),
            subtotal=Money(Decimal(raw["subtotal"])),
            total_tax=Money(Decimal(raw["total_tax"])),
            total_amount=Money(Decimal(raw["total_amount"])),
            status=InvoiceStatus(raw.get("status", "draft")),
            created_at=datetime.fromisoformat(raw["created_at"]),
            due_date=date.fromisoformat(due) if due else None,
        )


class JsonInvoiceItemRepository(InvoiceItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- InvoiceItemRepository interface --------------------------------------

    def add(self, item: InvoiceItem) -> InvoiceItem:
        with self._file.locked():
            records = self._file.load()
            saved = dataclasses.replace(item, id=self._file.next_id())
            records.append(self._to_raw(saved))
            self._file.persist(records)
        return saved

    def list_by_invoice(self, invoice_id: int) -> list[InvoiceItem]:
        rows = [r for r in self._file.load() if r["invoice_id"] == invoice_id]
        return [self._to_domain(r) for r in sorted(rows, key=lambda r: r["id"])]

    def delete_by_invoice(self, invoice_id: int) -> None:
        with self._file.locked():
            records = self._file.load()
            self._file.persist([r for r in records if r["invoice_id"] != invoice_id])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InvoiceItem) -> dict:
        return {
            "id": item.id,
            "invoice_id": item.invoice_id,
            "product_name": item.product_name,
            "quantity": item.quantity.value,
            "rate": item.rate.to_plain(),
            "total": item.total.to_plain(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InvoiceItem:
        return InvoiceItem(
            id=raw["id"],
            invoice_id=raw["invoice_id"],
            product_name=raw["product_name"],
            quantity=Quantity(raw["quantity"]),
            rate=Money(Decimal(raw["rate"])),
            total=Money(Decimal(raw["total"])),
        )
