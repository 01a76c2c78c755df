"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from invoicer.domain.model.product import Product
from invoicer.domain.model.value_objects import Money, Quantity
from invoicer.domain.repository.product_repository import ProductRepository
from invoicer.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> Product:
        with self._file.locked():
            records = self._file.load()
            saved = dataclasses.replace(product, id=self._file.next_id())
            records.append(self._to_raw(saved))
            self._file.persist(records)
        return saved

    def get_for_owner(self, product_id: int, owner_id: int) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id and raw["owner_id"] == owner_id:
                return self._to_domain(raw)
        return None

    def list_by_owner(self, owner_id: int) -> list[Product]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["owner_id"] == owner_id
        ]

    def delete_for_owner(self, product_id: int, owner_id: int) -> bool:
        with self._file.locked():
            records = self._file.load()
            kept = [
                r for r in records
                if not (r["id"] == product_id and r["owner_id"] == owner_id)
            ]
            if len(kept) == len(records):
                return False
            self._file.persist(kept)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "owner_id": product.owner_id,
            "name": product.name,
            "quantity": product.quantity.value,
            "rate": product.rate.to_plain(),
            "total": product.total.to_plain(),
            "tax_amount": product.tax_amount.to_plain(),
            "created_at": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            owner_id=raw["owner_id"],
            name=raw["name"],
            quantity=Quantity(raw["quantity"]),
            rate=Money(Decimal(raw["rate"])),
            total=Money(Decimal(raw["total"])),
            tax_amount=Money(Decimal(raw["tax_amount"])),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
