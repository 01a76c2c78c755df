"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Lookups that a caller makes on behalf of a user are filtered by id AND
owner in one call, so "missing" and "someone else's" look the same.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from invoicer.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a new product and return it with its assigned ID."""

    @abstractmethod
    def get_for_owner(self, product_id: int, owner_id: int) -> Product | None:
        """Return the product if it exists and belongs to ``owner_id``."""

    @abstractmethod
    def list_by_owner(self, owner_id: int) -> list[Product]:
        """Return every product owned by ``owner_id``, in insertion order."""

    @abstractmethod
    def delete_for_owner(self, product_id: int, owner_id: int) -> bool:
        """Delete the product if owned by ``owner_id``; False if nothing matched."""
