"""Application service: List Products use case (query)."""

from __future__ import annotations

from invoicer.application.dto import ProductDTO
from invoicer.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, owner_id: int) -> list[ProductDTO]:
        return [
            ProductDTO.from_domain(p)
            for p in self._product_repo.list_by_owner(owner_id)
        ]
