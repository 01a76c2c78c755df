"""Application service: Delete Product use case.

Invoices that already used the product are unaffected: their line
items hold their own copy of the product's commercial fields.
"""

from __future__ import annotations

import logging

from invoicer.domain.exceptions import EntityNotFoundError
from invoicer.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, owner_id: int, product_id: int) -> None:
        if not self._product_repo.delete_for_owner(product_id, owner_id):
            raise EntityNotFoundError("Product not found")
        logger.info("Product #%s deleted by user #%s", product_id, owner_id)
