"""Application service: Create Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from invoicer.application.dto import ProductDTO
from invoicer.domain.model.product import Product
from invoicer.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        owner_id: int,
        name: str,
        quantity: int,
        rate: str | Decimal,
    ) -> ProductDTO:
        """Add a product to the owner's catalog with its total and tax."""
        product = Product.create(
            owner_id=owner_id, name=name, quantity=quantity, rate=rate
        )
        saved = self._product_repo.add(product)
        logger.info(
            "Product #%s '%s' created for user #%s (total=%s, tax=%s)",
            saved.id, saved.name, owner_id,
            saved.total.to_plain(), saved.tax_amount.to_plain(),
        )
        return ProductDTO.from_domain(saved)
