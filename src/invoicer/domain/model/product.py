"""Product aggregate.

Products belong to exactly one user. They are never updated: the derived
``total`` and ``tax_amount`` are computed once by ``Product.create()`` and
stored, so reading a product never recomputes anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from invoicer.domain.exceptions import ValidationError
from invoicer.domain.model.value_objects import Money, Quantity

# Flat tax applied to every product total.
TAX_RATE = Decimal("0.18")


@dataclass(frozen=True)
class Product:
    """A product in a user's catalog.

    Use ``Product.create()`` for new products. The ``__init__`` is left
    plain so repositories can reconstitute stored rows without
    recomputing the derived fields.
    """

    id: int | None
    owner_id: int
    name: str
    quantity: Quantity
    rate: Money
    total: Money
    tax_amount: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        owner_id: int,
        name: str,
        quantity: int,
        rate: str | int | Decimal,
    ) -> Product:
        """Validate input and compute the derived monetary fields.

        Checks run in field order and stop at the first violation.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        qty = Quantity(quantity)
        try:
            unit_rate = Money.of(rate)
        except ValidationError as exc:
            raise ValidationError("Rate must be a positive number") from exc
        if unit_rate.is_zero:
            raise ValidationError("Rate must be a positive number")

        total = unit_rate * qty.value
        return Product(
            id=None,
            owner_id=owner_id,
            name=name.strip(),
            quantity=qty,
            rate=unit_rate,
            total=total,
            tax_amount=total * TAX_RATE,
        )
