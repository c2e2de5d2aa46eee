"""Product entity.

Products have no lifecycle of their own: they are created, changed and
removed only through the product list of the Shop that owns them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopadmin.domain.exceptions import ValidationError
from shopadmin.domain.model.value_objects import EntityId, StockStatus


@dataclass
class Product:
    """A catalog item belonging to exactly one shop.

    Use ``Product.create()`` for data coming from a form; it enforces the
    field rules. ``__init__`` is left simple so snapshots fetched from the
    store can be reconstituted as-is, whatever values they carry.
    """

    id: EntityId | None
    name: str
    price: Decimal
    stock_level: int
    description: str = ""
    image: str | None = None

    # --- Factory (used for form input only) -----------------------------------

    @staticmethod
    def create(
        name: str,
        price: Decimal,
        stock_level: int,
        description: str,
        image: str | None = None,
        product_id: EntityId | None = None,
    ) -> Product:
        """Build a product from form input, enforcing all field rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not description or not description.strip():
            raise ValidationError("Product description is required")
        if price < Decimal("0"):
            raise ValidationError(f"Product price cannot be negative, got {price}")
        if stock_level < 0:
            raise ValidationError(
                f"Stock level cannot be negative, got {stock_level}"
            )
        return Product(
            id=product_id,
            name=name.strip(),
            price=price,
            stock_level=stock_level,
            description=description.strip(),
            image=image or None,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def stock_status(self) -> StockStatus:
        return StockStatus.of(self.stock_level)

    @property
    def inventory_value(self) -> Decimal:
        return self.price * self.stock_level
