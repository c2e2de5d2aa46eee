"""Shop aggregate — owns its product list.

Every product mutation goes through the owning shop: the application
layer reads the shop, asks it for a new product list, and writes the
whole list back to the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopadmin.domain.exceptions import (
    EntityNotFoundError,
    PreconditionFailedError,
    ValidationError,
)
from shopadmin.domain.model.product import Product
from shopadmin.domain.model.value_objects import EntityId


@dataclass
class Shop:
    """Aggregate root for a shop and its products.

    Invariants:
    - product ids are unique within the shop
    - a shop that still owns products cannot be deleted
    """

    id: EntityId | None
    name: str
    description: str = ""
    logo: str | None = None
    products: list[Product] = field(default_factory=list)

    # --- Factory (used for NEW shops and form edits) --------------------------

    @staticmethod
    def create(name: str, description: str, logo: str | None = None) -> Shop:
        """Create a new shop from form input, enforcing all field rules."""
        if not name or not name.strip():
            raise ValidationError("Shop name is required")
        if not description or not description.strip():
            raise ValidationError("Shop description is required")
        return Shop(
            id=None,
            name=name.strip(),
            description=description.strip(),
            logo=logo or None,
        )

    # --- Product list transformations -----------------------------------------
    #
    # These return a fresh list and leave ``self.products`` untouched, so a
    # failed write to the store never leaves the in-memory snapshot changed.

    def next_product_id(self) -> int:
        """Return max numeric product id + 1, or 1 for an empty shop."""
        numeric_ids = [
            int(p.id)
            for p in self.products
            if p.id is not None and str(p.id).isdigit()
        ]
        return max(numeric_ids) + 1 if numeric_ids else 1

    def with_product_added(self, product: Product) -> list[Product]:
        if product.id is not None and self._index_of(product.id) is not None:
            raise ValidationError(
                f"Product ID '{product.id}' already exists in shop '{self.name}'"
            )
        return [*self.products, product]

    def with_product_replaced(self, product: Product) -> list[Product]:
        index = self._require_index(product.id)
        updated = list(self.products)
        updated[index] = product
        return updated

    def with_product_removed(self, product_id: EntityId) -> list[Product]:
        index = self._require_index(product_id)
        return self.products[:index] + self.products[index + 1:]

    def find_product(self, product_id: EntityId) -> Product:
        return self.products[self._require_index(product_id)]

    # --- Lifecycle checks -----------------------------------------------------

    def ensure_deletable(self) -> None:
        if self.products:
            count = len(self.products)
            raise PreconditionFailedError(
                f"Cannot delete shop '{self.name}' — it still has "
                f"{count} product{'s' if count != 1 else ''}"
            )

    # --- Computed properties --------------------------------------------------

    @property
    def product_count(self) -> int:
        return len(self.products)

    @property
    def total_stock(self) -> int:
        return sum(p.stock_level for p in self.products)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: EntityId | None) -> int | None:
        # Ids arrive as strings from the command line and as ints from JSON.
        for i, product in enumerate(self.products):
            if str(product.id) == str(product_id):
                return i
        return None

    def _require_index(self, product_id: EntityId | None) -> int:
        index = self._index_of(product_id)
        if index is None:
            raise EntityNotFoundError(
                f"Product ID '{product_id}' not found in shop '{self.name}'"
            )
        return index
