"""Abstract repository for the Shop aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete implementation talks to the catalog
store over HTTP; tests use an in-memory fake.

Products have no repository of their own: they are written back as the
whole product list of their shop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from shopadmin.domain.model.product import Product
from shopadmin.domain.model.shop import Shop
from shopadmin.domain.model.value_objects import EntityId


class ShopRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Shop]:
        """Return every shop, each with its nested products."""

    @abstractmethod
    def get_by_id(self, shop_id: EntityId) -> Shop | None:
        """Return a shop by its ID, or None if not found."""

    @abstractmethod
    def add(self, shop: Shop) -> Shop:
        """Create a shop; return it with the store-assigned ID."""

    @abstractmethod
    def update(self, shop_id: EntityId, fields: dict[str, Any]) -> Shop:
        """Apply a partial update (name, description, logo) to a shop."""

    @abstractmethod
    def replace_products(self, shop_id: EntityId, products: list[Product]) -> Shop:
        """Overwrite the shop's whole product list."""

    @abstractmethod
    def delete(self, shop_id: EntityId) -> None:
        """Delete a shop.

        Raises PreconditionFailedError if the store refuses because the
        shop still owns products.
        """
