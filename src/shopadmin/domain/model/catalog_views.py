"""Derived, view-only records computed from a catalog snapshot.

None of these are ever sent to the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopadmin.domain.model.product import Product
from shopadmin.domain.model.value_objects import EntityId, StockStatus

ALL = "all"


@dataclass(frozen=True)
class ShopProduct:
    """A product paired with the shop that owns it (cross-shop view)."""

    product: Product
    shop_id: EntityId | None
    shop_name: str

    # Convenience pass-throughs so sorting and display treat ShopProduct
    # and Product alike.

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def description(self) -> str:
        return self.product.description

    @property
    def price(self) -> Decimal:
        return self.product.price

    @property
    def stock_level(self) -> int:
        return self.product.stock_level

    @property
    def stock_status(self) -> StockStatus:
        return self.product.stock_status

    @property
    def inventory_value(self) -> Decimal:
        return self.product.inventory_value


@dataclass(frozen=True)
class ProductFilter:
    """Filter criteria; the defaults match everything."""

    search_text: str = ""
    shop_id: EntityId = ALL
    stock_bucket: str = ALL


@dataclass(frozen=True)
class DashboardMetrics:
    total_shops: int
    total_products: int
    total_value: Decimal
    total_stock: int


@dataclass(frozen=True)
class StockStatusDistribution:
    in_stock: int
    low_stock: int
    out_of_stock: int


@dataclass(frozen=True)
class ShopStockInfo:
    id: EntityId | None
    name: str
    total_stock: int
    product_count: int
