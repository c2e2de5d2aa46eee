"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopadmin.domain.model.catalog_views import ShopProduct, ShopStockInfo
from shopadmin.domain.model.value_objects import EntityId


def format_money(amount: Decimal) -> str:
    """Display form of a price or inventory value, e.g. ``$1,250.00``."""
    return f"${amount:,.2f}"


# --- Input --------------------------------------------------------------------


@dataclass(frozen=True)
class ShopForm:
    """Input: the fields of the add/edit shop form."""

    name: str
    description: str
    logo: str | None = None


@dataclass(frozen=True)
class ProductForm:
    """Input: the fields of the add/edit product form, already parsed.

    ``price`` and ``stock_level`` are None when the field was left out;
    an edit then keeps the current value and a new product gets 0.
    """

    name: str
    price: Decimal | None
    stock_level: int | None
    description: str
    image: str | None = None


# --- Output -------------------------------------------------------------------


@dataclass(frozen=True)
class ShopSummaryDTO:
    id: EntityId
    name: str
    description: str
    logo: str | None
    product_count: int
    total_stock: int


@dataclass(frozen=True)
class ProductRowDTO:
    """Output: one product row as displayed to the user."""

    id: EntityId | None
    name: str
    description: str
    price: str  # formatted, e.g. "$15.00"
    stock_level: int
    stock_status: str  # label, e.g. "Low Stock"
    inventory_value: str
    image: str | None
    shop_id: EntityId | None
    shop_name: str


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of a filtered, sorted product list."""

    items: list[ProductRowDTO]
    page: int
    total_pages: int
    total_items: int


@dataclass(frozen=True)
class ShopDetailDTO:
    id: EntityId
    name: str
    description: str
    logo: str | None
    product_count: int
    products: ProductPageDTO


@dataclass(frozen=True)
class DashboardDTO:
    total_shops: int
    total_products: int
    total_value: str
    total_stock: int
    in_stock: int
    low_stock: int
    out_of_stock: int
    top_shops: list[ShopStockInfo]


# --- Mapping ------------------------------------------------------------------


def to_product_row(item: ShopProduct) -> ProductRowDTO:
    product = item.product
    return ProductRowDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=format_money(product.price),
        stock_level=product.stock_level,
        stock_status=product.stock_status.label,
        inventory_value=format_money(product.inventory_value),
        image=product.image,
        shop_id=item.shop_id,
        shop_name=item.shop_name,
    )
