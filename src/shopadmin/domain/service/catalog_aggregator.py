"""Domain service: Catalog Aggregator.

Pure functions that turn a snapshot of shops (each with its nested
products) into the filtered, sorted and paginated views and the summary
statistics the screens display.

Nothing here mutates its arguments or talks to the store, so any of it
can be recomputed on every keystroke. Values are taken as given: a
negative price or stock level is not this module's concern.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, Sequence, TypeVar

from shopadmin.domain.exceptions import ValidationError
from shopadmin.domain.model.catalog_views import (
    ALL,
    DashboardMetrics,
    ProductFilter,
    ShopProduct,
    ShopStockInfo,
    StockStatusDistribution,
)
from shopadmin.domain.model.product import Product
from shopadmin.domain.model.shop import Shop
from shopadmin.domain.model.value_objects import StockStatus

T = TypeVar("T", Product, ShopProduct)

SORT_KEYS = ("name", "price", "stock")
STOCK_BUCKETS = (ALL,) + tuple(status.value for status in StockStatus)
DEFAULT_TOP_SHOPS = 5


# ---------------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------------


def flatten_products(shops: Iterable[Shop]) -> list[ShopProduct]:
    """Pair every product with its owning shop, in shop then product order."""
    return [
        ShopProduct(product=product, shop_id=shop.id, shop_name=shop.name)
        for shop in shops
        for product in shop.products or []
    ]


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def filter_products(
    products: Sequence[ShopProduct],
    criteria: ProductFilter | None = None,
) -> list[ShopProduct]:
    """Keep the products matching search text AND shop AND stock bucket.

    Search is a case-insensitive substring match against the product
    name, its description, or the owning shop's name. Shop ids are
    compared in string form, so ``"1"`` typed on a command line selects
    the shop whose id is the integer ``1``.
    """
    criteria = criteria or ProductFilter()
    wanted_status = _parse_bucket(criteria.stock_bucket)
    needle = criteria.search_text.casefold()

    def matches(item: ShopProduct) -> bool:
        if needle and not any(
            needle in text.casefold()
            for text in (item.name, item.description, item.shop_name)
        ):
            return False
        if criteria.shop_id != ALL and str(item.shop_id) != str(criteria.shop_id):
            return False
        if wanted_status is not None and item.stock_status != wanted_status:
            return False
        return True

    return [item for item in products if matches(item)]


def filter_shop_products(
    products: Sequence[Product],
    search_text: str = "",
    stock_bucket: str = ALL,
) -> list[Product]:
    """Filter one shop's products by name/description text and stock bucket."""
    wanted_status = _parse_bucket(stock_bucket)
    needle = search_text.casefold()
    return [
        p
        for p in products
        if (
            not needle
            or needle in p.name.casefold()
            or needle in p.description.casefold()
        )
        and (wanted_status is None or p.stock_status == wanted_status)
    ]


# ---------------------------------------------------------------------------
# Sorting and pagination
# ---------------------------------------------------------------------------


def sort_products(products: Sequence[T], key: str = "name") -> list[T]:
    """Return a new, stably sorted list.

    ``name`` and ``price`` sort ascending; ``stock`` sorts descending
    (highest stock first). Equal keys keep their original relative order.

    Names compare by ``str.casefold()``, not by the process locale's
    collation, so the order is the same on every host.
    """
    if key == "name":
        return sorted(products, key=lambda p: p.name.casefold())
    if key == "price":
        return sorted(products, key=lambda p: p.price)
    if key == "stock":
        return sorted(products, key=lambda p: p.stock_level, reverse=True)
    raise ValidationError(
        f"Unknown sort key '{key}' (expected one of: {', '.join(SORT_KEYS)})"
    )


def page_count(total_items: int, page_size: int) -> int:
    """Number of pages needed for *total_items*; never less than 1."""
    _check_page_size(page_size)
    return max(1, math.ceil(total_items / page_size))


def paginate(items: Sequence[T], page_size: int, page_number: int) -> list[T]:
    """Return the 1-indexed page *page_number*, clipped to the sequence.

    A page past the end is simply empty.
    """
    _check_page_size(page_size)
    if page_number < 1:
        raise ValidationError(f"Page number must be at least 1, got {page_number}")
    start = (page_number - 1) * page_size
    return list(items[start:start + page_size])


# ---------------------------------------------------------------------------
# Summary statistics
# ---------------------------------------------------------------------------


def compute_dashboard_metrics(shops: Sequence[Shop]) -> DashboardMetrics:
    products = flatten_products(shops)
    total_value = Decimal("0")
    total_stock = 0
    for item in products:
        total_value += item.inventory_value
        total_stock += item.stock_level
    return DashboardMetrics(
        total_shops=len(shops),
        total_products=len(products),
        total_value=total_value,
        total_stock=total_stock,
    )


def compute_stock_distribution(shops: Iterable[Shop]) -> StockStatusDistribution:
    counts = {status: 0 for status in StockStatus}
    for item in flatten_products(shops):
        counts[item.stock_status] += 1
    return StockStatusDistribution(
        in_stock=counts[StockStatus.IN_STOCK],
        low_stock=counts[StockStatus.LOW_STOCK],
        out_of_stock=counts[StockStatus.OUT_OF_STOCK],
    )


def top_shops_by_stock(
    shops: Iterable[Shop],
    limit: int = DEFAULT_TOP_SHOPS,
) -> list[ShopStockInfo]:
    """Rank shops by total stock, highest first; ties keep input order."""
    infos = [
        ShopStockInfo(
            id=shop.id,
            name=shop.name,
            total_stock=sum(p.stock_level for p in shop.products or []),
            product_count=len(shop.products or []),
        )
        for shop in shops
    ]
    ranked = sorted(infos, key=lambda info: info.total_stock, reverse=True)
    return ranked[:max(limit, 0)]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_bucket(stock_bucket: str) -> StockStatus | None:
    if stock_bucket == ALL:
        return None
    try:
        return StockStatus(stock_bucket)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown stock filter '{stock_bucket}' "
            f"(expected one of: {', '.join(STOCK_BUCKETS)})"
        ) from exc


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValidationError(f"Page size must be at least 1, got {page_size}")
