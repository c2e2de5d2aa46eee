"""Immutable query state for the product list screens.

A screen keeps one CatalogQuery and replaces it on every user action.
Changing search text, shop, stock bucket or sort order sends the user
back to page 1, so a shrinking result set never leaves them on a page
that no longer exists.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shopadmin.domain.model.catalog_views import ALL, ProductFilter
from shopadmin.domain.model.value_objects import EntityId

DEFAULT_PAGE_SIZE = 10
SHOP_DETAIL_PAGE_SIZE = 6


@dataclass(frozen=True)
class CatalogQuery:

    search_text: str = ""
    shop_id: EntityId = ALL
    stock_bucket: str = ALL
    sort_key: str = "name"
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def product_filter(self) -> ProductFilter:
        return ProductFilter(
            search_text=self.search_text,
            shop_id=self.shop_id,
            stock_bucket=self.stock_bucket,
        )

    @property
    def is_filtered(self) -> bool:
        return bool(self.search_text) or self.shop_id != ALL or self.stock_bucket != ALL

    def with_search(self, search_text: str) -> CatalogQuery:
        return replace(self, search_text=search_text, page=1)

    def with_shop(self, shop_id: EntityId) -> CatalogQuery:
        return replace(self, shop_id=shop_id, page=1)

    def with_stock_bucket(self, stock_bucket: str) -> CatalogQuery:
        return replace(self, stock_bucket=stock_bucket, page=1)

    def with_sort(self, sort_key: str) -> CatalogQuery:
        return replace(self, sort_key=sort_key, page=1)

    def with_page(self, page: int) -> CatalogQuery:
        return replace(self, page=page)
