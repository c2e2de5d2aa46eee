"""Application service: List Products use case (query).

The cross-shop product screen: flatten every shop's products, then
filter, sort and paginate according to the caller's CatalogQuery.
"""

from __future__ import annotations

from shopadmin.application.dto import ProductPageDTO, to_product_row
from shopadmin.application.query import CatalogQuery
from shopadmin.domain.repository.shop_repository import ShopRepository
from shopadmin.domain.service import catalog_aggregator as aggregator


class ListProductsHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, query: CatalogQuery | None = None) -> ProductPageDTO:
        query = query or CatalogQuery()

        products = aggregator.flatten_products(self._shop_repo.list_all())
        matching = aggregator.filter_products(products, query.product_filter)
        ordered = aggregator.sort_products(matching, query.sort_key)
        page = aggregator.paginate(ordered, query.page_size, query.page)

        return ProductPageDTO(
            items=[to_product_row(item) for item in page],
            page=query.page,
            total_pages=aggregator.page_count(len(ordered), query.page_size),
            total_items=len(ordered),
        )
