"""Application service: Show Shop use case (query).

The shop detail screen: one shop and a filtered, sorted, paginated view
of its own products. The shop filter of the query is ignored here.
"""

from __future__ import annotations

from shopadmin.application.dto import ProductPageDTO, ShopDetailDTO, to_product_row
from shopadmin.application.query import SHOP_DETAIL_PAGE_SIZE, CatalogQuery
from shopadmin.domain.exceptions import EntityNotFoundError
from shopadmin.domain.model.catalog_views import ShopProduct
from shopadmin.domain.model.value_objects import EntityId
from shopadmin.domain.repository.shop_repository import ShopRepository
from shopadmin.domain.service import catalog_aggregator as aggregator


class ShowShopHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(
        self,
        shop_id: EntityId,
        query: CatalogQuery | None = None,
    ) -> ShopDetailDTO:
        query = query or CatalogQuery(page_size=SHOP_DETAIL_PAGE_SIZE)

        shop = self._shop_repo.get_by_id(shop_id)
        if shop is None:
            raise EntityNotFoundError(f"Shop #{shop_id} not found")

        matching = aggregator.filter_shop_products(
            shop.products, query.search_text, query.stock_bucket
        )
        ordered = aggregator.sort_products(matching, query.sort_key)
        page = aggregator.paginate(ordered, query.page_size, query.page)

        return ShopDetailDTO(
            id=shop.id,  # type: ignore[arg-type]
            name=shop.name,
            description=shop.description,
            logo=shop.logo,
            product_count=shop.product_count,
            products=ProductPageDTO(
                items=[
                    to_product_row(ShopProduct(p, shop.id, shop.name)) for p in page
                ],
                page=query.page,
                total_pages=aggregator.page_count(len(ordered), query.page_size),
                total_items=len(ordered),
            ),
        )
