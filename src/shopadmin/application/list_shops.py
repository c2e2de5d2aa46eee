"""Application service: List Shops use case (query)."""

from __future__ import annotations

from shopadmin.application.dto import ShopSummaryDTO
from shopadmin.domain.repository.shop_repository import ShopRepository


class ListShopsHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self) -> list[ShopSummaryDTO]:
        return [
            ShopSummaryDTO(
                id=shop.id,  # type: ignore[arg-type]
                name=shop.name,
                description=shop.description,
                logo=shop.logo,
                product_count=shop.product_count,
                total_stock=shop.total_stock,
            )
            for shop in self._shop_repo.list_all()
        ]
