"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from shopadmin.domain.exceptions import EntityNotFoundError
from shopadmin.domain.model.value_objects import EntityId
from shopadmin.domain.repository.shop_repository import ShopRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, shop_id: EntityId, product_id: EntityId) -> None:
        shop = self._shop_repo.get_by_id(shop_id)
        if shop is None:
            raise EntityNotFoundError(f"Shop #{shop_id} not found")

        self._shop_repo.replace_products(
            shop.id,  # type: ignore[arg-type]
            shop.with_product_removed(product_id),
        )
        logger.info("Deleted product #%s from shop #%s", product_id, shop.id)
