"""Application service: Delete Shop use case.

A shop that still owns products cannot be deleted. The check runs
against a fresh read of the shop before anything is sent, and the store
may refuse as well; either way the shop list is left unchanged.
"""

from __future__ import annotations

import logging

from shopadmin.domain.exceptions import EntityNotFoundError
from shopadmin.domain.model.value_objects import EntityId
from shopadmin.domain.repository.shop_repository import ShopRepository

logger = logging.getLogger(__name__)


class DeleteShopHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, shop_id: EntityId) -> None:
        shop = self._shop_repo.get_by_id(shop_id)
        if shop is None:
            raise EntityNotFoundError(f"Shop #{shop_id} not found")

        shop.ensure_deletable()
        self._shop_repo.delete(shop.id)  # type: ignore[arg-type]
        logger.info("Deleted shop #%s '%s'", shop.id, shop.name)
