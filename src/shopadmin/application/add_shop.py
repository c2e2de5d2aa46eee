"""Application service: Add Shop use case."""

from __future__ import annotations

import logging

from shopadmin.application.dto import ShopForm
from shopadmin.domain.model.shop import Shop
from shopadmin.domain.repository.shop_repository import ShopRepository

logger = logging.getLogger(__name__)


class AddShopHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, form: ShopForm) -> Shop:
        """Validate the form and create the shop with no products."""
        shop = Shop.create(name=form.name, description=form.description, logo=form.logo)
        created = self._shop_repo.add(shop)
        logger.info("Created shop #%s '%s'", created.id, created.name)
        return created
