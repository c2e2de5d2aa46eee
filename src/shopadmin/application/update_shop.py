"""Application service: Update Shop use case."""

from __future__ import annotations

import logging

from shopadmin.application.dto import ShopForm
from shopadmin.domain.exceptions import EntityNotFoundError
from shopadmin.domain.model.shop import Shop
from shopadmin.domain.model.value_objects import EntityId
from shopadmin.domain.repository.shop_repository import ShopRepository

logger = logging.getLogger(__name__)


class UpdateShopHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, shop_id: EntityId, form: ShopForm) -> Shop:
        """Change a shop's name, description and logo.

        The existing logo is kept when the form does not supply one.
        Products are not touched.
        """
        existing = self._shop_repo.get_by_id(shop_id)
        if existing is None:
            raise EntityNotFoundError(f"Shop #{shop_id} not found")

        edited = Shop.create(
            name=form.name,
            description=form.description,
            logo=form.logo or existing.logo,
        )
        updated = self._shop_repo.update(
            existing.id,  # type: ignore[arg-type]
            {"name": edited.name, "description": edited.description, "logo": edited.logo},
        )
        logger.info("Updated shop #%s", updated.id)
        return updated
