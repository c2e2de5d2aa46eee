"""Application service: Add Product use case.

Products have no endpoint of their own. Adding one reads the owning
shop, appends to its product list, and writes the whole list back.
That read-modify-write is not atomic: a concurrent edit of the same
shop from elsewhere can be overwritten.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from shopadmin.application.dto import ProductForm
from shopadmin.domain.exceptions import EntityNotFoundError
from shopadmin.domain.model.product import Product
from shopadmin.domain.model.value_objects import EntityId
from shopadmin.domain.repository.shop_repository import ShopRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, shop_id: EntityId, form: ProductForm) -> Product:
        """Add a new product to a shop's catalog."""
        shop = self._shop_repo.get_by_id(shop_id)
        if shop is None:
            raise EntityNotFoundError(f"Shop #{shop_id} not found")

        product = Product.create(
            name=form.name,
            price=form.price if form.price is not None else Decimal("0"),
            stock_level=form.stock_level or 0,
            description=form.description,
            image=form.image,
            product_id=shop.next_product_id(),
        )
        self._shop_repo.replace_products(
            shop.id,  # type: ignore[arg-type]
            shop.with_product_added(product),
        )
        logger.info("Added product #%s '%s' to shop #%s", product.id, product.name, shop.id)
        return product
