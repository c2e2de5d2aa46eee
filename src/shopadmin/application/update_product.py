"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from shopadmin.application.dto import ProductForm
from shopadmin.domain.exceptions import EntityNotFoundError
from shopadmin.domain.model.product import Product
from shopadmin.domain.model.value_objects import EntityId
from shopadmin.domain.repository.shop_repository import ShopRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, shop_id: EntityId, product_id: EntityId, form: ProductForm) -> Product:
        """Replace a product's fields, writing back the shop's product list.

        Price, stock level and image keep their current values when the
        form leaves them out.
        """
        shop = self._shop_repo.get_by_id(shop_id)
        if shop is None:
            raise EntityNotFoundError(f"Shop #{shop_id} not found")

        current = shop.find_product(product_id)
        product = Product.create(
            name=form.name,
            price=form.price if form.price is not None else current.price,
            stock_level=(
                form.stock_level if form.stock_level is not None else current.stock_level
            ),
            description=form.description,
            image=form.image or current.image,
            product_id=current.id,
        )
        self._shop_repo.replace_products(
            shop.id,  # type: ignore[arg-type]
            shop.with_product_replaced(product),
        )
        logger.info("Updated product #%s in shop #%s", product.id, shop.id)
        return product
