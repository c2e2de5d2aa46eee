"""HTTP-backed implementation of ShopRepository.

Talks to a REST resource store exposing ``/shops`` and ``/shops/{id}``
(json-server style). Products travel nested inside their shop.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from shopadmin.domain.exceptions import FetchFailedError, PreconditionFailedError
from shopadmin.domain.model.product import Product
from shopadmin.domain.model.shop import Shop
from shopadmin.domain.model.value_objects import EntityId
from shopadmin.domain.repository.shop_repository import ShopRepository

logger = logging.getLogger(__name__)

# Raised while mapping a malformed body (null or non-numeric fields).
_MAPPING_ERRORS = (InvalidOperation, TypeError, ValueError, AttributeError)

# Status codes a store may use to refuse deleting a shop that has products.
_PRECONDITION_STATUSES = (httpx.codes.CONFLICT, httpx.codes.PRECONDITION_FAILED)


class HttpShopRepository(ShopRepository):

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def close(self) -> None:
        self._client.close()

    # --- ShopRepository interface ---------------------------------------------

    def list_all(self) -> list[Shop]:
        failure = "Failed to fetch shops"
        response = self._send("GET", "/shops", failure=failure)
        return self._decode(response, failure, many=True)

    def get_by_id(self, shop_id: EntityId) -> Shop | None:
        response = self._send(
            "GET",
            f"/shops/{shop_id}",
            failure="Failed to fetch shop details",
            allow_not_found=True,
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        return self._decode(response, "Failed to fetch shop details")

    def add(self, shop: Shop) -> Shop:
        raw = self._to_raw(shop)
        raw.pop("id")
        raw["products"] = []
        response = self._send("POST", "/shops", json=raw, failure="Failed to add shop")
        return self._decode(response, "Failed to add shop")

    def update(self, shop_id: EntityId, fields: dict[str, Any]) -> Shop:
        response = self._send(
            "PATCH", f"/shops/{shop_id}", json=fields, failure="Failed to update shop"
        )
        return self._decode(response, "Failed to update shop")

    def replace_products(self, shop_id: EntityId, products: list[Product]) -> Shop:
        response = self._send(
            "PATCH",
            f"/shops/{shop_id}",
            json={"products": [self._product_to_raw(p) for p in products]},
            failure="Failed to save product",
        )
        return self._decode(response, "Failed to save product")

    def delete(self, shop_id: EntityId) -> None:
        response = self._send(
            "DELETE",
            f"/shops/{shop_id}",
            failure="Failed to delete shop",
            allow_precondition=True,
        )
        if response.status_code in _PRECONDITION_STATUSES:
            raise PreconditionFailedError(
                f"Cannot delete shop #{shop_id} — it still has products"
            )

    # --- Serialization --------------------------------------------------------

    @classmethod
    def _to_raw(cls, shop: Shop) -> dict:
        return {
            "id": shop.id,
            "name": shop.name,
            "description": shop.description,
            "logo": shop.logo,
            "products": [cls._product_to_raw(p) for p in shop.products],
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> Shop:
        return Shop(
            id=raw.get("id"),
            name=raw.get("name") or "",
            description=raw.get("description") or "",
            logo=raw.get("logo"),
            products=[cls._product_to_domain(p) for p in raw.get("products") or []],
        )

    @staticmethod
    def _product_to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": _json_number(product.price),
            "stockLevel": product.stock_level,
            "description": product.description,
            "image": product.image,
        }

    @staticmethod
    def _product_to_domain(raw: dict) -> Product:
        return Product(
            id=raw.get("id"),
            name=raw.get("name") or "",
            price=Decimal(str(raw.get("price") or 0)),
            stock_level=int(raw.get("stockLevel") or 0),
            description=raw.get("description") or "",
            image=raw.get("image"),
        )

    # --- HTTP helpers ---------------------------------------------------------

    def _decode(
        self, response: httpx.Response, failure: str, many: bool = False
    ) -> Any:
        """Map a response body to Shop(s); a malformed body becomes FetchFailedError."""
        try:
            body = response.json()
            if many:
                return [self._to_domain(raw) for raw in body]
            return self._to_domain(body)
        except _MAPPING_ERRORS as exc:
            logger.warning("Malformed response from %s: %s", response.request.url, exc)
            raise FetchFailedError(failure) from exc

    def _send(
        self,
        method: str,
        url: str,
        failure: str,
        json: Any = None,
        allow_not_found: bool = False,
        allow_precondition: bool = False,
    ) -> httpx.Response:
        """Issue one request; any unexpected outcome becomes FetchFailedError."""
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise FetchFailedError(failure) from exc

        if response.is_success:
            return response
        if allow_not_found and response.status_code == httpx.codes.NOT_FOUND:
            return response
        if allow_precondition and response.status_code in _PRECONDITION_STATUSES:
            return response

        logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
        raise FetchFailedError(f"{failure} (HTTP {response.status_code})")


def _json_number(value: Decimal) -> int | float:
    """Decimal is not JSON-serializable; send integral prices as ints."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)
