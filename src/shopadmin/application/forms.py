"""Form parsing for the create/update screens.

Numeric fields are parsed permissively: blank or unparsable input
becomes 0 instead of rejecting the submission. A value that does parse
but is negative is rejected. Required text fields are checked by the
``Shop.create`` / ``Product.create`` factories.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from shopadmin.application.dto import ProductForm, ShopForm
from shopadmin.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


def parse_price(raw: str | int | float | Decimal | None) -> Decimal:
    """Parse a price; unparsable input defaults to 0."""
    value = _to_decimal(raw, field="price")
    if value < 0:
        raise ValidationError(f"Price cannot be negative, got {raw!r}")
    return value


def parse_stock_level(raw: str | int | float | Decimal | None) -> int:
    """Parse a stock level; decimals are truncated, unparsable input is 0."""
    value = int(_to_decimal(raw, field="stock level"))
    if value < 0:
        raise ValidationError(f"Stock level cannot be negative, got {raw!r}")
    return value


def shop_form(name: str, description: str, logo: str | None = None) -> ShopForm:
    return ShopForm(name=name, description=description, logo=_reference(logo))


def product_form(
    name: str,
    price: str | int | float | Decimal | None,
    stock_level: str | int | float | Decimal | None,
    description: str,
    image: str | None = None,
) -> ProductForm:
    return ProductForm(
        name=name,
        price=parse_price(price) if price is not None else None,
        stock_level=parse_stock_level(stock_level) if stock_level is not None else None,
        description=description,
        image=_reference(image),
    )


# --- Internal helpers ---------------------------------------------------------


def _to_decimal(raw: str | int | float | Decimal | None, field: str) -> Decimal:
    if raw is None:
        return Decimal("0")
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        logger.info("Unparsable %s %r treated as 0", field, raw)
        return Decimal("0")
    if not value.is_finite():
        logger.info("Non-finite %s %r treated as 0", field, raw)
        return Decimal("0")
    return value


def _reference(raw: str | None) -> str | None:
    """Image/logo references are passed through; blank means none."""
    if raw is None or not raw.strip():
        return None
    return raw.strip()
