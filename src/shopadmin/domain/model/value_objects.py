"""Value Objects shared across the domain.

StockStatus is derived from a product's stock level and never persisted.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

# Shops and products are identified by whatever the store assigns:
# json-style stores hand out integers, others hand out strings.
EntityId = Union[int, str]

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
LOW_STOCK_THRESHOLD = 5


class StockStatus(Enum):
    OUT_OF_STOCK = "outOfStock"
    LOW_STOCK = "lowStock"
    IN_STOCK = "inStock"

    @staticmethod
    def of(stock_level: int) -> StockStatus:
        """Classify a stock level.

        The three buckets are mutually exclusive and cover every
        ``stock_level >= 0``. Negative levels are not validated here and
        land in LOW_STOCK, the same as any level at or under the threshold.
        """
        if stock_level == 0:
            return StockStatus.OUT_OF_STOCK
        if stock_level <= LOW_STOCK_THRESHOLD:
            return StockStatus.LOW_STOCK
        return StockStatus.IN_STOCK

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    StockStatus.OUT_OF_STOCK: "Out of Stock",
    StockStatus.LOW_STOCK: "Low Stock",
    StockStatus.IN_STOCK: "In Stock",
}
