"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from shopadmin.application.dto import DashboardDTO, format_money
from shopadmin.domain.repository.shop_repository import ShopRepository
from shopadmin.domain.service import catalog_aggregator as aggregator


class ShowDashboardHandler:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def handle(self, top_limit: int = aggregator.DEFAULT_TOP_SHOPS) -> DashboardDTO:
        shops = self._shop_repo.list_all()
        metrics = aggregator.compute_dashboard_metrics(shops)
        distribution = aggregator.compute_stock_distribution(shops)

        return DashboardDTO(
            total_shops=metrics.total_shops,
            total_products=metrics.total_products,
            total_value=format_money(metrics.total_value),
            total_stock=metrics.total_stock,
            in_stock=distribution.in_stock,
            low_stock=distribution.low_stock,
            out_of_stock=distribution.out_of_stock,
            top_shops=aggregator.top_shops_by_stock(shops, limit=top_limit),
        )
