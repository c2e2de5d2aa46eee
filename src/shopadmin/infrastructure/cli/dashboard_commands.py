"""CLI command for the catalog dashboard."""

from __future__ import annotations

import click

from shopadmin.application.show_dashboard import ShowDashboardHandler
from shopadmin.domain.exceptions import DomainException
from shopadmin.domain.service.catalog_aggregator import DEFAULT_TOP_SHOPS
from shopadmin.infrastructure.cli.context import AppContext


@click.command("dashboard")
@click.option("--top", type=int, default=DEFAULT_TOP_SHOPS, show_default=True, help="Number of shops to rank.")
@click.pass_obj
def dashboard(app: AppContext, top: int) -> None:
    """Show catalog totals, stock status and top shops by stock."""
    handler = ShowDashboardHandler(shop_repo=app.shop_repository())

    try:
        dto = handler.handle(top_limit=top)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Total shops':<20} {dto.total_shops:>12}")
    click.echo(f"{'Total products':<20} {dto.total_products:>12}")
    click.echo(f"{'Total stock':<20} {dto.total_stock:>12}")
    click.echo(f"{'Inventory value':<20} {dto.total_value:>12}")
    click.echo()
    click.echo(f"{'In Stock':<20} {dto.in_stock:>12}")
    click.echo(f"{'Low Stock':<20} {dto.low_stock:>12}")
    click.echo(f"{'Out of Stock':<20} {dto.out_of_stock:>12}")

    if not dto.top_shops:
        return

    click.echo()
    click.echo(f"{'Top shops by stock':<24} {'Stock':>8} {'Products':>9}")
    click.echo("-" * 43)
    for info in dto.top_shops:
        click.echo(f"{info.name:<24} {info.total_stock:>8} {info.product_count:>9}")
