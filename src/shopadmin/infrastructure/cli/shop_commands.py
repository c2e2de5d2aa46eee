"""CLI commands for the Shop aggregate."""

from __future__ import annotations

import click

from shopadmin.application import forms
from shopadmin.application.add_shop import AddShopHandler
from shopadmin.application.delete_shop import DeleteShopHandler
from shopadmin.application.list_shops import ListShopsHandler
from shopadmin.application.query import SHOP_DETAIL_PAGE_SIZE, CatalogQuery
from shopadmin.application.show_shop import ShowShopHandler
from shopadmin.application.update_shop import UpdateShopHandler
from shopadmin.domain.exceptions import DomainException
from shopadmin.domain.service.catalog_aggregator import SORT_KEYS, STOCK_BUCKETS
from shopadmin.infrastructure.cli.context import AppContext
from shopadmin.infrastructure.cli.display import display_products


@click.command("list")
@click.pass_obj
def shop_list(app: AppContext) -> None:
    """List all shops."""
    handler = ListShopsHandler(shop_repo=app.shop_repository())

    try:
        shops = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not shops:
        click.echo("No shops available yet.")
        return

    click.echo(f"{'ID':<8} {'Name':<24} {'Products':>9} {'Stock':>8}")
    click.echo("-" * 52)
    for s in shops:
        click.echo(f"{str(s.id):<8} {s.name:<24} {s.product_count:>9} {s.total_stock:>8}")


@click.command("show")
@click.option("--id", "shop_id", required=True, help="Shop ID.")
@click.option("--search", default="", help="Match product name or description.")
@click.option("--stock", type=click.Choice(STOCK_BUCKETS), default="all", help="Stock status filter.")
@click.option("--sort", "sort_key", type=click.Choice(SORT_KEYS), default="name", help="Sort order.")
@click.option("--page", type=int, default=1, show_default=True, help="Page number.")
@click.option("--page-size", type=int, default=SHOP_DETAIL_PAGE_SIZE, show_default=True, help="Products per page.")
@click.pass_obj
def shop_show(
    app: AppContext,
    shop_id: str,
    search: str,
    stock: str,
    sort_key: str,
    page: int,
    page_size: int,
) -> None:
    """Show a shop and its products."""
    query = (
        CatalogQuery(page_size=page_size)
        .with_search(search)
        .with_stock_bucket(stock)
        .with_sort(sort_key)
        .with_page(page)
    )
    handler = ShowShopHandler(shop_repo=app.shop_repository())

    try:
        dto = handler.handle(shop_id, query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Shop #{dto.id}  {dto.name}")
    click.echo(f"{dto.description}")
    if dto.logo:
        click.echo(f"Logo: {dto.logo}")
    click.echo(f"{dto.product_count} product{'s' if dto.product_count != 1 else ''}")
    click.echo()
    display_products(dto.products, show_shop=False, filtered=bool(search) or stock != "all")


@click.command("add")
@click.option("--name", required=True, help="Shop name.")
@click.option("--description", required=True, help="Shop description.")
@click.option("--logo", default=None, help="Logo image URL or reference.")
@click.pass_obj
def shop_add(app: AppContext, name: str, description: str, logo: str | None) -> None:
    """Add a new shop."""
    handler = AddShopHandler(shop_repo=app.shop_repository())

    try:
        shop = handler.handle(forms.shop_form(name, description, logo))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Shop #{shop.id} '{shop.name}' added")


@click.command("update")
@click.option("--id", "shop_id", required=True, help="Shop ID.")
@click.option("--name", required=True, help="Shop name.")
@click.option("--description", required=True, help="Shop description.")
@click.option("--logo", default=None, help="New logo image URL or reference.")
@click.pass_obj
def shop_update(
    app: AppContext,
    shop_id: str,
    name: str,
    description: str,
    logo: str | None,
) -> None:
    """Update a shop's details."""
    handler = UpdateShopHandler(shop_repo=app.shop_repository())

    try:
        shop = handler.handle(shop_id, forms.shop_form(name, description, logo))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Shop #{shop.id} updated")


@click.command("delete")
@click.option("--id", "shop_id", required=True, help="Shop ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this shop?")
@click.pass_obj
def shop_delete(app: AppContext, shop_id: str) -> None:
    """Delete a shop (only when it has no products)."""
    handler = DeleteShopHandler(shop_repo=app.shop_repository())

    try:
        handler.handle(shop_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Shop #{shop_id} deleted.")
