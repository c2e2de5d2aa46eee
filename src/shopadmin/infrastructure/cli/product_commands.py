"""CLI commands for products (always addressed through their shop)."""

from __future__ import annotations

import click

from shopadmin.application import forms
from shopadmin.application.add_product import AddProductHandler
from shopadmin.application.delete_product import DeleteProductHandler
from shopadmin.application.list_products import ListProductsHandler
from shopadmin.application.query import CatalogQuery
from shopadmin.application.update_product import UpdateProductHandler
from shopadmin.domain.exceptions import DomainException
from shopadmin.domain.service.catalog_aggregator import SORT_KEYS, STOCK_BUCKETS
from shopadmin.infrastructure.cli.context import AppContext
from shopadmin.infrastructure.cli.display import display_products


@click.command("list")
@click.option("--search", default="", help="Match product name, description or shop name.")
@click.option("--shop", "shop_id", default="all", help="Only products of this shop ID.")
@click.option("--stock", type=click.Choice(STOCK_BUCKETS), default="all", help="Stock status filter.")
@click.option("--sort", "sort_key", type=click.Choice(SORT_KEYS), default="name", help="Sort order.")
@click.option("--page", type=int, default=1, show_default=True, help="Page number.")
@click.option("--page-size", type=int, default=None, help="Products per page.")
@click.pass_obj
def product_list(
    app: AppContext,
    search: str,
    shop_id: str,
    stock: str,
    sort_key: str,
    page: int,
    page_size: int | None,
) -> None:
    """List products across all shops."""
    query = (
        CatalogQuery(page_size=page_size or app.settings.page_size)
        .with_search(search)
        .with_shop(shop_id)
        .with_stock_bucket(stock)
        .with_sort(sort_key)
        .with_page(page)
    )
    handler = ListProductsHandler(shop_repo=app.shop_repository())

    try:
        dto = handler.handle(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_products(dto, filtered=query.is_filtered)


@click.command("add")
@click.option("--shop", "shop_id", required=True, help="Owning shop ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", default="0", help="Price (e.g. 15.00).")
@click.option("--stock", "stock_level", default="0", help="Units in stock.")
@click.option("--description", required=True, help="Product description.")
@click.option("--image", default=None, help="Image URL or reference.")
@click.pass_obj
def product_add(
    app: AppContext,
    shop_id: str,
    name: str,
    price: str,
    stock_level: str,
    description: str,
    image: str | None,
) -> None:
    """Add a product to a shop."""
    handler = AddProductHandler(shop_repo=app.shop_repository())

    try:
        form = forms.product_form(name, price, stock_level, description, image)
        product = handler.handle(shop_id, form)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added to shop #{shop_id}")


@click.command("update")
@click.option("--shop", "shop_id", required=True, help="Owning shop ID.")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", default=None, help="New price (e.g. 15.00); unchanged if omitted.")
@click.option("--stock", "stock_level", default=None, help="Units in stock; unchanged if omitted.")
@click.option("--description", required=True, help="Product description.")
@click.option("--image", default=None, help="New image URL or reference.")
@click.pass_obj
def product_update(
    app: AppContext,
    shop_id: str,
    product_id: str,
    name: str,
    price: str | None,
    stock_level: str | None,
    description: str,
    image: str | None,
) -> None:
    """Update a product."""
    handler = UpdateProductHandler(shop_repo=app.shop_repository())

    try:
        form = forms.product_form(name, price, stock_level, description, image)
        handler.handle(shop_id, product_id, form)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")


@click.command("delete")
@click.option("--shop", "shop_id", required=True, help="Owning shop ID.")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this product?")
@click.pass_obj
def product_delete(app: AppContext, shop_id: str, product_id: str) -> None:
    """Delete a product from its shop."""
    handler = DeleteProductHandler(shop_repo=app.shop_repository())

    try:
        handler.handle(shop_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
