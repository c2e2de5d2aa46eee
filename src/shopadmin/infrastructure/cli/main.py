from __future__ import annotations

from dataclasses import replace

import click

from shopadmin.infrastructure.cli.context import AppContext
from shopadmin.infrastructure.cli.dashboard_commands import dashboard
from shopadmin.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from shopadmin.infrastructure.cli.shop_commands import (
    shop_add,
    shop_delete,
    shop_list,
    shop_show,
    shop_update,
)
from shopadmin.infrastructure.config import Settings
from shopadmin.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--api-url", default=None, help="Catalog store base URL (overrides SHOPADMIN_API_URL).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log HTTP traffic.")
@click.pass_context
def cli(ctx: click.Context, api_url: str | None, verbose: bool) -> None:
    """shopadmin — manage shops and their products"""
    if ctx.obj is None:
        settings = Settings.from_env()
        if api_url:
            settings = replace(settings, api_url=api_url.rstrip("/"))
        ctx.obj = AppContext(settings=settings)
    configure_logging("DEBUG" if verbose else ctx.obj.settings.log_level)
    ctx.call_on_close(ctx.obj.close)


@cli.group()
def shop() -> None:
    """Manage shops."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
shop.add_command(shop_add)
shop.add_command(shop_delete)
shop.add_command(shop_list)
shop.add_command(shop_show)
shop.add_command(shop_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
cli.add_command(dashboard)
