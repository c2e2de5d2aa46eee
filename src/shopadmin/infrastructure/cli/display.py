"""Shared table formatting for product listings."""

from __future__ import annotations

import click

from shopadmin.application.dto import ProductPageDTO


def display_products(
    page: ProductPageDTO,
    show_shop: bool = True,
    filtered: bool = False,
) -> None:
    if not page.items:
        click.echo("No products match your filters." if filtered else "No products found.")
        click.echo(f"Page {page.page} of {page.total_pages}")
        return

    header = f"{'ID':<8} {'Name':<24}"
    if show_shop:
        header += f" {'Shop':<18}"
    header += f" {'Price':>10} {'Stock':>6} {'Status':<13} {'Value':>12}"
    click.echo(header)
    click.echo("-" * len(header))
    for item in page.items:
        line = f"{str(item.id):<8} {item.name:<24}"
        if show_shop:
            line += f" {item.shop_name:<18}"
        line += (
            f" {item.price:>10} {item.stock_level:>6} "
            f"{item.stock_status:<13} {item.inventory_value:>12}"
        )
        click.echo(line)
    click.echo("-" * len(header))
    click.echo(
        f"Page {page.page} of {page.total_pages}  "
        f"({page.total_items} product{'s' if page.total_items != 1 else ''})"
    )
