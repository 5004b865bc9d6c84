"""CLI commands for browsing the product catalog."""

from __future__ import annotations

import asyncio

import click

from storefront.application.browse_products import SORT_KEYS, BrowseProductsHandler
from storefront.application.dto import ProductQuery
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_cart_use_case
from storefront.infrastructure.cli._format import echo_products


@click.command("products")
@click.option("--search", default="", help="Case-insensitive title filter.")
@click.option(
    "--sort",
    type=click.Choice(SORT_KEYS),
    default="relevance",
    show_default=True,
    help="Result order.",
)
@click.option("--page", type=int, default=1, show_default=True, help="Page number.")
@click.option("--per-page", type=int, default=8, show_default=True, help="Page size.")
def products(search: str, sort: str, page: int, per_page: int) -> None:
    """Fetch the catalog and list products."""
    use_case = build_cart_use_case()
    handler = BrowseProductsHandler()
    query = ProductQuery(search=search, sort=sort, page=page, per_page=per_page)

    try:
        catalog = asyncio.run(use_case.list_products())
        shown = handler.handle(catalog, query)
        more = handler.has_more(catalog, query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not shown:
        click.echo("No products found.")
        return

    echo_products(shown)
    if more:
        click.echo(f"More results: --page {page + 1}")
