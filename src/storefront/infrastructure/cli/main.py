import logging

import click

from storefront.infrastructure.cli.cart_commands import buy, shop
from storefront.infrastructure.cli.product_commands import products


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Storefront — product catalog and shopping cart"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(products)
cli.add_command(buy)
cli.add_command(shop)
