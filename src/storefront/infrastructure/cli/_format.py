"""Shared formatting and parsing helpers for the CLI commands."""

from __future__ import annotations

import click

from storefront.application.dto import CartView, CheckoutSnapshot, ShippingQuote
from storefront.domain.model.cart import CartLine
from storefront.domain.model.product import Product, ProductId


def parse_product_id(raw: str) -> ProductId:
    """Numeric ids become ints (as the remote catalog sends them)."""
    raw = raw.strip()
    return int(raw) if raw.isdigit() else raw


def echo_products(products: list[Product]) -> None:
    click.echo(f"{'ID':<6} {'Title':<40} {'Price':>12}")
    click.echo("-" * 60)
    for p in products:
        click.echo(f"{str(p.id):<6} {_clip(p.title, 40):<40} {str(p.price):>12}")


def _echo_lines(items: tuple[CartLine, ...]) -> None:
    click.echo(f"  {'ID':<6} {'Product':<30} {'Qty':>5} {'Total':>12}")
    click.echo(f"  {'-'*56}")
    for line in items:
        click.echo(
            f"  {str(line.product_id):<6} {_clip(line.product.title, 30):<30} "
            f"{line.quantity.value:>5} {str(line.line_total):>12}"
        )
    click.echo(f"  {'-'*56}")


def echo_cart(view: CartView) -> None:
    if not view.items:
        click.echo("Cart is empty.")
        return
    _echo_lines(view.items)
    click.echo(f"  {'Items':<37} {view.item_count:>5}")
    click.echo(f"  {'Total':<37} {str(view.total):>18}")


def echo_receipt(snapshot: CheckoutSnapshot) -> None:
    click.echo("Order placed:")
    _echo_lines(snapshot.items)
    click.echo(f"  {'Subtotal':<37} {str(snapshot.total):>18}")


def echo_quote(quote: ShippingQuote) -> None:
    click.echo(f"Deliver to: {quote.address}")
    click.echo(f"  {'Shipping':<37} {str(quote.shipping):>18}")
    click.echo(f"  {'Total':<37} {str(quote.total):>18}")


def _clip(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."
