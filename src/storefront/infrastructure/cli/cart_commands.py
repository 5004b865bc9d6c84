"""CLI commands for filling a cart and checking out."""

from __future__ import annotations

import asyncio

import click

from storefront.application.cart_use_case import CartUseCase
from storefront.application.dto import CheckoutSnapshot
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import PostalCode
from storefront.infrastructure.bootstrap import (
    build_cart_use_case,
    quote_shipping_handler,
)
from storefront.infrastructure.cli._format import (
    echo_cart,
    echo_products,
    echo_quote,
    echo_receipt,
    parse_product_id,
)

SHOP_HELP = """\
Commands:
  list                 show the catalog
  add ID               add one unit of a product
  remove ID            remove a product from the cart
  qty ID DELTA         change a product's quantity (e.g. qty 3 -1)
  cart                 show the cart
  checkout [CEP]       place the order, optionally quoting shipping
  help                 show this message
  quit                 leave the shop"""


def _load_catalog(use_case: CartUseCase) -> None:
    try:
        asyncio.run(use_case.list_products())
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _checkout(use_case: CartUseCase, raw_postal_code: str | None) -> CheckoutSnapshot:
    """Place the order and print it, with a shipping quote if asked for.

    The postal code is parsed and the quote taken against the current
    cart contents before the cart is drained, so a bad or unknown code
    leaves the cart as it was.
    """
    quote = None
    if raw_postal_code:
        postal_code = PostalCode.parse(raw_postal_code)
        view = use_case.cart_view()
        if view.items:
            preview = CheckoutSnapshot(items=view.items, total=view.total)
            quote = asyncio.run(quote_shipping_handler().handle(preview, postal_code))

    snapshot = use_case.checkout()
    if not snapshot.is_empty:
        echo_receipt(snapshot)
        if quote is not None:
            echo_quote(quote)
    return snapshot


@click.command("buy")
@click.argument("product_ids", nargs=-1, required=True)
@click.option("--postal-code", "--cep", default=None, help="Postal code for a shipping quote.")
def buy(product_ids: tuple[str, ...], postal_code: str | None) -> None:
    """Add products (one unit per ID given) and check out."""
    use_case = build_cart_use_case()
    _load_catalog(use_case)

    for raw in product_ids:
        if not use_case.add_to_cart(parse_product_id(raw)):
            click.echo(f"Warning: product {raw} not found, skipped.", err=True)

    if use_case.cart_view().item_count == 0:
        raise click.ClickException("Your cart is empty")

    try:
        _checkout(use_case, postal_code)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("shop")
def shop() -> None:
    """Interactive shopping session (commands read from stdin)."""
    use_case = build_cart_use_case()
    _load_catalog(use_case)
    click.echo("Catalog loaded. Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("cart", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            break

        parts = line.split()
        if not parts:
            continue
        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "exit"):
            break

        try:
            _dispatch(use_case, command, args)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)


def _dispatch(use_case: CartUseCase, command: str, args: list[str]) -> None:
    if command == "help":
        click.echo(SHOP_HELP)
    elif command == "list":
        echo_products(asyncio.run(use_case.list_products()))
    elif command == "add" and len(args) == 1:
        if use_case.add_to_cart(parse_product_id(args[0])):
            click.echo(f"Cart: {use_case.cart_view().item_count} item(s)")
        else:
            click.echo(f"Product {args[0]} not found.")
    elif command == "remove" and len(args) == 1:
        use_case.remove_from_cart(parse_product_id(args[0]))
        echo_cart(use_case.cart_view())
    elif command == "qty" and len(args) == 2:
        try:
            delta = int(args[1])
        except ValueError:
            click.echo(f"Invalid quantity change '{args[1]}'.")
            return
        use_case.change_quantity(parse_product_id(args[0]), delta)
        echo_cart(use_case.cart_view())
    elif command == "cart" and not args:
        echo_cart(use_case.cart_view())
    elif command == "checkout" and len(args) <= 1:
        if use_case.cart_view().item_count == 0:
            click.echo("Your cart is empty!")
            return
        _checkout(use_case, args[0] if args else None)
    else:
        click.echo(f"Unknown command '{' '.join([command, *args])}'. Type 'help'.")
