"""Application service: Cart use case.

The single entry point for a presentation layer. Resolves product ids
against the catalog before touching the cart, and implements checkout
as a snapshot-then-clear drain of the cart.

Both collaborators are passed in; nothing here is a module-level
singleton, so independent carts can coexist (one per test, one per
shopping session).
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartView, CheckoutSnapshot
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product, ProductId
from storefront.domain.service.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class CartUseCase:

    def __init__(self, catalog: ProductCatalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    # --- Catalog --------------------------------------------------------------

    async def list_products(self) -> list[Product]:
        """Refresh the catalog from the remote source.

        FetchError propagates unchanged; the previous catalog stays usable.
        """
        return await self._catalog.fetch_all()

    @property
    def is_catalog_ready(self) -> bool:
        return self._catalog.is_ready

    # --- Cart commands --------------------------------------------------------

    def add_to_cart(self, product_id: ProductId, *, strict: bool = False) -> bool:
        """Add one unit of the catalog product with *product_id*.

        Returns False (cart untouched) when the id is not in the current
        catalog snapshot, which is always the case before the first
        successful fetch. With ``strict=True`` that raises
        EntityNotFoundError instead.
        """
        product = self._catalog.get_by_id(product_id)
        if product is None:
            if strict:
                raise EntityNotFoundError(f"Product not found: {product_id!r}")
            logger.warning(
                "Ignoring add_to_cart for unknown product id %r (catalog ready: %s)",
                product_id,
                self._catalog.is_ready,
            )
            return False
        self._cart.add_item(product)
        return True

    def remove_from_cart(self, product_id: ProductId) -> None:
        self._cart.remove_item(product_id)

    def change_quantity(self, product_id: ProductId, delta: int) -> None:
        self._cart.adjust_quantity(product_id, delta)

    # --- Queries --------------------------------------------------------------

    def cart_view(self) -> CartView:
        return CartView(
            items=self._cart.items(),
            total=self._cart.total(),
            item_count=self._cart.item_count(),
        )

    # --- Checkout -------------------------------------------------------------

    def checkout(self) -> CheckoutSnapshot:
        """Return the cart as it was and leave it empty.

        The returned snapshot reflects the state *before* clearing.
        """
        items, total = self._cart.drain()
        logger.info("Checkout drained %d lines, total %s", len(items), total)
        return CheckoutSnapshot(items=items, total=total)
