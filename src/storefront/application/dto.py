"""Data Transfer Objects — plain containers that cross layer boundaries.

Everything here is frozen and holds only frozen domain values, so a
presentation layer (or the shipping step) can keep them around without
any way to reach back into the cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.address import Address
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartView:
    """Output: the cart as displayed, computed fresh on every request."""

    items: tuple[CartLine, ...]
    total: Money
    item_count: int


@dataclass(frozen=True)
class CheckoutSnapshot:
    """Output: the cart contents captured at checkout, before clearing."""

    items: tuple[CartLine, ...]
    total: Money

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class ProductQuery:
    """Input: how the shopper wants the product list filtered and ordered."""

    search: str = ""
    sort: str = "relevance"  # relevance | price-asc | price-desc
    page: int = 1
    per_page: int = 8


@dataclass(frozen=True)
class ShippingQuote:
    """Output: destination plus the amounts owed for a checked-out cart."""

    address: Address
    subtotal: Money
    shipping: Money
    total: Money
