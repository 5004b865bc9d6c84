"""Cart aggregate: the products a shopper has picked, with quantities.

The Cart is an aggregate root that owns its lines. Lines are frozen;
a quantity change swaps in a new line under the same key, so a line's
position in the cart never moves once it has been added.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, ProductId
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """One product in the cart and how many units of it."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> ProductId:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - at most one line per product id
    - every line has a quantity of at least 1; a line whose quantity
      would drop to zero or below is deleted instead
    """

    def __init__(self) -> None:
        # dicts keep insertion order; reassigning a key keeps its slot
        self._lines: dict[ProductId, CartLine] = {}

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> None:
        """Add one unit of *product*, merging into an existing line."""
        line = self._lines.get(product.id)
        if line is None:
            self._lines[product.id] = CartLine(product=product, quantity=Quantity(1))
        else:
            self._lines[product.id] = replace(line, quantity=line.quantity + 1)

    def remove_item(self, product_id: ProductId) -> None:
        """Delete the line for *product_id*; unknown ids are ignored."""
        self._lines.pop(product_id, None)

    def adjust_quantity(self, product_id: ProductId, delta: int) -> None:
        """Shift a line's quantity by *delta* (positive or negative).

        If the result is zero or less the line is removed rather than
        clamped. Unknown ids are ignored.
        """
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise ValidationError(
                f"Quantity delta must be an integer, got {type(delta).__name__}"
            )
        line = self._lines.get(product_id)
        if line is None:
            return
        new_value = line.quantity.value + delta
        if new_value <= 0:
            del self._lines[product_id]
        else:
            self._lines[product_id] = replace(line, quantity=Quantity(new_value))

    def clear(self) -> None:
        self._lines = {}

    def drain(self) -> tuple[tuple[CartLine, ...], Money]:
        """Capture items and total, then empty the cart.

        Runs without suspending, so no other mutation can land between
        the read and the clear.
        """
        items, total = self.items(), self.total()
        self.clear()
        return items, total

    # --- Queries --------------------------------------------------------------

    def items(self) -> tuple[CartLine, ...]:
        """Current lines in stored order.

        The tuple and its lines are immutable, so a result obtained
        earlier is unaffected by later mutations of the cart.
        """
        return tuple(self._lines.values())

    def line_for(self, product_id: ProductId) -> CartLine | None:
        return self._lines.get(product_id)

    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines.values():
            result = result + line.line_total
        return result

    def item_count(self) -> int:
        """Total units across all lines (not the number of lines)."""
        return sum(line.quantity.value for line in self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)
