"""Product entity.

Products are owned by the catalog snapshot. Carts hold references to
them but never change them: a price change upstream arrives as a new
Product in the next snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from storefront.domain.model.value_objects import Money

# Remote records carry either numeric or string ids; both are opaque.
ProductId = Union[int, str]


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: ProductId
    title: str
    price: Money
    image: str
