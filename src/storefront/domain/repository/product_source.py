"""Abstract remote source for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (HTTP, in-memory) live in
the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductSource(ABC):

    @abstractmethod
    async def fetch(self) -> list[Product]:
        """Retrieve the complete product list, in source order.

        Raises FetchError on network failure or a malformed payload.
        """
