"""Domain service: Product Catalog.

Keeps a read-only cache of the remote product list. The cache is a
snapshot: built completely from one successful retrieval and then
swapped in with a single assignment, so a reader sees either the old
list or the new one, never a mix.

A failed retrieval leaves the previous snapshot (possibly empty) in
place. There is no retry; that is the caller's policy to choose.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from storefront.domain.exceptions import FetchError
from storefront.domain.model.product import Product, ProductId
from storefront.domain.repository.product_source import ProductSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    products: tuple[Product, ...] = ()
    by_id: dict[ProductId, Product] = field(default_factory=dict)


class ProductCatalog:

    def __init__(self, source: ProductSource) -> None:
        self._source = source
        self._snapshot = _Snapshot()
        self._ready = False

    async def fetch_all(self) -> list[Product]:
        """Retrieve the product list and replace the snapshot with it.

        Raises FetchError (snapshot untouched) if the retrieval fails or
        the payload repeats a product id.
        """
        try:
            products = await self._source.fetch()
        except FetchError as exc:
            logger.warning(
                "Catalog fetch failed, keeping %d cached products: %s",
                len(self._snapshot.products),
                exc,
            )
            raise
        except Exception as exc:
            logger.warning(
                "Catalog source raised %s, keeping %d cached products",
                type(exc).__name__,
                len(self._snapshot.products),
            )
            raise FetchError(f"Catalog source failed: {exc}", cause=exc) from exc

        by_id: dict[ProductId, Product] = {}
        for product in products:
            if product.id in by_id:
                logger.warning("Catalog payload repeats product id %r", product.id)
                raise FetchError(f"Duplicate product id in catalog: {product.id!r}")
            by_id[product.id] = product

        # Single assignment: readers never observe a partial update.
        self._snapshot = _Snapshot(products=tuple(products), by_id=by_id)
        self._ready = True
        logger.info("Catalog replaced with %d products", len(products))
        return list(products)

    def get_by_id(self, product_id: ProductId) -> Product | None:
        """Return a product from the current snapshot, or None.

        Never triggers a fetch. Before the first successful fetch this
        always returns None.
        """
        return self._snapshot.by_id.get(product_id)

    def products(self) -> list[Product]:
        """Return the cached snapshot in source order, without fetching."""
        return list(self._snapshot.products)

    @property
    def is_ready(self) -> bool:
        """True once at least one fetch has succeeded."""
        return self._ready
