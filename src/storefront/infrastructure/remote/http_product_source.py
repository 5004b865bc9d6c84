"""HTTP implementation of ProductSource.

Fetches a JSON array of ``{id, title, price, image}`` records and maps
each one to a Product, preserving array order. Any failure (transport,
HTTP status, JSON decoding, record shape) surfaces as FetchError with
the original exception chained.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.domain.exceptions import FetchError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_source import ProductSource

logger = logging.getLogger(__name__)


class HttpProductSource(ProductSource):

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    # --- ProductSource interface ----------------------------------------------

    async def fetch(self) -> list[Product]:
        logger.debug("Fetching catalog from %s", self._url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self._url)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Catalog request to %s failed: %s", self._url, exc)
            raise FetchError(f"Could not fetch catalog: {exc}", cause=exc) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError("Catalog response is not valid JSON", cause=exc) from exc

        if not isinstance(payload, list):
            raise FetchError(
                f"Catalog response must be a JSON array, got {type(payload).__name__}"
            )

        products: list[Product] = []
        for index, record in enumerate(payload):
            try:
                products.append(self._to_product(record))
            except (KeyError, TypeError, ValueError, ValidationError) as exc:
                raise FetchError(
                    f"Malformed catalog record at index {index}: {exc}", cause=exc
                ) from exc
        return products

    # --- Parsing helpers ------------------------------------------------------

    @staticmethod
    def _to_product(record: Any) -> Product:
        if not isinstance(record, dict):
            raise TypeError(f"expected an object, got {type(record).__name__}")

        product_id = record["id"]
        # JSON does not distinguish 1 from 1.0; both name the same product
        if isinstance(product_id, float) and product_id.is_integer():
            product_id = int(product_id)
        if isinstance(product_id, bool) or not isinstance(product_id, (int, str)):
            raise TypeError(f"id must be a number or string, got {product_id!r}")

        title = record["title"]
        if not isinstance(title, str):
            raise TypeError(f"title must be a string, got {title!r}")

        price = record["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise TypeError(f"price must be a number, got {price!r}")

        image = record["image"]
        if not isinstance(image, str):
            raise TypeError(f"image must be a string, got {image!r}")

        return Product(id=product_id, title=title, price=Money.of(price), image=image)
