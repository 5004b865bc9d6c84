"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Each factory builds fresh objects: two calls to ``build_cart_use_case``
give two independent carts.
"""

from __future__ import annotations

import os

from storefront.application.cart_use_case import CartUseCase
from storefront.application.quote_shipping import QuoteShippingHandler
from storefront.domain.model.cart import Cart
from storefront.domain.service.product_catalog import ProductCatalog
from storefront.domain.service.shipping_rates import ShippingRateTable
from storefront.infrastructure.remote.http_product_source import HttpProductSource
from storefront.infrastructure.remote.viacep_address_lookup import (
    ViaCepAddressLookup,
)

CATALOG_URL = os.environ.get(
    "STOREFRONT_CATALOG_URL", "https://fakestoreapi.com/products"
)
POSTAL_LOOKUP_URL = os.environ.get(
    "STOREFRONT_POSTAL_LOOKUP_URL", "https://viacep.com.br/ws/{postal_code}/json/"
)
HTTP_TIMEOUT = float(os.environ.get("STOREFRONT_HTTP_TIMEOUT", "10.0"))


def product_source() -> HttpProductSource:
    return HttpProductSource(CATALOG_URL, timeout=HTTP_TIMEOUT)


def address_lookup() -> ViaCepAddressLookup:
    return ViaCepAddressLookup(POSTAL_LOOKUP_URL, timeout=HTTP_TIMEOUT)


def build_cart_use_case() -> CartUseCase:
    return CartUseCase(catalog=ProductCatalog(product_source()), cart=Cart())


def quote_shipping_handler() -> QuoteShippingHandler:
    return QuoteShippingHandler(address_lookup(), ShippingRateTable())
