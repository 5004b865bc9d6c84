"""Application service: Browse Products use case (query).

Search, sort and paginate a product list for display. Works on
whatever list it is given, so it never triggers a catalog fetch.
"""

from __future__ import annotations

from storefront.application.dto import ProductQuery
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product

SORT_KEYS = ("relevance", "price-asc", "price-desc")


class BrowseProductsHandler:

    def handle(self, products: list[Product], query: ProductQuery) -> list[Product]:
        """Return the requested page of matching products."""
        self._validate(query)
        matching = self._filter_and_sort(products, query)
        start = (query.page - 1) * query.per_page
        return matching[start:start + query.per_page]

    def has_more(self, products: list[Product], query: ProductQuery) -> bool:
        """True if a page after ``query.page`` has products on it."""
        self._validate(query)
        matching = self._filter_and_sort(products, query)
        return query.page * query.per_page < len(matching)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate(query: ProductQuery) -> None:
        if query.sort not in SORT_KEYS:
            raise ValidationError(
                f"Unknown sort '{query.sort}' (expected one of {', '.join(SORT_KEYS)})"
            )
        if query.page < 1:
            raise ValidationError("Page must be 1 or greater")
        if query.per_page < 1:
            raise ValidationError("Page size must be 1 or greater")

    @staticmethod
    def _filter_and_sort(products: list[Product], query: ProductQuery) -> list[Product]:
        needle = query.search.strip().lower()
        matching = [p for p in products if needle in p.title.lower()]

        # sorted() is stable, so equal prices keep catalog order
        if query.sort == "price-asc":
            matching = sorted(matching, key=lambda p: p.price.amount)
        elif query.sort == "price-desc":
            matching = sorted(matching, key=lambda p: p.price.amount, reverse=True)
        return matching
